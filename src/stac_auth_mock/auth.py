"""Authentication gate for incoming requests."""

import binascii
import logging
import secrets
from base64 import b64decode
from dataclasses import dataclass
from typing import Optional

from starlette.requests import Request
from starlette.responses import Response

from .config import AuthMethod, Settings
from .exceptions import Unauthorized

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BasicCredentials:
    """Username and password decoded from a Basic ``Authorization`` header."""

    username: str
    password: str


def parse_basic_auth(auth_header: Optional[str]) -> Optional[BasicCredentials]:
    """
    Decode an HTTP Basic ``Authorization`` header.

    Returns ``None`` for a missing header, a non-Basic scheme, invalid base64 or
    a decoded value without a colon. The password is everything after the
    first colon, so it may itself contain colons.
    """
    if not auth_header:
        return None

    parts = auth_header.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "basic":
        return None

    try:
        decoded = b64decode(parts[1].strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None

    username, sep, password = decoded.partition(":")
    if not sep:
        return None
    return BasicCredentials(username=username, password=password)


def _matches(supplied: str, expected: str) -> bool:
    return secrets.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


@dataclass(frozen=True)
class AuthGate:
    """Pipeline stage allowing or denying a request based on static credentials."""

    auth_method: AuthMethod
    basic_auth_username: str
    basic_auth_password: str
    api_key: str

    realm: str = "STAC API"
    api_key_header: str = "x-api-key"
    api_key_query_param: str = "api_key"

    @classmethod
    def from_settings(cls, settings: Settings) -> "AuthGate":
        """Build the gate from application settings."""
        return cls(
            auth_method=settings.auth_method,
            basic_auth_username=settings.basic_auth_username,
            basic_auth_password=settings.basic_auth_password,
            api_key=settings.api_key,
        )

    async def __call__(self, request: Request) -> Optional[Response]:
        """Return a 401 response for rejected requests, ``None`` otherwise."""
        try:
            self.authenticate(request)
        except Unauthorized as e:
            logger.info(
                "Rejected %s %s (auth method %r)",
                request.method,
                request.url.path,
                self.auth_method,
            )
            return e.to_response()
        return None

    def authenticate(self, request: Request) -> None:
        """Raise ``Unauthorized`` unless the request carries valid credentials."""
        if self.auth_method == "basic":
            self.check_basic(request.headers.get("Authorization"))
        elif self.auth_method == "apikey":
            self.check_api_key(
                request.headers.get(self.api_key_header)
                or request.query_params.get(self.api_key_query_param)
            )

    def check_basic(self, auth_header: Optional[str]) -> None:
        """Validate HTTP Basic credentials against the configured pair."""
        credentials = parse_basic_auth(auth_header)
        if credentials is None:
            logger.debug("No usable Basic credentials supplied")
        elif all(
            [
                _matches(credentials.username, self.basic_auth_username),
                _matches(credentials.password, self.basic_auth_password),
            ]
        ):
            return
        raise Unauthorized(
            "Access denied. Valid credentials required.",
            headers={"WWW-Authenticate": f'Basic realm="{self.realm}"'},
        )

    def check_api_key(self, api_key: Optional[str]) -> None:
        """Validate a shared-secret API key."""
        if api_key and _matches(api_key, self.api_key):
            return
        raise Unauthorized("Access denied. Valid API key required.")
