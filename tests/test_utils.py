"""Tests for credential parsing helpers."""

import base64

import pytest

from stac_auth_mock.auth import BasicCredentials, parse_basic_auth
from stac_auth_mock.utils import dict_to_bytes


def encode(value: str) -> str:
    """Base64 encode a string."""
    return base64.b64encode(value.encode()).decode()


@pytest.mark.parametrize(
    "header, expected",
    (
        (f"Basic {encode('user:pass')}", BasicCredentials("user", "pass")),
        (f"basic {encode('user:pass')}", BasicCredentials("user", "pass")),
        (f"BASIC {encode('user:pass')}", BasicCredentials("user", "pass")),
        (f"Basic {encode('user:pa:ss')}", BasicCredentials("user", "pa:ss")),
        (f"Basic {encode(':')}", BasicCredentials("", "")),
        (f"Basic {encode('üser:päss')}", BasicCredentials("üser", "päss")),
        (None, None),
        ("", None),
        ("Basic", None),
        (f"Bearer {encode('user:pass')}", None),
        (f"Basic {encode('userpass')}", None),
        ("Basic %%%", None),
    ),
)
def test_parse_basic_auth(header, expected):
    """Decode Basic credentials, returning None for unusable headers."""
    assert parse_basic_auth(header) == expected


def test_dict_to_bytes():
    """Dictionaries serialize to compact JSON."""
    assert dict_to_bytes({"a": [1, 2], "b": "c"}) == b'{"a":[1,2],"b":"c"}'
