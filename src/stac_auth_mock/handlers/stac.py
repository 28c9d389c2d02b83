"""Handlers serving the static STAC documents."""

import logging
from dataclasses import dataclass, field

from fastapi import APIRouter
from starlette.responses import Response

from ..exceptions import NotFound
from ..fixtures import StacFixtures
from ..utils import dict_to_bytes

logger = logging.getLogger(__name__)


class StacJSONResponse(Response):
    """Response for documents that are already serialized."""

    media_type = "application/json"


@dataclass
class StacHandler:
    """Serve the root catalog, conformance and collections of a fixture set."""

    fixtures: StacFixtures
    router: APIRouter = field(init=False)

    _catalog: bytes = field(init=False, repr=False)
    _conformance: bytes = field(init=False, repr=False)
    _collections: bytes = field(init=False, repr=False)
    _collection_by_id: dict[str, bytes] = field(init=False, repr=False)

    def __post_init__(self):
        """Serialize the documents and register routes."""
        self._catalog = dict_to_bytes(self.fixtures.catalog.to_json())
        self._conformance = dict_to_bytes(self.fixtures.conformance.to_json())
        self._collections = dict_to_bytes(self.fixtures.collection_list.to_json())
        self._collection_by_id = {
            c.id: dict_to_bytes(c.to_json()) for c in self.fixtures.collections
        }

        self.router = APIRouter()
        self._add_route("/", self.landing_page)
        self._add_route("/conformance", self.conformance)
        self._add_route("/collections", self.collections)
        self._add_route("/collections/{collection_id}", self.collection)

    def _add_route(self, path: str, endpoint) -> None:
        """Register a read-only route, also matching a trailing slash."""
        self.router.add_api_route(path, endpoint, methods=["GET", "HEAD"])
        if path != "/":
            self.router.add_api_route(
                f"{path}/",
                endpoint,
                methods=["GET", "HEAD"],
                include_in_schema=False,
            )

    async def landing_page(self) -> StacJSONResponse:
        """Return the root catalog."""
        return StacJSONResponse(self._catalog)

    async def conformance(self) -> StacJSONResponse:
        """Return the conformance classes."""
        return StacJSONResponse(self._conformance)

    async def collections(self) -> StacJSONResponse:
        """Return all collections."""
        return StacJSONResponse(self._collections)

    async def collection(self, collection_id: str) -> StacJSONResponse:
        """Return a single collection by identifier."""
        body = self._collection_by_id.get(collection_id)
        if body is None:
            logger.debug("Unknown collection %r requested", collection_id)
            raise NotFound(f"Collection '{collection_id}' not found")
        return StacJSONResponse(body)
