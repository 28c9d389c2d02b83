"""Pydantic models for the served STAC documents."""

from typing import Any, Literal, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

STAC_VERSION = "1.0.0"
JSON_MEDIA_TYPE = "application/json"


class StacModel(BaseModel):
    """Immutable base for served documents."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_json(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Link(StacModel):
    """Typed relation to another resource."""

    rel: str
    href: str
    type: str = JSON_MEDIA_TYPE
    title: Optional[str] = None


class Provider(StacModel):
    """Organization that produced or hosts the data."""

    name: str
    roles: Sequence[str]
    url: str


class SpatialExtent(StacModel):
    """Bounding boxes covered by a collection."""

    bbox: Sequence[Sequence[int | float]]


class TemporalExtent(StacModel):
    """Time intervals covered by a collection, open ends as ``None``."""

    interval: Sequence[Sequence[Optional[str]]]


class Extent(StacModel):
    """Spatial and temporal extent of a collection."""

    spatial: SpatialExtent
    temporal: TemporalExtent


class Collection(StacModel):
    """STAC Collection document."""

    type: Literal["Collection"] = "Collection"
    id: str
    stac_version: str = STAC_VERSION
    title: str
    description: str
    keywords: Sequence[str] = ()
    license: str
    providers: Sequence[Provider] = ()
    extent: Extent
    links: Sequence[Link] = ()


class Collections(StacModel):
    """Response body of the collections listing."""

    collections: Sequence[Collection]
    links: Sequence[Link] = ()


class Catalog(StacModel):
    """Root STAC Catalog document."""

    type: Literal["Catalog"] = "Catalog"
    stac_version: str = STAC_VERSION
    id: str
    title: str
    description: str
    links: Sequence[Link] = ()


class Conformance(StacModel):
    """Conformance classes implemented by the API."""

    conforms_to: Sequence[str] = Field(alias="conformsTo")
