"""Static STAC documents served by the mock API."""

from dataclasses import dataclass
from typing import Sequence

from .models import (
    Catalog,
    Collection,
    Collections,
    Conformance,
    Extent,
    Link,
    Provider,
    SpatialExtent,
    TemporalExtent,
)

CONFORMANCE_CLASSES = (
    "https://api.stacspec.org/v1.0.0/core",
    "https://api.stacspec.org/v1.0.0/collections",
    "http://www.opengis.net/spec/ogcapi-features-1/1.0/conf/core",
    "http://www.opengis.net/spec/ogcapi-features-1/1.0/conf/oas30",
    "http://www.opengis.net/spec/ogcapi-features-1/1.0/conf/geojson",
)


def _collection_links(base_url: str, collection_id: str) -> list[Link]:
    return [
        Link(rel="root", href=f"{base_url}/"),
        Link(rel="parent", href=f"{base_url}/"),
        Link(rel="self", href=f"{base_url}/collections/{collection_id}"),
    ]


def default_collections(base_url: str) -> list[Collection]:
    """Collections served by the mock API, in listing order."""
    return [
        Collection(
            id="test-collection",
            title="Test Collection",
            description="A test collection for authentication testing",
            keywords=["test", "sample"],
            license="CC-BY-4.0",
            providers=[
                Provider(
                    name="Test Provider",
                    roles=["processor", "host"],
                    url="https://example.com",
                )
            ],
            extent=Extent(
                spatial=SpatialExtent(bbox=[[-180, -90, 180, 90]]),
                temporal=TemporalExtent(
                    interval=[["2023-01-01T00:00:00Z", "2023-12-31T23:59:59Z"]]
                ),
            ),
            links=_collection_links(base_url, "test-collection"),
        ),
        Collection(
            id="sample-imagery",
            title="Sample Imagery Collection",
            description="Sample satellite imagery for testing",
            keywords=["imagery", "satellite", "test"],
            license="CC-BY-4.0",
            providers=[
                Provider(
                    name="Sample Satellite Company",
                    roles=["producer"],
                    url="https://example-satellite.com",
                )
            ],
            extent=Extent(
                spatial=SpatialExtent(bbox=[[-74.2, 40.6, -73.7, 40.9]]),
                temporal=TemporalExtent(
                    interval=[["2023-06-01T00:00:00Z", "2023-08-31T23:59:59Z"]]
                ),
            ),
            links=_collection_links(base_url, "sample-imagery"),
        ),
    ]


@dataclass(frozen=True)
class StacFixtures:
    """The full set of documents served by the mock API."""

    base_url: str
    collections: Sequence[Collection]

    def __post_init__(self):
        """Reject collection sets with repeated identifiers."""
        ids = [c.id for c in self.collections]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate collection ids: {', '.join(duplicates)}")

    @classmethod
    def default(cls, base_url: str) -> "StacFixtures":
        """Documents for the built-in collections."""
        return cls(base_url=base_url, collections=tuple(default_collections(base_url)))

    @property
    def catalog(self) -> Catalog:
        """Root catalog with one child link per collection."""
        return Catalog(
            id="test-catalog",
            title="Test STAC Catalog",
            description="A simple test catalog for STAC Browser authentication testing",
            links=[
                Link(rel="root", href=f"{self.base_url}/"),
                Link(rel="conformance", href=f"{self.base_url}/conformance"),
                Link(rel="data", href=f"{self.base_url}/collections"),
                *(
                    Link(
                        rel="child",
                        href=f"{self.base_url}/collections/{c.id}",
                        title=c.title,
                    )
                    for c in self.collections
                ),
            ],
        )

    @property
    def conformance(self) -> Conformance:
        """Conformance classes claimed by the mock API."""
        return Conformance(conforms_to=CONFORMANCE_CLASSES)

    @property
    def collection_list(self) -> Collections:
        """All collections with navigation links."""
        return Collections(
            collections=self.collections,
            links=[
                Link(rel="root", href=f"{self.base_url}/"),
                Link(rel="parent", href=f"{self.base_url}/"),
                Link(rel="self", href=f"{self.base_url}/collections"),
            ],
        )
