"""Search endpoints for beers and breweries."""

from enum import Enum
from typing import TYPE_CHECKING, Any

from untappd_client.models import Beer, Brewery, collection_items

if TYPE_CHECKING:
    from untappd_client.client import APIResponse, Client

DEFAULT_OFFSET = 0
DEFAULT_SEARCH_LIMIT = 25


class BeerSearchSort(str, Enum):
    """Orders accepted by beer search."""

    CHECKIN = "checkin"
    NAME = "name"


DEFAULT_BEER_SEARCH_SORT = BeerSearchSort.CHECKIN


def _decode_beers(payload: Any) -> list[Beer]:
    beers = payload.get("beers") if isinstance(payload, dict) else None
    return [Beer.from_item(item) for item in collection_items(beers)]


def _decode_breweries(payload: Any) -> list[Brewery]:
    breweries = payload.get("brewery") if isinstance(payload, dict) else None
    return [
        Brewery.from_dict(item["brewery"])
        for item in collection_items(breweries)
        if isinstance(item.get("brewery"), dict)
    ]


class SearchService:
    """Access to ``search/`` endpoints."""

    def __init__(self, client: "Client"):
        self._client = client

    def beer(self, query: str) -> "APIResponse[list[Beer]]":
        """Beers matching a query, most checked-in first."""
        return self.beer_offset_limit_sort(query, DEFAULT_OFFSET, DEFAULT_SEARCH_LIMIT, DEFAULT_BEER_SEARCH_SORT)

    def beer_offset_limit_sort(
        self, query: str, offset: int, limit: int, sort: BeerSearchSort | str
    ) -> "APIResponse[list[Beer]]":
        """Beers matching a query, paginated and sorted.

        Args:
            query: Search terms, usually "brewery beer".
            offset: Number of results to skip.
            limit: Maximum number of results to return.
            sort: Result order.
        """
        return self._client.request(
            "GET",
            "search/beer/",
            query={"q": query, "offset": str(offset), "limit": str(limit), "sort": BeerSearchSort(sort).value},
            decode=_decode_beers,
        )

    def brewery(self, query: str) -> "APIResponse[list[Brewery]]":
        """Breweries matching a query, first page with the default limit."""
        return self.brewery_offset_limit(query, DEFAULT_OFFSET, DEFAULT_SEARCH_LIMIT)

    def brewery_offset_limit(self, query: str, offset: int, limit: int) -> "APIResponse[list[Brewery]]":
        return self._client.request(
            "GET",
            "search/brewery/",
            query={"q": query, "offset": str(offset), "limit": str(limit)},
            decode=_decode_breweries,
        )
