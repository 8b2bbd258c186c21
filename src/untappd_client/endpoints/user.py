"""User endpoints: earned badges and wish list."""

from enum import Enum
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from untappd_client.models import Badge, Beer, collection_items

if TYPE_CHECKING:
    from untappd_client.client import APIResponse, Client

DEFAULT_OFFSET = 0
DEFAULT_BADGES_LIMIT = 50
DEFAULT_WISH_LIST_LIMIT = 25


class Sort(str, Enum):
    """Sort orders accepted by list endpoints."""

    DATE = "date"
    CHECKIN = "checkin"
    HIGHEST_RATED = "highest_rated"
    LOWEST_RATED = "lowest_rated"
    HIGHEST_ABV = "highest_abv"
    LOWEST_ABV = "lowest_abv"
    ALPHA = "alpha"


DEFAULT_WISH_LIST_SORT = Sort.DATE


def _decode_badges(payload: Any) -> list[Badge]:
    return [Badge.from_dict(item) for item in collection_items(payload)]


def _decode_beers(payload: Any) -> list[Beer]:
    beers = payload.get("beers") if isinstance(payload, dict) else None
    return [Beer.from_item(item) for item in collection_items(beers)]


class UserService:
    """Access to ``user/`` endpoints."""

    def __init__(self, client: "Client"):
        self._client = client

    def badges(self, username: str) -> "APIResponse[list[Badge]]":
        """Badges earned by a user, first page with the default limit."""
        return self.badges_offset_limit(username, DEFAULT_OFFSET, DEFAULT_BADGES_LIMIT)

    def badges_offset_limit(self, username: str, offset: int, limit: int) -> "APIResponse[list[Badge]]":
        """Badges earned by a user, paginated.

        Args:
            username: User to query.
            offset: Number of badges to skip.
            limit: Maximum number of badges to return.
        """
        return self._client.request(
            "GET",
            f"user/badges/{quote(username, safe='')}/",
            query={"offset": str(offset), "limit": str(limit)},
            decode=_decode_badges,
        )

    def wish_list(self, username: str) -> "APIResponse[list[Beer]]":
        """Beers on a user's wish list, first page sorted by date."""
        return self.wish_list_offset_limit_sort(
            username, DEFAULT_OFFSET, DEFAULT_WISH_LIST_LIMIT, DEFAULT_WISH_LIST_SORT
        )

    def wish_list_offset_limit_sort(
        self, username: str, offset: int, limit: int, sort: Sort | str
    ) -> "APIResponse[list[Beer]]":
        """Beers on a user's wish list, paginated and sorted.

        Args:
            username: User to query.
            offset: Number of beers to skip.
            limit: Maximum number of beers to return.
            sort: Sort order.
        """
        return self._client.request(
            "GET",
            f"user/wishlist/{quote(username, safe='')}/",
            query={"offset": str(offset), "limit": str(limit), "sort": Sort(sort).value},
            decode=_decode_beers,
        )
