"""Beer endpoints."""

from typing import TYPE_CHECKING, Any

from untappd_client.models import Beer

if TYPE_CHECKING:
    from untappd_client.client import APIResponse, Client


def _decode_beer(payload: Any) -> Beer:
    beer = payload.get("beer") if isinstance(payload, dict) else None
    return Beer.from_dict(beer if isinstance(beer, dict) else {})


class BeerService:
    """Access to ``beer/`` endpoints."""

    def __init__(self, client: "Client"):
        self._client = client

    def info(self, beer_id: int, compact: bool = False) -> "APIResponse[Beer]":
        """Information about a beer, including its brewery.

        Args:
            beer_id: Beer to query.
            compact: Ask for the compact form, without media or check-ins.
        """
        query = {"compact": "true"} if compact else None
        return self._client.request("GET", f"beer/info/{beer_id}/", query=query, decode=_decode_beer)
