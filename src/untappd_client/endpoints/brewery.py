"""Brewery endpoints."""

from typing import TYPE_CHECKING, Any

from untappd_client.models import Brewery

if TYPE_CHECKING:
    from untappd_client.client import APIResponse, Client


def _decode_brewery(payload: Any) -> Brewery:
    brewery = payload.get("brewery") if isinstance(payload, dict) else None
    return Brewery.from_dict(brewery if isinstance(brewery, dict) else {})


class BreweryService:
    """Access to ``brewery/`` endpoints."""

    def __init__(self, client: "Client"):
        self._client = client

    def info(self, brewery_id: int, compact: bool = False) -> "APIResponse[Brewery]":
        """Information about a brewery.

        Args:
            brewery_id: Brewery to query.
            compact: Ask for the compact form, without beer lists or check-ins.
        """
        query = {"compact": "true"} if compact else None
        return self._client.request("GET", f"brewery/info/{brewery_id}/", query=query, decode=_decode_brewery)
