"""Venue endpoints."""

from typing import TYPE_CHECKING, Any

from untappd_client.models import Venue

if TYPE_CHECKING:
    from untappd_client.client import APIResponse, Client


def _decode_venue(payload: Any) -> Venue:
    venue = payload.get("venue") if isinstance(payload, dict) else None
    return Venue.from_dict(venue if isinstance(venue, dict) else {})


class VenueService:
    """Access to ``venue/`` endpoints."""

    def __init__(self, client: "Client"):
        self._client = client

    def info(self, venue_id: int, compact: bool = False) -> "APIResponse[Venue]":
        """Information about a venue.

        Args:
            venue_id: Venue to query.
            compact: Ask for the compact form, without top beers or check-ins.
        """
        query = {"compact": "true"} if compact else None
        return self._client.request("GET", f"venue/info/{venue_id}/", query=query, decode=_decode_venue)
