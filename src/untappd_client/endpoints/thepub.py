"""Activity feed of check-ins near a location."""

from enum import Enum
from typing import TYPE_CHECKING, Any

from untappd_client.formatting import format_float
from untappd_client.models import Checkin, collection_items

if TYPE_CHECKING:
    from untappd_client.client import APIResponse, Client

DEFAULT_LOCAL_LIMIT = 25
DEFAULT_LOCAL_RADIUS = 25.0


class DistanceUnit(str, Enum):
    MILES = "m"
    KILOMETERS = "km"


def _decode_checkins(payload: Any) -> list[Checkin]:
    checkins = payload.get("checkins") if isinstance(payload, dict) else None
    return [Checkin.from_dict(item) for item in collection_items(checkins)]


class ThePubService:
    """Access to ``thepub/`` endpoints."""

    def __init__(self, client: "Client"):
        self._client = client

    def local(self, latitude: float, longitude: float) -> "APIResponse[list[Checkin]]":
        """Latest check-ins around a location within the default radius."""
        return self.local_min_id_limit_radius(
            latitude, longitude, None, DEFAULT_LOCAL_LIMIT, DEFAULT_LOCAL_RADIUS, DistanceUnit.MILES
        )

    def local_min_id_limit_radius(
        self,
        latitude: float,
        longitude: float,
        min_id: int | None,
        limit: int,
        radius: float,
        unit: DistanceUnit | str,
    ) -> "APIResponse[list[Checkin]]":
        """Check-ins around a location.

        Args:
            latitude: Latitude of the center point.
            longitude: Longitude of the center point.
            min_id: Only return check-ins newer than this ID, if set.
            limit: Maximum number of check-ins to return.
            radius: Search radius around the center point.
            unit: Unit of ``radius``.
        """
        query = {
            "lat": format_float(latitude),
            "lng": format_float(longitude),
            "limit": str(limit),
            "radius": format_float(radius),
            "dist_pref": DistanceUnit(unit).value,
        }
        if min_id is not None:
            query["min_id"] = str(min_id)

        return self._client.request("GET", "thepub/local/", query=query, decode=_decode_checkins)
