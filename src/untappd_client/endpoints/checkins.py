"""Check-in endpoints.

Checking in acts on behalf of a user, so the API only accepts it from a
client built with ``new_authenticated_client``.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from untappd_client.formatting import format_float
from untappd_client.models import Checkin

if TYPE_CHECKING:
    from untappd_client.client import APIResponse, Client


@dataclass(frozen=True)
class CheckinRequest:
    """A check-in to submit.

    Attributes:
        beer_id: Beer being checked in.
        gmt_offset: Offset of the user's time zone from GMT, in hours.
        timezone: Time zone abbreviation, e.g. ``EST``.
        shout: Optional comment.
        rating: Optional rating from 0.5 to 5.
        latitude: Optional latitude; sent together with ``longitude``.
        longitude: Optional longitude.
        foursquare_id: Optional Foursquare venue ID.
    """

    beer_id: int
    gmt_offset: float
    timezone: str
    shout: str = ""
    rating: float | None = None
    latitude: float | None = None
    longitude: float | None = None
    foursquare_id: str = ""

    def form_values(self) -> list[tuple[str, str]]:
        values = [
            ("gmt_offset", format_float(self.gmt_offset)),
            ("timezone", self.timezone),
            ("bid", str(self.beer_id)),
        ]
        if self.shout:
            values.append(("shout", self.shout))
        if self.rating is not None:
            values.append(("rating", format_float(self.rating)))
        if self.latitude is not None and self.longitude is not None:
            values.append(("geolat", format_float(self.latitude)))
            values.append(("geolng", format_float(self.longitude)))
        if self.foursquare_id:
            values.append(("foursquare_id", self.foursquare_id))
        return values


def _decode_checkin(payload: Any) -> Checkin:
    return Checkin.from_dict(payload if isinstance(payload, dict) else {})


class CheckinService:
    """Access to ``checkin/`` endpoints."""

    def __init__(self, client: "Client"):
        self._client = client

    def add(self, checkin: CheckinRequest) -> "APIResponse[Checkin]":
        """Check a beer in for the authenticated user."""
        return self._client.request("POST", "checkin/add/", form=checkin.form_values(), decode=_decode_checkin)
