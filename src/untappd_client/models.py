"""Domain models decoded from envelope payloads.

Only the fields the endpoint services expose are modelled; unknown keys in
the payload are ignored.
"""

from dataclasses import dataclass, field
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Any


def parse_time(value: str | None) -> datetime | None:
    """Parse an RFC 1123 timestamp such as ``Sat, 13 Dec 2014 19:15:41 +0000``."""
    if not value:
        return None
    try:
        return parsedate_to_datetime(value)
    except (ValueError, TypeError):
        return None


def collection_items(data: Any) -> list[dict[str, Any]]:
    # Collections arrive as {"count": n, "items": [...]}
    if not isinstance(data, dict):
        return []
    return [item for item in data.get("items") or [] if isinstance(item, dict)]


def _object(data: Any) -> dict[str, Any] | None:
    # Absent objects are sometimes sent as an empty list
    return data if isinstance(data, dict) and data else None


@dataclass(frozen=True)
class Brewery:
    id: int = 0
    name: str = ""
    country: str = ""
    description: str = ""
    beer_count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Brewery":
        return cls(
            id=int(data.get("brewery_id") or 0),
            name=data.get("brewery_name") or "",
            country=data.get("country_name") or "",
            description=data.get("brewery_description") or "",
            beer_count=int(data.get("beer_count") or 0),
        )


@dataclass(frozen=True)
class Beer:
    id: int = 0
    name: str = ""
    style: str = ""
    abv: float = 0.0
    description: str = ""
    brewery: Brewery | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], brewery: dict[str, Any] | None = None) -> "Beer":
        brewery = brewery or _object(data.get("brewery"))
        return cls(
            id=int(data.get("bid") or 0),
            name=data.get("beer_name") or "",
            style=data.get("beer_style") or "",
            abv=float(data.get("beer_abv") or 0),
            description=data.get("beer_description") or "",
            brewery=Brewery.from_dict(brewery) if brewery else None,
        )

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "Beer":
        """Decode a list item shaped ``{"beer": {...}, "brewery": {...}}``."""
        return cls.from_dict(_object(item.get("beer")) or {}, brewery=_object(item.get("brewery")))


@dataclass(frozen=True)
class BadgeMedia:
    small: str = ""
    medium: str = ""
    large: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "BadgeMedia":
        data = data or {}
        return cls(
            small=data.get("badge_image_sm") or "",
            medium=data.get("badge_image_md") or "",
            large=data.get("badge_image_lg") or "",
        )


@dataclass(frozen=True)
class Badge:
    """A badge earned by a user.

    For level badges, ``levels`` lists every level earned so far.
    """

    id: int = 0
    user_badge_id: int = 0
    checkin_id: int = 0
    name: str = ""
    description: str = ""
    active: bool = False
    media: BadgeMedia = field(default_factory=BadgeMedia)
    created_at: datetime | None = None
    is_level: bool = False
    category_id: int = 0
    levels: list["Badge"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Badge":
        return cls(
            id=int(data.get("actual_badge_id") or data.get("badge_id") or 0),
            user_badge_id=int(data.get("user_badge_id") or 0),
            checkin_id=int(data.get("checkin_id") or 0),
            name=data.get("badge_name") or "",
            description=data.get("badge_description") or "",
            active=bool(data.get("badge_active_status")),
            media=BadgeMedia.from_dict(_object(data.get("media"))),
            created_at=parse_time(data.get("created_at")),
            is_level=bool(data.get("is_level")),
            category_id=int(data.get("category_id") or 0),
            levels=[cls.from_dict(level) for level in collection_items(data.get("levels"))],
        )


@dataclass(frozen=True)
class VenueLocation:
    address: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    latitude: float = 0.0
    longitude: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "VenueLocation":
        data = data or {}
        return cls(
            address=data.get("venue_address") or "",
            city=data.get("venue_city") or "",
            state=data.get("venue_state") or "",
            country=data.get("venue_country") or "",
            latitude=float(data.get("lat") or 0),
            longitude=float(data.get("lng") or 0),
        )


@dataclass(frozen=True)
class Foursquare:
    id: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Foursquare":
        data = data or {}
        return cls(id=data.get("foursquare_id") or "", url=data.get("foursquare_url") or "")


@dataclass(frozen=True)
class Checkin:
    id: int = 0
    created_at: datetime | None = None
    comment: str = ""
    rating: float = 0.0
    beer: Beer | None = None
    brewery: Brewery | None = None
    venue: "Venue | None" = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Checkin":
        beer = _object(data.get("beer"))
        brewery = _object(data.get("brewery"))
        venue = _object(data.get("venue"))
        return cls(
            id=int(data.get("checkin_id") or 0),
            created_at=parse_time(data.get("created_at")),
            comment=data.get("checkin_comment") or "",
            rating=float(data.get("rating_score") or 0),
            beer=Beer.from_dict(beer, brewery=brewery) if beer else None,
            brewery=Brewery.from_dict(brewery) if brewery else None,
            venue=Venue.from_dict(venue) if venue else None,
        )


@dataclass(frozen=True)
class Venue:
    id: int = 0
    name: str = ""
    category: str = ""
    location: VenueLocation = field(default_factory=VenueLocation)
    foursquare: Foursquare = field(default_factory=Foursquare)
    top_beers: list[Beer] = field(default_factory=list)
    checkins: list[Checkin] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Venue":
        return cls(
            id=int(data.get("venue_id") or data.get("id") or 0),
            name=data.get("venue_name") or "",
            category=data.get("primary_category") or "",
            location=VenueLocation.from_dict(_object(data.get("location"))),
            foursquare=Foursquare.from_dict(_object(data.get("foursquare"))),
            top_beers=[Beer.from_item(item) for item in collection_items(data.get("top_beers"))],
            checkins=[Checkin.from_dict(item) for item in collection_items(data.get("checkins"))],
        )
