"""Endpoint services built on ``Client.request``.

Listing endpoints come in two variants: a default one using the module's
pagination defaults, and a fully parameterized one that sends exactly what
it is given.
"""

from untappd_client.endpoints.beer import BeerService
from untappd_client.endpoints.brewery import BreweryService
from untappd_client.endpoints.checkins import CheckinRequest, CheckinService
from untappd_client.endpoints.search import BeerSearchSort, SearchService
from untappd_client.endpoints.thepub import DistanceUnit, ThePubService
from untappd_client.endpoints.user import Sort, UserService
from untappd_client.endpoints.venue import VenueService

__all__ = [
    "BeerSearchSort",
    "BeerService",
    "BreweryService",
    "CheckinRequest",
    "CheckinService",
    "DistanceUnit",
    "SearchService",
    "Sort",
    "ThePubService",
    "UserService",
    "VenueService",
]
