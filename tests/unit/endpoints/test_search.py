"""Tests for beer and brewery search endpoints."""

import pytest

from untappd_client import new_client
from untappd_client.endpoints import BeerSearchSort
from untappd_client.errors import APIError
from untappd_client.testing import RecordingTransport, create_envelope, create_error_response, create_json_response

BEER_SEARCH_RESPONSE = {
    "found": 1,
    "beers": {
        "count": 1,
        "items": [
            {
                "checkin_count": 400000,
                "beer": {"bid": 16630, "beer_name": "Two Hearted Ale"},
                "brewery": {"brewery_id": 2507, "brewery_name": "Bell's Brewery"},
            }
        ],
    },
}

BREWERY_SEARCH_RESPONSE = {
    "found": 2,
    "brewery": {
        "count": 2,
        "items": [
            {"brewery": {"brewery_id": 2507, "brewery_name": "Bell's Brewery"}},
            {"brewery": {"brewery_id": 1, "brewery_name": "Bell's Brewery Pub"}},
        ],
    },
}


class TestSearchBeer:
    """Test Client.search.beer and beer_offset_limit_sort."""

    @pytest.mark.unit
    def test_defaults(self):
        """Test the default variant sends the default pagination and sort."""
        transport = RecordingTransport()
        client = new_client("foo", "bar", transport)

        client.search.beer("two hearted")

        request = transport.last_request
        assert request.url.path == "/v4/search/beer/"
        assert request.url.params["q"] == "two hearted"
        assert request.url.params["offset"] == "0"
        assert request.url.params["limit"] == "25"
        assert request.url.params["sort"] == "checkin"

    @pytest.mark.unit
    def test_all_parameters(self):
        """Test explicit arguments are sent as given."""
        transport = RecordingTransport()
        client = new_client("foo", "bar", transport)

        client.search.beer_offset_limit_sort("ipa", 50, 10, BeerSearchSort.NAME)

        params = transport.last_request.url.params
        assert (params["offset"], params["limit"], params["sort"]) == ("50", "10", "name")

    @pytest.mark.unit
    def test_unknown_sort(self):
        """Test an unknown sort order is rejected before sending."""
        transport = RecordingTransport()
        client = new_client("foo", "bar", transport)

        with pytest.raises(ValueError):
            client.search.beer_offset_limit_sort("ipa", 0, 10, "rating")

        assert transport.requests == []

    @pytest.mark.unit
    def test_decodes_beers(self):
        """Test matching beers are decoded with their brewery."""
        transport = RecordingTransport(lambda request: create_json_response(200, create_envelope(BEER_SEARCH_RESPONSE)))
        client = new_client("foo", "bar", transport)

        beers = client.search.beer("two hearted").data

        assert [beer.name for beer in beers] == ["Two Hearted Ale"]
        assert beers[0].brewery.name == "Bell's Brewery"

    @pytest.mark.unit
    def test_missing_query(self):
        """Test the API error for a missing query is surfaced."""
        response = create_error_response("invalid_param", "Your missing the 'q' parameter.")
        client = new_client("foo", "bar", RecordingTransport(lambda request: response))

        with pytest.raises(APIError) as exc_info:
            client.search.beer("")

        assert exc_info.value.detail == "Your missing the 'q' parameter."


class TestSearchBrewery:
    """Test Client.search.brewery and brewery_offset_limit."""

    @pytest.mark.unit
    def test_defaults(self):
        """Test the default variant sends the default pagination."""
        transport = RecordingTransport()
        client = new_client("foo", "bar", transport)

        client.search.brewery("bell's")

        request = transport.last_request
        assert request.url.path == "/v4/search/brewery/"
        assert request.url.params["q"] == "bell's"
        assert request.url.params["limit"] == "25"
        assert "sort" not in request.url.params

    @pytest.mark.unit
    def test_decodes_breweries(self):
        """Test matching breweries are decoded."""
        transport = RecordingTransport(
            lambda request: create_json_response(200, create_envelope(BREWERY_SEARCH_RESPONSE))
        )
        client = new_client("foo", "bar", transport)

        breweries = client.search.brewery_offset_limit("bell's", 0, 2).data

        assert [brewery.id for brewery in breweries] == [2507, 1]
        assert transport.last_request.url.params["limit"] == "2"
