"""Tests for response validation and envelope decoding."""

from datetime import timedelta

import pytest
from httpx import Response

from untappd_client.envelope import Envelope
from untappd_client.errors.exceptions import (
    APIError,
    ContentTypeError,
    DecodingError,
    EmptyBodyError,
    MalformedBodyError,
    UnexpectedEndOfInputError,
    ValidationError,
)
from untappd_client.errors.handler import api_error_from_envelope, check_response
from untappd_client.testing import create_envelope, create_json_response


@pytest.mark.unit
def test_check_response_wrong_content_type():
    """Test check_response rejects anything but application/json."""
    response = create_json_response(200, create_envelope({}), content_type="foo/bar")

    with pytest.raises(ContentTypeError) as exc_info:
        check_response(response)

    assert str(exc_info.value) == "expected application/json content type, but received foo/bar"
    assert exc_info.value.content_type == "foo/bar"
    assert isinstance(exc_info.value, ValidationError)


@pytest.mark.unit
def test_check_response_missing_content_type():
    """Test check_response rejects a response without Content-Type."""
    response = Response(status_code=200, content=b"{}")

    with pytest.raises(ContentTypeError):
        check_response(response)


@pytest.mark.unit
def test_check_response_content_type_with_parameters():
    """Test check_response requires the exact JSON media type."""
    response = create_json_response(200, {}, content_type="application/json; charset=utf-8")

    with pytest.raises(ContentTypeError):
        check_response(response)


@pytest.mark.unit
def test_check_response_content_type_checked_before_body():
    """Test a bad Content-Type wins over a bad body or status."""
    response = create_json_response(500, b"{", content_type="text/html")

    with pytest.raises(ContentTypeError):
        check_response(response)


@pytest.mark.unit
def test_check_response_ok_no_body():
    """Test check_response returns the zero envelope for an empty 200."""
    response = create_json_response(200)

    envelope = check_response(response)

    assert envelope == Envelope()
    assert envelope.meta.code == 0
    assert envelope.response is None


@pytest.mark.unit
def test_check_response_error_no_body():
    """Test check_response reports an empty body on error statuses."""
    response = create_json_response(500)

    with pytest.raises(EmptyBodyError) as exc_info:
        check_response(response)

    assert isinstance(exc_info.value, DecodingError)
    assert exc_info.value.response is response


@pytest.mark.unit
def test_check_response_unexpected_end_of_input():
    """Test check_response reports a truncated JSON body."""
    response = create_json_response(500, b"{")

    with pytest.raises(UnexpectedEndOfInputError):
        check_response(response)


@pytest.mark.unit
@pytest.mark.parametrize("body", [b'{"meta": {"code": 200', b'{"meta": ', b'{"meta": {"error_type": "inv'])
def test_check_response_truncated_bodies(body):
    """Test bodies cut off at different points are all truncations."""
    response = create_json_response(200, body)

    with pytest.raises(UnexpectedEndOfInputError):
        check_response(response)


@pytest.mark.unit
@pytest.mark.parametrize(
    "body",
    [b'{"a": tru', b'{"a": nul', b'{"a": [f', b'{"a": -', b'{"a": 1.', b'{"a": 1e', b'{"a": 2E+'],
)
def test_check_response_body_cut_inside_token(body):
    """Test a body ending inside a literal or number is a truncation."""
    response = create_json_response(200, body)

    with pytest.raises(UnexpectedEndOfInputError):
        check_response(response)


@pytest.mark.unit
@pytest.mark.parametrize("body", [b"foo", b"{}}", b"[]", b'"meta"', b'{"a": trux}', b'{"a": 1.}', b'{"a": -x}'])
def test_check_response_malformed_body(body):
    """Test invalid JSON and non-object documents are malformed, not truncated."""
    response = create_json_response(200, body)

    with pytest.raises(MalformedBodyError):
        check_response(response)


@pytest.mark.unit
@pytest.mark.parametrize(
    "body",
    [
        b'{"meta": "oops"}',
        b'{"meta": {"code": "abc"}}',
        b'{"meta": {"code": [200]}}',
        b'{"meta": {"response_time": {"time": "x"}}}',
        b'{"meta": {"response_time": "1"}}',
    ],
)
def test_check_response_badly_shaped_meta(body):
    """Test a JSON object with an unusable meta block is a decoding error."""
    response = create_json_response(200, body)

    with pytest.raises(MalformedBodyError) as exc_info:
        check_response(response)

    assert isinstance(exc_info.value, DecodingError)
    assert exc_info.value.response is response
    assert str(exc_info.value).startswith("invalid envelope: ")


@pytest.mark.unit
def test_check_response_ok_with_body():
    """Test check_response accepts an empty JSON object."""
    response = create_json_response(200, b"{}")

    envelope = check_response(response)

    assert envelope == Envelope()


@pytest.mark.unit
def test_check_response_returns_payload():
    """Test check_response keeps the payload as decoded JSON."""
    response = create_json_response(200, create_envelope({"venue": {"venue_id": 1}}, time=0.1))

    envelope = check_response(response)

    assert envelope.meta.code == 200
    assert envelope.response == {"venue": {"venue_id": 1}}
    assert envelope.meta.response_time.duration == timedelta(seconds=0.1)


@pytest.mark.unit
def test_check_response_error_ok():
    """Test check_response raises the API error described by the envelope."""
    detail = "The user has not authorized this application or the token is invalid."
    response = create_json_response(
        500,
        create_envelope(code=500, error_type="invalid_auth", error_detail=detail, developer_friendly=detail),
    )

    with pytest.raises(APIError) as exc_info:
        check_response(response)

    error = exc_info.value
    assert error.code == 500
    assert error.type == "invalid_auth"
    assert error.detail == detail
    assert error.developer_friendly == detail
    assert error.duration == timedelta(0)
    assert error.response is response


@pytest.mark.unit
def test_check_response_meta_code_wins_over_status():
    """Test the meta code is reported even when the HTTP status differs."""
    response = create_json_response(
        404, create_envelope(code=500, error_type="invalid_auth", error_detail="There is no user with that username.")
    )

    with pytest.raises(APIError) as exc_info:
        check_response(response)

    assert exc_info.value.code == 500


@pytest.mark.unit
def test_check_response_error_type_on_200():
    """Test a non-empty error type fails even with a 200 meta code."""
    response = create_json_response(200, create_envelope(code=200, error_type="invalid_param"))

    with pytest.raises(APIError) as exc_info:
        check_response(response)

    assert exc_info.value.code == 200
    assert exc_info.value.type == "invalid_param"


@pytest.mark.unit
def test_check_response_meta_error_on_http_200():
    """Test a failing meta code fails even when the HTTP status is 200."""
    response = create_json_response(200, create_envelope(code=400, error_type="invalid_param"))

    with pytest.raises(APIError) as exc_info:
        check_response(response)

    assert exc_info.value.code == 400


@pytest.mark.unit
def test_api_error_from_envelope_without_meta():
    """Test the HTTP status stands in for a missing meta code."""
    response = Response(status_code=502)

    error = api_error_from_envelope(Envelope(), response)

    assert error.code == 502
    assert error.type == ""
    assert str(error) == "502 []: "


@pytest.mark.unit
def test_api_error_from_envelope_without_response():
    """Test an error can be built from the envelope alone."""
    envelope = Envelope.from_dict(create_envelope(code=500, error_type="invalid_param", time=36, measure="milliseconds"))

    error = api_error_from_envelope(envelope)

    assert error.code == 500
    assert error.duration == timedelta(milliseconds=36)
    assert error.response is None
