"""Response validation and envelope decoding."""

import json
import re

import httpx

from untappd_client.envelope import Envelope
from untappd_client.errors.exceptions import (
    APIError,
    ContentTypeError,
    EmptyBodyError,
    MalformedBodyError,
    UnexpectedEndOfInputError,
)

JSON_CONTENT_TYPE = "application/json"

_LITERALS = ("true", "false", "null")
_NUMBER_TAIL = re.compile(r"\.|[eE][+-]?")


def check_response(response: httpx.Response) -> Envelope:
    """Validate an HTTP response and decode its envelope.

    Checks, in order:
    1. Content-Type is exactly application/json (body is not examined otherwise)
    2. An empty body is the zero Envelope on success statuses, an error otherwise
    3. The body is a complete JSON object
    4. Neither the HTTP status nor the envelope metadata report a failure

    Args:
        response: HTTP response whose body has been read.

    Returns:
        The decoded envelope, with the payload left as decoded JSON.

    Raises:
        ContentTypeError: Content-Type is not application/json.
        EmptyBodyError: Non-success status with no body.
        UnexpectedEndOfInputError: Body is a truncated JSON document.
        MalformedBodyError: Body is not JSON, not a JSON object, or has a badly
            shaped meta block.
        APIError: The response reports a failure.
    """
    content_type = response.headers.get("content-type", "")
    if content_type != JSON_CONTENT_TYPE:
        raise ContentTypeError(content_type, response=response)

    text = response.text
    if not text.strip():
        if response.is_success:
            return Envelope()
        raise EmptyBodyError(f"HTTP {response.status_code}: empty response body", response=response)

    data = _decode_json(text, response)
    if not isinstance(data, dict):
        raise MalformedBodyError(
            f"expected a JSON object, but received {type(data).__name__}", response=response
        )

    try:
        envelope = Envelope.from_dict(data)
    except (AttributeError, TypeError, ValueError) as e:
        raise MalformedBodyError(f"invalid envelope: {e}", response=response) from e

    if envelope.meta.is_error or not response.is_success:
        raise api_error_from_envelope(envelope, response)

    return envelope


def _decode_json(text: str, response: httpx.Response):
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        if _is_truncated(text, e):
            raise UnexpectedEndOfInputError(f"unexpected end of JSON input: {e}", response=response) from e
        raise MalformedBodyError(f"invalid JSON body: {e}", response=response) from e


def _is_truncated(text: str, error: json.JSONDecodeError) -> bool:
    # In a cut-off document nothing but a partial token follows the error.
    rest = text[error.pos :].rstrip()
    if not rest or error.msg.startswith("Unterminated string"):
        return True
    if any(literal.startswith(rest) for literal in _LITERALS):
        return True
    if rest == "-":
        return True
    return error.pos > 0 and text[error.pos - 1].isdigit() and _NUMBER_TAIL.fullmatch(rest) is not None


def api_error_from_envelope(envelope: Envelope, response: httpx.Response | None = None) -> APIError:
    """Build the APIError described by an envelope's metadata.

    The meta code is preferred; the HTTP status is used when the envelope
    carries no meta block.
    """
    meta = envelope.meta
    code = meta.code
    if not code and response is not None:
        code = response.status_code

    return APIError(
        code=code,
        type=meta.error_type,
        detail=meta.error_detail,
        developer_friendly=meta.developer_friendly,
        duration=meta.response_time.duration,
        response=response,
    )
