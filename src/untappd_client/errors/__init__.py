"""Error handling and envelope validation for the Untappd client."""

from untappd_client.errors.exceptions import (
    APIError,
    ContentTypeError,
    DecodingError,
    EmptyBodyError,
    MalformedBodyError,
    UnexpectedEndOfInputError,
    UntappdError,
    ValidationError,
)
from untappd_client.errors.handler import JSON_CONTENT_TYPE, api_error_from_envelope, check_response

__all__ = [
    "APIError",
    "ContentTypeError",
    "DecodingError",
    "EmptyBodyError",
    "JSON_CONTENT_TYPE",
    "MalformedBodyError",
    "UnexpectedEndOfInputError",
    "UntappdError",
    "ValidationError",
    "api_error_from_envelope",
    "check_response",
]
