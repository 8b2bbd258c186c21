"""Structured exceptions raised by the Untappd client."""

from datetime import timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class UntappdError(Exception):
    """Base exception for errors raised by this library.

    Transport failures are not wrapped: they surface as the ``httpx``
    exceptions raised by the transport itself.
    """

    def __init__(self, message: str, response: "httpx.Response | None" = None):
        super().__init__(message)
        self.response = response


class ValidationError(UntappdError):
    """The response cannot be treated as an API envelope."""

    pass


class ContentTypeError(ValidationError):
    """The response Content-Type is not application/json."""

    def __init__(self, content_type: str, **kwargs):
        super().__init__(f"expected application/json content type, but received {content_type}", **kwargs)
        self.content_type = content_type


class DecodingError(UntappdError):
    """The response body is not a well-formed JSON envelope."""

    pass


class EmptyBodyError(DecodingError):
    """A non-success response carried no body at all."""

    pass


class UnexpectedEndOfInputError(DecodingError):
    """The response body is a truncated JSON document."""

    pass


class MalformedBodyError(DecodingError):
    """The response body is not JSON, or not a JSON object."""

    pass


class APIError(UntappdError):
    """An envelope whose metadata reports an application-level failure.

    Attributes:
        code: Meta code reported by the API, or the HTTP status when absent.
        type: Error category, e.g. ``invalid_auth`` or ``invalid_param``.
        detail: Terse error description.
        developer_friendly: Verbose description, preferred over ``detail``.
        duration: Processing time reported by the API.
    """

    def __init__(
        self,
        code: int,
        type: str = "",
        detail: str = "",
        developer_friendly: str = "",
        duration: timedelta = timedelta(0),
        response: "httpx.Response | None" = None,
    ):
        self.code = code
        self.type = type
        self.detail = detail
        self.developer_friendly = developer_friendly
        self.duration = duration
        super().__init__(f"{code} [{type}]: {self.message}", response=response)

    @property
    def message(self) -> str:
        """Developer-friendly text when present, otherwise the detail."""
        return self.developer_friendly or self.detail
