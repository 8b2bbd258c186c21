"""Untappd API client.

A ``Client`` holds one credentials variant, a base URL and a shared
transport. It carries no per-request state, so a single instance can be used
from many threads as long as its transport allows it.

Example:
    ```python
    from untappd_client import new_client

    client = new_client("client-id", "client-secret")
    result = client.user.badges("mdlayher")
    for badge in result.data:
        print(badge.name)
    print(f"took {result.duration}")
    ```
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Generic, TypeVar

import httpx

from untappd_client.auth.credentials import AccessToken, APIKeyPair, Credentials, mask_query
from untappd_client.auth.settings import DEFAULT_BASE_URL, ClientSettings
from untappd_client.endpoints.beer import BeerService
from untappd_client.endpoints.brewery import BreweryService
from untappd_client.endpoints.checkins import CheckinService
from untappd_client.endpoints.search import SearchService
from untappd_client.endpoints.thepub import ThePubService
from untappd_client.endpoints.user import UserService
from untappd_client.endpoints.venue import VenueService
from untappd_client.envelope import Envelope, Meta
from untappd_client.errors.exceptions import MalformedBodyError
from untappd_client.errors.handler import check_response
from untappd_client.request import FormValues, QueryValues, build_request
from untappd_client.transport import default_transport

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class APIResponse(Generic[T]):
    """Successful result of an API call.

    Attributes:
        data: Payload decoded by the caller's decode function, or None.
        envelope: Decoded envelope, including the raw payload.
        http_response: The HTTP response the envelope was read from.
    """

    data: T | None
    envelope: Envelope
    http_response: httpx.Response = field(repr=False)

    @property
    def meta(self) -> Meta:
        return self.envelope.meta

    @property
    def duration(self) -> timedelta:
        """Processing time reported by the API."""
        return self.envelope.meta.response_time.duration


@dataclass(frozen=True)
class Client:
    """Client for the Untappd v4 API.

    Prefer ``new_client`` or ``new_authenticated_client`` over calling this
    directly; both validate their inputs and pick the credentials variant.
    """

    credentials: Credentials
    transport: httpx.BaseTransport = field(default_factory=default_transport, repr=False, compare=False)
    base_url: str = DEFAULT_BASE_URL

    def __post_init__(self) -> None:
        if not isinstance(self.credentials, (APIKeyPair, AccessToken)):
            raise TypeError(
                f"credentials must be APIKeyPair or AccessToken, not {type(self.credentials).__name__}"
            )
        if not self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url + "/")

    @classmethod
    def from_env(
        cls,
        transport: httpx.BaseTransport | None = None,
        *,
        dotenv_path: str | None = None,
        load_dotenv: bool = True,
    ) -> "Client":
        """Build a client from UNTAPPD_* environment variables and .env files.

        An access token, when configured, takes precedence over a key pair.

        Raises:
            ConfigurationError: If no usable credentials are configured.
        """
        settings = ClientSettings.resolve(dotenv_path=dotenv_path, load_dotenv=load_dotenv)
        return cls(
            credentials=settings.credentials(),
            transport=transport if transport is not None else default_transport(),
            base_url=settings.base_url,
        )

    @property
    def user(self) -> UserService:
        return UserService(self)

    @property
    def beer(self) -> BeerService:
        return BeerService(self)

    @property
    def brewery(self) -> BreweryService:
        return BreweryService(self)

    @property
    def venue(self) -> VenueService:
        return VenueService(self)

    @property
    def thepub(self) -> ThePubService:
        return ThePubService(self)

    @property
    def checkins(self) -> CheckinService:
        return CheckinService(self)

    @property
    def search(self) -> SearchService:
        return SearchService(self)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type=None, exc_value=None, traceback=None) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        *,
        form: FormValues | None = None,
        query: QueryValues | None = None,
        decode: Callable[[Any], T] | None = None,
    ) -> APIResponse[T]:
        """Perform an authenticated API request.

        Args:
            method: HTTP method.
            path: Endpoint path relative to the base URL, e.g. ``user/badges/foo/``.
            form: Body values, sent for write methods only.
            query: Extra query values merged over the authentication parameters.
            decode: Converts the envelope's ``response`` payload into the result.

        Returns:
            The decoded payload together with the envelope and HTTP response.

        Raises:
            httpx.TransportError: Raised by the transport, passed through as-is.
            ValidationError: The response is not JSON.
            DecodingError: The response body is empty, truncated or malformed, or
                its payload cannot be decoded.
            APIError: The API reported a failure.
        """
        url = httpx.URL(self.base_url).join(path.lstrip("/"))
        request = build_request(method, url, self.credentials, form=form, query=query)

        logger.debug(f"Sending {request.method} {mask_query(request.url)}")
        response = self.transport.handle_request(request)
        response.request = request
        try:
            response.read()
        finally:
            response.close()

        envelope = check_response(response)
        data = None
        if decode is not None:
            try:
                data = decode(envelope.response)
            except (AttributeError, TypeError, ValueError) as e:
                raise MalformedBodyError(f"invalid response payload: {e}", response=response) from e
        return APIResponse(data=data, envelope=envelope, http_response=response)


def new_client(client_id: str, client_secret: str, transport: httpx.BaseTransport | None = None) -> Client:
    """Create a client authenticating with an application key pair.

    Raises:
        NoClientIDError: If ``client_id`` is empty, whatever the secret.
        NoClientSecretError: If ``client_secret`` is empty.
    """
    credentials = APIKeyPair(client_id=client_id, client_secret=client_secret)
    return Client(credentials=credentials, transport=transport if transport is not None else default_transport())


def new_authenticated_client(access_token: str, transport: httpx.BaseTransport | None = None) -> Client:
    """Create a client authenticating with a user access token.

    Raises:
        NoAccessTokenError: If ``access_token`` is empty.
    """
    credentials = AccessToken(token=access_token)
    return Client(credentials=credentials, transport=transport if transport is not None else default_transport())
