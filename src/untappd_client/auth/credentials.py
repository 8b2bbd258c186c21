"""Credential variants used to authenticate API requests.

The Untappd API accepts one of two mutually exclusive authentication modes,
both sent as query parameters:

1. An application key pair (``client_id`` and ``client_secret``)
2. A user access token (``access_token``)

Each mode is its own frozen dataclass. A client holds exactly one of them, so
"both set" and "neither set" cannot be represented.

Example:
    ```python
    from untappd_client.auth import AccessToken, APIKeyPair

    keys = APIKeyPair(client_id="abc", client_secret="def")
    keys.query_params()  # [("client_id", "abc"), ("client_secret", "def")]

    token = AccessToken(token="xyz")
    token.query_params()  # [("access_token", "xyz")]
    ```

Security Considerations:
    - ``repr()`` of a credential never includes secret values
    - ``mask_query`` replaces credential values in URLs before logging
"""

from dataclasses import dataclass, field

import httpx

from untappd_client.auth.exceptions import NoAccessTokenError, NoClientIDError, NoClientSecretError

CLIENT_ID_PARAM = "client_id"
CLIENT_SECRET_PARAM = "client_secret"
ACCESS_TOKEN_PARAM = "access_token"

CREDENTIAL_PARAMS: frozenset[str] = frozenset([CLIENT_ID_PARAM, CLIENT_SECRET_PARAM, ACCESS_TOKEN_PARAM])


@dataclass(frozen=True)
class APIKeyPair:
    """Application credentials issued when registering an API client.

    Raises:
        NoClientIDError: If ``client_id`` is empty. Checked first.
        NoClientSecretError: If ``client_id`` is set but ``client_secret`` is empty.
    """

    client_id: str
    client_secret: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.client_id:
            raise NoClientIDError()
        if not self.client_secret:
            raise NoClientSecretError()

    def query_params(self) -> list[tuple[str, str]]:
        return [(CLIENT_ID_PARAM, self.client_id), (CLIENT_SECRET_PARAM, self.client_secret)]


@dataclass(frozen=True)
class AccessToken:
    """OAuth access token obtained on behalf of a user.

    Raises:
        NoAccessTokenError: If ``token`` is empty.
    """

    token: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.token:
            raise NoAccessTokenError()

    def query_params(self) -> list[tuple[str, str]]:
        return [(ACCESS_TOKEN_PARAM, self.token)]


Credentials = APIKeyPair | AccessToken


def mask_query(url: httpx.URL) -> str:
    """Render a URL with every credential query value replaced by ``***``.

    Args:
        url: Request URL, possibly carrying authentication parameters.

    Returns:
        URL string that is safe to log.
    """
    base = str(url).split("?", 1)[0]
    query = "&".join(
        f"{key}={'***' if key in CREDENTIAL_PARAMS else value}" for key, value in url.params.multi_items()
    )
    return f"{base}?{query}" if query else base
