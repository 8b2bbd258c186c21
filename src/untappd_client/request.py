"""Construction of authenticated API requests."""

from collections.abc import Iterable, Mapping, Sequence

import httpx

from untappd_client.auth.credentials import Credentials
from untappd_client.errors.handler import JSON_CONTENT_TYPE

USER_AGENT = "untappd-client-python"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Methods that carry a form-encoded request body
WRITE_METHODS: frozenset[str] = frozenset(["POST", "PUT", "PATCH"])

QueryValues = Mapping[str, str | Sequence[str]]
FormValues = Mapping[str, str] | Iterable[tuple[str, str]]


def build_request(
    method: str,
    url: httpx.URL | str,
    credentials: Credentials,
    *,
    form: FormValues | None = None,
    query: QueryValues | None = None,
) -> httpx.Request:
    """Build a fully authenticated request.

    Query parameters start with the authentication parameters of the
    credentials variant. Caller query values are merged on top: a caller key
    replaces an existing key, and every value of a multi-valued entry is
    encoded.

    Args:
        method: HTTP method.
        url: Absolute request URL without a query string.
        credentials: Key pair or access token to authenticate with.
        form: Ordered body values, sent only for write methods.
        query: Extra query values.

    Returns:
        Request ready to hand to a transport.
    """
    method = method.upper()

    params: dict[str, list[str]] = {}
    for key, value in credentials.query_params():
        params.setdefault(key, []).append(value)
    for key, value in (query or {}).items():
        params[key] = [value] if isinstance(value, str) else list(value)

    headers = {
        "Accept": JSON_CONTENT_TYPE,
        "User-Agent": USER_AGENT,
    }

    content = b""
    if method in WRITE_METHODS:
        headers["Content-Type"] = FORM_CONTENT_TYPE
        if form:
            pairs = form.items() if isinstance(form, Mapping) else form
            content = str(httpx.QueryParams(list(pairs))).encode("ascii")

    return httpx.Request(
        method,
        url,
        params=[(key, value) for key, values in params.items() for value in values],
        headers=headers,
        content=content,
    )
