"""Untappd Client - Python client library for the Untappd v4 API.

Every API response is a JSON envelope whose ``meta`` block reports success
or failure independently of the HTTP status. This library provides:
- Key pair and access token authentication, mutually exclusive per client
- An injectable ``httpx`` transport for all network I/O
- Envelope validation with structured, typed errors
- Services for user, venue, local feed and check-in endpoints

Example:
    ```python
    from untappd_client import new_authenticated_client
    from untappd_client.errors import APIError

    client = new_authenticated_client("access-token")

    try:
        result = client.venue.info(1021)
    except APIError as e:
        print(f"{e.code} {e.type}: {e.message}")
    else:
        print(result.data.name)
    ```
"""

from untappd_client.client import APIResponse, Client, new_authenticated_client, new_client
from untappd_client.formatting import format_float

__version__ = "0.1.0"

__all__ = [
    "APIResponse",
    "Client",
    "__version__",
    "format_float",
    "new_authenticated_client",
    "new_client",
]
