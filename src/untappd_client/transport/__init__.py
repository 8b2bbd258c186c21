"""Transport layer for the Untappd client.

A transport is any ``httpx.BaseTransport``: it executes one request and
returns a response, or raises ``httpx.TransportError``. Clients accept one at
construction time, so network I/O, TLS, timeouts and connection pooling are
owned by the transport rather than by the client.

Modules:
    instrumented: Logging transport with credential masking

Example:
    ```python
    import httpx

    from untappd_client import new_authenticated_client
    from untappd_client.transport import LoggingTransport, default_transport

    transport = LoggingTransport(wrapped_transport=default_transport())
    client = new_authenticated_client("access-token", transport)
    ```
"""

import httpx

from untappd_client.transport.instrumented import LoggingTransport


def default_transport() -> httpx.BaseTransport:
    """Blocking HTTP transport used when a client is given none."""
    return httpx.HTTPTransport()


__all__ = ["LoggingTransport", "default_transport"]
