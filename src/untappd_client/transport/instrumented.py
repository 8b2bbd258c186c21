"""Logging transport for instrumenting API traffic.

Wraps any ``httpx.BaseTransport`` and logs each request with its outcome.
Credential query values are masked before anything is logged. Responses and
exceptions pass through untouched.

## Example

```python
import httpx

from untappd_client import new_client
from untappd_client.transport import LoggingTransport

transport = LoggingTransport(wrapped_transport=httpx.HTTPTransport())
client = new_client("client-id", "client-secret", transport)
```
"""

import logging
import time

import httpx

from untappd_client.auth.credentials import mask_query

logger = logging.getLogger(__name__)


class LoggingTransport(httpx.BaseTransport):
    """Transport that logs requests, response statuses and failures.

    Args:
        wrapped_transport: The underlying transport to wrap
        log_level: Level used for successful exchanges (default: DEBUG)
    """

    def __init__(self, *, wrapped_transport: httpx.BaseTransport, log_level: int = logging.DEBUG) -> None:
        self._wrapped_transport = wrapped_transport
        self.log_level = log_level

    def __enter__(self):
        self._wrapped_transport.__enter__()
        return self

    def __exit__(self, exc_type=None, exc_value=None, traceback=None):
        self._wrapped_transport.__exit__(exc_type, exc_value, traceback)

    def close(self) -> None:
        self._wrapped_transport.close()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        url = mask_query(request.url)
        start = time.monotonic()

        try:
            response = self._wrapped_transport.handle_request(request)
        except httpx.TransportError as e:
            logger.warning(f"Request {request.method} {url} failed with {type(e).__name__}: {e}")
            raise

        elapsed = time.monotonic() - start
        if response.status_code >= 400:
            logger.warning(f"Request {request.method} {url} returned {response.status_code} in {elapsed:.3f}s")
        else:
            logger.log(
                self.log_level, f"Request {request.method} {url} returned {response.status_code} in {elapsed:.3f}s"
            )

        return response
