"""Testing utilities for code built on the Untappd client.

Example:
    ```python
    import pytest

    from untappd_client import new_client
    from untappd_client.errors import APIError
    from untappd_client.testing import RecordingTransport, create_error_response


    def test_unknown_user():
        transport = RecordingTransport(
            lambda request: create_error_response("invalid_auth", "There is no user with that username.")
        )
        client = new_client("foo", "bar", transport)
        with pytest.raises(APIError):
            client.user.badges("nobody")
    ```
"""

from untappd_client.testing.factories import (
    RecordingTransport,
    create_envelope,
    create_error_response,
    create_json_response,
)

__all__ = [
    "RecordingTransport",
    "create_envelope",
    "create_error_response",
    "create_json_response",
]
