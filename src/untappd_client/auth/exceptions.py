"""Exceptions raised while configuring a client.

These are raised at construction time when required credentials are
missing, and are never retried.

Example:
    ```python
    from untappd_client import new_client
    from untappd_client.auth.exceptions import ConfigurationError

    try:
        client = new_client(client_id, client_secret)
    except ConfigurationError as e:
        print(f"Client is not configured: {e}")
    ```
"""

from untappd_client.errors.exceptions import UntappdError


class ConfigurationError(UntappdError, ValueError):
    """Base exception for missing or invalid client configuration.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any configuration error.
    """

    pass


class NoClientIDError(ConfigurationError):
    """Raised when an API key pair is built without a client ID."""

    def __init__(self, message: str = "no client ID"):
        super().__init__(message)


class NoClientSecretError(ConfigurationError):
    """Raised when an API key pair is built without a client secret."""

    def __init__(self, message: str = "no client secret"):
        super().__init__(message)


class NoAccessTokenError(ConfigurationError):
    """Raised when an access token credential is built from an empty token."""

    def __init__(self, message: str = "no access token"):
        super().__init__(message)
