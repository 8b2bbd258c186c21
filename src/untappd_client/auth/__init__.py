"""Authentication components for the Untappd client.

This module provides:
- The two mutually exclusive credential variants (key pair, access token)
- Configuration errors raised when credentials are missing
- Settings resolution from explicit values, environment variables and .env files

Example:
    ```python
    from untappd_client.auth import APIKeyPair, ClientSettings

    credentials = APIKeyPair(client_id="abc", client_secret="def")

    # Or from UNTAPPD_* environment variables
    credentials = ClientSettings.resolve().credentials()
    ```
"""

from untappd_client.auth.credentials import AccessToken, APIKeyPair, Credentials, mask_query
from untappd_client.auth.exceptions import (
    ConfigurationError,
    NoAccessTokenError,
    NoClientIDError,
    NoClientSecretError,
)
from untappd_client.auth.settings import ClientSettings, SettingsResolver

__all__ = [
    "APIKeyPair",
    "AccessToken",
    "ClientSettings",
    "ConfigurationError",
    "Credentials",
    "NoAccessTokenError",
    "NoClientIDError",
    "NoClientSecretError",
    "SettingsResolver",
    "mask_query",
]
