"""Client settings resolved from explicit values, the environment and .env files.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable (including values loaded from a .env file)
3. Default value

Environment variables:
    UNTAPPD_ACCESS_TOKEN: User access token. Selects access token mode.
    UNTAPPD_CLIENT_ID: Application client ID.
    UNTAPPD_CLIENT_SECRET: Application client secret.
    UNTAPPD_BASE_URL: API base URL, defaults to the public v4 API.

Example:
    ```python
    from untappd_client.auth import ClientSettings

    settings = ClientSettings.resolve(dotenv_path="/app/.env")
    credentials = settings.credentials()
    ```
"""

import logging
import os
from dataclasses import dataclass, field
from threading import Lock

from dotenv import load_dotenv

from untappd_client.auth.credentials import AccessToken, APIKeyPair, Credentials

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.untappd.com/v4/"

ACCESS_TOKEN_ENV = "UNTAPPD_ACCESS_TOKEN"
CLIENT_ID_ENV = "UNTAPPD_CLIENT_ID"
CLIENT_SECRET_ENV = "UNTAPPD_CLIENT_SECRET"
BASE_URL_ENV = "UNTAPPD_BASE_URL"


class SettingsResolver:
    """Resolve individual settings with priority ordering.

    The .env file is loaded at most once per resolver, guarded by a lock.
    Variables already present in the environment are not overridden by it.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize the resolver.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories for one.
            load_dotenv: Whether to load a .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for settings resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        secret: bool = True,
    ) -> str | None:
        """Resolve one setting, first match wins.

        Args:
            value: Explicit value, used whenever it is not None.
            env_var_name: Environment variable consulted next.
            default: Fallback when neither of the above is set.
            secret: Mask the resolved value in log messages.

        Returns:
            The resolved value, or None.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if secret else result
            logger.debug(f"Resolved setting from {source}: {shown}")

        return result


@dataclass(frozen=True)
class ClientSettings:
    """Settings needed to construct a client."""

    access_token: str | None = field(default=None, repr=False)
    client_id: str | None = None
    client_secret: str | None = field(default=None, repr=False)
    base_url: str = DEFAULT_BASE_URL

    @classmethod
    def resolve(
        cls,
        *,
        access_token: str | None = None,
        client_id: str | None = None,
        client_secret: str | None = None,
        base_url: str | None = None,
        dotenv_path: str | None = None,
        load_dotenv: bool = True,
    ) -> "ClientSettings":
        """Resolve every setting from explicit values, environment or defaults."""
        resolver = SettingsResolver(dotenv_path=dotenv_path, load_dotenv=load_dotenv)
        return cls(
            access_token=resolver.resolve(value=access_token, env_var_name=ACCESS_TOKEN_ENV),
            client_id=resolver.resolve(value=client_id, env_var_name=CLIENT_ID_ENV, secret=False),
            client_secret=resolver.resolve(value=client_secret, env_var_name=CLIENT_SECRET_ENV),
            base_url=resolver.resolve(
                value=base_url, env_var_name=BASE_URL_ENV, default=DEFAULT_BASE_URL, secret=False
            ),
        )

    def credentials(self) -> Credentials:
        """Build the credentials variant these settings describe.

        An access token, when set, selects access token mode. Otherwise an
        API key pair is built, raising the usual configuration errors when
        either half is missing.
        """
        if self.access_token:
            return AccessToken(token=self.access_token)
        return APIKeyPair(client_id=self.client_id or "", client_secret=self.client_secret or "")
