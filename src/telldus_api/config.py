"""
Connection settings for the Telldus local and live APIs.

Settings are normally passed in explicitly. ``from_env`` builds them from
environment variables, loading a ``.env`` file first when one exists.
"""

import logging
import os
from typing import ClassVar, Dict, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigError
from .oauth import Credentials

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_REFRESH_INTERVAL = 60 * 60


def _read_env(names: Mapping[str, str], environ: Optional[Mapping[str, str]]) -> dict:
    """Collect settings from the environment, keyed by field name."""
    if environ is None:
        # Searches current directory and parent directories automatically
        load_dotenv()
        environ = os.environ

    values = {}
    for field, variable in names.items():
        value = environ.get(variable)
        if value:
            values[field] = value
    return values


class LocalConfig(BaseModel):
    """Settings for a Telldus gateway on the local network."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(description="Gateway host name or IP address")
    access_token: str = Field(description="Bearer token issued by the gateway")
    token_refresh_interval_seconds: float = Field(
        default=DEFAULT_TOKEN_REFRESH_INTERVAL,
        ge=0,
        description="Minimum seconds between token refresh calls",
    )

    ENV_VARS: ClassVar[Dict[str, str]] = {
        "host": "TELLDUS_HOST",
        "access_token": "TELLDUS_ACCESS_TOKEN",
        "token_refresh_interval_seconds": "TELLDUS_TOKEN_REFRESH_INTERVAL",
    }

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LocalConfig":
        """
        Build settings from ``TELLDUS_HOST``, ``TELLDUS_ACCESS_TOKEN`` and
        the optional ``TELLDUS_TOKEN_REFRESH_INTERVAL``.

        Raises:
            ConfigError: If a required variable is missing or invalid
        """
        values = _read_env(cls.ENV_VARS, environ)
        try:
            return cls(**values)
        except ValidationError as e:
            logger.error(f"Invalid local API configuration: {e}")
            raise ConfigError(f"Invalid local API configuration: {e}") from e


class LiveConfig(BaseModel):
    """OAuth credentials for the Telldus Live cloud API."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="OAuth consumer (public) key")
    secret: str = Field(description="OAuth consumer (private) secret")
    token_key: str = Field(description="OAuth access token")
    token_secret: str = Field(description="OAuth access token secret")

    ENV_VARS: ClassVar[Dict[str, str]] = {
        "key": "TELLDUS_PUBLIC_KEY",
        "secret": "TELLDUS_PRIVATE_KEY",
        "token_key": "TELLDUS_TOKEN",
        "token_secret": "TELLDUS_TOKEN_SECRET",
    }

    @property
    def consumer(self) -> Credentials:
        return Credentials(key=self.key, secret=self.secret)

    @property
    def token(self) -> Credentials:
        return Credentials(key=self.token_key, secret=self.token_secret)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LiveConfig":
        """
        Build credentials from ``TELLDUS_PUBLIC_KEY``, ``TELLDUS_PRIVATE_KEY``,
        ``TELLDUS_TOKEN`` and ``TELLDUS_TOKEN_SECRET``.

        Raises:
            ConfigError: If a variable is missing
        """
        values = _read_env(cls.ENV_VARS, environ)
        try:
            return cls(**values)
        except ValidationError as e:
            logger.error(f"Invalid live API configuration: {e}")
            raise ConfigError(f"Invalid live API configuration: {e}") from e
