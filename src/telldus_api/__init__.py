"""Telldus API client package."""

from .api import TelldusApi
from .commands import SUPPORTED_METHODS, Command, supported_methods
from .config import LiveConfig, LocalConfig
from .exceptions import (
    ConfigError,
    InvalidCommandError,
    TelldusError,
    TokenRefreshError,
    UnexpectedStatusError,
)
from .live import LiveApi
from .local import LocalApi
from .request import Request

__version__ = "0.1.0"
__all__ = [
    "TelldusApi",
    "LocalApi",
    "LiveApi",
    "LocalConfig",
    "LiveConfig",
    "Command",
    "SUPPORTED_METHODS",
    "supported_methods",
    "Request",
    "TelldusError",
    "InvalidCommandError",
    "TokenRefreshError",
    "UnexpectedStatusError",
    "ConfigError",
]
