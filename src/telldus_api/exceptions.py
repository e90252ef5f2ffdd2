"""Exceptions raised by the Telldus API client."""

from typing import Optional


class TelldusError(Exception):
    """Base class for all errors raised by telldus_api."""

    pass


class InvalidCommandError(TelldusError, ValueError):
    """A device command name that is not in the command table."""

    def __init__(self, command):
        super().__init__(f"Invalid command supplied: {command!r}")
        self.command = command


class TokenRefreshError(TelldusError):
    """The local gateway refused to refresh the access token."""

    def __init__(self, error: Optional[str]):
        super().__init__(f"Unable to refresh access token: {error}")
        self.error = error


class UnexpectedStatusError(TelldusError):
    """An API call answered with a status other than 200."""

    def __init__(self, status_code: int, url: str, body: str = ""):
        message = f"Unexpected response status {status_code} from {url}"
        if body:
            message = f"{message} - {body}"
        super().__init__(message)
        self.status_code = status_code
        self.url = url
        self.body = body


class ConfigError(TelldusError):
    """Missing or invalid client configuration."""

    pass
