"""
Telldus Local API client.

Talks to a gateway on the local network using a bearer token. The token is
refreshed lazily before a request once the refresh interval has elapsed.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

import httpx

from .api import TelldusApi
from .config import LocalConfig
from .exceptions import TokenRefreshError
from .request import Request, format_url

logger = logging.getLogger(__name__)


class LocalApi(TelldusApi):
    """Client for the HTTP API of a Telldus gateway on the LAN."""

    def __init__(
        self,
        config: LocalConfig,
        client: Optional[httpx.AsyncClient] = None,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize the local client.

        Args:
            config: Gateway host, access token and refresh interval
            client: Optional httpx client to send requests with
            clock: Returns the current time in seconds
        """
        super().__init__(client)
        self.host = config.host
        self.access_token = config.access_token
        self.token_refresh_interval_seconds = config.token_refresh_interval_seconds
        self._clock = clock
        self._last_refresh = 0.0

    @property
    def base_url(self) -> str:
        return f"http://{self.host}/api"

    def _get_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token}"}

    async def refresh_access_token(self) -> None:
        """
        Refresh the access token if the refresh interval has elapsed.

        The refresh time is recorded before the call is made, so a failed
        refresh is not retried until the interval elapses again.

        Raises:
            TokenRefreshError: If the gateway response has no ``expires`` field
        """
        now = self._clock()
        if now - self._last_refresh < self.token_refresh_interval_seconds:
            return
        self._last_refresh = now

        url = format_url(f"{self.base_url}/refreshToken", {"token": self.access_token})
        response = await self.client.get(url, headers=self._get_headers())
        body = response.json()

        if not isinstance(body, dict) or not body.get("expires"):
            logger.error(f"Token refresh failed: {body}")
            raise TokenRefreshError(body.get("error") if isinstance(body, dict) else None)

        expires = datetime.fromtimestamp(body["expires"], tz=timezone.utc)
        logger.debug(f"Refreshed access token, expires {expires.isoformat()}")

    async def request(self, request: Request) -> Any:
        """
        Call the gateway, refreshing the token first when it is due.

        Raises:
            TokenRefreshError: If the token refresh fails
            UnexpectedStatusError: If the gateway does not answer with 200
        """
        await self.refresh_access_token()

        url = format_url(f"{self.base_url}{request.path}", request.query)
        logger.debug(f"{request.method} {request.path}")
        return await self._send(request.method, url, self._get_headers())
