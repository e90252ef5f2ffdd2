"""
Telldus Live API client.

Talks to the cloud service over HTTPS, signing every request with OAuth 1.0a
(HMAC-SHA1). A fresh nonce and timestamp are generated per request.
"""

import logging
import time
from typing import Any, Callable, Optional

import httpx

from .api import TelldusApi
from .config import LiveConfig
from .oauth import authorization_header, generate_nonce
from .request import Request, format_url

logger = logging.getLogger(__name__)

LIVE_BASE_URL = "https://api.telldus.com/json"


class LiveApi(TelldusApi):
    """Client for the Telldus Live cloud API."""

    base_url = LIVE_BASE_URL

    def __init__(
        self,
        config: LiveConfig,
        client: Optional[httpx.AsyncClient] = None,
        nonce_factory: Callable[[], str] = generate_nonce,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize the live client.

        Args:
            config: OAuth consumer and token credentials
            client: Optional httpx client to send requests with
            nonce_factory: Returns a new OAuth nonce for each request
            clock: Returns the current time in seconds
        """
        super().__init__(client)
        self.config = config
        self._nonce_factory = nonce_factory
        self._clock = clock

    async def request(self, request: Request) -> Any:
        """
        Sign and send a request to Telldus Live.

        Raises:
            UnexpectedStatusError: If the service does not answer with 200
        """
        url = format_url(f"{self.base_url}{request.path}", request.query)
        headers = authorization_header(
            url,
            request.method,
            consumer=self.config.consumer,
            token=self.config.token,
            nonce=self._nonce_factory(),
            timestamp=int(self._clock()),
        )
        logger.debug(f"{request.method} {request.path}")
        return await self._send(request.method, url, headers)
