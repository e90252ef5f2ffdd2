"""
Telldus resource API shared by the local and live transports.

Every domain operation is defined once here and delegates to the abstract
``request`` coroutine that each transport implements.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Union

import httpx

from .commands import SUPPORTED_METHODS, Command, resolve_command
from .exceptions import UnexpectedStatusError
from .request import Request

logger = logging.getLogger(__name__)


class TelldusApi(ABC):
    """Base class for Telldus API clients."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        """
        Args:
            client: Optional shared httpx client. When omitted a client is
                created on first use and closed by :meth:`aclose`.
        """
        self._client = client
        self._owns_client = client is None

    @abstractmethod
    async def request(self, request: Request) -> Any:
        """Perform an authenticated call and return the decoded JSON body."""

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def _send(self, method: str, url: str, headers: Dict[str, str]) -> Any:
        """
        Issue one HTTP call and decode its JSON body.

        Raises:
            UnexpectedStatusError: If the response status is not 200
        """
        response = await self.client.request(method, url, headers=headers)

        if response.status_code != 200:
            logger.error(f"{method} {httpx.URL(url).path} returned {response.status_code}")
            raise UnexpectedStatusError(response.status_code, url, response.text)
        return response.json()

    async def get_profile(self) -> Any:
        return await self.request(Request("/user/profile"))

    async def list_clients(self) -> Any:
        return await self.request(Request("/clients/list"))

    async def list_sensors(self) -> List[Dict[str, Any]]:
        """
        List all sensors.

        Returns:
            The ``sensor`` field of the response body
        """
        response = await self.request(Request("/sensors/list"))
        return response.get("sensor")

    async def get_sensor_info(self, id) -> Any:
        return await self.request(Request("/sensor/info", query={"id": id}))

    async def set_sensor_name(self, id, name: str) -> Any:
        return await self.request(Request("/sensor/setName", query={"id": id, "name": name}))

    async def set_sensor_ignore(self, id, ignore) -> Any:
        return await self.request(
            Request("/sensor/setIgnore", query={"id": id, "ignore": ignore})
        )

    async def list_devices(self) -> List[Dict[str, Any]]:
        """
        List all devices along with the commands each one supports.

        Returns:
            The ``device`` field of the response body
        """
        response = await self.request(
            Request("/devices/list", query={"supportedMethods": SUPPORTED_METHODS})
        )
        return response.get("device")

    async def get_device_info(self, id) -> Any:
        return await self.request(
            Request("/device/info", query={"id": id, "supportedMethods": SUPPORTED_METHODS})
        )

    async def add_device(self, device: Mapping[str, Any]) -> Any:
        """
        Register a device.

        Args:
            device: Device fields sent as query parameters
        """
        return await self.request(Request("/device/setName", query=dict(device)))

    async def device_learn(self, id) -> Any:
        return await self.request(Request("/device/learn", query={"id": id}))

    async def set_device_model(self, id, model: str) -> Any:
        return await self.request(Request("/device/setModel", query={"id": id, "model": model}))

    async def set_device_name(self, id, name: str) -> Any:
        return await self.request(Request("/device/setName", query={"id": id, "name": name}))

    async def set_device_parameter(self, id, parameter: str, value) -> Any:
        return await self.request(
            Request(
                "/device/setParameter",
                query={"id": id, "parameter": parameter, "value": value},
            )
        )

    async def set_device_protocol(self, id, protocol: str) -> Any:
        return await self.request(
            Request("/device/setProtocol", query={"id": id, "protocol": protocol})
        )

    async def remove_device(self, id) -> Any:
        return await self.request(Request("/device/remove", query={"id": id}))

    async def bell_device(self, id) -> Any:
        return await self.request(Request("/device/bell", query={"id": id}))

    async def dim_device(self, id, level: int) -> Any:
        return await self.request(Request("/device/dim", query={"id": id, "level": level}))

    async def on_off_device(self, id, on: bool) -> Any:
        """Turn a device on (``on=True``) or off."""
        path = "/device/turnOn" if on else "/device/turnOff"
        return await self.request(Request(path, query={"id": id}))

    async def stop_device(self, id) -> Any:
        return await self.request(Request("/device/stop", query={"id": id}))

    async def up_down_device(self, id, up: bool) -> Any:
        """Move a device up (``up=True``) or down."""
        path = "/device/up" if up else "/device/down"
        return await self.request(Request(path, query={"id": id}))

    async def command_device(self, id, command: Union[str, Command], value=None) -> Any:
        """
        Send a generic command to a device.

        Args:
            id: Device ID
            command: Command name (e.g., "on", "dim") or Command member
            value: Optional command argument, such as a dim level

        Returns:
            Decoded response body

        Raises:
            InvalidCommandError: If the command is unknown; no request is made
        """
        method = resolve_command(command)
        return await self.request(
            Request("/device/command", query={"id": id, "method": method, "value": value})
        )

    async def device_history(self, id, from_: int, to: int) -> Any:
        """
        Get the event history of a device.

        Args:
            id: Device ID
            from_: Start of the range as a unix timestamp in seconds
            to: End of the range as a unix timestamp in seconds
        """
        return await self.request(
            Request("/device/history", query={"id": id, "from": from_, "to": to})
        )

    async def list_events(self) -> Any:
        return await self.request(Request("/events/list"))
