"""HTTP playback node implementing PlaybackNode on top of httpx."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from nexus_player.application.interfaces.playback_node import (
    NodeCommand,
    NodeResponse,
    PlaybackNode,
)
from nexus_player.config.settings import NodeSettings
from nexus_player.domain.shared.exceptions import NodeCommandError
from nexus_player.domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)


class HttpPlaybackNode(PlaybackNode):
    """Talks to a node's REST API. One instance can serve many players."""

    def __init__(
        self,
        settings: NodeSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or NodeSettings()

        headers = {"Accept": "application/json"}
        password = self._settings.password.get_secret_value()
        if password:
            headers["Authorization"] = password

        self._client = httpx.AsyncClient(
            base_url=self._settings.base_url,
            headers=headers,
            timeout=self._settings.request_timeout_s,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def send(self, command: NodeCommand) -> NodeResponse:
        logger.debug(LogTemplates.NODE_REQUEST, command.method, command.path)
        try:
            response = await self._client.request(
                command.method, command.path, json=command.body
            )
        except httpx.HTTPError as e:
            logger.warning(LogTemplates.NODE_TRANSPORT_ERROR, command.method, command.path, e)
            raise NodeCommandError(command.method, command.path, detail=str(e)) from e

        logger.debug(
            LogTemplates.NODE_RESPONSE, command.method, command.path, response.status_code
        )
        return NodeResponse(
            ok=response.is_success,
            status=response.status_code,
            data=self._decode(response),
        )

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        if "json" in response.headers.get("content-type", ""):
            try:
                return response.json()
            except ValueError:
                return response.text
        return response.text

    async def aclose(self) -> None:
        if not self._client.is_closed:
            await self._client.aclose()
            logger.debug(LogTemplates.NODE_CLOSED, self.base_url)

    async def __aenter__(self) -> HttpPlaybackNode:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
