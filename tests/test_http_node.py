"""
Unit Tests for HttpPlaybackNode

Uses httpx.MockTransport so no real node is contacted.
"""

import json

import httpx
import pytest
from pydantic import SecretStr

from nexus_player.application.interfaces.playback_node import NodeCommand
from nexus_player.config.settings import NodeSettings
from nexus_player.domain.shared.exceptions import NodeCommandError
from nexus_player.infrastructure.node.http_node import HttpPlaybackNode


@pytest.fixture
def requests_seen():
    return []


def _node(handler, **settings):
    node_settings = NodeSettings(host="node.local", port=8080, **settings)
    return HttpPlaybackNode(node_settings, transport=httpx.MockTransport(handler))


class TestHttpPlaybackNode:
    async def test_send_builds_request(self, requests_seen):
        def handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return httpx.Response(204)

        node = _node(handler, password=SecretStr("youshallnotpass"))
        response = await node.send(
            NodeCommand(method="POST", path="api/player/g1", body={"track": {"url": "https://x/y"}})
        )

        assert response.ok is True
        assert response.status == 204
        assert response.data is None

        request = requests_seen[0]
        assert request.method == "POST"
        assert str(request.url) == "http://node.local:8080/api/player/g1"
        assert request.headers["Authorization"] == "youshallnotpass"
        assert json.loads(request.content) == {"track": {"url": "https://x/y"}}
        await node.aclose()

    async def test_no_authorization_without_password(self, requests_seen):
        def handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return httpx.Response(200, json={"ok": True})

        async with _node(handler) as node:
            response = await node.send(NodeCommand(method="DELETE", path="api/player/g1"))

        assert "Authorization" not in requests_seen[0].headers
        assert requests_seen[0].content == b""
        assert response.data == {"ok": True}

    async def test_rejection_returns_not_ok(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"error": "no player"})

        async with _node(handler) as node:
            response = await node.send(NodeCommand(method="PATCH", path="api/player/g1", body={}))

        assert response.ok is False
        assert response.status == 404
        assert response.data == {"error": "no player"}

    async def test_plain_text_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="internal error")

        async with _node(handler) as node:
            response = await node.send(NodeCommand(method="GET", path="api/status"))

        assert response.data == "internal error"

    async def test_transport_error_raises_node_command_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _node(handler) as node:
            with pytest.raises(NodeCommandError) as exc_info:
                await node.send(NodeCommand(method="POST", path="api/subscription/g1/v1"))

        assert exc_info.value.method == "POST"
        assert exc_info.value.path == "api/subscription/g1/v1"
        assert exc_info.value.status is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    async def test_aclose_is_idempotent(self):
        node = _node(lambda request: httpx.Response(204))

        await node.aclose()
        await node.aclose()

        assert node.is_closed is True

    def test_secure_base_url(self):
        node = HttpPlaybackNode(NodeSettings(host="nexus.example.com", port=443, secure=True))

        assert node.base_url == "https://nexus.example.com:443/"
