"""
Unit Tests for domain exceptions
"""

import pytest

from nexus_player.domain.shared.exceptions import (
    ConfigurationError,
    ConnectTimeoutError,
    DomainError,
    EmptyQueueError,
    NodeCommandError,
)


class TestDomainErrors:
    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (ConfigurationError("no node"), "CONFIGURATION_ERROR"),
            (EmptyQueueError("empty"), "EMPTY_QUEUE"),
            (ConnectTimeoutError("connecting"), "CONNECT_TIMEOUT"),
            (NodeCommandError("GET", "api/x"), "NODE_COMMAND_FAILED"),
        ],
    )
    def test_codes_and_base_class(self, error, code):
        assert isinstance(error, DomainError)
        assert error.code == code

    def test_domain_error_default_code(self):
        assert DomainError("boom").code == "DomainError"

    def test_connect_timeout_reports_state(self):
        error = ConnectTimeoutError("disconnected")

        assert error.state == "disconnected"
        assert "still disconnected" in str(error)

    def test_node_command_error_with_status(self):
        error = NodeCommandError("PATCH", "api/player/g1", status=404, detail={"error": "x"})

        assert error.status == 404
        assert error.detail == {"error": "x"}
        assert str(error) == "Node command PATCH api/player/g1 failed (status 404)"

    def test_node_command_error_transport_failure(self):
        error = NodeCommandError("DELETE", "api/player/g1")

        assert error.status is None
        assert "transport failure" in error.message
