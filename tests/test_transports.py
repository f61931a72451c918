"""Tests for chat-completion transports."""

from unittest.mock import MagicMock, patch

import pytest

from vibeprompt.core.config import GatewayConfig
from vibeprompt.core.transports import (
    OpenAITransport,
    RelayTransport,
    TransportError,
    create_transport,
)

PAYLOAD = {
    "model": "gpt-4",
    "messages": [{"role": "user", "content": "Hi"}],
    "max_tokens": 300,
    "temperature": 0.7,
}


class TestOpenAITransport:
    """Test direct provider calls."""

    @patch("vibeprompt.core.transports.OpenAI")
    def test_client_never_retries(self, mock_openai):
        OpenAITransport(api_key="sk-test", base_url="https://api.openai.com/v1")
        mock_openai.assert_called_once_with(
            api_key="sk-test", base_url="https://api.openai.com/v1", max_retries=0
        )

    def test_send_forwards_payload(self):
        client = MagicMock()
        client.chat.completions.create.return_value.model_dump.return_value = {"choices": []}
        transport = OpenAITransport(api_key="sk-test", base_url="unused", client=client)

        assert transport.send(PAYLOAD) == {"choices": []}
        client.chat.completions.create.assert_called_once_with(**PAYLOAD)


class TestRelayTransport:
    """Test relay calls."""

    def test_posts_payload_as_json(self):
        session = MagicMock()
        session.post.return_value.ok = True
        session.post.return_value.json.return_value = {"choices": []}
        transport = RelayTransport("http://localhost:8000/api/chat", session=session)

        assert transport.send(PAYLOAD) == {"choices": []}
        session.post.assert_called_once_with("http://localhost:8000/api/chat", json=PAYLOAD)

    def test_error_status_raises(self):
        session = MagicMock()
        session.post.return_value.ok = False
        session.post.return_value.status_code = 500
        session.post.return_value.reason = "Internal Server Error"
        transport = RelayTransport("http://localhost:8000/api/chat", session=session)

        with pytest.raises(TransportError) as exc_info:
            transport.send(PAYLOAD)
        assert exc_info.value.status_code == 500


class TestCreateTransport:
    """Test transport selection."""

    def test_relay_mode(self):
        transport = create_transport(GatewayConfig(mode="relay", relay_url="http://relay/api/chat"))
        assert isinstance(transport, RelayTransport)
        assert transport.relay_url == "http://relay/api/chat"

    @patch("vibeprompt.core.transports.OpenAI")
    def test_direct_mode(self, mock_openai):
        transport = create_transport(GatewayConfig(mode="direct", api_key="sk-test"))
        assert isinstance(transport, OpenAITransport)

    def test_direct_mode_without_key(self):
        assert create_transport(GatewayConfig(mode="direct")) is None
