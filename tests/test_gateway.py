"""Tests for the model gateway."""

from unittest.mock import patch

import pytest
import requests

from vibeprompt.core import gateway as gateway_module
from vibeprompt.core.config import GatewayConfig
from vibeprompt.core.gateway import (
    DESCRIPTION_ENHANCEMENT,
    EMPTY_RESPONSE_MESSAGE,
    ERROR_MESSAGE,
    FEATURE_SUGGESTIONS,
    FINAL_SPECIFICATION,
    MISSING_CREDENTIAL_MESSAGE,
    PROJECT_GUIDANCE,
    TECH_OPTIONS,
    TECH_RECOMMENDATION,
    Completion,
    Fallback,
    FallbackReason,
    ModelGateway,
)
from vibeprompt.core.llm_base import ChatMessage
from vibeprompt.core.transports import TransportError

MESSAGES = [ChatMessage.system("You are helpful."), ChatMessage.user("Suggest features.")]


def chat_response(content):
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}


@pytest.fixture(autouse=True)
def quiet_logger():
    with patch.object(gateway_module, "logger") as mock_logger:
        yield mock_logger


class TestTaskProfiles:
    """Test the per-task token budgets and temperatures."""

    @pytest.mark.parametrize(
        "profile,max_tokens,temperature",
        [
            (PROJECT_GUIDANCE, 500, 0.7),
            (FEATURE_SUGGESTIONS, 300, 0.7),
            (DESCRIPTION_ENHANCEMENT, 400, 0.7),
            (TECH_OPTIONS, 2000, 0.3),
            (TECH_RECOMMENDATION, 400, 0.7),
            (FINAL_SPECIFICATION, 3000, 0.2),
        ],
    )
    def test_profile_values(self, profile, max_tokens, temperature):
        assert profile.max_tokens == max_tokens
        assert profile.temperature == temperature


class TestModelGateway:
    """Test ModelGateway request handling."""

    def test_payload_shape(self, gateway):
        """Test the request body carries exactly model, messages, max_tokens and temperature."""
        payload = gateway.build_payload(MESSAGES, TECH_OPTIONS)
        assert payload == {
            "model": "gpt-4",
            "messages": [
                {"role": "system", "content": "You are helpful."},
                {"role": "user", "content": "Suggest features."},
            ],
            "max_tokens": 2000,
            "temperature": 0.3,
        }

    def test_complete_returns_first_choice(self, gateway, mock_transport):
        assert gateway.complete(MESSAGES, FEATURE_SUGGESTIONS) == "Hello from the model"
        mock_transport.send.assert_called_once_with(gateway.build_payload(MESSAGES, FEATURE_SUGGESTIONS))

    def test_complete_result_success(self, gateway):
        result = gateway.complete_result(MESSAGES)
        assert isinstance(result, Completion)
        assert result.ok

    @pytest.mark.parametrize(
        "error",
        [
            RuntimeError("boom"),
            requests.ConnectionError("refused"),
            TransportError(502, "Bad Gateway"),
            ValueError("not json"),
        ],
    )
    def test_any_failure_yields_fixed_message(self, gateway, mock_transport, error):
        """Test every transport failure collapses to the same text."""
        mock_transport.send.side_effect = error
        assert gateway.complete(MESSAGES) == ERROR_MESSAGE

        result = gateway.complete_result(MESSAGES)
        assert isinstance(result, Fallback)
        assert result.reason == FallbackReason.TRANSPORT_ERROR
        assert not result.ok

    def test_single_attempt(self, gateway, mock_transport):
        """Test failures are not retried."""
        mock_transport.send.side_effect = RuntimeError("boom")
        gateway.complete(MESSAGES)
        assert mock_transport.send.call_count == 1

    @pytest.mark.parametrize("body", [{}, {"error": {"message": "bad"}}])
    def test_malformed_body_is_an_error(self, gateway, mock_transport, body):
        mock_transport.send.return_value = body
        assert gateway.complete(MESSAGES) == ERROR_MESSAGE

    @pytest.mark.parametrize("body", [{"choices": []}, chat_response(""), chat_response(None)])
    def test_empty_content(self, gateway, mock_transport, body):
        mock_transport.send.return_value = body
        result = gateway.complete_result(MESSAGES)
        assert result == Fallback(FallbackReason.EMPTY_RESPONSE, EMPTY_RESPONSE_MESSAGE)

    def test_missing_credential_makes_no_calls(self, mock_transport):
        """Test direct mode without a key never touches the transport."""
        gateway = ModelGateway(GatewayConfig(mode="direct", api_key=None), transport=mock_transport)
        assert gateway.missing_credential
        assert gateway.complete(MESSAGES) == MISSING_CREDENTIAL_MESSAGE
        assert gateway.complete_result(MESSAGES).reason == FallbackReason.MISSING_CREDENTIAL
        mock_transport.send.assert_not_called()

    def test_relay_mode_needs_no_key(self, mock_transport):
        gateway = ModelGateway(GatewayConfig(mode="relay", api_key=None), transport=mock_transport)
        assert not gateway.missing_credential
        assert gateway.complete(MESSAGES) == "Hello from the model"

    def test_logs_call_without_credential(self, gateway, quiet_logger):
        gateway.complete(MESSAGES, FEATURE_SUGGESTIONS)
        quiet_logger.log_llm_call.assert_called_once()
        kwargs = quiet_logger.log_llm_call.call_args.kwargs
        assert kwargs["task"] == "feature_suggestions"
        assert kwargs["provider"] == "mock"
        assert "sk-test-key" not in repr(quiet_logger.mock_calls)

    def test_failure_logged(self, gateway, mock_transport, quiet_logger):
        mock_transport.send.side_effect = RuntimeError("boom")
        gateway.complete(MESSAGES)
        quiet_logger.error.assert_called_once()
        assert "sk-test-key" not in repr(quiet_logger.mock_calls)


class TestGatewayConfig:
    """Test GatewayConfig."""

    def test_repr_redacts_key(self, gateway_config):
        assert "sk-test-key" not in repr(gateway_config)
        assert "***" in repr(gateway_config)

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            GatewayConfig(mode="carrier-pigeon")
