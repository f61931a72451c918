"""Model gateway: the single point where wizard prompts reach the language model."""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

from vibeprompt.core.config import GatewayConfig
from vibeprompt.core.llm_base import ChatMessage, ChatTransport
from vibeprompt.core.logging import get_logger
from vibeprompt.core.transports import create_transport

logger = get_logger("vibeprompt.gateway")

ERROR_MESSAGE = "Sorry, I encountered an error. Please try again."
EMPTY_RESPONSE_MESSAGE = "No response generated"
MISSING_CREDENTIAL_MESSAGE = (
    "Please add your OpenAI API key to your vibeprompt configuration "
    "(OPENAI_API_KEY or --api-key) to enable AI assistance."
)


@dataclass(frozen=True)
class TaskProfile:
    """Output budget and sampling temperature for one kind of request."""

    name: str
    max_tokens: int
    temperature: float


PROJECT_GUIDANCE = TaskProfile("project_guidance", max_tokens=500, temperature=0.7)
FEATURE_SUGGESTIONS = TaskProfile("feature_suggestions", max_tokens=300, temperature=0.7)
DESCRIPTION_ENHANCEMENT = TaskProfile("description_enhancement", max_tokens=400, temperature=0.7)
TECH_OPTIONS = TaskProfile("tech_options", max_tokens=2000, temperature=0.3)
TECH_RECOMMENDATION = TaskProfile("tech_recommendation", max_tokens=400, temperature=0.7)
FINAL_SPECIFICATION = TaskProfile("final_specification", max_tokens=3000, temperature=0.2)


class FallbackReason(str, Enum):
    """Why the gateway answered with canned text instead of model output."""

    MISSING_CREDENTIAL = "missing_credential"
    TRANSPORT_ERROR = "transport_error"
    EMPTY_RESPONSE = "empty_response"


@dataclass(frozen=True)
class Completion:
    """Text generated by the model."""

    text: str
    ok = True


@dataclass(frozen=True)
class Fallback:
    """Canned text returned in place of a model answer."""

    reason: FallbackReason
    text: str
    detail: str = ""
    ok = False


GatewayResult = Union[Completion, Fallback]


class ModelGateway:
    """
    Sends role-tagged messages to the model and normalizes every failure.

    Exactly one transport call per request, no retries and no explicit
    timeout. Nothing raised by the transport escapes: callers always get a
    result (``complete_result``) or a string (``complete``).
    """

    def __init__(self, config: GatewayConfig, transport: Optional[ChatTransport] = None):
        """
        Initialize gateway.

        Args:
            config: Resolved gateway configuration (model, mode, credential)
            transport: Transport override; built from ``config`` when omitted
        """
        self.config = config
        self.model = config.model
        self.missing_credential = config.mode == "direct" and not config.has_credential

        if self.missing_credential:
            logger.warning(
                "OpenAI API key not found. Set OPENAI_API_KEY or pass --api-key; "
                "AI assistance is disabled until then."
            )
            self.transport = transport
        else:
            self.transport = transport or create_transport(config)

    def build_payload(self, messages: Sequence[ChatMessage], profile: TaskProfile) -> dict:
        """Serialize a request body for the chat-completion endpoint."""
        return {
            "model": self.model,
            "messages": [message.model_dump() for message in messages],
            "max_tokens": profile.max_tokens,
            "temperature": profile.temperature,
        }

    def complete_result(
        self,
        messages: Sequence[ChatMessage],
        profile: TaskProfile = FINAL_SPECIFICATION,
    ) -> GatewayResult:
        """
        Run one chat completion.

        Args:
            messages: Ordered system/user/assistant messages
            profile: Task profile selecting max_tokens and temperature

        Returns:
            Completion with the first choice's text, or a Fallback
        """
        if self.missing_credential:
            return Fallback(FallbackReason.MISSING_CREDENTIAL, MISSING_CREDENTIAL_MESSAGE)

        payload = self.build_payload(messages, profile)
        prompt_text = "\n\n".join(message.content for message in messages)
        provider = getattr(self.transport, "name", "custom")
        start_time = time.time()

        try:
            data = self.transport.send(payload)
            text = _first_choice_content(data)
        except Exception as e:
            latency_ms = (time.time() - start_time) * 1000
            logger.error(
                f"LLM call failed: {provider}/{self.model} ({profile.name})",
                context={
                    "event_type": "llm_call_failed",
                    "provider": provider,
                    "model": self.model,
                    "task": profile.name,
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "latency_ms": latency_ms,
                },
            )
            return Fallback(FallbackReason.TRANSPORT_ERROR, ERROR_MESSAGE, detail=str(e))

        latency_ms = (time.time() - start_time) * 1000
        logger.log_llm_call(
            provider=provider,
            model=self.model,
            task=profile.name,
            prompt=prompt_text,
            response=text or "",
            latency_ms=latency_ms,
        )

        if not text:
            return Fallback(FallbackReason.EMPTY_RESPONSE, EMPTY_RESPONSE_MESSAGE)
        return Completion(text)

    def complete(
        self,
        messages: Sequence[ChatMessage],
        profile: TaskProfile = FINAL_SPECIFICATION,
    ) -> str:
        """Plain-text variant of ``complete_result``; fallbacks collapse to their text."""
        return self.complete_result(messages, profile).text


def _first_choice_content(data: dict) -> Optional[str]:
    """
    Pull ``choices[0].message.content`` out of a response body.

    A body without a ``choices`` list raises; an empty list means the model
    produced nothing.
    """
    choices = data["choices"]
    if not choices:
        return None
    message = choices[0].get("message") or {}
    return message.get("content")


def create_gateway(config: GatewayConfig) -> ModelGateway:
    """
    Create a gateway for the configured mode.

    Args:
        config: Resolved gateway configuration

    Returns:
        ModelGateway using the direct OpenAI transport or the relay transport
    """
    return ModelGateway(config)
