"""Chat-completion transports: direct OpenAI calls or a credential-hiding relay."""

from typing import Any, Optional

import requests
from openai import OpenAI

from vibeprompt.core.config import GatewayConfig


class TransportError(RuntimeError):
    """Raised when the relay answers with a non-success status."""

    def __init__(self, status_code: int, detail: str = ""):
        self.status_code = status_code
        self.detail = detail
        message = f"Relay returned HTTP {status_code}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class OpenAITransport:
    """
    Calls the provider's chat-completion endpoint directly.

    The credential is visible to whoever runs this process; prefer the relay
    when the client is not trusted.
    """

    name = "openai"

    def __init__(self, api_key: str, base_url: str, client: Optional[OpenAI] = None):
        """
        Initialize direct transport.

        Args:
            api_key: Provider API key
            base_url: Provider API base URL
            client: Pre-built OpenAI client (tests)
        """
        # One attempt only: the SDK retries twice by default
        self.client = client or OpenAI(api_key=api_key, base_url=base_url, max_retries=0)

    def send(self, payload: dict[str, Any]) -> dict[str, Any]:
        completion = self.client.chat.completions.create(**payload)
        return completion.model_dump()


class RelayTransport:
    """Posts the request body to a same-origin relay that attaches the credential."""

    name = "relay"

    def __init__(self, relay_url: str, session: Optional[requests.Session] = None):
        """
        Initialize relay transport.

        Args:
            relay_url: Full URL of the relay endpoint (e.g. http://localhost:8000/api/chat)
            session: requests session to reuse (tests)
        """
        self.relay_url = relay_url
        self.session = session or requests.Session()

    def send(self, payload: dict[str, Any]) -> dict[str, Any]:
        response = self.session.post(self.relay_url, json=payload)
        if not response.ok:
            raise TransportError(response.status_code, response.reason or "")
        return response.json()


def create_transport(config: GatewayConfig):
    """
    Create the transport for the configured gateway mode.

    Args:
        config: Resolved gateway configuration

    Returns:
        Transport instance, or None in direct mode without a credential

    Raises:
        ValueError: If the mode is unknown
    """
    if config.mode == "relay":
        return RelayTransport(config.relay_url)
    if config.mode == "direct":
        if not config.has_credential:
            return None
        return OpenAITransport(api_key=config.api_key, base_url=config.base_url)
    raise ValueError(f"Unknown gateway mode: {config.mode}. Supported modes: direct, relay")
