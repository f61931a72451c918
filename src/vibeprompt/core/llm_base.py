"""Message type and transport interface shared by the model gateway."""

from typing import Any, Literal, Protocol

from pydantic import BaseModel


class ChatMessage(BaseModel):
    """One role-tagged chat message."""

    role: Literal["system", "user", "assistant"]
    content: str

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(role="user", content=content)


class ChatTransport(Protocol):
    """
    Protocol/interface for chat-completion transports.

    Implementations post one request body and hand back the decoded JSON
    response. They do not retry.
    """

    name: str

    def send(self, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Send a chat-completion request.

        Args:
            payload: Request body with model, messages, max_tokens and temperature

        Returns:
            Decoded JSON response body

        Raises:
            Exception: On transport failure or a non-success status
        """
        ...
