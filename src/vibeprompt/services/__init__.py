"""Service layer combining prompts, the model gateway and parsers."""

from vibeprompt.services.assistant import ProjectAssistant

__all__ = ["ProjectAssistant"]
