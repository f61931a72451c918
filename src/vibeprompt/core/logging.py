"""Structured logging for vibeprompt."""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pythonjsonlogger import jsonlogger


class LogLevel(str, Enum):
    """Log level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _build_formatter(json_output: bool) -> logging.Formatter:
    if json_output:
        return jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "asctime": "timestamp"},
        )
    return logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


class StructuredLogger:
    """
    Structured logger with JSON output support and context tracking.

    Context keyword arguments are attached to the log record, so they show up
    as fields when JSON output is enabled. Used for model gateway calls,
    relay forwarding and wizard request bookkeeping.
    """

    def __init__(
        self,
        name: str = "vibeprompt",
        level: LogLevel = LogLevel.WARNING,
        json_output: bool = False,
        log_file: Optional[Path] = None,
    ):
        """
        Initialize structured logger.

        Args:
            name: Logger name
            level: Log level
            json_output: If True, output JSON-formatted logs
            log_file: Optional file path to write logs to
        """
        self.name = name
        self.level = level
        self.json_output = json_output
        self.log_file = log_file

        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.value))
        self.logger.propagate = False
        self.logger.handlers.clear()

        formatter = _build_formatter(json_output)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if log_file:
            self._add_file_handler(log_file)

    def _add_file_handler(self, log_file: Path) -> None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(_build_formatter(self.json_output))
        self.logger.addHandler(file_handler)
        self.log_file = log_file

    def reconfigure(
        self,
        level: Optional[LogLevel] = None,
        json_output: Optional[bool] = None,
        log_file: Optional[Path] = None,
    ) -> None:
        """Apply new settings to the existing handlers."""
        if level is not None:
            self.level = level
            self.logger.setLevel(getattr(logging, level.value))
        if json_output is not None and json_output != self.json_output:
            self.json_output = json_output
            for handler in self.logger.handlers:
                handler.setFormatter(_build_formatter(json_output))
        if log_file is not None and self.log_file != log_file:
            self._add_file_handler(log_file)

    def _log_with_context(
        self,
        level: int,
        message: str,
        context: Optional[dict[str, Any]] = None,
        exc_info: bool = False,
        **kwargs: Any,
    ) -> None:
        if context:
            kwargs.update(context)
        self.logger.log(level, message, extra=kwargs or None, exc_info=exc_info)

    def debug(self, message: str, context: Optional[dict[str, Any]] = None, **kwargs: Any) -> None:
        """Log debug message."""
        self._log_with_context(logging.DEBUG, message, context, **kwargs)

    def info(self, message: str, context: Optional[dict[str, Any]] = None, **kwargs: Any) -> None:
        """Log info message."""
        self._log_with_context(logging.INFO, message, context, **kwargs)

    def warning(self, message: str, context: Optional[dict[str, Any]] = None, **kwargs: Any) -> None:
        """Log warning message."""
        self._log_with_context(logging.WARNING, message, context, **kwargs)

    def error(
        self,
        message: str,
        context: Optional[dict[str, Any]] = None,
        exc_info: bool = False,
        **kwargs: Any,
    ) -> None:
        """Log error message."""
        self._log_with_context(logging.ERROR, message, context, exc_info=exc_info, **kwargs)

    def log_llm_call(
        self,
        provider: str,
        model: str,
        task: str,
        prompt: str,
        response: str,
        latency_ms: Optional[float] = None,
        **kwargs: Any,
    ) -> None:
        """
        Log a model call with structured metadata.

        Prompts and responses are truncated to short previews. Credentials
        are never passed here.

        Args:
            provider: Transport used ("openai" or "relay")
            model: Model name
            task: Task profile name (e.g. "feature_suggestions")
            prompt: Concatenated message content
            response: Response text
            latency_ms: Request latency in milliseconds
            **kwargs: Additional metadata
        """
        prompt_preview = prompt[:200] + "..." if len(prompt) > 200 else prompt
        response_preview = response[:200] + "..." if len(response) > 200 else response

        context = {
            "event_type": "llm_call",
            "provider": provider,
            "model": model,
            "task": task,
            "prompt_length": len(prompt),
            "response_length": len(response),
            "prompt_preview": prompt_preview,
            "response_preview": response_preview,
        }
        if latency_ms is not None:
            context["latency_ms"] = latency_ms
        context.update(kwargs)

        self.info(f"LLM call: {provider}/{model} ({task})", context=context)


# Global logger instance
_default_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "vibeprompt",
    level: Optional[LogLevel] = None,
    json_output: Optional[bool] = None,
    log_file: Optional[Path] = None,
) -> StructuredLogger:
    """
    Get or create the shared structured logger.

    All modules share one underlying "vibeprompt" logger; ``name`` is only
    used the first time the logger is created.

    Args:
        name: Logger name
        level: Log level (if None, keeps the current level)
        json_output: If True, output JSON-formatted logs (if None, keeps current setting)
        log_file: Optional file path to write logs to

    Returns:
        StructuredLogger instance
    """
    global _default_logger

    if _default_logger is None:
        _default_logger = StructuredLogger(
            name=name.split(".")[0],
            level=level or LogLevel.WARNING,
            json_output=json_output or False,
            log_file=log_file,
        )
    else:
        _default_logger.reconfigure(level=level, json_output=json_output, log_file=log_file)

    return _default_logger


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
    log_file: Optional[str] = None,
) -> StructuredLogger:
    """
    Configure global logging settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: If True, output JSON-formatted logs
        log_file: Optional file path to write logs to

    Returns:
        Configured StructuredLogger instance
    """
    log_level = LogLevel[level.upper()]
    log_path = Path(log_file) if log_file else None

    return get_logger(level=log_level, json_output=json_output, log_file=log_path)
