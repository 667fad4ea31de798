"""
Astral Crisis Logging Configuration

Structured logging with:
- JSON output for log aggregation outside development
- Human-readable console output for development
- Redaction of credentials and raw user text

SECURITY: Text under analysis may describe self-harm. It must never
reach log sinks; analyzers log lengths, levels and scores only.
"""

import logging
import sys
from typing import Any

import structlog

from astral_crisis import __version__
from astral_crisis.config.settings import Settings


# Keys whose values are replaced before rendering
SENSITIVE_PATTERNS: frozenset[str] = frozenset({
    "password",
    "token",
    "secret",
    "api_key",
    "authorization",
    "credential",
})

# Keys that may carry raw user text
USER_TEXT_KEYS: frozenset[str] = frozenset({
    "text",
    "raw_text",
    "message",
    "content",
    "matched_text",
})


def _redact_sensitive_data(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """
    Redact sensitive data from log entries.

    The "event" key is the log message itself and is left untouched.

    Args:
        logger: Logger instance (unused but required by structlog)
        method_name: Log method name (unused but required by structlog)
        event_dict: Log event dictionary

    Returns:
        Sanitized event dictionary
    """
    def redact_value(key: str, value: Any) -> Any:
        key_lower = key.lower()
        if key_lower in USER_TEXT_KEYS:
            return "[REDACTED]"
        for pattern in SENSITIVE_PATTERNS:
            if pattern in key_lower:
                return "[REDACTED]"

        if isinstance(value, dict):
            return {k: redact_value(k, v) for k, v in value.items()}
        elif isinstance(value, list):
            return [redact_value(key, item) for item in value]

        return value

    return {
        key: value if key == "event" else redact_value(key, value)
        for key, value in event_dict.items()
    }


def _add_service_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add library-level context to all log entries."""
    event_dict["service"] = "astral-crisis"
    event_dict["version"] = __version__
    return event_dict


def get_processors(is_development: bool) -> list[Any]:
    """
    Get structlog processors based on environment.

    Args:
        is_development: Whether running in development mode

    Returns:
        List of log processors
    """
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _redact_sensitive_data,
        _add_service_context,
    ]

    if is_development:
        shared_processors.extend([
            structlog.processors.ExceptionPrettyPrinter(),
            structlog.dev.ConsoleRenderer(colors=True),
        ])
    else:
        shared_processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])

    return shared_processors


def configure_logging(settings: Settings) -> None:
    """
    Configure library logging.

    Should be called once by the embedding application at startup.
    Without it structlog falls back to its own defaults.

    Args:
        settings: Library settings
    """
    is_development = settings.env == "development"
    log_level = getattr(logging, settings.log_level.upper())

    structlog.configure(
        processors=get_processors(is_development),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
