"""
UTILITIES - Shared logging setup, constants and helpers

This module provides common utilities used across the application:
1. Structured JSON logging configuration
2. Constants and configuration defaults
3. Small formatting helpers for error messages
"""

import logging
import json
from datetime import datetime, timezone
from typing import List


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        # Add exception info if present
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


# Configure structured logging once for the entire app
def setup_logging(level: int = logging.INFO):
    """Setup structured JSON logging on the root logger."""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Avoid stacking handlers when the module is reloaded
    if any(isinstance(h.formatter, JSONFormatter) for h in logger.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)


# Initialize logging
setup_logging()


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger instance with consistent formatting."""
    return logging.getLogger(name)


# Constants
class Constants:
    """Application constants in one place."""

    # LLM settings
    DEFAULT_MODEL = "gpt-4o-mini"
    DEFAULT_TEMPERATURE = 0.3
    DEFAULT_TOP_P = 0.95
    DEFAULT_MAX_TOKENS = 1000
    DEFAULT_TIMEOUT = 30  # seconds

    # HTTP
    DEFAULT_CORS_ORIGINS = "http://localhost:3000"

    # Fallback response content
    ERROR_PREFIX = "Error: "
    ERROR_PITFALL = "Error occurred"
    ERROR_STRATEGY = "Please try again"
    ERROR_RESOURCE = "Contact support"
    ERROR_DISCLAIMER = "This error response was generated due to a system issue."

    # Policy replies the model is told to use
    FINANCIAL_ADVICE_REFUSAL = "I'm sorry, I can't provide financial advice."
    CLARIFY_SCENARIO = "Please provide a clear scenario description."


def format_error_message(error: Exception) -> str:
    """Format error message for logging and error payloads."""
    return f"{type(error).__name__}: {str(error)}"


def split_csv(value: str) -> List[str]:
    """Split a comma-separated setting into trimmed, non-empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]
