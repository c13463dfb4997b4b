"""
Logging redaction helpers.
Redacts holdings API credentials from log messages.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable


_PATTERNS: Iterable[tuple[re.Pattern, str]] = (
    # Authorization: Bearer <token>
    (re.compile(r"(Bearer\s+)([A-Za-z0-9\-\._~+/]+=*)"), r"\1[REDACTED]"),
    # Token in a query string or key/value dump
    (re.compile(r"(?i)(access_token|api_token|token)\s*[:=]\s*([A-Za-z0-9\-\._]+)"), r"\1=[REDACTED]"),
)


def redact_message(message: str) -> str:
    redacted = message
    for pattern, replacement in _PATTERNS:
        redacted = pattern.sub(replacement, redacted)
    return redacted


class RedactingFilter(logging.Filter):
    """Filter that redacts sensitive data from log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # Malformed args; let the handler report it
            return True
        record.msg = redact_message(message)
        record.args = ()
        return True


def install_redaction_filter() -> None:
    """Attach the redaction filter to every root handler."""
    root = logging.getLogger()
    for handler in root.handlers:
        # Avoid duplicate filters
        if not any(isinstance(f, RedactingFilter) for f in handler.filters):
            handler.addFilter(RedactingFilter())
