"""
Logging sanitization for payment data protection.

This module makes sure card numbers and other payment details never reach
the log output, even if a caller binds them to a log event by mistake.
"""

import re
from typing import Any, Dict, List, Optional
from copy import deepcopy


class LogSanitizer:
    """Sanitizes sensitive data from log output."""

    # Sensitive field patterns (case-insensitive substring match on keys)
    SENSITIVE_FIELD_PATTERNS = {
        'payment_info', 'card_number', 'credit_card', 'cvv',
        'password', 'secret', 'token', 'api_key', 'wallet_id'
    }

    # Sensitive value patterns (regex)
    SENSITIVE_VALUE_PATTERNS = [
        # Card numbers, with or without separators
        r'\b\d{4}[\s-]?\d{4}[\s-]?\d{4}[\s-]?\d{4}\b',
        # Email addresses
        r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b',
    ]

    REPLACEMENT_TEXT = "***REDACTED***"

    @classmethod
    def sanitize_dict(cls, data: Dict[str, Any], max_depth: int = 10) -> Dict[str, Any]:
        """
        Recursively sanitize a dictionary, removing sensitive data.

        Args:
            data: Dictionary to sanitize
            max_depth: Maximum recursion depth

        Returns:
            Sanitized dictionary with sensitive fields redacted
        """
        if max_depth <= 0:
            return {"error": "max_depth_reached"}

        if not isinstance(data, dict):
            return cls._sanitize_value(data)

        sanitized = {}

        for key, value in data.items():
            sanitized_key = str(key).lower()

            if any(pattern in sanitized_key for pattern in cls.SENSITIVE_FIELD_PATTERNS):
                sanitized[key] = cls.REPLACEMENT_TEXT
            elif isinstance(value, dict):
                sanitized[key] = cls.sanitize_dict(value, max_depth - 1)
            elif isinstance(value, list):
                sanitized[key] = cls._sanitize_list(value, max_depth - 1)
            else:
                sanitized[key] = cls._sanitize_value(value)

        return sanitized

    @classmethod
    def _sanitize_list(cls, data: List[Any], max_depth: int) -> List[Any]:
        """Sanitize a list of values."""
        if max_depth <= 0:
            return ["max_depth_reached"]

        sanitized = []
        for item in data:
            if isinstance(item, dict):
                sanitized.append(cls.sanitize_dict(item, max_depth - 1))
            elif isinstance(item, list):
                sanitized.append(cls._sanitize_list(item, max_depth - 1))
            else:
                sanitized.append(cls._sanitize_value(item))

        return sanitized

    @classmethod
    def _sanitize_value(cls, value: Any) -> Any:
        """Mask sensitive patterns inside a single string value."""
        if not isinstance(value, str):
            return value
        return cls.sanitize_string(value)

    @classmethod
    def sanitize_string(cls, text: str) -> str:
        """
        Sanitize a string by replacing sensitive patterns.

        Args:
            text: String to sanitize

        Returns:
            Sanitized string with sensitive data redacted
        """
        if not isinstance(text, str):
            return str(text)

        sanitized = text
        for pattern in cls.SENSITIVE_VALUE_PATTERNS:
            sanitized = re.sub(pattern, cls.REPLACEMENT_TEXT, sanitized, flags=re.IGNORECASE)

        return sanitized


class StructlogSanitizer:
    """Structlog processor for sanitizing log events."""

    def __init__(self, sanitizer: Optional[LogSanitizer] = None):
        self.sanitizer = sanitizer or LogSanitizer()

    def __call__(self, logger, method_name, event_dict):
        """
        Structlog processor that sanitizes event data.

        Args:
            logger: Logger instance
            method_name: Logging method name
            event_dict: Event dictionary to sanitize

        Returns:
            Sanitized event dictionary
        """
        try:
            return self.sanitizer.sanitize_dict(deepcopy(event_dict))
        except Exception as e:
            # Never fall back to the unsanitized event
            return {
                "event": "log_sanitization_error",
                "error": str(e),
                "original_event_type": type(event_dict).__name__
            }
