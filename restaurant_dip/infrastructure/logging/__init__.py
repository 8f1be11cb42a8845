"""
Structured logging setup and log sanitization.
"""

from .config import configure_logging
from .sanitization import LogSanitizer, StructlogSanitizer

__all__ = [
    "configure_logging",
    "LogSanitizer",
    "StructlogSanitizer",
]
