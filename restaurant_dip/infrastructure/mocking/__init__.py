"""
Test doubles that stand in for real services behind the interfaces.
"""

from .doubles import RecordingDatabase, RecordingNotification, RecordingPaymentStrategy

__all__ = [
    "RecordingDatabase",
    "RecordingNotification",
    "RecordingPaymentStrategy",
]
