"""
Simulated notification channels and their factory.
"""

from .channels import SimulatedNotification, EmailNotification, SMSNotification, SlackNotification
from .factory import NotificationFactory

__all__ = [
    "SimulatedNotification",
    "EmailNotification",
    "SMSNotification",
    "SlackNotification",
    "NotificationFactory",
]
