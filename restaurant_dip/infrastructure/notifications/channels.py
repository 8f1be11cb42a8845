"""
Simulated notification channels.

Delivery is a log line tagged with the channel name.
"""

import structlog

from restaurant_dip.core.domain.services import NotificationService

logger = structlog.get_logger(__name__)


class SimulatedNotification(NotificationService):
    """Base class for the simulated channels."""

    type_name: str = ""

    def send(self, message: str) -> None:
        logger.info("Sending notification", channel=self.type_name, message=message)

    def get_type(self) -> str:
        return self.type_name

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class EmailNotification(SimulatedNotification):
    type_name = "Email"


class SMSNotification(SimulatedNotification):
    type_name = "SMS"


class SlackNotification(SimulatedNotification):
    type_name = "Slack"
