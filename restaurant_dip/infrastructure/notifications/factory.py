"""Notification factory: configuration key to notification channel."""

from enum import Enum
from typing import Dict, Type, Union

from restaurant_dip.core.domain.services import NotificationService
from restaurant_dip.infrastructure.notifications.channels import (
    EmailNotification,
    SMSNotification,
    SlackNotification
)
from restaurant_dip.infrastructure.registry import ServiceRegistry
from restaurant_dip.shared.types import NotificationType


class NotificationFactory(ServiceRegistry[NotificationService]):
    """Creates notification channels from keys such as ``"slack"``."""

    service_kind = "notification"
    _registry: Dict[str, Type[NotificationService]] = {
        NotificationType.EMAIL.value: EmailNotification,
        NotificationType.SMS.value: SMSNotification,
        NotificationType.SLACK.value: SlackNotification,
    }

    @classmethod
    def create_notification(cls, notification_type: Union[str, Enum]) -> NotificationService:
        return cls.create(notification_type)
