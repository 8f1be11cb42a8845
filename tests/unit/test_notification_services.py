"""
Unit tests for notification channels and the notification factory.
"""
import pytest
from structlog.testing import capture_logs

from restaurant_dip.core.domain.services import NotificationService
from restaurant_dip.infrastructure.notifications import (
    NotificationFactory,
    EmailNotification,
    SMSNotification,
    SlackNotification
)
from restaurant_dip.shared.exceptions import UnknownServiceTypeError
from restaurant_dip.shared.types import NotificationType


KNOWN_CHANNELS = [
    ("email", EmailNotification, "Email"),
    ("sms", SMSNotification, "SMS"),
    ("slack", SlackNotification, "Slack"),
]


class TestNotificationChannels:
    """Test cases for the simulated channels."""

    @pytest.mark.parametrize("key,implementation,label", KNOWN_CHANNELS)
    def test_send_logs_message(self, key, implementation, label):
        """Test that delivery is simulated with a log line tagged by channel."""
        with capture_logs() as logs:
            implementation().send("Order 2 processed successfully!")

        assert logs == [{
            "event": "Sending notification",
            "log_level": "info",
            "channel": label,
            "message": "Order 2 processed successfully!",
        }]


class TestNotificationFactory:
    """Test cases for NotificationFactory."""

    @pytest.mark.parametrize("key,implementation,label", KNOWN_CHANNELS)
    def test_create_known_channel(self, key, implementation, label):
        """Test that every known key yields the matching channel."""
        channel = NotificationFactory.create_notification(key)

        assert isinstance(channel, implementation)
        assert isinstance(channel, NotificationService)
        assert channel.get_type() == label

    def test_keys_are_case_insensitive(self):
        """Test that keys are matched regardless of case."""
        assert isinstance(NotificationFactory.create_notification("Slack"), SlackNotification)

    def test_accepts_enum_keys(self):
        """Test that NotificationType members work as keys."""
        assert isinstance(NotificationFactory.create_notification(NotificationType.SMS), SMSNotification)

    @pytest.mark.parametrize("key", ["pager", "", "e-mail"])
    def test_unknown_key_raises(self, key):
        """Test that unknown keys fail with an invalid-argument error."""
        with pytest.raises(ValueError, match="Unknown notification type") as exc_info:
            NotificationFactory.create_notification(key)

        assert isinstance(exc_info.value, UnknownServiceTypeError)
        assert exc_info.value.key == key
        assert exc_info.value.service_kind == "notification"

    def test_available_types(self):
        """Test listing of known keys."""
        assert NotificationFactory.available_types() == ["email", "slack", "sms"]
