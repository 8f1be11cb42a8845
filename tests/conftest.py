"""
Global pytest configuration and fixtures for restaurant tests.
"""
import pytest
import structlog

from restaurant_dip.core.domain.entities import Order
from restaurant_dip.infrastructure.di import cleanup_container
from restaurant_dip.infrastructure.mocking import (
    RecordingDatabase,
    RecordingNotification,
    RecordingPaymentStrategy
)
from restaurant_dip.shared.types import OrderID


@pytest.fixture(autouse=True)
def reset_global_state():
    """Drop the global container and any logging configuration after each test."""
    yield
    cleanup_container()
    structlog.reset_defaults()


@pytest.fixture
def sample_order() -> Order:
    """Sample order for testing."""
    return Order(OrderID(4), "Gado-gado Jakarta", 22.00)


@pytest.fixture
def call_log() -> list:
    """Shared call log for recording doubles."""
    return []


@pytest.fixture
def recording_database(call_log) -> RecordingDatabase:
    """Database double writing to the shared call log."""
    return RecordingDatabase(call_log)


@pytest.fixture
def recording_notification(call_log) -> RecordingNotification:
    """Notification double writing to the shared call log."""
    return RecordingNotification(call_log)


@pytest.fixture
def accepting_strategy() -> RecordingPaymentStrategy:
    """Payment double that accepts every payment."""
    return RecordingPaymentStrategy(accept=True)


@pytest.fixture
def rejecting_strategy() -> RecordingPaymentStrategy:
    """Payment double that rejects every payment."""
    return RecordingPaymentStrategy(accept=False)
