"""
Unit tests for PaymentProcessor.
"""
from decimal import Decimal
from structlog.testing import capture_logs

from restaurant_dip.core.domain.entities import Order
from restaurant_dip.core.use_cases import PaymentProcessor
from restaurant_dip.infrastructure.payments import CreditCardStrategy, DigitalWalletStrategy, CashStrategy


class TestPaymentProcessor:
    """Test cases for PaymentProcessor."""

    def test_successful_payment_charges_total_once(self, accepting_strategy):
        """Test that a valid payment is charged exactly once with the order total."""
        order = Order(6, "Ayam Bakar Taliwang", 45.00).set_payment_info("credit_card", "1234567890123456")
        processor = PaymentProcessor(accepting_strategy)

        assert processor.process_order_payment(order) is True

        assert accepting_strategy.calls == [
            ("validate_payment", "1234567890123456"),
            ("process_payment", Decimal("45.00")),
        ]
        assert accepting_strategy.charged == [Decimal("45.00")]

    def test_failed_validation_charges_nothing(self, rejecting_strategy):
        """Test that a rejected payment is not processed."""
        order = Order(6, "Ayam Bakar Taliwang", 45.00).set_payment_info("credit_card", "123")
        processor = PaymentProcessor(rejecting_strategy)

        with capture_logs() as logs:
            assert processor.process_order_payment(order) is False

        assert rejecting_strategy.charged == []
        assert [name for name, _ in rejecting_strategy.calls] == ["validate_payment"]
        assert logs[-1]["event"] == "Payment validation failed"
        assert logs[-1]["log_level"] == "warning"

    def test_missing_payment_info_is_validated_as_empty(self, accepting_strategy):
        """Test that an order without payment details is validated with an empty string."""
        processor = PaymentProcessor(accepting_strategy)

        processor.process_order_payment(Order(1, "Nasi Gudeg Special", 35.00))

        assert accepting_strategy.calls[0] == ("validate_payment", "")

    def test_set_strategy_swaps_behaviour(self, accepting_strategy, rejecting_strategy):
        """Test runtime strategy switching."""
        order = Order(7, "Soto Betawi", 24.00)
        processor = PaymentProcessor(rejecting_strategy)
        assert processor.process_order_payment(order) is False

        processor.set_strategy(accepting_strategy)

        assert processor.process_order_payment(order) is True
        assert processor.get_current_strategy() == "Mock Payment"
        assert accepting_strategy.charged == [Decimal("24.00")]
        assert rejecting_strategy.charged == []

    def test_strategy_can_be_shared_between_processors(self, accepting_strategy):
        """Test that one strategy instance can back several processors."""
        first = PaymentProcessor(accepting_strategy)
        second = PaymentProcessor(CashStrategy())
        second.set_strategy(accepting_strategy)

        first.process_order_payment(Order(1, "A", 1))
        second.process_order_payment(Order(2, "B", 2))

        assert accepting_strategy.charged == [Decimal("1"), Decimal("2")]

    def test_real_strategies_follow_their_validation_rules(self):
        """Test the card, wallet and cash sequence with real strategies."""
        order = Order(6, "Ayam Bakar Taliwang", 45.00)
        processor = PaymentProcessor(CreditCardStrategy())
        assert processor.get_current_strategy() == "Credit Card"

        assert processor.process_order_payment(order.set_payment_info("credit_card", "1234567890123456")) is True
        assert processor.process_order_payment(order.set_payment_info("credit_card", "1234")) is False

        processor.set_strategy(DigitalWalletStrategy())
        assert processor.get_current_strategy() == "Digital Wallet"
        assert processor.process_order_payment(order.set_payment_info("wallet", "wallet123")) is True
        assert processor.process_order_payment(order.set_payment_info("wallet", "")) is False

        processor.set_strategy(CashStrategy())
        assert processor.get_current_strategy() == "Cash"
        assert processor.process_order_payment(order.set_payment_info("cash", "")) is True

    def test_strategy_change_is_logged(self):
        """Test that swapping strategies is reported."""
        processor = PaymentProcessor(CashStrategy())

        with capture_logs() as logs:
            processor.set_strategy(DigitalWalletStrategy())

        assert logs == [{"event": "Payment strategy changed", "log_level": "info", "strategy": "Digital Wallet"}]
