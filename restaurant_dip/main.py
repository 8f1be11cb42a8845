"""
Restaurant management demo for the Dependency Inversion Principle.

Walks through the tightly coupled service first, then three ways of
inverting its dependencies (constructor injection, factories, strategies),
mock-based testing and container wiring driven by ``RESTAURANT_*``
environment variables.
"""

from typing import Optional

import structlog
from pydantic import ValidationError

from restaurant_dip.application.models import RestaurantConfig
from restaurant_dip.core.domain.entities import Order
from restaurant_dip.core.domain.services import PaymentStrategy
from restaurant_dip.core.use_cases import GoodRestaurantService, PaymentProcessor, RestaurantManager
from restaurant_dip.infrastructure.database import MySQLDatabase, PostgreSQLDatabase
from restaurant_dip.infrastructure.di import container_scope
from restaurant_dip.infrastructure.logging import configure_logging
from restaurant_dip.infrastructure.mocking import RecordingDatabase, RecordingNotification
from restaurant_dip.infrastructure.notifications import EmailNotification, SMSNotification
from restaurant_dip.infrastructure.payments import CreditCardStrategy, DigitalWalletStrategy, CashStrategy
from restaurant_dip.legacy.tightly_coupled import BadRestaurantService
from restaurant_dip.shared.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)


def print_separator(title: str) -> None:
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)


def print_sub_separator(title: str) -> None:
    print("\n" + "-" * 40)
    print(f"  {title}")
    print("-" * 40)


def print_lines(*lines: str) -> None:
    for line in lines:
        print(line)


def demonstrate_problem() -> None:
    print_sub_separator("PROBLEM: DIP violation")
    print_lines(
        "The service below depends directly on concrete classes:",
        "- it creates MySQLDatabaseBad itself",
        "- it creates EmailNotificationBad itself",
        "- there is no way to hand it anything else",
        "",
    )

    with BadRestaurantService() as bad_service:
        bad_service.process_order(Order(1, "Nasi Gudeg Special", 35.00))

    print_lines(
        "",
        "Problems:",
        "   1. Switching MySQL to PostgreSQL means editing the service",
        "   2. Switching email to SMS means editing the service",
        "   3. It cannot be tested without the real dependencies",
    )


def demonstrate_dependency_injection() -> None:
    print_sub_separator("SOLUTION 1: Dependency injection")
    print_lines(
        "Dependencies are passed in through the constructor and typed",
        "as interfaces, so the service never names a concrete class.",
        "",
    )

    service = GoodRestaurantService(MySQLDatabase(), EmailNotification())
    service.process_order(Order(2, "Sate Ayam Madura", 28.50))

    print("\nSwitching implementations is a one-line change for the caller:")

    service = GoodRestaurantService(PostgreSQLDatabase(), SMSNotification())
    service.process_order(Order(3, "Rendang Padang", 42.00))


def demonstrate_factory_pattern() -> None:
    print_sub_separator("SOLUTION 2: Factory pattern")
    print_lines(
        "Factories turn configuration keys into implementations,",
        "keeping creation logic in one place.",
        "",
    )

    manager = RestaurantManager()

    manager.initialize("mongodb", "slack")
    manager.process_order(Order(4, "Gado-gado Jakarta", 22.00))
    print(f"Configuration: {manager.get_configuration()}")

    print("\nSwitching configuration:")

    manager.initialize("postgresql", "email")
    manager.process_order(Order(5, "Bakso Malang", 18.50))
    print(f"Configuration: {manager.get_configuration()}")


def demonstrate_strategy_pattern() -> None:
    print_sub_separator("SOLUTION 3: Strategy pattern")
    print_lines(
        "Payment methods are interchangeable strategies behind one",
        "interface and can be swapped at runtime.",
        "",
    )

    order = Order(6, "Ayam Bakar Taliwang", 45.00)
    processor = PaymentProcessor(CreditCardStrategy())

    attempts = [
        (None, "credit_card", "1234567890123456"),
        (DigitalWalletStrategy(), "wallet", "wallet123"),
        (CashStrategy(), "cash", ""),
    ]
    for strategy, payment_type, payment_info in attempts:
        if strategy is not None:
            processor.set_strategy(strategy)
        order.set_payment_info(payment_type, payment_info)
        succeeded = processor.process_order_payment(order)
        print(f"{processor.get_current_strategy()}: {'paid' if succeeded else 'rejected'}")


def demonstrate_testing() -> None:
    print_sub_separator("TESTING: Easy mocking with DIP")
    print_lines(
        "Recording doubles replace the database and the notifier,",
        "so the service runs without any external system.",
        "",
    )

    calls = []
    service = GoodRestaurantService(RecordingDatabase(calls), RecordingNotification(calls))
    service.process_order(Order(999, "Test Order", 99.99))

    print(f"Recorded calls: {[name for name, _ in calls]}")


def demonstrate_container(config: RestaurantConfig) -> None:
    print_sub_separator("BONUS: Wiring from configuration")
    print_lines(
        "A DI container builds the object graph from RESTAURANT_* settings:",
        f"   database={config.database_type} notification={config.notification_type} "
        f"payment={config.payment_type}",
        "",
    )

    with container_scope(config) as container:
        service = container.resolve(GoodRestaurantService)
        service.process_order(Order(7, "Soto Betawi", 24.00))

        processor = container.resolve(PaymentProcessor)
        strategy = container.resolve(PaymentStrategy)
        print(f"Configuration: {service.get_configuration()} / {strategy.get_payment_type()}")
        print(f"Payment strategy in use: {processor.get_current_strategy()}")


def demonstrate_benefits() -> None:
    print_sub_separator("BENEFITS SUMMARY")
    print_lines(
        "FLEXIBILITY:     swap implementations without touching client code",
        "TESTABILITY:     inject doubles instead of real systems",
        "EXTENSIBILITY:   register new implementations with the factories",
        "MAINTAINABILITY: changes stay inside one module",
    )


def run_demo(config: RestaurantConfig) -> None:
    """Run every section of the demo in order."""
    print_separator("RESTAURANT MANAGEMENT SYSTEM - DIP DEMO")

    demonstrate_problem()
    demonstrate_dependency_injection()
    demonstrate_factory_pattern()
    demonstrate_strategy_pattern()
    demonstrate_testing()
    demonstrate_container(config)
    demonstrate_benefits()

    print_separator("DEMO COMPLETED")
    print_lines(
        "Key takeaway: depend on abstractions, not concretions.",
        "High-level modules should not depend on low-level modules;",
        "both should depend on abstractions.",
    )


def main(config: Optional[RestaurantConfig] = None) -> int:
    try:
        config = config or RestaurantConfig.from_env()
    except ValidationError as e:
        # Logging is not configured yet; structlog defaults print to stdout
        logger.error(
            "Invalid configuration",
            fields=[".".join(str(part) for part in error["loc"]) for error in e.errors()],
            error=str(e)
        )
        return 1

    configure_logging(config.log_level, config.json_logs)

    logger.info("Starting restaurant DIP demo")
    try:
        run_demo(config)
    except ConfigurationError as e:
        logger.error("Demo aborted by configuration error", error=str(e), error_code=e.error_code)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
