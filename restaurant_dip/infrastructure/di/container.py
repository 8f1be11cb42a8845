"""
Dependency Injection Container.

This module provides a small dependency injection container implementing
the Dependency Inversion Principle: interfaces are mapped to
implementations in one place and constructors receive their dependencies
automatically from their type annotations.
"""

from typing import TypeVar, Type, Callable, Dict, Any, Optional, Iterator
from abc import ABC, abstractmethod
import inspect
from contextlib import contextmanager

import structlog

from restaurant_dip.application.models import RestaurantConfig
from restaurant_dip.shared.exceptions import DependencyResolutionError

logger = structlog.get_logger(__name__)

T = TypeVar('T')


class DIContainer:
    """
    Dependency Injection Container with lifecycle management.

    Provides registration and resolution of dependencies with support for:
    - Singleton and transient lifecycles
    - Factory functions
    - Pre-built instances shared by every resolution
    """

    def __init__(self):
        self._singletons: Dict[Type, Any] = {}
        self._transients: Dict[Type, Callable] = {}
        self._factories: Dict[Type, Callable] = {}
        self._interfaces: Dict[Type, Type] = {}

    def register_singleton(self, interface: Type[T], implementation: Type[T]) -> None:
        """
        Register a singleton dependency (created on first resolve, then reused).

        Args:
            interface: Abstract interface type
            implementation: Concrete implementation type
        """
        logger.debug("Registering singleton", interface=interface.__name__, implementation=implementation.__name__)
        self._interfaces[interface] = implementation

    def register_transient(self, interface: Type[T], implementation: Type[T]) -> None:
        """
        Register a transient dependency (new instance each time).

        Args:
            interface: Abstract interface type
            implementation: Concrete implementation type
        """
        logger.debug("Registering transient", interface=interface.__name__, implementation=implementation.__name__)
        self._transients[interface] = implementation

    def register_factory(self, interface: Type[T], factory: Callable[..., T]) -> None:
        """
        Register a factory function for dependency creation.

        Args:
            interface: Interface type
            factory: Factory function that creates instances
        """
        logger.debug("Registering factory", interface=interface.__name__)
        self._factories[interface] = factory

    def register_instance(self, interface: Type[T], instance: T) -> None:
        """
        Register a specific instance as singleton.

        Args:
            interface: Interface type
            instance: Pre-created instance
        """
        logger.debug("Registering instance", interface=interface.__name__)
        self._singletons[interface] = instance

    def is_registered(self, interface: Type) -> bool:
        return any(
            interface in registry
            for registry in (self._singletons, self._factories, self._interfaces, self._transients)
        )

    def resolve(self, interface: Type[T]) -> T:
        """
        Resolve a dependency by interface type.

        Args:
            interface: Interface type to resolve

        Returns:
            Instance of the requested type

        Raises:
            DependencyResolutionError: If dependency is not registered
        """
        logger.debug("Resolving dependency", interface=interface.__name__)

        if interface in self._singletons:
            return self._singletons[interface]

        if interface in self._factories:
            return self._create_with_dependencies(self._factories[interface])

        if interface in self._interfaces:
            instance = self._create_with_dependencies(self._interfaces[interface])
            self._singletons[interface] = instance
            return instance

        if interface in self._transients:
            return self._create_with_dependencies(self._transients[interface])

        raise DependencyResolutionError(interface.__name__)

    def _create_with_dependencies(self, cls_or_func: Callable) -> Any:
        """
        Create instance with automatic dependency injection.

        Parameters annotated with a registered type are resolved; parameters
        with defaults are left alone when their type is unknown.

        Args:
            cls_or_func: Class or function to instantiate

        Returns:
            Created instance with injected dependencies
        """
        sig = inspect.signature(cls_or_func)

        kwargs = {}
        for param_name, param in sig.parameters.items():
            annotation = param.annotation
            if annotation is inspect.Parameter.empty or not isinstance(annotation, type):
                continue
            if self.is_registered(annotation):
                kwargs[param_name] = self.resolve(annotation)
            elif param.default is inspect.Parameter.empty:
                logger.warning(
                    "Cannot resolve required dependency",
                    parameter=param_name,
                    type=annotation.__name__
                )
                raise DependencyResolutionError(annotation.__name__)

        return cls_or_func(**kwargs)

    def cleanup(self) -> None:
        """Drop all cached singletons."""
        logger.info("Cleaning up DI container", singletons=len(self._singletons))
        self._singletons.clear()


class ServiceProvider(ABC):
    """Abstract base class for service providers."""

    @abstractmethod
    def configure(self, container: DIContainer) -> None:
        """Configure services in the container."""
        pass


class RestaurantServiceProvider(ServiceProvider):
    """
    Service provider wiring the restaurant from configuration keys.

    The database is created once and shared by every service resolved from
    the container; notification channels and payment strategies are created
    per resolution.
    """

    def __init__(self, config: RestaurantConfig):
        self.config = config

    def configure(self, container: DIContainer) -> None:
        """Configure restaurant services."""
        from restaurant_dip.core.domain.services import (
            DatabaseService,
            NotificationService,
            PaymentStrategy
        )
        from restaurant_dip.core.use_cases import GoodRestaurantService, PaymentProcessor
        from restaurant_dip.infrastructure.database.factory import DatabaseFactory
        from restaurant_dip.infrastructure.notifications.factory import NotificationFactory
        from restaurant_dip.infrastructure.payments.factory import PaymentStrategyFactory

        config = self.config

        # Unknown keys fail here, at configuration time
        container.register_instance(DatabaseService, DatabaseFactory.create_database(config.database_type))
        NotificationFactory.create_notification(config.notification_type)
        PaymentStrategyFactory.create_strategy(config.payment_type)

        container.register_factory(
            NotificationService,
            lambda: NotificationFactory.create_notification(config.notification_type)
        )
        container.register_factory(
            PaymentStrategy,
            lambda: PaymentStrategyFactory.create_strategy(config.payment_type)
        )
        container.register_transient(GoodRestaurantService, GoodRestaurantService)
        container.register_transient(PaymentProcessor, PaymentProcessor)

        logger.info(
            "Restaurant services configured",
            database_type=config.database_type,
            notification_type=config.notification_type,
            payment_type=config.payment_type
        )


# Global container instance and the configuration it was built from
_container: Optional[DIContainer] = None
_container_config: Optional[RestaurantConfig] = None


def get_container(config: Optional[RestaurantConfig] = None) -> DIContainer:
    """
    Get the global DI container, configuring it on first use.

    Once the container exists it is returned as is; a different ``config``
    passed later is reported with a warning and not applied.

    Args:
        config: Configuration used on first use; read from the environment when omitted

    Returns:
        Configured DI container instance
    """
    global _container, _container_config

    if _container is not None:
        if config is not None and config != _container_config:
            logger.warning(
                "DI container already configured, ignoring new configuration",
                active=_container_config.model_dump(),
                requested=config.model_dump()
            )
        return _container

    config = config or RestaurantConfig.from_env()
    container = DIContainer()

    providers = [
        RestaurantServiceProvider(config),
    ]

    for provider in providers:
        provider.configure(container)

    _container = container
    _container_config = config
    logger.info("DI container initialized")

    return _container


def cleanup_container() -> None:
    """Cleanup the global container."""
    global _container, _container_config

    if _container:
        _container.cleanup()
        _container = None
        _container_config = None
        logger.info("DI container cleaned up")


@contextmanager
def container_scope(config: Optional[RestaurantConfig] = None) -> Iterator[DIContainer]:
    """Context manager for container lifecycle."""
    try:
        container = get_container(config)
        yield container
    finally:
        cleanup_container()
