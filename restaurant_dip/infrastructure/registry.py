"""
Keyed registry shared by the service factories.

Each factory maps configuration keys (``"mysql"``, ``"slack"``, ...) to
concrete classes of one service interface. New variants are added with
``register`` instead of editing an if/else chain.
"""

from enum import Enum
from typing import Dict, Generic, List, Type, TypeVar, Union

import structlog

from restaurant_dip.shared.exceptions import UnknownServiceTypeError

logger = structlog.get_logger(__name__)

T = TypeVar('T')


def normalize_key(key: Union[str, Enum]) -> str:
    """Normalize a service key: enum members use their value, matching is case-insensitive."""
    if isinstance(key, Enum):
        key = key.value
    return str(key).strip().lower()


class ServiceRegistry(Generic[T]):
    """
    Registry of implementations for one service interface.

    Subclasses set ``service_kind`` (used in error messages) and usually
    declare their built-in ``_registry`` mapping. A subclass that declares
    none starts from a private copy of its parent's entries.
    """

    service_kind: str = "service"
    _registry: Dict[str, Type[T]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "_registry" not in cls.__dict__:
            cls._registry = dict(cls._registry)

    @classmethod
    def register(cls, key: Union[str, Enum], implementation: Type[T]) -> None:
        """
        Register an implementation under a key, replacing any previous one.

        Args:
            key: Configuration key
            implementation: Concrete class, instantiated without arguments
        """
        normalized = normalize_key(key)
        logger.debug(
            "Registering implementation",
            kind=cls.service_kind,
            key=normalized,
            implementation=implementation.__name__
        )
        cls._registry[normalized] = implementation

    @classmethod
    def unregister(cls, key: Union[str, Enum]) -> None:
        """Remove a key; unknown keys are ignored."""
        cls._registry.pop(normalize_key(key), None)

    @classmethod
    def available_types(cls) -> List[str]:
        """Keys that can currently be created."""
        return sorted(cls._registry)

    @classmethod
    def create(cls, key: Union[str, Enum]) -> T:
        """
        Create a new instance for a key.

        Args:
            key: Configuration key, matched case-insensitively

        Returns:
            Fresh instance of the registered implementation

        Raises:
            UnknownServiceTypeError: If no implementation is registered for the key
        """
        implementation = cls._registry.get(normalize_key(key))
        if implementation is None:
            logger.warning(
                "Unknown service type requested",
                kind=cls.service_kind,
                key=str(key),
                available=cls.available_types()
            )
            raise UnknownServiceTypeError(cls.service_kind, str(key))

        logger.debug("Creating service", kind=cls.service_kind, implementation=implementation.__name__)
        return implementation()
