"""
Custom exceptions for the restaurant DIP demo.

This module defines the exception hierarchy used throughout the package.
Only configuration problems and contract violations are raised; payment
validation failures are reported as plain results, not exceptions.
"""

from typing import Optional, Dict, Any


class RestaurantError(Exception):
    """Base exception for all restaurant errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.error_code = error_code


class ConfigurationError(RestaurantError):
    """Raised when there are configuration or setup issues."""
    pass


class UnknownServiceTypeError(ConfigurationError, ValueError):
    """Raised when a factory is asked for a service key it does not know."""

    def __init__(self, service_kind: str, key: str, **kwargs):
        super().__init__(f"Unknown {service_kind} type: {key}", error_code="unknown_service_type", **kwargs)
        self.service_kind = service_kind
        self.key = key


class DependencyResolutionError(ConfigurationError):
    """Raised when the DI container cannot resolve a dependency."""

    def __init__(self, interface_name: str, **kwargs):
        super().__init__(f"Dependency {interface_name} is not registered", **kwargs)
        self.interface_name = interface_name


class ContractViolationError(RestaurantError):
    """Base class for contract programming violations."""
    pass


class PreconditionError(ContractViolationError):
    """Raised when a function precondition is violated."""
    pass


class PostconditionError(ContractViolationError):
    """Raised when a function postcondition is violated."""
    pass


class ServiceClosedError(RestaurantError):
    """Raised when a service is used after its resources were released."""

    def __init__(self, service: str, **kwargs):
        super().__init__(f"Service already closed: {service}", **kwargs)
        self.service = service
