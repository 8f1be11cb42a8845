"""
Pydantic models for restaurant configuration.

The configuration selects which concrete services get wired behind the
abstractions; it is loaded from ``RESTAURANT_*`` environment variables.
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

ENV_PREFIX = "RESTAURANT_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class RestaurantConfig(BaseModel):
    """Configuration for the restaurant wiring and logging."""
    database_type: str = "mysql"
    notification_type: str = "email"
    payment_type: str = "credit_card"
    log_level: str = "INFO"
    json_logs: bool = False

    @field_validator("database_type", "notification_type", "payment_type")
    @classmethod
    def normalize_service_key(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("Service type cannot be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        value = value.strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RestaurantConfig":
        """
        Build a configuration from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            Validated configuration; unset variables keep their defaults
        """
        environ = os.environ if environ is None else environ
        values = {}
        for name in ("database_type", "notification_type", "payment_type", "log_level"):
            raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None:
                values[name] = raw

        json_logs = environ.get(f"{ENV_PREFIX}JSON_LOGS")
        if json_logs is not None:
            values["json_logs"] = json_logs.strip().lower() in _TRUE_VALUES

        return cls(**values)
