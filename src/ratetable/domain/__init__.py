# src/ratetable/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and errors.
No dependencies on infrastructure or external systems.
"""

from ratetable.domain.models import (
    Configuration,
    PartialConfig,
    RateQuery,
    RateResponse,
    RateTable,
)
from ratetable.domain.errors import (
    ConfigError,
    DomainError,
    InvalidPortError,
    ListenerError,
    MalformedConfigError,
    RateNotFoundError,
)

__all__ = [
    "Configuration",
    "PartialConfig",
    "RateQuery",
    "RateResponse",
    "RateTable",
    "DomainError",
    "RateNotFoundError",
    "ConfigError",
    "MalformedConfigError",
    "InvalidPortError",
    "ListenerError",
]
