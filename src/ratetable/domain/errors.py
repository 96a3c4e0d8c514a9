# src/ratetable/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions for rate lookups and for the
startup configuration steps.
"""
from typing import Optional


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class RateNotFoundError(DomainError):
    """Raised when a currency pair is not present in the rate table."""

    def __init__(self, from_currency: str, to_currency: str):
        self.from_currency = from_currency
        self.to_currency = to_currency
        super().__init__(f"Currency pair not found: {from_currency} -> {to_currency}")


class ConfigError(DomainError):
    """Base exception for configuration problems detected at startup."""
    pass


class MalformedConfigError(ConfigError):
    """Raised when a configuration file exists but cannot be parsed."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"Malformed config file '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidPortError(ConfigError):
    """Raised when the effective port is not a usable TCP port."""

    def __init__(self, port: str):
        self.port = port
        super().__init__(f"Invalid port: {port!r}")


class ListenerError(DomainError):
    """Raised when the HTTP listener cannot be started."""
    pass
