# src/ratetable/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains the domain models of the rate service:
- The rate table and the effective configuration
- Partial configuration parsed from a config file
- Per-request query and response values

Files that USE this module:
- ratetable.config.defaults (builds the baseline Configuration)
- ratetable.adapters.persistence.config_file (produces PartialConfig)
- ratetable.application.* (merges configs, answers lookups)
- ratetable.adapters.http.api (serialises RateResponse)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from types import MappingProxyType  # Read-only view over a dict
from typing import Mapping, Optional  # Type hints for mappings and optional values

# source currency -> destination currency -> rate
RateTable = Mapping[str, Mapping[str, float]]


def freeze_rates(rates: Mapping[str, Mapping[str, float]]) -> RateTable:
    """
    Copy a nested rate mapping into a read-only rate table.

    Args:
        rates: Mapping of source code to mapping of destination code to rate

    Returns:
        Read-only mapping proxies over private copies of the input
    """
    return MappingProxyType(
        {src: MappingProxyType({dst: float(rate) for dst, rate in row.items()})
         for src, row in rates.items()}
    )


@dataclass(frozen=True)
class Configuration:
    """
    Effective service configuration.

    Attributes:
        rates: Rate table used for every lookup
        port: Listen port as configured (string, parsed at startup)
    """
    rates: RateTable
    port: str

    def __post_init__(self) -> None:
        if not isinstance(self.rates, MappingProxyType):
            object.__setattr__(self, "rates", freeze_rates(self.rates))


@dataclass(frozen=True)
class PartialConfig:
    """
    Configuration values read from a single config file.

    None marks a key that was absent (or null) in the file. An empty dict or
    empty string means the key was present but empty.
    """
    rates: Optional[dict[str, dict[str, float]]] = None
    port: Optional[str] = None


@dataclass(frozen=True)
class RateQuery:
    """A single lookup request."""
    from_currency: str
    to_currency: str


@dataclass(frozen=True)
class RateResponse:
    """
    Successful lookup result.

    Attributes:
        from_currency: Source currency code
        to_currency: Destination currency code
        rate: Configured conversion rate
    """
    from_currency: str
    to_currency: str
    rate: float

    def to_json(self) -> dict:
        """
        Convert RateResponse to the wire representation.

        Returns:
            Dictionary with "from", "to" and "rate" keys
        """
        return {"from": self.from_currency, "to": self.to_currency, "rate": self.rate}
