# src/ratetable/config/defaults.py
"""
Config Defaults - Built-in Fallback Configuration

Supplies the baseline rate table and port used when no config file or
environment override changes them.

Files that USE this module:
- ratetable.application.config_merger (merge base)
- tests.test_config_merger

Files that this module USES:
- ratetable.domain.models (Configuration)
"""
from __future__ import annotations

from ratetable.domain.models import Configuration

DEFAULT_PORT = "8080"

DEFAULT_RATES = {
    "CARAMEL": {"CHOKOLATE": 0.85, "PLAIN": 75.50},
    "CHOKOLATE": {"CARAMEL": 1.18, "PLAIN": 89.00},
    "PLAIN": {"CHOKOLATE": 0.013, "CARAMEL": 0.011},
}


def default_config() -> Configuration:
    """Return the baseline configuration."""
    return Configuration(rates=DEFAULT_RATES, port=DEFAULT_PORT)
