# src/ratetable/adapters/persistence/__init__.py
"""
Persistence Adapters - Data Storage

This package contains adapters for reading stored data:
- Optional JSON configuration files
"""

from ratetable.adapters.persistence.config_file import (
    ConfigFileModel,
    load_partial_config,
    parse_partial_config,
)

__all__ = [
    "ConfigFileModel",
    "load_partial_config",
    "parse_partial_config",
]
