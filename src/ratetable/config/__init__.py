# src/ratetable/config/__init__.py
"""
Configuration Module

Process settings (Pydantic Settings) and the built-in default rate table.
"""

from ratetable.config.defaults import DEFAULT_PORT, DEFAULT_RATES, default_config
from ratetable.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings", "default_config", "DEFAULT_PORT", "DEFAULT_RATES"]
