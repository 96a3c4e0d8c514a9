# src/ratetable/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the configuration merge and the rate lookup service.
"""

from ratetable.application.config_merger import (
    CANDIDATE_PATHS,
    LoadedConfig,
    load_effective_config,
    merge_config,
)
from ratetable.application.rates_service import RateLookupService

__all__ = [
    "CANDIDATE_PATHS",
    "LoadedConfig",
    "load_effective_config",
    "merge_config",
    "RateLookupService",
]
