# src/ratetable/application/config_merger.py
"""
Config Merger - Effective Configuration Assembly

Combines the built-in defaults, any config files found at the candidate
paths and the PORT override into the single effective Configuration.

Precedence, last applied wins:
1. Defaults
2. Each loaded file in candidate order: non-empty "rates" replace the whole
   table, non-empty "port" replaces the port
3. PORT override, whenever the variable is present (even if empty)

Files that USE this module:
- ratetable.app (startup)
- tests.test_config_merger (unit tests)

Files that this module USES:
- ratetable.config.defaults (default_config)
- ratetable.adapters.persistence.config_file (load_partial_config)
- ratetable.domain.models (Configuration, PartialConfig)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from ratetable.adapters.persistence.config_file import load_partial_config
from ratetable.config.defaults import default_config
from ratetable.domain.models import Configuration, PartialConfig

logger = logging.getLogger(__name__)

# Tried in order, relative to the working directory
CANDIDATE_PATHS: tuple[str, ...] = ("application.json", "config/application.json")


@dataclass(frozen=True)
class LoadedConfig:
    """Effective configuration together with the files that were applied."""
    config: Configuration
    applied_paths: tuple[str, ...] = field(default_factory=tuple)


def merge_config(
    partials: Iterable[PartialConfig],
    port_override: Optional[str] = None,
    base: Optional[Configuration] = None,
) -> Configuration:
    """
    Overlay partial configurations and the port override onto a base.

    Args:
        partials: Successfully loaded file configs, in candidate order
        port_override: Value of PORT, or None if the variable is not set
        base: Starting configuration (defaults when omitted)

    Returns:
        New immutable Configuration
    """
    current = base if base is not None else default_config()
    rates = current.rates
    port = current.port

    for partial in partials:
        if partial.rates:
            rates = partial.rates
        if partial.port:
            port = partial.port

    if port_override is not None:
        port = port_override

    return Configuration(rates=rates, port=port)


def load_effective_config(
    candidates: Sequence[Union[str, Path]] = CANDIDATE_PATHS,
    port_override: Optional[str] = None,
) -> LoadedConfig:
    """
    Try each candidate file in order and build the effective configuration.

    Missing files are skipped. A malformed file stops startup.

    Args:
        candidates: Config file paths to try, in order
        port_override: Value of PORT, or None if the variable is not set

    Returns:
        LoadedConfig with the merged configuration and applied file paths

    Raises:
        MalformedConfigError: If any existing candidate is malformed
    """
    partials: list[PartialConfig] = []
    applied: list[str] = []
    for path in candidates:
        partial = load_partial_config(path)
        if partial is None:
            continue
        partials.append(partial)
        applied.append(str(path))
        logger.info("Applied '%s' config", path)

    if not applied:
        logger.info("No config file found, using built-in defaults")
    if port_override is not None:
        logger.info("PORT environment variable overrides port: %r", port_override)

    config = merge_config(partials, port_override=port_override)
    return LoadedConfig(config=config, applied_paths=tuple(applied))
