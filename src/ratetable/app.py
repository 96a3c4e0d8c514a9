# src/ratetable/app.py
"""
Application Entry Point - Service Initialization and Startup

This module serves as the composition root for the rate service.
It builds the effective configuration once, wires it into the HTTP app
and starts the listener.

Files that USE this module:
- python -m ratetable (module entry point)
- ratetable console script

Files that this module USES:
- ratetable.shared.logging_conf (setup_logging for logging configuration)
- ratetable.config (Settings for process settings)
- ratetable.application.config_merger (load_effective_config)
- ratetable.application.rates_service (RateLookupService)
- ratetable.adapters.http (create_app, parse_port, serve)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import logging  # Standard library for logging messages and errors
import os  # Working directory for startup diagnostics
import sys  # System-specific parameters and functions for exit codes

from pydantic import ValidationError  # Raised for invalid environment settings

from ratetable.adapters.http import create_app, parse_port, serve
from ratetable.application.config_merger import CANDIDATE_PATHS, load_effective_config
from ratetable.application.rates_service import RateLookupService
from ratetable.config import load_settings
from ratetable.domain.errors import ConfigError, ListenerError
from ratetable.shared.logging_conf import setup_logging


def main() -> None:
    """
    Initialize and start the rate service.

    This function:
    1. Reads settings and sets up logging
    2. Builds the effective configuration (defaults, config files, PORT)
    3. Creates the HTTP application around the lookup service
    4. Binds the listener and serves until shutdown

    Startup problems (malformed config, invalid port, bind failure) are
    logged and terminate the process with exit status 1.
    """
    try:
        settings = load_settings()
    except ValidationError as e:
        setup_logging(level=logging.INFO)
        logging.getLogger(__name__).error("Invalid settings: %s", e)
        sys.exit(1)

    setup_logging(
        level=settings.log_level_value,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_to_stdout=settings.log_stdout,
    )
    logger = logging.getLogger(__name__)
    logger.info("Working directory: %s", os.getcwd())

    try:
        loaded = load_effective_config(CANDIDATE_PATHS, port_override=settings.port_override)
        config = loaded.config
        port = parse_port(config.port)
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        sys.exit(1)

    app = create_app(RateLookupService(config))

    logger.info("Server running on port %s", config.port)
    try:
        serve(app, host=settings.host, port=port)
    except ListenerError as e:
        logger.error("Server stopped: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
