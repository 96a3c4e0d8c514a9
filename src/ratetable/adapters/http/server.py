# src/ratetable/adapters/http/server.py
"""
HTTP Server - Uvicorn Listener

Runs the ASGI application under uvicorn. Port parsing and bind failures are
reported as typed errors so the entry point decides how the process exits.

Files that USE this module:
- ratetable.app (parse_port, serve)
- tests.test_server (unit tests)

Files that this module USES:
- ratetable.domain.errors (InvalidPortError, ListenerError)
"""
from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from ratetable.domain.errors import InvalidPortError, ListenerError

logger = logging.getLogger(__name__)

MAX_PORT = 65535


def parse_port(port: str) -> int:
    """
    Convert a configured port string to an integer.

    Args:
        port: Decimal port number as a string (e.g., '8080')

    Returns:
        Port as int

    Raises:
        InvalidPortError: If the value is empty, not decimal or out of range
    """
    value = port.strip()
    if not (value.isascii() and value.isdigit()) or int(value) > MAX_PORT:
        raise InvalidPortError(port)
    return int(value)


def serve(app: FastAPI, host: str, port: int) -> None:
    """
    Serve the application until shutdown.

    Args:
        app: ASGI application
        host: Interface to bind
        port: TCP port to bind

    Raises:
        ListenerError: If the listener cannot be started
    """
    # log_config=None keeps the handlers installed by setup_logging
    config = uvicorn.Config(app, host=host, port=port, log_config=None)
    server = uvicorn.Server(config)
    try:
        server.run()
    except OSError as e:
        raise ListenerError(f"Cannot listen on {host}:{port}: {e}") from e
    except SystemExit as e:
        # uvicorn exits during startup when the socket cannot be bound
        if server.started:
            raise
        raise ListenerError(f"Cannot listen on {host}:{port}") from e
    if not server.started:
        raise ListenerError(f"Cannot listen on {host}:{port}")
