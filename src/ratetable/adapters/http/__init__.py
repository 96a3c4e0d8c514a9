# src/ratetable/adapters/http/__init__.py
"""
HTTP Adapters - REST Interface

This package contains the FastAPI application and the uvicorn runner.
"""

from ratetable.adapters.http.api import create_app, rate_router
from ratetable.adapters.http.server import parse_port, serve

__all__ = ["create_app", "rate_router", "parse_port", "serve"]
