# src/ratetable/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Persistence (config files)
- HTTP (API and server)
"""

__all__ = []
