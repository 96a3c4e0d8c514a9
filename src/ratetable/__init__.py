# src/ratetable/__init__.py
"""
RateTable - Static Currency Conversion Rate Service

A small HTTP service that answers currency-pair rate lookups from a static
rate table. The table and listen port come from built-in defaults, optional
JSON configuration files and the PORT environment variable.
"""

__version__ = "1.0.0"
