# src/ratetable/application/rates_service.py
"""
Rates Service - Rate Table Lookups

Answers single currency-pair queries against the effective configuration.
Lookups are exact and case-sensitive; there is no reverse-rate or
multi-hop inference.

Files that USE this module:
- ratetable.adapters.http.api (GET /rate handler)
- ratetable.app (builds the service at startup)
- tests.test_rates_service (unit tests)

Files that this module USES:
- ratetable.domain.models (Configuration, RateQuery, RateResponse)
- ratetable.domain.errors (RateNotFoundError)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

from ratetable.domain.errors import RateNotFoundError
from ratetable.domain.models import Configuration, RateQuery, RateResponse


class RateLookupService:
    """
    Read-only lookup service over a rate table.
    Safe to share between concurrent requests.
    """
    def __init__(self, config: Configuration):
        """
        Initialize the service with the effective configuration.

        Args:
            config: Immutable effective Configuration
        """
        self.config = config

    def lookup(self, from_currency: str, to_currency: str) -> float:
        """
        Get the configured rate for a currency pair.

        Args:
            from_currency: Source currency code
            to_currency: Destination currency code

        Returns:
            Configured rate, unchanged

        Raises:
            RateNotFoundError: If the source or destination is not in the table
        """
        row = self.config.rates.get(from_currency)
        if row is None or to_currency not in row:
            raise RateNotFoundError(from_currency, to_currency)
        return row[to_currency]

    def quote(self, query: RateQuery) -> RateResponse:
        """Look up a query and wrap the result for the wire."""
        rate = self.lookup(query.from_currency, query.to_currency)
        return RateResponse(
            from_currency=query.from_currency,
            to_currency=query.to_currency,
            rate=rate,
        )
