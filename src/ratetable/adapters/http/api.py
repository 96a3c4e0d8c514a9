# src/ratetable/adapters/http/api.py
"""
HTTP API - Rate Lookup Endpoint

Exposes RateLookupService over a single route:

    GET /rate?from=<CODE>&to=<CODE>

- 200 application/json {"from": ..., "to": ..., "rate": ...}
- 400 text/plain when "from" or "to" is missing or empty
- 404 text/plain when the pair is not in the rate table

Files that USE this module:
- ratetable.app (create_app at startup)
- tests.test_http_api (TestClient tests)

Files that this module USES:
- ratetable.application.rates_service (RateLookupService)
- ratetable.domain.models (RateQuery)
- ratetable.domain.errors (RateNotFoundError)
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from ratetable import __version__
from ratetable.application.rates_service import RateLookupService
from ratetable.domain.errors import RateNotFoundError
from ratetable.domain.models import RateQuery

logger = logging.getLogger(__name__)

MISSING_PARAMS_MESSAGE = "Missing 'from' or 'to' parameter"
PAIR_NOT_FOUND_MESSAGE = "Currency pair not found"

rate_router = APIRouter()


def get_rate_service(request: Request) -> RateLookupService:
    """Lookup service injected into the app at startup."""
    return request.app.state.rate_service


def first_query_value(request: Request, name: str) -> str:
    """First value of a query parameter; repeats after it are ignored."""
    values = request.query_params.getlist(name)
    return values[0] if values else ""


@rate_router.get("/rate", name="get_rate", description="Get the conversion rate for a currency pair")
def get_rate(request: Request, service: RateLookupService = Depends(get_rate_service)):
    from_currency = first_query_value(request, "from")
    to_currency = first_query_value(request, "to")
    if not from_currency or not to_currency:
        return PlainTextResponse(MISSING_PARAMS_MESSAGE, status_code=400)

    try:
        response = service.quote(RateQuery(from_currency=from_currency, to_currency=to_currency))
    except RateNotFoundError as e:
        logger.debug("%s", e)
        return PlainTextResponse(PAIR_NOT_FOUND_MESSAGE, status_code=404)

    return JSONResponse(content=response.to_json())


def create_app(service: RateLookupService) -> FastAPI:
    """
    Build the FastAPI application around a lookup service.

    Interactive docs and the OpenAPI schema are disabled so /rate is the
    only route served.

    Args:
        service: Lookup service over the effective configuration

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="RateTable",
        description="Static currency conversion rate lookup",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.rate_service = service
    app.include_router(rate_router)
    return app
