# =============================================================================
# core/client.py  —  Gateway Dispatcher for the eBird API 2.0
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Owns the base URL and the API token, and exposes ONE primitive that every
#   tool uses:
#
#       await client.call("/data/obs/US-NY/recent", {"back": 7, ...})
#
#   It builds the URL, performs a single GET with the X-eBirdApiToken header,
#   checks the status, and returns the parsed JSON exactly as received.
#
# WHAT IT DELIBERATELY DOES NOT DO:
#   No caching, no retries, no pagination.  Two identical calls are two full
#   round trips.  Every failure is raised as one of the errors in
#   core/errors.py and left for the caller (FastMCP) to surface.
#
# CONCURRENCY:
#   A fresh httpx.AsyncClient is opened per call, so concurrent invocations
#   share nothing but the immutable Settings.
# =============================================================================

import json
import logging
from decimal import Decimal
from typing import Any, Mapping, Optional

import httpx

from core.config import Settings
from core.errors import DecodeError, GatewayError, TransportError
from core.models import QueryValue, RequestDescriptor

logger = logging.getLogger(__name__)

API_TOKEN_HEADER = "X-eBirdApiToken"


def format_query_value(value: QueryValue) -> str:
    """Render a primitive the way the eBird API expects it in a query string.

    Booleans become "true"/"false" (not Python's "True"/"False"); whole-valued
    floats such as 25.0 are sent as "25", and small floats are written out in
    fixed notation ("0.00001", never "1e-05").
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    return str(value)


class EBirdClient:
    """Thin async client around the eBird API 2.0 REST endpoints."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings
        # Tests inject httpx.MockTransport here; production uses the default.
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    def build_url(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Return the exact URL call() would request for these arguments."""
        query = {
            key: format_query_value(value)
            for key, value in (params or {}).items()
            if value is not None
        }
        # Merge rather than replace, so a query already on the path survives.
        url = httpx.URL(f"{self._settings.base_url}{endpoint}")
        return str(url.copy_merge_params(query))

    async def call(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """GET `endpoint` with `params` and return the decoded JSON body.

        Raises:
            GatewayError: non-2xx status (carries status_code and reason).
            DecodeError: the body is not valid JSON.
            TransportError: the request failed below HTTP.
        """
        url = self.build_url(endpoint, params)
        headers = {API_TOKEN_HEADER: self._settings.api_key}

        logger.debug("GET %s", url)
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._settings.timeout,
            ) as client:
                response = await client.get(url, headers=headers)
        except httpx.RequestError as exc:
            raise TransportError(f"Request to eBird API failed: {exc}") from exc

        if not response.is_success:
            raise GatewayError(response.status_code, response.reason_phrase, url=url)

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeError(
                f"eBird API returned a non-JSON body for {endpoint}: {exc}"
            ) from exc

    async def fetch(self, request: RequestDescriptor) -> Any:
        """Convenience wrapper: call() with a prebuilt RequestDescriptor."""
        return await self.call(request.path, request.params)
