"""Google Geocoding API client (forward geocoding, address -> coordinates).

Only coordinates and place_id are meant to be stored; raw responses are
never persisted.
"""

from contextlib import asynccontextmanager
from typing import Any

import httpx

from app.application.dtos.place import GeocodeResult
from app.core.config import Settings
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

GEOCODE_ENDPOINT = "https://maps.googleapis.com/maps/api/geocode/json"


class GoogleGeocoder:
    """IGeocoder for the Google Geocoding API.

    geocode() returns None instead of raising: no API key, blank address,
    non-OK status, empty results and HTTP failures all mean "no coordinates".
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        language: str = "ja",
        timeout: float = 5.0,
        http_client: httpx.AsyncClient | None = None,
        endpoint: str = GEOCODE_ENDPOINT,
    ) -> None:
        self._api_key = api_key
        self._language = language
        self._timeout = timeout
        self._shared_http = http_client
        self._endpoint = endpoint

    @classmethod
    def from_settings(
        cls, settings: Settings, http_client: httpx.AsyncClient | None = None
    ) -> "GoogleGeocoder":
        key = settings.google_maps_api_key
        return cls(
            key.get_secret_value() if key else None,
            language=settings.geocoding_language,
            timeout=settings.geocoding_timeout_seconds,
            http_client=http_client,
        )

    @property
    def enabled(self) -> bool:
        return bool(self._api_key)

    @asynccontextmanager
    async def _http_cm(self):
        """Yield the shared HTTP client or a short-lived one."""
        if self._shared_http is not None:
            yield self._shared_http
            return
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            yield client

    async def geocode(self, address: str) -> GeocodeResult | None:
        address = (address or "").strip()
        if not address:
            return None
        if not self._api_key:
            logger.info("Geocoding skipped: no API key configured")
            return None
        params = {"address": address, "key": self._api_key, "language": self._language}
        try:
            async with self._http_cm() as client:
                resp = await client.get(self._endpoint, params=params, timeout=self._timeout)
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Geocoding request failed: %s", type(e).__name__)
            return None
        return self._parse(data)

    @staticmethod
    def _parse(data: Any) -> GeocodeResult | None:
        if not isinstance(data, dict) or data.get("status") != "OK":
            status = data.get("status") if isinstance(data, dict) else None
            logger.warning("Geocoding returned no result (status=%s)", status)
            return None
        results = data.get("results")
        if not isinstance(results, list) or not results:
            return None
        first = results[0]
        location = (first.get("geometry") or {}).get("location") or {}
        lat, lng = location.get("lat"), location.get("lng")
        if lat is None or lng is None:
            return None
        return GeocodeResult(
            lat=float(lat),
            lng=float(lng),
            place_id=first.get("place_id"),
            formatted_address=first.get("formatted_address"),
        )
