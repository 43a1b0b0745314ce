# traffic_ai/api/geocoding.py
from __future__ import annotations

import logging
import re
import threading

import googlemaps
from googlemaps.exceptions import ApiError, Timeout, TransportError

from traffic_ai.api.config import TrafficConfig
from traffic_ai.api.errors import ConfigurationError, LocationNotFoundError
from traffic_ai.api.models import Coordinate

logger = logging.getLogger(__name__)

# Errors the googlemaps client raises for a failed request.
PROVIDER_ERRORS = (ApiError, Timeout, TransportError)

_WHITESPACE = re.compile(r"\s+")

# Window googlemaps allows for re-sending 5xx responses. It is shorter than any
# round trip, so a failed request surfaces as Timeout instead of being re-sent.
RETRY_TIMEOUT_SECONDS = 0.01


class MapsClientProvider:
    """Build the googlemaps.Client on first use and hand out the same one."""

    def __init__(self, config: TrafficConfig):
        self.config = config
        self._client: googlemaps.Client | None = None
        self._lock = threading.Lock()

    def get(self) -> googlemaps.Client:
        if self._client is None:
            with self._lock:
                if self._client is None:
                    api_key = self.config.api_key
                    if not api_key:
                        logger.error("No Google Maps API key found in config")
                        raise ConfigurationError(
                            "GOOGLE_MAPS_API_KEY not set",
                            setting_name="GOOGLE_MAPS_API_KEY",
                        )
                    logger.info(f"Initializing Google Maps client with key: {api_key[:6]}...")
                    try:
                        self._client = googlemaps.Client(
                            key=api_key,
                            retry_over_query_limit=False,
                            retry_timeout=RETRY_TIMEOUT_SECONDS,
                        )
                    except ValueError as e:
                        raise ConfigurationError(
                            f"Invalid Google Maps configuration: {e}",
                            cause=e,
                            setting_name="GOOGLE_MAPS_API_KEY",
                        ) from e
        return self._client


class Geocoder:
    """Resolve place names to coordinates, biased toward the configured city."""

    def __init__(self, client, config: TrafficConfig):
        self.client = client
        self.config = config

    def build_search_text(self, name: str) -> str:
        """Normalise whitespace and append the region suffix when missing.

        Args:
            name: Place name as typed by the user

        Returns:
            The text sent to the geocoding API
        """
        clean = _WHITESPACE.sub(" ", name).strip()
        if self.config.default_city.lower() in clean.lower():
            return clean
        return f"{clean}, {self.config.region_suffix}"

    def geocode(self, name: str) -> Coordinate:
        """Return the provider's first match for ``name``.

        Raises:
            LocationNotFoundError: no result, or the provider request failed.
        """
        search = self.build_search_text(name)
        logger.info("🔍 Searching location: %s", search)

        try:
            results = self.client.geocode(search, region=self.config.region)
        except PROVIDER_ERRORS as e:
            logger.error(f"❌ Geocoding error for '{search}': {e}")
            raise LocationNotFoundError(
                f"Cannot find location: {name}", cause=e, location=name
            ) from e

        if not results:
            logger.warning(f"No results found for place: {search}")
            raise LocationNotFoundError(f"Cannot find location: {name}", location=name)

        result = results[0]
        loc = result["geometry"]["location"]
        logger.info("📍 Found location: %s", result["formatted_address"])
        return Coordinate(
            latitude=loc["lat"],
            longitude=loc["lng"],
            resolved_name=result["formatted_address"],
        )


__all__ = ["Geocoder", "MapsClientProvider", "PROVIDER_ERRORS", "RETRY_TIMEOUT_SECONDS"]
