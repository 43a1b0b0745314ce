# traffic_ai/api/services/traffic_service.py
"""Service layer answering one traffic question end to end."""

import logging
import threading
from typing import Optional

from traffic_ai.api.config import TrafficConfig
from traffic_ai.api.directions import RouteResolver
from traffic_ai.api.errors import TrafficError
from traffic_ai.api.extraction import extract_locations
from traffic_ai.api.formatting import format_reply
from traffic_ai.api.geocoding import Geocoder, MapsClientProvider
from traffic_ai.api.models import TrafficOutcome

logger = logging.getLogger(__name__)


class TrafficService:
    """Runs extraction, route lookup and formatting for a query."""

    def __init__(self, config: TrafficConfig, resolver: Optional[RouteResolver] = None):
        """Initialize the service.

        Args:
            config: Startup configuration
            resolver: Optional pre-built resolver; built from ``config`` on
                first use when omitted
        """
        self.config = config
        self._resolver = resolver
        self._lock = threading.Lock()

    def _get_resolver(self) -> RouteResolver:
        if self._resolver is None:
            with self._lock:
                if self._resolver is None:
                    client = MapsClientProvider(self.config).get()
                    geocoder = Geocoder(client, self.config)
                    self._resolver = RouteResolver(client, geocoder, self.config)
        return self._resolver

    def answer(self, query: str) -> TrafficOutcome:
        """Answer ``query``; domain failures come back in the outcome."""
        logger.info("🔍 Processing query: %s", query)
        try:
            locations = extract_locations(query)
            summary = self._get_resolver().resolve_route(
                locations.origin, locations.destination
            )
        except TrafficError as e:
            logger.error("❌ Error (%s): %s", e.kind, e.message)
            return TrafficOutcome.failure(e)

        return TrafficOutcome.success(format_reply(summary.to_text()))


__all__ = ["TrafficService"]
