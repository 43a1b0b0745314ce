# traffic_ai/api/directions.py
"""Live-traffic route lookup through the Google Directions API."""

from __future__ import annotations

import logging
import math
import re
import time
from typing import Any, Dict, List, Optional

from traffic_ai.api.config import TrafficConfig
from traffic_ai.api.errors import RouteNotFoundError
from traffic_ai.api.geocoding import PROVIDER_ERRORS, Geocoder
from traffic_ai.api.models import RouteSummary

logger = logging.getLogger(__name__)

SIGNIFICANT_STEP_METERS = 50
DIRECT_ROUTE = "Direct route"

_HTML_TAG = re.compile(r"<[^>]*>")


def strip_html(text: str) -> str:
    return _HTML_TAG.sub("", text)


def significant_steps(steps: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Drop short segments and the final "destination" instruction."""
    return [
        step
        for step in steps
        if step["distance"]["value"] > SIGNIFICANT_STEP_METERS
        and "destination" not in step.get("html_instructions", "").lower()
    ]


def _minutes(seconds: float) -> int:
    return math.ceil(seconds / 60)


def summarize_leg(leg: Dict[str, Any]) -> RouteSummary:
    """Build a RouteSummary from one directions leg.

    Raises:
        RouteNotFoundError: if the leg has no steps.
    """
    steps = leg.get("steps") or []
    if not steps:
        raise RouteNotFoundError("No route steps found")

    significant = significant_steps(steps)
    primary = strip_html(significant[0].get("html_instructions", "")) if significant else ""
    next_street: Optional[str] = None
    if len(significant) > 1:
        next_street = strip_html(significant[1].get("html_instructions", "")) or None

    normal_seconds = leg["duration"]["value"]
    traffic_seconds = (leg.get("duration_in_traffic") or {}).get("value")
    travel_minutes = _minutes(traffic_seconds or normal_seconds)

    return RouteSummary(
        start_address=leg.get("start_address", ""),
        end_address=leg.get("end_address", ""),
        primary_street=primary or DIRECT_ROUTE,
        next_street=next_street,
        distance_km=round(leg["distance"]["value"] / 1000, 1),
        travel_minutes=travel_minutes,
        normal_minutes=_minutes(normal_seconds),
    )


class RouteResolver:
    """Geocode both ends of a trip and fetch the current driving route."""

    def __init__(self, client, geocoder: Geocoder, config: TrafficConfig):
        self.client = client
        self.geocoder = geocoder
        self.config = config

    def resolve_route(self, origin: str, destination: str) -> RouteSummary:
        """Return a RouteSummary for driving from ``origin`` to ``destination``.

        Geocoding errors propagate unchanged, before any directions request.

        Raises:
            LocationNotFoundError: either end could not be geocoded.
            RouteNotFoundError: the provider returned no route or no steps.
        """
        start = self.geocoder.geocode(origin)
        end = self.geocoder.geocode(destination)

        logger.info("🚗 Fetching route...")
        try:
            routes = self.client.directions(
                start.resolved_name,
                end.resolved_name,
                mode="driving",
                alternatives=True,
                departure_time=int(time.time()),
                traffic_model="best_guess",
                language=self.config.language,
                region=self.config.region,
            )
        except PROVIDER_ERRORS as e:
            logger.error(f"❌ Route error: {e}")
            raise RouteNotFoundError(
                f"Directions request failed: {e}",
                cause=e,
                origin=origin,
                destination=destination,
            ) from e

        if not routes or not routes[0].get("legs"):
            raise RouteNotFoundError(
                "No route found between these locations",
                origin=origin,
                destination=destination,
            )

        try:
            summary = summarize_leg(routes[0]["legs"][0])
        except RouteNotFoundError as e:
            e.origin, e.destination = origin, destination
            raise

        logger.info(
            "Route summary: %.1f km, %d min (%d min delay)",
            summary.distance_km,
            summary.travel_minutes,
            summary.delay_minutes,
        )
        return summary


__all__ = ["RouteResolver", "summarize_leg", "significant_steps", "strip_html"]
