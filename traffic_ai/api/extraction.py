# traffic_ai/api/extraction.py
"""Pull the origin and destination out of a free-text traffic question."""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from traffic_ai.api.errors import ExtractionError
from traffic_ai.api.models import LocationPair

logger = logging.getLogger(__name__)

USAGE_HINT = 'Could not understand the locations. Please try "How\'s traffic from X to Y?"'

_TO_PATTERN = re.compile(r"\bto\s+([^,?.]+)", re.IGNORECASE)

# (from, to) pairs, tried in order; the first one yielding both ends wins.
PATTERNS: List[Tuple[re.Pattern, re.Pattern]] = [
    # "from X to Y"
    (re.compile(r"from\s+([^,]+?)(?=\s+to\b)", re.IGNORECASE), _TO_PATTERN),
    # "X to Y"
    (re.compile(r"^([^,]+?)(?=\s+to\b)", re.IGNORECASE), _TO_PATTERN),
]


def _capture(pattern: re.Pattern, query: str) -> Optional[str]:
    match = pattern.search(query)
    if not match:
        return None
    return match.group(1).strip() or None


def extract_locations(query: str) -> LocationPair:
    """Return the (origin, destination) pair named in ``query``.

    Raises:
        ExtractionError: when no pattern yields both ends, or both ends are
            the same string.
    """
    origin = destination = None
    for from_pattern, to_pattern in PATTERNS:
        origin = _capture(from_pattern, query)
        destination = _capture(to_pattern, query)
        if origin and destination:
            break

    if not origin or not destination:
        logger.warning("Could not identify locations in query: %r", query)
        raise ExtractionError(USAGE_HINT, query=query, reason="no_match")

    if origin == destination:
        logger.warning("Start and end locations appear to be the same: %r", origin)
        raise ExtractionError(USAGE_HINT, query=query, reason="identical_locations")

    locations = LocationPair(origin=origin, destination=destination)
    logger.info("📍 Extracted locations: %s", locations.to_dict())
    return locations


__all__ = ["extract_locations", "PATTERNS", "USAGE_HINT"]
