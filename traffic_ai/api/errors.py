"""Typed errors for the traffic assistant.

Every failure a query can hit is one of these. Components raise them,
``TrafficService`` turns them into a ``TrafficOutcome`` and the HTTP layer
maps that outcome to a status code. Each class carries a ``kind`` tag so the
boundary can tell them apart without isinstance chains.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional


@dataclass
class TrafficError(Exception):
    """Base error for the traffic domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    kind: ClassVar[str] = "traffic"

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ExtractionError(TrafficError):
    """The query did not name two distinct locations.

    Attributes:
        query: The raw query text
        reason: ``"no_match"`` or ``"identical_locations"``
    """

    kind: ClassVar[str] = "extraction"

    query: str = ""
    reason: str = "no_match"


@dataclass
class LocationNotFoundError(TrafficError):
    """The geocoding provider returned no result for a place name."""

    kind: ClassVar[str] = "location_not_found"

    location: str = ""


@dataclass
class RouteNotFoundError(TrafficError):
    """The directions provider returned no usable route."""

    kind: ClassVar[str] = "route_not_found"

    origin: str = ""
    destination: str = ""


@dataclass
class ConfigurationError(TrafficError):
    """Missing or invalid startup configuration."""

    kind: ClassVar[str] = "configuration"

    setting_name: str = ""


@dataclass
class FormatFailure(TrafficError):
    """A route summary could not be re-parsed. Always recovered locally."""

    kind: ClassVar[str] = "format"


__all__ = [
    "TrafficError",
    "ExtractionError",
    "LocationNotFoundError",
    "RouteNotFoundError",
    "ConfigurationError",
    "FormatFailure",
]
