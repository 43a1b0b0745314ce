"""Shared data structures for traffic queries.

Kept apart from the extraction, geocoding and directions modules so all of
them (and the formatter) share a single definition of each record.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from traffic_ai.api.errors import TrafficError


@dataclass(frozen=True)
class LocationPair:
    """The two place names extracted from a query."""

    origin: str
    destination: str

    def to_dict(self) -> dict:
        return {"from": self.origin, "to": self.destination}


@dataclass(frozen=True)
class Coordinate:
    """A geocoded place."""

    latitude: float
    longitude: float
    resolved_name: str  # provider's formatted address


@dataclass(frozen=True)
class RouteSummary:
    """Route facts derived from the first leg of a directions response."""

    start_address: str
    end_address: str
    primary_street: str
    distance_km: float
    travel_minutes: int  # with live traffic
    normal_minutes: int
    next_street: Optional[str] = None

    @property
    def delay_minutes(self) -> int:
        return max(0, self.travel_minutes - self.normal_minutes)

    def to_text(self) -> str:
        """Render the fixed-format summary block read by the formatter."""
        lines = [
            "Route Summary:",
            f"From: {self.start_address}",
            f"To: {self.end_address}",
            f"Via: {self.primary_street}",
        ]
        if self.next_street:
            lines.append(f"Next: {self.next_street}")
        lines.append(f"Distance: {self.distance_km:.1f} km")
        if self.delay_minutes > 0:
            lines.append(f"⚠️ Traffic delay: {self.delay_minutes} minutes")
        else:
            lines.append("✅ No traffic delays")
        lines.append(f"Total travel time: {self.travel_minutes} minutes")
        return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class TrafficOutcome:
    """Result of answering one query: either a reply or a typed error."""

    reply: Optional[str] = None
    error: Optional[TrafficError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, reply: str) -> "TrafficOutcome":
        return cls(reply=reply)

    @classmethod
    def failure(cls, error: TrafficError) -> "TrafficOutcome":
        return cls(error=error)
