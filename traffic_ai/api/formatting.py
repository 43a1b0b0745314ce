# traffic_ai/api/formatting.py
"""Turn a route summary block into the chat-style reply shown to users.

The formatter reads the text rendered by ``RouteSummary.to_text`` rather than
the record itself, so any text in that shape (including hand-written or
previously formatted text) can be passed in. When the block lacks the travel
time or the distance the input is returned untouched.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from traffic_ai.api.errors import FormatFailure
from traffic_ai.api.models import RouteSummary

logger = logging.getLogger(__name__)

_TIME = re.compile(r"Total travel time: (\d+)")
_DISTANCE = re.compile(r"Distance: ([\d.]+)")
_VIA = re.compile(r"^Via: (.*)$", re.MULTILINE)
_NEXT = re.compile(r"^(?:Next|Directions): (.*)$", re.MULTILINE)
_DELAY = re.compile(r"Traffic delay: (\d+)")


@dataclass(frozen=True)
class _ParsedSummary:
    time: str
    distance: str
    street: str
    directions: str
    delay: Optional[str]


def _group(pattern: re.Pattern, text: str) -> str:
    match = pattern.search(text)
    return match.group(1).strip() if match else ""


def _parse(summary_text: str) -> _ParsedSummary:
    time_match = _TIME.search(summary_text)
    distance_match = _DISTANCE.search(summary_text)
    if not time_match or not distance_match:
        raise FormatFailure("Missing route information")

    delay_match = _DELAY.search(summary_text)
    return _ParsedSummary(
        time=time_match.group(1),
        distance=distance_match.group(1),
        street=_group(_VIA, summary_text),
        directions=_group(_NEXT, summary_text),
        delay=delay_match.group(1) if delay_match else None,
    )


def format_reply(summary_text: str) -> str:
    """Compose the user-facing reply; never raises."""
    try:
        parsed = _parse(summary_text)
    except FormatFailure as e:
        logger.error("❌ Format error: %s", e)
        return summary_text

    lines = ["🚗 Here's the route information:", ""]
    if parsed.street:
        lines.append(f"📍 Take {parsed.street}")
        if parsed.directions:
            lines.append(f"↪️ {parsed.directions}")

    if parsed.delay is not None:
        lines.append(f"⚠️ There's a {parsed.delay}-minute delay on this route.")
    else:
        lines.append("✅ Roads are clear! No traffic delays.")

    lines.append(f"🛣️ Distance: {parsed.distance} km")
    lines.append(f"⏱️ Estimated travel time: {parsed.time} minutes")
    return "\n".join(lines) + "\n"


def format_route(summary: RouteSummary) -> str:
    """Shortcut for ``format_reply(summary.to_text())``."""
    return format_reply(summary.to_text())


__all__ = ["format_reply", "format_route"]
