"""Tests for the reply formatter."""

from traffic_ai.api.formatting import format_reply, format_route
from traffic_ai.api.models import RouteSummary

DELAYED = (
    "Route Summary:\n"
    "From: Vake, Tbilisi, Georgia\n"
    "To: Saburtalo, Tbilisi, Georgia\n"
    "Via: Head north on Chavchavadze Ave\n"
    "Distance: 5.3 km\n"
    "⚠️ Traffic delay: 3 minutes\n"
    "Total travel time: 12 minutes\n"
)


def test_delayed_route_reply():
    reply = format_reply(DELAYED)
    assert reply.startswith("🚗 Here's the route information:")
    assert "📍 Take Head north on Chavchavadze Ave" in reply
    assert "5.3 km" in reply
    assert "12 minutes" in reply
    assert "3-minute delay" in reply
    assert "Roads are clear" not in reply


def test_clear_roads_reply():
    text = DELAYED.replace("⚠️ Traffic delay: 3 minutes", "✅ No traffic delays")
    reply = format_reply(text)
    assert "✅ Roads are clear! No traffic delays." in reply
    assert "delay on this route" not in reply


def test_next_line_is_rendered_under_the_street():
    text = DELAYED.replace("Distance:", "Next: Turn left onto Pekini Ave\nDistance:")
    lines = format_reply(text).splitlines()
    take = lines.index("📍 Take Head north on Chavchavadze Ave")
    assert lines[take + 1] == "↪️ Turn left onto Pekini Ave"


def test_missing_time_and_distance_returns_input():
    text = "Route Summary:\nFrom: A\nTo: B\nVia: Somewhere\n"
    assert format_reply(text) == text


def test_fallback_is_idempotent():
    text = "Route Summary:\nVia: Somewhere\n"
    once = format_reply(text)
    assert format_reply(once) == once == text


def test_format_route_renders_record():
    summary = RouteSummary(
        start_address="A",
        end_address="B",
        primary_street="Direct route",
        distance_km=0.8,
        travel_minutes=4,
        normal_minutes=4,
    )
    reply = format_route(summary)
    assert "🛣️ Distance: 0.8 km" in reply
    assert "⏱️ Estimated travel time: 4 minutes" in reply
    assert "Roads are clear" in reply
