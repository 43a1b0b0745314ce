"""Shared fixtures: a recording stand-in for googlemaps.Client."""

import pytest

from traffic_ai.api.config import TrafficConfig


class FakeMapsClient:
    """Answers geocode/directions from canned data and records every call."""

    def __init__(self, places=None, routes=None, geocode_error=None, directions_error=None):
        self.places = places or {}
        self.routes = routes if routes is not None else []
        self.geocode_error = geocode_error
        self.directions_error = directions_error
        self.geocode_calls = []
        self.directions_calls = []

    def geocode(self, address, **kwargs):
        self.geocode_calls.append((address, kwargs))
        if self.geocode_error:
            raise self.geocode_error
        for name, result in self.places.items():
            if address.startswith(name):
                return [result]
        return []

    def directions(self, origin, destination, **kwargs):
        self.directions_calls.append((origin, destination, kwargs))
        if self.directions_error:
            raise self.directions_error
        return self.routes


def place(address, lat, lng):
    return {"formatted_address": address, "geometry": {"location": {"lat": lat, "lng": lng}}}


def step(meters, html):
    return {"distance": {"value": meters}, "html_instructions": html}


def leg(steps, meters=5300, seconds=540, traffic_seconds=720):
    data = {
        "start_address": "Vake, Tbilisi, Georgia",
        "end_address": "Saburtalo, Tbilisi, Georgia",
        "distance": {"value": meters},
        "duration": {"value": seconds},
        "steps": steps,
    }
    if traffic_seconds is not None:
        data["duration_in_traffic"] = {"value": traffic_seconds}
    return data


@pytest.fixture
def config():
    return TrafficConfig(api_key="AIza-test-key")


@pytest.fixture
def places():
    return {
        "Vake": place("Vake, Tbilisi, Georgia", 41.709, 44.764),
        "Saburtalo": place("Saburtalo, Tbilisi, Georgia", 41.728, 44.750),
    }


@pytest.fixture
def route_legs():
    return [
        leg(
            [
                step(400, "Head <b>north</b> on <b>Chavchavadze Ave</b>"),
                step(20, "Slight right"),
                step(1800, "Turn left onto <b>Pekini Ave</b>"),
                step(300, "Turn right<div>Destination will be on the left</div>"),
            ]
        )
    ]
