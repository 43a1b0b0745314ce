"""Tests for the region-biased geocoder."""

import googlemaps
import pytest
from googlemaps.exceptions import ApiError

from traffic_ai.api.errors import ConfigurationError, LocationNotFoundError
from traffic_ai.api.geocoding import RETRY_TIMEOUT_SECONDS, Geocoder, MapsClientProvider
from traffic_ai.api.config import TrafficConfig

from conftest import FakeMapsClient


def test_region_suffix_appended(config, places):
    client = FakeMapsClient(places=places)
    coord = Geocoder(client, config).geocode("  Vake   ")

    assert client.geocode_calls == [("Vake, Tbilisi, Georgia", {"region": "ge"})]
    assert coord.resolved_name == "Vake, Tbilisi, Georgia"
    assert (coord.latitude, coord.longitude) == (41.709, 44.764)


def test_suffix_skipped_when_city_present(config):
    geocoder = Geocoder(FakeMapsClient(), config)
    assert geocoder.build_search_text("Vake,  TBILISI") == "Vake, TBILISI"


def test_no_results_raises(config):
    with pytest.raises(LocationNotFoundError) as exc_info:
        Geocoder(FakeMapsClient(), config).geocode("Atlantis")
    assert exc_info.value.message == "Cannot find location: Atlantis"


def test_provider_error_becomes_location_not_found(config):
    client = FakeMapsClient(geocode_error=ApiError("REQUEST_DENIED"))
    with pytest.raises(LocationNotFoundError) as exc_info:
        Geocoder(client, config).geocode("Vake")
    assert isinstance(exc_info.value.cause, ApiError)


def test_missing_api_key_is_configuration_error():
    with pytest.raises(ConfigurationError):
        MapsClientProvider(TrafficConfig(api_key="")).get()


def test_maps_client_built_without_retries(monkeypatch):
    built = []

    def fake_client(**kwargs):
        built.append(kwargs)
        return object()

    monkeypatch.setattr(googlemaps, "Client", fake_client)
    provider = MapsClientProvider(TrafficConfig(api_key="AIza-test-key"))

    assert provider.get() is provider.get()
    assert built == [
        {
            "key": "AIza-test-key",
            "retry_over_query_limit": False,
            "retry_timeout": RETRY_TIMEOUT_SECONDS,
        }
    ]
    assert RETRY_TIMEOUT_SECONDS < 1
