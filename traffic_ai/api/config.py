# api/config.py
"""Configuration management for the traffic assistant API."""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def get_google_maps_api_key():
    """Get the Google Maps API key, accepting the legacy variable name too."""
    return os.getenv("GOOGLE_MAPS_API_KEY") or os.getenv("GOOGLE_MAPS_KEY", "")


def get_port():
    """Get port configuration."""
    return int(os.getenv("PORT") or 3001)


def get_log_level():
    """Get root log level name."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class TrafficConfig:
    """Startup configuration, built once and handed to the request handlers."""

    api_key: str = ""
    port: int = 3001
    default_city: str = "Tbilisi"
    region_suffix: str = "Tbilisi, Georgia"
    region: str = "ge"
    language: str = "en"

    @classmethod
    def from_env(cls) -> "TrafficConfig":
        return cls(
            api_key=get_google_maps_api_key(),
            port=get_port(),
            default_city=os.getenv("TRAFFIC_DEFAULT_CITY", "Tbilisi"),
            region_suffix=os.getenv("TRAFFIC_REGION_SUFFIX", "Tbilisi, Georgia"),
            region=os.getenv("TRAFFIC_REGION", "ge"),
            language=os.getenv("TRAFFIC_LANGUAGE", "en"),
        )
