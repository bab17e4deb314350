# api/config.py
"""Configuration management for the vending machine finder API."""
import os
from dotenv import load_dotenv

from vendnav.api.errors import ConfigError

load_dotenv()

DEFAULT_DATA_FILE = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "data",
    "vending_machines.json",
)

VALID_PROVIDERS = ["apple", "google"]


def get_data_file():
    """Get path of the vending machine catalog."""
    return os.getenv("VENDNAV_DATA_FILE") or DEFAULT_DATA_FILE


def get_max_stops():
    """Get default number of stops in a planned route."""
    raw = os.getenv("VENDNAV_MAX_STOPS", "5")
    try:
        max_stops = int(raw)
    except ValueError:
        raise ConfigError(f"VENDNAV_MAX_STOPS must be a non-negative integer, got {raw!r}") from None
    if max_stops < 0:
        raise ConfigError(f"VENDNAV_MAX_STOPS must be a non-negative integer, got {raw!r}")
    return max_stops


def get_maps_provider():
    """Get navigation app used for deep links."""
    return os.getenv("VENDNAV_MAPS_PROVIDER", "apple").lower()


def get_google_maps_api_key():
    return os.getenv("GOOGLE_MAPS_API_KEY", "")


def get_port():
    """Get port configuration."""
    return int(os.getenv("PORT", 5000))


def validate_config():
    """Validate that the environment holds a usable configuration."""
    provider = get_maps_provider()
    if provider not in VALID_PROVIDERS:
        raise ConfigError(f"Invalid maps provider. Must be one of: {', '.join(VALID_PROVIDERS)}")

    get_max_stops()

    return True
