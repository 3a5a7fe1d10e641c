import os
from dataclasses import dataclass
from typing import Optional

OPENWEATHER_KEY_PLACEHOLDER = "YOUR_OPENWEATHER_API_KEY"
NEWS_KEY_PLACEHOLDER = "YOUR_NEWS_API_KEY"

DEFAULT_LATITUDE = 40.7128  # New York
DEFAULT_LONGITUDE = -74.0060


def _env_truthy(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


def is_configured(key: Optional[str], placeholder: str) -> bool:
    """A credential counts as configured unless it is empty or still the placeholder."""
    return bool(key and key.strip() and key.strip() != placeholder)


@dataclass(frozen=True)
class Settings:
    openweather_api_key: str = OPENWEATHER_KEY_PLACEHOLDER
    news_api_key: str = NEWS_KEY_PLACEHOLDER
    request_timeout: float = 8.0
    geolocation_enabled: bool = True
    geolocation_timeout: float = 5.0
    default_latitude: float = DEFAULT_LATITUDE
    default_longitude: float = DEFAULT_LONGITUDE
    refresh_interval: float = 600.0
    connectivity_interval: float = 30.0
    run_once: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            openweather_api_key=os.getenv("OPENWEATHER_API_KEY", OPENWEATHER_KEY_PLACEHOLDER),
            news_api_key=os.getenv("NEWS_API_KEY", NEWS_KEY_PLACEHOLDER),
            request_timeout=_env_float("REQUEST_TIMEOUT", 8.0),
            geolocation_enabled=_env_truthy("GEOLOCATION_ENABLED", default=True),
            geolocation_timeout=_env_float("GEOLOCATION_TIMEOUT", 5.0),
            default_latitude=_env_float("DEFAULT_LAT", DEFAULT_LATITUDE),
            default_longitude=_env_float("DEFAULT_LON", DEFAULT_LONGITUDE),
            refresh_interval=_env_float("REFRESH_INTERVAL", 600.0),
            connectivity_interval=_env_float("CONNECTIVITY_INTERVAL", 30.0),
            run_once=_env_truthy("DASHBOARD_ONCE", default=False),
        )

    @property
    def has_weather_key(self) -> bool:
        return is_configured(self.openweather_api_key, OPENWEATHER_KEY_PLACEHOLDER)

    @property
    def has_news_key(self) -> bool:
        return is_configured(self.news_api_key, NEWS_KEY_PLACEHOLDER)
