import math
import random
from typing import Any, Dict, List

from .api_client import ApiClient
from .config import Settings
from .models import UNKNOWN, Location, WeatherView
from .resilient import Attempt, FetchResult, resilient_fetch

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"

DEFAULT_ICON = "cloud"

ICONS_BY_CONDITION = {
    "Clear": "sun",
    "Clouds": "cloud",
    "Rain": "cloud-rain",
    "Snow": "snowflake",
    "Thunderstorm": "bolt",
    "Drizzle": "cloud-drizzle",
    "Mist": "smog",
    "Fog": "smog",
}

# WMO weather interpretation codes used by Open-Meteo
DESCRIPTIONS_BY_CODE = {
    0: "clear sky",
    1: "mainly clear",
    2: "partly cloudy",
    3: "overcast",
    45: "fog",
    48: "depositing rime fog",
    51: "light drizzle",
    61: "slight rain",
    71: "slight snow",
    95: "thunderstorm",
}

# Checked in order; the first upper bound that admits the code wins.
ICON_THRESHOLDS = [
    (3, "sun"),
    (48, "cloud"),
    (67, "cloud-rain"),
    (77, "snowflake"),
    (82, "cloud-rain"),
]

SAMPLE_DESCRIPTIONS = ["Sunny", "Partly Cloudy", "Cloudy"]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def icon_for_condition(main: str) -> str:
    return ICONS_BY_CONDITION.get(main, DEFAULT_ICON)


def description_for_code(code: int) -> str:
    return DESCRIPTIONS_BY_CODE.get(code, UNKNOWN)


def icon_for_code(code: int) -> str:
    for upper, icon in ICON_THRESHOLDS:
        if code <= upper:
            return icon
    return DEFAULT_ICON


def from_openweather(data: Dict[str, Any]) -> WeatherView:
    main = data["main"]
    condition = data["weather"][0]
    return WeatherView(
        temperature=_round_half_up(main["temp"]),
        description=condition["description"],
        humidity=main["humidity"],
        wind_speed=data["wind"]["speed"],
        pressure=main["pressure"],
        feels_like=_round_half_up(main["feels_like"]),
        location_label=data["name"],
        icon=icon_for_condition(condition["main"]),
    )


def from_open_meteo(data: Dict[str, Any]) -> WeatherView:
    current = data["current_weather"]
    temperature = current["temperature"]
    code = int(current["weathercode"])

    humidity: Any = UNKNOWN
    hourly: List[Any] = (data.get("hourly") or {}).get("relative_humidity_2m") or []
    if hourly and hourly[0] is not None:
        humidity = hourly[0]

    return WeatherView(
        temperature=_round_half_up(temperature),
        description=description_for_code(code),
        humidity=humidity,
        wind_speed=current["windspeed"],
        pressure=UNKNOWN,
        feels_like=_round_half_up(temperature - 2),  # rough estimate
        location_label="Current Location",
        icon=icon_for_code(code),
    )


def sample_weather() -> WeatherView:
    return WeatherView(
        temperature=_round_half_up(20 + random.random() * 10),
        description=random.choice(SAMPLE_DESCRIPTIONS),
        humidity=_round_half_up(40 + random.random() * 40),
        wind_speed=round(random.random() * 10, 1),
        pressure=1010 + _round_half_up(random.random() * 10),
        feels_like=_round_half_up(20 + random.random() * 10),
        location_label="Your Location",
        icon="cloud-sun",
    )


async def fetch_weather(client: ApiClient, settings: Settings, location: Location) -> FetchResult[WeatherView]:
    def openweather():
        return client.get_json(OPENWEATHER_URL, params={
            "lat": location.latitude,
            "lon": location.longitude,
            "appid": settings.openweather_api_key,
            "units": "metric",
        })

    def open_meteo():
        return client.get_json(OPEN_METEO_URL, params={
            "latitude": location.latitude,
            "longitude": location.longitude,
            "current_weather": "true",
            "hourly": "relative_humidity_2m",
        })

    return await resilient_fetch("weather", [
        Attempt("openweathermap", openweather, from_openweather, enabled=settings.has_weather_key),
        Attempt("open-meteo", open_meteo, from_open_meteo),
    ], sample_weather)
