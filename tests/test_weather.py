import pytest

from homedash.errors import Unauthorized
from homedash.models import UNKNOWN, Location
from homedash.resilient import Tier
from homedash.weather import (
    OPEN_METEO_URL,
    OPENWEATHER_URL,
    description_for_code,
    fetch_weather,
    from_open_meteo,
    from_openweather,
    icon_for_code,
    icon_for_condition,
    sample_weather,
)

HERE = Location(38.72, -9.14)


@pytest.mark.parametrize("code, description, icon", [
    (0, "clear sky", "sun"),
    (2, "partly cloudy", "sun"),
    (3, "overcast", "sun"),
    (45, "fog", "cloud"),
    (61, "slight rain", "cloud-rain"),
    (71, "slight snow", "snowflake"),
    (77, UNKNOWN, "snowflake"),
    (80, UNKNOWN, "cloud-rain"),
    (82, UNKNOWN, "cloud-rain"),
    (95, "thunderstorm", "cloud"),
    (200, UNKNOWN, "cloud"),
])
def test_weathercode_tables(code, description, icon):
    assert description_for_code(code) == description
    assert icon_for_code(code) == icon


def test_condition_icons_default_to_cloud():
    assert icon_for_condition("Thunderstorm") == "bolt"
    assert icon_for_condition("Mist") == "smog"
    assert icon_for_condition("Tornado") == "cloud"


def test_from_openweather(openweather_payload):
    view = from_openweather(openweather_payload)

    assert view.temperature == 21
    assert view.feels_like == 21
    assert view.description == "clear sky"
    assert view.humidity == 64
    assert view.pressure == 1017
    assert view.wind_speed == 3.6
    assert view.location_label == "Lisbon"
    assert view.icon == "sun"


def test_from_open_meteo(open_meteo_payload):
    view = from_open_meteo(open_meteo_payload)

    assert view.temperature == 17
    assert view.feels_like == 15
    assert view.description == "partly cloudy"
    assert view.humidity == 71
    assert view.pressure == UNKNOWN
    assert view.wind_speed == 11.9
    assert view.location_label == "Current Location"
    assert view.icon == "sun"


def test_from_open_meteo_without_hourly_humidity():
    view = from_open_meteo({"current_weather": {"temperature": 4.1, "windspeed": 2.0, "weathercode": 73}})

    assert view.humidity == UNKNOWN
    assert view.icon == "snowflake"
    assert view.description == UNKNOWN


def test_sample_weather_stays_in_bounds():
    for _ in range(50):
        view = sample_weather()
        assert 20 <= view.temperature <= 30
        assert 40 <= view.humidity <= 80
        assert 0 <= view.wind_speed <= 10
        assert 1010 <= view.pressure <= 1020
        assert view.description in {"Sunny", "Partly Cloudy", "Cloudy"}
        assert view.location_label == "Your Location"


@pytest.mark.asyncio
async def test_keyed_primary_is_used(make_client, keyed_settings, openweather_payload):
    client = make_client({OPENWEATHER_URL: openweather_payload})

    result = await fetch_weather(client, keyed_settings, HERE)

    assert result.tier is Tier.PRIMARY
    assert result.value.location_label == "Lisbon"
    url, params = client.calls[0]
    assert params["lat"] == 38.72 and params["lon"] == -9.14
    assert params["appid"] == "ow-test-key"
    assert params["units"] == "metric"


@pytest.mark.asyncio
async def test_placeholder_key_goes_straight_to_open_meteo(make_client, settings, open_meteo_payload):
    client = make_client({OPEN_METEO_URL: open_meteo_payload})

    result = await fetch_weather(client, settings, HERE)

    assert client.urls() == [OPEN_METEO_URL]
    assert result.tier is Tier.SECONDARY
    assert client.calls[0][1]["latitude"] == 38.72


@pytest.mark.asyncio
async def test_rejected_key_falls_back_to_open_meteo_shape(make_client, keyed_settings, open_meteo_payload):
    client = make_client({
        OPENWEATHER_URL: Unauthorized(OPENWEATHER_URL),
        OPEN_METEO_URL: open_meteo_payload,
    })

    result = await fetch_weather(client, keyed_settings, HERE)

    assert result.tier is Tier.SECONDARY
    assert result.value.location_label == "Current Location"
    assert result.value.pressure == UNKNOWN


@pytest.mark.asyncio
async def test_both_sources_down_uses_sample(make_client, keyed_settings):
    result = await fetch_weather(make_client(), keyed_settings, HERE)

    assert result.tier is Tier.SAMPLE
    assert result.value.icon == "cloud-sun"


def test_half_degrees_round_up():
    view = from_open_meteo({"current_weather": {"temperature": 20.5, "windspeed": 1.0, "weathercode": 0}})
    assert view.temperature == 21
    assert view.feels_like == 19

    view = from_open_meteo({"current_weather": {"temperature": 2.5, "windspeed": 1.0, "weathercode": 0}})
    assert view.feels_like == 1


def test_openweather_half_degrees_round_up(openweather_payload):
    openweather_payload["main"].update(temp=-0.5, feels_like=12.5)

    view = from_openweather(openweather_payload)

    assert view.temperature == 0
    assert view.feels_like == 13
