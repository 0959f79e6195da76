"""Tests for the weather service."""

import asyncio

import pytest

from food_suggest.domain.weather import WeatherData
from food_suggest.services.cache import InMemoryCache
from food_suggest.services.weather import WeatherService, map_weather_code
from tests.conftest import FakeWeatherClient


def test_weather_is_mapped_and_cached() -> None:
    client = FakeWeatherClient()
    service = WeatherService(client=client, cache=InMemoryCache())

    first = asyncio.run(service.get_weather(41.0082, 28.9784))
    second = asyncio.run(service.get_weather(41.0084, 28.9781))

    assert first == WeatherData(
        temperature=22, condition="clear", description="weather_clear", icon="sunny"
    )
    assert second == first
    assert client.calls == 1


def test_failure_returns_none_and_is_not_cached() -> None:
    client = FakeWeatherClient(error=ConnectionError("down"))
    service = WeatherService(client=client, cache=InMemoryCache())

    assert asyncio.run(service.get_weather(1.0, 2.0)) is None

    client.error = None
    assert asyncio.run(service.get_weather(1.0, 2.0)) is not None


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"current": None},
        {"current": {"temperature_2m": "warm", "weather_code": 0}},
        {"current": {"temperature_2m": 20}},
    ],
)
def test_incomplete_payload_returns_none(payload: dict[str, object]) -> None:
    service = WeatherService(
        client=FakeWeatherClient(payload=payload), cache=InMemoryCache()
    )

    assert asyncio.run(service.get_weather(1.0, 2.0)) is None


@pytest.mark.parametrize(
    ("code", "temperature", "expected"),
    [
        (95, 20, ("stormy", "thunderstorm")),
        (73, -2, ("snowy", "snow")),
        (61, 15, ("rainy", "rainy")),
        (45, 15, ("foggy", "cloud")),
        (2, 30, ("cloudy", "cloudy")),
        (0, 28, ("hot", "sunny")),
        (0, 10, ("cold", "thermometer")),
        (0, 18, ("clear", "sunny")),
    ],
)
def test_map_weather_code(
    code: int, temperature: float, expected: tuple[str, str]
) -> None:
    assert map_weather_code(code, temperature) == expected
