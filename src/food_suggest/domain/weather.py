"""Weather domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherData:
    """Current weather summary."""

    temperature: int
    condition: str
    description: str
    icon: str
