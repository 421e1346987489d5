"""Weather tools backed by a small mock table.

Three tools an agent can chain: look up the weather for a city, then
suggest clothing for the temperature and an activity for the condition.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from langchain_core.tools import tool
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeatherReport:
    temp: int
    condition: str


# Keys are lower-case city names.
WEATHER_DATA: dict[str, WeatherReport] = {
    "são paulo": WeatherReport(27, "Sunny"),
    "curitiba": WeatherReport(19, "Rainy"),
    "rio de janeiro": WeatherReport(32, "Partly cloudy"),
    "porto alegre": WeatherReport(22, "Windy"),
}


class CityInput(BaseModel):
    city: str = Field(description="Name of the city to get the weather for.")


class TemperatureInput(BaseModel):
    temperature: float = Field(description="Temperature in degrees Celsius.")


class ConditionInput(BaseModel):
    condition: str = Field(
        description="Weather condition, such as sunny, rainy, cloudy, etc."
    )


def lookup_weather(city: str) -> WeatherReport | None:
    return WEATHER_DATA.get(city.strip().lower())


def clothing_for(temperature: float) -> str:
    if temperature < 15:
        return "Wear a heavy coat and warm layers"
    if temperature < 20:
        return "Wear a light jacket or sweater"
    if temperature < 25:
        return "Wear something comfortable, the weather is pleasant"
    return "Wear light, cool clothes"


def activity_for(condition: str) -> str:
    cond = condition.lower()
    if "sun" in cond:
        return "Great day for a walk outdoors!"
    if "rain" in cond:
        return "Better stay home, how about a movie?"
    if "cloud" in cond:
        return "Good day for indoor activities or a light walk"
    if "wind" in cond:
        return "Watch out for the wind! Tie your hair back and skip the umbrella"
    return "Make the most of your day!"


@tool(
    "get_weather",
    args_schema=CityInput,
    description="Gets weather information for a specific city.",
)
def get_weather(city: str) -> str:
    logger.info("get_weather called: city=%s", city)
    report = lookup_weather(city)
    if report is None:
        return f"Sorry, I don't have weather data for {city}."
    return f"{city}: {report.temp}°C, {report.condition}"


@tool(
    "suggest_clothing",
    args_schema=TemperatureInput,
    description="Suggests appropriate clothing based on the given temperature.",
)
def suggest_clothing(temperature: float) -> str:
    logger.info("suggest_clothing called: temperature=%s", temperature)
    return clothing_for(temperature)


@tool(
    "suggest_activity",
    args_schema=ConditionInput,
    description="Suggests activities based on the given weather condition.",
)
def suggest_activity(condition: str) -> str:
    logger.info("suggest_activity called: condition=%s", condition)
    return activity_for(condition)


WEATHER_TOOLS = [get_weather, suggest_clothing, suggest_activity]
