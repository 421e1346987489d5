"""Example tools for the cookbook agents."""

from ghmodels.tools.calculator import CalculatorInput, calculate, calculator
from ghmodels.tools.weather import (
    WEATHER_DATA,
    WEATHER_TOOLS,
    WeatherReport,
    get_weather,
    suggest_activity,
    suggest_clothing,
)

__all__ = [
    "CalculatorInput",
    "calculate",
    "calculator",
    "WEATHER_DATA",
    "WEATHER_TOOLS",
    "WeatherReport",
    "get_weather",
    "suggest_activity",
    "suggest_clothing",
]
