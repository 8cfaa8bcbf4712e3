"""Expose dashboard render functions."""

from .card_mars_weather import card_mars_weather
from .splash import show_splash

__all__ = [
    "card_mars_weather",
    "show_splash",
]
