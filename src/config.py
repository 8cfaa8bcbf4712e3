# config.py
"""Configuration settings for the Mars Weather dashboard."""

import os

HTTP_TIMEOUT_S: float = float(os.environ.get("HTTP_TIMEOUT_S", "8.0"))

DEV: bool = os.environ.get("DEV", "0") == "1"

# ------------------- NASA INSIGHT API -------------------

INSIGHT_URL: str = os.environ.get("INSIGHT_URL", "https://api.nasa.gov/insight_weather/")
"""InSight Mars Weather Service endpoint."""

NASA_API_KEY: str = os.environ.get("NASA_API_KEY", "DEMO_KEY")
"""api.nasa.gov key. DEMO_KEY toimii, mutta sillä on tiukka tuntikiintiö."""

INSIGHT_FEEDTYPE: str = "json"
INSIGHT_VERSION: str = "1.0"

SOL_KEYS_FIELD: str = "sol_keys"
"""Top-level field holding the ordered list of sol keys."""

# ------------------- SPLASH / LOADING -------------------

SPLASH_SECONDS: float = float(os.environ.get("SPLASH_SECONDS", "3.0"))
"""How long the Mars splash stays up before the content view."""

LOADING_POLL_S: float = float(os.environ.get("LOADING_POLL_S", "0.5"))
"""Rerun interval while the background fetch is still running."""

# ------------------- UI COLORS -------------------

COLOR_MARS_RED: str = "#c1440e"
COLOR_MARS_ORANGE: str = "#e77d11"
COLOR_COLD_BLUE: str = "#6fa8dc"

# ------------------- PLOTLY CONFIG -------------------

PLOTLY_CONFIG: dict = {
    "displayModeBar": False,
    "responsive": True,
}
