# main.py
"""Main entry point for the Mars Weather Streamlit application."""

import sys
import traceback

import streamlit as st

from src.logger_config import setup_logging
from src.ui import card_mars_weather, show_splash
from src.ui.common import load_css

logger = setup_logging()


def main() -> None:
    """Show the Mars splash once per session, then the sol list."""
    try:
        st.set_page_config(
            page_title="Mars Weather",
            layout="centered",
            page_icon="🪐",
        )
        load_css("style.css")

        if show_splash():
            logger.info("Splash shown, switching to content view")

        card_mars_weather()

    except KeyboardInterrupt:
        logger.info("Mars Weather shutdown requested")
        sys.exit(0)
    except Exception as e:
        logger.error("Unhandled error: %s", e)
        logger.error(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
