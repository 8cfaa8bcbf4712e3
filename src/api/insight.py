# src/api/insight.py
from __future__ import annotations

import logging

import requests

from src.api.http import http_get_bytes
from src.api.insight_decode import InsightReport, decode_insight_report
from src.config import INSIGHT_FEEDTYPE, INSIGHT_URL, INSIGHT_VERSION, NASA_API_KEY

logger = logging.getLogger("marsweather")


def fetch_insight_payload(
    api_key: str | None = None,
    session: requests.Session | None = None,
) -> bytes:
    """Hakee InSight Mars Weather -raportin raakana.

    api_key voidaan antaa parametrina, muuten käytetään NASA_API_KEY-asetusta.
    """
    params = {
        "api_key": api_key or NASA_API_KEY,
        "feedtype": INSIGHT_FEEDTYPE,
        "ver": INSIGHT_VERSION,
    }
    # api_key ei lokiin
    logger.info("Fetching Mars weather from %s", INSIGHT_URL)
    return http_get_bytes(INSIGHT_URL, params=params, session=session)


def fetch_mars_weather(
    api_key: str | None = None,
    session: requests.Session | None = None,
) -> InsightReport:
    """Fetch and decode in one go. Raises TransportError or a DecodeError subclass."""
    raw = fetch_insight_payload(api_key=api_key, session=session)
    report = decode_insight_report(raw)
    logger.info("sol_keys: %s", list(report.sol_keys))
    return report
