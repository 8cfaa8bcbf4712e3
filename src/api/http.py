# src/api/http.py
import logging
from typing import Any

import requests
from requests.exceptions import RequestException

from src.api.errors import TransportError
from src.config import HTTP_TIMEOUT_S

logger = logging.getLogger("marsweather")

USER_AGENT = "MarsWeather/1.0 (+streamlit dashboard)"


def http_get_bytes(
    url: str,
    params: dict[str, Any] | None = None,
    timeout: float = HTTP_TIMEOUT_S,
    session: requests.Session | None = None,
) -> bytes:
    """Yksi GET-pyyntö, palauttaa vastauksen raakatavuina.

    Ei uudelleenyrityksiä: kaikki kuljetuskerroksen virheet nostetaan
    TransportError-poikkeuksena, HTTP-statuskoodin kanssa jos sellainen saatiin.
    """
    sess = session or requests
    headers = {"User-Agent": USER_AGENT}
    try:
        resp = sess.get(url, params=params, timeout=timeout, headers=headers)
    except RequestException as e:
        logger.warning("GET %s failed: %s", url, e)
        raise TransportError(f"request to {url} failed: {e}") from e

    logger.info("GET %s -> HTTP %s", url, resp.status_code)
    if resp.status_code >= 400:
        raise TransportError(
            f"{url} returned HTTP {resp.status_code}", status_code=resp.status_code
        )
    return resp.content
