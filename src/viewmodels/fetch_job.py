# src/viewmodels/fetch_job.py
"""Background fetch of the Mars weather rows and the state handed to the UI."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from src.api.errors import DecodeError, TransportError
from src.viewmodels.mars_weather import SolRow, load_mars_weather_viewmodel

logger = logging.getLogger("marsweather")

LOADING = "loading"
READY = "ready"
EMPTY = "empty"
ERROR = "error"


@dataclass(frozen=True)
class WeatherState:
    """Mitä kortti näyttää. Tasan yksi neljästä tilasta kerrallaan."""

    status: str  # loading | ready | empty | error
    rows: tuple[SolRow, ...] = ()
    error: str | None = None

    @classmethod
    def loading(cls) -> WeatherState:
        return cls(status=LOADING)

    @classmethod
    def from_rows(cls, rows: Sequence[SolRow]) -> WeatherState:
        if not rows:
            return cls(status=EMPTY)
        return cls(status=READY, rows=tuple(rows))

    @classmethod
    def failed(cls, exc: Exception) -> WeatherState:
        if isinstance(exc, TransportError):
            msg = "Could not reach the Mars weather service"
            if exc.status_code is not None:
                msg += f" (HTTP {exc.status_code})"
        elif isinstance(exc, DecodeError):
            msg = f"Mars weather data could not be read: {exc}"
        else:
            msg = f"{type(exc).__name__}: {exc}"
        return cls(status=ERROR, error=msg)


class MarsWeatherJob:
    """Yksi taustahaku kerrallaan.

    Tulos (rivit tai virhe) vaihdetaan tilaksi lukon alla kerran per haku;
    UI lukee sen snapshot():lla omassa säikeessään.
    """

    def __init__(self, loader: Callable[[], list[SolRow]] | None = None) -> None:
        self._loader = loader or load_mars_weather_viewmodel
        self._lock = threading.Lock()
        self._state = WeatherState.loading()
        self._running = False
        self._thread: threading.Thread | None = None

    def _run(self) -> None:
        try:
            state = WeatherState.from_rows(self._loader())
        except Exception as e:
            logger.warning("Mars weather fetch failed: %s: %s", type(e).__name__, e)
            state = WeatherState.failed(e)

        with self._lock:
            self._state = state
            self._running = False
        logger.info("Mars weather fetch finished: %s (%d rows)", state.status, len(state.rows))

    def start(self) -> bool:
        """Käynnistää haun. Palauttaa False, jos edellinen haku on vielä kesken."""
        with self._lock:
            if self._running:
                return False
            self._running = True
            self._thread = threading.Thread(
                target=self._run, name="insight-fetch", daemon=True
            )
        self._thread.start()
        return True

    def snapshot(self) -> WeatherState:
        with self._lock:
            return self._state

    @property
    def running(self) -> bool:
        with self._lock:
            return self._running

    def wait(self, timeout: float | None = None) -> WeatherState:
        thread = self._thread
        if thread is not None:
            thread.join(timeout)
        return self.snapshot()
