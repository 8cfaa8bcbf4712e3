from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from src.api.insight import fetch_mars_weather
from src.api.insight_decode import Measurement, SolData


@dataclass(frozen=True)
class SolRow:
    """UI:lle valmis rivi yhdestä solista."""

    id: str  # = sol-avain, listan uniikki tunniste
    sol: str  # näytettävä nimi, sama merkkijono
    temperature: float  # °C
    wind_speed: float  # m/s
    pressure: float  # Pa
    temp_min: float | None = None
    temp_max: float | None = None
    season: str | None = None
    earth_date: str | None = None  # "2020-10-19"


def _average(m: Measurement | None) -> float:
    if m is None or m.av is None:
        return 0.0
    return m.av


def _earth_date(first_utc: str | None) -> str | None:
    if not first_utc:
        return None
    return first_utc.split("T", 1)[0]


def _build_row(key: str, data: SolData) -> SolRow:
    return SolRow(
        id=key,
        sol=key,
        temperature=_average(data.at),
        wind_speed=_average(data.hws),
        pressure=_average(data.pre),
        temp_min=data.at.mn if data.at else None,
        temp_max=data.at.mx if data.at else None,
        season=data.season,
        earth_date=_earth_date(data.first_utc),
    )


def build_mars_weather_viewmodel(
    sol_keys: Iterable[str],
    sols: Mapping[str, SolData],
) -> list[SolRow]:
    """Rakentaa sol-rivit avainlistan järjestyksessä.

    Avaimet, joille ei ole dataa, jätetään pois ilman placeholder-riviä.
    Järjestystä ei muuteta eikä duplikaatteja poisteta.
    """
    rows: list[SolRow] = []
    for key in sol_keys:
        data = sols.get(key)
        if data is None:
            continue
        rows.append(_build_row(key, data))
    return rows


def load_mars_weather_viewmodel() -> list[SolRow]:
    """Yhdistelmäfunktio: hakee API:sta, dekoodaa ja rakentaa viewmodelin."""
    report = fetch_mars_weather()
    return build_mars_weather_viewmodel(report.sol_keys, report.sols)
