"""
InSight-säädatan dekoodaus.

Vastauksen toisen tason avaimet ovat dataa: ``sol_keys`` listaa ne, ja
jokainen sol on samannimisenä kenttänä ylätasolla::

    {"sol_keys": ["6", "7"], "6": {"AT": {"av": -62.3}, ...}, "7": {...}}

Siksi JSON puretaan ensin yleiseksi dict-puuksi, luetaan avainlista, ja
vasta sitten haetaan jokainen sol avaimella samasta puusta.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from src.api.errors import FieldTypeMismatch, MalformedPayload, MissingKeyList
from src.config import SOL_KEYS_FIELD

logger = logging.getLogger("marsweather")


@dataclass(frozen=True)
class Measurement:
    """Yhden suureen sol-kohtainen yhteenveto (AT / HWS / PRE)."""

    av: float | None = None
    mn: float | None = None
    mx: float | None = None


@dataclass(frozen=True)
class SolData:
    """Yhden solin mittaukset. Jokainen slotti voi puuttua itsenäisesti."""

    at: Measurement | None = None  # atmospheric temperature, °C
    hws: Measurement | None = None  # horizontal wind speed, m/s
    pre: Measurement | None = None  # pressure, Pa
    season: str | None = None
    first_utc: str | None = None


@dataclass(frozen=True)
class InsightReport:
    """Dekoodattu raportti: avainlista sellaisenaan + solit joille löytyi data."""

    sol_keys: tuple[str, ...]
    sols: dict[str, SolData] = field(default_factory=dict)


def _reject_constant(name: str) -> float:
    # json hyväksyy oletuksena NaN/Infinity, JSON-standardi ei
    raise ValueError(f"invalid JSON literal {name}")


def _parse_json(raw: bytes | str) -> dict[str, Any]:
    try:
        payload = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError) as e:
        # json.JSONDecodeError ja UnicodeDecodeError ovat ValueErroreita,
        # syvä sisäkkäisyys nostaa RecursionErrorin
        raise MalformedPayload(f"response is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise MalformedPayload(
            f"expected a JSON object at top level, got {type(payload).__name__}"
        )
    return payload


def _read_sol_keys(payload: dict[str, Any]) -> tuple[str, ...]:
    keys = payload.get(SOL_KEYS_FIELD)
    if not isinstance(keys, list):
        raise MissingKeyList(f"{SOL_KEYS_FIELD!r} missing or not an array")
    if not all(isinstance(k, str) for k in keys):
        raise MissingKeyList(f"{SOL_KEYS_FIELD!r} contains non-string entries")
    return tuple(keys)


def _is_number(value: Any) -> bool:
    # bool on int:n aliluokka, mutta JSONissa true ei ole luku
    return isinstance(value, int | float) and not isinstance(value, bool)


def _decode_average(slot: dict[str, Any], sol_key: str, code: str) -> float | None:
    value = slot.get("av")
    if value is None:
        return None
    if not _is_number(value):
        raise FieldTypeMismatch(sol_key, f"{code}.av", "number", value)
    return float(value)


def _optional_float(obj: dict[str, Any], name: str, sol_key: str) -> float | None:
    """Lisäkenttä: väärä tyyppi -> None + varoitus, ei dekoodausvirhettä."""
    value = obj.get(name)
    if value is None:
        return None
    if not _is_number(value):
        logger.warning("sol %s: ignoring %s, expected number, got %r", sol_key, name, value)
        return None
    return float(value)


def _optional_str(obj: dict[str, Any], name: str, sol_key: str) -> str | None:
    value = obj.get(name)
    if value is None:
        return None
    if not isinstance(value, str):
        logger.warning("sol %s: ignoring %s, expected string, got %r", sol_key, name, value)
        return None
    return value


def _decode_measurement(sol: dict[str, Any], code: str, sol_key: str) -> Measurement | None:
    """Puuttuva ja null-slotti tarkoittavat samaa: ei dataa."""
    slot = sol.get(code)
    if slot is None:
        return None
    if not isinstance(slot, dict):
        raise FieldTypeMismatch(sol_key, code, "object", slot)

    return Measurement(
        av=_decode_average(slot, sol_key, code),
        mn=_optional_float(slot, "mn", sol_key),
        mx=_optional_float(slot, "mx", sol_key),
    )


def decode_sol(value: Any, sol_key: str) -> SolData:
    """Decode one keyed entry.

    Raises FieldTypeMismatch when the entry or a slot is not an object, or
    ``av`` is not numeric. Auxiliary fields never fail the decode.
    """
    if not isinstance(value, dict):
        raise FieldTypeMismatch(sol_key, sol_key, "object", value)

    return SolData(
        at=_decode_measurement(value, "AT", sol_key),
        hws=_decode_measurement(value, "HWS", sol_key),
        pre=_decode_measurement(value, "PRE", sol_key),
        season=_optional_str(value, "Season", sol_key),
        first_utc=_optional_str(value, "First_UTC", sol_key),
    )


def decode_insight_report(raw: bytes | str) -> InsightReport:
    """
    Purkaa InSight-vastauksen.

    Vaiheet:
      * raakatavut -> yleinen JSON-objekti (MalformedPayload)
      * ``sol_keys`` -> järjestetty avainlista (MissingKeyList)
      * jokainen avain haetaan ylätasolta ja puretaan SolDataksi
        (FieldTypeMismatch keskeyttää koko dekoodauksen)

    Avain, jolle ylätasolla ei ole kenttää, jätetään pois ``sols``-mapista
    mutta säilyy ``sol_keys``-listassa. Se ei ole virhe: solin data ei
    välttämättä ole vielä julkaistu.
    """
    payload = _parse_json(raw)
    sol_keys = _read_sol_keys(payload)

    sols: dict[str, SolData] = {}
    for key in sol_keys:
        if key not in payload:
            logger.info("sol %s listed in %s but has no data", key, SOL_KEYS_FIELD)
            continue
        if key in sols:
            # duplikaattiavain: sama kenttä, purettu jo
            continue
        sols[key] = decode_sol(payload[key], key)

    logger.debug("decoded %d/%d sols: %s", len(sols), len(sol_keys), list(sol_keys))
    return InsightReport(sol_keys=sol_keys, sols=sols)
