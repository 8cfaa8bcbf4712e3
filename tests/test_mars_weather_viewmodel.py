# tests/test_mars_weather_viewmodel.py
from __future__ import annotations

import json

from src.api.insight_decode import InsightReport, Measurement, SolData, decode_insight_report
from src.viewmodels.mars_weather import (
    SolRow,
    build_mars_weather_viewmodel,
    load_mars_weather_viewmodel,
)

FULL = SolData(
    at=Measurement(av=-62.3),
    hws=Measurement(av=7.2),
    pre=Measurement(av=750.1),
)


def test_single_sol_row():
    rows = build_mars_weather_viewmodel(["6"], {"6": FULL})

    assert rows == [
        SolRow(id="6", sol="6", temperature=-62.3, wind_speed=7.2, pressure=750.1)
    ]


def test_missing_keys_are_dropped_without_placeholder():
    rows = build_mars_weather_viewmodel(["5", "6", "7"], {"6": FULL})
    assert [r.id for r in rows] == ["6"]


def test_order_follows_key_list_not_mapping():
    sols = {"1": FULL, "2": FULL, "3": FULL}
    rows = build_mars_weather_viewmodel(["3", "1", "2"], sols)
    assert [r.sol for r in rows] == ["3", "1", "2"]


def test_duplicates_in_key_list_are_kept():
    rows = build_mars_weather_viewmodel(["6", "6"], {"6": FULL})
    assert [r.id for r in rows] == ["6", "6"]


def test_absent_measurements_default_to_zero():
    data = SolData(at=None, hws=Measurement(av=None), pre=Measurement(av=5.0))

    row = build_mars_weather_viewmodel(["6"], {"6": data})[0]

    assert row.temperature == 0.0
    assert row.wind_speed == 0.0
    assert row.pressure == 5.0


def test_extra_fields_from_sol_data():
    data = SolData(
        at=Measurement(av=-60.0, mn=-95.0, mx=-20.0),
        season="winter",
        first_utc="2020-10-19T18:32:20Z",
    )

    row = build_mars_weather_viewmodel(["675"], {"675": data})[0]

    assert row.temp_min == -95.0
    assert row.temp_max == -20.0
    assert row.season == "winter"
    assert row.earth_date == "2020-10-19"


def test_extra_fields_none_when_missing():
    row = build_mars_weather_viewmodel(["1"], {"1": SolData()})[0]
    assert row.temp_min is None
    assert row.temp_max is None
    assert row.season is None
    assert row.earth_date is None


def test_projection_is_deterministic():
    keys = ["3", "1", "9"]
    sols = {"1": FULL, "3": SolData()}
    assert build_mars_weather_viewmodel(keys, sols) == build_mars_weather_viewmodel(keys, sols)


def test_decode_then_project_counts_present_entries():
    # N = 4 julistettua avainta, M = 2 löytyy
    raw = json.dumps(
        {
            "sol_keys": ["1", "2", "3", "4"],
            "2": {"AT": {"av": -70.0}},
            "4": {"PRE": {"av": 700.0}},
        }
    )
    report = decode_insight_report(raw)

    rows = build_mars_weather_viewmodel(report.sol_keys, report.sols)

    assert [r.id for r in rows] == ["2", "4"]
    assert rows[0].temperature == -70.0
    assert rows[1].pressure == 700.0


def test_load_mars_weather_viewmodel(monkeypatch):
    report = InsightReport(sol_keys=("6", "7"), sols={"6": FULL})

    monkeypatch.setattr(
        "src.viewmodels.mars_weather.fetch_mars_weather",
        lambda: report,
    )

    rows = load_mars_weather_viewmodel()
    assert len(rows) == 1
    assert rows[0].id == "6"
    assert rows[0].pressure == 750.1
