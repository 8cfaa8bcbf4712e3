# src/ui/card_mars_weather.py
from __future__ import annotations

import html
import time

import streamlit as st

from src.config import LOADING_POLL_S
from src.ui.card_sol_trend import render_sol_trend
from src.ui.common import card, hint, section_title
from src.utils import report_error
from src.viewmodels.fetch_job import EMPTY, ERROR, LOADING, MarsWeatherJob, WeatherState
from src.viewmodels.mars_weather import SolRow

JOB_KEY = "mars_weather_job"
TITLE = "🪐 Mars Weather"

LOADING_TEXT = "Loading Mars weather data..."
EMPTY_TEXT = "No Mars weather data available."


def _get_job() -> MarsWeatherJob:
    """Hakee istunnon jobin; ensimmäisellä näyttökerralla luo sen ja käynnistää haun."""
    job = st.session_state.get(JOB_KEY)
    if job is None:
        job = MarsWeatherJob()
        st.session_state[JOB_KEY] = job
        job.start()
    return job


def _handle_refresh(job: MarsWeatherJob) -> None:
    if "mars_refresh" not in st.query_params:
        return
    job.start()
    try:
        del st.query_params["mars_refresh"]
    except Exception:
        st.query_params.clear()


def _fmt(value: float) -> str:
    return f"{value:.1f}"


def _sol_cell(row: SolRow) -> str:
    meta = " · ".join(html.escape(s) for s in (row.earth_date, row.season) if s)
    meta_html = f"<div class='sub'>{meta}</div>" if meta else ""
    minmax = ""
    if row.temp_min is not None and row.temp_max is not None:
        minmax = f"<div class='sub'>min {_fmt(row.temp_min)} / max {_fmt(row.temp_max)} °C</div>"
    return f"""
        <div class="sol-cell" id="sol-{html.escape(row.id)}">
          <div class="label">Sol: {html.escape(row.sol)}</div>
          {meta_html}
          <div>Temperature: {_fmt(row.temperature)} °C</div>
          {minmax}
          <div>Wind Speed: {_fmt(row.wind_speed)} m/s</div>
          <div>Pressure: {_fmt(row.pressure)} Pa</div>
        </div>
    """


def sol_list_html(rows: tuple[SolRow, ...] | list[SolRow]) -> str:
    return '<div class="sol-list">' + "".join(_sol_cell(r) for r in rows) + "</div>"


def _title_html(state: WeatherState) -> str:
    refresh = (
        '<a href="?mars_refresh=1" target="_self" class="pill">Refresh</a>'
        if state.status != LOADING
        else ""
    )
    return f"{TITLE}&nbsp;&nbsp;{refresh}"


def card_mars_weather() -> None:
    """Render the sol list: loading, empty, error or one cell per sol."""
    try:
        job = _get_job()
        _handle_refresh(job)
        state = job.snapshot()

        section_title(_title_html(state), mb=4)

        if state.status == LOADING:
            st.markdown(hint(LOADING_TEXT), unsafe_allow_html=True)
            time.sleep(LOADING_POLL_S)
            st.rerun()
            return

        if state.status == ERROR:
            card(TITLE, hint(f"Error: {state.error}"), height_dvh=12)
        elif state.status == EMPTY:
            card(TITLE, hint(EMPTY_TEXT), height_dvh=12)
        else:
            st.markdown(sol_list_html(state.rows), unsafe_allow_html=True)
            render_sol_trend(state.rows)

        # vanha tila näkyy kunnes uusi haku valmistuu
        if job.running:
            st.caption("Refreshing…")
            time.sleep(LOADING_POLL_S)
            st.rerun()

    except Exception as e:
        report_error("card_mars_weather", e)
        card(TITLE, hint(f"Error: {e}"), height_dvh=12)
