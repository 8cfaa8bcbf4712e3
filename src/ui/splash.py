# src/ui/splash.py
from __future__ import annotations

import time

import streamlit as st

from src.config import COLOR_MARS_ORANGE, COLOR_MARS_RED, SPLASH_SECONDS

SPLASH_DONE_KEY = "mars_splash_done"

# (koko px, x-offset, y-offset, väri, opacity)
CRATERS: tuple[tuple[int, int, int, str, float], ...] = (
    (50, -70, -60, COLOR_MARS_ORANGE, 0.7),
    (30, 80, -30, COLOR_MARS_RED, 0.5),
    (40, 20, 70, COLOR_MARS_ORANGE, 0.8),
)


def _crater_html(size: int, dx: int, dy: int, color: str, opacity: float) -> str:
    # offset on kraaterin keskipisteen siirtymä planeetan keskeltä
    left = 150 + dx - size // 2
    top = 150 + dy - size // 2
    return (
        f'<div class="mars-crater" style="width:{size}px;height:{size}px;'
        f"left:{left}px;top:{top}px;background:{color};opacity:{opacity};\"></div>"
    )


def splash_html(seconds: float = SPLASH_SECONDS) -> str:
    """Mars-planeetta mustalla taustalla, häivytys sisään ja ulos ``seconds`` aikana."""
    craters = "".join(_crater_html(*c) for c in CRATERS)
    return f"""
        <style>
          @keyframes mars-fade {{
            0%   {{ opacity: 0; transform: scale(0.92); }}
            20%  {{ opacity: 1; transform: scale(1.0); }}
            80%  {{ opacity: 1; transform: scale(1.0); }}
            100% {{ opacity: 0; transform: scale(1.04); }}
          }}
          .mars-splash {{
            position:fixed; inset:0; z-index:9999; background:#000;
            display:flex; align-items:center; justify-content:center;
          }}
          .mars-planet {{
            position:relative; width:300px; height:300px; border-radius:50%;
            background: radial-gradient(circle at center,
                        {COLOR_MARS_RED} 3%, {COLOR_MARS_ORANGE} 50%, {COLOR_MARS_RED} 100%);
            box-shadow: 0 10px 10px rgba(193,68,14,0.5);
            animation: mars-fade {seconds:.2f}s ease-in-out forwards;
          }}
          .mars-crater {{ position:absolute; border-radius:50%; }}
        </style>
        <div class="mars-splash"><div class="mars-planet">{craters}</div></div>
    """


def show_splash(seconds: float = SPLASH_SECONDS) -> bool:
    """Näyttää splashin kerran per selainistunto. Palauttaa True jos näytettiin.

    Ajastin on kiinteä eikä odota datahakua.
    """
    if st.session_state.get(SPLASH_DONE_KEY):
        return False

    placeholder = st.empty()
    placeholder.markdown(splash_html(seconds), unsafe_allow_html=True)
    time.sleep(seconds)
    placeholder.empty()
    st.session_state[SPLASH_DONE_KEY] = True
    return True
