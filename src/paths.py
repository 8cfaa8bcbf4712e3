"""
paths.py – keskitetyt polut Mars Weather -sovellukselle.

    from src.paths import ASSETS, LOGS, asset_path

toimii riippumatta siitä, ajetaanko sovellus projektin juuresta
(streamlit run main.py) vai jostain muualta.
"""

from __future__ import annotations
from pathlib import Path

# src/paths.py -> src -> projektin juuri
ROOT_DIR = Path(__file__).resolve().parent.parent

ASSETS = ROOT_DIR / "assets"
LOGS = ROOT_DIR / "logs"


def asset_path(*parts: str) -> Path:
    """Palauttaa polun assets-kansioon (CSS)."""
    return ASSETS.joinpath(*parts)


def ensure_dirs() -> None:
    """Varmistaa, että logs/ on olemassa."""
    LOGS.mkdir(parents=True, exist_ok=True)
