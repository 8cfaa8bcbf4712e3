# src/ui/common.py
from __future__ import annotations

import html

import streamlit as st

from src.paths import asset_path


def load_css(file_name: str) -> None:
    """Inject a stylesheet from assets/ if it exists."""
    path = asset_path(file_name)
    if not path.exists():
        return
    st.markdown(f"<style>{path.read_text(encoding='utf-8')}</style>", unsafe_allow_html=True)


def section_title(title_html: str, mt: int = 10, mb: int = 10) -> None:
    """Render a section title. title_html is trusted markup."""
    st.markdown(
        f"<div class='section-title' style='margin:{mt}px 0 {mb}px 0'>{title_html}</div>",
        unsafe_allow_html=True,
    )


def hint(text: str) -> str:
    """Harmaa vihjeteksti, escapetettu."""
    return f"<span class='hint'>{html.escape(text)}</span>"


def card(title: str, body_html: str, height_dvh: int = 16) -> None:
    """Render a titled card. Used for the empty and error states."""
    st.markdown(
        f"""
        <section class="card" style="min-height:{height_dvh}dvh; position:relative; overflow:hidden;">
          <div class="card-title">{html.escape(title)}</div>
          <div class="card-body">{body_html}</div>
        </section>
        """,
        unsafe_allow_html=True,
    )
