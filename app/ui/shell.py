from __future__ import annotations

import string
from typing import Iterable, Optional

import streamlit as st

PRIMARY = "#2563eb"
SECONDARY = "#22d3ee"
ACCENT = "#f59e0b"
SURFACE = "#f8fafc"
TEXT = "#0f172a"
MUTED = "#64748b"
SUCCESS = "#16a34a"
ERROR = "#dc2626"

CSS_TEMPLATE = """
<style>
:root {
    --primary: $PRIMARY;
    --secondary: $SECONDARY;
    --accent: $ACCENT;
    --surface: $SURFACE;
    --text: $TEXT;
    --muted: $MUTED;
    --radius-lg: 16px;
    --radius-md: 10px;
}

section.main .block-container {
    padding: 1.5rem 2.2rem 2rem 2.2rem;
    max-width: 1200px;
}

.exam-card {
    border: 1px solid rgba(15,23,42,0.08);
    border-radius: var(--radius-lg);
    padding: 1rem 1.2rem;
    background: white;
    box-shadow: 0 8px 24px rgba(15,23,42,0.06);
}

.exam-kpi {
    background: linear-gradient(135deg, rgba(37,99,235,0.08), rgba(34,211,238,0.08));
    border: 1px solid rgba(15,23,42,0.08);
    border-radius: var(--radius-md);
    padding: 0.9rem 1rem;
}
.exam-kpi .label { color: $MUTED; font-size: 0.85rem; margin-bottom: 0.25rem; }
.exam-kpi .value { font-size: 2rem; font-weight: 700; color: var(--text); }

.exam-finding {
    border-left: 4px solid $PRIMARY;
    background: rgba(37,99,235,0.06);
    border-radius: var(--radius-md);
    padding: 0.9rem 1.1rem;
    font-size: 1.15rem;
    font-weight: 500;
}

.exam-pill {
    display: inline-flex;
    align-items: center;
    padding: 0.2rem 0.6rem;
    border-radius: 999px;
    font-size: 0.78rem;
    font-weight: 600;
}
.exam-pill.Oral { background: rgba(37,99,235,0.12); color: $PRIMARY; }
.exam-pill.Written { background: rgba(34,211,238,0.15); color: #0e7490; }
.exam-pill.Both { background: rgba(245,158,11,0.15); color: #b45309; }

.small-muted { color: var(--muted); font-size: 0.9rem; }
.section-header { font-weight: 700; font-size: 1.15rem; margin: 0.6rem 0 0.35rem 0; }
</style>
"""

GLOBAL_CSS = string.Template(CSS_TEMPLATE).safe_substitute(
    {
        "PRIMARY": PRIMARY,
        "SECONDARY": SECONDARY,
        "ACCENT": ACCENT,
        "SURFACE": SURFACE,
        "TEXT": TEXT,
        "MUTED": MUTED,
    }
)


def muted(text: str):
    st.markdown(f"<div class='small-muted'>{text}</div>", unsafe_allow_html=True)


def type_pill(kind: str) -> str:
    return f"<span class='exam-pill {kind}'>{kind}</span>"


def section_header(title: str, description: Optional[str] = None):
    st.markdown(f"<div class='section-header'>{title}</div>", unsafe_allow_html=True)
    if description:
        muted(description)


def card(title: Optional[str] = None, description: Optional[str] = None):
    class _Card:
        def __enter__(self):
            st.markdown("<div class='exam-card'>", unsafe_allow_html=True)
            if title:
                section_header(title, description)
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            st.markdown("</div>", unsafe_allow_html=True)
            st.markdown("<div style='height:0.6rem'></div>", unsafe_allow_html=True)
            return False

    return _Card()


def kpi_row(items: Iterable[dict]):
    items = list(items)
    cols = st.columns(len(items)) if items else []
    for col, item in zip(cols, items):
        with col:
            st.markdown(
                f"""
                <div class='exam-kpi'>
                    <div class='label'>{item.get('label', '')}</div>
                    <div class='value'>{item.get('value', '-')}</div>
                </div>
                """,
                unsafe_allow_html=True,
            )


def key_finding(text: str):
    st.markdown(f"<div class='exam-finding'>{text}</div>", unsafe_allow_html=True)


class AppShell:
    def __init__(self, title: str, subtitle: Optional[str] = None):
        self.title = title
        self.subtitle = subtitle
        st.markdown(GLOBAL_CSS, unsafe_allow_html=True)

    def header(self, page: str, description: Optional[str] = None):
        st.title(page)
        if description:
            muted(description)

    def sidebar_brand(self):
        st.sidebar.markdown(f"## {self.title}")
        if self.subtitle:
            st.sidebar.caption(self.subtitle)
