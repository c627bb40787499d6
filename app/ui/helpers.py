from __future__ import annotations

from typing import Optional

import streamlit as st

from examertric.notices import Notice

_NOTICE_KEY = "_pending_notices"


def flash(notice: Notice) -> None:
    """Queue a notice so it survives the rerun triggered by the action."""
    st.session_state.setdefault(_NOTICE_KEY, []).append(notice)


def render_notices() -> None:
    pending = st.session_state.pop(_NOTICE_KEY, [])
    for notice in pending:
        text = f"**{notice.title}**"
        if notice.description:
            text += f": {notice.description}"
        if notice.is_error:
            st.error(text)
        else:
            st.toast(text, icon="✅")


def download_csv(label: str, csv_text: str, filename: str) -> None:
    st.download_button(
        label=label,
        data=csv_text.encode("utf-8"),
        file_name=filename,
        mime="text/csv",
        key=f"dl:{filename}",
    )


def style_fig(fig, title: Optional[str] = None):
    fig.update_layout(
        title=title or fig.layout.title.text,
        margin=dict(t=60, r=24, b=40, l=24),
        template="plotly_white",
        font=dict(family="Inter, sans-serif", size=12),
        hoverlabel=dict(font_size=12),
    )
    return fig
