from .helpers import download_csv, flash, render_notices, style_fig
from .shell import AppShell, card, key_finding, kpi_row, muted, section_header, type_pill

__all__ = [
    "AppShell",
    "card",
    "download_csv",
    "flash",
    "key_finding",
    "kpi_row",
    "muted",
    "render_notices",
    "section_header",
    "style_fig",
    "type_pill",
]
