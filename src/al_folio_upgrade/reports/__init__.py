"""Reports — markdown upgrade report and terminal summary."""

from al_folio_upgrade.reports.upgrade_report import render_markdown, summary_line, write_report

__all__ = [
    "render_markdown",
    "summary_line",
    "write_report",
]
