"""Upgrade-report generator — markdown summary of an audit.

Renders a Markdown document with:

*  Title and generator line.
*  Summary — blocking and non-blocking counts.
*  ``Blocking`` and ``Non-blocking`` sections, one bullet per finding in
   the order the checks produced them.

The output contains no timestamps, so two runs over the same tree produce
byte-identical reports (suitable for CI artifacts and diffs).
"""

from __future__ import annotations

import logging
from pathlib import Path

from al_folio_upgrade.core.config import REPORT_PATH
from al_folio_upgrade.model import Severity
from al_folio_upgrade.model.finding import Finding

_logger = logging.getLogger(__name__)

GENERATOR_COMMAND = "al-folio-upgrade upgrade report"


def _group(findings: list[Finding], severity: Severity) -> list[Finding]:
    return [f for f in findings if f.severity is severity]


def format_findings(findings: list[Finding]) -> list[str]:
    """Bullet lines for one severity group; ``- None`` when empty."""
    if not findings:
        return ["- None"]
    lines: list[str] = []
    for f in findings:
        lines.append(f"- [{f.id}] {f.message} (`{f.location}`)")
        lines.append(f"  - Snippet: `{f.snippet}`")
    return lines


def render_markdown(findings: list[Finding]) -> str:
    """Render *findings* as the upgrade report.

    Returns
    -------
    str
        Complete Markdown document, newline-terminated.
    """
    blocking = _group(findings, Severity.BLOCKING)
    warning = _group(findings, Severity.WARNING)

    lines: list[str] = [
        "# al-folio upgrade report",
        "",
        f"Generated by `{GENERATOR_COMMAND}`.",
        "",
        "## Summary",
        "",
        f"- Blocking findings: {len(blocking)}",
        f"- Non-blocking findings: {len(warning)}",
        "",
        "## Blocking",
        "",
        *format_findings(blocking),
        "",
        "## Non-blocking",
        "",
        *format_findings(warning),
    ]
    return "\n".join(lines) + "\n"


def write_report(
    root: Path,
    findings: list[Finding],
    *,
    report_path: str = REPORT_PATH,
) -> Path:
    """Overwrite ``root/report_path`` with the rendered report."""
    out = root / report_path
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_markdown(findings), encoding="utf-8")
    _logger.debug("wrote %s", out)
    return out


def summary_line(findings: list[Finding]) -> str:
    blocking = len(_group(findings, Severity.BLOCKING))
    warning = len(_group(findings, Severity.WARNING))
    return f"Upgrade audit complete. Blocking: {blocking}, Non-blocking: {warning}."
