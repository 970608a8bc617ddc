"""Tests for the markdown upgrade report."""

from __future__ import annotations

from pathlib import Path

from al_folio_upgrade.model import Severity
from al_folio_upgrade.model.finding import Finding
from al_folio_upgrade.reports.upgrade_report import (
    format_findings,
    render_markdown,
    summary_line,
    write_report,
)


def _make_finding(
    *,
    finding_id: str = "legacy_jquery_usage",
    severity: Severity = Severity.WARNING,
    file: str = "assets/js/common.js",
    line: int = 3,
    message: str = "jQuery usage found; migrate to vanilla JS APIs.",
    snippet: str = "$('.x').hide();",
) -> Finding:
    return Finding(
        id=finding_id,
        severity=severity,
        message=message,
        file=file,
        line=line,
        snippet=snippet,
    )


class TestRenderMarkdown:
    def test_empty_findings(self):
        md = render_markdown([])
        assert md.startswith("# al-folio upgrade report\n")
        assert "- Blocking findings: 0\n- Non-blocking findings: 0" in md
        assert "## Blocking\n\n- None\n" in md
        assert "## Non-blocking\n\n- None\n" in md
        assert md.endswith("\n")

    def test_bullet_format(self):
        lines = format_findings([_make_finding()])
        assert lines == [
            "- [legacy_jquery_usage] jQuery usage found; migrate to vanilla JS APIs. "
            "(`assets/js/common.js:3`)",
            "  - Snippet: `$('.x').hide();`",
        ]

    def test_grouped_by_severity_order_preserved(self):
        findings = [
            _make_finding(file="b.js"),
            _make_finding(finding_id="invalid_config_yaml", severity=Severity.BLOCKING, file="_config.yml", line=1),
            _make_finding(file="a.js"),
        ]
        md = render_markdown(findings)
        blocking, non_blocking = md.split("## Non-blocking")
        assert "_config.yml:1" in blocking
        assert "_config.yml" not in non_blocking
        assert non_blocking.index("b.js:3") < non_blocking.index("a.js:3")
        assert "- Blocking findings: 1\n- Non-blocking findings: 2" in md

    def test_one_group_empty(self):
        md = render_markdown([_make_finding()])
        assert "## Blocking\n\n- None\n\n## Non-blocking" in md

    def test_deterministic(self):
        findings = [_make_finding(), _make_finding(line=9)]
        assert render_markdown(findings) == render_markdown(list(findings))


class TestWriteReport:
    def test_overwrites(self, tmp_path: Path):
        target = tmp_path / "al-folio-upgrade-report.md"
        target.write_text("stale content that must disappear\n" * 50)
        out = write_report(tmp_path, [])
        assert out == target
        assert target.read_text() == render_markdown([])

    def test_custom_path(self, tmp_path: Path):
        out = write_report(tmp_path, [], report_path="reports/upgrade.md")
        assert out == tmp_path / "reports" / "upgrade.md"
        assert out.is_file()


def test_summary_line():
    findings = [
        _make_finding(severity=Severity.BLOCKING),
        _make_finding(),
        _make_finding(),
    ]
    assert summary_line(findings) == "Upgrade audit complete. Blocking: 1, Non-blocking: 2."
