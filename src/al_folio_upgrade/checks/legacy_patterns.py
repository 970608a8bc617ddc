"""Legacy inline patterns — Bootstrap ``data-toggle`` markers and jQuery calls.

Runs over every candidate file from the locator, so vendored and minified
assets (already dropped by the ignore list) are never flagged.  Each marker
on a line yields its own finding.
"""

from __future__ import annotations

import re
from pathlib import Path

from al_folio_upgrade.core.discover import read_lines, relative_posix
from al_folio_upgrade.model import CheckType, Severity
from al_folio_upgrade.model.finding import Finding

# (finding id, pattern, message)
_INLINE_MARKERS: tuple[tuple[str, re.Pattern[str], str], ...] = (
    (
        "legacy_data_toggle",
        re.compile(
            r"""data-toggle\s*=\s*["'](?:collapse|dropdown|tooltip|popover|table)["']"""
        ),
        "Legacy Bootstrap `data-toggle` marker found.",
    ),
    (
        "legacy_jquery_usage",
        re.compile(r"\$\(|jQuery\b"),
        "jQuery usage found; migrate to vanilla JS APIs.",
    ),
)


class LegacyInlinePatternsCheck:
    id: str = CheckType.LEGACY_PATTERNS.value
    version: str = "1.0.0"

    def run(self, root: Path, files: list[Path]) -> list[Finding]:
        findings: list[Finding] = []
        for path in files:
            rel = relative_posix(path, root)
            for line_no, line in enumerate(read_lines(path), start=1):
                for finding_id, pattern, message in _INLINE_MARKERS:
                    if not pattern.search(line):
                        continue
                    findings.append(
                        Finding(
                            id=finding_id,
                            severity=Severity.WARNING,
                            message=message,
                            file=rel,
                            line=line_no,
                            snippet=line.strip(),
                        )
                    )
        return findings
