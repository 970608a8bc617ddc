"""Finding — the normalized engine output for a single detected issue."""

from __future__ import annotations

from dataclasses import dataclass

from . import Severity


@dataclass(frozen=True, slots=True)
class Finding:
    """Immutable audit finding.

    Corresponds to ``findings[]`` in ``upgrade_result.schema.json``.
    ``file`` is root-relative (POSIX separators) or a synthetic
    ``package:path`` label for files living outside the project.
    """

    id: str
    severity: Severity
    message: str
    file: str
    line: int = 1
    snippet: str = ""

    @property
    def is_blocking(self) -> bool:
        return self.severity is Severity.BLOCKING

    @property
    def location(self) -> str:
        return f"{self.file}:{self.line}"

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "severity": self.severity.value,
            "message": self.message,
            "file": self.file,
            "line": self.line,
            "snippet": self.snippet,
        }


def has_blocking(findings: list[Finding]) -> bool:
    """True when at least one finding should gate the upgrade."""
    return any(f.is_blocking for f in findings)
