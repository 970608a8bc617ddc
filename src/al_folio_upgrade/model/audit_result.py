"""AuditResult — the schema-aligned artifact of one upgrade command."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from al_folio_upgrade import __version__
from al_folio_upgrade.model import Severity
from al_folio_upgrade.model.finding import Finding


@dataclass(slots=True)
class AuditResult:
    """Findings of a full rescan plus, for ``apply``, the rewritten files.

    Constructed by ``core.engine`` once every check has run.
    """

    command: str = "audit"
    findings: list[Finding] = field(default_factory=list)
    changed_files: list[str] = field(default_factory=list)
    dry_run: bool = False
    tool_version: str = __version__

    @property
    def blocking(self) -> list[Finding]:
        return [f for f in self.findings if f.severity is Severity.BLOCKING]

    @property
    def warnings(self) -> list[Finding]:
        return [f for f in self.findings if f.severity is Severity.WARNING]

    @property
    def has_blocking(self) -> bool:
        return any(f.is_blocking for f in self.findings)

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Produce the JSON document matching ``upgrade_result.schema.json``."""
        return {
            "schema_version": "upgrade_result_v1",
            "tool_version": self.tool_version,
            "command": self.command,
            "summary": {
                "blocking": len(self.blocking),
                "non_blocking": len(self.warnings),
                "has_blocking": self.has_blocking,
            },
            "codemods": {
                "dry_run": self.dry_run,
                "changed_files": list(self.changed_files),
            },
            "findings": [f.to_dict() for f in self.findings],
        }
