"""Engine — runs the checks, applies codemods, writes the report.

Every public method is a fresh, complete rescan of the project tree; the
engine keeps no state between calls beyond its constructor arguments.
"""

from __future__ import annotations

import logging
from pathlib import Path

from al_folio_upgrade.checks import Check, default_checks
from al_folio_upgrade.codemods.applier import ApplyResult, CodemodApplier
from al_folio_upgrade.core.config import UpgradeSettings
from al_folio_upgrade.core.discover import locate_files
from al_folio_upgrade.core.registry import (
    MigrationCatalog,
    PackageLocator,
    StaticMigrationCatalog,
    StaticPackageLocator,
)
from al_folio_upgrade.errors import UnsupportedModeError
from al_folio_upgrade.model.audit_result import AuditResult
from al_folio_upgrade.model.finding import Finding, has_blocking
from al_folio_upgrade.reports.upgrade_report import write_report

_logger = logging.getLogger(__name__)


class UpgradeEngine:
    """Audit-and-codemod engine bound to one project root.

    Parameters
    ----------
    root:
        Project root.  Resolved once; all paths are relative to it.
    catalog, locator:
        Discovery hooks for optional companion packages.  Default to the
        static no-op implementations.
    settings:
        Glob set, ignore list, config file name and report path.
    checks:
        Override the check list (mostly for tests).
    """

    def __init__(
        self,
        root: str | Path,
        *,
        catalog: MigrationCatalog | None = None,
        locator: PackageLocator | None = None,
        settings: UpgradeSettings | None = None,
        checks: list[Check] | None = None,
    ) -> None:
        self.root = Path(root).resolve()
        self.settings = settings or UpgradeSettings()
        self.catalog = catalog or StaticMigrationCatalog()
        self.locator = locator or StaticPackageLocator()
        self.checks = checks if checks is not None else default_checks(
            self.catalog,
            self.locator,
            config_file=self.settings.config_file,
        )
        self.applier = CodemodApplier(config_file=self.settings.config_file)

    # ── discovery ───────────────────────────────────────────────────

    def candidate_files(self) -> list[Path]:
        return locate_files(
            self.root,
            globs=self.settings.file_globs,
            ignore=self.settings.ignore_patterns,
        )

    # ── audit ───────────────────────────────────────────────────────

    def audit(self) -> list[Finding]:
        """Run every check in order and return the concatenated findings."""
        files = self.candidate_files()
        findings: list[Finding] = []
        for check in self.checks:
            check_id = getattr(check, "id", type(check).__name__)
            try:
                results = check.run(self.root, files)
            except Exception:
                _logger.exception("Check '%s' raised an exception — skipped", check_id)
                continue
            _logger.debug("check %s: %d finding(s)", check_id, len(results))
            findings.extend(results)
        return findings

    @staticmethod
    def has_blocking(findings: list[Finding]) -> bool:
        return has_blocking(findings)

    # ── codemods ────────────────────────────────────────────────────

    def apply_codemods(self, *, safe: bool = True, dry_run: bool = False) -> ApplyResult:
        """Rewrite candidate files.  Only the safe mode exists."""
        if not safe:
            raise UnsupportedModeError("Only --safe mode is supported in v1.x.")
        return self.applier.apply(self.root, self.candidate_files(), dry_run=dry_run)

    # ── commands ────────────────────────────────────────────────────

    def write_report(self, findings: list[Finding]) -> Path:
        return write_report(self.root, findings, report_path=self.settings.report_path)

    def run_audit(self, command: str = "audit") -> AuditResult:
        """``audit`` / ``report``: rescan, then overwrite the report file."""
        findings = self.audit()
        self.write_report(findings)
        return AuditResult(command=command, findings=findings)

    def run_apply(self, *, safe: bool = True, dry_run: bool = False) -> AuditResult:
        """``apply``: codemods first, then a fresh audit of the result."""
        applied = self.apply_codemods(safe=safe, dry_run=dry_run)
        findings = self.audit()
        self.write_report(findings)
        return AuditResult(
            command="apply",
            findings=findings,
            changed_files=applied.changed_files,
            dry_run=dry_run,
        )
