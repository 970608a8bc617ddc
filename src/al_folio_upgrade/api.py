"""
al_folio_upgrade.api
====================

Programmatic entrypoints for using the upgrade engine from other tools.

Goals:
  - No argparse / CLI dependencies
  - JSON-friendly outputs that match ``upgrade_result.schema.json``
  - Explicit discovery hooks (host probing is opt-in)

Usage::

    from al_folio_upgrade.api import audit_project, apply_safe_codemods

    result = audit_project("path/to/site")
    if result.has_blocking:
        ...
    applied = apply_safe_codemods("path/to/site", dry_run=True)
"""

from __future__ import annotations

from pathlib import Path

from al_folio_upgrade.core.engine import UpgradeEngine
from al_folio_upgrade.core.registry import host_hooks, static_hooks
from al_folio_upgrade.model.audit_result import AuditResult
from al_folio_upgrade.model.finding import has_blocking  # noqa: F401  (re-export)


def _engine(root: str | Path, *, probe_packages: bool) -> UpgradeEngine:
    catalog, locator = host_hooks() if probe_packages else static_hooks()
    return UpgradeEngine(root, catalog=catalog, locator=locator)


def audit_project(
    root: str | Path,
    *,
    probe_packages: bool = False,
    write_report: bool = True,
) -> AuditResult:
    """Audit *root*; optionally (default) overwrite the markdown report."""
    engine = _engine(root, probe_packages=probe_packages)
    if write_report:
        return engine.run_audit()
    return AuditResult(command="audit", findings=engine.audit())


def apply_safe_codemods(
    root: str | Path,
    *,
    probe_packages: bool = False,
    dry_run: bool = False,
) -> AuditResult:
    """Apply the safe codemods to *root*, then re-audit and write the report."""
    engine = _engine(root, probe_packages=probe_packages)
    return engine.run_apply(safe=True, dry_run=dry_run)
