"""Manifest availability — is there at least one upgrade manifest to follow?

Manifests come from the injected ``MigrationCatalog`` (normally the
``al_folio_core`` package).  Without a catalog the project's own
``migrations/`` directory is scanned for ``<from>_to_<to>.yml`` files.
Manifest content is not validated here.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from al_folio_upgrade.core.registry import MigrationCatalog, StaticMigrationCatalog
from al_folio_upgrade.model import CheckType, Severity
from al_folio_upgrade.model.finding import Finding

_logger = logging.getLogger(__name__)

MIGRATIONS_DIR = "migrations"

_MANIFEST_NAME_RE = re.compile(r"^[^_/]+_to_[^_/]+\.ya?ml$")


def scan_migrations_dir(root: Path) -> list[Path]:
    directory = root / MIGRATIONS_DIR
    if not directory.is_dir():
        return []
    return sorted(
        p for p in directory.iterdir()
        if p.is_file() and _MANIFEST_NAME_RE.match(p.name)
    )


class ManifestAvailabilityCheck:
    """Warns when no migration manifest can be found."""

    id: str = CheckType.MANIFEST.value
    version: str = "1.0.0"

    def __init__(self, catalog: MigrationCatalog | None = None) -> None:
        self._catalog = catalog or StaticMigrationCatalog()

    def manifest_paths(self, root: Path) -> list[Path]:
        try:
            published = self._catalog.manifest_paths()
        except Exception:
            _logger.warning(
                "Migration catalog raised — scanning %s/ instead",
                MIGRATIONS_DIR,
                exc_info=True,
            )
            published = None
        if published is not None:
            return [p for p in published if p.is_file()]
        return scan_migrations_dir(root)

    def run(self, root: Path, files: list[Path]) -> list[Finding]:
        if self.manifest_paths(root):
            return []
        return [
            Finding(
                id="missing_migration_manifests",
                severity=Severity.WARNING,
                message=(
                    "No migration manifests found. Install/update "
                    "`al_folio_core` to get release contracts."
                ),
                file=f"{MIGRATIONS_DIR}/",
                line=1,
                snippet="Expected at least one `x.y.z_to_a.b.c.yml` manifest.",
            )
        ]
