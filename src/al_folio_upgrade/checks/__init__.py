"""Checks produce findings from the project tree.

Every check exposes ``id``, ``version`` and
``run(root, files) -> list[Finding]``, where *files* is the candidate list
from ``core.discover.locate_files``.  Checks handle their own missing or
malformed inputs and return normally.

Available checks, in execution order:
    - ManifestAvailabilityCheck: upgrade manifests are published
    - ConfigContractCheck: ``al_folio`` namespace shape
    - LegacyAssetReferencesCheck: Bootstrap/jQuery bundles in core includes
    - LegacyInlinePatternsCheck: ``data-toggle`` and jQuery calls
    - DistillRemoteLoaderCheck: remote Distill template loading
    - CoreOverrideDriftCheck: local copies of core-theme files
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from al_folio_upgrade.checks.config_contract import ConfigContractCheck
from al_folio_upgrade.checks.core_override import CoreOverrideDriftCheck
from al_folio_upgrade.checks.distill_runtime import DistillRemoteLoaderCheck
from al_folio_upgrade.checks.legacy_assets import LegacyAssetReferencesCheck
from al_folio_upgrade.checks.legacy_patterns import LegacyInlinePatternsCheck
from al_folio_upgrade.checks.manifest import ManifestAvailabilityCheck
from al_folio_upgrade.core.config import CONFIG_FILE
from al_folio_upgrade.core.registry import MigrationCatalog, PackageLocator
from al_folio_upgrade.model.finding import Finding


class Check(Protocol):
    """Every check must expose ``id``, ``version``, and ``run()``."""

    id: str
    version: str

    def run(self, root: Path, files: list[Path]) -> list[Finding]:
        """Inspect *files* under *root* and return findings."""
        ...


def default_checks(
    catalog: MigrationCatalog,
    locator: PackageLocator,
    *,
    config_file: str = CONFIG_FILE,
) -> list[Check]:
    return [
        ManifestAvailabilityCheck(catalog),
        ConfigContractCheck(config_file),
        LegacyAssetReferencesCheck(),
        LegacyInlinePatternsCheck(),
        DistillRemoteLoaderCheck(locator, config_file=config_file),
        CoreOverrideDriftCheck(config_file),
    ]


__all__ = [
    "Check",
    "ConfigContractCheck",
    "CoreOverrideDriftCheck",
    "DistillRemoteLoaderCheck",
    "LegacyAssetReferencesCheck",
    "LegacyInlinePatternsCheck",
    "ManifestAvailabilityCheck",
    "default_checks",
]
