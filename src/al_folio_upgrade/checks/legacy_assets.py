"""Legacy asset references in the core includes.

Bootstrap, MDB and jQuery runtime bundles must be gone from the head and
script includes before the tailwind runtime can take over.
"""

from __future__ import annotations

import re
from pathlib import Path

from al_folio_upgrade.core.discover import read_lines
from al_folio_upgrade.model import CheckType, Severity
from al_folio_upgrade.model.finding import Finding

CORE_INCLUDES: tuple[str, ...] = (
    "_includes/head.liquid",
    "_includes/scripts.liquid",
)

_LEGACY_ASSET_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"bootstrap\.min\.css"),
    re.compile(r"mdbootstrap|mdb\.min\.(?:css|js)"),
    re.compile(r"third_party_libraries\.jquery"),
    re.compile(r"bootstrap\.bundle\.min\.js"),
)


class LegacyAssetReferencesCheck:
    """One blocking finding per include line referencing a legacy bundle."""

    id: str = CheckType.LEGACY_ASSETS.value
    version: str = "1.0.0"

    def __init__(self, includes: tuple[str, ...] = CORE_INCLUDES) -> None:
        self.includes = includes

    def run(self, root: Path, files: list[Path]) -> list[Finding]:
        findings: list[Finding] = []
        for rel in self.includes:
            path = root / rel
            if not path.is_file():
                continue
            for line_no, line in enumerate(read_lines(path), start=1):
                if not any(p.search(line) for p in _LEGACY_ASSET_PATTERNS):
                    continue
                findings.append(
                    Finding(
                        id="legacy_bootstrap_runtime_asset",
                        severity=Severity.BLOCKING,
                        message=(
                            "Legacy Bootstrap/jQuery/MDB runtime assets are "
                            "still referenced in core includes."
                        ),
                        file=rel,
                        line=line_no,
                        snippet=line.strip(),
                    )
                )
        return findings
