"""Distill remote-loader policy.

Unless ``al_folio.distill.allow_remote_loader`` is literally ``true``, the
Distill transforms runtime must not pull ``template.v2.js`` from
distill.pub.  The runtime is looked up in the project first, then inside
any installed ``al_folio_distill`` package found by the ``PackageLocator``.
"""

from __future__ import annotations

import re
from pathlib import Path

from al_folio_upgrade.core.config import CONFIG_FILE, dig, load_config
from al_folio_upgrade.core.discover import read_lines
from al_folio_upgrade.core.registry import (
    DISTILL_PACKAGE,
    PackageLocator,
    StaticPackageLocator,
)
from al_folio_upgrade.errors import ConfigParseError
from al_folio_upgrade.model import CheckType, Severity
from al_folio_upgrade.model.finding import Finding

TRANSFORMS_PATH = "assets/js/distillpub/transforms.v2.js"
REMOTE_TEMPLATE_RE = re.compile(r"https://distill\.pub/template\.v2\.js")


def remote_loader_allowed(root: Path, config_file: str = CONFIG_FILE) -> bool:
    try:
        tree = load_config(root, config_file)
    except ConfigParseError:
        return False
    return dig(tree, "al_folio", "distill", "allow_remote_loader") is True


class DistillRemoteLoaderCheck:
    id: str = CheckType.DISTILL_RUNTIME.value
    version: str = "1.0.0"

    def __init__(
        self,
        locator: PackageLocator | None = None,
        *,
        config_file: str = CONFIG_FILE,
    ) -> None:
        self._locator = locator or StaticPackageLocator()
        self.config_file = config_file

    def runtime_paths(self, root: Path) -> list[Path]:
        candidates = [root / TRANSFORMS_PATH]
        candidates.extend(
            package_root / TRANSFORMS_PATH
            for package_root in self._locator.locate(DISTILL_PACKAGE)
        )
        paths: list[Path] = []
        for p in candidates:
            if p.is_file() and p not in paths:
                paths.append(p)
        return paths

    @staticmethod
    def _report_label(path: Path, root: Path) -> str:
        try:
            return path.relative_to(root).as_posix()
        except ValueError:
            return f"{DISTILL_PACKAGE}:{path}"

    def run(self, root: Path, files: list[Path]) -> list[Finding]:
        if remote_loader_allowed(root, self.config_file):
            return []

        findings: list[Finding] = []
        for path in self.runtime_paths(root):
            label = self._report_label(path, root)
            for line_no, line in enumerate(read_lines(path), start=1):
                if not REMOTE_TEMPLATE_RE.search(line):
                    continue
                findings.append(
                    Finding(
                        id="distill_remote_loader_enabled",
                        severity=Severity.BLOCKING,
                        message=(
                            "Distill runtime still references remote template "
                            "loader while allow_remote_loader is false."
                        ),
                        file=label,
                        line=line_no,
                        snippet=line.strip(),
                    )
                )
        return findings
