"""Core override drift — local copies of files owned by ``al_folio_core``."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from al_folio_upgrade.core.config import CONFIG_FILE, load_config
from al_folio_upgrade.core.registry import CORE_PACKAGE
from al_folio_upgrade.errors import ConfigParseError
from al_folio_upgrade.model import CheckType, Severity
from al_folio_upgrade.model.finding import Finding

# Files the core theme package ships; a local copy shadows the packaged one.
CORE_OVERRIDE_FILES: tuple[str, ...] = (
    "_includes/head.liquid",
    "_includes/scripts.liquid",
    "_layouts/default.liquid",
    "_layouts/post.liquid",
    "_layouts/page.liquid",
    "_layouts/distill.liquid",
    "assets/js/common.js",
    "assets/js/theme.js",
    "assets/js/tooltips-setup.js",
    "assets/tailwind/app.css",
    "tailwind.config.js",
)


def uses_core_theme(tree: Any) -> bool:
    """``theme: al_folio_core`` or ``al_folio_core`` listed under ``plugins``."""
    if not isinstance(tree, dict):
        return False
    if tree.get("theme") == CORE_PACKAGE:
        return True
    plugins = tree.get("plugins")
    if plugins is None:
        return False
    if not isinstance(plugins, list):
        plugins = [plugins]
    return CORE_PACKAGE in plugins


class CoreOverrideDriftCheck:
    id: str = CheckType.CORE_OVERRIDE.value
    version: str = "1.0.0"

    def __init__(self, config_file: str = CONFIG_FILE) -> None:
        self.config_file = config_file

    def run(self, root: Path, files: list[Path]) -> list[Finding]:
        try:
            tree = load_config(root, self.config_file)
        except ConfigParseError:
            return []
        if not uses_core_theme(tree):
            return []

        return [
            Finding(
                id="core_override_drift",
                severity=Severity.WARNING,
                message=(
                    "Local override shadows `al_folio_core` theme file and may "
                    "need manual review during upgrades."
                ),
                file=rel,
                line=1,
                snippet="Local override present.",
            )
            for rel in CORE_OVERRIDE_FILES
            if (root / rel).is_file()
        ]
