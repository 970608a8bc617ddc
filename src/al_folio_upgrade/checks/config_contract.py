"""Config contract — validates the ``al_folio`` namespace of ``_config.yml``.

Sub-checks are evaluated independently so one report lists every gap:

=====  ===========================================  =========
Step   Requirement                                  Severity
=====  ===========================================  =========
(a)    ``al_folio`` is a mapping                    blocking
(b)    ``al_folio.style_engine == "tailwind"``      blocking
(c)    ``al_folio.tailwind`` is a mapping           warning
(d)    ``al_folio.distill`` is a mapping            warning
=====  ===========================================  =========

A config that cannot be parsed yields a single ``invalid_config_yaml``
finding instead.  A missing config yields nothing.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from al_folio_upgrade.core.config import CONFIG_FILE, dig, load_config
from al_folio_upgrade.errors import ConfigParseError
from al_folio_upgrade.model import CheckType, Severity
from al_folio_upgrade.model.finding import Finding

NAMESPACE = "al_folio"
REQUIRED_STYLE_ENGINE = "tailwind"


class ConfigContractCheck:
    id: str = CheckType.CONFIG_CONTRACT.value
    version: str = "1.0.0"

    def __init__(self, config_file: str = CONFIG_FILE) -> None:
        self.config_file = config_file

    def _finding(self, finding_id: str, severity: Severity, message: str, snippet: str) -> Finding:
        return Finding(
            id=finding_id,
            severity=severity,
            message=message,
            file=self.config_file,
            line=1,
            snippet=snippet,
        )

    def run(self, root: Path, files: list[Path]) -> list[Finding]:
        try:
            tree = load_config(root, self.config_file)
        except ConfigParseError as exc:
            return [
                self._finding(
                    "invalid_config_yaml",
                    Severity.BLOCKING,
                    f"{self.config_file} could not be parsed: {exc.reason}",
                    "Fix YAML syntax before running upgrade codemods.",
                )
            ]
        if tree is None:
            return []
        return self.evaluate(tree)

    def evaluate(self, tree: Any) -> list[Finding]:
        """Contract findings for an already-parsed config tree."""
        findings: list[Finding] = []
        namespace = dig(tree, NAMESPACE)

        if not isinstance(namespace, dict):
            findings.append(
                self._finding(
                    "missing_al_folio_namespace",
                    Severity.BLOCKING,
                    "Missing `al_folio` config namespace required for v1.x.",
                    "Add al_folio.api_version, style_engine, compat, and upgrade keys.",
                )
            )

        if dig(namespace, "style_engine") != REQUIRED_STYLE_ENGINE:
            findings.append(
                self._finding(
                    "style_engine_not_tailwind",
                    Severity.BLOCKING,
                    "`al_folio.style_engine` should be set to `tailwind` for v1.x.",
                    "Set al_folio.style_engine: tailwind",
                )
            )

        if not isinstance(dig(namespace, "tailwind"), dict):
            findings.append(
                self._finding(
                    "missing_tailwind_namespace",
                    Severity.WARNING,
                    "Missing `al_folio.tailwind` namespace for v1 tailwind runtime contract.",
                    "Add al_folio.tailwind.version/preflight/css_entry.",
                )
            )

        if not isinstance(dig(namespace, "distill"), dict):
            findings.append(
                self._finding(
                    "missing_distill_namespace",
                    Severity.WARNING,
                    "Missing `al_folio.distill` namespace for Distill runtime contract.",
                    "Add al_folio.distill.engine/source/allow_remote_loader.",
                )
            )

        return findings
