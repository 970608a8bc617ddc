"""Codemod applier — runs the safe rewrites over the candidate file set.

Usage::

    from al_folio_upgrade.codemods.applier import CodemodApplier

    applier = CodemodApplier()
    result = applier.apply(root, files)            # rewrite in place
    preview = applier.apply(root, files, dry_run=True)

A file is written only when its final content differs from what was read,
so a second run over the same tree changes nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from al_folio_upgrade.codemods.namespace import ensure_al_folio_namespace
from al_folio_upgrade.codemods.rules import SAFE_REPLACEMENTS, ReplacementRule, apply_rules
from al_folio_upgrade.core.config import CONFIG_FILE
from al_folio_upgrade.core.discover import relative_posix

_logger = logging.getLogger(__name__)

NAMESPACE_RULE_ID = "al_folio_namespace"


@dataclass(frozen=True)
class FileChange:
    """One rewritten (or, in dry-run, rewritable) file."""

    path: str
    rule_ids: tuple[str, ...]


@dataclass
class ApplyResult:
    changes: list[FileChange] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    dry_run: bool = False

    @property
    def changed_files(self) -> list[str]:
        return [c.path for c in self.changes]

    @property
    def changed_count(self) -> int:
        return len(self.changes)


class CodemodApplier:
    """Applies ``SAFE_REPLACEMENTS`` and the config namespace transform."""

    def __init__(
        self,
        rules: tuple[ReplacementRule, ...] = SAFE_REPLACEMENTS,
        *,
        config_file: str = CONFIG_FILE,
    ) -> None:
        self.rules = rules
        self.config_file = config_file

    def transform(self, rel_path: str, content: str) -> tuple[str, list[str]]:
        """Pure content → content step for one file."""
        updated, fired = apply_rules(content, self.rules)
        if rel_path == self.config_file:
            with_namespace = ensure_al_folio_namespace(updated)
            if with_namespace != updated:
                fired.append(NAMESPACE_RULE_ID)
            updated = with_namespace
        return updated, fired

    def apply(self, root: Path, files: list[Path], *, dry_run: bool = False) -> ApplyResult:
        result = ApplyResult(dry_run=dry_run)
        for path in files:
            rel = relative_posix(path, root)
            try:
                # Bytes in/out: no newline translation, CRLF files stay CRLF.
                original = path.read_bytes().decode("utf-8")
            except UnicodeDecodeError:
                _logger.warning("skipping %s: not valid UTF-8", rel)
                result.skipped.append(rel)
                continue
            except OSError as exc:
                _logger.warning("skipping %s: %s", rel, exc)
                result.skipped.append(rel)
                continue

            updated, fired = self.transform(rel, original)
            if updated == original:
                continue

            if not dry_run:
                path.write_bytes(updated.encode("utf-8"))
                _logger.debug("rewrote %s (%s)", rel, ", ".join(fired))
            result.changes.append(FileChange(path=rel, rule_ids=tuple(fired)))
        return result
