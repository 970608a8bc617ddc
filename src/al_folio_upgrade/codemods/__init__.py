"""Safe codemods — deterministic, idempotent rewrites toward the v1.x contract."""

from al_folio_upgrade.codemods.applier import ApplyResult, CodemodApplier, FileChange
from al_folio_upgrade.codemods.namespace import (
    ensure_al_folio_namespace,
    ensure_distill_namespace,
    ensure_tailwind_namespace,
)
from al_folio_upgrade.codemods.rules import SAFE_REPLACEMENTS, ReplacementRule, apply_rules

__all__ = [
    "ApplyResult",
    "CodemodApplier",
    "FileChange",
    "ReplacementRule",
    "SAFE_REPLACEMENTS",
    "apply_rules",
    "ensure_al_folio_namespace",
    "ensure_distill_namespace",
    "ensure_tailwind_namespace",
]
