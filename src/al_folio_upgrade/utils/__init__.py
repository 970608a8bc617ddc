"""Shared utilities for al_folio_upgrade."""

from al_folio_upgrade.utils.exit_codes import ExitCode, exit_code_for
from al_folio_upgrade.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "ExitCode",
    "exit_code_for",
    "stable_json_dump",
    "stable_json_dumps",
]
