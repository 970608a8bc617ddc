"""Centralized exit-code contract for the upgrade CLI.

Code  Meaning
----  -------
  0   Success — command completed (findings may still be present)
  1   Violation — blocking findings under ``audit``, or unsupported invocation
  2   Error — project root missing, unreadable artifacts, runtime failure

Only ``audit`` turns findings into a non-zero code; ``apply`` and ``report``
succeed whenever they run to completion.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from al_folio_upgrade.model.audit_result import AuditResult


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2


def exit_code_for(result: AuditResult, *, fail_on_blocking: bool = True) -> ExitCode:
    """Exit code for a command that completed and produced *result*."""
    if result.command == "audit" and fail_on_blocking and result.has_blocking:
        return ExitCode.VIOLATION
    return ExitCode.SUCCESS
