"""Enums shared across the checks, codemods and reports."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Finding severity — blocking findings gate the upgrade."""

    BLOCKING = "blocking"
    WARNING = "warning"


class CheckType(str, Enum):
    """Canonical check identifiers, in execution order."""

    MANIFEST = "manifest"
    CONFIG_CONTRACT = "config_contract"
    LEGACY_ASSETS = "legacy_assets"
    LEGACY_PATTERNS = "legacy_patterns"
    DISTILL_RUNTIME = "distill_runtime"
    CORE_OVERRIDE = "core_override"
