"""Exception types raised by the upgrade engine."""

from __future__ import annotations

from pathlib import Path


class UpgradeError(Exception):
    """Base class for every error the engine raises on purpose."""


class ConfigParseError(UpgradeError):
    """``_config.yml`` exists but could not be parsed into a safe tree."""

    def __init__(self, reason: str, *, path: Path | None = None) -> None:
        self.reason = reason
        self.path = path
        super().__init__(reason)


class UnsupportedModeError(UpgradeError):
    """A codemod mode other than ``--safe`` was requested."""
