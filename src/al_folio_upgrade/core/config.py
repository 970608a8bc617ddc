"""Engine settings and the ``_config.yml`` loader."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from al_folio_upgrade.core.discover import FILE_GLOBS, IGNORE_PATH_PATTERNS
from al_folio_upgrade.errors import ConfigParseError

_logger = logging.getLogger(__name__)

CONFIG_FILE = "_config.yml"
REPORT_PATH = "al-folio-upgrade-report.md"


@dataclass(frozen=True)
class UpgradeSettings:
    """Immutable engine settings.

    The defaults describe the al-folio v1.x layout; tests and embedders
    may narrow the glob set or point the report elsewhere.
    """

    file_globs: tuple[str, ...] = FILE_GLOBS
    ignore_patterns: tuple[str, ...] = IGNORE_PATH_PATTERNS
    config_file: str = CONFIG_FILE
    report_path: str = REPORT_PATH


def parse_config_text(text: str) -> dict[str, Any] | Any:
    """Parse YAML *text* with the safe loader.

    Dates, timestamps, booleans, integers, sequences and mappings are
    accepted; ``!!python/*`` tags are rejected.  An empty document parses
    to ``{}``.  Note the top level is not guaranteed to be a mapping.
    """
    try:
        parsed = yaml.safe_load(text)
    # Out-of-range date literals surface as ValueError from the constructor.
    except (yaml.YAMLError, ValueError) as exc:
        raise ConfigParseError(str(exc)) from exc
    return {} if parsed is None else parsed


def load_config(root: Path, name: str = CONFIG_FILE) -> dict[str, Any] | Any | None:
    """Read and parse ``root/name``.

    Returns ``None`` when the file does not exist.  Raises
    ``ConfigParseError`` when it exists but cannot be read or parsed.
    """
    path = root / name
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigParseError(str(exc), path=path) from exc
    try:
        tree = parse_config_text(text)
    except ConfigParseError as exc:
        raise ConfigParseError(exc.reason, path=path) from exc.__cause__
    _logger.debug("parsed %s", path)
    return tree


def dig(tree: Any, *keys: str) -> Any:
    """Walk nested mappings; ``None`` as soon as a level is missing."""
    node = tree
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node
