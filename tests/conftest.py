"""Shared fixtures: throwaway al-folio site trees under ``tmp_path``."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

FULL_CONFIG = textwrap.dedent("""\
    title: Example Site
    launch_date: 2026-01-01
    al_folio:
      api_version: 1
      style_engine: tailwind
      tailwind:
        version: 4.1.18
        preflight: false
        css_entry: assets/tailwind/app.css
      distill:
        engine: distillpub-template
        source: alshedivat/distillpub-template#al-folio
        allow_remote_loader: false
""")


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """An empty project root."""
    root = tmp_path / "site"
    root.mkdir()
    return root


@pytest.fixture
def write(site: Path) -> Callable[[str, str], Path]:
    """Write a file under the site root, creating parent directories."""

    def _write(rel: str, content: str) -> Path:
        path = site / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def full_config() -> str:
    return FULL_CONFIG
