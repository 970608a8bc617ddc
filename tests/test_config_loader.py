"""Tests for the ``_config.yml`` loader."""

from __future__ import annotations

import datetime
from pathlib import Path

import pytest

from al_folio_upgrade.core.config import UpgradeSettings, dig, load_config, parse_config_text
from al_folio_upgrade.errors import ConfigParseError, UpgradeError


class TestLoadConfig:
    def test_missing_config_is_none(self, site: Path):
        assert load_config(site) is None

    def test_empty_document_is_empty_mapping(self, site: Path, write):
        write("_config.yml", "")
        assert load_config(site) == {}

    def test_comment_only_document_is_empty_mapping(self, site: Path, write):
        write("_config.yml", "# nothing yet\n")
        assert load_config(site) == {}

    def test_bare_date_scalar_accepted(self, site: Path, write, full_config):
        write("_config.yml", full_config)
        tree = load_config(site)
        assert tree["launch_date"] == datetime.date(2026, 1, 1)
        assert tree["al_folio"]["tailwind"]["preflight"] is False
        assert tree["al_folio"]["api_version"] == 1

    def test_aliases_accepted(self):
        tree = parse_config_text("base: &b {x: 1}\ncopy: *b\n")
        assert tree["copy"] == {"x": 1}

    def test_syntax_error_raises_single_error_type(self, site: Path, write):
        write("_config.yml", "al_folio: [unclosed\n")
        with pytest.raises(ConfigParseError) as exc_info:
            load_config(site)
        assert exc_info.value.path == site / "_config.yml"
        assert isinstance(exc_info.value, UpgradeError)

    def test_unsafe_tag_rejected(self):
        with pytest.raises(ConfigParseError):
            parse_config_text("cmd: !!python/object/apply:os.system ['echo hi']\n")

    def test_out_of_range_date_is_parse_error(self):
        with pytest.raises(ConfigParseError):
            parse_config_text("launch_date: 2026-13-45\n")

    def test_non_mapping_document_returned_as_is(self):
        assert parse_config_text("- a\n- b\n") == ["a", "b"]


class TestDig:
    def test_nested(self):
        assert dig({"a": {"b": {"c": 3}}}, "a", "b", "c") == 3

    def test_missing_level(self):
        assert dig({"a": {}}, "a", "b", "c") is None

    def test_non_mapping_level(self):
        assert dig({"a": [1, 2]}, "a", "b") is None
        assert dig(None, "a") is None


class TestUpgradeSettings:
    def test_defaults(self):
        s = UpgradeSettings()
        assert s.config_file == "_config.yml"
        assert s.report_path == "al-folio-upgrade-report.md"
        assert "_config.yml" in s.file_globs
