"""Tests for the package-discovery hooks."""

from __future__ import annotations

import sys
import types
from pathlib import Path

import pytest

from al_folio_upgrade.core.registry import (
    HostMigrationCatalog,
    HostPackageLocator,
    StaticMigrationCatalog,
    StaticPackageLocator,
)


class TestStaticHooks:
    def test_default_locator_finds_nothing(self):
        assert StaticPackageLocator().locate("al_folio_distill") == []

    def test_locator_mapping(self, tmp_path: Path):
        locator = StaticPackageLocator({"al_folio_distill": [tmp_path]})
        assert locator.locate("al_folio_distill") == [tmp_path]
        assert locator.locate("other") == []

    def test_default_catalog_means_no_catalog(self):
        assert StaticMigrationCatalog().manifest_paths() is None

    def test_catalog_list(self, tmp_path: Path):
        catalog = StaticMigrationCatalog([tmp_path / "a.yml"])
        assert catalog.manifest_paths() == [tmp_path / "a.yml"]


class TestHostPackageLocator:
    def test_not_installed_is_empty(self):
        assert HostPackageLocator().locate("al_folio_definitely_not_installed") == []

    def test_installed_package_found_once(self):
        roots = HostPackageLocator().locate("json")
        assert len(roots) == 1
        assert (roots[0] / "__init__.py").is_file()

    def test_loaded_module_without_spec(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        package_dir = tmp_path / "al_folio_distill"
        package_dir.mkdir()
        module = types.ModuleType("al_folio_distill")
        module.__file__ = str(package_dir / "__init__.py")
        monkeypatch.setitem(sys.modules, "al_folio_distill", module)

        assert HostPackageLocator().locate("al_folio_distill") == [package_dir.resolve()]


class TestHostMigrationCatalog:
    def test_missing_package_means_no_catalog(self):
        assert HostMigrationCatalog("al_folio_definitely_not_installed").manifest_paths() is None

    def test_package_without_provider(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setitem(sys.modules, "al_folio_core", types.ModuleType("al_folio_core"))
        assert HostMigrationCatalog().manifest_paths() is None

    def test_provider_paths(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        module = types.ModuleType("al_folio_core")
        module.migration_manifest_paths = lambda: [str(tmp_path / "1.0.0_to_1.1.0.yml")]
        monkeypatch.setitem(sys.modules, "al_folio_core", module)
        assert HostMigrationCatalog().manifest_paths() == [tmp_path / "1.0.0_to_1.1.0.yml"]

    def test_single_path_provider(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        module = types.ModuleType("al_folio_core")
        module.migration_manifest_paths = lambda: str(tmp_path / "m.yml")
        monkeypatch.setitem(sys.modules, "al_folio_core", module)
        assert HostMigrationCatalog().manifest_paths() == [tmp_path / "m.yml"]

    def test_failing_provider_means_no_catalog(self, monkeypatch: pytest.MonkeyPatch):
        def _broken():
            raise RuntimeError("manifest index corrupt")

        module = types.ModuleType("al_folio_core")
        module.migration_manifest_paths = _broken
        monkeypatch.setitem(sys.modules, "al_folio_core", module)
        assert HostMigrationCatalog().manifest_paths() is None

    def test_provider_returning_garbage_means_no_catalog(self, monkeypatch: pytest.MonkeyPatch):
        module = types.ModuleType("al_folio_core")
        module.migration_manifest_paths = lambda: [42]
        monkeypatch.setitem(sys.modules, "al_folio_core", module)
        assert HostMigrationCatalog().manifest_paths() is None

    def test_package_failing_on_import_means_no_catalog(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        package = tmp_path / "al_folio_core"
        package.mkdir()
        (package / "__init__.py").write_text("raise RuntimeError('half-installed')\n")
        monkeypatch.syspath_prepend(str(tmp_path))
        monkeypatch.delitem(sys.modules, "al_folio_core", raising=False)
        assert HostMigrationCatalog().manifest_paths() is None
