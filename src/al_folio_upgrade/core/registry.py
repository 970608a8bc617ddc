"""Discovery hooks for optional companion packages.

Two interfaces, each with a host-probing and a static implementation:

*  ``MigrationCatalog`` — lists upgrade manifests published by the core
   theme package (``al_folio_core.migration_manifest_paths()``).
*  ``PackageLocator`` — finds the on-disk root of an optional package such
   as ``al_folio_distill``.

Checks depend on the interfaces only, so they stay deterministic under test
with the static implementations.
"""

from __future__ import annotations

import importlib
import importlib.util
import logging
import sys
from pathlib import Path
from typing import Iterable, Mapping, Protocol

_logger = logging.getLogger(__name__)

CORE_PACKAGE = "al_folio_core"
DISTILL_PACKAGE = "al_folio_distill"


class MigrationCatalog(Protocol):
    def manifest_paths(self) -> list[Path] | None:
        """Manifest files, or ``None`` when no catalog is installed."""
        ...


class PackageLocator(Protocol):
    def locate(self, name: str) -> list[Path]:
        """Root directories of package *name*; empty when not installed."""
        ...


# ── static implementations ──────────────────────────────────────────


class StaticMigrationCatalog:
    """Fixed manifest list; ``None`` means "no catalog" (directory fallback)."""

    def __init__(self, paths: Iterable[Path] | None = None) -> None:
        self._paths = None if paths is None else [Path(p) for p in paths]

    def manifest_paths(self) -> list[Path] | None:
        return None if self._paths is None else list(self._paths)


class StaticPackageLocator:
    """Fixed name → roots mapping.  The default instance finds nothing."""

    def __init__(self, packages: Mapping[str, Iterable[Path]] | None = None) -> None:
        self._packages = {
            name: [Path(p) for p in roots] for name, roots in (packages or {}).items()
        }

    def locate(self, name: str) -> list[Path]:
        return list(self._packages.get(name, []))


# ── host implementations ────────────────────────────────────────────


def _module_root(origin: str | None, search: Iterable[str] | None) -> Path | None:
    if search:
        for location in search:
            return Path(location)
    if origin and origin not in ("built-in", "frozen"):
        return Path(origin).parent
    return None


class HostPackageLocator:
    """Probe the running interpreter for an installed package.

    Looks first at modules already imported (``sys.modules``), then asks
    the import system for a spec.  Lookup failures mean "not installed".
    """

    def locate(self, name: str) -> list[Path]:
        roots: list[Path] = []

        module = sys.modules.get(name)
        if module is not None:
            root = _module_root(
                getattr(module, "__file__", None),
                getattr(module, "__path__", None),
            )
            if root is not None:
                roots.append(root)

        try:
            spec = importlib.util.find_spec(name)
        except (ImportError, ValueError):
            spec = None
        if spec is not None:
            root = _module_root(spec.origin, spec.submodule_search_locations)
            if root is not None:
                roots.append(root)

        unique: list[Path] = []
        for root in roots:
            resolved = root.resolve()
            if resolved not in unique:
                unique.append(resolved)
        if not unique:
            _logger.debug("package %s not installed", name)
        return unique


class HostMigrationCatalog:
    """Ask ``al_folio_core`` for its migration manifests, when installed."""

    def __init__(self, package: str = CORE_PACKAGE) -> None:
        self._package = package

    def manifest_paths(self) -> list[Path] | None:
        """Published manifests; ``None`` when the package is absent or broken."""
        try:
            module = importlib.import_module(self._package)
        except ImportError:
            return None
        except Exception:
            _logger.warning(
                "Importing %s failed — falling back to migrations/", self._package,
                exc_info=True,
            )
            return None
        provider = getattr(module, "migration_manifest_paths", None)
        if not callable(provider):
            return None
        try:
            paths = provider() or []
            if isinstance(paths, (str, Path)):
                paths = [paths]
            return [Path(p) for p in paths]
        except Exception:
            _logger.warning(
                "%s.migration_manifest_paths() failed — falling back to migrations/",
                self._package,
                exc_info=True,
            )
            return None


def host_hooks() -> tuple[MigrationCatalog, PackageLocator]:
    return HostMigrationCatalog(), HostPackageLocator()


def static_hooks() -> tuple[MigrationCatalog, PackageLocator]:
    return StaticMigrationCatalog(), StaticPackageLocator()
