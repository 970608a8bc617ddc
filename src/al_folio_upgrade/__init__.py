"""al_folio_upgrade — pre-upgrade audit and safe codemods for al-folio sites."""

__all__ = [
    "__version__",
    "audit_project",
    "apply_safe_codemods",
    "has_blocking",
    "UpgradeEngine",
]
__version__ = "1.0.0"

# Programmatic entrypoints (backend use).
from al_folio_upgrade.api import (  # noqa: E402, F401
    apply_safe_codemods,
    audit_project,
    has_blocking,
)
from al_folio_upgrade.core.engine import UpgradeEngine  # noqa: E402, F401
