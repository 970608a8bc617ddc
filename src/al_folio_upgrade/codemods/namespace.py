"""Structural transform that fills gaps in the ``al_folio`` config namespace.

* Namespace absent → the complete default block is appended.
* Namespace present → missing ``tailwind`` / ``distill`` sub-namespaces are
  inserted right after the ``al_folio:`` header, indented like the
  existing children.
* A sub-namespace key that is already present is never touched, whatever
  its value.

The transform works on raw text so unrelated keys, comments and ordering
survive verbatim.  Content it cannot handle unambiguously (unparseable YAML,
a non-mapping document, a flow-style namespace) is returned unchanged.
"""

from __future__ import annotations

import logging
import re
import textwrap
from typing import Any

import yaml

from al_folio_upgrade.core.config import dig, parse_config_text
from al_folio_upgrade.errors import ConfigParseError

_logger = logging.getLogger(__name__)

NAMESPACE = "al_folio"

_HEADER_RE = re.compile(r"^al_folio:[ \t]*(?:#[^\r\n]*)?(?=\r?$)", re.M)
_INDENT_RE = re.compile(r"^([ \t]*)")

# Sub-namespace defaults, in insertion order.
SUB_NAMESPACE_DEFAULTS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "tailwind",
        (
            ("version", "4.1.18"),
            ("preflight", "false"),
            ("css_entry", "assets/tailwind/app.css"),
        ),
    ),
    (
        "distill",
        (
            ("engine", "distillpub-template"),
            ("source", "alshedivat/distillpub-template#al-folio"),
            ("allow_remote_loader", "true"),
        ),
    ),
)

DEFAULT_NAMESPACE_BLOCK = textwrap.dedent("""\
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
        allow_remote_loader: true
      compat:
        bootstrap:
          enabled: false
          support_window: v1.0-v1.2
          deprecates_in: v1.3
          removed_in: v2.0
      upgrade:
        channel: stable
        auto_apply_safe_fixes: false
""")


def _newline(content: str) -> str:
    return "\r\n" if "\r\n" in content else "\n"


def _child_indent(content: str, header_end: int) -> str:
    """Indentation of the first child line under the header (default 2)."""
    for line in content[header_end:].splitlines()[1:]:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        indent = _INDENT_RE.match(line).group(1)
        return indent or "  "
    return "  "


def render_sub_namespace(key: str, indent: str = "  ", nl: str = "\n") -> str:
    """Default block for sub-namespace *key*, without a trailing newline."""
    fields = dict(SUB_NAMESPACE_DEFAULTS)[key]
    lines = [f"{indent}{key}:"]
    lines.extend(f"{indent}{indent}{name}: {value}" for name, value in fields)
    return nl.join(lines)


def _parse(content: str) -> Any:
    """Parsed tree, or ``None`` when *content* is not valid YAML."""
    try:
        return parse_config_text(content)
    except ConfigParseError:
        return None


def append_default_namespace(content: str, *, separate: bool = True) -> str:
    """Append the full default block, after one blank line when *separate*."""
    nl = _newline(content)
    block = DEFAULT_NAMESPACE_BLOCK.replace("\n", nl)
    if not content:
        return block
    if not content.endswith("\n"):
        content += nl
    if separate and not content.endswith(nl + nl):
        content += nl
    return content + block


def ensure_sub_namespaces(content: str, keys: list[str]) -> str:
    """Insert default blocks for *keys* after the ``al_folio:`` header."""
    header = _HEADER_RE.search(content)
    if header is None or not keys:
        return content
    nl = _newline(content)
    indent = _child_indent(content, header.start())
    insertion = nl.join(render_sub_namespace(key, indent, nl) for key in keys)
    return content[: header.end()] + nl + insertion + content[header.end():]


def ensure_tailwind_namespace(content: str) -> str:
    return _fill(content, only=("tailwind",))


def ensure_distill_namespace(content: str) -> str:
    return _fill(content, only=("distill",))


def ensure_al_folio_namespace(content: str) -> str:
    """Make sure ``al_folio`` and both sub-namespaces exist.  Idempotent."""
    return _fill(content, only=tuple(key for key, _ in SUB_NAMESPACE_DEFAULTS))


def _fill(content: str, *, only: tuple[str, ...]) -> str:
    tree = _parse(content)
    if tree is None or not isinstance(tree, dict):
        # Unparseable or not a mapping: leave for a human.
        return content

    if NAMESPACE not in tree:
        updated = append_default_namespace(content)
        if not _preserved(tree, updated):
            # A keep-chomped block scalar (`|+`) at the end absorbs the blank line.
            updated = append_default_namespace(content, separate=False)
    else:
        namespace = tree[NAMESPACE]
        if namespace is not None and not isinstance(namespace, dict):
            return content
        present = namespace or {}
        missing = [key for key in only if key not in present]
        if not missing:
            return content
        updated = ensure_sub_namespaces(content, missing)

    if not (_converged(updated, only) and _preserved(tree, updated)):
        _logger.warning(
            "al_folio namespace could not be completed safely; leaving config unchanged"
        )
        return content
    return updated


def _converged(content: str, keys: tuple[str, ...]) -> bool:
    tree = _parse(content)
    namespace = dig(tree, NAMESPACE)
    return isinstance(namespace, dict) and all(key in namespace for key in keys)


def _dumped(node: Any) -> str:
    return yaml.safe_dump(node, sort_keys=False)


def _preserved(before: dict, content: str) -> bool:
    """Every key outside the inserted blocks still parses to the same value."""
    after = _parse(content)
    if not isinstance(after, dict):
        return False
    others_before = {k: v for k, v in before.items() if k != NAMESPACE}
    others_after = {k: v for k, v in after.items() if k != NAMESPACE}
    if _dumped(others_before) != _dumped(others_after):
        return False
    old_namespace = before.get(NAMESPACE)
    if not isinstance(old_namespace, dict):
        return True
    new_namespace = after.get(NAMESPACE)
    if not isinstance(new_namespace, dict):
        return False
    return all(
        key in new_namespace and _dumped(value) == _dumped(new_namespace[key])
        for key, value in old_namespace.items()
    )
