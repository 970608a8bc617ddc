"""File discovery — resolve the candidate file set for checks and codemods."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator

_logger = logging.getLogger(__name__)

# Site sources the engine is allowed to read (and, for codemods, rewrite).
FILE_GLOBS: tuple[str, ...] = (
    "_config.yml",
    "_includes/**/*.{liquid,html}",
    "_layouts/**/*.{liquid,html}",
    "_pages/**/*.{md,markdown,liquid,html}",
    "_posts/**/*.{md,markdown,liquid,html}",
    "assets/js/**/*.js",
    "assets/css/**/*.css",
    "assets/tailwind/**/*.css",
)

# Vendored, minified and source-map assets.  Searched against the absolute
# POSIX path of every candidate.
IGNORE_PATH_PATTERNS: tuple[str, ...] = (
    r"/distillpub/",
    r"/search/ninja-footer\.min\.js$",
    r"/bootstrap\.bundle\.min\.js$",
    r"/bootstrap-toc\.min\.js$",
    r"\.min\.js$",
    r"\.map$",
)

_BRACE_RE = re.compile(r"\{([^{}]*)\}")


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternations, which ``pathlib`` globbing lacks.

    ``"*.{md,html}"`` → ``["*.md", "*.html"]``.  Multiple groups expand as a
    cartesian product, left to right.
    """
    m = _BRACE_RE.search(pattern)
    if m is None:
        return [pattern]
    head, tail = pattern[: m.start()], pattern[m.end():]
    expanded: list[str] = []
    for option in m.group(1).split(","):
        expanded.extend(expand_braces(head + option + tail))
    return expanded


def compile_ignore_patterns(patterns: Iterable[str]) -> list[re.Pattern[str]]:
    return [re.compile(p) for p in patterns]


def is_ignored(path: Path, ignore: Iterable[re.Pattern[str]]) -> bool:
    normalized = path.absolute().as_posix()
    return any(p.search(normalized) for p in ignore)


def _is_hidden(path: Path, root: Path) -> bool:
    return any(part.startswith(".") for part in path.relative_to(root).parts)


def iter_pattern_matches(root: Path, pattern: str) -> Iterator[Path]:
    """Yield the files matching one (brace-expanded) pattern, sorted."""
    matches: set[Path] = set()
    for expanded in expand_braces(pattern):
        for p in root.glob(expanded):
            if _is_hidden(p, root):
                continue
            matches.add(p)
    yield from sorted(matches, key=lambda p: p.as_posix())


def locate_files(
    root: Path,
    *,
    globs: Iterable[str] = FILE_GLOBS,
    ignore: Iterable[str] = IGNORE_PATH_PATTERNS,
) -> list[Path]:
    """Resolve *globs* under *root* into an ordered list of candidate files.

    Parameters
    ----------
    root:
        Project root.  All patterns are relative to it.
    globs:
        Patterns, evaluated in order.  Paths are sorted within each
        pattern's expansion; a path already yielded by an earlier pattern
        is not repeated.
    ignore:
        Regular expressions searched against the absolute path.  Matching
        paths are dropped silently.

    Returns
    -------
    List of ``Path`` objects under *root*.  Directories are skipped.
    """
    compiled = compile_ignore_patterns(ignore)
    seen: set[Path] = set()
    results: list[Path] = []
    for pattern in globs:
        for p in iter_pattern_matches(root, pattern):
            if p in seen or not p.is_file():
                continue
            if is_ignored(p, compiled):
                _logger.debug("ignoring %s", p)
                continue
            seen.add(p)
            results.append(p)
    _logger.debug("located %d candidate file(s) under %s", len(results), root)
    return results


def read_lines(path: Path) -> list[str]:
    """Lines of *path* for scanning; unreadable files scan as empty.

    Only ``\\n`` ends a line (a trailing ``\\r`` is dropped), so form feeds
    and Unicode separators inside a line do not shift line numbers.
    """
    try:
        # Bytes in: text mode would also treat a lone \r as a line break.
        text = path.read_bytes().decode("utf-8", errors="replace")
    except OSError:
        _logger.warning("could not read %s", path)
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def relative_posix(path: Path, root: Path) -> str:
    """Root-relative POSIX path used in findings and reports."""
    return path.relative_to(root).as_posix()
