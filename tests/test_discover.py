"""Tests for candidate-file discovery (globs, ordering, ignore list)."""

from __future__ import annotations

from pathlib import Path

from al_folio_upgrade.core.discover import (
    expand_braces,
    is_ignored,
    compile_ignore_patterns,
    locate_files,
    read_lines,
    relative_posix,
)


def _rel(paths: list[Path], root: Path) -> list[str]:
    return [relative_posix(p, root) for p in paths]


class TestExpandBraces:
    def test_no_braces(self):
        assert expand_braces("_config.yml") == ["_config.yml"]

    def test_single_group(self):
        assert expand_braces("_includes/**/*.{liquid,html}") == [
            "_includes/**/*.liquid",
            "_includes/**/*.html",
        ]

    def test_multiple_groups_cartesian(self):
        assert expand_braces("{a,b}/*.{x,y}") == ["a/*.x", "a/*.y", "b/*.x", "b/*.y"]


class TestLocateFiles:
    def test_empty_root(self, site: Path):
        assert locate_files(site) == []

    def test_sorted_within_pattern(self, site: Path, write):
        write("_includes/sub/c.liquid", "")
        write("_includes/b.liquid", "")
        write("_includes/a.html", "")
        files = locate_files(site, globs=["_includes/**/*.{liquid,html}"])
        assert _rel(files, site) == [
            "_includes/a.html",
            "_includes/b.liquid",
            "_includes/sub/c.liquid",
        ]

    def test_pattern_order_preserved(self, site: Path, write):
        write("_layouts/default.liquid", "")
        write("_includes/head.liquid", "")
        write("_config.yml", "title: x\n")
        files = locate_files(site)
        assert _rel(files, site) == [
            "_config.yml",
            "_includes/head.liquid",
            "_layouts/default.liquid",
        ]

    def test_overlapping_patterns_deduplicated(self, site: Path, write):
        write("assets/js/app.js", "")
        files = locate_files(site, globs=["assets/js/*.js", "assets/js/**/*.js"])
        assert _rel(files, site) == ["assets/js/app.js"]

    def test_ignore_list_drops_vendored_assets(self, site: Path, write):
        write("assets/js/app.js", "")
        write("assets/js/vendor.min.js", "")
        write("assets/js/bootstrap.bundle.min.js", "")
        write("assets/js/distillpub/transforms.v2.js", "")
        write("assets/js/search/ninja-footer.min.js", "")
        files = locate_files(site)
        assert _rel(files, site) == ["assets/js/app.js"]

    def test_custom_ignore_patterns(self, site: Path, write):
        write("assets/css/main.css", "")
        write("assets/css/generated.css", "")
        files = locate_files(site, ignore=[r"generated\.css$"])
        assert _rel(files, site) == ["assets/css/main.css"]

    def test_directories_skipped(self, site: Path, write):
        (site / "_includes" / "weird.liquid").mkdir(parents=True)
        write("_includes/weird.liquid/inner.html", "")
        files = locate_files(site, globs=["_includes/**/*.{liquid,html}"])
        assert _rel(files, site) == ["_includes/weird.liquid/inner.html"]

    def test_hidden_paths_skipped(self, site: Path, write):
        write("_includes/.draft.liquid", "")
        write("_includes/.cache/x.liquid", "")
        write("_includes/real.liquid", "")
        files = locate_files(site)
        assert _rel(files, site) == ["_includes/real.liquid"]

    def test_unrelated_files_not_candidates(self, site: Path, write):
        write("README.md", "$(x)")
        write("tailwind.config.js", "")
        assert locate_files(site) == []


class TestIsIgnored:
    def test_matches_against_absolute_path(self, tmp_path: Path):
        compiled = compile_ignore_patterns([r"/distillpub/"])
        assert is_ignored(tmp_path / "assets/js/distillpub/x.js", compiled)
        assert not is_ignored(tmp_path / "assets/js/x.js", compiled)


class TestReadLines:
    def test_only_newline_ends_a_line(self, site: Path):
        path = site / "a.js"
        path.write_bytes(b"one\r\ntwo\x0cstill two\xc2\x85\rthree\r\n")
        assert read_lines(path) == ["one", "two\x0cstill two\x85\rthree"]

    def test_trailing_blank_line_kept(self, site: Path):
        path = site / "b.js"
        path.write_bytes(b"x\n\n")
        assert read_lines(path) == ["x", ""]

    def test_no_final_newline(self, site: Path):
        path = site / "c.js"
        path.write_bytes(b"x\ny")
        assert read_lines(path) == ["x", "y"]

    def test_missing_file_reads_empty(self, site: Path):
        assert read_lines(site / "missing.js") == []
