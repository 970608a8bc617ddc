"""CLI entry-point for al_folio_upgrade.

Usage:
    al-folio-upgrade upgrade audit [--no-fail] [--root DIR] [--json]
    al-folio-upgrade upgrade apply --safe [--dry-run] [--root DIR] [--json]
    al-folio-upgrade upgrade report [--root DIR] [--json]
    python -m al_folio_upgrade upgrade audit

Common options: ``--no-plugins`` (or ``AL_FOLIO_UPGRADE_NO_PLUGINS=1``)
skips probing for the optional ``al_folio_core`` / ``al_folio_distill``
packages; ``-v`` enables debug logging on stderr.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import IO

import jsonschema

from al_folio_upgrade import __version__
from al_folio_upgrade.contracts.load import validate_instance
from al_folio_upgrade.core.engine import UpgradeEngine
from al_folio_upgrade.core.registry import host_hooks, static_hooks
from al_folio_upgrade.errors import UnsupportedModeError
from al_folio_upgrade.model.audit_result import AuditResult
from al_folio_upgrade.reports.upgrade_report import summary_line
from al_folio_upgrade.utils.exit_codes import ExitCode, exit_code_for
from al_folio_upgrade.utils.json_norm import stable_json_dumps

USAGE = "Usage: al-folio-upgrade upgrade [audit|apply --safe|report] [--no-fail]"


class UsageError(Exception):
    """Raised instead of exiting when argv cannot be parsed."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def _env_disables_plugins() -> bool:
    return os.getenv("AL_FOLIO_UPGRADE_NO_PLUGINS", "").lower() in ("1", "true", "yes", "on")


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Project root to audit (default: current directory).",
    )
    common.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the upgrade result JSON to stdout instead of the summary.",
    )
    common.add_argument(
        "--no-plugins",
        dest="no_plugins",
        action="store_true",
        default=False,
        help="Do not probe for installed al_folio_core / al_folio_distill packages.",
    )
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Debug logging on stderr.",
    )

    p = _Parser(
        prog="al-folio-upgrade",
        description="Pre-upgrade audit and safe codemods for al-folio sites.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = p.add_subparsers(dest="command", parser_class=_Parser)

    # ── upgrade ─────────────────────────────────────────────────────
    upgrade_p = sub.add_parser("upgrade", help="Audit or migrate a site for v1.x.")
    upgrade_sub = upgrade_p.add_subparsers(dest="upgrade_command", parser_class=_Parser)

    audit_p = upgrade_sub.add_parser(
        "audit",
        parents=[common],
        help="Report contract drift; exit 1 on blocking findings.",
    )
    audit_p.add_argument(
        "--no-fail",
        dest="fail_on_blocking",
        action="store_false",
        default=True,
        help="Do not fail even when blocking findings exist.",
    )

    apply_p = upgrade_sub.add_parser(
        "apply",
        parents=[common],
        help="Apply deterministic codemods, then re-audit.",
    )
    apply_p.add_argument(
        "--safe",
        action="store_true",
        default=False,
        help="Apply only deterministic safe codemods.",
    )
    apply_p.add_argument(
        "--dry-run",
        dest="dry_run",
        action="store_true",
        default=False,
        help="List files that would change without rewriting them.",
    )

    upgrade_sub.add_parser(
        "report",
        parents=[common],
        help="Regenerate the upgrade report.",
    )
    return p


def _configure_logging(verbose: bool, stream: IO[str]) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=stream,
    )


def _make_engine(root: Path, *, no_plugins: bool) -> UpgradeEngine:
    catalog, locator = static_hooks() if no_plugins else host_hooks()
    return UpgradeEngine(root, catalog=catalog, locator=locator)


def _emit(
    result: AuditResult,
    engine: UpgradeEngine,
    args: argparse.Namespace,
    stdout: IO[str],
    stderr: IO[str],
) -> int | None:
    """Print the result; returns an exit code only when emitting failed."""
    if args.json_out:
        result_dict = result.to_dict()
        try:
            validate_instance(result_dict, "upgrade_result.schema.json")
        except jsonschema.ValidationError as exc:
            print(f"error: result does not match schema: {exc.message}", file=stderr)
            return ExitCode.ERROR
        stdout.write(stable_json_dumps(result_dict))
        return None

    if result.command == "apply":
        if result.dry_run:
            print(
                f"Would apply safe codemods to {len(result.changed_files)} file(s).",
                file=stdout,
            )
            for rel in result.changed_files:
                print(f"  - {rel}", file=stdout)
        else:
            print(
                f"Applied safe codemods to {len(result.changed_files)} file(s).",
                file=stdout,
            )
    print(summary_line(result.findings), file=stdout)
    print(f"Report: {engine.settings.report_path}", file=stdout)
    return None


def main(
    argv: list[str] | None = None,
    *,
    stdout: IO[str] | None = None,
    stderr: IO[str] | None = None,
) -> int:
    """Entry-point — returns an exit code (0 = ok, 1 = violation, 2 = error)."""
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr
    effective_argv = list(argv) if argv is not None else sys.argv[1:]

    if not effective_argv:
        print(USAGE, file=out)
        return ExitCode.VIOLATION

    try:
        args = _build_parser().parse_args(effective_argv)
    except UsageError as exc:
        print(f"error: {exc}", file=err)
        print(USAGE, file=out)
        return ExitCode.VIOLATION

    if args.command != "upgrade" or args.upgrade_command is None:
        print(USAGE, file=out)
        return ExitCode.VIOLATION

    _configure_logging(args.verbose, err)

    root: Path = args.root if args.root is not None else Path.cwd()
    if not root.is_dir():
        print(f"error: project root does not exist: {root}", file=err)
        return ExitCode.ERROR

    engine = _make_engine(root, no_plugins=args.no_plugins or _env_disables_plugins())

    # ── apply ───────────────────────────────────────────────────────
    if args.upgrade_command == "apply":
        try:
            result = engine.run_apply(safe=args.safe, dry_run=args.dry_run)
        except UnsupportedModeError as exc:
            print(str(exc), file=err)
            return ExitCode.VIOLATION
        return _emit(result, engine, args, out, err) or exit_code_for(result)

    # ── audit / report ──────────────────────────────────────────────
    result = engine.run_audit(command=args.upgrade_command)
    failed = _emit(result, engine, args, out, err)
    if failed is not None:
        return failed
    return exit_code_for(result, fail_on_blocking=getattr(args, "fail_on_blocking", True))


if __name__ == "__main__":
    raise SystemExit(main())
