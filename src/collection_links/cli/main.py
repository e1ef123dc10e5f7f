from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .. import __version__
from ..contracts import validate
from ..core.context import RunContext
from ..core.logging import log_event
from ..errors import ScriptError
from ..exit_codes import ERR_INTERNAL, ERR_MISSING
from ..render import REPORT_SCHEMA, TextReporter, report_payload
from ..validator import run
from .output import emit, render_error, resolve_output_format


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="collection-links",
        description="Check that every `- path:` entry of the collection manifests exists in the repository.",
    )
    p.add_argument("--version", action="version", version=f"collection-links {__version__}")
    p.add_argument(
        "manifest",
        nargs="?",
        help="collection manifest to validate; defaults to every collections/*.yml under the repository root",
    )
    p.add_argument("--json", action="store_true", help="emit a JSON report instead of text")
    p.add_argument("--format", choices=["text", "json"], default=None, help="output format")
    p.add_argument(
        "--extract",
        choices=["line", "yaml"],
        default="line",
        help="path extraction: fixed `- path:` line pattern (default) or YAML parsing",
    )
    p.add_argument("--no-color", action="store_true", help="disable ANSI colours (also honoured via NO_COLOR)")
    p.add_argument("--run-id", help="run identifier for log events")
    p.add_argument("--log-json", action="store_true", help="emit log events on stderr as JSON lines")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable verbose diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    return p


def main(argv: list[str] | None = None, repo_root: Path | None = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)
    as_json = resolve_output_format(cli_json=ns.json, cli_format=ns.format) == "json"
    try:
        ctx = RunContext.from_args(
            ns.run_id,
            repo_root=repo_root,
            output_format="json" if as_json else "text",
            extract_mode=ns.extract,
            no_color=ns.no_color,
            verbose=ns.verbose,
            quiet=ns.quiet,
            log_json=ns.log_json,
        )
        log_event(ctx, "info", "cli", "start", root=str(ctx.repo_root), manifest=ns.manifest or "-", fmt=ctx.output_format)
        reporter = None if as_json else TextReporter(color=ctx.color)
        code, report = run(ctx, ns.manifest, reporter)
        if as_json:
            if code == ERR_MISSING and report.manifests and not report.manifests[0].found:
                print(
                    render_error(
                        as_json=True,
                        message=f"collection file not found: {ns.manifest}",
                        code=ERR_MISSING,
                        kind="manifest_not_found",
                    ),
                    file=sys.stderr,
                )
            else:
                payload = report_payload(report, ctx.run_id, ctx.repo_root)
                validate(REPORT_SCHEMA, payload)
                emit(payload, as_json=True)
        log_event(ctx, "info", "cli", "finish", code=code, checked=report.checked, missing=report.missing)
        return code
    except ScriptError as exc:
        print(render_error(as_json=as_json, message=str(exc), code=exc.code, kind=exc.kind), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(render_error(as_json=as_json, message=f"internal error: {exc}", code=ERR_INTERNAL), file=sys.stderr)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
