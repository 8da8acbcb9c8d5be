from __future__ import annotations

import argparse
import json
import sys

from . import PACKAGE_NAME, __version__
from .core.context import RunContext
from .errors import ScriptError
from .exit_codes import ERR_INTERNAL, OK
from .indexer import RunSummary, build_index
from .linesource import ENCODING, ERRORS


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PACKAGE_NAME,
        description="Generate the Info directory node from the manuals found in DIRECTORY.",
    )
    p.add_argument("--version", action="version", version=_version_string())
    p.add_argument("directory", help="directory holding the .info / .info.gz manuals")
    p.add_argument("--config", help="YAML configuration file (default: $INDEXINFO_CONFIG)")
    p.add_argument("--output-name", help="index file name inside DIRECTORY (default: dir)")
    p.add_argument("--sort", action="store_true", default=None, help="visit manuals in file name order")
    p.add_argument("--dry-run", action="store_true", help="print the index to stdout instead of writing it")
    p.add_argument("--format", choices=["text", "json"], default=None, help="output format")
    p.add_argument("--json", action="store_true", help="emit the run summary as JSON")
    p.add_argument("--log-format", choices=["text", "json"], default=None, help="diagnostics format on stderr")
    p.add_argument("--run-id", help="run identifier attached to log records")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable verbose diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    return p


def _version_string() -> str:
    return f"{PACKAGE_NAME} {__version__}"


def _write_raw(text: str) -> None:
    sys.stdout.flush()
    sys.stdout.buffer.write(text.encode(ENCODING, ERRORS))
    sys.stdout.buffer.flush()


def _render_summary(summary: RunSummary) -> str:
    return (
        f"{summary.action} {summary.output}: "
        f"files={summary.files_seen} skipped={summary.files_skipped} "
        f"sections={len(summary.sections)} entries={summary.entry_count}"
    )


def _render_error(as_json: bool, message: str, code: int, kind: str) -> str:
    if as_json:
        return json.dumps(
            {
                "schema_name": "indexinfo.error.v1",
                "schema_version": 1,
                "tool": PACKAGE_NAME,
                "status": "fail",
                "error": {"message": message, "code": code, "kind": kind},
            },
            sort_keys=True,
        )
    return f"{PACKAGE_NAME}: {message}"


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)
    fmt = "json" if ns.json else (ns.format or "text")
    as_json = fmt == "json"
    try:
        ctx = RunContext.from_args(
            ns.directory,
            run_id=ns.run_id,
            config_path=ns.config,
            output_name=ns.output_name,
            sort_inputs=ns.sort,
            dry_run=ns.dry_run,
            output_format=fmt,
            log_format=ns.log_format,
            verbose=ns.verbose,
            quiet=ns.quiet,
        )
        summary = build_index(ctx)
        if as_json:
            print(json.dumps(summary.to_payload(ctx.run_id), sort_keys=True))
        elif ctx.dry_run:
            _write_raw(summary.rendered or "")
        elif ns.verbose:
            print(_render_summary(summary))
        return OK
    except ScriptError as exc:
        print(_render_error(as_json, str(exc), exc.code, exc.kind), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(_render_error(as_json, f"internal error: {exc}", ERR_INTERNAL, "internal_error"), file=sys.stderr)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
