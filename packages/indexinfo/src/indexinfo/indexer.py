from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from . import PACKAGE_NAME, __version__
from .core.context import RunContext
from .emitter import emit_index, render_index
from .errors import LineSourceError
from .linesource import open_line_source
from .logging import log_event
from .parser import parse_lines
from .registry import SectionRegistry
from .walker import InfoFile, iter_info_files


@dataclass
class RunSummary:
    directory: Path
    output: Path
    action: str = "absent"
    files_seen: int = 0
    files_parsed: int = 0
    skipped: list[tuple[str, str]] = field(default_factory=list)
    sections: list[tuple[str, int]] = field(default_factory=list)
    rendered: str | None = None

    @property
    def files_skipped(self) -> int:
        return len(self.skipped)

    @property
    def entry_count(self) -> int:
        return sum(count for _name, count in self.sections)

    def to_payload(self, run_id: str) -> dict[str, object]:
        return {
            "schema_name": "indexinfo.run-summary.v1",
            "schema_version": 1,
            "tool": PACKAGE_NAME,
            "version": __version__,
            "status": "warn" if self.skipped else "ok",
            "run_id": run_id,
            "directory": str(self.directory),
            "output": str(self.output),
            "action": self.action,
            "files_seen": self.files_seen,
            "files_parsed": self.files_parsed,
            "files_skipped": self.files_skipped,
            "skipped": [{"file": name, "reason": reason} for name, reason in self.skipped],
            "section_count": len(self.sections),
            "entry_count": self.entry_count,
            "sections": [{"name": name, "entries": count} for name, count in self.sections],
        }


def parse_info_file(ctx: RunContext, registry: SectionRegistry, info: InfoFile, summary: RunSummary) -> None:
    try:
        with open_line_source(info.path, info.compressed) as source:
            result = parse_lines(source, registry)
    except (LineSourceError, OSError) as exc:
        reason = exc.reason if isinstance(exc, LineSourceError) else (exc.strerror or str(exc))
        summary.skipped.append((info.name, reason))
        log_event(ctx, "warn", "parse", "skip", file=info.name, reason=reason)
        return
    summary.files_parsed += 1
    log_event(
        ctx,
        "debug",
        "parse",
        "file",
        file=info.name,
        compressed=info.compressed,
        lines=result.lines,
        entries=result.entries,
        sections=len(result.sections),
        terminated=result.terminated,
    )


def build_index(ctx: RunContext) -> RunSummary:
    summary = RunSummary(directory=ctx.directory, output=ctx.output_path)
    registry = SectionRegistry()
    log_event(ctx, "info", "index", "start", directory=str(ctx.directory), output=ctx.output_name, sort=ctx.sort_inputs)

    for info in iter_info_files(
        ctx.directory,
        ctx.plain_suffixes,
        ctx.gzip_suffixes,
        sort=ctx.sort_inputs,
        exclude=(ctx.output_name,),
    ):
        summary.files_seen += 1
        log_event(ctx, "debug", "walk", "file", file=info.name, compressed=info.compressed)
        parse_info_file(ctx, registry, info, summary)

    summary.sections = [(section.name, len(section.entries)) for section in registry]
    if ctx.dry_run:
        summary.rendered = render_index(registry) if len(registry) else ""
        summary.action = "dry-run"
    else:
        result = emit_index(registry, ctx.directory, ctx.output_name)
        summary.action = result.action
        log_event(ctx, "info", "emit", result.action, path=str(result.path), sections=result.sections, entries=result.entries)
    log_event(
        ctx,
        "info",
        "index",
        "done",
        files=summary.files_seen,
        skipped=summary.files_skipped,
        sections=len(summary.sections),
        entries=summary.entry_count,
    )
    return summary
