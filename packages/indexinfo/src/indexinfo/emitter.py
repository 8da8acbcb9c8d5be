"""Serialization of the section registry into the Info ``dir`` node."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from . import PACKAGE_NAME, __version__
from .config.loader import DEFAULT_OUTPUT_NAME
from .errors import ScriptError
from .exit_codes import ERR_ARTIFACT
from .linesource import ENCODING, ERRORS
from .registry import SectionRegistry

HEADER = "\x1f\nFile: dir,\tNode: Top\tThis is the top of the INFO tree\n\n"
HELP_TEXT = (
    "  This (the Directory node) gives a menu of major topics.\n"
    '  Typing "q" exits, "?" lists all Info commands, "d" returns here,\n'
    '  "h" gives a primer for first-timers,\n'
    '  "mXXX<Return>" visits the XXX manual, etc.\n'
)
MENU = "* Menu:\n"


@dataclass(frozen=True)
class EmitResult:
    path: Path
    action: str
    sections: int
    entries: int
    bytes_written: int = 0


def default_producer() -> str:
    return f"{PACKAGE_NAME} {__version__}"


def iter_index_chunks(registry: SectionRegistry, producer: str | None = None) -> Iterator[str]:
    """Yield the index text piece by piece, draining ``registry``."""
    yield f"Produced by: {producer or default_producer()}.\n"
    yield HEADER
    yield HELP_TEXT + "\n"
    yield MENU
    for section in registry.drain():
        yield f"\n{section.name}\n"
        for entry in section.entries:
            yield entry + "\n"
        section.entries.clear()


def render_index(registry: SectionRegistry, producer: str | None = None) -> str:
    return "".join(iter_index_chunks(registry, producer))


def remove_index(path: Path) -> bool:
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as exc:
        raise ScriptError(f"cannot remove stale index {path}: {exc}", ERR_ARTIFACT, kind="artifact_remove_failed") from exc
    return True


def write_index(registry: SectionRegistry, path: Path, producer: str | None = None) -> int:
    written = 0
    try:
        with path.open("w", encoding=ENCODING, errors=ERRORS, newline="\n") as handle:
            for chunk in iter_index_chunks(registry, producer):
                handle.write(chunk)
                written += len(chunk.encode(ENCODING, ERRORS))
    except OSError as exc:
        raise ScriptError(f"cannot write index {path}: {exc}", ERR_ARTIFACT, kind="artifact_write_failed") from exc
    return written


def emit_index(
    registry: SectionRegistry,
    directory: Path,
    output_name: str = DEFAULT_OUTPUT_NAME,
    producer: str | None = None,
) -> EmitResult:
    path = directory / output_name
    sections = len(registry)
    entries = registry.entry_count
    if sections == 0:
        action = "removed" if remove_index(path) else "absent"
        return EmitResult(path=path, action=action, sections=0, entries=0)
    written = write_index(registry, path, producer)
    return EmitResult(path=path, action="written", sections=sections, entries=entries, bytes_written=written)
