from __future__ import annotations

import gzip
import os
import subprocess
import sys
from pathlib import Path
from typing import Iterable

from indexinfo import __version__

ROOT = Path(__file__).resolve().parents[3]
SRC = ROOT / "packages/indexinfo/src"

INDEX_PREAMBLE = (
    f"Produced by: indexinfo {__version__}.\n"
    "\x1f\n"
    "File: dir,\tNode: Top\tThis is the top of the INFO tree\n"
    "\n"
    "  This (the Directory node) gives a menu of major topics.\n"
    '  Typing "q" exits, "?" lists all Info commands, "d" returns here,\n'
    '  "h" gives a primer for first-timers,\n'
    '  "mXXX<Return>" visits the XXX manual, etc.\n'
    "\n"
    "* Menu:\n"
)

Stanza = tuple[str, Iterable[str]]


def manual(*stanzas: Stanza, trailer: bool = True) -> str:
    """Render an Info manual whose metadata block declares ``stanzas``.

    With ``trailer`` the text continues past the node separator with markers
    that must never be picked up.
    """
    lines = ["This is sample.info, produced by makeinfo version 7.1 from sample.texi.", ""]
    for section, entries in stanzas:
        lines.append(f"INFO-DIR-SECTION {section}")
        lines.append("START-INFO-DIR-ENTRY")
        lines.extend(entries)
        lines.append("END-INFO-DIR-ENTRY")
        lines.append("")
    if trailer:
        lines.append("\x1f")
        lines.append("File: sample.info,  Node: Top,  Next: Overview,  Up: (dir)")
        lines.append("INFO-DIR-SECTION After Separator")
        lines.append("START-INFO-DIR-ENTRY")
        lines.append("* hidden: (hidden).  Never indexed.")
        lines.append("END-INFO-DIR-ENTRY")
    return "\n".join(lines) + "\n"


def write_info(directory: Path, name: str, text: str) -> Path:
    path = directory / name
    path.write_bytes(text.encode("utf-8", "surrogateescape"))
    return path


def write_info_gz(directory: Path, name: str, text: str) -> Path:
    path = directory / name
    with gzip.open(path, "wb") as handle:
        handle.write(text.encode("utf-8", "surrogateescape"))
    return path


def run_indexinfo(*args: str, cwd: Path | None = None, env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    proc_env = {k: v for k, v in os.environ.items() if not k.startswith("INDEXINFO_") and k != "RUN_ID"}
    proc_env["PYTHONPATH"] = str(SRC)
    if env:
        proc_env.update(env)
    return subprocess.run(
        [sys.executable, "-m", "indexinfo.cli", *args],
        cwd=(cwd or ROOT),
        env=proc_env,
        text=True,
        capture_output=True,
        check=False,
    )
