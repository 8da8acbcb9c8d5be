from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from .config.loader import DEFAULT_GZIP_SUFFIXES, DEFAULT_PLAIN_SUFFIXES
from .errors import ScriptError
from .exit_codes import ERR_DIRECTORY


@dataclass(frozen=True)
class InfoFile:
    path: Path
    compressed: bool

    @property
    def name(self) -> str:
        return self.path.name


def classify(name: str, plain_suffixes: Iterable[str], gzip_suffixes: Iterable[str]) -> bool | None:
    """Return True for a compressed manual, False for a plain one, None otherwise."""
    for suffix in gzip_suffixes:
        if name.endswith(suffix):
            return True
    for suffix in plain_suffixes:
        if name.endswith(suffix):
            return False
    return None


def list_directory(directory: Path) -> list[str]:
    try:
        with os.scandir(directory) as it:
            return [entry.name for entry in it]
    except OSError as exc:
        raise ScriptError(f"cannot open directory {directory}: {exc}", ERR_DIRECTORY, kind="directory_unreadable") from exc


def iter_info_files(
    directory: Path,
    plain_suffixes: Iterable[str] = DEFAULT_PLAIN_SUFFIXES,
    gzip_suffixes: Iterable[str] = DEFAULT_GZIP_SUFFIXES,
    sort: bool = False,
    exclude: Iterable[str] = (),
) -> Iterator[InfoFile]:
    names = list_directory(directory)
    if sort:
        names.sort(key=os.fsencode)
    plain = tuple(plain_suffixes)
    compressed = tuple(gzip_suffixes)
    skip = set(exclude)
    for name in names:
        if name in skip:
            continue
        kind = classify(name, plain, compressed)
        if kind is None:
            continue
        yield InfoFile(directory / name, kind)
