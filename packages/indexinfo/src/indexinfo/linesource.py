"""Line-at-a-time readers over plain and gzip-compressed Info files.

Both providers split on LF only and hand the parser text decoded as UTF-8
with ``surrogateescape``, so undecodable bytes survive unchanged into the
generated index.
"""

from __future__ import annotations

import gzip
import zlib
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, Iterator

from .errors import LineSourceError

ENCODING = "utf-8"
ERRORS = "surrogateescape"


def decode_line(raw: bytes) -> str:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
    return raw.decode(ENCODING, ERRORS)


class LineSource:
    def __init__(self, handle: BinaryIO, name: str) -> None:
        self._handle = handle
        self.name = name

    def __iter__(self) -> Iterator[str]:
        while True:
            try:
                raw = self._handle.readline()
            except (OSError, EOFError, zlib.error) as exc:
                raise LineSourceError(self.name, str(exc) or type(exc).__name__) from exc
            if not raw:
                return
            yield decode_line(raw)

    def close(self) -> None:
        self._handle.close()

    def __enter__(self) -> "LineSource":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class PlainLineSource(LineSource):
    @classmethod
    def open(cls, path: Path) -> "PlainLineSource":
        return cls(path.open("rb"), str(path))


class GzipLineSource(LineSource):
    @classmethod
    def open(cls, path: Path) -> "GzipLineSource":
        return cls(gzip.open(path, "rb"), str(path))


def open_line_source(path: Path, compressed: bool) -> LineSource:
    if compressed:
        return GzipLineSource.open(path)
    return PlainLineSource.open(path)
