from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from ..config.loader import (
    DEFAULT_GZIP_SUFFIXES,
    DEFAULT_OUTPUT_NAME,
    DEFAULT_PLAIN_SUFFIXES,
    load_config_file,
)
from ..errors import ScriptError
from ..exit_codes import ERR_CONFIG
from ..run_id import make_run_id
from ..walker import classify
from .env import getenv, getenv_flag

OutputFormat = Literal["text", "json"]
LogLevel = Literal["debug", "info", "warn", "error"]


def _check_output_name(name: str, plain_suffixes: tuple[str, ...], gzip_suffixes: tuple[str, ...]) -> None:
    """Reject output names that escape the directory or would replace a manual."""
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        raise ScriptError(f"invalid output name: {name!r}", ERR_CONFIG, kind="invalid_config")
    if classify(name, plain_suffixes, gzip_suffixes) is not None:
        raise ScriptError(
            f"output name {name!r} matches a manual suffix and would overwrite a manual",
            ERR_CONFIG,
            kind="invalid_config",
        )


@dataclass(frozen=True)
class RunContext:
    run_id: str
    directory: Path
    output_name: str
    plain_suffixes: tuple[str, ...]
    gzip_suffixes: tuple[str, ...]
    sort_inputs: bool
    dry_run: bool
    output_format: OutputFormat
    log_json: bool
    log_level: LogLevel
    config_path: Path | None

    @property
    def output_path(self) -> Path:
        return self.directory / self.output_name

    @classmethod
    def from_args(
        cls,
        directory: str | Path,
        run_id: str | None = None,
        config_path: str | None = None,
        output_name: str | None = None,
        sort_inputs: bool | None = None,
        dry_run: bool = False,
        output_format: OutputFormat = "text",
        log_format: str | None = None,
        verbose: bool = False,
        quiet: bool = False,
    ) -> "RunContext":
        raw_config = config_path or getenv("INDEXINFO_CONFIG")
        resolved_config = Path(raw_config) if raw_config else None
        cfg: dict[str, Any] = load_config_file(resolved_config) if resolved_config else {}

        plain_suffixes = tuple(cfg.get("plain_suffixes", DEFAULT_PLAIN_SUFFIXES))
        gzip_suffixes = tuple(cfg.get("gzip_suffixes", DEFAULT_GZIP_SUFFIXES))
        resolved_output = output_name or getenv("INDEXINFO_OUTPUT_NAME") or cfg.get("output_name", DEFAULT_OUTPUT_NAME)
        _check_output_name(resolved_output, plain_suffixes, gzip_suffixes)

        resolved_sort = sort_inputs
        if resolved_sort is None:
            resolved_sort = getenv_flag("INDEXINFO_SORT")
        if resolved_sort is None:
            resolved_sort = bool(cfg.get("sort_inputs", False))

        resolved_log_format = log_format or getenv("INDEXINFO_LOG_FORMAT") or cfg.get("log_format", "text")
        if resolved_log_format not in ("text", "json"):
            raise ScriptError(f"invalid log format: {resolved_log_format!r}", ERR_CONFIG, kind="invalid_config")

        log_level: LogLevel = "warn"
        if verbose:
            log_level = "debug"
        elif quiet:
            log_level = "error"

        return cls(
            run_id=run_id or getenv("RUN_ID") or make_run_id(),
            directory=Path(directory),
            output_name=resolved_output,
            plain_suffixes=plain_suffixes,
            gzip_suffixes=gzip_suffixes,
            sort_inputs=resolved_sort,
            dry_run=dry_run,
            output_format=output_format,
            log_json=resolved_log_format == "json",
            log_level=log_level,
            config_path=resolved_config,
        )
