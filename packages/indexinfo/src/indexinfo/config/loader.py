from __future__ import annotations

from pathlib import Path
from typing import Any

import jsonschema
import yaml

from ..core.schema_utils import schema_path, validate_json
from ..core.yaml_utils import load_yaml
from ..errors import ScriptError
from ..exit_codes import ERR_CONFIG

DEFAULT_OUTPUT_NAME = "dir"
DEFAULT_PLAIN_SUFFIXES: tuple[str, ...] = (".info",)
DEFAULT_GZIP_SUFFIXES: tuple[str, ...] = (".info.gz",)
CONFIG_SCHEMA = "config.schema.json"


def load_config_file(path: Path) -> dict[str, Any]:
    """Load a YAML config file and validate it against the bundled schema.

    An empty file is an empty config. Every failure is reported as a
    configuration error naming the file.
    """
    if not path.is_file():
        raise ScriptError(f"config file not found: {path}", ERR_CONFIG, kind="invalid_config")
    try:
        data = load_yaml(path)
    except OSError as exc:
        raise ScriptError(f"cannot read config {path}: {exc}", ERR_CONFIG, kind="invalid_config") from exc
    except yaml.YAMLError as exc:
        raise ScriptError(f"cannot parse config {path}: {exc}", ERR_CONFIG, kind="invalid_config") from exc
    if data is None:
        data = {}
    try:
        validate_json(data, schema_path(CONFIG_SCHEMA))
    except jsonschema.ValidationError as exc:
        where = "/".join(str(part) for part in exc.absolute_path) or "<root>"
        raise ScriptError(f"invalid config {path} at {where}: {exc.message}", ERR_CONFIG, kind="invalid_config") from exc
    return data
