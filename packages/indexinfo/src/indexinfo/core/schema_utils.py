from __future__ import annotations

import json
from pathlib import Path

import jsonschema

SCHEMAS_ROOT = Path(__file__).resolve().parents[1] / "schemas"


def load_json(path: Path) -> dict[str, object]:
    return json.loads(path.read_text(encoding="utf-8"))


def schema_path(name: str) -> Path:
    return SCHEMAS_ROOT / name


def validate_json(payload: object, schema_file: Path) -> None:
    schema = load_json(schema_file)
    jsonschema.validate(payload, schema)
