from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import jsonschema


def load_schema(schema_path: Path) -> Dict[str, Any]:
    with open(schema_path, "r", encoding="utf-8") as f:
        return json.load(f)


def _validator(schema_path: Path) -> jsonschema.Draft202012Validator:
    schema = load_schema(schema_path)
    jsonschema.Draft202012Validator.check_schema(schema)
    return jsonschema.Draft202012Validator(schema)


def collect_errors(instance: Any, schema_path: Path) -> List[str]:
    """Every schema violation in `instance`, prefixed with its JSON path."""
    errors = sorted(
        _validator(schema_path).iter_errors(instance),
        key=lambda error: [str(part) for part in error.absolute_path],
    )
    return [f"{error.json_path}: {error.message}" for error in errors]
