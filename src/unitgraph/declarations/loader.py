from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from unitgraph.common.schema_validate import collect_errors
from unitgraph.declarations.models import (
    BaseUnitDef,
    DerivedUnitDef,
    SiUnitDef,
    UnitDef,
    UnitDefinitions,
)

logger = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).resolve().parents[1] / "schemas"
UNIT_DEFINITIONS_SCHEMA = SCHEMA_DIR / "unit_definitions.schema.json"

UNITS_SUFFIX = ".units.json"

E_DECLARATION_INVALID = "E_DECLARATION_INVALID"


class DeclarationError(ValueError):
    def __init__(self, code: str, message: str, path: str | None = None) -> None:
        self.code = code
        self.message = message
        self.path = path
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.path:
            return f"{self.code}: {self.message} ({self.path})"
        return f"{self.code}: {self.message}"


def document_name(path: Path) -> str:
    name = path.name
    if name.endswith(UNITS_SUFFIX):
        return name[: -len(UNITS_SUFFIX)]
    return path.stem


def _si_unit(data: Mapping[str, Any] | None) -> SiUnitDef | None:
    if data is None:
        return None
    return SiUnitDef(name=data["name"], short=data["short"])


def _additional_units(items: Sequence[Mapping[str, Any]]) -> tuple[UnitDef, ...]:
    return tuple(
        UnitDef(name=item["name"], short=item["short"], factor=float(item["factor"]))
        for item in items
    )


def _base_unit(item: Mapping[str, Any]) -> BaseUnitDef:
    return BaseUnitDef(
        type_name=item["typeName"],
        si_unit=_si_unit(item.get("siUnit")),
        additional_units=_additional_units(item.get("additionalUnits", [])),
        generate_extensions=item.get("generateExtensions", False),
    )


def _derived_unit(item: Mapping[str, Any], *, is_mul: bool) -> DerivedUnitDef:
    return DerivedUnitDef(
        type_name=item["typeName"],
        primary=item["primary"],
        secondary=item["secondary"],
        is_mul=is_mul,
        si_unit=_si_unit(item.get("siUnit")),
        additional_units=_additional_units(item.get("additionalUnits", [])),
        generate_extensions=item.get("generateExtensions", False),
    )


def parse_unit_definitions(data: Any, *, name: str | None = None) -> UnitDefinitions:
    """Validate a decoded declaration document and convert it to `UnitDefinitions`.

    Every schema violation is reported in a single `DeclarationError`.
    """
    errors = collect_errors(data, UNIT_DEFINITIONS_SCHEMA)
    if errors:
        raise DeclarationError(E_DECLARATION_INVALID, "; ".join(errors), path=name)
    return UnitDefinitions(
        namespace=data["namespace"],
        base_units=tuple(_base_unit(item) for item in data["baseUnits"]),
        mul_units=tuple(_derived_unit(item, is_mul=True) for item in data.get("mulUnits", [])),
        div_units=tuple(_derived_unit(item, is_mul=False) for item in data.get("divUnits", [])),
        name=name,
    )


def load_unit_definitions(path: Path) -> UnitDefinitions:
    with open(path, encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise DeclarationError(
                E_DECLARATION_INVALID, f"Invalid JSON: {exc.msg}", path=str(path)
            ) from exc
        except UnicodeDecodeError as exc:
            raise DeclarationError(
                E_DECLARATION_INVALID, f"Invalid UTF-8: {exc.reason}", path=str(path)
            ) from exc
    definitions = parse_unit_definitions(payload, name=document_name(path))
    logger.debug(
        "Loaded unit definitions %s: %d base, %d mul, %d div",
        definitions.name,
        len(definitions.base_units),
        len(definitions.mul_units),
        len(definitions.div_units),
    )
    return definitions


def find_unit_documents(directory: Path) -> list[Path]:
    return sorted(path for path in directory.rglob(f"*{UNITS_SUFFIX}") if path.is_file())


__all__ = [
    "DeclarationError",
    "E_DECLARATION_INVALID",
    "UNITS_SUFFIX",
    "UNIT_DEFINITIONS_SCHEMA",
    "document_name",
    "find_unit_documents",
    "load_unit_definitions",
    "parse_unit_definitions",
]
