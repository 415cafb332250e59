"""Unit declaration documents and their in-memory model."""

from unitgraph.declarations.loader import (
    DeclarationError,
    E_DECLARATION_INVALID,
    document_name,
    find_unit_documents,
    load_unit_definitions,
    parse_unit_definitions,
)
from unitgraph.declarations.models import (
    BaseUnitDef,
    DerivedUnitDef,
    SiUnitDef,
    UnitDeclaration,
    UnitDef,
    UnitDefinitions,
)

__all__ = [
    "BaseUnitDef",
    "DeclarationError",
    "DerivedUnitDef",
    "E_DECLARATION_INVALID",
    "SiUnitDef",
    "UnitDeclaration",
    "UnitDef",
    "UnitDefinitions",
    "document_name",
    "find_unit_documents",
    "load_unit_definitions",
    "parse_unit_definitions",
]
