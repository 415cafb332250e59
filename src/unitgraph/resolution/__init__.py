from unitgraph.resolution.registry import Registration, UnitRegistry
from unitgraph.resolution.resolver import (
    E_DUPLICATE_DECLARATION,
    E_DUPLICATE_DIMENSION,
    E_UNKNOWN_UNIT_REFERENCE,
    E_UNRESOLVED_DERIVED_UNITS,
    WORKLIST_ORDERS,
    RegistrationResolver,
    Resolution,
    ResolutionIssue,
    resolve_registration,
)

__all__ = [
    "E_DUPLICATE_DECLARATION",
    "E_DUPLICATE_DIMENSION",
    "E_UNKNOWN_UNIT_REFERENCE",
    "E_UNRESOLVED_DERIVED_UNITS",
    "Registration",
    "RegistrationResolver",
    "Resolution",
    "ResolutionIssue",
    "UnitRegistry",
    "WORKLIST_ORDERS",
    "resolve_registration",
]
