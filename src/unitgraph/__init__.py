"""Dimensional identities, resolution and conversion discovery for unit catalogues."""

from unitgraph.algebra import DIMENSIONLESS, IdentityError, UnitIdentifier, divide, minimize, multiply
from unitgraph.declarations import (
    BaseUnitDef,
    DeclarationError,
    DerivedUnitDef,
    UnitDefinitions,
    load_unit_definitions,
    parse_unit_definitions,
)
from unitgraph.resolution import (
    Registration,
    RegistrationResolver,
    Resolution,
    ResolutionIssue,
    resolve_registration,
)
from unitgraph.conversions import ConversionFact, ConversionIndex, enumerate_conversions
from unitgraph.pipeline import ResolutionResult, UnitResolutionError, resolve_file, resolve_units

__all__ = [
    "DIMENSIONLESS",
    "BaseUnitDef",
    "ConversionFact",
    "ConversionIndex",
    "DeclarationError",
    "DerivedUnitDef",
    "IdentityError",
    "Registration",
    "RegistrationResolver",
    "Resolution",
    "ResolutionIssue",
    "ResolutionResult",
    "UnitDefinitions",
    "UnitIdentifier",
    "UnitResolutionError",
    "divide",
    "enumerate_conversions",
    "load_unit_definitions",
    "minimize",
    "multiply",
    "parse_unit_definitions",
    "resolve_file",
    "resolve_registration",
    "resolve_units",
]
