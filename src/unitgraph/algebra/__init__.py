from unitgraph.algebra.identity import (
    DIMENSIONLESS,
    E_IDENTITY_INVALID,
    Exponents,
    IdentityError,
    UnitIdentifier,
    divide,
    minimize,
    multiply,
)

__all__ = [
    "DIMENSIONLESS",
    "E_IDENTITY_INVALID",
    "Exponents",
    "IdentityError",
    "UnitIdentifier",
    "divide",
    "minimize",
    "multiply",
]
