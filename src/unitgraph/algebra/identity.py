from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

E_IDENTITY_INVALID = "E_IDENTITY_INVALID"

Exponents = tuple[tuple[str, int], ...]


class IdentityError(ValueError):
    def __init__(self, code: str, message: str) -> None:
        self.code = code
        super().__init__(f"{code}: {message}")


def _check_side(side: Exponents, label: str) -> None:
    for name, exp in side:
        if not isinstance(name, str) or name == "":
            raise IdentityError(E_IDENTITY_INVALID, "Base unit names must be non-empty strings.")
        if isinstance(exp, bool) or not isinstance(exp, int) or exp <= 0:
            raise IdentityError(
                E_IDENTITY_INVALID,
                f"Exponent for '{name}' in {label} must be a positive int.",
            )
    names = [name for name, _ in side]
    if names != sorted(set(names)):
        raise IdentityError(
            E_IDENTITY_INVALID,
            f"{label} must be sorted by base unit name without repeats.",
        )


def _to_exponents(mapping: Mapping[str, int], label: str) -> dict[str, int]:
    filtered: dict[str, int] = {}
    for name, exp in mapping.items():
        if isinstance(exp, bool) or not isinstance(exp, int):
            raise IdentityError(E_IDENTITY_INVALID, f"Exponent for '{name}' must be int.")
        if exp < 0:
            raise IdentityError(
                E_IDENTITY_INVALID,
                f"Exponent for '{name}' in {label} must not be negative.",
            )
        if exp:
            filtered[name] = exp
    return filtered


def _combine(left: Exponents, right: Exponents) -> dict[str, int]:
    combined = dict(left)
    for name, exp in right:
        combined[name] = combined.get(name, 0) + exp
    return combined


def _format_side(side: Exponents) -> str:
    return "*".join(name if exp == 1 else f"{name}^{exp}" for name, exp in side)


@dataclass(frozen=True)
class UnitIdentifier:
    """Dimension of a unit as a reduced ratio of base-unit exponents.

    Both sides are sorted ``(base unit, exponent)`` pairs with positive
    exponents, and no base unit appears on both sides. Use `minimize` or
    `from_mappings` to build one from arbitrary exponent maps.
    """

    numerator: Exponents = ()
    denominator: Exponents = ()

    def __post_init__(self) -> None:
        _check_side(self.numerator, "numerator")
        _check_side(self.denominator, "denominator")
        shared = {name for name, _ in self.numerator} & {name for name, _ in self.denominator}
        if shared:
            raise IdentityError(
                E_IDENTITY_INVALID,
                f"Identity is not minimized; shared base units: {', '.join(sorted(shared))}.",
            )

    @classmethod
    def base(cls, name: str) -> UnitIdentifier:
        return cls(numerator=((name, 1),))

    @classmethod
    def from_mappings(
        cls,
        numerator: Mapping[str, int],
        denominator: Mapping[str, int] | None = None,
    ) -> UnitIdentifier:
        return minimize(numerator, denominator or {})

    @classmethod
    def from_exponents(cls, exponents: Mapping[str, int]) -> UnitIdentifier:
        """Build an identity from signed exponents (negative means divisor)."""
        numerator = {name: exp for name, exp in exponents.items() if exp > 0}
        denominator = {name: -exp for name, exp in exponents.items() if exp < 0}
        return minimize(numerator, denominator)

    def to_mappings(self) -> tuple[dict[str, int], dict[str, int]]:
        return dict(self.numerator), dict(self.denominator)

    def exponents(self) -> dict[str, int]:
        signed = dict(self.numerator)
        for name, exp in self.denominator:
            signed[name] = -exp
        return dict(sorted(signed.items()))

    def is_dimensionless(self) -> bool:
        return not self.numerator and not self.denominator

    def multiply(self, other: UnitIdentifier) -> UnitIdentifier:
        return multiply(self, other)

    def divide(self, other: UnitIdentifier) -> UnitIdentifier:
        return divide(self, other)

    def __mul__(self, other: object) -> UnitIdentifier:
        if not isinstance(other, UnitIdentifier):
            return NotImplemented
        return multiply(self, other)

    def __truediv__(self, other: object) -> UnitIdentifier:
        if not isinstance(other, UnitIdentifier):
            return NotImplemented
        return divide(self, other)

    def __str__(self) -> str:
        top = _format_side(self.numerator) or "1"
        if not self.denominator:
            return top
        bottom = _format_side(self.denominator)
        if len(self.denominator) > 1:
            bottom = f"({bottom})"
        return f"{top}/{bottom}"


def minimize(
    numerator: Mapping[str, int] | Iterable[tuple[str, int]],
    denominator: Mapping[str, int] | Iterable[tuple[str, int]],
) -> UnitIdentifier:
    """Cancel base units common to both sides and return the reduced identity."""
    top = _to_exponents(dict(numerator), "numerator")
    bottom = _to_exponents(dict(denominator), "denominator")
    for name in sorted(set(top) & set(bottom)):
        common = min(top[name], bottom[name])
        top[name] -= common
        bottom[name] -= common
        if top[name] == 0:
            del top[name]
        if bottom[name] == 0:
            del bottom[name]
    return UnitIdentifier(
        numerator=tuple(sorted(top.items())),
        denominator=tuple(sorted(bottom.items())),
    )


def multiply(left: UnitIdentifier, right: UnitIdentifier) -> UnitIdentifier:
    return minimize(
        _combine(left.numerator, right.numerator),
        _combine(left.denominator, right.denominator),
    )


def divide(left: UnitIdentifier, right: UnitIdentifier) -> UnitIdentifier:
    return minimize(
        _combine(left.numerator, right.denominator),
        _combine(left.denominator, right.numerator),
    )


DIMENSIONLESS = UnitIdentifier()


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
