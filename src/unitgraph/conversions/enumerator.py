from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from unitgraph.algebra.identity import divide, multiply
from unitgraph.resolution.registry import Registration


@dataclass(frozen=True)
class ConversionFact:
    """``a * b = c`` when `is_mul`, otherwise ``a / b = c``."""

    a: str
    b: str
    c: str
    is_mul: bool

    @property
    def operator(self) -> str:
        return "*" if self.is_mul else "/"

    def __str__(self) -> str:
        return f"{self.a} {self.operator} {self.b} = {self.c}"


def enumerate_conversions(registration: Registration) -> tuple[ConversionFact, ...]:
    """Every single-step product or quotient of two registered units that is itself registered.

    Pairs are visited in both orders (and each unit is paired with itself), so
    a product ``a * b = c`` also yields ``b * a = c`` and the quotients that
    undo it. Units reachable only through several steps are not searched for.
    """
    facts: list[ConversionFact] = []
    for a, a_identity in registration.items():
        for b, b_identity in registration.items():
            product = registration.name_of(multiply(a_identity, b_identity))
            if product is not None:
                facts.append(ConversionFact(a, b, product, is_mul=True))
            quotient = registration.name_of(divide(a_identity, b_identity))
            if quotient is not None:
                facts.append(ConversionFact(a, b, quotient, is_mul=False))
    return tuple(facts)


class ConversionIndex:
    """Conversion facts grouped by their first operand."""

    def __init__(self, facts: Iterable[ConversionFact] = ()) -> None:
        self._facts = tuple(facts)
        grouped: dict[str, list[ConversionFact]] = {}
        for fact in self._facts:
            grouped.setdefault(fact.a, []).append(fact)
        self._by_unit = {unit: tuple(group) for unit, group in grouped.items()}

    @classmethod
    def from_registration(cls, registration: Registration) -> ConversionIndex:
        return cls(enumerate_conversions(registration))

    @property
    def facts(self) -> tuple[ConversionFact, ...]:
        return self._facts

    def units(self) -> tuple[str, ...]:
        return tuple(self._by_unit)

    def for_unit(self, name: str) -> tuple[ConversionFact, ...]:
        return self._by_unit.get(name, ())

    def multiplications(self, name: str) -> tuple[ConversionFact, ...]:
        return tuple(fact for fact in self.for_unit(name) if fact.is_mul)

    def divisions(self, name: str) -> tuple[ConversionFact, ...]:
        return tuple(fact for fact in self.for_unit(name) if not fact.is_mul)

    def __iter__(self) -> Iterator[ConversionFact]:
        return iter(self._facts)

    def __len__(self) -> int:
        return len(self._facts)

    def __contains__(self, fact: object) -> bool:
        return fact in self._facts


__all__ = ["ConversionFact", "ConversionIndex", "enumerate_conversions"]
