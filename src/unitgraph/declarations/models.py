from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class SiUnitDef:
    name: str
    short: str


@dataclass(frozen=True)
class UnitDef:
    name: str
    short: str
    factor: float


@dataclass(frozen=True)
class BaseUnitDef:
    type_name: str
    si_unit: SiUnitDef | None = None
    additional_units: tuple[UnitDef, ...] = ()
    generate_extensions: bool = False


@dataclass(frozen=True)
class DerivedUnitDef:
    """A unit equal to ``primary * secondary`` or ``primary / secondary``."""

    type_name: str
    primary: str
    secondary: str
    is_mul: bool
    si_unit: SiUnitDef | None = None
    additional_units: tuple[UnitDef, ...] = ()
    generate_extensions: bool = False

    @property
    def operator(self) -> str:
        return "*" if self.is_mul else "/"

    def operands(self) -> tuple[str, str]:
        return (self.primary, self.secondary)


UnitDeclaration = BaseUnitDef | DerivedUnitDef


@dataclass(frozen=True)
class UnitDefinitions:
    """One declaration document: base units plus derived units by mode."""

    namespace: str
    base_units: tuple[BaseUnitDef, ...] = ()
    mul_units: tuple[DerivedUnitDef, ...] = ()
    div_units: tuple[DerivedUnitDef, ...] = ()
    name: str | None = None

    @classmethod
    def from_names(
        cls,
        base_units: Sequence[str] = (),
        mul_units: Sequence[tuple[str, str, str]] = (),
        div_units: Sequence[tuple[str, str, str]] = (),
        *,
        namespace: str = "",
    ) -> UnitDefinitions:
        """Build bare declarations from names and ``(name, primary, secondary)`` triples."""
        return cls(
            namespace=namespace,
            base_units=tuple(BaseUnitDef(type_name=name) for name in base_units),
            mul_units=tuple(
                DerivedUnitDef(type_name=name, primary=primary, secondary=secondary, is_mul=True)
                for name, primary, secondary in mul_units
            ),
            div_units=tuple(
                DerivedUnitDef(type_name=name, primary=primary, secondary=secondary, is_mul=False)
                for name, primary, secondary in div_units
            ),
        )

    def derived_units(self) -> tuple[DerivedUnitDef, ...]:
        return self.mul_units + self.div_units

    def declarations(self) -> Iterator[UnitDeclaration]:
        yield from self.base_units
        yield from self.derived_units()

    def names(self) -> tuple[str, ...]:
        return tuple(unit.type_name for unit in self.declarations())

    def find(self, type_name: str) -> UnitDeclaration | None:
        for unit in self.declarations():
            if unit.type_name == type_name:
                return unit
        return None


__all__ = [
    "BaseUnitDef",
    "DerivedUnitDef",
    "SiUnitDef",
    "UnitDeclaration",
    "UnitDef",
    "UnitDefinitions",
]
