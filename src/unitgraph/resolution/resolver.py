from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field

from unitgraph.algebra.identity import UnitIdentifier, divide, multiply
from unitgraph.declarations.models import DerivedUnitDef, UnitDefinitions
from unitgraph.resolution.registry import Registration, UnitRegistry

logger = logging.getLogger(__name__)

E_DUPLICATE_DIMENSION = "E_DUPLICATE_DIMENSION"
E_UNRESOLVED_DERIVED_UNITS = "E_UNRESOLVED_DERIVED_UNITS"
E_UNKNOWN_UNIT_REFERENCE = "E_UNKNOWN_UNIT_REFERENCE"
E_DUPLICATE_DECLARATION = "E_DUPLICATE_DECLARATION"

WORKLIST_ORDERS = ("fifo", "lifo")


@dataclass(frozen=True)
class ResolutionIssue:
    code: str
    message: str
    units: tuple[str, ...] = ()
    identity: UnitIdentifier | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "code": self.code,
            "message": self.message,
            "units": list(self.units),
            "identity": None if self.identity is None else str(self.identity),
        }


@dataclass(frozen=True)
class Resolution:
    registration: Registration
    issues: tuple[ResolutionIssue, ...]
    order: tuple[str, ...]

    @property
    def ok(self) -> bool:
        return not self.issues


@dataclass
class _DependencyNode:
    unit: DerivedUnitDef
    dependents: list[int] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.unit.type_name


class RegistrationResolver:
    """Resolve declared units into a `Registration`.

    Base units are registered first. Derived units are resolved with a
    worklist over their dependency graph, so they may be declared in any
    order. Every problem found along the way is collected into the returned
    `Resolution` instead of being raised.
    """

    def __init__(self, worklist: str = "fifo") -> None:
        if worklist not in WORKLIST_ORDERS:
            raise ValueError(f"worklist must be one of {WORKLIST_ORDERS}, got {worklist!r}")
        self._worklist = worklist

    def resolve(self, definitions: UnitDefinitions) -> Resolution:
        issues: list[ResolutionIssue] = []
        registry = UnitRegistry()
        declared: set[str] = set()

        for unit in definitions.base_units:
            if self._is_redeclared(unit.type_name, declared, issues):
                continue
            self._admit(registry, unit.type_name, UnitIdentifier.base(unit.type_name), issues)

        nodes: list[_DependencyNode] = []
        for derived in definitions.derived_units():
            if self._is_redeclared(derived.type_name, declared, issues):
                continue
            nodes.append(_DependencyNode(derived))

        issues.extend(self._unknown_references(nodes, declared))
        self._link_dependents(nodes)

        order, rejected = self._drain(nodes, registry, issues)

        settled = set(order) | rejected
        unresolved = tuple(node.name for node in nodes if node.name not in settled)
        if unresolved:
            issues.append(
                ResolutionIssue(
                    E_UNRESOLVED_DERIVED_UNITS,
                    f"Could not resolve derived units: [{', '.join(unresolved)}]. "
                    "Check that their operands are declared and not cyclic.",
                    units=unresolved,
                )
            )

        registration = registry.freeze()
        if issues:
            logger.info(
                "Resolved %d of %d units with %d issue(s)",
                len(registration),
                len(declared),
                len(issues),
            )
        else:
            logger.info("Resolved %d units", len(registration))
        return Resolution(registration=registration, issues=tuple(issues), order=tuple(order))

    @staticmethod
    def _is_redeclared(name: str, declared: set[str], issues: list[ResolutionIssue]) -> bool:
        if name in declared:
            issues.append(
                ResolutionIssue(
                    E_DUPLICATE_DECLARATION,
                    f"Unit '{name}' is declared more than once.",
                    units=(name,),
                )
            )
            return True
        declared.add(name)
        return False

    @staticmethod
    def _unknown_references(
        nodes: list[_DependencyNode], declared: set[str]
    ) -> list[ResolutionIssue]:
        issues: list[ResolutionIssue] = []
        for node in nodes:
            missing = sorted({name for name in node.unit.operands() if name not in declared})
            if missing:
                issues.append(
                    ResolutionIssue(
                        E_UNKNOWN_UNIT_REFERENCE,
                        f"Unit '{node.name}' references undeclared unit(s): {', '.join(missing)}.",
                        units=(node.name, *missing),
                    )
                )
        return issues

    @staticmethod
    def _link_dependents(nodes: list[_DependencyNode]) -> None:
        index = {node.name: position for position, node in enumerate(nodes)}
        for position, node in enumerate(nodes):
            for operand in sorted(set(node.unit.operands())):
                prerequisite = index.get(operand)
                if prerequisite is not None:
                    nodes[prerequisite].dependents.append(position)

    @staticmethod
    def _is_ready(node: _DependencyNode, registry: UnitRegistry) -> bool:
        return node.unit.primary in registry and node.unit.secondary in registry

    def _drain(
        self,
        nodes: list[_DependencyNode],
        registry: UnitRegistry,
        issues: list[ResolutionIssue],
    ) -> tuple[list[str], set[str]]:
        queue = deque(
            position for position, node in enumerate(nodes) if self._is_ready(node, registry)
        )
        queued = set(queue)
        order: list[str] = []
        rejected: set[str] = set()
        while queue:
            position = queue.popleft() if self._worklist == "fifo" else queue.pop()
            node = nodes[position]
            primary = registry.get_identity(node.unit.primary)
            secondary = registry.get_identity(node.unit.secondary)
            identity = multiply(primary, secondary) if node.unit.is_mul else divide(primary, secondary)
            if not self._admit(registry, node.name, identity, issues):
                rejected.add(node.name)
                continue
            order.append(node.name)
            for dependent in node.dependents:
                if dependent in queued or not self._is_ready(nodes[dependent], registry):
                    continue
                queue.append(dependent)
                queued.add(dependent)
        return order, rejected

    @staticmethod
    def _admit(
        registry: UnitRegistry,
        name: str,
        identity: UnitIdentifier,
        issues: list[ResolutionIssue],
    ) -> bool:
        existing = registry.register(name, identity)
        if existing is None:
            logger.debug("Registered %s as %s", name, identity)
            return True
        logger.debug("Rejected %s: same dimension as %s (%s)", name, existing, identity)
        issues.append(
            ResolutionIssue(
                E_DUPLICATE_DIMENSION,
                f"Duplicate unit definitions: {name} is the same as {existing} "
                f"({identity}) but with a different name.",
                units=(existing, name),
                identity=identity,
            )
        )
        return False


def resolve_registration(definitions: UnitDefinitions, *, worklist: str = "fifo") -> Resolution:
    return RegistrationResolver(worklist=worklist).resolve(definitions)


__all__ = [
    "E_DUPLICATE_DECLARATION",
    "E_DUPLICATE_DIMENSION",
    "E_UNKNOWN_UNIT_REFERENCE",
    "E_UNRESOLVED_DERIVED_UNITS",
    "Resolution",
    "ResolutionIssue",
    "RegistrationResolver",
    "WORKLIST_ORDERS",
    "resolve_registration",
]
