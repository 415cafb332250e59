from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from unitgraph.common.canonical_json import canonical_dumps_str
from unitgraph.conversions.enumerator import ConversionIndex
from unitgraph.declarations.loader import (
    DeclarationError,
    E_DECLARATION_INVALID,
    load_unit_definitions,
)
from unitgraph.declarations.models import UnitDefinitions
from unitgraph.resolution.registry import Registration
from unitgraph.resolution.resolver import RegistrationResolver, ResolutionIssue

logger = logging.getLogger(__name__)

E_DECLARATION_LOAD_ERROR = "E_DECLARATION_LOAD_ERROR"
E_RESOLUTION_FAILED = "E_RESOLUTION_FAILED"


class UnitResolutionError(ValueError):
    def __init__(self, issues: tuple[ResolutionIssue, ...]) -> None:
        self.code = E_RESOLUTION_FAILED
        self.issues = issues
        detail = "; ".join(f"{issue.code}: {issue.message}" for issue in issues)
        super().__init__(f"{self.code}: {detail}")


@dataclass(frozen=True)
class ResolutionResult:
    status: str
    issues: tuple[ResolutionIssue, ...]
    registration: Registration
    conversions: ConversionIndex
    order: tuple[str, ...] = ()
    definitions: UnitDefinitions | None = None

    @property
    def ok(self) -> bool:
        return self.status == "PASS"

    def issues_with_code(self, code: str) -> tuple[ResolutionIssue, ...]:
        return tuple(issue for issue in self.issues if issue.code == code)

    def raise_for_errors(self) -> None:
        if not self.ok:
            raise UnitResolutionError(self.issues)

    def to_report(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "namespace": None if self.definitions is None else self.definitions.namespace,
            "issues": [issue.to_dict() for issue in self.issues],
            "registration": self.registration.to_dict(),
            "fingerprint": self.registration.fingerprint(),
            "conversions": [
                [fact.a, fact.b, fact.c, fact.is_mul] for fact in self.conversions.facts
            ],
        }

    def report_json(self) -> str:
        return canonical_dumps_str(self.to_report())


def _failed(issue: ResolutionIssue) -> ResolutionResult:
    return ResolutionResult(
        status="FAIL",
        issues=(issue,),
        registration=Registration(),
        conversions=ConversionIndex(),
    )


def resolve_units(definitions: UnitDefinitions, *, worklist: str = "fifo") -> ResolutionResult:
    """Resolve `definitions` and enumerate the conversions between admitted units.

    Conversions are always enumerated over whatever was admitted so the report
    is complete, but a ``FAIL`` status means the catalogue must not be used.
    """
    resolution = RegistrationResolver(worklist=worklist).resolve(definitions)
    conversions = ConversionIndex.from_registration(resolution.registration)
    status = "PASS" if resolution.ok else "FAIL"
    logger.debug(
        "Enumerated %d conversions for %s (%s)",
        len(conversions),
        definitions.name or definitions.namespace,
        status,
    )
    return ResolutionResult(
        status=status,
        issues=resolution.issues,
        registration=resolution.registration,
        conversions=conversions,
        order=resolution.order,
        definitions=definitions,
    )


def resolve_file(path: Path, *, worklist: str = "fifo") -> ResolutionResult:
    try:
        definitions = load_unit_definitions(path)
    except OSError as exc:
        return _failed(ResolutionIssue(E_DECLARATION_LOAD_ERROR, str(exc)))
    except DeclarationError as exc:
        return _failed(ResolutionIssue(E_DECLARATION_INVALID, exc.message))
    return resolve_units(definitions, worklist=worklist)


__all__ = [
    "E_DECLARATION_LOAD_ERROR",
    "E_RESOLUTION_FAILED",
    "ResolutionResult",
    "UnitResolutionError",
    "resolve_file",
    "resolve_units",
]
