from __future__ import annotations

import hashlib
from collections.abc import Iterator, Mapping
from typing import Any

from unitgraph.algebra.identity import UnitIdentifier
from unitgraph.common.canonical_json import canonical_dumps_bytes


class UnitRegistry:
    """Name <-> identity map under construction.

    `register` is the single check-then-insert point for identities, so a
    colliding identity is never admitted twice.
    """

    def __init__(self) -> None:
        self._by_name: dict[str, UnitIdentifier] = {}
        self._by_identity: dict[UnitIdentifier, str] = {}

    def register(self, name: str, identity: UnitIdentifier) -> str | None:
        """Add `name`; return the existing owner of `identity` instead if there is one."""
        existing = self._by_identity.get(identity)
        if existing is not None:
            return existing
        if name in self._by_name:
            raise KeyError(f"Unit '{name}' is already registered")
        self._by_name[name] = identity
        self._by_identity[identity] = name
        return None

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get_identity(self, name: str) -> UnitIdentifier:
        return self._by_name[name]

    def freeze(self) -> Registration:
        return Registration(self._by_name)


class Registration(Mapping[str, UnitIdentifier]):
    """Read-only, resolved name -> identity map with its inverse.

    Iteration follows registration order: base units first, then derived units
    in the order they were resolved.
    """

    def __init__(self, entries: Mapping[str, UnitIdentifier] | None = None) -> None:
        by_name: dict[str, UnitIdentifier] = {}
        by_identity: dict[UnitIdentifier, str] = {}
        for name, identity in (entries or {}).items():
            if identity in by_identity:
                raise ValueError(
                    f"Units '{by_identity[identity]}' and '{name}' share identity {identity}"
                )
            by_name[name] = identity
            by_identity[identity] = name
        self._by_name = by_name
        self._by_identity = by_identity

    def __getitem__(self, name: str) -> UnitIdentifier:
        return self._by_name[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_name)

    def __len__(self) -> int:
        return len(self._by_name)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Registration):
            return self._by_name == other._by_name
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(frozenset(self._by_name.items()))

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={identity}" for name, identity in self._by_name.items())
        return f"Registration({body})"

    def name_of(self, identity: UnitIdentifier) -> str | None:
        return self._by_identity.get(identity)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for name, identity in self._by_name.items():
            numerator, denominator = identity.to_mappings()
            out[name] = {"numerator": numerator, "denominator": denominator}
        return out

    def fingerprint(self) -> str:
        return "sha256:" + hashlib.sha256(canonical_dumps_bytes(self.to_dict())).hexdigest()


__all__ = ["Registration", "UnitRegistry"]
