from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from typing import Any, Mapping

JsonLike = Any


def _to_primitive(obj: JsonLike) -> JsonLike:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if hasattr(obj, "to_dict") and callable(getattr(obj, "to_dict")):
        return obj.to_dict()
    return obj


def canonicalize(obj: JsonLike) -> JsonLike:
    obj = _to_primitive(obj)

    if isinstance(obj, Mapping):
        return {
            (k if isinstance(k, str) else str(k)): canonicalize(v)
            for k, v in obj.items()
        }

    if isinstance(obj, (list, tuple)):
        return [canonicalize(item) for item in obj]

    if isinstance(obj, (str, int, float, bool)) or obj is None:
        return obj

    return str(obj)


def canonical_dumps_str(obj: Any) -> str:
    return json.dumps(
        canonicalize(obj),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )


def canonical_dumps_bytes(obj: Any) -> bytes:
    return canonical_dumps_str(obj).encode("utf-8")
