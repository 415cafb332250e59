from unitgraph.common.canonical_json import canonical_dumps_str, canonicalize
from unitgraph.conversions.enumerator import ConversionFact


def test_canonical_key_order() -> None:
    a = {"b": 1, "a": 2}
    b = {"a": 2, "b": 1}
    assert canonical_dumps_str(a) == canonical_dumps_str(b)


def test_dataclasses_become_mappings() -> None:
    fact = ConversionFact("Area", "Length", "Volume", is_mul=True)
    assert canonicalize([fact]) == [{"a": "Area", "b": "Length", "c": "Volume", "is_mul": True}]


def test_unknown_objects_are_stringified() -> None:
    assert canonical_dumps_str({1: object}) == '{"1":"' + str(object) + '"}'
