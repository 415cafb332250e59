from unitgraph.conversions.enumerator import (
    ConversionFact,
    ConversionIndex,
    enumerate_conversions,
)
from unitgraph.declarations.models import UnitDefinitions
from unitgraph.resolution.resolver import E_DUPLICATE_DIMENSION, resolve_registration


def _resolve(**kwargs):
    return resolve_registration(UnitDefinitions.from_names(**kwargs))


def test_acceleration_scenario_facts() -> None:
    resolution = _resolve(
        base_units=["Length", "Duration"],
        div_units=[
            ("Velocity", "Length", "Duration"),
            ("Acceleration", "Velocity", "Duration"),
        ],
    )

    facts = set(enumerate_conversions(resolution.registration))

    assert ConversionFact("Velocity", "Duration", "Acceleration", is_mul=False) in facts
    assert ConversionFact("Acceleration", "Duration", "Velocity", is_mul=True) in facts
    assert ConversionFact("Duration", "Acceleration", "Velocity", is_mul=True) in facts
    assert ConversionFact("Velocity", "Acceleration", "Duration", is_mul=False) in facts
    assert ConversionFact("Length", "Duration", "Velocity", is_mul=False) in facts
    assert ConversionFact("Velocity", "Duration", "Length", is_mul=True) in facts
    assert ConversionFact("Length", "Velocity", "Duration", is_mul=False) in facts


def test_multiplication_facts_are_symmetric() -> None:
    resolution = _resolve(
        base_units=["Mass", "Length", "Duration"],
        mul_units=[
            ("Area", "Length", "Length"),
            ("Volume", "Area", "Length"),
            ("Force", "Mass", "Acceleration"),
        ],
        div_units=[
            ("Velocity", "Length", "Duration"),
            ("Acceleration", "Velocity", "Duration"),
            ("Density", "Mass", "Volume"),
        ],
    )

    facts = set(enumerate_conversions(resolution.registration))

    for fact in facts:
        if fact.is_mul and fact.a != fact.b:
            assert ConversionFact(fact.b, fact.a, fact.c, is_mul=True) in facts
    assert ConversionFact("Density", "Volume", "Mass", is_mul=True) in facts
    assert ConversionFact("Volume", "Density", "Mass", is_mul=True) in facts


def test_self_pairs_are_included() -> None:
    resolution = _resolve(
        base_units=["Length"],
        mul_units=[("Area", "Length", "Length")],
        div_units=[("Ratio", "Length", "Length")],
    )

    facts = enumerate_conversions(resolution.registration)

    assert ConversionFact("Length", "Length", "Area", is_mul=True) in facts
    assert ConversionFact("Length", "Length", "Ratio", is_mul=False) in facts
    assert ConversionFact("Area", "Area", "Ratio", is_mul=False) in facts
    assert ConversionFact("Ratio", "Ratio", "Ratio", is_mul=True) in facts


def test_facts_are_not_repeated() -> None:
    resolution = _resolve(
        base_units=["Length", "Duration"],
        mul_units=[("Area", "Length", "Length")],
        div_units=[("Velocity", "Length", "Duration")],
    )

    facts = enumerate_conversions(resolution.registration)

    assert len(facts) == len(set(facts))


def test_multi_step_relations_are_not_searched() -> None:
    resolution = _resolve(
        base_units=["Length"],
        mul_units=[
            ("Area", "Length", "Length"),
            ("Volume", "Area", "Length"),
            ("Hypervolume", "Volume", "Length"),
        ],
    )

    facts = enumerate_conversions(resolution.registration)

    assert ConversionFact("Area", "Area", "Hypervolume", is_mul=True) in facts
    volume_products = {(fact.a, fact.b) for fact in facts if fact.is_mul and fact.c == "Volume"}
    assert volume_products == {("Area", "Length"), ("Length", "Area")}


def test_round_trip_division_recovers_base_unit() -> None:
    resolution = _resolve(
        base_units=["X", "Y"],
        mul_units=[("Z", "X", "Y")],
        div_units=[("W", "Z", "Y")],
    )

    assert [issue.code for issue in resolution.issues] == [E_DUPLICATE_DIMENSION]
    issue = resolution.issues[0]
    assert issue.units == ("X", "W")
    assert issue.identity == resolution.registration["X"]

    facts = enumerate_conversions(resolution.registration)
    assert ConversionFact("Z", "Y", "X", is_mul=False) in facts


def test_index_groups_by_first_operand() -> None:
    resolution = _resolve(
        base_units=["Length", "Duration"],
        div_units=[("Velocity", "Length", "Duration")],
    )

    index = ConversionIndex.from_registration(resolution.registration)

    assert set(index.for_unit("Velocity")) == {
        ConversionFact("Velocity", "Duration", "Length", is_mul=True),
    }
    assert set(index.for_unit("Length")) == {
        ConversionFact("Length", "Duration", "Velocity", is_mul=False),
        ConversionFact("Length", "Velocity", "Duration", is_mul=False),
    }
    assert index.multiplications("Duration") == (
        ConversionFact("Duration", "Velocity", "Length", is_mul=True),
    )
    assert index.divisions("Duration") == ()
    assert index.for_unit("Unknown") == ()
    assert len(index) == len(index.facts) == 4


def test_fact_formatting() -> None:
    fact = ConversionFact("Velocity", "Duration", "Acceleration", is_mul=False)

    assert fact.operator == "/"
    assert str(fact) == "Velocity / Duration = Acceleration"
