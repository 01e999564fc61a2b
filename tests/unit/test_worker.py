from record_projection.engine.aggregator import aggregate
from record_projection.engine.worker import project_chunk, project_record
from record_projection.schema.registry import SchemaRegistry
from record_projection.schema.shapes import DynamicShape, FixedSchemaShape
from record_projection.types import FieldDescriptor
from sample_records import Person


def test_fixed_records_emit_external_names() -> None:
    shape = FixedSchemaShape(SchemaRegistry().schema_for(Person))
    descriptors = [FieldDescriptor("first_name", "given_name")]
    records = [Person(ident=1, given_name="Ada"), Person(ident=2, given_name="Grace")]

    assert project_chunk(records, shape, descriptors) == [
        {"first_name": "Ada"},
        {"first_name": "Grace"},
    ]


def test_empty_descriptors_still_emit_one_entry_per_record() -> None:
    shape = FixedSchemaShape(SchemaRegistry().schema_for(Person))
    records = [Person(ident=i, given_name="x") for i in range(4)]

    assert project_chunk(records, shape, []) == [{}, {}, {}, {}]


def test_dynamic_records_may_differ_in_keys() -> None:
    descriptors = [FieldDescriptor("x", "x"), FieldDescriptor("y", "y")]

    assert project_chunk([{"x": 1, "z": 0}, {"y": 2}, {}], DynamicShape(), descriptors) == [
        {"x": 1},
        {"y": 2},
        {},
    ]


def test_foreign_record_in_fixed_chunk_contributes_nothing() -> None:
    shape = FixedSchemaShape(SchemaRegistry().schema_for(Person))

    assert project_record(object(), shape, [FieldDescriptor("id", "ident")]) == {}


def test_projected_records_are_independent_objects() -> None:
    chunk = project_chunk([{"x": 1}, {"x": 1}], DynamicShape(), [FieldDescriptor("x", "x")])

    chunk[0]["x"] = 99
    assert chunk[1] == {"x": 1}


def test_aggregate_joins_by_chunk_index() -> None:
    chunks = [[{"i": 0}, {"i": 1}], [], [{"i": 2}], [{"i": 3}, {"i": 4}]]

    assert aggregate(chunks) == tuple({"i": i} for i in range(5))
