"""Record shapes supported by the projection engine.

A shape is detected once per call from the first payload element. Both
variants expose the same two operations: `resolve` turns requested names into
descriptors and `extract` reads one descriptor from one record, returning
`MISSING` when the record has no such field.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from record_projection.engine.resolver import resolve_dynamic, resolve_fixed
from record_projection.schema.registry import MISSING, SchemaAccessors, SchemaRegistry
from record_projection.types import FieldDescriptor, RecordShape


@dataclass(frozen=True, slots=True)
class FixedSchemaShape:
    kind: ClassVar[RecordShape] = RecordShape.FIXED

    schema: SchemaAccessors

    def resolve(self, names: Iterable[str]) -> list[FieldDescriptor]:
        return resolve_fixed(self.schema, names)

    def extract(self, record: Any, descriptor: FieldDescriptor) -> Any:
        return self.schema.extract(record, descriptor.internal_name)


@dataclass(frozen=True, slots=True)
class DynamicShape:
    kind: ClassVar[RecordShape] = RecordShape.DYNAMIC

    def resolve(self, names: Iterable[str]) -> list[FieldDescriptor]:
        return resolve_dynamic(names)

    def extract(self, record: Any, descriptor: FieldDescriptor) -> Any:
        if not isinstance(record, Mapping):
            return MISSING
        return record.get(descriptor.external_name, MISSING)


Shape = FixedSchemaShape | DynamicShape


def detect_shape(record: Any, registry: SchemaRegistry) -> Shape | None:
    """Classify `record`, or return None when its shape is unsupported."""
    schema = registry.schema_for(type(record))
    if schema is not None:
        return FixedSchemaShape(schema)
    if isinstance(record, Mapping):
        return DynamicShape()
    return None
