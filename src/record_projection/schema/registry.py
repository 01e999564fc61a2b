"""Accessor registry for fixed-schema record types."""

from __future__ import annotations

import dataclasses
import threading
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

MISSING: Any = object()


@dataclass(frozen=True, slots=True)
class FieldAccessor:
    """Public alias, schema identifier and extraction function of one field."""

    external_name: str
    internal_name: str
    getter: Callable[[Any], Any]


class SchemaAccessors:
    """Declared fields of one record type, in declaration order."""

    def __init__(self, record_type: type, accessors: Iterable[FieldAccessor]) -> None:
        self.record_type = record_type
        self.fields: tuple[FieldAccessor, ...] = tuple(accessors)
        self._by_internal: dict[str, FieldAccessor] = {}
        for accessor in self.fields:
            self._by_internal.setdefault(accessor.internal_name, accessor)

    def find_external(self, name: str) -> FieldAccessor | None:
        """Return the first declared field whose external name is `name`."""
        for accessor in self.fields:
            if accessor.external_name == name:
                return accessor
        return None

    def extract(self, record: Any, internal_name: str) -> Any:
        accessor = self._by_internal.get(internal_name)
        if accessor is None:
            return MISSING
        return accessor.getter(record)


class SchemaRegistry:
    """Maps record types to their field accessors.

    Pydantic models and dataclasses are described on first use and cached.
    Any other class must be registered explicitly with `(external, internal)`
    pairs in declaration order.
    """

    def __init__(self) -> None:
        self._schemas: dict[type, SchemaAccessors] = {}
        self._lock = threading.Lock()

    def register(self, record_type: type, fields: Sequence[tuple[str, str]]) -> SchemaAccessors:
        with self._lock:
            if record_type in self._schemas:
                raise ValueError(f"Schema already registered: {record_type.__qualname__}")
            schema = _build_schema(record_type, fields)
            self._schemas[record_type] = schema
        return schema

    def schema_for(self, record_type: type) -> SchemaAccessors | None:
        schema = self._schemas.get(record_type)
        if schema is not None:
            return schema

        if isinstance(record_type, type) and issubclass(record_type, BaseModel):
            pairs = _pydantic_fields(record_type)
        elif dataclasses.is_dataclass(record_type):
            pairs = _dataclass_fields(record_type)
        else:
            return None

        # First writer wins when threads describe the same type concurrently.
        with self._lock:
            return self._schemas.setdefault(record_type, _build_schema(record_type, pairs))


def _build_schema(record_type: type, fields: Sequence[tuple[str, str]]) -> SchemaAccessors:
    return SchemaAccessors(
        record_type,
        (
            FieldAccessor(external, internal, _attribute_getter(internal))
            for external, internal in fields
        ),
    )


def _attribute_getter(internal_name: str) -> Callable[[Any], Any]:
    def _get(record: Any) -> Any:
        return getattr(record, internal_name, MISSING)

    return _get


def _pydantic_fields(model: type[BaseModel]) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for name, info in model.model_fields.items():
        external = next(
            (
                alias
                for alias in (info.serialization_alias, info.alias, info.validation_alias)
                if isinstance(alias, str) and alias
            ),
            name,
        )
        pairs.append((external, name))
    return pairs


def _dataclass_fields(record_type: type) -> list[tuple[str, str]]:
    return [
        (str(field.metadata.get("alias", field.name)), field.name)
        for field in dataclasses.fields(record_type)
    ]


default_registry = SchemaRegistry()
