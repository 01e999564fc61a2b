"""Normalization and resolution of requested field names."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from record_projection.schema.registry import SchemaAccessors
from record_projection.types import FieldDescriptor

# newline, bell, backspace, form-feed, carriage-return, tab, vertical-tab, space
TRIM_CHARACTERS = "\n\a\b\f\r\t\v "


def normalize_field_name(raw: str) -> str:
    return raw.strip(TRIM_CHARACTERS)


def iter_normalized(names: Iterable[str]) -> Iterator[str]:
    """Yield normalized, non-empty names in first-seen order without repeats."""
    seen: set[str] = set()
    for raw in names:
        name = normalize_field_name(raw)
        if not name or name in seen:
            continue
        seen.add(name)
        yield name


def resolve_fixed(schema: SchemaAccessors, names: Iterable[str]) -> list[FieldDescriptor]:
    """Resolve names against declared aliases; unknown names are dropped.

    When several fields declare the same alias, the first declared one wins.
    """
    descriptors: list[FieldDescriptor] = []
    for name in iter_normalized(names):
        accessor = schema.find_external(name)
        if accessor is None:
            continue
        descriptors.append(FieldDescriptor(name, accessor.internal_name))
    return descriptors


def resolve_dynamic(names: Iterable[str]) -> list[FieldDescriptor]:
    return [FieldDescriptor(name, name) for name in iter_normalized(names)]
