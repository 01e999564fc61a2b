"""Per-chunk field extraction."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from record_projection.schema.registry import MISSING
from record_projection.schema.shapes import Shape
from record_projection.types import FieldDescriptor, ProjectedRecord


def project_record(
    record: Any, shape: Shape, descriptors: Sequence[FieldDescriptor]
) -> ProjectedRecord:
    projected: ProjectedRecord = {}
    for descriptor in descriptors:
        value = shape.extract(record, descriptor)
        if value is not MISSING:
            projected[descriptor.external_name] = value
    return projected


def project_chunk(
    records: Sequence[Any], shape: Shape, descriptors: Sequence[FieldDescriptor]
) -> list[ProjectedRecord]:
    """Project one contiguous slice, one output entry per input record.

    The returned list is owned by the caller; workers never share buffers.
    """
    return [project_record(record, shape, descriptors) for record in records]
