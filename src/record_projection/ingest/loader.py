"""Load a persisted record collection into a paginated result."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, TypeAdapter

from record_projection.result import PaginatedResult


class IngestError(Exception):
    """Raised when a source collection cannot be read or parsed."""


def load_result(
    path: str | Path,
    model: type[BaseModel] | None = None,
    *,
    page: int = 1,
) -> PaginatedResult[Any]:
    """Read a JSON array of records from `path`.

    With `model`, every element is validated into that schema and the result
    holds fixed-schema records. Without it, elements are kept as dicts.
    `records_per_page` is the number of records read.
    """

    file_path = Path(path)
    try:
        raw = file_path.read_bytes()
        item_type: Any = Any if model is None else model
        payload = TypeAdapter(list[item_type]).validate_json(raw)
    # ValidationError and UnicodeDecodeError are both ValueErrors.
    except (OSError, ValueError) as exc:
        raise IngestError(f"Cannot load {file_path}: {exc}") from exc

    return PaginatedResult[Any](page=page, records_per_page=len(payload), payload=payload)
