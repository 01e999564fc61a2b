"""Paginated result container."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")


class PaginatedResult(BaseModel, Generic[T]):
    """One page of homogeneous records.

    Instances are frozen. Projection always builds a new result carrying the
    source `page` and `records_per_page`.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    page: int
    records_per_page: int = Field(alias="rpp")
    payload: tuple[T, ...] = ()

    @field_validator("payload", mode="before")
    @classmethod
    def _absent_payload_is_empty(cls, value: Any) -> Any:
        return () if value is None else value
