"""Example fixed-schema record."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: UUID
    first_name: str = ""
    middle_name: str = ""
    last_name: str = ""
    surname: str = ""
    age: int = 0
    job_title: str = ""
    country: str = ""
    city: str = ""
    address: str = ""
    timezone: str = Field(default="", alias="tz")
    picture_url: str = ""
    phone: str = ""
    company: str = ""
    password: str = ""
    bio: str = ""
    email: str = ""
    gender: str = ""
    ip_address: str = ""
    archived_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
