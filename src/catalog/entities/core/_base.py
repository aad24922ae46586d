import uuid
from datetime import UTC, datetime, timedelta
from typing import Any

import sqlalchemy as sa
from pydantic import BaseModel, field_validator
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel

# Fields callers may never assign directly.
GUARDED_FIELDS = frozenset({"id", "created_at", "updated_at"})


def utc_now() -> datetime:
    """Return current UTC datetime."""
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from the database."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def stamp_created(row: "EntityTable") -> None:
    """Stamp both timestamps of a row that is about to be inserted."""
    now = utc_now()
    row.created_at = now
    row.updated_at = now


def stamp_updated(row: "EntityTable") -> None:
    """Refresh the modification timestamp of a row that is about to be written.

    The new value is always strictly later than the creation timestamp, even
    when the clock has not advanced since the insert.
    """
    now = utc_now()
    created_at = as_utc(row.created_at)
    if now <= created_at:
        now = created_at + timedelta(microseconds=1)
    row.updated_at = now


class Entity(BaseModel):
    """Base entity class with auto-generated UUID identifier."""

    id: str = PydanticField(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identifier for the entity",
    )

    created_at: datetime = PydanticField(default_factory=utc_now)
    updated_at: datetime = PydanticField(default_factory=utc_now)

    @field_validator("created_at", "updated_at")
    @classmethod
    def _ensure_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    def business_fields(self) -> dict[str, Any]:
        """Field values that identify the record, without timestamps."""
        return self.model_dump(exclude={"created_at", "updated_at"})

    def __eq__(self, other: Any) -> bool:
        """Compare entities by business attributes, ignoring timestamps."""
        if type(other) is not type(self):
            return False
        return self.business_fields() == other.business_fields()

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((type(self).__name__, *self.business_fields().items()))


class EntityTable(SQLModel, table=False):
    """Base table model with UUID primary key and write-path timestamps."""

    id: str = Field(
        primary_key=True,
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identifier for the entity",
    )

    created_at: datetime = Field(default_factory=utc_now, nullable=False)
    updated_at: datetime = Field(
        default_factory=utc_now,
        nullable=False,
        sa_column_kwargs={"server_default": sa.func.now()},
    )
