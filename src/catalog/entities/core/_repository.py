"""Shared data-access behaviour for entity repositories.

Repositories translate between domain entities and table rows. They flush
writes so generated values are visible to later queries in the same session,
but never commit: the caller owns the transaction.
"""

from typing import Any, ClassVar, Generic, TypeVar

from loguru import logger
from sqlmodel import Session, select

from src.catalog.entities.core._base import (
    GUARDED_FIELDS,
    Entity,
    EntityTable,
    stamp_created,
    stamp_updated,
)

EntityT = TypeVar("EntityT", bound=Entity)
TableT = TypeVar("TableT", bound=EntityTable)


class EntityRepository(Generic[EntityT, TableT]):
    """Data-access layer for one entity type."""

    entity_type: ClassVar[type[Entity]]
    table_type: ClassVar[type[EntityTable]]

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, row: TableT) -> EntityT:
        return self.entity_type.model_validate(row, from_attributes=True)  # type: ignore[return-value]

    def _writable_fields(self) -> list[str]:
        return [
            name for name in self.entity_type.model_fields if name not in GUARDED_FIELDS
        ]

    def _get_row(self, entity_id: str) -> TableT:
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            raise ValueError(f"{self.entity_type.__name__} {entity_id} not found")
        return row  # type: ignore[return-value]

    def create(self, entity: EntityT) -> EntityT:
        row = self.table_type.model_validate(entity, from_attributes=True)
        stamp_created(row)
        self._session.add(row)
        self._session.flush()
        logger.debug("Created {} {}", self.entity_type.__name__, row.id)
        return self._to_entity(row)  # type: ignore[arg-type]

    def get(self, entity_id: str) -> EntityT | None:
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            return None
        return self._to_entity(row)  # type: ignore[arg-type]

    def update(self, entity: EntityT) -> EntityT:
        row = self._get_row(entity.id)
        for name in self._writable_fields():
            setattr(row, name, getattr(entity, name))
        stamp_updated(row)
        self._session.add(row)
        self._session.flush()
        logger.debug("Updated {} {}", self.entity_type.__name__, row.id)
        return self._to_entity(row)

    def fill(self, entity_id: str, attributes: dict[str, Any]) -> EntityT:
        """Mass-assign attributes onto a stored record.

        Guarded fields are dropped. Unknown attribute names raise ValueError
        before anything is written.
        """
        writable = set(self._writable_fields())
        dropped = sorted(GUARDED_FIELDS.intersection(attributes))
        if dropped:
            logger.debug(
                "Ignoring guarded attributes {} for {} {}",
                dropped,
                self.entity_type.__name__,
                entity_id,
            )
        changes = {k: v for k, v in attributes.items() if k not in GUARDED_FIELDS}
        unknown = sorted(set(changes) - writable)
        if unknown:
            raise ValueError(
                f"Unknown {self.entity_type.__name__} attributes: {', '.join(unknown)}"
            )

        current = self.get(entity_id)
        if current is None:
            raise ValueError(f"{self.entity_type.__name__} {entity_id} not found")

        # Round-trip through the entity so values get the same coercion as on create.
        merged = self.entity_type.model_validate({**current.model_dump(), **changes})
        return self.update(merged)  # type: ignore[arg-type]

    def delete(self, entity_id: str) -> bool:
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        logger.debug("Deleted {} {}", self.entity_type.__name__, entity_id)
        return True

    def list_all(self) -> list[EntityT]:
        statement = select(self.table_type).order_by(self.table_type.created_at)
        return [self._to_entity(row) for row in self._session.exec(statement).all()]  # type: ignore[arg-type]
