"""User repository."""

from sqlmodel import select

from src.catalog.entities.core._repository import EntityRepository

from .entity import User
from .table import UserTable


class UserRepository(EntityRepository[User, UserTable]):
    """Data-access layer for users."""

    entity_type = User
    table_type = UserTable

    def get_by_email(self, email: str) -> User | None:
        statement = select(UserTable).where(UserTable.email == email)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)
