"""Schema management for the catalog tables."""

from loguru import logger
from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from src.catalog.core.services.database.db_session import build_engine
from src.catalog.runtime.context import get_config


def register_tables() -> None:
    """Import every table model so it is registered with SQLModel metadata."""
    from src.catalog.entities.core.user import UserTable  # noqa: F401
    from src.catalog.entities.service.category import CategoryTable  # noqa: F401
    from src.catalog.entities.service.product import ProductTable  # noqa: F401
    from src.catalog.entities.service.product_image import (  # noqa: F401
        ProductImageTable,
    )


class DbManageService:
    def __init__(self, engine: Engine | None = None):
        self._engine = engine if engine is not None else build_engine(get_config())

    def create_all(self) -> None:
        """Create all database tables."""
        register_tables()
        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        """Drop all database tables."""
        register_tables()
        SQLModel.metadata.drop_all(self._engine)
        logger.info("Database tables dropped.")

    def table_names(self) -> list[str]:
        return sorted(inspect(self._engine).get_table_names())
