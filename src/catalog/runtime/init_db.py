"""Database initialization script."""

from src.catalog.core.services.database.db_manage import DbManageService
from src.catalog.runtime.logging_setup import configure_logging


def init_db() -> None:
    """Create all database tables."""
    configure_logging()
    DbManageService().create_all()


if __name__ == "__main__":
    init_db()
