"""User domain entity."""

from pydantic import Field

from src.catalog.entities.core._base import Entity


class User(Entity):
    """User entity representing an account that can own products.

    It inherits from Entity to get auto-generated UUID identifiers.
    """

    name: str = Field(description="User's display name")
    email: str | None = Field(default=None, description="User's email address")
