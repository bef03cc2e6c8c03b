"""Protocol definitions for the blog and user stores."""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable
from uuid import UUID

from app.models import BlogDB, UserDB
from app.schemas.blog import BlogCreate, BlogUpdate
from app.schemas.user import UserCreate


@runtime_checkable
class BlogStore(Protocol):
    """
    Protocol for blog persistence.

    ``BlogRepository`` conforms to this protocol; tests use in-memory stores
    with the same surface.
    """

    async def create(self, blog: BlogCreate, user_id: UUID) -> BlogDB:
        """Insert a blog owned by ``user_id`` and return it with its id."""
        ...

    async def get_by_id(self, record_id: UUID) -> BlogDB | None:
        """Return the blog or ``None``."""
        ...

    async def get_by_ids(self, record_ids: Sequence[UUID]) -> list[BlogDB]:
        """Return the known blogs among ``record_ids``, in that order."""
        ...

    async def update(self, blog_id: UUID, blog_update: BlogUpdate) -> BlogDB | None:
        """Apply the provided fields and return the blog, or ``None`` if absent."""
        ...

    async def delete(self, record_id: UUID) -> bool:
        """Remove the blog; ``False`` if it did not exist."""
        ...

    async def get_all_with_owner(self) -> list[tuple[BlogDB, UserDB | None]]:
        """Return every blog paired with its owner."""
        ...


@runtime_checkable
class UserStore(Protocol):
    """Protocol for user persistence."""

    async def create(self, user: UserCreate, password_hash: str) -> UserDB:
        """Insert a user."""
        ...

    async def get_by_id(self, record_id: UUID) -> UserDB | None:
        """Return the user or ``None``."""
        ...

    async def get_by_username(self, username: str) -> UserDB | None:
        """Return the user with ``username`` or ``None``."""
        ...

    async def get_all(self) -> list[UserDB]:
        """Return every user."""
        ...

    async def save(self, user: UserDB) -> UserDB:
        """Persist changes to a loaded user."""
        ...
