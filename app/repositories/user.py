"""User repository for database operations."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from app.errors.database import DatabaseError, DuplicateEntryError
from app.models.user import UserDB
from app.repositories.base import BaseRepository
from app.schemas.user import UserCreate


class UserRepository(BaseRepository[UserDB, UserCreate]):
    """
    Repository for User database operations.

    This class implements the repository pattern for User entities,
    providing CRUD operations and owned-blog bookkeeping.
    """

    model = UserDB
    id_field = "uuid"

    async def create(self, user: UserCreate, password_hash: str) -> UserDB:
        """
        Create a new user in the database.

        Args:
            user: Registration payload
            password_hash: Already hashed password

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If username already exists
            DatabaseError: For other database errors
        """
        db_user = UserDB(
            username=user.username,
            name=user.name,
            password_hash=password_hash,
            blog_ids=[],
        )

        try:
            self.session.add(db_user)
            await self.session.flush()
            await self.session.refresh(db_user)
            return db_user
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "username" in error_msg.lower():
                raise DuplicateEntryError(
                    detail=f"Username '{user.username}' already exists",
                ) from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username.

        Args:
            username: Username to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        return await self.get_by_field("username", username)

    async def get_all(self) -> list[UserDB]:
        """
        Get all users in registration order.

        Returns:
            list[UserDB]: List of users
        """
        # pyrefly: ignore [bad-argument-type]
        result = await self.session.execute(select(UserDB).order_by(UserDB.created_at))
        return list(result.scalars().all())

    async def save(self, user: UserDB) -> UserDB:
        """
        Persist changes made to a loaded user, such as a new ``blog_ids`` list.

        Args:
            user: User handle previously loaded from this repository

        Returns:
            UserDB: Refreshed user
        """
        return await self._add_and_refresh(user)
