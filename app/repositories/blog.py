"""Blog repository for database operations."""

from datetime import UTC, datetime
from logging import getLogger
from uuid import UUID

from sqlalchemy import select

from app.configs import file_logger
from app.models.blog import BlogDB
from app.models.user import UserDB
from app.repositories.base import BaseRepository
from app.schemas.blog import BlogCreate, BlogUpdate

logger = file_logger(getLogger(__name__))


class BlogRepository(BaseRepository[BlogDB, BlogUpdate]):
    """
    Repository for Blog database operations.

    This class implements the repository pattern for Blog entities,
    providing CRUD operations and the owner-enriched listing.
    """

    model = BlogDB

    async def create(self, blog: BlogCreate, user_id: UUID) -> BlogDB:
        """
        Create a new blog owned by ``user_id``.

        Args:
            blog: Validated blog payload
            user_id: UUID of the owning user

        Returns:
            BlogDB: Created blog with its assigned id

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other database errors
        """
        db_blog = BlogDB(
            user_id=user_id,
            title=blog.title,
            url=blog.url,
            author=blog.author,
            likes=blog.likes,
        )
        return await self._add_and_refresh(db_blog)

    async def update(self, blog_id: UUID, blog_update: BlogUpdate) -> BlogDB | None:
        """
        Update blog fields present in ``blog_update``.

        Args:
            blog_id: Blog UUID
            blog_update: Partial update

        Returns:
            BlogDB | None: Updated blog if found, None otherwise
        """
        return await super().update(
            blog_id,
            blog_update,
            updated_at=datetime.now(tz=UTC),
        )

    async def get_all_with_owner(self) -> list[tuple[BlogDB, UserDB | None]]:
        """
        Get every blog together with its owner.

        Returns:
            list[tuple[BlogDB, UserDB | None]]: Blogs in creation order, paired with their owner
        """
        query = (
            select(BlogDB, UserDB)
            # pyrefly: ignore [bad-argument-type]
            .outerjoin(UserDB, BlogDB.user_id == UserDB.uuid)
            # pyrefly: ignore [bad-argument-type]
            .order_by(BlogDB.created_at)
        )
        result = await self.session.execute(query)
        rows = [(blog, user) for blog, user in result.all()]
        logger.info(f"Loaded {len(rows)} blogs with owners")
        return rows
