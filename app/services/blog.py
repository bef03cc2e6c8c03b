"""
Blog access control.

``BlogService`` orchestrates create, update and delete against the blog and
user stores. Every mutating call receives the caller's ``AuthContext``
explicitly; ownership is a single fixed rule: only the creator may delete.

Create and delete each write twice (the blog row, then the owner's
``blog_ids``). With the SQL repositories both writes share the request
session and commit together. Two concurrent creates by the same user in
separate transactions still race on ``blog_ids``; the later commit wins.
"""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError

from app.configs import MISSING_USER_MESSAGE, settings
from app.errors.auth import ForbiddenError, UnauthorizedError
from app.errors.database import RecordNotFoundError
from app.errors.validation import ValidationError, format_errors, summarize_errors
from app.models import BlogDB, UserDB
from app.monitoring import get_logger
from app.repositories.protocols import BlogStore, UserStore
from app.schemas.blog import (
    BlogCreate,
    BlogListResponse,
    BlogStatistics,
    BlogUpdate,
    OwnerSummary,
)
from app.services.auth import AuthContext
from app.services.statistics import summarize

logger = get_logger(__name__)

BLOG_NOT_FOUND_MESSAGE = "blog not found"
DELETE_FORBIDDEN_MESSAGE = "you can only delete your own blogs"
UPDATE_FORBIDDEN_MESSAGE = "you can only update your own blogs"


def _validate[SchemaT: (BlogCreate, BlogUpdate)](
    schema: type[SchemaT],
    payload: SchemaT | Mapping[str, Any],
) -> SchemaT:
    if isinstance(payload, schema):
        return payload
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        errors = format_errors(list(e.errors()), skip_body=False)
        raise ValidationError(detail=summarize_errors(errors), errors=errors) from e


class BlogService:
    """Blog access controller enforcing the ownership rules."""

    def __init__(
        self,
        blog_repo: BlogStore,
        user_repo: UserStore,
        *,
        enforce_update_ownership: bool | None = None,
    ) -> None:
        self.blog_repo = blog_repo
        self.user_repo = user_repo
        self.enforce_update_ownership = (
            settings.ENFORCE_UPDATE_OWNERSHIP
            if enforce_update_ownership is None
            else enforce_update_ownership
        )

    async def list_blogs(self) -> list[BlogListResponse]:
        """Return every blog with a summary of its owner."""
        rows = await self.blog_repo.get_all_with_owner()
        return [
            BlogListResponse.model_validate(blog, from_attributes=True).model_copy(
                update={
                    "user": OwnerSummary(id=owner.uuid, username=owner.username, name=owner.name)
                    if owner
                    else None,
                },
            )
            for blog, owner in rows
        ]

    async def statistics(self) -> BlogStatistics:
        """Aggregate the current blog collection."""
        return summarize(await self.list_blogs())

    async def create(
        self,
        payload: BlogCreate | Mapping[str, Any],
        ctx: AuthContext,
    ) -> BlogDB:
        """
        Create a blog owned by the acting user.

        Args:
            payload: Blog fields; title and url are required
            ctx: Resolved caller identity

        Returns:
            BlogDB: The created blog with its assigned id

        Raises:
            UnauthorizedError: If there is no acting user
            ValidationError: If title or url is missing or empty
        """
        user = ctx.user
        if user is None:
            raise UnauthorizedError

        blog_in = _validate(BlogCreate, payload)
        blog = await self.blog_repo.create(blog_in, user_id=user.uuid)

        user.blog_ids = [*user.blog_ids, str(blog.id)]
        await self.user_repo.save(user)

        logger.info("Blog created", blog_id=str(blog.id), user_id=str(user.uuid))
        return blog

    async def delete(self, blog_id: UUID, ctx: AuthContext) -> None:
        """
        Delete a blog owned by the acting user.

        Raises:
            ValidationError: If there is no acting user
            RecordNotFoundError: If the blog does not exist
            ForbiddenError: If the acting user does not own the blog
        """
        user = self._require_user(ctx)
        blog = await self._get_or_raise(blog_id)

        if blog.user_id != user.uuid:
            logger.warning(
                "Delete refused for non-owner",
                blog_id=str(blog_id),
                user_id=str(user.uuid),
            )
            raise ForbiddenError(DELETE_FORBIDDEN_MESSAGE)

        if not await self.blog_repo.delete(blog_id):
            raise RecordNotFoundError(BLOG_NOT_FOUND_MESSAGE)

        # Same session as the delete, so both commit together
        user.blog_ids = [i for i in user.blog_ids if i != str(blog_id)]
        await self.user_repo.save(user)

        logger.info("Blog deleted", blog_id=str(blog_id), user_id=str(user.uuid))

    async def update(
        self,
        blog_id: UUID,
        ctx: AuthContext,
        patch: BlogUpdate | Mapping[str, Any],
    ) -> BlogDB:
        """
        Apply the provided fields of ``patch`` to a blog.

        Any authenticated user may update any blog unless
        ``enforce_update_ownership`` is on.

        Raises:
            ValidationError: If there is no acting user or the patch is invalid
            RecordNotFoundError: If the blog does not exist
            ForbiddenError: If ownership is enforced and the user does not own the blog
        """
        user = self._require_user(ctx)
        blog = await self._get_or_raise(blog_id)
        blog_update = _validate(BlogUpdate, patch)

        if self.enforce_update_ownership and blog.user_id != user.uuid:
            raise ForbiddenError(UPDATE_FORBIDDEN_MESSAGE)

        updated = await self.blog_repo.update(blog_id, blog_update)
        if not updated:
            raise RecordNotFoundError(BLOG_NOT_FOUND_MESSAGE)

        logger.info(
            "Blog updated",
            blog_id=str(blog_id),
            fields=sorted(blog_update.model_fields_set),
        )
        return updated

    @staticmethod
    def _require_user(ctx: AuthContext) -> UserDB:
        if ctx.user is None:
            raise ValidationError(MISSING_USER_MESSAGE)
        return ctx.user

    async def _get_or_raise(self, blog_id: UUID) -> BlogDB:
        blog = await self.blog_repo.get_by_id(blog_id)
        if not blog:
            raise RecordNotFoundError(BLOG_NOT_FOUND_MESSAGE)
        return blog
