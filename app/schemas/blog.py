"""
Blog schemas for the Bloglist application.

Request bodies are validated here before any store call; responses expose
camelCase aliases for the owner reference.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from app.configs.settings import MAX_TITLE_LENGTH, MAX_URL_LENGTH


def _not_blank(value: str, field: str) -> str:
    # Whitespace-only is empty; non-empty values are stored as given
    if not value.strip():
        mssg = f"{field} must not be empty"
        raise ValueError(mssg)
    return value


class BlogCreate(BaseModel):
    """Blog creation model (request body, excludes store-assigned fields)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = Field(
        ...,
        max_length=MAX_TITLE_LENGTH,
        description="Blog title",
        examples=["Go To Statement Considered Harmful"],
    )
    url: str = Field(
        ...,
        max_length=MAX_URL_LENGTH,
        description="Blog URL",
        examples=["https://homepages.cwi.nl/~storm/teaching/reader/Dijkstra68.pdf"],
    )
    author: str | None = Field(
        default=None,
        max_length=100,
        description="Blog author",
        examples=["Edsger W. Dijkstra"],
    )
    likes: int = Field(default=0, description="Initial like count")

    @field_validator("title", "url")
    @classmethod
    def required_text(cls, value: str, info: ValidationInfo) -> str:
        """Reject blank titles and urls."""
        return _not_blank(value, info.field_name or "value")


class BlogUpdate(BaseModel):
    """
    Blog update model. Only the provided fields are applied.

    A provided ``null`` clears ``author``; title, url and likes cannot be cleared.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str | None = Field(default=None, max_length=MAX_TITLE_LENGTH)
    url: str | None = Field(default=None, max_length=MAX_URL_LENGTH)
    author: str | None = Field(default=None, max_length=100)
    likes: int | None = Field(default=None)

    @field_validator("title", "url", "likes")
    @classmethod
    def required_when_provided(
        cls,
        value: str | int | None,
        info: ValidationInfo,
    ) -> str | int:
        """Reject null for required columns and blank replacements for title and url."""
        field = info.field_name or "value"
        if value is None:
            mssg = f"{field} must not be null"
            raise ValueError(mssg)
        if isinstance(value, str):
            return _not_blank(value, field)
        return value


class OwnerSummary(BaseModel):
    """Owner information embedded in blog listings (no sensitive data)."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    username: str
    name: str | None = None


class BlogResponse(BaseModel):
    """Blog as returned by create, update and detail endpoints."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    title: str
    url: str
    author: str | None = None
    likes: int = 0
    user_id: UUID = Field(alias="userId")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")


class BlogListResponse(BlogResponse):
    """Blog listing entry enriched with the owner summary."""

    user: OwnerSummary | None = None


class AuthorBlogs(BaseModel):
    """Author with the largest number of blogs."""

    author: str | None
    blogs: int


class AuthorLikes(BaseModel):
    """Author with the largest total of likes."""

    author: str | None
    likes: int


class BlogStatistics(BaseModel):
    """Aggregations computed over a blog collection."""

    model_config = ConfigDict(populate_by_name=True)

    total_blogs: int = Field(alias="totalBlogs")
    total_likes: int = Field(alias="totalLikes")
    favorite_blog: BlogResponse | None = Field(default=None, alias="favoriteBlog")
    most_blogs: AuthorBlogs | None = Field(default=None, alias="mostBlogs")
    most_likes: AuthorLikes | None = Field(default=None, alias="mostLikes")
