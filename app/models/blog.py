"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import DateTime, Index
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String

from app.configs.settings import MAX_TITLE_LENGTH, MAX_URL_LENGTH


class BlogDB(SQLModel, table=True):
    """
    Blog database model for PostgreSQL.

    This model represents the blogs table in the database.
    Every row is owned by exactly one user through ``user_id``.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (Index("ix_blogs_author", "author"),)

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )

    # Foreign key to User (owner)
    user_id: UUID = Field(
        sa_column=Column(
            "user_id",
            ForeignKey("users.uuid", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Owner ID (foreign key to users.uuid)",
    )

    # Required fields
    title: str = Field(
        sa_column=Column(String(MAX_TITLE_LENGTH), nullable=False),
        description="Blog title",
    )
    url: str = Field(
        sa_column=Column(String(MAX_URL_LENGTH), nullable=False),
        description="Blog URL",
    )

    # Optional fields
    author: str | None = Field(
        default=None,
        sa_column=Column(String(100)),
        description="Blog author (free text, not the owner)",
    )

    likes: int = Field(
        default=0,
        nullable=False,
        description="Like count",
    )

    # Timestamps (timezone-aware)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "Go To Statement Considered Harmful",
                "author": "Edsger W. Dijkstra",
                "url": "https://homepages.cwi.nl/~storm/teaching/reader/Dijkstra68.pdf",
                "likes": 5,
            },
        },
    )
