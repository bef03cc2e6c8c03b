"""User schemas for registration and listings."""

from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr


class UserCreate(BaseModel):
    """
    User registration payload.

    Length and uniqueness rules are enforced by the user service so that the
    error messages stay stable for clients.
    """

    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., description="Unique username", examples=["mluukkai"])
    name: str | None = Field(default=None, description="Display name", examples=["Matti Luukkainen"])
    password: SecretStr = Field(..., description="Plaintext password")


class BlogSummary(BaseModel):
    """Blog information embedded in user listings."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int = 0


class UserResponse(BaseModel):
    """User as exposed by the API (never includes the password hash)."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID = Field(validation_alias=AliasChoices("uuid", "id"), serialization_alias="id")
    username: str
    name: str | None = None
    blog_ids: list[UUID] = Field(
        default_factory=list,
        validation_alias=AliasChoices("blog_ids", "blogIds"),
        serialization_alias="blogIds",
    )


class UserWithBlogsResponse(UserResponse):
    """User listing entry with the owned blogs expanded."""

    blogs: list[BlogSummary] = Field(default_factory=list)
