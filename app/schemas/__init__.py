from app.schemas.auth import LoginRequest, Token, TokenData
from app.schemas.blog import (
    AuthorBlogs,
    AuthorLikes,
    BlogCreate,
    BlogListResponse,
    BlogResponse,
    BlogStatistics,
    BlogUpdate,
    OwnerSummary,
)
from app.schemas.health import HealthCheckResponse
from app.schemas.user import BlogSummary, UserCreate, UserResponse, UserWithBlogsResponse

__all__ = [
    "AuthorBlogs",
    "AuthorLikes",
    "BlogCreate",
    "BlogListResponse",
    "BlogResponse",
    "BlogStatistics",
    "BlogSummary",
    "BlogUpdate",
    "HealthCheckResponse",
    "LoginRequest",
    "OwnerSummary",
    "Token",
    "TokenData",
    "UserCreate",
    "UserResponse",
    "UserWithBlogsResponse",
]
