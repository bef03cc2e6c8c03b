# app/routes/blog.py

"""
Blog Routes.

Provides listing, creation, update and deletion of blogs plus aggregated
statistics over the whole collection.

Summary
-------
Endpoints include:
  - List blogs (with owner summary)
  - Blog statistics
  - Create blog
  - Update blog
  - Delete blog

Dependencies
------------
  - `BlogServiceDep`: Access controller bound to the request's stores.
  - `AuthContextDep`: Acting user resolved from the bearer token, possibly none.
"""

from logging import getLogger
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from app.configs import file_logger
from app.dependencies import AuthContextDep, BlogServiceDep
from app.models import BlogDB
from app.schemas import BlogCreate, BlogListResponse, BlogResponse, BlogStatistics, BlogUpdate

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

logger = file_logger(getLogger(__name__))

BLOG_EXAMPLE = {
    "id": "5a422aa7-1b54-4a67-8c5d-0d7f4b6a1e11",
    "title": "React patterns",
    "url": "https://reactpatterns.com/",
    "author": "Michael Chan",
    "likes": 7,
    "userId": "123e4567-e89b-12d3-a456-426614174000",
    "createdAt": "2025-01-01T10:00:00Z",
    "updatedAt": None,
}


def db_blog_to_response(db_blog: BlogDB) -> BlogResponse:
    """
    Convert a `BlogDB` instance to `BlogResponse`.

    Parameters
    ----------
    db_blog : BlogDB
        Database blog entity.

    Returns
    -------
    BlogResponse
        Validated response model.
    """
    return BlogResponse.model_validate(db_blog, from_attributes=True)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogListResponse],
    summary="List blogs",
    description="Return every blog together with a summary of the user who created it.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": [
                        BLOG_EXAMPLE
                        | {
                            "user": {
                                "id": "123e4567-e89b-12d3-a456-426614174000",
                                "username": "mluukkai",
                                "name": "Matti Luukkainen",
                            },
                        },
                    ],
                },
            },
        },
    },
    operation_id="blogs_list",
)
async def list_blogs(service: BlogServiceDep) -> list[BlogListResponse]:
    return await service.list_blogs()


@router.get(
    "/statistics",
    response_class=ORJSONResponse,
    response_model=BlogStatistics,
    summary="Blog statistics",
    description="Total likes, favorite blog and the most prolific and most liked authors.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "totalBlogs": 1,
                        "totalLikes": 7,
                        "favoriteBlog": BLOG_EXAMPLE,
                        "mostBlogs": {"author": "Michael Chan", "blogs": 1},
                        "mostLikes": {"author": "Michael Chan", "likes": 7},
                    },
                },
            },
        },
    },
    operation_id="blogs_statistics",
)
async def blog_statistics(service: BlogServiceDep) -> BlogStatistics:
    return await service.statistics()


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a blog",
    description="Create a blog owned by the authenticated user.",
    responses={
        201: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: {
            "description": "Missing title or url",
            "content": {"application/json": {"example": {"detail": "title: Field required"}}},
        },
        401: {
            "description": "Missing or invalid token",
            "content": {"application/json": {"example": {"detail": "token missing or invalid"}}},
        },
    },
    operation_id="blogs_create",
)
async def create_blog(
    blog: Annotated[
        BlogCreate,
        Body(
            examples=[
                {
                    "title": "React patterns",
                    "author": "Michael Chan",
                    "url": "https://reactpatterns.com/",
                    "likes": 7,
                },
            ],
        ),
    ],
    ctx: AuthContextDep,
    service: BlogServiceDep,
) -> BlogResponse:
    """
    Create a new blog for the acting user.

    Parameters
    ----------
    blog : BlogCreate
        Blog input payload.
    ctx : AuthContext
        Resolved caller identity.
    service : BlogService
        Blog access controller.

    Returns
    -------
    BlogResponse
        Created blog.
    """
    return db_blog_to_response(await service.create(blog, ctx))


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Update a blog",
    description="Apply the provided fields to a blog. Fields that are omitted keep their value.",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE | {"likes": 8}}}},
        400: {
            "description": "Missing acting user",
            "content": {"application/json": {"example": {"detail": "userId missing or not valid"}}},
        },
        404: {
            "description": "Blog not found",
            "content": {"application/json": {"example": {"detail": "blog not found"}}},
        },
    },
    operation_id="blogs_update",
)
async def update_blog(
    blog_id: UUID,
    patch: Annotated[BlogUpdate, Body(examples=[{"likes": 8}])],
    ctx: AuthContextDep,
    service: BlogServiceDep,
) -> BlogResponse:
    return db_blog_to_response(await service.update(blog_id, ctx, patch))


@router.delete(
    "/{blog_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete a blog",
    description="Delete a blog. Only the user who created it may delete it.",
    responses={
        400: {
            "description": "Missing acting user",
            "content": {"application/json": {"example": {"detail": "userId missing or not valid"}}},
        },
        403: {
            "description": "Not the owner",
            "content": {
                "application/json": {"example": {"detail": "you can only delete your own blogs"}},
            },
        },
        404: {
            "description": "Blog not found",
            "content": {"application/json": {"example": {"detail": "blog not found"}}},
        },
    },
    operation_id="blogs_delete",
)
async def delete_blog(
    blog_id: UUID,
    ctx: AuthContextDep,
    service: BlogServiceDep,
) -> Response:
    await service.delete(blog_id, ctx)
    return Response(status_code=HTTP_204_NO_CONTENT)
