# app/routes/user.py

"""
User Routes.

Provides registration and listing of user accounts.

Summary
-------
Endpoints include:
  - Create user
  - Get all users (with their blogs expanded)

Dependencies
------------
  - `UserServiceDep`: Registration and listing service bound to the request's stores.
"""

from typing import Annotated

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from app.dependencies import UserServiceDep
from app.schemas import UserCreate, UserResponse, UserWithBlogsResponse

router = APIRouter(prefix="/api/users", tags=["👤 Users"])


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new user",
    description="Register a user account. Username and password need at least 3 characters.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "id": "123e4567-e89b-12d3-a456-426614174000",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                        "blogIds": [],
                    },
                },
            },
        },
        400: {
            "description": "Bad request",
            "content": {
                "application/json": {"example": {"detail": "expected `username` to be unique"}},
            },
        },
    },
    operation_id="users_create",
)
async def create_user(
    user: Annotated[
        UserCreate,
        Body(
            examples=[
                {"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"},
            ],
        ),
    ],
    service: UserServiceDep,
) -> UserResponse:
    """
    Create a new user and return the safe response model.

    Parameters
    ----------
    user : UserCreate
        User input payload.
    service : UserService
        User service dependency.

    Returns
    -------
    UserResponse
        Created user (without password).
    """
    return UserResponse.model_validate(await service.register(user), from_attributes=True)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserWithBlogsResponse],
    summary="List users",
    description="Return every user with the blogs they created.",
    operation_id="users_list",
)
async def list_users(service: UserServiceDep) -> list[UserWithBlogsResponse]:
    return await service.list_users()
