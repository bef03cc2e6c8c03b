"""Authentication routes for handling user login."""

from typing import Annotated

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse

from app.dependencies import AuthServiceDep
from app.schemas.auth import LoginRequest, Token

router = APIRouter(prefix="/api/login", tags=["🔐 Auth"])


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=Token,
    summary="Login for access token",
    description="Authenticate with username and password to obtain a bearer token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "token_type": "bearer",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                    },
                },
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {"example": {"detail": "invalid username or password"}},
            },
        },
    },
    operation_id="auth_login",
)
async def login(
    credentials: Annotated[
        LoginRequest,
        Body(examples=[{"username": "mluukkai", "password": "salainen"}]),
    ],
    auth_service: AuthServiceDep,
) -> Token:
    """
    Login and obtain an access token.

    Parameters
    ----------
    credentials : LoginRequest
        Username and password.
    auth_service : AuthService
        Authentication service.

    Returns
    -------
    Token
        Bearer token plus the user's public identity.
    """
    return await auth_service.login(credentials)
