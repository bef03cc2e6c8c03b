# app/dependencies/dependencies.py

"""Application dependencies: per-request stores, caller identity and services."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_session
from app.repositories import BlogRepository, UserRepository
from app.services import AuthContext, AuthResolver, AuthService, BlogService, UserService

# A missing or malformed header resolves to no user instead of a 401
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_user_repository(session: SessionDep) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Request-scoped database session.

    Returns
    -------
    UserRepository
        Repository bound to the request session.
    """
    return UserRepository(session)


def get_blog_repository(session: SessionDep) -> BlogRepository:
    """Resolve the `BlogRepository` dependency."""
    return BlogRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


def get_auth_resolver(user_repo: UserRepoDep) -> AuthResolver:
    return AuthResolver(user_repo)


AuthResolverDep = Annotated[AuthResolver, Depends(get_auth_resolver)]


async def get_auth_context(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    resolver: AuthResolverDep,
) -> AuthContext:
    """
    Resolve the acting user for the current request.

    Parameters
    ----------
    token : str | None
        Bearer token from the ``Authorization`` header, if any.
    resolver : AuthResolver
        Credential resolver.

    Returns
    -------
    AuthContext
        Context whose ``user`` is ``None`` for absent or invalid credentials.
    """
    return await resolver.context(token)


AuthContextDep = Annotated[AuthContext, Depends(get_auth_context)]


def get_blog_service(blog_repo: BlogRepoDep, user_repo: UserRepoDep) -> BlogService:
    return BlogService(blog_repo, user_repo)


def get_user_service(user_repo: UserRepoDep, blog_repo: BlogRepoDep) -> UserService:
    return UserService(user_repo, blog_repo)


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    return AuthService(user_repo)


BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
