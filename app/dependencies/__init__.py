# app/dependencies/__init__.py

from app.dependencies.dependencies import (
    AuthContextDep,
    AuthResolverDep,
    AuthServiceDep,
    BlogRepoDep,
    BlogServiceDep,
    UserRepoDep,
    UserServiceDep,
    get_auth_context,
    get_auth_resolver,
    get_auth_service,
    get_blog_repository,
    get_blog_service,
    get_user_repository,
    get_user_service,
    oauth2_scheme,
)

__all__ = [
    "AuthContextDep",
    "AuthResolverDep",
    "AuthServiceDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "UserRepoDep",
    "UserServiceDep",
    "get_auth_context",
    "get_auth_resolver",
    "get_auth_service",
    "get_blog_repository",
    "get_blog_service",
    "get_user_repository",
    "get_user_service",
    "oauth2_scheme",
]
