# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Settings are read at import time, so this must happen before app is imported anywhere
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_TO_FILE"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key-with-enough-length-for-hs256"
os.environ["ARGON2_MEMORY_COST"] = "1024"
os.environ["ARGON2_TIME_COST"] = "1"
os.environ["ARGON2_PARALLELISM"] = "1"

from collections.abc import AsyncGenerator, Sequence
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient

from app.dependencies import get_blog_repository, get_user_repository
from app.main import app
from app.managers.password_manager import get_password_hasher
from app.managers.token_manager import create_access_token
from app.models import BlogDB, UserDB
from app.schemas.blog import BlogCreate, BlogUpdate
from app.schemas.user import UserCreate
from app.services import AuthContext

PASSWORD = "salainen"


class FakeUserRepository:
    """In-memory user store with the surface of ``UserRepository``."""

    def __init__(self) -> None:
        self.users: dict[UUID, UserDB] = {}
        self.saves = 0

    async def create(self, user: UserCreate, password_hash: str) -> UserDB:
        db_user = UserDB(
            username=user.username,
            name=user.name,
            password_hash=password_hash,
            blog_ids=[],
        )
        self.users[db_user.uuid] = db_user
        return db_user

    async def get_by_id(self, record_id: UUID) -> UserDB | None:
        return self.users.get(record_id)

    async def get_by_username(self, username: str) -> UserDB | None:
        return next((u for u in self.users.values() if u.username == username), None)

    async def get_all(self) -> list[UserDB]:
        return list(self.users.values())

    async def save(self, user: UserDB) -> UserDB:
        self.users[user.uuid] = user
        self.saves += 1
        return user

    def add(self, username: str, name: str | None = None) -> UserDB:
        user = UserDB(
            username=username,
            name=name,
            password_hash=get_password_hasher().hash(PASSWORD),
            blog_ids=[],
        )
        self.users[user.uuid] = user
        return user


class FakeBlogRepository:
    """In-memory blog store with the surface of ``BlogRepository``."""

    def __init__(self, users: FakeUserRepository) -> None:
        self.blogs: dict[UUID, BlogDB] = {}
        self.users = users
        self._clock = datetime(2025, 1, 1, tzinfo=UTC)

    def _next_timestamp(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    async def create(self, blog: BlogCreate, user_id: UUID) -> BlogDB:
        db_blog = BlogDB(
            user_id=user_id,
            title=blog.title,
            url=blog.url,
            author=blog.author,
            likes=blog.likes,
            created_at=self._next_timestamp(),
        )
        self.blogs[db_blog.id] = db_blog
        return db_blog

    async def get_by_id(self, record_id: UUID) -> BlogDB | None:
        return self.blogs.get(record_id)

    async def get_by_ids(self, record_ids: Sequence[UUID]) -> list[BlogDB]:
        return [self.blogs[i] for i in record_ids if i in self.blogs]

    async def update(self, blog_id: UUID, blog_update: BlogUpdate) -> BlogDB | None:
        blog = self.blogs.get(blog_id)
        if blog is None:
            return None
        for key, value in blog_update.model_dump(exclude_unset=True).items():
            setattr(blog, key, value)
        blog.updated_at = self._next_timestamp()
        return blog

    async def delete(self, record_id: UUID) -> bool:
        return self.blogs.pop(record_id, None) is not None

    async def get_all_with_owner(self) -> list[tuple[BlogDB, UserDB | None]]:
        return [
            (blog, self.users.users.get(blog.user_id))
            for blog in sorted(self.blogs.values(), key=lambda b: b.created_at)
        ]

    def add(self, owner: UserDB, title: str, author: str | None = None, likes: int = 0) -> BlogDB:
        blog = BlogDB(
            user_id=owner.uuid,
            title=title,
            url=f"https://example.com/{uuid4().hex[:8]}",
            author=author,
            likes=likes,
            created_at=self._next_timestamp(),
        )
        self.blogs[blog.id] = blog
        owner.blog_ids = [*owner.blog_ids, str(blog.id)]
        return blog


@pytest.fixture
def user_repo() -> FakeUserRepository:
    """Empty in-memory user store."""
    return FakeUserRepository()


@pytest.fixture
def blog_repo(user_repo: FakeUserRepository) -> FakeBlogRepository:
    """Empty in-memory blog store sharing ``user_repo``."""
    return FakeBlogRepository(user_repo)


@pytest.fixture
def root_user(user_repo: FakeUserRepository) -> UserDB:
    """Registered user ``root``."""
    return user_repo.add("root", "Superuser")


@pytest.fixture
def other_user(user_repo: FakeUserRepository) -> UserDB:
    """Registered user ``mluukkai``."""
    return user_repo.add("mluukkai", "Matti Luukkainen")


@pytest.fixture
def root_ctx(root_user: UserDB) -> AuthContext:
    """Auth context acting as ``root``."""
    return AuthContext(user=root_user)


@pytest.fixture
def anonymous_ctx() -> AuthContext:
    """Auth context with no acting user."""
    return AuthContext()


@pytest.fixture
def root_token(root_user: UserDB) -> str:
    """Access token for ``root``."""
    return create_access_token(user_id=root_user.uuid, username=root_user.username)


@pytest.fixture
def auth_headers(root_token: str) -> dict[str, str]:
    """Authorization headers acting as ``root``."""
    return {"Authorization": f"Bearer {root_token}"}


@pytest.fixture
async def client(
    user_repo: FakeUserRepository,
    blog_repo: FakeBlogRepository,
) -> AsyncGenerator[AsyncClient]:
    """HTTP client against the app with the stores swapped for in-memory ones."""
    app.dependency_overrides[get_user_repository] = lambda: user_repo
    app.dependency_overrides[get_blog_repository] = lambda: blog_repo

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
