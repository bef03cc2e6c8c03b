"""User registration and listing."""

from logging import getLogger
from uuid import UUID

from app.configs import file_logger
from app.configs.settings import MAX_USERNAME_LENGTH, MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH
from app.errors.database import DuplicateEntryError
from app.errors.validation import ValidationError
from app.managers.password_manager import hash_password
from app.models import UserDB
from app.repositories.protocols import BlogStore, UserStore
from app.schemas.user import BlogSummary, UserCreate, UserWithBlogsResponse

logger = file_logger(getLogger(__name__))

DUPLICATE_USERNAME_MESSAGE = "expected `username` to be unique"


class UserService:
    """Service for user accounts and their owned blogs."""

    def __init__(self, user_repo: UserStore, blog_repo: BlogStore) -> None:
        self.user_repo = user_repo
        self.blog_repo = blog_repo

    async def register(self, user_in: UserCreate) -> UserDB:
        """
        Register a new user.

        Args:
            user_in: Registration payload

        Returns:
            UserDB: Created user with an empty blog list

        Raises:
            ValidationError: On short credentials or a taken username
        """
        username = user_in.username.strip()
        password = user_in.password.get_secret_value()

        if len(username) < MIN_USERNAME_LENGTH:
            mssg = f"username must be at least {MIN_USERNAME_LENGTH} characters long"
            raise ValidationError(mssg)
        if len(username) > MAX_USERNAME_LENGTH:
            mssg = f"username must be at most {MAX_USERNAME_LENGTH} characters long"
            raise ValidationError(mssg)
        if len(password) < MIN_PASSWORD_LENGTH:
            mssg = f"password must be at least {MIN_PASSWORD_LENGTH} characters long"
            raise ValidationError(mssg)

        if await self.user_repo.get_by_username(username):
            raise ValidationError(DUPLICATE_USERNAME_MESSAGE)

        try:
            user = await self.user_repo.create(
                user_in.model_copy(update={"username": username}),
                password_hash=await hash_password(password),
            )
        except DuplicateEntryError as e:
            # Lost a race with a concurrent registration
            raise ValidationError(DUPLICATE_USERNAME_MESSAGE) from e

        logger.info(f"Registered user {user.username}")
        return user

    async def list_users(self) -> list[UserWithBlogsResponse]:
        """Return every user with their blogs expanded."""
        users = await self.user_repo.get_all()
        result = []
        for user in users:
            blogs = await self.blog_repo.get_by_ids([UUID(blog_id) for blog_id in user.blog_ids])
            result.append(
                UserWithBlogsResponse.model_validate(user, from_attributes=True).model_copy(
                    update={
                        "blogs": [BlogSummary.model_validate(blog) for blog in blogs],
                    },
                ),
            )
        return result
