"""Authentication services: per-request acting user resolution and login."""

from dataclasses import dataclass
from logging import getLogger

from app.configs import file_logger
from app.errors.auth import InvalidCredentialsError
from app.managers.password_manager import verify_password
from app.managers.token_manager import create_access_token, decode_access_token
from app.models import UserDB
from app.repositories.protocols import UserStore
from app.schemas.auth import LoginRequest, Token

logger = file_logger(getLogger(__name__))


@dataclass(frozen=True)
class AuthContext:
    """
    The resolved identity of the caller for one request.

    ``user`` is ``None`` when no credential was sent or it failed
    verification; each operation decides whether that is acceptable.
    """

    user: UserDB | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None


class AuthResolver:
    """Turn a bearer credential into the acting user, or nothing."""

    def __init__(self, user_repo: UserStore) -> None:
        self.user_repo = user_repo

    async def resolve(self, credential: str | None) -> UserDB | None:
        """
        Resolve the acting user for a bearer credential.

        Args:
            credential: Raw bearer token, or None when the header is absent

        Returns:
            UserDB | None: The fully loaded user, or None when the credential is
            absent, invalid, expired, or names a user that no longer exists
        """
        if not credential:
            return None

        token_data = decode_access_token(credential)
        if not token_data:
            logger.info("Rejected bearer credential that failed verification")
            return None

        user = await self.user_repo.get_by_id(token_data.user_id)
        if not user:
            logger.info(f"Token subject {token_data.user_id} does not exist")
        return user

    async def context(self, credential: str | None) -> AuthContext:
        """Resolve ``credential`` and wrap the result in an ``AuthContext``."""
        return AuthContext(user=await self.resolve(credential))


class AuthService:
    """Service for password login and token issuance."""

    def __init__(self, user_repo: UserStore) -> None:
        self.user_repo = user_repo

    async def authenticate_user(self, username: str, password: str) -> UserDB:
        """
        Authenticate a user by username and password.

        Raises:
            InvalidCredentialsError: If the username is unknown or the password is wrong
        """
        user = await self.user_repo.get_by_username(username)
        password_hash = user.password_hash if user else None
        if not await verify_password(password, password_hash) or not user:
            raise InvalidCredentialsError
        return user

    def create_token_for_user(self, user: UserDB) -> Token:
        """Issue an access token for ``user``."""
        return Token(
            token=create_access_token(user_id=user.uuid, username=user.username),
            username=user.username,
            name=user.name,
        )

    async def login(self, credentials: LoginRequest) -> Token:
        """Authenticate ``credentials`` and return a fresh token."""
        user = await self.authenticate_user(
            credentials.username,
            credentials.password.get_secret_value(),
        )
        logger.info(f"User {user.username} logged in")
        return self.create_token_for_user(user)
