"""
Password hashing module using Argon2 with passlib's CryptContext.

Hashing is CPU bound, so the async helpers run it in a small thread pool to
keep the event loop responsive.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from app.configs import settings
from app.errors.password_hasher import PasswordHashingError
from app.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHasher:
    """
    A password hashing and verification manager using the Argon2id algorithm.

    Wraps passlib's CryptContext; the cost parameters come from settings so
    tests can run with cheap hashes.
    """

    def __init__(self) -> None:
        self.pwd_context = CryptContext(
            schemes=["argon2"],
            argon2__memory_cost=settings.ARGON2_MEMORY_COST,
            argon2__time_cost=settings.ARGON2_TIME_COST,
            argon2__parallelism=settings.ARGON2_PARALLELISM,
        )

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in Argon2id format

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        try:
            return self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Error hashing password")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a plaintext password against a hashed password.

        Args:
            password: The plaintext password to verify
            hashed_password: The hashed password to verify against

        Returns:
            bool: True if password matches, False otherwise
        """
        if not isinstance(hashed_password, str) or not hashed_password.strip():
            logger.warning("Invalid hash format provided")
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.exception("Stored hash is corrupted or invalid format")
            return False

    def dummy_verify(self) -> bool:
        """Spend the time of a verification without a stored hash."""
        return self.pwd_context.dummy_verify()


_default_hasher = PasswordHasher()


def get_password_hasher() -> PasswordHasher:
    """Return the process-wide password hasher instance."""
    return _default_hasher


async def hash_password(password: str) -> str:
    """
    Hash a password in the thread pool using the default hasher.

    Args:
        password: The plaintext password to hash

    Returns:
        str: The hashed password
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_password(password: str, hashed_password: str | None) -> bool:
    """
    Verify a password in the thread pool using the default hasher.

    A missing hash still costs one dummy verification so that unknown
    usernames take as long as wrong passwords.

    Args:
        password: The plaintext password to verify
        hashed_password: The hashed password to verify against, if any

    Returns:
        bool: True if password matches, False otherwise
    """
    hasher = get_password_hasher()
    if hashed_password is None:
        await get_running_loop().run_in_executor(executor, hasher.dummy_verify)
        return False
    return await get_running_loop().run_in_executor(
        executor,
        hasher.verify,
        password,
        hashed_password,
    )
