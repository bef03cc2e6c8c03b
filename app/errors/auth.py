"""Authentication and authorization errors."""

from logging import getLogger

from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN

from app.configs import file_logger
from app.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class UserAuthenticationError(BaseAppError):
    """Base class for authentication errors."""

    def __init__(
        self,
        detail: str = "Authentication failed",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class UnauthorizedError(UserAuthenticationError):
    """Raised when a request needs an acting user but the credential is absent or invalid."""

    def __init__(self, detail: str = "token missing or invalid") -> None:
        super().__init__(detail, HTTP_401_UNAUTHORIZED)


class InvalidCredentialsError(UserAuthenticationError):
    """Raised when credentials are invalid."""

    def __init__(self) -> None:
        super().__init__("invalid username or password", HTTP_401_UNAUTHORIZED)


class ForbiddenError(BaseAppError):
    """Raised when the acting user is authenticated but not permitted."""

    def __init__(self, detail: str = "you can only modify your own blogs") -> None:
        super().__init__(detail, HTTP_403_FORBIDDEN)


auth_exception_handler = create_exception_handler(logger)
