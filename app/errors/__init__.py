from app.errors.auth import (
    ForbiddenError,
    InvalidCredentialsError,
    UnauthorizedError,
    UserAuthenticationError,
    auth_exception_handler,
)
from app.errors.base import BaseAppError, create_exception_handler
from app.errors.database import (
    DatabaseError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)
from app.errors.password_hasher import (
    PasswordHashingError,
    password_hashing_exception_handler,
)
from app.errors.validation import (
    ValidationError,
    app_validation_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "BaseAppError",
    "create_exception_handler",
    "UserAuthenticationError",
    "UnauthorizedError",
    "InvalidCredentialsError",
    "ForbiddenError",
    "auth_exception_handler",
    "DatabaseError",
    "DuplicateEntryError",
    "RecordNotFoundError",
    "database_exception_handler",
    "PasswordHashingError",
    "password_hashing_exception_handler",
    "ValidationError",
    "validation_exception_handler",
    "app_validation_exception_handler",
]
