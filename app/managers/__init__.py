from app.managers.password_manager import (
    PasswordHasher,
    get_password_hasher,
    hash_password,
    verify_password,
)
from app.managers.token_manager import (
    create_access_token,
    decode_access_token,
    get_token_expiry,
)

__all__ = [
    "PasswordHasher",
    "create_access_token",
    "decode_access_token",
    "get_password_hasher",
    "get_token_expiry",
    "hash_password",
    "verify_password",
]
