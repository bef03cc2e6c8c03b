from app.configs.settings import (
    MISSING_USER_MESSAGE,
    file_logger,
    settings,
)

__all__ = [
    "MISSING_USER_MESSAGE",
    "file_logger",
    "settings",
]
