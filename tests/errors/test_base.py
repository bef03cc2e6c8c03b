# tests/errors/test_base.py
"""Tests for app/errors/base.py module."""

from unittest.mock import MagicMock

import orjson
import pytest

from app.errors import (
    BaseAppError,
    ForbiddenError,
    RecordNotFoundError,
    UnauthorizedError,
    ValidationError,
    create_exception_handler,
)


class TestBaseAppError:
    """Tests for BaseAppError exception."""

    def test_default_values(self) -> None:
        """Test default initialization values."""
        error = BaseAppError()
        assert error.detail == "Internal Server Error"
        assert error.status_code == 500

    def test_custom_values(self) -> None:
        """Test custom initialization values."""
        error = BaseAppError(detail="Custom error", status_code=400)
        assert error.detail == "Custom error"
        assert error.status_code == 400

    def test_str_representation(self) -> None:
        """Test string representation returns message."""
        assert str(BaseAppError(detail="Test error")) == "Test error"

    @pytest.mark.parametrize(
        ("error", "status_code", "detail"),
        [
            (UnauthorizedError(), 401, "token missing or invalid"),
            (ForbiddenError("you can only delete your own blogs"), 403, "you can only delete your own blogs"),
            (RecordNotFoundError("blog not found"), 404, "blog not found"),
            (ValidationError("userId missing or not valid"), 400, "userId missing or not valid"),
        ],
    )
    def test_domain_errors(self, error: BaseAppError, status_code: int, detail: str) -> None:
        """Test that domain errors carry their HTTP status."""
        assert isinstance(error, BaseAppError)
        assert error.status_code == status_code
        assert error.detail == detail


class TestCreateExceptionHandler:
    """Tests for create_exception_handler factory function."""

    @pytest.fixture
    def request_mock(self) -> MagicMock:
        request = MagicMock()
        request.client.host = "192.168.1.1"
        request.url.path = "/api/blogs"
        return request

    @pytest.mark.asyncio
    async def test_handler_with_base_app_error(self, request_mock: MagicMock) -> None:
        """Test handler with BaseAppError exception."""
        logger = MagicMock()
        handler = create_exception_handler(logger)

        response = await handler(request_mock, BaseAppError(detail="Test error", status_code=400))

        assert response.status_code == 400
        assert response.body == b'{"detail":"Test error"}'
        logger.warning.assert_called_once_with(
            "Test error for ip: 192.168.1.1 for endpoint /api/blogs",
        )

    @pytest.mark.asyncio
    async def test_handler_includes_extra_attributes(self, request_mock: MagicMock) -> None:
        """Test that extra exception attributes are added to the body."""
        handler = create_exception_handler(MagicMock())
        errors = [{"field": "title", "message": "Field required", "type": "missing"}]

        response = await handler(request_mock, ValidationError("title: Field required", errors=errors))

        assert response.status_code == 400
        assert orjson.loads(response.body) == {"detail": "title: Field required", "errors": errors}

    @pytest.mark.asyncio
    async def test_handler_with_plain_exception(self, request_mock: MagicMock) -> None:
        """Test handler falls back to 500 for foreign exceptions."""
        handler = create_exception_handler(MagicMock())

        response = await handler(request_mock, RuntimeError("boom"))

        assert response.status_code == 500
        assert orjson.loads(response.body) == {"detail": "Internal Server Error"}
