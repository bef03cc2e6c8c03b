"""Tests for app/errors/validation.py helpers."""

from unittest.mock import MagicMock

import orjson
import pytest
from fastapi.exceptions import RequestValidationError

from app.errors.validation import format_errors, summarize_errors, validation_exception_handler


class TestFormatErrors:
    def test_strips_body_prefix(self) -> None:
        raw = [{"loc": ("body", "title"), "msg": "Field required", "type": "missing"}]

        assert format_errors(raw) == [{"field": "title", "message": "Field required", "type": "missing"}]

    def test_keeps_location_when_asked(self) -> None:
        raw = [{"loc": ("body", "title"), "msg": "Field required", "type": "missing"}]

        assert format_errors(raw, skip_body=False)[0]["field"] == "body.title"

    def test_stringifies_exception_context(self) -> None:
        raw = [
            {
                "loc": ("title",),
                "msg": "Value error, title must not be empty",
                "type": "value_error",
                "ctx": {"error": ValueError("title must not be empty")},
            },
        ]

        assert format_errors(raw)[0]["context"] == {"error": "title must not be empty"}


class TestSummarizeErrors:
    def test_joins_field_messages(self) -> None:
        errors = [
            {"field": "title", "message": "Field required"},
            {"field": "url", "message": "Field required"},
        ]

        assert summarize_errors(errors) == "title: Field required; url: Field required"

    def test_empty_list(self) -> None:
        assert summarize_errors([]) == "Validation failed"


class TestValidationExceptionHandler:
    @pytest.mark.asyncio
    async def test_returns_400_with_errors(self) -> None:
        request = MagicMock()
        request.client.host = "127.0.0.1"
        request.url.path = "/api/blogs"
        exc = RequestValidationError(
            [{"loc": ("body", "url"), "msg": "Field required", "type": "missing"}],
        )

        response = await validation_exception_handler(request, exc)

        assert response.status_code == 400
        body = orjson.loads(response.body)
        assert body["detail"] == "url: Field required"
        assert body["errors"][0]["field"] == "url"
