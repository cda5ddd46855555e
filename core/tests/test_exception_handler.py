from django.db import IntegrityError
from rest_framework import exceptions
from rest_framework.test import APIRequestFactory

from core.exception_handler import api_exception_handler
from core.exceptions import AuthError, ConflictError, NotFoundError, UnexpectedError, ValidationError

factory = APIRequestFactory()


def _context():
    return {"view": None, "request": factory.get("/")}


def test_api_errors_render_message_and_status():
    response = api_exception_handler(NotFoundError("Note not found"), _context())

    assert response.status_code == 404
    assert response.data == {"message": "Note not found"}


def test_api_error_detail_is_included():
    response = api_exception_handler(AuthError("Invalid refresh token", error="expired", status_code=403), _context())

    assert response.status_code == 403
    assert response.data == {"message": "Invalid refresh token", "error": "expired"}


def test_default_messages():
    assert api_exception_handler(ValidationError(), _context()).data == {"message": "Invalid request."}
    assert api_exception_handler(ConflictError(), _context()).status_code == 409


def test_serializer_errors_use_first_message():
    exc = exceptions.ValidationError({"title": ["Title is required"], "parentId": ["A valid integer is required."]})

    response = api_exception_handler(exc, _context())

    assert response.status_code == 400
    assert response.data["message"] == "Title is required"
    assert response.data["error"]["parentId"] == ["A valid integer is required."]


def test_drf_detail_errors_are_flattened():
    response = api_exception_handler(exceptions.NotAuthenticated(), _context())

    assert response.status_code == 401
    assert response.data == {"message": "Authentication credentials were not provided."}


def test_integrity_error_is_conflict(settings):
    settings.DEBUG = False

    response = api_exception_handler(IntegrityError("UNIQUE constraint failed"), _context())

    assert response.status_code == 409
    assert response.data == {"message": "Resource already exists"}


def test_unexpected_error_hides_detail(settings, caplog):
    settings.DEBUG = False

    response = api_exception_handler(RuntimeError("connection reset"), _context())

    assert response.status_code == 500
    assert response.data == {"message": "Internal server error"}
    assert "connection reset" in caplog.text


def test_unexpected_error_detail_in_debug(settings):
    settings.DEBUG = True

    response = api_exception_handler(RuntimeError("connection reset"), _context())

    assert response.data == {"message": "Internal server error", "error": "connection reset"}


def test_unexpected_error_renders_as_500():
    response = api_exception_handler(UnexpectedError(), _context())

    assert response.status_code == 500
    assert response.data == {"message": "Internal server error"}
