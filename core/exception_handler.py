import logging

from django.conf import settings
from django.db import IntegrityError
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.views import exception_handler

from .exceptions import ApiError, ConflictError, UnexpectedError

logger = logging.getLogger(__name__)


def _first_message(detail):
    if isinstance(detail, dict):
        for value in detail.values():
            message = _first_message(value)
            if message:
                return message
        return ""
    if isinstance(detail, (list, tuple)):
        for value in detail:
            message = _first_message(value)
            if message:
                return message
        return ""
    return str(detail)


def _view_name(context):
    view = context.get("view") if context else None
    return view.__class__.__name__ if view is not None else "unknown view"


def api_exception_handler(exc, context):
    """
    Render every API error as ``{"message": ..., "error": ...}``.

    Known API exceptions keep their status code; store integrity failures
    become 409; anything else is logged and reported as a bare 500.
    """
    if isinstance(exc, IntegrityError):
        logger.warning("Integrity error in %s: %s", _view_name(context), exc)
        exc = ConflictError("Resource already exists", error=str(exc) if settings.DEBUG else None)

    response = exception_handler(exc, context)

    if response is None:
        logger.exception("Unhandled error in %s", _view_name(context), exc_info=exc)
        exc = UnexpectedError(error=str(exc) if settings.DEBUG else None)
        response = exception_handler(exc, context)

    if isinstance(exc, ApiError):
        body = {"message": str(exc.detail)}
        if exc.error is not None:
            body["error"] = exc.error
    elif isinstance(exc, DRFValidationError):
        body = {"message": _first_message(response.data) or "Invalid request.", "error": response.data}
    else:
        data = response.data
        if isinstance(data, dict) and "detail" in data:
            body = {"message": str(data["detail"])}
            if "code" in data:
                body["error"] = data["code"]
        else:
            body = {"message": _first_message(data)}

    response.data = body
    return response
