"""
Canonical response envelopes.

Every success is `{"success": true, "data": ...}` and every failure
`{"success": false, "error": "<message>", "code": "<CODE>"}`.
"""
from typing import Any

from rest_framework import status
from rest_framework.response import Response
from rest_framework.settings import api_settings


def success(data: Any, status_code: int = status.HTTP_200_OK) -> Response:
    """Wrap a payload in the success envelope."""
    return Response({"success": True, "data": data}, status=status_code)


def failure(message: str, code: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> Response:
    """Build a failure envelope."""
    return Response({"success": False, "error": message, "code": code}, status=status_code)


def validation_failure(errors: Any) -> Response:
    """Build a 400 failure envelope from serializer errors."""
    return failure(format_validation_errors(errors), "VALIDATION_ERROR")


def format_validation_errors(errors: Any) -> str:
    """
    Flatten serializer errors into one human-readable message.

    Example: {"price": ["A valid integer is required."]}
    becomes "price: A valid integer is required."
    """
    if isinstance(errors, dict):
        parts = []
        for field, detail in errors.items():
            message = format_validation_errors(detail)
            if field == api_settings.NON_FIELD_ERRORS_KEY:
                parts.append(message)
            else:
                parts.append(f"{field}: {message}")
        return "; ".join(parts)
    if isinstance(errors, (list, tuple)):
        return " ".join(format_validation_errors(item) for item in errors)
    return str(errors)
