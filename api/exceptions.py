"""
API exception handlers.

This module maps domain and framework exceptions to the
failure envelope used by every endpoint.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from api.responses import failure, format_validation_errors
from core.domain.exceptions import (
    CorruptRecordError,
    DomainException,
    RecordNotFoundError,
)
from core.metrics import errors_total

logger = logging.getLogger(__name__)


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    correlation_id = _get_correlation_id(context)

    if isinstance(exc, DomainException):
        response = _handle_domain_exception(exc, context, correlation_id)
    elif isinstance(exc, APIException):
        response = _handle_api_exception(exc, context)
    elif isinstance(exc, Http404):
        response = failure("Resource not found", "NOT_FOUND", status.HTTP_404_NOT_FOUND)
    else:
        response = _handle_unexpected_exception(exc, context, correlation_id)

    if correlation_id:
        response["X-Correlation-ID"] = correlation_id
    return response


def _get_correlation_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract correlation ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "correlation_id", None)


def _endpoint(context: Dict[str, Any]) -> str:
    view = context.get("view")
    return view.__class__.__name__ if view else "unknown"


def _handle_domain_exception(
    exc: DomainException, context: Dict[str, Any], correlation_id: Optional[str]
) -> Response:
    """Handle domain-specific exceptions."""
    if isinstance(exc, CorruptRecordError):
        # Data integrity problem, not a caller error
        errors_total.labels(error_type=exc.code, endpoint=_endpoint(context)).inc()
        logger.error(
            "Corrupt record: %s",
            exc.message,
            extra={"correlation_id": correlation_id, "record_id": exc.record_id},
        )
        return failure(
            "Stored record is corrupt", exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    status_code = status.HTTP_400_BAD_REQUEST
    if isinstance(exc, RecordNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND

    logger.warning(
        "Domain exception: %s - %s", exc.code, exc.message, extra={"correlation_id": correlation_id}
    )
    return failure(exc.message, exc.code, status_code)


def _handle_api_exception(exc: APIException, context: Dict[str, Any]) -> Response:
    """Handle DRF exceptions (parse errors, method not allowed, ...)."""
    response = exception_handler(exc, context)
    if isinstance(exc, ValidationError):
        message = format_validation_errors(exc.detail)
        code = "VALIDATION_ERROR"
    else:
        message = str(exc.detail)
        code = str(exc.default_code).upper().replace("-", "_")
    wrapped = failure(message, code, response.status_code)
    for header in ("Allow", "WWW-Authenticate", "Retry-After"):
        if header in response:
            wrapped[header] = response[header]
    return wrapped


def _handle_unexpected_exception(
    exc: Exception, context: Dict[str, Any], correlation_id: Optional[str]
) -> Response:
    """Handle unexpected or untracked exceptions."""
    errors_total.labels(error_type=exc.__class__.__name__, endpoint=_endpoint(context)).inc()
    logger.error(
        "Unexpected error: %s", exc, extra={"correlation_id": correlation_id}, exc_info=True
    )
    return failure(
        "An internal error occurred", "INTERNAL_ERROR", status.HTTP_500_INTERNAL_SERVER_ERROR
    )
