"""
API exception handlers.

This module provides custom exception handling for REST API responses.
Every error body has the form ``{"error": "<message>"}``; the machine
readable code is sent in the ``X-Error-Code`` header.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.response import Response

from core.domain.exceptions import (
    AccessTokenExpiredError,
    ActivationException,
    AuthenticationException,
    DomainException,
    NotFoundError,
    ValidationError,
)
from core.metrics import errors_total
from core.middleware.metrics import normalize_endpoint

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

# Checked in order; the first matching class wins.
_DOMAIN_STATUS = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AccessTokenExpiredError, status.HTTP_401_UNAUTHORIZED),
    (AuthenticationException, status.HTTP_401_UNAUTHORIZED),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ActivationException, status.HTTP_409_CONFLICT),
)


def error_response(
    message: str, code: str, status_code: int, trace_id: Optional[str] = None
) -> Response:
    """Build an error response in the API's error format."""
    response = Response({"error": message}, status=status_code)
    response["X-Error-Code"] = code
    if trace_id:
        response["X-Trace-ID"] = trace_id
    return response


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    response = _build_error_response(exc, _get_trace_id(context))
    request = context.get("request")
    errors_total.labels(
        error_type=response["X-Error-Code"],
        endpoint=normalize_endpoint(request.path) if request is not None else "",
    ).inc()
    return response


def _build_error_response(exc: Exception, trace_id: Optional[str]) -> Response:
    if isinstance(exc, DomainException):
        return _handle_domain_exception(exc, trace_id)

    if isinstance(exc, DRFValidationError):
        message = _first_validation_message(exc.detail)
        logger.warning("Request validation failed: %s", message, extra={"trace_id": trace_id})
        return error_response(message, "VALIDATION_ERROR", status.HTTP_400_BAD_REQUEST, trace_id)

    if isinstance(exc, APIException):
        code = str(exc.default_code).upper().replace("-", "_")
        response = error_response(str(exc.detail), code, exc.status_code, trace_id)
        wait = getattr(exc, "wait", None)
        if wait:
            response["Retry-After"] = str(int(wait))
        return response

    if isinstance(exc, Http404):
        return error_response("Resource not found", "NOT_FOUND", status.HTTP_404_NOT_FOUND, trace_id)

    return _handle_unexpected_exception(exc, trace_id)


def _get_trace_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract trace ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "trace_id", getattr(request, "correlation_id", None))


def _first_validation_message(detail: Any) -> str:
    """Flatten DRF validation details into a single message."""
    if isinstance(detail, dict):
        for field, errors in detail.items():
            message = _first_validation_message(errors)
            if field in ("non_field_errors", "detail"):
                return message
            return f"{field}: {message}"
    if isinstance(detail, list) and detail:
        return _first_validation_message(detail[0])
    return str(detail) or "Invalid request"


def _handle_domain_exception(exc: DomainException, trace_id: Optional[str]) -> Response:
    """Handle domain-specific exceptions."""
    status_code = None
    for exception_class, mapped_status in _DOMAIN_STATUS:
        if isinstance(exc, exception_class):
            status_code = mapped_status
            break

    if status_code is None:
        return _handle_unexpected_exception(exc, trace_id)

    logger.warning("Domain exception: %s - %s", exc.code, exc.message, extra={"trace_id": trace_id})
    return error_response(exc.message, exc.code, status_code, trace_id)


def _handle_unexpected_exception(exc: Exception, trace_id: Optional[str]) -> Response:
    """Handle unexpected or untracked exceptions."""
    logger.error("Unexpected error: %s", exc, extra={"trace_id": trace_id}, exc_info=True)
    return error_response(
        INTERNAL_ERROR_MESSAGE,
        "INTERNAL_ERROR",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        trace_id,
    )
