"""
Request logging middleware.

Every request gets a correlation ID (taken from ``X-Correlation-ID`` when
the caller sends one) and a structured completion log line carrying the
trace context, the signed-in account and the ``X-Error-Code`` of failed
responses. Health probes are logged at DEBUG so they do not drown the
access log.
"""

import logging
import time
import uuid
from typing import Callable, Dict, Optional

from django.http import HttpRequest, HttpResponse
from opentelemetry import trace
from opentelemetry.trace import format_span_id, format_trace_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
PROBE_PATHS = ("/health/", "/ready/")


def _trace_context() -> Dict[str, str]:
    span_context = trace.get_current_span().get_span_context()
    if not span_context.is_valid:
        return {}
    return {
        "trace_id": format_trace_id(span_context.trace_id),
        "span_id": format_span_id(span_context.span_id),
    }


def _outcome(status_code: int) -> str:
    if status_code >= 500:
        return "server_error"
    if status_code >= 400:
        return "client_error"
    return "success"


class ObservabilityMiddleware:
    """Attach a correlation ID to each request and log how it ended."""

    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.correlation_id = correlation_id  # type: ignore
        context = {
            "correlation_id": correlation_id,
            "method": request.method,
            # query strings are left out; customer tokens travel there
            "path": request.path,
            **_trace_context(),
        }
        started = time.perf_counter()
        logger.debug("Request started", extra=context)

        try:
            response = self.get_response(request)
        except Exception as e:
            logger.error(
                "Request failed",
                extra={
                    **context,
                    "request_status": "exception",
                    "error_type": type(e).__name__,
                    "duration_ms": self._elapsed_ms(started),
                },
                exc_info=True,
            )
            raise

        outcome = _outcome(response.status_code)
        duration_ms = self._elapsed_ms(started)
        extra = {
            **context,
            "request_status": outcome,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
            "remote_addr": request.META.get("REMOTE_ADDR"),
        }
        account = getattr(request, "account", None)
        if account is not None:
            extra["account_id"] = str(account.id)
            extra["account_role"] = account.role
        error_code: Optional[str] = response.get("X-Error-Code")
        if error_code:
            extra["error_code"] = error_code

        logger.log(self._level(request.path, response.status_code), "Request completed", extra=extra)

        response[CORRELATION_HEADER] = correlation_id
        response["X-Request-Status"] = outcome
        response["X-Request-Duration"] = f"{duration_ms / 1000:.3f}"
        if "trace_id" in context:
            response["X-Trace-ID"] = context["trace_id"]
        return response

    @staticmethod
    def _elapsed_ms(started: float) -> float:
        return round((time.perf_counter() - started) * 1000, 2)

    @staticmethod
    def _level(path: str, status_code: int) -> int:
        if status_code >= 500:
            return logging.ERROR
        if status_code >= 400:
            return logging.WARNING
        if path.startswith(PROBE_PATHS):
            return logging.DEBUG
        return logging.INFO
