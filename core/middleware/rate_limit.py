"""
Rate limiting middleware.

Limits brute-force attempts against the login and customer access
endpoints, per client address, with fixed one-minute windows.
"""

import hashlib
import time
from typing import Callable, Optional, Tuple

from django.conf import settings
from django.core.cache import cache
from django.http import HttpRequest, HttpResponse

from core.metrics import rate_limited_requests_total
from core.middleware.auth import error_response


class RateLimitMiddleware:
    """
    Rate limiting middleware per client address.

    Limits (requests per window) come from the ``LOGIN_RATE_LIMIT`` and
    ``CUSTOMER_ACCESS_RATE_LIMIT`` settings and are stored in the cache.
    """

    RATE_LIMIT_WINDOW = 60  # seconds

    # (method, path) -> (setting name, default limit)
    RULES = {
        ("POST", "/api/auth/login"): ("LOGIN_RATE_LIMIT", 10),
        ("GET", "/api/customer/access"): ("CUSTOMER_ACCESS_RATE_LIMIT", 30),
    }

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def _get_limit(self, request: HttpRequest) -> Optional[int]:
        """
        Find the limit that applies to a request.

        Args:
            request: HTTP request

        Returns:
            Requests allowed per window, or None if the request is not limited
        """
        rule = self.RULES.get((request.method, request.path.rstrip("/")))
        if rule is None:
            return None
        setting_name, default = rule
        return int(getattr(settings, setting_name, default))

    def _get_client_address(self, request: HttpRequest) -> str:
        """
        Extract the client address.

        ``X-Forwarded-For`` is only honoured when ``RATE_LIMIT_TRUST_FORWARDED``
        is enabled (behind a trusted proxy).
        """
        if getattr(settings, "RATE_LIMIT_TRUST_FORWARDED", False):
            forwarded = request.META.get("HTTP_X_FORWARDED_FOR", "")
            if forwarded:
                return forwarded.split(",")[0].strip()
        return request.META.get("REMOTE_ADDR", "unknown")

    def _get_rate_limit_key(self, request: HttpRequest, client: str) -> str:
        """
        Generate cache key for rate limiting.

        Args:
            request: HTTP request
            client: Client address

        Returns:
            Cache key string
        """
        client_hash = hashlib.sha256(client.encode()).hexdigest()[:16]
        return f"rate_limit:{request.path.rstrip('/')}:{client_hash}"

    def _check_rate_limit(self, cache_key: str, limit: int) -> Tuple[bool, int, int]:
        """
        Check if request is within rate limit.

        Args:
            cache_key: Cache key of the client and endpoint
            limit: Requests allowed per window

        Returns:
            Tuple of (is_allowed, remaining, reset_time)
        """
        window_start = int(time.time() / self.RATE_LIMIT_WINDOW)
        reset_time = (window_start + 1) * self.RATE_LIMIT_WINDOW
        full_key = f"{cache_key}:{window_start}"

        if cache.get(full_key, 0) >= limit:
            return False, 0, reset_time

        # add() is a no-op when the key already exists
        cache.add(full_key, 0, timeout=self.RATE_LIMIT_WINDOW)
        try:
            new_count = cache.incr(full_key, 1)
        except ValueError:
            cache.set(full_key, 1, timeout=self.RATE_LIMIT_WINDOW)
            new_count = 1

        return True, max(0, limit - new_count), reset_time

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """
        Process request with rate limiting.

        Args:
            request: HTTP request

        Returns:
            HTTP response with rate limit headers
        """
        limit = self._get_limit(request)
        if limit is None:
            return self.get_response(request)

        cache_key = self._get_rate_limit_key(request, self._get_client_address(request))
        is_allowed, remaining, reset_time = self._check_rate_limit(cache_key, limit)

        if not is_allowed:
            rate_limited_requests_total.labels(endpoint=request.path).inc()
            response = error_response(
                "Too many requests, please try again later", "RATE_LIMIT_EXCEEDED", 429
            )
            response["Retry-After"] = str(max(0, reset_time - int(time.time())))
        else:
            response = self.get_response(request)

        response["X-RateLimit-Limit"] = str(limit)
        response["X-RateLimit-Remaining"] = str(remaining)
        response["X-RateLimit-Reset"] = str(reset_time)
        return response
