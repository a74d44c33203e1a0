"""
Liveness and readiness probes.

``/health/`` only proves the process answers; the dependency probes and
``/ready/`` touch the database and the rate-limit cache.
"""

import logging

from django.core.cache import cache
from django.db import connection
from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

logger = logging.getLogger(__name__)

SERVICE_NAME = "elocalpass-service"
_PROBE_KEY = "elocalpass:probe"


def check_database() -> bool:
    """Run a trivial query on the default connection."""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        return True
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.warning("Database probe failed: %s", e)
        return False


def check_cache() -> bool:
    """Write and read back a short-lived cache key."""
    try:
        cache.set(_PROBE_KEY, SERVICE_NAME, 10)
        return cache.get(_PROBE_KEY) == SERVICE_NAME
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.warning("Cache probe failed: %s", e)
        return False


@method_decorator(csrf_exempt, name="dispatch")
class HealthView(View):
    """Liveness probe."""

    def get(self, _request):
        return JsonResponse({"status": "healthy", "service": SERVICE_NAME})


@method_decorator(csrf_exempt, name="dispatch")
class DependencyProbeView(View):
    """Report a single dependency as connected or not (503)."""

    dependency = ""

    def probe(self) -> bool:
        raise NotImplementedError

    def get(self, _request):
        if self.probe():
            return JsonResponse({"status": "healthy", self.dependency: "connected"})
        return JsonResponse({"status": "unhealthy", self.dependency: "disconnected"}, status=503)


class HealthDBView(DependencyProbeView):
    dependency = "database"

    def probe(self) -> bool:
        return check_database()


class HealthCacheView(DependencyProbeView):
    dependency = "cache"

    def probe(self) -> bool:
        return check_cache()


@method_decorator(csrf_exempt, name="dispatch")
class ReadyView(View):
    """Readiness probe: every dependency must answer."""

    def get(self, _request):
        checks = {"database": check_database(), "cache": check_cache()}
        ready = all(checks.values())
        if not ready:
            logger.warning("Service not ready", extra={"checks": checks})
        return JsonResponse(
            {"status": "ready" if ready else "not_ready", "checks": checks},
            status=200 if ready else 503,
        )
