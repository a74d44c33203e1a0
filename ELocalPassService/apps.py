"""
App configuration for the ELocalPass service.
"""

import logging
import os
import sys

from django.apps import AppConfig

logger = logging.getLogger(__name__)

# Management commands that never serve traffic
_SKIP_COMMANDS = {
    "migrate",
    "makemigrations",
    "collectstatic",
    "shell",
    "check",
}


class ELocalPassServiceConfig(AppConfig):
    """App configuration for ELocalPassService."""

    name = "ELocalPassService"
    verbose_name = "ELocalPass Service"

    def ready(self):
        """Called when Django starts."""
        # Event handlers are needed everywhere, including tests and commands
        self.register_event_handlers()

        if len(sys.argv) > 1 and sys.argv[1] in _SKIP_COMMANDS:
            return

        # RUN_MAIN is "false" in the autoreloader's watcher process
        if os.environ.get("RUN_MAIN") == "false":
            return

        if not getattr(self, "_observability_initialized", False):
            self.setup_observability()
            self._observability_initialized = True

    def setup_observability(self):
        """Setup observability after apps are ready."""
        from core.instrumentation import setup_opentelemetry

        logger.info("Setting up observability...")
        setup_opentelemetry()

    def register_event_handlers(self):
        """Register event handlers after apps are ready."""
        from core.infrastructure.event_handlers import register_event_handlers as register

        register()
