"""
Production settings for ELocalPassService.
"""

import os

from .base import *  # noqa: F403, F401
from .logging import get_logging_config

DEBUG = False

ALLOWED_HOSTS = os.environ.get("ALLOWED_HOSTS", "").split(",")

# Security settings
SECURE_SSL_REDIRECT = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"

if "SECRET_KEY" not in os.environ:
    raise RuntimeError("SECRET_KEY must be set in production")

# Behind the load balancer
RATE_LIMIT_TRUST_FORWARDED = os.environ.get("RATE_LIMIT_TRUST_FORWARDED", "true").lower() == "true"

LOGGING = get_logging_config("production", log_file=os.environ.get("LOG_FILE"))
