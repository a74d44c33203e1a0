"""
Test settings for ELocalPassService.
"""

from .base import *  # noqa: F403, F401

DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost"]

# In-memory SQLite for fast tests
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Use in-memory cache for tests
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    }
}

# Password hashers for faster tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# Generous limits; rate limiting tests override them
LOGIN_RATE_LIMIT = 1000
CUSTOMER_ACCESS_RATE_LIMIT = 1000

OBSERVABILITY_ENABLED = False

# Disable logging during tests
LOGGING_CONFIG = None
