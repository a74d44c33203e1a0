"""
ASGI config for ELocalPassService project.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "ELocalPassService.settings.dev")

application = get_asgi_application()
