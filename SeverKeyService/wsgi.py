"""
WSGI config for SeverKeyService.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "SeverKeyService.settings.dev")

application = get_wsgi_application()
