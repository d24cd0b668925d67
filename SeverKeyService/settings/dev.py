"""
Development settings for SeverKeyService.
"""

from .base import *  # noqa: F403, F401

DEBUG = True

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "0.0.0.0"]

# Smaller pages make cursor handling visible while developing the dashboard
STORE_SETTINGS["DEFAULT_PAGE_SIZE"] = 10  # noqa: F405
