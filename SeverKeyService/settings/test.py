"""
Test settings for SeverKeyService.
"""

from .base import *  # noqa: F403, F401

DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost"]

STORE_SETTINGS = {
    "DEFAULT_PAGE_SIZE": 20,
    "MAX_PAGE_SIZE": 100,
    "COMPACTION_RATIO": 0.5,
}

OTEL_ENABLED = False

# Leave logging to pytest's capture
LOGGING_CONFIG = None
