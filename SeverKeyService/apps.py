"""
App configuration for the SeverKey service.
"""

import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class SeverKeyServiceConfig(AppConfig):
    """
    App configuration for SeverKeyService.

    Owns the process-wide entity repositories: they are created
    empty when Django starts and are only replaced on restart.
    """

    name = "SeverKeyService"
    verbose_name = "SeverKey Service"

    repositories = None

    def ready(self):
        """Called when Django starts."""
        from SeverKeyService.container import build_repositories

        self.repositories = build_repositories()
        logger.info(
            "Entity collections initialised",
            extra={"collections": sorted(self.repositories.by_collection())},
        )

        if getattr(settings, "OTEL_ENABLED", False):
            self.setup_observability()

    def setup_observability(self):
        """Setup tracing and metrics export after apps are ready."""
        from core.instrumentation import setup_opentelemetry

        try:
            setup_opentelemetry()
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning(f"Failed to setup OpenTelemetry: {e}")
