"""
Core views for health checks and system status.
"""

from asgiref.sync import async_to_sync
from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from SeverKeyService.container import get_repositories


@method_decorator(csrf_exempt, name="dispatch")
class HealthView(View):
    """Health check endpoint."""

    def get(self, _request):
        """Return service health status with per-collection record counts."""
        return JsonResponse(
            {
                "status": "healthy",
                "service": "severkey-service",
                "collections": async_to_sync(self._collection_counts)(),
            }
        )

    async def _collection_counts(self) -> dict:
        repositories = get_repositories().by_collection()
        return {name: await repository.count() for name, repository in repositories.items()}
