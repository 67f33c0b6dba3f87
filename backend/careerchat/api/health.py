"""
Health check endpoint.
"""
from django.conf import settings
from django.db import connection
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_http_methods


@require_http_methods(["GET"])
def health_check(request):
    """
    Health check endpoint for monitoring.
    Returns status of all services.
    """
    services = {}
    overall_status = "healthy"

    # Check Database
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        services["database"] = {
            "status": "healthy",
            "message": "Database connection successful"
        }
    except Exception as e:
        services["database"] = {
            "status": "unhealthy",
            "message": f"Database connection failed: {type(e).__name__}"
        }
        overall_status = "unhealthy"

    # Check chat provider configuration (no network call)
    provider = settings.CHAT_PROVIDER
    if provider == "mock":
        services["chat_provider"] = {
            "status": "degraded",
            "message": "Mock chat provider in use"
        }
    elif provider == "cohere" and settings.COHERE_API_KEY:
        services["chat_provider"] = {
            "status": "healthy",
            "message": f"Cohere configured (model {settings.COHERE_MODEL})"
        }
    else:
        services["chat_provider"] = {
            "status": "unhealthy",
            "message": "Chat provider not configured"
        }
        overall_status = "unhealthy"

    return JsonResponse(
        {
            "status": overall_status,
            "services": services,
            "timestamp": timezone.now().isoformat(),
        },
        status=200 if overall_status == "healthy" else 503,
    )
