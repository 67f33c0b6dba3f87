"""
User management endpoints.
"""

import json
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods
from django.views.decorators.csrf import csrf_exempt
from pydantic import ValidationError
from careerchat.api.schemas import UpdateProfileInput
from careerchat.core.dependencies import get_request_context
from careerchat.core.logging import get_logger
from careerchat.account.services.user_service import (
    get_user_profile,
    update_user_profile,
    serialize_user,
)

logger = get_logger(__name__)

_FIELD_ERRORS = {
    "name": "Invalid name",
    "email": "Enter a valid email address",
}


def _validation_message(error: ValidationError) -> str:
    for item in error.errors():
        loc = item.get("loc") or ()
        if loc and loc[0] in _FIELD_ERRORS:
            return _FIELD_ERRORS[loc[0]]
    return "Invalid request"


@csrf_exempt
@require_http_methods(["GET", "PATCH"])
def current_user(request):
    """Get or update the current authenticated user profile."""
    ctx = get_request_context(request)
    if not ctx.is_authenticated:
        return JsonResponse({"error": "Authentication required"}, status=401)

    if request.method == "GET":
        user = get_user_profile(ctx.user_id)
        if not user:
            return JsonResponse({"error": "User not found"}, status=404)
        return JsonResponse(serialize_user(user))

    try:
        data = json.loads(request.body or "{}")
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JsonResponse({"error": "Invalid JSON"}, status=400)
    if not isinstance(data, dict):
        return JsonResponse({"error": "Invalid JSON"}, status=400)

    try:
        changes = UpdateProfileInput.model_validate(data).model_dump(exclude_unset=True)
    except ValidationError as e:
        return JsonResponse({"error": _validation_message(e)}, status=400)

    try:
        updated_user = update_user_profile(ctx.user_id, changes)
    except ValueError as e:
        return JsonResponse({"error": str(e)}, status=400)
    except Exception as e:
        logger.error(f"Error updating profile for user {ctx.user_id}: {e}", exc_info=True)
        return JsonResponse({"error": "Failed to update profile"}, status=500)

    if not updated_user:
        return JsonResponse({"error": "User not found"}, status=404)

    return JsonResponse(
        {
            "message": "Profile updated successfully",
            "user": serialize_user(updated_user),
        }
    )
