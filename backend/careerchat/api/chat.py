"""
Chat completion endpoint.

Reads the session history, asks the hosted model for a reply and returns it.
Nothing is persisted here: the client records both the user message and the
reply through the appendMessage procedure.
"""
import json
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods
from django.views.decorators.csrf import csrf_exempt
from pydantic import ValidationError
from careerchat.api.schemas import ChatRequest
from careerchat.core.dependencies import get_request_context
from careerchat.core.errors import NotFoundError, UpstreamServiceError
from careerchat.core.logging import get_logger
from careerchat.llm import get_chat_client
from careerchat.services.chat_service import get_conversation_history

logger = get_logger(__name__)

_FIELD_ERRORS = {
    'message': "Message is required",
    'sessionId': "Session ID is required",
}


def _validation_message(error: ValidationError) -> str:
    for item in error.errors():
        loc = item.get('loc') or ()
        if loc and loc[0] in _FIELD_ERRORS:
            return _FIELD_ERRORS[loc[0]]
    return "Invalid request"


@csrf_exempt
@require_http_methods(["POST"])
def chat(request):
    """
    Generate an assistant reply for a message in one of the caller's sessions.

    REQUEST BODY:
    {
        "message": "How do I get into backend development?",
        "sessionId": "session-id"
    }

    RESPONSE:
    {
        "reply": "Great choice! ..."
    }
    """
    ctx = get_request_context(request)
    if not ctx.is_authenticated:
        return JsonResponse({'error': 'Authentication required'}, status=401)

    try:
        body = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JsonResponse({'error': 'Invalid JSON format'}, status=400)
    if not isinstance(body, dict):
        return JsonResponse({'error': 'Invalid JSON format'}, status=400)

    try:
        data = ChatRequest.model_validate(body)
    except ValidationError as e:
        return JsonResponse({'error': _validation_message(e)}, status=400)

    try:
        history = get_conversation_history(ctx.user_id, data.session_id)
        logger.info(
            f"Retrieved {len(history)} messages from database for session {data.session_id}"
        )
        client = get_chat_client()
        reply = client.generate_reply(data.message, data.session_id, history)
    except NotFoundError:
        return JsonResponse({'error': 'Session not found'}, status=404)
    except UpstreamServiceError as e:
        return JsonResponse({'error': e.message}, status=e.status_code)
    except Exception as e:
        logger.error(f"Error processing chat request: {e}", exc_info=True)
        return JsonResponse({'error': UpstreamServiceError().message}, status=500)

    return JsonResponse({'reply': reply})
