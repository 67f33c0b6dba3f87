"""
Cohere chat client implementation.
"""
from typing import Optional, Sequence
from django.conf import settings
import cohere
from careerchat.core.errors import UpstreamServiceError
from careerchat.core.logging import get_logger
from careerchat.core.security import mask_secret
from .client_base import ChatClientBase, HistoryMessage
from .prompts import build_chat_messages

logger = get_logger(__name__)


class CohereChatClient(ChatClientBase):
    """Cohere chat client."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize Cohere chat client.

        Args:
            api_key: Cohere API key (defaults to COHERE_API_KEY setting)
            model_name: Model name (defaults to COHERE_MODEL setting)
            timeout: Request timeout in seconds (defaults to CHAT_TIMEOUT_SECONDS)
        """
        self._api_key = api_key or settings.COHERE_API_KEY
        if not self._api_key:
            raise ValueError("COHERE_API_KEY environment variable is required")

        self._model_name = model_name or settings.COHERE_MODEL
        self._timeout = timeout or settings.CHAT_TIMEOUT_SECONDS
        self._temperature = settings.CHAT_TEMPERATURE
        self._max_tokens = settings.CHAT_MAX_TOKENS
        self._history_limit = settings.CHAT_HISTORY_LIMIT

        self._client = cohere.ClientV2(api_key=self._api_key, timeout=self._timeout)
        logger.debug(
            f"Cohere client ready: model={self._model_name}, key={mask_secret(self._api_key)}"
        )

    @property
    def model_name(self) -> str:
        return self._model_name

    def generate_reply(
        self,
        user_message: str,
        session_id: str,
        history: Sequence[HistoryMessage],
    ) -> str:
        """
        Generate a reply using the Cohere chat API.
        """
        messages = build_chat_messages(
            user_message, history, history_limit=self._history_limit
        )

        try:
            response = self._client.chat(
                model=self._model_name,
                messages=messages,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except Exception as e:
            logger.error(
                f"Cohere chat call failed for session {session_id}: {type(e).__name__}: {e}",
                exc_info=True,
            )
            raise UpstreamServiceError() from e

        reply = self._extract_text(response)
        if not reply:
            logger.error(f"Cohere returned an empty or malformed response for session {session_id}")
            raise UpstreamServiceError()

        logger.debug(f"Generated reply for session {session_id} ({len(reply)} chars)")
        return reply

    @staticmethod
    def _extract_text(response) -> str:
        message = getattr(response, "message", None)
        content = getattr(message, "content", None) or []
        parts = [getattr(item, "text", None) for item in content]
        return "".join(part for part in parts if part).strip()
