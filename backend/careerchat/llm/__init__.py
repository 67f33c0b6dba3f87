"""
Chat completion client implementations.
"""
from django.conf import settings
from .client_base import ChatClientBase, HistoryMessage
from .mock_client import MockChatClient
from .prompts import build_chat_messages, SYSTEM_PROMPT


def get_chat_client() -> ChatClientBase:
    """Build the chat client selected by CHAT_PROVIDER."""
    provider = settings.CHAT_PROVIDER
    if provider == "mock":
        return MockChatClient()
    if provider == "cohere":
        from .cohere_client import CohereChatClient
        return CohereChatClient()
    raise ValueError(f"Unknown chat provider: {provider}")


__all__ = [
    'ChatClientBase',
    'HistoryMessage',
    'MockChatClient',
    'build_chat_messages',
    'SYSTEM_PROMPT',
    'get_chat_client',
]
