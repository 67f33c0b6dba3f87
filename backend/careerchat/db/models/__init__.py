from .session import ChatSession, DEFAULT_SESSION_TITLE
from .message import Message, MessageRole

__all__ = ['ChatSession', 'DEFAULT_SESSION_TITLE', 'Message', 'MessageRole']
