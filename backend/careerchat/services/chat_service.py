"""
Chat service layer for business logic.

Every operation takes the caller's user ID and filters by it, so a session
owned by someone else behaves exactly like a session that does not exist.
"""

import math
import uuid
from dataclasses import dataclass
from typing import List, Optional
from django.conf import settings
from django.db import transaction
from django.db.models import Prefetch
from django.utils import timezone
from careerchat.core.errors import NotFoundError
from careerchat.core.logging import get_logger
from careerchat.db.models import ChatSession, Message, MessageRole, DEFAULT_SESSION_TITLE
from careerchat.llm.client_base import HistoryMessage

logger = get_logger(__name__)

SESSION_NOT_FOUND = "Session not found"


@dataclass(frozen=True)
class Pagination:
    current_page: int
    total_pages: int
    total_count: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def build(cls, page: int, limit: int, total_count: int) -> "Pagination":
        total_pages = math.ceil(total_count / limit)
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_count=total_count,
            has_next_page=page < total_pages,
            has_previous_page=page > 1,
        )


@dataclass(frozen=True)
class SessionPage:
    sessions: List[ChatSession]
    pagination: Pagination


def _parse_session_id(session_id) -> Optional[uuid.UUID]:
    if isinstance(session_id, uuid.UUID):
        return session_id
    try:
        return uuid.UUID(str(session_id))
    except (TypeError, ValueError, AttributeError):
        return None


def _with_messages(queryset):
    return queryset.prefetch_related(
        Prefetch("messages", queryset=Message.objects.order_by("sequence"))
    )


def _owned_sessions(user_id: str):
    return ChatSession.objects.filter(user_id=user_id)


def list_sessions(user_id: str, page: int = 1, limit: Optional[int] = None) -> SessionPage:
    """
    Get one page of a user's chat sessions, most recently active first.

    Args:
        user_id: User ID
        page: 1-based page number
        limit: Page size, between 1 and SESSIONS_MAX_PAGE_SIZE

    Returns:
        SessionPage with sessions (messages prefetched in order) and
        pagination metadata
    """
    if limit is None:
        limit = settings.SESSIONS_PAGE_SIZE
    if page < 1:
        raise ValueError("page must be >= 1")
    if not 1 <= limit <= settings.SESSIONS_MAX_PAGE_SIZE:
        raise ValueError(f"limit must be between 1 and {settings.SESSIONS_MAX_PAGE_SIZE}")

    queryset = _owned_sessions(user_id)
    total_count = queryset.count()

    offset = (page - 1) * limit
    sessions = list(
        _with_messages(queryset.order_by("-updated_at", "-id"))[offset:offset + limit]
    )

    return SessionPage(
        sessions=sessions,
        pagination=Pagination.build(page, limit, total_count),
    )


def get_session(user_id: str, session_id) -> ChatSession:
    """
    Get a specific chat session with its messages.

    Args:
        user_id: User ID
        session_id: Session ID

    Returns:
        ChatSession object with messages prefetched

    Raises:
        NotFoundError: if the session does not exist or belongs to another user
    """
    parsed = _parse_session_id(session_id)
    if parsed is None:
        raise NotFoundError(SESSION_NOT_FOUND)
    try:
        return _with_messages(_owned_sessions(user_id)).get(id=parsed)
    except ChatSession.DoesNotExist:
        raise NotFoundError(SESSION_NOT_FOUND)


def create_session(user_id: str, title: Optional[str] = None) -> ChatSession:
    """
    Create a new chat session.

    Args:
        user_id: User ID
        title: Optional session title (defaults to "New Chat")

    Returns:
        Created ChatSession object
    """
    now = timezone.now()
    session = ChatSession.objects.create(
        user_id=user_id,
        title=(title or "").strip() or DEFAULT_SESSION_TITLE,
        last_message="",
        created_at=now,
        updated_at=now,
    )
    logger.debug(f"Created chat session {session.id} for user {user_id}")
    return session


def add_message(user_id: str, session_id, role, content: str) -> ChatSession:
    """
    Append a message to a chat session.

    Runs in one transaction with the session row locked: the message gets the
    next sequence number, and the session's last_message and updated_at are
    updated together with the insert.

    Args:
        user_id: User ID
        session_id: Session ID
        role: MessageRole, or "user"/"assistant"
        content: Message content

    Returns:
        Updated ChatSession with all messages

    Raises:
        NotFoundError: if the session does not exist or belongs to another user
    """
    parsed = _parse_session_id(session_id)
    if parsed is None:
        raise NotFoundError(SESSION_NOT_FOUND)
    if not isinstance(role, MessageRole):
        role = MessageRole.from_api(role)

    with transaction.atomic():
        try:
            session = _owned_sessions(user_id).select_for_update().get(id=parsed)
        except ChatSession.DoesNotExist:
            raise NotFoundError(SESSION_NOT_FOUND)

        # Wall clocks can step backwards; keep updated_at monotonic
        now = max(timezone.now(), session.updated_at)
        sequence = session.message_count + 1

        Message.objects.create(
            session=session,
            role=role,
            content=content,
            sequence=sequence,
            created_at=now,
        )

        session.message_count = sequence
        session.last_message = content
        session.updated_at = now
        session.save(update_fields=["message_count", "last_message", "updated_at"])

    logger.debug(
        f"Added message to session {parsed}: role={role.value}, sequence={sequence}"
    )
    return get_session(user_id, parsed)


def update_session_title(user_id: str, session_id, title: str) -> ChatSession:
    """
    Update the title of a chat session.

    Args:
        user_id: User ID
        session_id: Session ID
        title: New title

    Returns:
        Updated ChatSession object with messages

    Raises:
        NotFoundError: if the session does not exist or belongs to another user
    """
    parsed = _parse_session_id(session_id)
    if parsed is None:
        raise NotFoundError(SESSION_NOT_FOUND)

    updated = _owned_sessions(user_id).filter(id=parsed).update(title=title)
    if updated == 0:
        raise NotFoundError(SESSION_NOT_FOUND)

    logger.debug(f"Updated title for session {parsed} to {title!r}")
    return get_session(user_id, parsed)


def delete_session(user_id: str, session_id) -> int:
    """
    Delete a chat session and, by cascade, all of its messages.

    Args:
        user_id: User ID
        session_id: Session ID

    Returns:
        Number of messages deleted with the session

    Raises:
        NotFoundError: if the session does not exist or belongs to another user
    """
    parsed = _parse_session_id(session_id)
    if parsed is None:
        raise NotFoundError(SESSION_NOT_FOUND)

    with transaction.atomic():
        _, per_model = _owned_sessions(user_id).filter(id=parsed).delete()

    if not per_model.get(ChatSession._meta.label, 0):
        raise NotFoundError(SESSION_NOT_FOUND)

    deleted_messages = per_model.get(Message._meta.label, 0)
    logger.debug(
        f"Deleted chat session {parsed} for user {user_id} ({deleted_messages} messages)"
    )
    return deleted_messages


def get_conversation_history(user_id: str, session_id) -> List[HistoryMessage]:
    """
    Get a session's messages in the form replayed to the language model.

    Args:
        user_id: User ID
        session_id: Session ID

    Returns:
        HistoryMessage list in ascending order

    Raises:
        NotFoundError: if the session does not exist or belongs to another user
    """
    session = get_session(user_id, session_id)
    return [
        HistoryMessage(
            role=MessageRole(msg.role).to_api(),
            content=msg.content,
            timestamp=int(msg.created_at.timestamp() * 1000),
        )
        for msg in session.messages.all()
    ]
