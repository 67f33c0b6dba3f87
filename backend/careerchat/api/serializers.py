"""
JSON payloads returned to the client.
"""
from typing import Any, Dict
from careerchat.db.models import ChatSession, Message, MessageRole
from careerchat.services.chat_service import Pagination, SessionPage


def serialize_message(msg: Message) -> Dict[str, Any]:
    return {
        'id': str(msg.id),
        'content': msg.content,
        'role': MessageRole(msg.role).to_api(),
        'timestamp': msg.created_at.isoformat(),
    }


def serialize_session(session: ChatSession, include_messages: bool = True) -> Dict[str, Any]:
    data = {
        'id': str(session.id),
        'title': session.title,
        'lastMessage': session.last_message or '',
        'timestamp': session.updated_at.isoformat(),
        'createdAt': session.created_at.isoformat(),
        'messages': [],
    }
    if include_messages:
        data['messages'] = [serialize_message(msg) for msg in session.messages.all()]
    return data


def serialize_pagination(pagination: Pagination) -> Dict[str, Any]:
    return {
        'currentPage': pagination.current_page,
        'totalPages': pagination.total_pages,
        'totalCount': pagination.total_count,
        'hasNextPage': pagination.has_next_page,
        'hasPreviousPage': pagination.has_previous_page,
    }


def serialize_session_page(page: SessionPage) -> Dict[str, Any]:
    return {
        'sessions': [serialize_session(session) for session in page.sessions],
        'pagination': serialize_pagination(page.pagination),
    }
