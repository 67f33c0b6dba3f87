"""
Session and message procedures exposed through the RPC router.
"""
from careerchat.api.rpc import Router, make_rpc_view
from careerchat.api.schemas import (
    AppendMessageInput,
    CreateSessionInput,
    ListSessionsInput,
    SessionIdInput,
    UpdateSessionTitleInput,
)
from careerchat.api.serializers import serialize_session, serialize_session_page
from careerchat.services import chat_service

router = Router()


@router.query("listSessions", ListSessionsInput)
def list_sessions(user_id: str, data: ListSessionsInput):
    """Paginated sessions of the caller, most recently active first."""
    page = chat_service.list_sessions(user_id, page=data.page, limit=data.limit)
    return serialize_session_page(page)


@router.query("getSession", SessionIdInput)
def get_session(user_id: str, data: SessionIdInput):
    session = chat_service.get_session(user_id, data.session_id)
    return serialize_session(session)


@router.mutation("createSession", CreateSessionInput)
def create_session(user_id: str, data: CreateSessionInput):
    session = chat_service.create_session(user_id, data.title)
    return serialize_session(session, include_messages=False)


@router.mutation("appendMessage", AppendMessageInput)
def append_message(user_id: str, data: AppendMessageInput):
    session = chat_service.add_message(user_id, data.session_id, data.role, data.content)
    return serialize_session(session)


@router.mutation("updateSessionTitle", UpdateSessionTitleInput)
def update_session_title(user_id: str, data: UpdateSessionTitleInput):
    session = chat_service.update_session_title(user_id, data.session_id, data.title)
    return serialize_session(session)


@router.mutation("deleteSession", SessionIdInput)
def delete_session(user_id: str, data: SessionIdInput):
    deleted_messages = chat_service.delete_session(user_id, data.session_id)
    return {'success': True, 'deletedMessages': deleted_messages}


rpc_endpoint = make_rpc_view(router)
