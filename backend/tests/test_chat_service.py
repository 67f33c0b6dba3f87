"""
Tests for the chat session service.
"""

import uuid
from datetime import timedelta
from unittest.mock import patch
from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from careerchat.core.errors import NotFoundError
from careerchat.db.models import ChatSession, Message, MessageRole
from careerchat.services import chat_service
from careerchat.services.chat_service import Pagination
from auth_helpers import StepClock

User = get_user_model()


class ChatServiceTestCase(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(id="user_a", email="a@example.com", name="Alice")
        self.other = User.objects.create_user(id="user_b", email="b@example.com", name="Bob")
        clock_patcher = patch("django.utils.timezone.now", StepClock())
        clock_patcher.start()
        self.addCleanup(clock_patcher.stop)


class TestPagination(TestCase):
    def test_empty_result(self):
        pagination = Pagination.build(page=1, limit=7, total_count=0)
        self.assertEqual(pagination.total_pages, 0)
        self.assertFalse(pagination.has_next_page)
        self.assertFalse(pagination.has_previous_page)

    def test_partial_last_page(self):
        pagination = Pagination.build(page=2, limit=7, total_count=9)
        self.assertEqual(pagination.total_pages, 2)
        self.assertFalse(pagination.has_next_page)
        self.assertTrue(pagination.has_previous_page)

    def test_page_beyond_end(self):
        pagination = Pagination.build(page=5, limit=7, total_count=9)
        self.assertEqual(pagination.current_page, 5)
        self.assertFalse(pagination.has_next_page)
        self.assertTrue(pagination.has_previous_page)


class TestCreateSession(ChatServiceTestCase):
    def test_default_title(self):
        session = chat_service.create_session(self.user.id)
        self.assertEqual(session.title, "New Chat")
        self.assertEqual(session.last_message, "")
        self.assertEqual(session.message_count, 0)
        self.assertEqual(session.created_at, session.updated_at)

    def test_blank_title_falls_back_to_default(self):
        session = chat_service.create_session(self.user.id, "   ")
        self.assertEqual(session.title, "New Chat")

    def test_title_is_stripped(self):
        session = chat_service.create_session(self.user.id, "  Interview prep  ")
        self.assertEqual(session.title, "Interview prep")


class TestListSessions(ChatServiceTestCase):
    def test_most_recent_first(self):
        first = chat_service.create_session(self.user.id, "first")
        second = chat_service.create_session(self.user.id, "second")
        third = chat_service.create_session(self.user.id, "third")

        page = chat_service.list_sessions(self.user.id)
        self.assertEqual([s.id for s in page.sessions], [third.id, second.id, first.id])

        # Activity moves a session to the top
        chat_service.add_message(self.user.id, first.id, "user", "hello")
        page = chat_service.list_sessions(self.user.id)
        self.assertEqual([s.id for s in page.sessions], [first.id, third.id, second.id])

    def test_pagination(self):
        for i in range(9):
            chat_service.create_session(self.user.id, f"session {i}")

        first_page = chat_service.list_sessions(self.user.id, page=1, limit=7)
        self.assertEqual(len(first_page.sessions), 7)
        self.assertEqual(first_page.pagination.total_count, 9)
        self.assertEqual(first_page.pagination.total_pages, 2)
        self.assertTrue(first_page.pagination.has_next_page)
        self.assertFalse(first_page.pagination.has_previous_page)

        second_page = chat_service.list_sessions(self.user.id, page=2, limit=7)
        self.assertEqual(len(second_page.sessions), 2)
        self.assertFalse(second_page.pagination.has_next_page)
        self.assertTrue(second_page.pagination.has_previous_page)

        seen = {s.id for s in first_page.sessions} | {s.id for s in second_page.sessions}
        self.assertEqual(len(seen), 9)

    def test_page_beyond_end_is_empty(self):
        chat_service.create_session(self.user.id)
        page = chat_service.list_sessions(self.user.id, page=3, limit=7)
        self.assertEqual(page.sessions, [])
        self.assertEqual(page.pagination.total_count, 1)

    @override_settings(SESSIONS_PAGE_SIZE=2)
    def test_default_limit_from_settings(self):
        for _ in range(3):
            chat_service.create_session(self.user.id)
        page = chat_service.list_sessions(self.user.id)
        self.assertEqual(len(page.sessions), 2)
        self.assertEqual(page.pagination.total_pages, 2)

    def test_only_own_sessions(self):
        mine = chat_service.create_session(self.user.id)
        chat_service.create_session(self.other.id)

        page = chat_service.list_sessions(self.user.id)
        self.assertEqual([s.id for s in page.sessions], [mine.id])
        self.assertEqual(page.pagination.total_count, 1)

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            chat_service.list_sessions(self.user.id, page=0)
        with self.assertRaises(ValueError):
            chat_service.list_sessions(self.user.id, limit=0)
        with self.assertRaises(ValueError):
            chat_service.list_sessions(self.user.id, limit=51)


class TestAddMessage(ChatServiceTestCase):
    def test_append_updates_session(self):
        session = chat_service.create_session(self.user.id)
        previous_updated_at = session.updated_at

        contents = ["How do I start in data science?", "Learn Python and statistics.", "Thanks!"]
        roles = ["user", "assistant", "user"]
        for role, content in zip(roles, contents):
            updated = chat_service.add_message(self.user.id, session.id, role, content)
            self.assertEqual(updated.last_message, content)
            self.assertGreaterEqual(updated.updated_at, previous_updated_at)
            previous_updated_at = updated.updated_at

        messages = list(updated.messages.all())
        self.assertEqual([m.content for m in messages], contents)
        self.assertEqual([m.sequence for m in messages], [1, 2, 3])
        self.assertEqual(
            [m.role for m in messages],
            [MessageRole.USER, MessageRole.ASSISTANT, MessageRole.USER],
        )
        self.assertEqual(updated.message_count, 3)

    def test_messages_ascending_by_creation(self):
        session = chat_service.create_session(self.user.id)
        for i in range(5):
            chat_service.add_message(self.user.id, session.id, "user", f"message {i}")

        fetched = chat_service.get_session(self.user.id, session.id)
        created = [m.created_at for m in fetched.messages.all()]
        self.assertEqual(created, sorted(created))

    def test_updated_at_never_moves_backwards(self):
        session = chat_service.create_session(self.user.id)
        future = session.updated_at + timedelta(hours=1)
        ChatSession.objects.filter(id=session.id).update(updated_at=future)

        updated = chat_service.add_message(self.user.id, session.id, "user", "hi")
        self.assertGreaterEqual(updated.updated_at, future)

    def test_accepts_message_role(self):
        session = chat_service.create_session(self.user.id)
        updated = chat_service.add_message(self.user.id, session.id, MessageRole.ASSISTANT, "Hello")
        self.assertEqual(updated.messages.get().role, MessageRole.ASSISTANT)

    def test_other_users_session_is_not_found(self):
        session = chat_service.create_session(self.other.id)

        with self.assertRaises(NotFoundError):
            chat_service.add_message(self.user.id, session.id, "user", "sneaky")

        self.assertEqual(Message.objects.count(), 0)
        session.refresh_from_db()
        self.assertEqual(session.last_message, "")

    def test_unknown_session(self):
        with self.assertRaises(NotFoundError):
            chat_service.add_message(self.user.id, uuid.uuid4(), "user", "hi")
        with self.assertRaises(NotFoundError):
            chat_service.add_message(self.user.id, "not-a-uuid", "user", "hi")


class TestGetSession(ChatServiceTestCase):
    def test_malformed_id_is_not_found(self):
        with self.assertRaises(NotFoundError) as cm:
            chat_service.get_session(self.user.id, "definitely-not-a-uuid")
        self.assertEqual(cm.exception.message, "Session not found")

    def test_other_users_session_is_not_found(self):
        session = chat_service.create_session(self.other.id)
        with self.assertRaises(NotFoundError):
            chat_service.get_session(self.user.id, session.id)

    def test_accepts_string_id(self):
        session = chat_service.create_session(self.user.id)
        fetched = chat_service.get_session(self.user.id, str(session.id))
        self.assertEqual(fetched.id, session.id)


class TestUpdateSessionTitle(ChatServiceTestCase):
    def test_rename(self):
        session = chat_service.create_session(self.user.id)
        chat_service.add_message(self.user.id, session.id, "user", "hello")

        renamed = chat_service.update_session_title(self.user.id, session.id, "Resume review")
        self.assertEqual(renamed.title, "Resume review")
        self.assertEqual(renamed.messages.count(), 1)

    def test_rename_does_not_touch_activity(self):
        session = chat_service.create_session(self.user.id)
        renamed = chat_service.update_session_title(self.user.id, session.id, "Renamed")
        self.assertEqual(renamed.updated_at, session.updated_at)

    def test_other_users_session_is_not_found(self):
        session = chat_service.create_session(self.other.id, "Bob's chat")
        with self.assertRaises(NotFoundError):
            chat_service.update_session_title(self.user.id, session.id, "Mine now")
        session.refresh_from_db()
        self.assertEqual(session.title, "Bob's chat")


class TestDeleteSession(ChatServiceTestCase):
    def test_delete_removes_messages(self):
        session = chat_service.create_session(self.user.id)
        keep = chat_service.create_session(self.user.id)
        for i in range(3):
            chat_service.add_message(self.user.id, session.id, "user", f"m{i}")
        chat_service.add_message(self.user.id, keep.id, "user", "stay")

        deleted = chat_service.delete_session(self.user.id, session.id)

        self.assertEqual(deleted, 3)
        self.assertEqual(Message.objects.count(), 1)
        with self.assertRaises(NotFoundError):
            chat_service.get_session(self.user.id, session.id)

    def test_delete_twice(self):
        session = chat_service.create_session(self.user.id)
        self.assertEqual(chat_service.delete_session(self.user.id, session.id), 0)
        with self.assertRaises(NotFoundError):
            chat_service.delete_session(self.user.id, session.id)

    def test_other_users_session_is_not_found(self):
        session = chat_service.create_session(self.other.id)
        with self.assertRaises(NotFoundError):
            chat_service.delete_session(self.user.id, session.id)
        self.assertTrue(ChatSession.objects.filter(id=session.id).exists())


class TestConversationHistory(ChatServiceTestCase):
    def test_history_order_and_roles(self):
        session = chat_service.create_session(self.user.id)
        chat_service.add_message(self.user.id, session.id, "user", "question")
        chat_service.add_message(self.user.id, session.id, "assistant", "answer")

        history = chat_service.get_conversation_history(self.user.id, session.id)

        self.assertEqual([h.role for h in history], ["user", "assistant"])
        self.assertEqual([h.content for h in history], ["question", "answer"])
        self.assertLess(history[0].timestamp, history[1].timestamp)

    def test_empty_session(self):
        session = chat_service.create_session(self.user.id)
        self.assertEqual(chat_service.get_conversation_history(self.user.id, session.id), [])

    def test_other_users_session_is_not_found(self):
        session = chat_service.create_session(self.other.id)
        with self.assertRaises(NotFoundError):
            chat_service.get_conversation_history(self.user.id, session.id)
