"""
Tests for the chat completion endpoint.
"""

import json
import uuid
from unittest.mock import MagicMock, patch
from django.contrib.auth import get_user_model
from django.test import TestCase
from careerchat.core.errors import UpstreamServiceError
from careerchat.db.models import ChatSession, Message
from careerchat.services import chat_service
from auth_helpers import auth_header

User = get_user_model()

CHAT_URL = "/api/chat/"


class TestChatEndpoint(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(id="user_a", email="a@example.com", name="Alice")
        self.other = User.objects.create_user(id="user_b", email="b@example.com", name="Bob")
        self.session = chat_service.create_session(self.user.id)
        self.auth = auth_header(self.user.id)

    def post_chat(self, body, auth=True):
        headers = self.auth if auth else {}
        data = body if isinstance(body, str) else json.dumps(body)
        return self.client.post(CHAT_URL, data=data, content_type="application/json", **headers)

    def test_reply_with_history(self):
        chat_service.add_message(self.user.id, self.session.id, "user", "I want to be a data analyst")
        chat_service.add_message(self.user.id, self.session.id, "assistant", "Great goal!")

        response = self.post_chat({"message": "Where do I start?", "sessionId": str(self.session.id)})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(), {"reply": "[2 prior messages] You said: Where do I start?"}
        )

    def test_reply_is_not_persisted(self):
        self.post_chat({"message": "Hello", "sessionId": str(self.session.id)})

        self.assertEqual(Message.objects.count(), 0)
        self.session.refresh_from_db()
        self.assertEqual(self.session.last_message, "")

    def test_requires_authentication(self):
        response = self.post_chat({"message": "Hello", "sessionId": str(self.session.id)}, auth=False)
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"error": "Authentication required"})

    def test_invalid_json(self):
        response = self.post_chat("{oops")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Invalid JSON format"})

    def test_body_must_be_object(self):
        response = self.post_chat(["Hello"])
        self.assertEqual(response.status_code, 400)

    def test_missing_message(self):
        response = self.post_chat({"sessionId": str(self.session.id)})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Message is required"})

    def test_empty_message(self):
        response = self.post_chat({"message": "", "sessionId": str(self.session.id)})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Message is required"})

    def test_missing_session_id(self):
        response = self.post_chat({"message": "Hello"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Session ID is required"})

    @patch("careerchat.api.chat.get_chat_client")
    def test_unknown_session(self, mock_get_client):
        response = self.post_chat({"message": "Hello", "sessionId": str(uuid.uuid4())})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Session not found"})
        mock_get_client.assert_not_called()

    @patch("careerchat.api.chat.get_chat_client")
    def test_other_users_session(self, mock_get_client):
        foreign = chat_service.create_session(self.other.id)
        chat_service.add_message(self.other.id, foreign.id, "user", "private")

        response = self.post_chat({"message": "Hello", "sessionId": str(foreign.id)})

        self.assertEqual(response.status_code, 404)
        mock_get_client.assert_not_called()
        self.assertEqual(Message.objects.filter(session=foreign).count(), 1)

    @patch("careerchat.api.chat.get_chat_client")
    def test_upstream_failure(self, mock_get_client):
        client = MagicMock()
        client.generate_reply.side_effect = UpstreamServiceError()
        mock_get_client.return_value = client

        response = self.post_chat({"message": "Hello", "sessionId": str(self.session.id)})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "AI service error. Please try again."})
        self.assertEqual(ChatSession.objects.get(id=self.session.id).message_count, 0)

    @patch("careerchat.api.chat.get_chat_client")
    def test_unexpected_failure(self, mock_get_client):
        mock_get_client.side_effect = ValueError("COHERE_API_KEY environment variable is required")

        response = self.post_chat({"message": "Hello", "sessionId": str(self.session.id)})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "AI service error. Please try again."})

    @patch("careerchat.api.chat.get_chat_client")
    def test_history_passed_to_client(self, mock_get_client):
        client = MagicMock()
        client.generate_reply.return_value = "Sure!"
        mock_get_client.return_value = client
        chat_service.add_message(self.user.id, self.session.id, "user", "first")

        response = self.post_chat({"message": "second", "sessionId": str(self.session.id)})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"reply": "Sure!"})
        message, session_id, history = client.generate_reply.call_args[0]
        self.assertEqual(message, "second")
        self.assertEqual(session_id, str(self.session.id))
        self.assertEqual([(h.role, h.content) for h in history], [("user", "first")])

    def test_get_not_allowed(self):
        response = self.client.get(CHAT_URL, **self.auth)
        self.assertEqual(response.status_code, 405)
