"""
Tests for demo data seeding.
"""

from django.contrib.auth import get_user_model
from django.test import TestCase
from careerchat.db.models import ChatSession, Message
from careerchat.db.seed import DEMO_USERS, seed_demo_data

User = get_user_model()


class TestSeedDemoData(TestCase):
    def test_seed_counts(self):
        counts = seed_demo_data()

        self.assertEqual(counts, {"users": 4, "sessions": 15, "messages": 54})
        self.assertEqual(User.objects.count(), len(DEMO_USERS))
        self.assertEqual(ChatSession.objects.count(), 15)
        self.assertEqual(Message.objects.count(), 54)

    def test_sessions_consistent_with_messages(self):
        seed_demo_data()

        for session in ChatSession.objects.all():
            messages = list(session.messages.order_by("sequence"))
            self.assertEqual(session.message_count, len(messages))
            self.assertEqual(session.last_message, messages[-1].content)
            self.assertEqual([m.sequence for m in messages], list(range(1, len(messages) + 1)))

    def test_reset_is_repeatable(self):
        seed_demo_data()
        seed_demo_data(reset=True)

        self.assertEqual(User.objects.count(), 4)
        self.assertEqual(ChatSession.objects.count(), 15)

    def test_without_reset_keeps_users(self):
        seed_demo_data()
        counts = seed_demo_data(reset=False)

        self.assertEqual(counts["users"], 0)
        self.assertEqual(User.objects.count(), 4)
        self.assertEqual(ChatSession.objects.count(), 30)

    def test_other_users_untouched(self):
        User.objects.create_user(id="real_user", email="real@example.com")
        seed_demo_data()
        seed_demo_data(reset=True)
        self.assertTrue(User.objects.filter(id="real_user").exists())
