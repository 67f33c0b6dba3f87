"""
Chat message model.
"""

import uuid
from django.db import models
from django.utils import timezone
from .session import ChatSession


class MessageRole(models.TextChoices):
    USER = "USER", "User"
    ASSISTANT = "ASSISTANT", "Assistant"

    @classmethod
    def from_api(cls, value: str) -> "MessageRole":
        """Map the lower-case API role ("user"/"assistant") to a stored role."""
        return cls(value.upper())

    def to_api(self) -> str:
        return self.value.lower()


class Message(models.Model):
    """
    Message model for storing chat messages.

    Messages are immutable once created. Within a session they are ordered by
    ``sequence``, which is allocated under the session row lock in creation
    order; this is the order replayed to the language model.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    session = models.ForeignKey(
        ChatSession, on_delete=models.CASCADE, related_name="messages"
    )
    role = models.CharField(max_length=10, choices=MessageRole.choices)
    content = models.TextField()
    sequence = models.PositiveIntegerField()
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "messages"
        ordering = ["sequence"]
        verbose_name = "Message"
        verbose_name_plural = "Messages"
        constraints = [
            models.UniqueConstraint(
                fields=["session", "sequence"], name="messages_session_sequence_uniq"
            ),
        ]

    def __str__(self):
        return f"{self.role}: {self.content[:50]}..."
