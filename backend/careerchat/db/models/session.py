"""
Chat session model.
"""
import uuid
from django.db import models
from django.conf import settings
from django.utils import timezone

DEFAULT_SESSION_TITLE = "New Chat"


class ChatSession(models.Model):
    """Chat session model for storing conversation sessions."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='chat_sessions'
    )
    title = models.CharField(max_length=255, default=DEFAULT_SESSION_TITLE)
    last_message = models.TextField(
        blank=True,
        default='',
        help_text="Content of the most recently appended message"
    )
    message_count = models.PositiveIntegerField(
        default=0,
        help_text="Number of messages appended; the next message gets message_count + 1 as its sequence"
    )
    created_at = models.DateTimeField(default=timezone.now)
    # Bumped by message appends only, never decreases
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'chat_sessions'
        ordering = ['-updated_at', '-id']
        verbose_name = 'Chat Session'
        verbose_name_plural = 'Chat Sessions'
        indexes = [
            models.Index(fields=['user', '-updated_at'], name='chat_sessions_user_updated_idx'),
        ]

    def __str__(self):
        return f"{self.user_id} - {self.title} ({self.created_at})"
