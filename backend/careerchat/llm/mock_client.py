"""
Mock chat client for testing and offline development.
"""
from typing import Sequence
from .client_base import ChatClientBase, HistoryMessage


class MockChatClient(ChatClientBase):
    """Mock chat client that returns deterministic replies."""

    def __init__(self, model_name: str = "mock-chat"):
        self._model_name = model_name

    @property
    def model_name(self) -> str:
        return self._model_name

    def generate_reply(
        self,
        user_message: str,
        session_id: str,
        history: Sequence[HistoryMessage],
    ) -> str:
        """
        Echo the user message together with the number of prior turns.

        Args:
            user_message: The new message from the user
            session_id: Session ID (ignored for mock client)
            history: Prior turns
        """
        return f"[{len(history)} prior messages] You said: {user_message}"
