"""
Base class for chat completion clients.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Literal, Sequence

Role = Literal["user", "assistant"]


@dataclass(frozen=True)
class HistoryMessage:
    """One prior turn of a conversation, as replayed to the model."""
    role: Role
    content: str
    timestamp: int  # milliseconds since epoch


class ChatClientBase(ABC):
    """Base interface for hosted chat completion providers."""

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Name of the chat model."""
        pass

    @abstractmethod
    def generate_reply(
        self,
        user_message: str,
        session_id: str,
        history: Sequence[HistoryMessage],
    ) -> str:
        """
        Generate a single assistant reply.

        Args:
            user_message: The new message from the user
            session_id: Session the conversation belongs to
            history: Prior turns in ascending chronological order

        Returns:
            Reply text

        Raises:
            UpstreamServiceError: if the provider call fails for any reason
        """
        pass
