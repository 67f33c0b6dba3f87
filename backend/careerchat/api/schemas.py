"""
Pydantic input schemas for the RPC procedures, the chat endpoint and the
profile endpoint.

Field names follow the client contract (camelCase); Python attribute names
are snake_case.
"""

from typing import Literal, Optional
from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator


# Keeps (page - 1) * limit well inside a 64-bit OFFSET
MAX_PAGE = 1_000_000


class ProcedureInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ListSessionsInput(ProcedureInput):
    page: int = Field(1, ge=1, le=MAX_PAGE, description="1-based page number")
    limit: int = Field(
        default_factory=lambda: settings.SESSIONS_PAGE_SIZE,
        description="Sessions per page",
    )

    @field_validator("limit")
    @classmethod
    def limit_in_range(cls, value: int) -> int:
        maximum = settings.SESSIONS_MAX_PAGE_SIZE
        if not 1 <= value <= maximum:
            raise ValueError(f"limit must be between 1 and {maximum}")
        return value


class SessionIdInput(ProcedureInput):
    session_id: str = Field(..., alias="sessionId", min_length=1)


class CreateSessionInput(ProcedureInput):
    title: Optional[str] = Field(None, max_length=255)


class AppendMessageInput(SessionIdInput):
    content: str
    role: Literal["user", "assistant"]


class UpdateSessionTitleInput(SessionIdInput):
    title: str = Field(..., max_length=255)


class ChatRequest(ProcedureInput):
    message: str = Field(..., min_length=1)
    session_id: str = Field(..., alias="sessionId", min_length=1)


class UpdateProfileInput(ProcedureInput):
    name: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=254)

    @field_validator("email")
    @classmethod
    def email_format(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        try:
            validate_email(value)
        except DjangoValidationError:
            raise ValueError("Enter a valid email address")
        return value
