"""
Prompt formatting for the career guidance assistant.
"""
from typing import Dict, List, Optional, Sequence
from .client_base import HistoryMessage

SYSTEM_PROMPT = """You are a friendly and knowledgeable AI career counselor.
You help people explore career paths, plan skill development, improve resumes
and applications, prepare for interviews, and negotiate offers.

Guidelines:
- Ask clarifying questions when the user's goals or background are unclear.
- Give concrete, actionable advice with clear next steps.
- Use short sections and bullet points for longer answers.
- Be encouraging and honest; do not invent facts about specific companies.
- Stay on career, education and workplace topics; politely steer back otherwise."""


def build_chat_messages(
    user_message: str,
    history: Sequence[HistoryMessage],
    history_limit: Optional[int] = None,
    system_prompt: str = SYSTEM_PROMPT,
) -> List[Dict[str, str]]:
    """
    Format a conversation into the message list expected by chat APIs.

    The result is the system framing, then the most recent ``history_limit``
    turns in their original order, then the new user message.
    """
    turns = list(history)
    if history_limit is not None:
        turns = turns[-history_limit:] if history_limit > 0 else []

    messages = [{"role": "system", "content": system_prompt}]
    for turn in turns:
        if not turn.content:
            continue
        messages.append({"role": turn.role, "content": turn.content})
    messages.append({"role": "user", "content": user_message})
    return messages
