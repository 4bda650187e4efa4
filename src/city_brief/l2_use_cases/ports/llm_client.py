"""Port: LLM chat client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from city_brief.l1_entities.chat_message import ChatMessage


@dataclass(frozen=True)
class ReplyMessage:
    """The assistant message inside a chat reply. Content may be missing."""

    role: str = 'assistant'
    content: str | None = None


@dataclass(frozen=True)
class ChatReply:
    """Raw reply from an LLM chat call, before any validation."""

    message: ReplyMessage | None = None


class LLMClient(Protocol):
    """Abstract LLM client. Zero framework types leak through."""

    async def chat(self, model: str, messages: list[ChatMessage]) -> ChatReply:
        """Single request. Raises on transport failure."""
        ...

    def check_connectivity(self) -> tuple[bool, str]:
        """Pre-flight connectivity check. Returns (ok, error_message)."""
        ...

    def check_models(self, models: list[str]) -> list[str]:
        """Return model names from the list that are not available locally."""
        ...
