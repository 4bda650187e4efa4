"""Chat message entity — typed replacement for dict[str, Any]."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class ChatMessage(BaseModel):
    """A single message sent to the model. Built fresh per request."""

    model_config = ConfigDict(frozen=True)

    role: Literal['system', 'user']
    content: str
