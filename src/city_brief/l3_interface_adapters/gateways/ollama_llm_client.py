"""Gateway: Ollama LLM client — implements LLMClient port."""

from __future__ import annotations

import logging

import ollama as ollama_sync

from city_brief.l1_entities.chat_message import ChatMessage
from city_brief.l2_use_cases.ports.llm_client import ChatReply, ReplyMessage

DEFAULT_HOST = 'http://127.0.0.1:11434'

log = logging.getLogger('cb.llm')


class OllamaLLMClient:
    """Wraps ollama.AsyncClient to implement the LLMClient protocol."""

    def __init__(self, host: str = DEFAULT_HOST) -> None:
        self._host = host

    @property
    def host(self) -> str:
        return self._host

    async def chat(self, model: str, messages: list[ChatMessage]) -> ChatReply:
        client = ollama_sync.AsyncClient(host=self._host)
        resp = await client.chat(model=model, messages=[m.model_dump() for m in messages])
        message = getattr(resp, 'message', None)
        reply_message = None
        if message is not None:
            reply_message = ReplyMessage(
                role=getattr(message, 'role', None) or 'assistant',
                content=getattr(message, 'content', None),
            )
        return ChatReply(message=reply_message)

    def check_connectivity(self) -> tuple[bool, str]:
        try:
            client = ollama_sync.Client(host=self._host)
            client.list()
            return True, ''
        except Exception as e:
            return False, f'Cannot connect to Ollama: {e}'

    def check_models(self, models: list[str]) -> list[str]:
        """Return models not pulled locally. Empty on connectivity errors."""
        client = ollama_sync.Client(host=self._host)
        missing: list[str] = []
        for model in models:
            try:
                client.show(model)
            except ollama_sync.ResponseError:
                missing.append(model)
            except Exception:
                log.warning('Could not check model %s', model, exc_info=True)
                return []
        return missing
