"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import copy
import logging
from pathlib import Path

import pytest

from city_brief.l1_entities.chat_message import ChatMessage
from city_brief.l1_entities.config import AppConfig
from city_brief.l2_use_cases.ports.llm_client import ChatReply, ReplyMessage
from city_brief.l4_frameworks_and_drivers.config_defaults import APP_CONFIG_DEFAULTS

LONDON_JSON = '{"city":"London","industry":"Finance","fun":"Visit the British Museum"}'

# --- Protocol-conforming Fakes ---


class FakeLLMClient:
    """Fake LLM client for L2 use case tests."""

    def __init__(self, content: str | None = LONDON_JSON):
        self._reply = ChatReply(message=ReplyMessage(content=content))
        self._error: Exception | None = None
        self.chat_calls: list[tuple[str, list[ChatMessage]]] = []
        self._connectivity = (True, '')
        self._missing_models: list[str] = []

    async def chat(self, model: str, messages: list[ChatMessage]) -> ChatReply:
        self.chat_calls.append((model, list(messages)))
        if self._error is not None:
            raise self._error
        return self._reply

    def check_connectivity(self) -> tuple[bool, str]:
        return self._connectivity

    def check_models(self, models: list[str]) -> list[str]:
        return [m for m in models if m in self._missing_models]

    def set_reply(self, reply: ChatReply) -> None:
        self._reply = reply

    def set_content(self, content: str | None) -> None:
        self._reply = ChatReply(message=ReplyMessage(content=content))

    def set_error(self, error: Exception) -> None:
        self._error = error

    def set_connectivity(self, ok: bool, msg: str = '') -> None:
        self._connectivity = (ok, msg)

    def set_missing_models(self, models: list[str]) -> None:
        self._missing_models = list(models)


# --- Standard Fixtures ---


@pytest.fixture(autouse=True)
def _reset_cb_logger():
    yield
    root = logging.getLogger('cb')
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig.model_validate(copy.deepcopy(APP_CONFIG_DEFAULTS))


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
inference:
  model: "llama3:8b"
  host: "http://10.0.0.5:11434"
parsing:
  strict: true
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient()
