"""Pure functions for building LLM prompts."""

from __future__ import annotations

import json
from collections.abc import Mapping

from city_brief.l1_entities.chat_message import ChatMessage
from city_brief.l1_entities.city_schema import CITY_SCHEMA, FieldSpec

_SYSTEM_TEMPLATE = (
    'You are an assistant that provides detailed information about cities. '
    'When given a city name, describe the city including its major industry and one fun activity to do there. '
    'Ensure the response is strictly in JSON format adhering to the following schema:\n'
    '\n'
    '{schema}\n'
    '\n'
    'Do not include any additional text or explanations outside of the JSON object.'
)


def serialize_schema(schema: Mapping[str, FieldSpec]) -> str:
    """Render the schema descriptor as indented JSON, keeping field order."""
    return json.dumps({name: spec.model_dump() for name, spec in schema.items()}, indent=2)


def build_city_messages(city: str, schema: Mapping[str, FieldSpec] = CITY_SCHEMA) -> list[ChatMessage]:
    """Build the system + user message pair for a city lookup. *city* is passed through as-is."""
    return [
        ChatMessage(role='system', content=_SYSTEM_TEMPLATE.format(schema=serialize_schema(schema))),
        ChatMessage(role='user', content=city),
    ]
