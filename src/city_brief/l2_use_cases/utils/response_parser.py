"""Validate a raw chat reply and decode its JSON content."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from city_brief.l1_entities.city_info import CityInfo, StrictCityInfo
from city_brief.l1_entities.errors import InvalidResponseStructureError, ParseFailureError
from city_brief.l2_use_cases.ports.llm_client import ChatReply

log = logging.getLogger('cb.llm')


def extract_content(reply: ChatReply) -> str:
    """Return the reply text, or raise if the message or its content is missing/empty."""
    message = reply.message
    if message is None or not isinstance(message.content, str) or not message.content:
        raise InvalidResponseStructureError('Invalid response structure', reply)
    return message.content


def parse_city_info(text: str, *, strict: bool = False) -> CityInfo:
    """Decode *text* as a JSON object.

    Lenient mode accepts any object shape. Strict mode also requires
    ``city``, ``industry`` and ``fun`` to be present strings.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseFailureError('Failed to parse JSON', e, raw_text=text) from e

    if not isinstance(data, dict):
        err = TypeError(f'Expected a JSON object, got {type(data).__name__}')
        raise ParseFailureError('Failed to parse JSON', err, raw_text=text) from err

    if strict:
        try:
            StrictCityInfo.model_validate(data)
        except ValidationError as e:
            raise ParseFailureError('Response does not match the city schema', e, raw_text=text) from e

    return CityInfo.model_validate(data)


def validate_and_parse(reply: ChatReply, *, strict: bool = False) -> CityInfo:
    """Check the reply has text content, then parse it into a CityInfo."""
    text = extract_content(reply)
    info = parse_city_info(text, strict=strict)
    log.debug('Parsed chat response: %s', info.model_dump())
    return info
