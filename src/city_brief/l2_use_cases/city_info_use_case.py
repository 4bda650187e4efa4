"""Use case: look up one city via the LLM client."""

from __future__ import annotations

import logging

from city_brief.l1_entities.city_info import CityInfo
from city_brief.l1_entities.errors import ChatResponseError, RequestFailureError
from city_brief.l2_use_cases.ports.llm_client import LLMClient
from city_brief.l2_use_cases.utils.prompt_builder import build_city_messages
from city_brief.l2_use_cases.utils.response_parser import validate_and_parse

log = logging.getLogger('cb.llm')


class GetCityInfoUseCase:
    """Builds the prompt, sends a single request, parses the reply. No retries."""

    def __init__(self, llm_client: LLMClient, *, strict: bool = False) -> None:
        self._llm = llm_client
        self._strict = strict

    async def execute(self, city: str, model: str) -> CityInfo:
        """Return the parsed CityInfo for *city*. Raises ChatResponseError on any failure."""
        messages = build_city_messages(city)
        log.info('City lookup: city=%r model=%s', city, model)

        try:
            reply = await self._llm.chat(model=model, messages=messages)
        except Exception as e:
            log.error('Error fetching chat response for %r: %s: %s', city, type(e).__name__, e)
            raise RequestFailureError(f'Failed to get chat response for city: {city}', e, city=city) from e

        log.debug('Raw chat response: %r', reply)

        try:
            return validate_and_parse(reply, strict=self._strict)
        except ChatResponseError as e:
            log.error('Unusable chat response for %r: %s', city, e)
            raise
