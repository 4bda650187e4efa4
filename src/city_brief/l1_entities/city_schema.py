"""Schema descriptor embedded in the system prompt as guidance for the model."""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel, ConfigDict


class FieldSpec(BaseModel):
    """Description of one expected output field."""

    model_config = ConfigDict(frozen=True)

    type: Literal['string'] = 'string'
    description: str


CITY_SCHEMA = MappingProxyType(
    {
        'city': FieldSpec(description='The city where the user is located.'),
        'industry': FieldSpec(description='The most popular industry in the city. What the city is known for.'),
        'fun': FieldSpec(description='One thing that is fun to do there on a day off.'),
    }
)
