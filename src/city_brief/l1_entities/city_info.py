"""Parsed city information returned by the model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class CityInfo(BaseModel):
    """What the model said about a city.

    The model is only asked, not forced, to follow the schema: fields may be
    missing (``None``) or hold whatever JSON value was emitted, and unknown
    keys are kept as extras.
    """

    model_config = ConfigDict(extra='allow')

    city: Any = None
    industry: Any = None
    fun: Any = None


class StrictCityInfo(BaseModel):
    """Shape check used when strict parsing is enabled."""

    model_config = ConfigDict(strict=True)

    city: str
    industry: str
    fun: str
