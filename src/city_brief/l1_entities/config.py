"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel


class InferenceConfig(BaseModel):
    model: str
    host: str


class ParsingConfig(BaseModel):
    strict: bool


class AppConfig(BaseModel):
    inference: InferenceConfig
    parsing: ParsingConfig
