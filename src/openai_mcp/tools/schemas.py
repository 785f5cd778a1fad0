"""Strict Pydantic schemas for tool arguments."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

MessageRole = Literal["system", "user", "assistant"]
SupportedModel = Literal["gpt-4o", "gpt-4o-mini", "o1-preview", "o1-mini"]


class StrictModel(BaseModel):
    """Base model for strict schema validation."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class ChatMessage(StrictModel):
    role: MessageRole
    # Content is opaque text; only its type is checked.
    content: str = Field(strict=True)


class OpenAIChatInput(StrictModel):
    messages: list[ChatMessage] = Field(min_length=1)
    model: SupportedModel = "gpt-4o"
