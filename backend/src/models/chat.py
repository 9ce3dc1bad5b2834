"""Chat request/response models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ChatRequest(BaseModel):
    """A single user turn. Prior turns are never sent."""

    message: str = Field(..., min_length=1, strict=True)

    @field_validator("message")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Message must not be blank")
        return value


class ChatResponse(BaseModel):
    """Reply relayed to the UI; ``ok`` is False when a fallback was used."""

    reply: str
    ok: bool
    failure: Optional[str] = Field(
        default=None, description="Failure reason when the fallback reply was used"
    )
    model: str


__all__ = ["ChatRequest", "ChatResponse"]
