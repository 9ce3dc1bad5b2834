"""Note-related Pydantic models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Note(BaseModel):
    """A stored note. Immutable once created."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 7,
                "content": "buy milk",
                "created_at": "2025-01-15T14:30:00.123456Z",
            }
        },
    )

    id: int = Field(..., ge=1, description="Store-assigned identifier")
    content: str = Field(..., min_length=1, description="Free-text note body")
    created_at: datetime = Field(..., description="Insertion timestamp (UTC)")


class NoteCreate(BaseModel):
    """Request payload to create a note."""

    content: str = Field(..., min_length=1, strict=True)


class DeleteResult(BaseModel):
    """Response for a delete request; always successful."""

    success: bool = True


__all__ = ["Note", "NoteCreate", "DeleteResult"]
