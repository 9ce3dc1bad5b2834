"""Pydantic models for data validation and serialization."""

from .chat import ChatRequest, ChatResponse
from .note import DeleteResult, Note, NoteCreate

__all__ = [
    "Note",
    "NoteCreate",
    "DeleteResult",
    "ChatRequest",
    "ChatResponse",
]
