"""Dependency injection for FastAPI routes.

The note store and chat bridge are built once by the application lifespan
and kept on ``app.state``; routes receive them through ``Depends`` so tests
can swap either with ``app.dependency_overrides``.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from ..services.chat_bridge import ChatBridge
from ..services.note_store import NoteStore


def get_note_store(request: Request) -> NoteStore:
    return request.app.state.note_store


def get_chat_bridge(request: Request) -> ChatBridge:
    return request.app.state.chat_bridge


NoteStoreDep = Annotated[NoteStore, Depends(get_note_store)]
ChatBridgeDep = Annotated[ChatBridge, Depends(get_chat_bridge)]

__all__ = ["get_note_store", "get_chat_bridge", "NoteStoreDep", "ChatBridgeDep"]
