"""Context Assembler - turns the current notes into prompt text."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..models.note import Note
from .note_store import NoteStore
from .prompt_loader import SYSTEM_PROMPT, TURN_PROMPT, PromptLoader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChatPrompt:
    """The two strings sent to the model for one turn."""

    system_instruction: str
    user_content: str


def render_notes(notes: Iterable[Note]) -> str:
    """Render notes as a bulleted block, one ``- content`` line per note."""
    return "\n".join(f"- {note.content}" for note in notes)


class ContextAssembler:
    """Splice the store's current snapshot and a user message into prompts."""

    def __init__(self, store: NoteStore, prompt_loader: Optional[PromptLoader] = None):
        self.store = store
        self.prompt_loader = prompt_loader or PromptLoader()

    def assemble(self, message: str) -> ChatPrompt:
        notes = self.store.list()
        logger.debug(f"Assembling chat context from {len(notes)} notes")
        system_instruction = self.prompt_loader.load(SYSTEM_PROMPT)
        user_content = self.prompt_loader.load(
            TURN_PROMPT,
            {"notes_block": render_notes(notes), "message": message},
        )
        return ChatPrompt(system_instruction=system_instruction, user_content=user_content)


__all__ = ["ChatPrompt", "ContextAssembler", "render_notes"]
