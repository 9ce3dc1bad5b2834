"""HTTP API routes for note operations."""

from __future__ import annotations

from fastapi import APIRouter

from ...models.note import DeleteResult, Note, NoteCreate
from ..deps import NoteStoreDep

router = APIRouter()


@router.get("/notes", response_model=list[Note])
async def list_notes(store: NoteStoreDep):
    """List all notes, newest first."""
    return store.list()


@router.post("/notes", response_model=Note)
async def create_note(create: NoteCreate, store: NoteStoreDep):
    """Create a new note."""
    return store.create(create.content)


@router.delete("/notes/{note_id}", response_model=DeleteResult)
async def delete_note(note_id: int, store: NoteStoreDep):
    """Delete a note. Unknown ids still report success."""
    store.delete(note_id)
    return DeleteResult(success=True)
