"""Unit tests for the SQLite note store."""

import threading
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from backend.src.services.note_store import (
    NoteStore,
    NoteStoreError,
    NoteValidationError,
)


def test_open_creates_database_file(tmp_path: Path) -> None:
    db_path = tmp_path / "nested" / "notes.db"

    with NoteStore(db_path) as store:
        assert store.is_open
        assert db_path.exists()

    assert not store.is_open


def test_closed_store_refuses_operations(tmp_path: Path) -> None:
    store = NoteStore(tmp_path / "notes.db")

    with pytest.raises(NoteStoreError):
        store.list()

    store.open()
    store.close()
    with pytest.raises(NoteStoreError):
        store.create("too late")


def test_create_assigns_id_and_timestamp(store: NoteStore) -> None:
    before = datetime.now(timezone.utc)

    note = store.create("buy milk")

    assert note.id >= 1
    assert note.content == "buy milk"
    assert note.created_at >= before
    assert note.created_at.tzinfo is not None


def test_created_note_is_listed(store: NoteStore) -> None:
    before = datetime.now(timezone.utc) - timedelta(microseconds=1)
    created = store.create("call mum")

    notes = store.list()

    assert [n.id for n in notes] == [created.id]
    assert notes[0].content == "call mum"
    assert notes[0].created_at >= before
    assert notes[0].created_at == created.created_at


@pytest.mark.parametrize("content", ["", None])
def test_create_rejects_missing_content(store: NoteStore, content) -> None:
    store.create("existing")

    with pytest.raises(NoteValidationError):
        store.create(content)

    assert store.count() == 1


def test_whitespace_content_is_stored_verbatim(store: NoteStore) -> None:
    note = store.create("   ")

    assert store.list()[0].content == "   "
    assert note.content == "   "


def test_list_is_newest_first(store: NoteStore) -> None:
    first = store.create("t1")
    second = store.create("t2")
    third = store.create("t3")

    assert [n.id for n in store.list()] == [third.id, second.id, first.id]


def test_ids_are_monotonic_and_not_reused(store: NoteStore) -> None:
    first = store.create("a")
    second = store.create("b")
    store.delete(second.id)

    third = store.create("c")

    assert first.id < second.id < third.id


def test_delete_removes_note(store: NoteStore) -> None:
    keep = store.create("keep")
    drop = store.create("drop")

    assert store.delete(drop.id) is True

    assert [n.id for n in store.list()] == [keep.id]


def test_delete_missing_id_is_noop(store: NoteStore) -> None:
    note = store.create("only")

    assert store.delete(note.id + 100) is True

    assert [n.id for n in store.list()] == [note.id]


def test_notes_survive_reopen(tmp_path: Path) -> None:
    db_path = tmp_path / "notes.db"
    with NoteStore(db_path) as store:
        created = store.create("persisted")

    with NoteStore(db_path) as store:
        notes = store.list()

    assert [(n.id, n.content) for n in notes] == [(created.id, "persisted")]


@pytest.mark.parametrize("note_id", [2**63, -(2**63) - 1, 10**20])
def test_delete_id_outside_sqlite_range_is_noop(store: NoteStore, note_id: int) -> None:
    note = store.create("still here")

    assert store.delete(note_id) is True

    assert [n.id for n in store.list()] == [note.id]


def test_store_is_usable_from_another_thread(store: NoteStore) -> None:
    note = store.create("made on the main thread")
    seen = []

    worker = threading.Thread(target=lambda: seen.extend(store.list()))
    worker.start()
    worker.join()

    assert [n.id for n in seen] == [note.id]
