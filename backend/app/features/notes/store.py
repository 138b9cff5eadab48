"""
Notes feature: in-memory ordered store backing one gallery.
"""

from collections.abc import Iterable
from typing import Generic, TypeVar

from app.core.exceptions import DuplicateNoteError, InvalidInputError
from app.features.notes.schemas import NoteFields

NoteT = TypeVar("NoteT", bound=NoteFields)


def can_save(text: str | None) -> bool:
    """Save gate: the primary field must have content once trimmed."""
    return bool(text and text.strip())


class NoteStore(Generic[NoteT]):
    """Ordered, single-caller collection of notes.

    Ids handed to ``add`` are remembered for the life of the store, so an id
    is never accepted twice, even after its note was deleted.
    """

    def __init__(self, notes: Iterable[NoteT] = ()):
        self._notes: list[NoteT] = []
        self._seen_ids: set[str] = set()
        for note in notes:
            self.add(note)

    def __len__(self) -> int:
        return len(self._notes)

    def __contains__(self, note_id: object) -> bool:
        return self._index_of(note_id) is not None

    def _index_of(self, note_id: object) -> int | None:
        for i, note in enumerate(self._notes):
            if note.id == note_id:
                return i
        return None

    def add(self, note: NoteT) -> NoteT:
        if not can_save(note.primary_text):
            raise InvalidInputError(note.primary_field)
        if note.id in self._seen_ids:
            raise DuplicateNoteError(note.id)
        self._notes.append(note)
        self._seen_ids.add(note.id)
        return note

    def get(self, note_id: str) -> NoteT | None:
        index = self._index_of(note_id)
        return self._notes[index] if index is not None else None

    def update(self, note: NoteT) -> bool:
        """Replace the stored note with the same id in place. False when absent."""
        index = self._index_of(note.id)
        if index is None:
            return False
        self._notes[index] = note
        return True

    def delete(self, note_id: str) -> NoteT | None:
        """Remove and return the matching note, or None when absent."""
        index = self._index_of(note_id)
        if index is None:
            return None
        return self._notes.pop(index)

    def list(self) -> list[NoteT]:
        return list(self._notes)
