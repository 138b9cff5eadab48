"""
Notes feature: note records for every gallery.

Each gallery has a ``*Fields`` model (what a client sends on add/edit) and a
record model that adds the immutable identity (``id`` and, for the general
gallery, ``created_at``).
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, Field, field_validator

from app.core.clock import ensure_aware, now


def new_note_id() -> str:
    return str(uuid.uuid4())


class NoteCategory(str, Enum):
    """Categories of the general gallery."""
    CARTOON = "Cartoon"
    GROCERY = "Grocery"
    SMILE = "Smile"


class OfficeCategory(str, Enum):
    """Categories of the office gallery."""
    MEETING = "Meeting"
    WORK = "Work"
    TASKS = "Tasks"

    @property
    def emoji(self) -> str:
        return {
            OfficeCategory.MEETING: "📅",
            OfficeCategory.WORK: "💼",
            OfficeCategory.TASKS: "📌",
        }[self]


# ── Shared shape ─────────────────────────────────────────

class NoteFields(BaseModel):
    """Fields common to every gallery. Color is opaque presentation metadata."""

    primary_field: ClassVar[str] = "text"

    color: str = "yellow"
    reminder_date: datetime | None = None

    @field_validator("reminder_date")
    @classmethod
    def make_reminder_aware(cls, value: datetime | None) -> datetime | None:
        return ensure_aware(value)

    @property
    def primary_text(self) -> str:
        """The field that must be non-blank for a save to go through."""
        return getattr(self, self.primary_field)


class NoteIdentity(BaseModel):
    id: str = Field(default_factory=new_note_id, frozen=True)


# ── General gallery ──────────────────────────────────────

class StickyNoteFields(NoteFields):
    text: str
    category: NoteCategory = NoteCategory.CARTOON


class StickyNote(StickyNoteFields, NoteIdentity):
    created_at: datetime = Field(default_factory=now, frozen=True)


# ── Fun gallery ──────────────────────────────────────────

class FunNoteFields(NoteFields):
    text: str
    image: str | None = None  # URL or data URI from the picker, stored as-is


class FunNote(FunNoteFields, NoteIdentity):
    pass


# ── Office gallery ───────────────────────────────────────

class OfficeNoteFields(NoteFields):
    text: str
    category: OfficeCategory = OfficeCategory.MEETING


class OfficeNote(OfficeNoteFields, NoteIdentity):
    pass


# ── Important gallery ────────────────────────────────────

class ImportantNoteFields(NoteFields):
    text: str
    emoji: str = "📝"


class ImportantNote(ImportantNoteFields, NoteIdentity):
    pass


# ── Travel gallery ───────────────────────────────────────

class TravelNoteFields(NoteFields):
    primary_field: ClassVar[str] = "destination"

    destination: str
    travel_date: datetime
    budget: float = Field(default=0, ge=0)
    emoji: str = "✈️"

    @field_validator("travel_date")
    @classmethod
    def make_travel_date_aware(cls, value: datetime) -> datetime:
        return ensure_aware(value)


class TravelNote(TravelNoteFields, NoteIdentity):
    pass
