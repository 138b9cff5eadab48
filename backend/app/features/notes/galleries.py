"""
Notes feature: the five galleries and how their notes turn into alerts.

All galleries share one NoteStore/GalleryController implementation; they
differ only in record type, categories, alert wording and seed notes.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum

from pydantic import BaseModel

from app.background.reminders import ReminderScheduler
from app.core.clock import now
from app.core.exceptions import UnknownGalleryError
from app.features.notes.schemas import (
    FunNote,
    FunNoteFields,
    ImportantNote,
    ImportantNoteFields,
    NoteCategory,
    OfficeCategory,
    OfficeNote,
    OfficeNoteFields,
    StickyNote,
    StickyNoteFields,
    TravelNote,
    TravelNoteFields,
)
from app.features.notes.service import GalleryController
from app.features.notes.store import NoteStore


@dataclass(frozen=True)
class GalleryDefinition:
    key: str
    label: str
    fields_model: type[BaseModel]
    note_model: type[BaseModel]
    alert_title: str
    alert_body: Callable[[BaseModel], str]
    categories: type[Enum] | None = None
    seed: Callable[[datetime], list[BaseModel]] = field(default=lambda _now: [])

    def category_names(self) -> list[str]:
        return [c.value for c in self.categories] if self.categories else []


def _seed_important(_now: datetime) -> list[ImportantNote]:
    return [
        ImportantNote(text="Doctor Appointment", emoji="🩺", color="yellow"),
        ImportantNote(text="Cat Vaccination", emoji="🐱💉", color="pink"),
    ]


def _seed_travel(current: datetime) -> list[TravelNote]:
    return [
        TravelNote(destination="Hawaii", travel_date=current + timedelta(days=30),
                   budget=2000, emoji="🏖️", color="yellow"),
        TravelNote(destination="Paris", travel_date=current + timedelta(days=60),
                   budget=2500, emoji="🗼", color="pink"),
    ]


def _seed_fun(_now: datetime) -> list[FunNote]:
    return [
        FunNote(text="Feed the cat 🐱", color="yellow"),
        FunNote(text="Buy groceries 🛒", color="pink"),
        FunNote(text="Play with dog 🐶", color="green"),
        FunNote(text="Workout 💪", color="orange"),
        FunNote(text="Doctor Appointment 🩺", color="purple"),
        FunNote(text="Relax Time 🌴", color="mint"),
    ]


GALLERIES: dict[str, GalleryDefinition] = {
    g.key: g
    for g in (
        GalleryDefinition(
            key="general",
            label="Sticky Notes",
            fields_model=StickyNoteFields,
            note_model=StickyNote,
            categories=NoteCategory,
            alert_title="Sticky Note Reminder",
            alert_body=lambda note: note.text,
        ),
        GalleryDefinition(
            key="fun",
            label="Fun Gallery",
            fields_model=FunNoteFields,
            note_model=FunNote,
            alert_title="Reminder",
            alert_body=lambda note: note.text,
            seed=_seed_fun,
        ),
        GalleryDefinition(
            key="office",
            label="Office Space",
            fields_model=OfficeNoteFields,
            note_model=OfficeNote,
            categories=OfficeCategory,
            alert_title="Office Reminder",
            alert_body=lambda note: f"{note.category.emoji} {note.text}",
        ),
        GalleryDefinition(
            key="important",
            label="Important Stickies",
            fields_model=ImportantNoteFields,
            note_model=ImportantNote,
            alert_title="Reminder",
            alert_body=lambda note: f"{note.emoji} {note.text}",
            seed=_seed_important,
        ),
        GalleryDefinition(
            key="travel",
            label="Travel Stickies",
            fields_model=TravelNoteFields,
            note_model=TravelNote,
            alert_title="Travel Reminder",
            alert_body=lambda note: f"{note.emoji} {note.destination}",
            seed=_seed_travel,
        ),
    )
}


def get_gallery(key: str) -> GalleryDefinition:
    try:
        return GALLERIES[key]
    except KeyError:
        raise UnknownGalleryError(key) from None


def build_controllers(
    scheduler: ReminderScheduler,
    seed: bool = False,
    clock: Callable[[], datetime] = now,
) -> dict[str, GalleryController]:
    """One independent store + controller per gallery, sharing the scheduler."""
    controllers: dict[str, GalleryController] = {}
    for key, gallery in GALLERIES.items():
        notes = gallery.seed(clock()) if seed else []
        controllers[key] = GalleryController(gallery, NoteStore(notes), scheduler, clock)
    return controllers
