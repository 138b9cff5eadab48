"""
Notes feature: gallery controller.

Sits between a gallery's NoteStore and the ReminderScheduler. Every save goes
through here so the reminder policy lives in one place:

  - a reminder is requested only when ``reminder_date`` is strictly after
    the clock at the moment of the save;
  - re-scheduling reuses the note id, superseding the pending alert;
  - clearing a reminder (or moving it into the past) cancels the pending one;
  - deleting a note cancels its pending alert before removing it.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Generic

from app.background.reminders import ReminderScheduler
from app.core.clock import now
from app.core.exceptions import InvalidInputError
from app.features.notes.schemas import NoteFields
from app.features.notes.store import NoteStore, NoteT, can_save

if TYPE_CHECKING:
    from app.features.notes.galleries import GalleryDefinition

logger = logging.getLogger(__name__)


class GalleryController(Generic[NoteT]):
    """Add/update/delete commands for one gallery."""

    def __init__(
        self,
        gallery: "GalleryDefinition",
        store: NoteStore[NoteT],
        scheduler: ReminderScheduler,
        clock: Callable[[], datetime] = now,
    ):
        self.gallery = gallery
        self.store = store
        self.scheduler = scheduler
        self.clock = clock
        self._scheduled: set[str] = set()

    @property
    def key(self) -> str:
        return self.gallery.key

    def is_scheduled(self, note_id: str) -> bool:
        """Whether this controller has an alert requested for ``note_id``."""
        return note_id in self._scheduled

    def can_save(self, fields: NoteFields) -> bool:
        return can_save(fields.primary_text)

    def list(self) -> list[NoteT]:
        return self.store.list()

    def get(self, note_id: str) -> NoteT | None:
        return self.store.get(note_id)

    def add(self, note: NoteT) -> NoteT:
        """Store a new note and schedule its reminder when it is in the future.

        Raises:
            InvalidInputError: primary field blank; the store is untouched.
        """
        self._validate(note)
        self.store.add(note)
        logger.info(f"📝 [{self.key}] Added note {note.id}")
        self._sync_reminder(note)
        return note

    def update(self, note: NoteT) -> NoteT | None:
        """Replace the note with the same id. Unknown ids are a silent no-op."""
        self._validate(note)
        current = self.store.get(note.id)
        if current is None:
            logger.warning(f"[{self.key}] Update ignored: note {note.id} not found")
            return None
        if "created_at" in type(current).model_fields:
            note = note.model_copy(update={"created_at": current.created_at})
        self.store.update(note)
        logger.info(f"✏️ [{self.key}] Updated note {note.id}")
        self._sync_reminder(note)
        return note

    def edit(self, note_id: str, fields: NoteFields) -> NoteT | None:
        """Full replacement of the editable fields, keeping id and created_at."""
        current = self.store.get(note_id)
        if current is None:
            logger.warning(f"[{self.key}] Edit ignored: note {note_id} not found")
            return None
        return self.update(current.model_copy(update=fields.model_dump()))

    def delete(self, note_id: str) -> bool:
        """Cancel any pending alert, then remove the note. Unknown ids are a no-op."""
        if note_id not in self.store:
            logger.warning(f"[{self.key}] Delete ignored: note {note_id} not found")
            return False
        if note_id in self._scheduled:
            self._cancel(note_id)
        self.store.delete(note_id)
        logger.info(f"🗑️ [{self.key}] Deleted note {note_id}")
        return True

    # ── Reminder policy ──────────────────────────────────

    def _validate(self, note: NoteT) -> None:
        if not self.can_save(note):
            logger.info(f"[{self.key}] Rejected save: '{note.primary_field}' is blank")
            raise InvalidInputError(note.primary_field)

    def _sync_reminder(self, note: NoteT) -> None:
        fire_at = note.reminder_date
        if fire_at is not None and fire_at > self.clock():
            self._schedule(note, fire_at)
            return

        if fire_at is not None:
            logger.info(f"[{self.key}] Reminder for note {note.id} is in the past, not scheduled")
        if note.id in self._scheduled:
            self._cancel(note.id)

    def _schedule(self, note: NoteT, fire_at: datetime) -> None:
        try:
            self.scheduler.schedule(
                note.id,
                self.gallery.alert_title,
                self.gallery.alert_body(note),
                fire_at,
            )
        except Exception as e:
            logger.error(f"❌ [{self.key}] Scheduling reminder for note {note.id} failed: {e}")
            if note.id in self._scheduled:
                # the earlier alert no longer matches the note
                self._cancel(note.id)
            return
        self._scheduled.add(note.id)

    def _cancel(self, note_id: str) -> None:
        self._scheduled.discard(note_id)
        try:
            self.scheduler.cancel(note_id)
        except Exception as e:
            logger.error(f"❌ [{self.key}] Cancelling reminder for note {note_id} failed: {e}")
