"""
Reminder Scheduler boundary.

The note galleries only ever talk to a ReminderScheduler: they request a
one-shot alert for a note id, or cancel it. Nothing is read back.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Awaitable, Callable

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.base import BaseScheduler
from apscheduler.triggers.date import DateTrigger

from app.background.scheduler import deliver_reminder

logger = logging.getLogger(__name__)

JOB_PREFIX = "reminder:"
MISFIRE_GRACE_SECONDS = 300


def job_id_for(note_id: str) -> str:
    return f"{JOB_PREFIX}{note_id}"


class ReminderScheduler(ABC):
    """Best-effort, fire-and-forget alert scheduling keyed by note id."""

    @abstractmethod
    def schedule(self, note_id: str, title: str, body: str, fire_at: datetime) -> None:
        """Request a one-shot alert at ``fire_at``.

        A pending alert for the same ``note_id`` is superseded, never kept
        alongside the new one.
        """

    @abstractmethod
    def cancel(self, note_id: str) -> None:
        """Drop any pending alert for ``note_id``. Safe when none exists."""


class APSchedulerReminderScheduler(ReminderScheduler):
    """One DateTrigger job per note, job id derived from the note id."""

    def __init__(
        self,
        scheduler: BaseScheduler,
        callback: Callable[[str, str, str], Awaitable[bool] | bool] = deliver_reminder,
    ):
        self.scheduler = scheduler
        self.callback = callback

    def schedule(self, note_id: str, title: str, body: str, fire_at: datetime) -> None:
        self.scheduler.add_job(
            func=self.callback,
            trigger=DateTrigger(run_date=fire_at),
            args=[note_id, title, body],
            id=job_id_for(note_id),
            name=title,
            replace_existing=True,
            misfire_grace_time=MISFIRE_GRACE_SECONDS,
        )
        logger.info(f"🔔 Scheduled reminder for note {note_id} at {fire_at.isoformat()}")

    def cancel(self, note_id: str) -> None:
        try:
            self.scheduler.remove_job(job_id_for(note_id))
            logger.info(f"🔕 Cancelled reminder for note {note_id}")
        except JobLookupError:
            logger.debug(f"No pending reminder for note {note_id}")


@dataclass
class PendingReminder:
    note_id: str
    title: str
    body: str
    fire_at: datetime


class InMemoryReminderScheduler(ReminderScheduler):
    """Records requests instead of firing anything.

    Used by tests and by REMINDER_BACKEND=memory.
    """

    def __init__(self):
        self.pending: dict[str, PendingReminder] = {}
        self.calls: list[tuple[str, str]] = []

    def schedule(self, note_id: str, title: str, body: str, fire_at: datetime) -> None:
        self.pending[note_id] = PendingReminder(note_id, title, body, fire_at)
        self.calls.append(("schedule", note_id))

    def cancel(self, note_id: str) -> None:
        self.pending.pop(note_id, None)
        self.calls.append(("cancel", note_id))

    def calls_for(self, operation: str) -> list[str]:
        """Note ids passed to ``operation`` ("schedule" or "cancel"), in call order."""
        return [note_id for op, note_id in self.calls if op == operation]
