"""
Background scheduler for note reminders.

Uses APScheduler to fire one-shot reminder alerts at the time set on a note.
Designed for a single-process service: jobs live in memory, like the notes.
"""

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.schedulers.base import BaseScheduler

from app.core.clock import local_tz
from app.core import push

logger = logging.getLogger(__name__)


def create_scheduler() -> AsyncIOScheduler:
    """Build the APScheduler instance used by the service (not started)."""
    return AsyncIOScheduler(timezone=local_tz())


async def deliver_reminder(note_id: str, title: str, body: str) -> bool:
    """Callback for APScheduler reminder jobs: log the alert and push it."""
    logger.info(f"⏰ Reminder fired for note {note_id}: {title} - {body}")
    try:
        return await push.deliver(title, body)
    except Exception as e:
        logger.error(f"❌ Reminder delivery for note {note_id} failed: {e}", exc_info=True)
        return False


def init_scheduler(scheduler: BaseScheduler) -> None:
    """Start the scheduler. Called during FastAPI lifespan startup."""
    scheduler.start()
    jobs = scheduler.get_jobs()
    logger.info(f"📅 Scheduler started with {len(jobs)} pending reminder(s)")


def shutdown_scheduler(scheduler: BaseScheduler) -> None:
    """Gracefully shutdown the scheduler."""
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("📅 Scheduler shut down.")
