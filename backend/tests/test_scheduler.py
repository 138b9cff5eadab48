"""Unit tests for the APScheduler reminder adapter and the delivery callback."""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest
from apscheduler.schedulers.background import BackgroundScheduler

from app.background import scheduler as scheduler_module
from app.background.reminders import APSchedulerReminderScheduler, InMemoryReminderScheduler, job_id_for
from app.background.scheduler import deliver_reminder

FIRE_AT = datetime(2030, 5, 4, 8, 30, tzinfo=timezone.utc)


@pytest.fixture
def paused_scheduler():
    sched = BackgroundScheduler(timezone=timezone.utc)
    sched.start(paused=True)
    yield sched
    sched.shutdown(wait=False)


@pytest.fixture
def reminders(paused_scheduler):
    return APSchedulerReminderScheduler(paused_scheduler, callback=lambda *args: None)


class TestAPSchedulerReminderScheduler:
    def test_schedule_adds_one_shot_job(self, paused_scheduler, reminders):
        reminders.schedule("note-1", "Reminder", "Buy milk", FIRE_AT)
        job = paused_scheduler.get_job(job_id_for("note-1"))
        assert job is not None
        assert job.trigger.run_date == FIRE_AT
        assert tuple(job.args) == ("note-1", "Reminder", "Buy milk")

    def test_reschedule_replaces_pending_job(self, paused_scheduler, reminders):
        reminders.schedule("note-1", "Reminder", "Buy milk", FIRE_AT)
        later = FIRE_AT + timedelta(hours=3)
        reminders.schedule("note-1", "Reminder", "Buy oat milk", later)
        jobs = paused_scheduler.get_jobs()
        assert len(jobs) == 1
        assert jobs[0].trigger.run_date == later
        assert jobs[0].args[2] == "Buy oat milk"

    def test_jobs_are_keyed_per_note(self, paused_scheduler, reminders):
        reminders.schedule("note-1", "Reminder", "a", FIRE_AT)
        reminders.schedule("note-2", "Reminder", "b", FIRE_AT)
        assert sorted(j.id for j in paused_scheduler.get_jobs()) == [job_id_for("note-1"), job_id_for("note-2")]

    def test_cancel_removes_job(self, paused_scheduler, reminders):
        reminders.schedule("note-1", "Reminder", "Buy milk", FIRE_AT)
        reminders.cancel("note-1")
        assert paused_scheduler.get_job(job_id_for("note-1")) is None

    def test_cancel_without_job_is_safe(self, paused_scheduler, reminders):
        reminders.cancel("never-scheduled")
        assert paused_scheduler.get_jobs() == []


class TestInMemoryReminderScheduler:
    def test_records_calls_and_pending(self):
        fake = InMemoryReminderScheduler()
        fake.schedule("a", "T", "B", FIRE_AT)
        fake.schedule("a", "T", "B2", FIRE_AT)
        fake.cancel("b")
        assert fake.calls_for("schedule") == ["a", "a"]
        assert fake.calls_for("cancel") == ["b"]
        assert fake.pending["a"].body == "B2"


class TestDeliverReminder:
    def test_hands_alert_to_push_channel(self, monkeypatch):
        sent = []

        async def fake_deliver(title, body, chat_id=None):
            sent.append((title, body))
            return True

        monkeypatch.setattr(scheduler_module.push, "deliver", fake_deliver)
        assert asyncio.run(deliver_reminder("note-1", "Travel Reminder", "🗼 Paris")) is True
        assert sent == [("Travel Reminder", "🗼 Paris")]

    def test_push_failure_is_swallowed(self, monkeypatch):
        async def broken_deliver(title, body, chat_id=None):
            raise RuntimeError("network down")

        monkeypatch.setattr(scheduler_module.push, "deliver", broken_deliver)
        assert asyncio.run(deliver_reminder("note-1", "Reminder", "x")) is False
