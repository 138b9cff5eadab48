"""
Sticky Notes - FastAPI Application Entry Point.

Feature-based modular architecture:
  Each feature in app/features/ has its own router, schemas, and service.
  Reminder scheduling lives in app/background/ behind a ReminderScheduler.
"""

import logging
from collections.abc import Callable
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.background.reminders import (
    APSchedulerReminderScheduler,
    InMemoryReminderScheduler,
    ReminderScheduler,
)
from app.background.scheduler import create_scheduler, init_scheduler, shutdown_scheduler
from app.core.clock import now
from app.features.notes.galleries import GALLERIES, build_controllers

# ── Feature Routers ──────────────────────────────────────
from app.features.notes.router import router as notes_router

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(
    reminder_scheduler: ReminderScheduler | None = None,
    clock: Callable[[], datetime] = now,
) -> FastAPI:
    """Application factory.

    Args:
        reminder_scheduler: Injected scheduler (tests pass an in-memory fake).
            When omitted, REMINDER_BACKEND decides.
        clock: Source of "now" for the reminder policy.
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifecycle: startup & shutdown."""
        configure_logging(settings.LOG_LEVEL)
        logger.info(f"🚀 {settings.APP_NAME} v{settings.APP_VERSION} starting...")

        aps = None
        scheduler = reminder_scheduler
        if scheduler is None:
            if settings.REMINDER_BACKEND == "memory":
                scheduler = InMemoryReminderScheduler()
            else:
                aps = create_scheduler()
                init_scheduler(aps)
                scheduler = APSchedulerReminderScheduler(aps)
        logger.info(f"🔔 Reminder backend: {type(scheduler).__name__}")

        app.state.reminder_scheduler = scheduler
        app.state.galleries = build_controllers(
            scheduler, seed=settings.SEED_DEMO_NOTES, clock=clock
        )
        yield
        if aps is not None:
            shutdown_scheduler(aps)
        logger.info("👋 Shutting down...")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Sticky notes with one-shot reminders",
        lifespan=lifespan,
    )

    # ── CORS ─────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Register Feature Routers ─────────────────────────
    app.include_router(notes_router, prefix="/api/galleries", tags=["Galleries"])

    # ── Health Check ─────────────────────────────────────
    @app.get("/health", tags=["System"])
    async def health_check():
        return {
            "status": "healthy",
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "galleries": list(GALLERIES),
        }

    return app


app = create_app()
