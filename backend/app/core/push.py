"""
Push channel for fired reminders.

Alerts go out through a bot-style HTTP API (``bot{token}/sendMessage``), by
default the Zalo Bot platform: https://bot.zaloplatforms.com/docs/
"""

import logging
from dataclasses import dataclass

import httpx

from app.config import get_settings

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 2000
REQUEST_TIMEOUT_SECONDS = 15


@dataclass(frozen=True)
class PushTarget:
    endpoint: str
    chat_id: str


def resolve_target(chat_id: str | None = None) -> PushTarget | None:
    """Where alerts are sent, or None when the channel is not configured."""
    settings = get_settings()
    recipient = chat_id or settings.PUSH_CHAT_ID
    if not settings.PUSH_BOT_TOKEN or not recipient:
        return None
    return PushTarget(
        endpoint=f"{settings.PUSH_API_BASE}/bot{settings.PUSH_BOT_TOKEN}/sendMessage",
        chat_id=recipient,
    )


def format_reminder(title: str, body: str) -> str:
    """Plain-text rendering of a reminder alert, capped at the API limit."""
    text = f"🔔 {title}\n\n{body}"
    if len(text) > MAX_MESSAGE_LENGTH:
        text = text[:MAX_MESSAGE_LENGTH - 3] + "..."
    return text


async def send_push_message(text: str, target: PushTarget) -> bool:
    """POST one message to ``target``. True only when the API answers ok."""
    try:
        async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT_SECONDS) as client:
            response = await client.post(target.endpoint, json={"chat_id": target.chat_id, "text": text})
            data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"❌ Push request failed: {e}")
        return False

    if not data.get("ok"):
        logger.error(f"❌ Push API rejected message: {data}")
        return False
    return True


async def deliver(title: str, body: str, chat_id: str | None = None) -> bool:
    """Send a reminder alert through the push channel.

    Returns False (and logs) when the channel is unconfigured or the send fails.
    """
    target = resolve_target(chat_id)
    if target is None:
        logger.warning(f"Push channel not configured, reminder '{title}' only logged")
        return False
    sent = await send_push_message(format_reminder(title, body), target)
    if sent:
        logger.info(f"✅ Reminder '{title}' pushed to chat {target.chat_id}")
    return sent
