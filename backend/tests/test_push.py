"""Unit tests for the push channel used to deliver fired reminders."""

import asyncio
import json

import httpx
import pytest

from app.config import get_settings
from app.core import push
from app.core.push import PushTarget, deliver, format_reminder, resolve_target, send_push_message


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setenv("PUSH_BOT_TOKEN", "tok")
    monkeypatch.setenv("PUSH_CHAT_ID", "chat-1")
    monkeypatch.setenv("PUSH_API_BASE", "https://push.test")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def unconfigured(monkeypatch):
    monkeypatch.setenv("PUSH_BOT_TOKEN", "")
    monkeypatch.setenv("PUSH_CHAT_ID", "")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _mock_client(monkeypatch, handler):
    real_client = httpx.AsyncClient

    def factory(**kwargs):
        return real_client(transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr(push.httpx, "AsyncClient", factory)


class TestResolveTarget:
    def test_unconfigured(self, unconfigured):
        assert resolve_target() is None

    def test_configured(self, configured):
        assert resolve_target() == PushTarget("https://push.test/bottok/sendMessage", "chat-1")

    def test_explicit_chat_id_wins(self, configured):
        assert resolve_target("other").chat_id == "other"


class TestFormatReminder:
    def test_layout(self):
        assert format_reminder("Reminder", "🩺 Doctor") == "🔔 Reminder\n\n🩺 Doctor"

    def test_long_body_truncated(self):
        text = format_reminder("Reminder", "x" * 5000)
        assert len(text) == push.MAX_MESSAGE_LENGTH
        assert text.endswith("...")


def test_deliver_skips_when_unconfigured(unconfigured):
    assert asyncio.run(deliver("Reminder", "hello")) is False


def test_deliver_posts_formatted_alert(configured, monkeypatch):
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"ok": True, "result": {"message_id": "m1"}})

    _mock_client(monkeypatch, handler)
    assert asyncio.run(deliver("Travel Reminder", "🗼 Paris")) is True
    assert str(requests[0].url) == "https://push.test/bottok/sendMessage"
    assert json.loads(requests[0].content) == {"chat_id": "chat-1", "text": "🔔 Travel Reminder\n\n🗼 Paris"}


def test_api_rejection_returns_false(monkeypatch):
    _mock_client(monkeypatch, lambda request: httpx.Response(200, json={"ok": False, "description": "bad"}))
    target = PushTarget("https://push.test/bottok/sendMessage", "chat-1")
    assert asyncio.run(send_push_message("hello", target)) is False


def test_transport_error_returns_false(monkeypatch):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    _mock_client(monkeypatch, handler)
    target = PushTarget("https://push.test/bottok/sendMessage", "chat-1")
    assert asyncio.run(send_push_message("hello", target)) is False


def test_non_json_answer_returns_false(monkeypatch):
    _mock_client(monkeypatch, lambda request: httpx.Response(502, text="Bad Gateway"))
    target = PushTarget("https://push.test/bottok/sendMessage", "chat-1")
    assert asyncio.run(send_push_message("hello", target)) is False
