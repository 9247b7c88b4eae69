from __future__ import annotations

from collections.abc import Sequence

import pytest

from app.core import messages
from app.core.resolver import RoundOutcome
from app.line.handler import TurnHandler
from app.line.models import WebhookEvent, WebhookRequest


def _text_event(text: str, *, reply_token: str = "rt-1", user_id: str | None = "U1") -> WebhookEvent:
    source: dict[str, str] = {"type": "user"}
    if user_id:
        source["userId"] = user_id
    return WebhookEvent.model_validate(
        {
            "type": "message",
            "replyToken": reply_token,
            "source": source,
            "message": {"id": "m1", "type": "text", "text": text},
        }
    )


@pytest.mark.asyncio
async def test_text_event_is_resolved_and_replied(vocabulary, scripted_rng, sender) -> None:
    handler = TurnHandler(vocabulary=vocabulary, rng=scripted_rng(), sender=sender)

    result = await handler.handle_event(_text_event("メロン"))

    assert result is not None
    assert result.outcome == RoundOutcome.player_loss
    assert sender.replies == [("rt-1", [messages.PLAYER_LOSS, messages.MY_TURN, "あきはばら"])]


@pytest.mark.asyncio
async def test_non_text_message_gets_rejection(vocabulary, scripted_rng, sender) -> None:
    handler = TurnHandler(vocabulary=vocabulary, rng=scripted_rng(), sender=sender)
    event = WebhookEvent.model_validate(
        {
            "type": "message",
            "replyToken": "rt-2",
            "source": {"type": "user", "userId": "U1"},
            "message": {"id": "m2", "type": "sticker", "packageId": "1", "stickerId": "2"},
        }
    )

    result = await handler.handle_event(event)

    assert result is not None
    assert result.outcome == RoundOutcome.rejected_non_text
    assert sender.replies == [("rt-2", [messages.NON_TEXT])]


@pytest.mark.asyncio
async def test_non_message_and_anonymous_events_are_ignored(vocabulary, scripted_rng, sender) -> None:
    handler = TurnHandler(vocabulary=vocabulary, rng=scripted_rng(), sender=sender)
    follow = WebhookEvent.model_validate(
        {"type": "follow", "replyToken": "rt-3", "source": {"type": "user", "userId": "U1"}}
    )

    assert await handler.handle_event(follow) is None
    assert await handler.handle_event(_text_event("あ", user_id=None)) is None
    assert sender.replies == []


class _FlakySender:
    def __init__(self) -> None:
        self.replies: list[str] = []

    async def reply(self, reply_token: str, lines: Sequence[str]) -> None:
        if reply_token == "boom":
            raise RuntimeError("delivery failed")
        self.replies.append(reply_token)


@pytest.mark.asyncio
async def test_failed_event_does_not_affect_others(vocabulary, scripted_rng) -> None:
    flaky = _FlakySender()
    handler = TurnHandler(vocabulary=vocabulary, rng=scripted_rng(), sender=flaky)
    payload = WebhookRequest(
        events=[
            _text_event("からあ", reply_token="ok-1"),
            _text_event("からあ", reply_token="boom"),
            _text_event("hello", reply_token="ok-2"),
        ]
    )

    results = await handler.handle_events(payload.events)

    assert results[1] is None
    assert results[0] is not None and results[0].outcome == RoundOutcome.continued
    assert results[2] is not None and results[2].outcome == RoundOutcome.rejected_non_hiragana
    assert sorted(flaky.replies) == ["ok-1", "ok-2"]
