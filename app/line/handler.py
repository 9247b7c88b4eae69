from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from app.assets.registry import VocabularyIndex
from app.core.randomness import RandomnessPort
from app.core.resolver import MessageType, TurnResult, resolve_turn
from app.line.client import ReplySender
from app.line.models import WebhookEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TurnHandler:
    """Adapter between LINE webhook events and the resolver.

    Holds no per-turn state; one instance may serve concurrent events.
    """

    vocabulary: VocabularyIndex
    rng: RandomnessPort
    sender: ReplySender

    async def handle_event(self, event: WebhookEvent) -> TurnResult | None:
        logger.debug("LINE event: %s", event.model_dump(by_alias=True, exclude_none=True))

        # Only user messages get a reply.
        if event.type != "message" or event.source is None or not event.source.user_id:
            return None
        if event.message is None or not event.reply_token:
            return None

        if event.message.type == MessageType.text:
            result = resolve_turn(
                event.message.text or "",
                MessageType.text,
                vocabulary=self.vocabulary,
                rng=self.rng,
            )
        else:
            result = resolve_turn("", MessageType.other, vocabulary=self.vocabulary, rng=self.rng)

        logger.info("Turn resolved: outcome=%s word=%s bot_conceded=%s", result.outcome, result.word, result.bot_conceded)
        await self.sender.reply(event.reply_token, result.lines)
        return result

    async def handle_events(self, events: Sequence[WebhookEvent]) -> list[TurnResult | None]:
        """Handle every event concurrently; a failing event never affects the others.

        Failed events are logged and reported as None.
        """

        outcomes = await asyncio.gather(*(self.handle_event(e) for e in events), return_exceptions=True)

        results: list[TurnResult | None] = []
        for event, outcome in zip(events, outcomes):
            if isinstance(outcome, BaseException):
                logger.error("Failed to handle LINE event type=%s", event.type, exc_info=outcome)
                results.append(None)
            else:
                results.append(outcome)
        return results
