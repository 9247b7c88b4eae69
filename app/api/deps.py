from __future__ import annotations

from collections.abc import AsyncGenerator
from pathlib import Path

import httpx
from fastapi import Depends, Header, Request

from app.assets.singleton import get_vocabulary
from app.core.randomness import RandomnessPort, RandomRandomness
from app.line.client import LineReplyClient, ReplySender
from app.line.config import LineSettings, load_settings
from app.line.handler import TurnHandler
from app.line.signature import verify_signature

# app/api/deps.py -> project root
_PROJECT_ROOT = Path(__file__).resolve().parents[2]


def get_line_settings() -> LineSettings:
    return load_settings(env_file=_PROJECT_ROOT / ".env")


async def get_verified_body(
    request: Request,
    x_line_signature: str | None = Header(default=None),
    settings: LineSettings = Depends(get_line_settings),
) -> bytes:
    """Return the raw webhook body once its LINE signature checks out.

    Routes list this before `get_turn_handler` so unsigned requests never open
    an outbound HTTP client.
    """

    body = await request.body()
    verify_signature(body, settings.channel_secret, x_line_signature)
    return body


async def get_reply_sender(
    settings: LineSettings = Depends(get_line_settings),
) -> AsyncGenerator[ReplySender, None]:
    async with httpx.AsyncClient(timeout=10.0) as http:
        yield LineReplyClient(settings, http=http)


def get_randomness() -> RandomnessPort:
    return RandomRandomness()


def get_turn_handler(
    sender: ReplySender = Depends(get_reply_sender),
    rng: RandomnessPort = Depends(get_randomness),
) -> TurnHandler:
    return TurnHandler(vocabulary=get_vocabulary(), rng=rng, sender=sender)
