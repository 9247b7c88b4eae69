from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

import httpx

from app.line.config import LineSettings
from app.line.models import ReplyRequest, TextMessage

REPLY_PATH = "/v2/bot/message/reply"


class LineApiError(RuntimeError):
    pass


class ReplySender(Protocol):
    async def reply(self, reply_token: str, lines: Sequence[str]) -> None: ...


class LineReplyClient:
    """Sends reply messages through the LINE Messaging API.

    The caller owns `http`; pass an `httpx.AsyncClient` with a mock transport in tests.
    """

    def __init__(self, settings: LineSettings, *, http: httpx.AsyncClient) -> None:
        self._settings = settings
        self._http = http

    async def reply(self, reply_token: str, lines: Sequence[str]) -> None:
        payload = ReplyRequest(
            reply_token=reply_token,
            messages=[TextMessage(text=line) for line in lines],
        )
        url = self._settings.api_base_url.rstrip("/") + REPLY_PATH
        try:
            resp = await self._http.post(
                url,
                json=payload.model_dump(by_alias=True),
                headers={"Authorization": f"Bearer {self._settings.channel_access_token}"},
            )
        except httpx.HTTPError as e:
            raise LineApiError(f"LINE reply request failed: {e}") from e

        if resp.status_code >= 400:
            raise LineApiError(f"LINE reply rejected ({resp.status_code}): {resp.text}")
