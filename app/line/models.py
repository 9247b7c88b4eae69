from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _LineModel(BaseModel):
    # LINE sends camelCase keys and adds fields over time.
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class EventSource(_LineModel):
    type: str
    user_id: str | None = Field(default=None, alias="userId")
    group_id: str | None = Field(default=None, alias="groupId")
    room_id: str | None = Field(default=None, alias="roomId")


class EventMessage(_LineModel):
    id: str | None = None
    type: str
    # Only present for text messages.
    text: str | None = None


class WebhookEvent(_LineModel):
    type: str
    reply_token: str | None = Field(default=None, alias="replyToken")
    source: EventSource | None = None
    message: EventMessage | None = None


class WebhookRequest(_LineModel):
    destination: str | None = None
    events: list[WebhookEvent] = Field(default_factory=list)


class TextMessage(_LineModel):
    type: str = "text"
    text: str


class ReplyRequest(_LineModel):
    reply_token: str = Field(alias="replyToken")
    messages: list[TextMessage]
