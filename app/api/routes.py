from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.api.deps import get_turn_handler, get_verified_body
from app.line.handler import TurnHandler
from app.line.models import WebhookRequest

router = APIRouter()


@router.get("/healthcheck")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.post("/callback")
async def line_callback_route(
    # Order matters: the signature is checked before the handler (and its HTTP client) is built.
    body: bytes = Depends(get_verified_body),
    handler: TurnHandler = Depends(get_turn_handler),
) -> JSONResponse:
    try:
        payload = WebhookRequest.model_validate_json(body)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Malformed webhook body") from e

    await handler.handle_events(payload.events)
    return JSONResponse(status_code=status.HTTP_200_OK, content={"result": "処理完了"})
