from __future__ import annotations

from linebot.v3.exceptions import InvalidSignatureError
from linebot.v3.webhook import SignatureValidator


def verify_signature(body: bytes, channel_secret: str, signature: str | None) -> None:
    """Raise `InvalidSignatureError` unless `signature` is LINE's signature of `body`."""

    if not channel_secret or not signature:
        raise InvalidSignatureError("Missing channel secret or x-line-signature")
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidSignatureError("Webhook body is not UTF-8") from e

    if not SignatureValidator(channel_secret).validate(text, signature):
        raise InvalidSignatureError(f"Invalid signature. signature={signature}")
