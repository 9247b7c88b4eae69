from __future__ import annotations

import base64
import hashlib
import hmac
import os
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from app.assets.registry import VocabularyIndex, load_vocabulary


class ScriptedRandomness:
    """Randomness port returning scripted values (0 once the script runs out).

    Records every bound it was asked for.
    """

    def __init__(self, values: Sequence[int] = ()) -> None:
        self._values = list(values)
        self.bounds: list[int] = []

    def next_int(self, bound: int) -> int:
        self.bounds.append(bound)
        value = self._values.pop(0) if self._values else 0
        assert 0 <= value < bound, f"scripted value {value} outside [0, {bound})"
        return value


class RecordingSender:
    def __init__(self) -> None:
        self.replies: list[tuple[str, list[str]]] = []

    async def reply(self, reply_token: str, lines: Sequence[str]) -> None:
        self.replies.append((reply_token, list(lines)))


TESTS_ROOT = Path(__file__).resolve().parent


@pytest.fixture(scope="session", autouse=True)
def _station_list_from_tests_assets() -> None:
    # Strict mode: a broken tests/assets/vocabulary.csv must fail loudly
    # instead of silently switching to the built-in station list.
    os.environ["SHIRITORI_STRICT_VOCABULARY"] = "1"

    from app.assets.singleton import init_vocabulary, reset_vocabulary_for_tests

    reset_vocabulary_for_tests()
    init_vocabulary(project_root=TESTS_ROOT)


def sign_body(body: bytes, channel_secret: str) -> str:
    """Produce the `x-line-signature` LINE would send for `body`."""

    digest = hmac.new(channel_secret.encode("utf-8"), body, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


@pytest.fixture()
def sign() -> Callable[[bytes, str], str]:
    return sign_body


@pytest.fixture()
def vocabulary() -> VocabularyIndex:
    return load_vocabulary(root=TESTS_ROOT)


@pytest.fixture()
def scripted_rng() -> type[ScriptedRandomness]:
    return ScriptedRandomness


@pytest.fixture()
def sender() -> RecordingSender:
    return RecordingSender()
