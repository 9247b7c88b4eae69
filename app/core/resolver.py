"""Single-turn shiritori resolution.

Everything here is pure: the vocabulary is read-only and randomness comes in
through a port, so a scripted port makes every reply deterministic.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from app.assets.registry import VocabularyIndex
from app.core import messages
from app.core.kana import (
    LONG_VOWEL_MARK,
    LOSS_SYLLABLE,
    NormalizedMessage,
    fold_small_kana,
    katakana_to_hiragana,
    normalize,
)
from app.core.randomness import RandomnessPort


class MessageType(StrEnum):
    text = "text"
    other = "other"


class RoundOutcome(StrEnum):
    player_loss = "player_loss"
    bot_loss = "bot_loss"
    continued = "continued"
    degenerate_draw = "degenerate_draw"
    rejected_non_text = "rejected_non_text"
    rejected_non_hiragana = "rejected_non_hiragana"


@dataclass(frozen=True, slots=True)
class TurnResult:
    """Reply lines for one turn plus how the round ended.

    - `word`: the word the bot played, if any.
    - `bot_conceded`: the bot's own word ended in the loss syllable.
    """

    lines: tuple[str, ...]
    outcome: RoundOutcome
    word: str | None = None
    bot_conceded: bool = False


def chain_key(canonical: str) -> str | None:
    """Return the syllable the next word must start with.

    Scans from the end, skipping long-vowel marks. Small kana are folded to
    their full-size form. Returns None when nothing but long-vowel marks (or
    nothing at all) was sent.
    """

    for ch in reversed(canonical):
        folded = fold_small_kana(ch)
        if folded != LONG_VOWEL_MARK:
            return folded
    return None


def ends_in_loss_syllable(word: str) -> bool:
    return katakana_to_hiragana(word).endswith(LOSS_SYLLABLE)


def _pick(candidates: Sequence[str], rng: RandomnessPort) -> str:
    return candidates[rng.next_int(len(candidates))]


def _play(
    word: str,
    *,
    outcome: RoundOutcome,
    lead: tuple[str, ...] = (),
) -> TurnResult:
    lines = (*lead, word)
    if ends_in_loss_syllable(word):
        return TurnResult(
            lines=(*lines, messages.BOT_SELF_LOSS, messages.YOUR_TURN),
            outcome=outcome,
            word=word,
            bot_conceded=True,
        )
    return TurnResult(lines=lines, outcome=outcome, word=word)


def resolve(
    message_type: MessageType | str,
    message: NormalizedMessage,
    *,
    vocabulary: VocabularyIndex,
    rng: RandomnessPort,
) -> TurnResult:
    if message_type != MessageType.text:
        return TurnResult(lines=(messages.NON_TEXT,), outcome=RoundOutcome.rejected_non_text)

    if not message.is_hiragana_only:
        return TurnResult(lines=(messages.NON_HIRAGANA,), outcome=RoundOutcome.rejected_non_hiragana)

    key = chain_key(message.canonical)

    if key is None:
        return TurnResult(
            lines=(messages.NO_WORDS_LEFT, messages.LONG_VOWEL_UNFAIR, messages.YOUR_TURN),
            outcome=RoundOutcome.degenerate_draw,
        )

    if key == LOSS_SYLLABLE:
        word = _pick(vocabulary.all_words(), rng)
        return _play(word, outcome=RoundOutcome.player_loss, lead=(messages.PLAYER_LOSS, messages.MY_TURN))

    candidates = vocabulary.lookup(key)
    if not candidates:
        return TurnResult(lines=(messages.NO_WORDS_LEFT, messages.YOUR_TURN), outcome=RoundOutcome.bot_loss)

    return _play(_pick(candidates, rng), outcome=RoundOutcome.continued)


def resolve_turn(
    raw_text: str,
    message_type: MessageType | str,
    *,
    vocabulary: VocabularyIndex,
    rng: RandomnessPort,
) -> TurnResult:
    """Normalize `raw_text` and resolve it in one call."""

    return resolve(message_type, normalize(raw_text), vocabulary=vocabulary, rng=rng)
