from __future__ import annotations

from dataclasses import dataclass

# Code-point ranges (inclusive).
HIRAGANA_FIRST = 0x3041  # ぁ
HIRAGANA_LAST = 0x3093  # ん
KATAKANA_FIRST = 0x30A1  # ァ
KATAKANA_LAST = 0x30F3  # ン
KATAKANA_TO_HIRAGANA_OFFSET = 0x60

LONG_VOWEL_MARK = "ー"
LOSS_SYLLABLE = "ん"

SMALL_KANA_FOLDS: dict[str, str] = {
    "っ": "つ",
    "ゃ": "や",
    "ゅ": "ゆ",
    "ょ": "よ",
    "ぁ": "あ",
    "ぃ": "い",
    "ぅ": "う",
    "ぇ": "え",
    "ぉ": "お",
}


@dataclass(frozen=True, slots=True)
class NormalizedMessage:
    canonical: str
    is_hiragana_only: bool


def is_hiragana(ch: str) -> bool:
    return HIRAGANA_FIRST <= ord(ch) <= HIRAGANA_LAST


def is_katakana(ch: str) -> bool:
    # ヴ/ヵ/ヶ sit past ン and have no hiragana counterpart in the range above.
    return KATAKANA_FIRST <= ord(ch) <= KATAKANA_LAST


def katakana_to_hiragana(text: str) -> str:
    return "".join(chr(ord(ch) - KATAKANA_TO_HIRAGANA_OFFSET) if is_katakana(ch) else ch for ch in text)


def is_hiragana_only(text: str) -> bool:
    """True if every character is hiragana or the long-vowel mark.

    The empty string counts as hiragana-only.
    """

    return all(is_hiragana(ch) or ch == LONG_VOWEL_MARK for ch in text)


def fold_small_kana(ch: str) -> str:
    return SMALL_KANA_FOLDS.get(ch, ch)


def normalize(raw: str) -> NormalizedMessage:
    """Fold katakana to hiragana and classify the result.

    Katakana is accepted as a courtesy; everything else outside the hiragana
    block (latin, kanji, ヴ, punctuation) makes the message invalid.
    """

    canonical = katakana_to_hiragana(raw)
    return NormalizedMessage(canonical=canonical, is_hiragana_only=is_hiragana_only(canonical))
