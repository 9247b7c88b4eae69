from __future__ import annotations

import csv
import os
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from app.core.kana import LONG_VOWEL_MARK, katakana_to_hiragana

CSV_HEADER = ("syllable", "word")


@dataclass(frozen=True, slots=True)
class VocabularyIndex:
    """Syllable -> candidate words the bot may answer with.

    Keys are single hiragana syllables (never the long-vowel mark). Word order
    is preserved from the source so random picks are reproducible under a
    scripted randomness port. The mapping is a read-only view.
    """

    by_syllable: Mapping[str, tuple[str, ...]]
    _all_words: tuple[str, ...]

    @staticmethod
    def build(source: Mapping[str, Sequence[str]]) -> "VocabularyIndex":
        by_syllable: dict[str, tuple[str, ...]] = {}
        for syllable, words in source.items():
            if len(syllable) != 1 or syllable == LONG_VOWEL_MARK:
                raise VocabularyLoadError(f"Invalid syllable key: {syllable!r}")
            kept = tuple(w for w in words if w)
            if kept:
                by_syllable[syllable] = kept

        all_words = tuple(w for words in by_syllable.values() for w in words)
        return VocabularyIndex(by_syllable=MappingProxyType(by_syllable), _all_words=all_words)

    def lookup(self, syllable: str) -> tuple[str, ...]:
        return self.by_syllable.get(syllable, ())

    def all_words(self) -> tuple[str, ...]:
        return self._all_words

    def __contains__(self, item: object) -> bool:
        return isinstance(item, str) and item in self.by_syllable

    def __len__(self) -> int:
        return len(self._all_words)


class VocabularyLoadError(RuntimeError):
    pass


def _iter_vocabulary_rows(path: Path) -> Iterator[tuple[str, str]]:
    """Yield `(syllable, word)` pairs after checking the header.

    Rows with no word are skipped; a blank syllable is left for the caller to derive.
    """

    try:
        raw = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise VocabularyLoadError(f"Vocabulary file not found: {path}") from e

    rows = [[cell.strip() for cell in row] for row in csv.reader(raw.splitlines()) if any(c.strip() for c in row)]
    if not rows:
        raise VocabularyLoadError(f"Empty vocabulary CSV: {path}")
    if tuple(c.casefold() for c in rows[0][:2]) != CSV_HEADER:
        raise VocabularyLoadError(f"Unexpected header in {path}: {rows[0]}")

    for row in rows[1:]:
        if len(row) >= 2 and row[1]:
            yield row[0], row[1]


def load_vocabulary_csv(path: Path) -> VocabularyIndex:
    source: dict[str, list[str]] = {}
    for syllable, word in _iter_vocabulary_rows(path):
        source.setdefault(syllable or katakana_to_hiragana(word[0]), []).append(word)

    vocabulary = VocabularyIndex.build(source)
    # The resolver always needs at least one word to answer with.
    if not len(vocabulary):
        raise VocabularyLoadError(f"No words in vocabulary CSV: {path}")
    return vocabulary


def _fallback_vocabulary() -> VocabularyIndex:
    """Small built-in station list used when the vocabulary CSV is missing."""

    return VocabularyIndex.build(
        {
            "あ": ["あきはばら", "あさくさ"],
            "い": ["いけぶくろ"],
            "う": ["うえの"],
            "え": ["えびす"],
            "お": ["おおさか"],
            "か": ["かんだ"],
            "き": ["きょうと"],
            "こ": ["こうらくえん"],
            "し": ["しぶや", "しながわ"],
            "た": ["たまち"],
            "て": ["てんじん"],
            "と": ["とうきょう"],
            "な": ["なごや"],
            "め": ["めぐろ"],
            "よ": ["よよぎ"],
        }
    )


def load_vocabulary(*, root: Path) -> VocabularyIndex:
    # Fall back to the built-in list when the CSV is missing or broken.
    # Force strict behavior by setting SHIRITORI_STRICT_VOCABULARY=1.
    strict = os.getenv("SHIRITORI_STRICT_VOCABULARY", "").strip().lower() in {"1", "true", "yes"}

    try:
        return load_vocabulary_csv(root / "assets" / "vocabulary.csv")
    except VocabularyLoadError:
        if strict:
            raise
        return _fallback_vocabulary()
