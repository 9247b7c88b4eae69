from __future__ import annotations

from pathlib import Path

from app.assets.registry import VocabularyIndex, load_vocabulary

# Loaded once per process, then only read; concurrent turns share it without locks.
_vocabulary: VocabularyIndex | None = None


def init_vocabulary(*, project_root: Path) -> VocabularyIndex:
    """Load `<project_root>/assets/vocabulary.csv` on first call; later calls reuse it."""

    global _vocabulary
    if _vocabulary is None:
        _vocabulary = load_vocabulary(root=project_root)
    return _vocabulary


def get_vocabulary() -> VocabularyIndex:
    if _vocabulary is None:
        raise RuntimeError("Vocabulary not loaded; the app lifespan calls init_vocabulary()")
    return _vocabulary


def reset_vocabulary_for_tests() -> None:
    """Drop the loaded station list so a test session can load its own fixture list."""

    global _vocabulary
    _vocabulary = None
