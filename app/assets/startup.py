from __future__ import annotations

import logging
from pathlib import Path

from app.assets.singleton import init_vocabulary

logger = logging.getLogger(__name__)


def init_vocabulary_for_app() -> None:
    # project root is two levels up from this file: app/assets/startup.py
    project_root = Path(__file__).resolve().parents[2]
    vocabulary = init_vocabulary(project_root=project_root)
    logger.info("Vocabulary loaded: %d words, %d syllables", len(vocabulary), len(vocabulary.by_syllable))
