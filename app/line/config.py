from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_API_BASE_URL = "https://api.line.me"


@dataclass(frozen=True, slots=True)
class LineSettings:
    channel_secret: str
    channel_access_token: str
    api_base_url: str = DEFAULT_API_BASE_URL


def settings_from_env() -> LineSettings:
    return LineSettings(
        channel_secret=os.environ.get("LINE_CHANNEL_SECRET", ""),
        channel_access_token=os.environ.get("LINE_CHANNEL_ACCESS_TOKEN", ""),
        api_base_url=os.environ.get("LINE_API_BASE_URL", DEFAULT_API_BASE_URL),
    )


def load_settings(*, env_file: Path | None = None) -> LineSettings:
    """Read settings from the environment, optionally seeded from a `.env` file.

    Values already present in the environment win over the file.
    """

    if env_file is not None and env_file.exists():
        load_dotenv(dotenv_path=env_file, override=False)
    return settings_from_env()
