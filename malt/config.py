from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional


_DEFAULT_PROMPT = "user> "
_DEFAULT_LOG_LEVEL = "WARNING"


def get_prompt() -> str:
    return os.environ.get("MALT_PROMPT", _DEFAULT_PROMPT)


def get_log_level() -> int:
    raw = os.environ.get("MALT_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns a str ("Level X") for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_prelude_path() -> Optional[Path]:
    raw = os.environ.get("MALT_PRELUDE")
    if not raw or not raw.strip():
        return None
    return Path(raw.strip())
