from __future__ import annotations
import logging
import os


# Prompt written before each line is read
PROMPT = "> "

# Defaults
_DEFAULT_LOG_LEVEL = "WARNING"


def level_from_env(var: str, default: str) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        raw = default
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    # getLevelName returns "Level X" for names it does not know
    return level if isinstance(level, int) else logging.getLevelName(default)


def get_log_level() -> int:
    return level_from_env('SPANLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL)
