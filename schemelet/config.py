from __future__ import annotations
import logging
import os
from typing import Optional


_DEFAULT_LOG_LEVEL = logging.WARNING


def value_from_env(var: str) -> Optional[str]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def get_log_level() -> int:
    """Level named by SCHEMELET_LOG_LEVEL, WARNING if unset or unknown."""
    raw = value_from_env('SCHEMELET_LOG_LEVEL')
    if raw is None:
        return _DEFAULT_LOG_LEVEL
    level = getattr(logging, raw.upper(), None)
    return level if isinstance(level, int) else _DEFAULT_LOG_LEVEL


def get_recursion_limit() -> Optional[int]:
    raw = value_from_env('SCHEMELET_RECURSION_LIMIT')
    if raw is None:
        return None
    try:
        limit = int(raw)
    except ValueError:
        return None
    return limit if limit > 0 else None
