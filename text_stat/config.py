from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from text_stat.patterns import (
    DEFAULT_EXCLUDE,
    DEFAULT_LINE_SEPARATOR,
    DEFAULT_SENTENCE_SEPARATOR,
    PatternLike,
)

LOGGER = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def detect_unicode_case_folding() -> bool:
    """Probe whether string lowercasing handles non-ASCII letters."""

    return "ÄÖÜΣЖ".lower() == "äöüσж"


def env_path(var_name: str, default: str) -> Path:
    return Path(os.getenv(var_name, default))


def env_int(var_name: str, default: int) -> int:
    return int(os.getenv(var_name, str(default)))


def env_bool(var_name: str, default: bool) -> bool:
    raw = os.getenv(var_name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {var_name}: '{raw}'. Expected one of 1/0, true/false, yes/no, on/off.")


@dataclass(frozen=True)
class TextStatOptions:
    """Configuration for text analysis."""

    exclude: PatternLike = DEFAULT_EXCLUDE
    line_separator: PatternLike = DEFAULT_LINE_SEPARATOR
    sentence_separator: PatternLike = DEFAULT_SENTENCE_SEPARATOR
    unicode_case_folding: bool = field(default_factory=detect_unicode_case_folding)


def load_options() -> TextStatOptions:
    """Build options from TEXT_STAT_* environment variables."""

    unicode_case_folding = env_bool("TEXT_STAT_UNICODE_CASE_FOLDING", detect_unicode_case_folding())
    options = TextStatOptions(
        exclude=os.getenv("TEXT_STAT_EXCLUDE") or DEFAULT_EXCLUDE,
        line_separator=os.getenv("TEXT_STAT_LINE_SEPARATOR") or DEFAULT_LINE_SEPARATOR,
        sentence_separator=os.getenv("TEXT_STAT_SENTENCE_SEPARATOR") or DEFAULT_SENTENCE_SEPARATOR,
        unicode_case_folding=unicode_case_folding,
    )
    LOGGER.debug("Loaded options: unicode_case_folding=%s", options.unicode_case_folding)
    return options
