"""Environment-driven settings for objkit tooling.

Recognised variables (prefix ``OBJKIT_``)::

    OBJKIT_MAX_REPLACEMENTS=20
    OBJKIT_LOG_LEVEL=debug

Values accept booleans, ints, floats, or strings.  Unusable values fall back
to the defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .strings import DEFAULT_MAX_REPLACEMENTS

ENV_PREFIX = "OBJKIT_"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    max_replacements: int = DEFAULT_MAX_REPLACEMENTS
    log_level: str = "WARNING"


def _parse_value(raw: str) -> Any:
    if not raw:
        return raw
    lowered = raw.lower()
    if lowered in ("true", "yes", "on"):
        return True
    if lowered in ("false", "no", "off"):
        return False
    # numbers
    try:
        if "." in raw:
            return float(raw)
        return int(raw)
    except ValueError:
        return raw


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    defaults = Settings()

    max_replacements = defaults.max_replacements
    raw = env.get(ENV_PREFIX + "MAX_REPLACEMENTS")
    if raw is not None:
        parsed = _parse_value(raw.strip())
        if isinstance(parsed, int) and not isinstance(parsed, bool) and parsed >= 0:
            max_replacements = parsed
        else:
            logger.warning("Ignoring %sMAX_REPLACEMENTS=%r: expected a non-negative integer",
                           ENV_PREFIX, raw)

    log_level = defaults.log_level
    raw = env.get(ENV_PREFIX + "LOG_LEVEL")
    if raw is not None:
        if raw.strip().upper() in _LOG_LEVELS:
            log_level = raw.strip().upper()
        else:
            logger.warning("Ignoring %sLOG_LEVEL=%r: expected one of %s",
                           ENV_PREFIX, raw, ", ".join(_LOG_LEVELS))

    return Settings(max_replacements=max_replacements, log_level=log_level)
