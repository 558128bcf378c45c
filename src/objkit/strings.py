"""Bounded fixed-point string replacement."""

from __future__ import annotations

import logging
import re
from typing import Callable, Union

from .types import is_clean_number, is_function

DEFAULT_MAX_REPLACEMENTS = 50

logger = logging.getLogger(__name__)


def _replace_once(string: str, search, replacement) -> str:
    if isinstance(search, re.Pattern):
        try:
            return search.sub(replacement, string, count=1)
        except (re.error, IndexError) as e:
            # bad template such as an unknown group reference or name
            logger.debug("replace_all: replacement %r rejected by pattern: %s", replacement, e)
            return string
    return string.replace(search, replacement, 1)


def _accepts(search, replacement) -> bool:
    if isinstance(search, re.Pattern):
        return isinstance(search.pattern, str) and (isinstance(replacement, str) or is_function(replacement))
    return isinstance(search, str) and isinstance(replacement, str)


def replace_all(
    string: str,
    search: Union[str, "re.Pattern[str]"],
    replacement: Union[str, Callable[["re.Match[str]"], str]],
    max_replacements: int = DEFAULT_MAX_REPLACEMENTS,
) -> str:
    """Replace *search* one occurrence at a time, at most *max_replacements* times.

    Stops early once a pass leaves the string unchanged, so a replacement
    that reintroduces its own match cannot loop forever.  *search* may be a
    literal or a compiled pattern; a pattern's *replacement* may also be a
    callable taking the match.  Non-string input, an unusable search or
    replacement, or a bound that is not a non-negative number returns
    *string* as is.
    """
    if not isinstance(string, str):
        return string
    if not _accepts(search, replacement):
        logger.debug("replace_all skipped: cannot replace %r with %r", search, replacement)
        return string
    if not is_clean_number(max_replacements) or max_replacements < 0:
        logger.debug("replace_all skipped: invalid max_replacements %r", max_replacements)
        return string

    current = string
    for _ in range(int(max_replacements)):
        replaced = _replace_once(current, search, replacement)
        if replaced == current:
            return replaced
        current = replaced
    return current
