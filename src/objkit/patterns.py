"""Fixed regular expressions shipped with objkit."""

import re
from types import SimpleNamespace

# https URL: optional user:pass@, public dotted-quad or hostname, optional
# port and path. Loopback, link-local and RFC 1918 addresses are rejected.
_HTTPS_URL = (
    r"(?:(?:(?:https):)//)"
    r"(?:\S+(?::\S*)?@)?"
    r"(?:"
    r"(?!(?:10|127)(?:\.\d{1,3}){3})"
    r"(?!(?:169\.254|192\.168)(?:\.\d{1,3}){2})"
    r"(?!172\.(?:1[6-9]|2\d|3[0-1])(?:\.\d{1,3}){2})"
    r"(?:[1-9]\d?|1\d\d|2[01]\d|22[0-3])"
    r"(?:\.(?:1?\d{1,2}|2[0-4]\d|25[0-5])){2}"
    r"(?:\.(?:[1-9]\d?|1\d\d|2[0-4]\d|25[0-4]))"
    r"|"
    r"(?:(?:[a-z0-9\u00a1-\uffff][a-z0-9\u00a1-\uffff_-]{0,62})?[a-z0-9\u00a1-\uffff]\.)+"
    r"(?:[a-z\u00a1-\uffff]{2,}\.?)"
    r")"
    r"(?::\d{2,5})?"
    r"(?:[/?#]\S*)?"
)

REGEX = SimpleNamespace(
    number=re.compile(r"^[\d]*\Z", re.ASCII),
    integer=re.compile(r"^[0-9]*\Z"),
    https_url=re.compile(_HTTPS_URL, re.IGNORECASE),
    whitespace=re.compile(r"^ +\Z"),
)


def matching_patterns(value: str):
    """Names of the :data:`REGEX` patterns that find a match in *value*."""
    if not isinstance(value, str):
        return []
    return [name for name, pattern in vars(REGEX).items() if pattern.search(value)]
