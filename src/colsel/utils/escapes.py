"""Backslash escape expansion for the output separator.

Lets users write ``-s '\\t'`` on the command line instead of embedding
a literal tab.  Unknown escapes are left untouched rather than rejected.
"""

from __future__ import annotations

import re

_SIMPLE_ESCAPES: dict[str, str] = {
    "\\": "\\",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "0": "\0",
}

_ESCAPE_RE = re.compile(
    r"\\(?:x(?P<hex2>[0-9A-Fa-f]{2})|u(?P<hex4>[0-9A-Fa-f]{4})|(?P<char>.))",
    re.DOTALL,
)


def _replace(match: re.Match[str]) -> str:
    if match.group("hex2") is not None:
        return chr(int(match.group("hex2"), 16))
    if match.group("hex4") is not None:
        return chr(int(match.group("hex4"), 16))
    return _SIMPLE_ESCAPES.get(match.group("char"), match.group(0))


def expand_backslash_escapes(text: str) -> str:
    """Return *text* with C-style backslash escapes expanded.

    Supported: ``\\\\ \\a \\b \\f \\n \\r \\t \\v \\0 \\xHH \\uHHHH``.
    A trailing lone backslash is kept as-is.
    """
    return _ESCAPE_RE.sub(_replace, text)
