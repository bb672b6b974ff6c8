"""Title casing of text."""

from __future__ import annotations

import re

_WORD = re.compile(r"\w+(?:['\u2019]\w+)*")


def _title_word(match: re.Match[str]) -> str:
    word = match.group(0)
    return word[:1].upper() + word[1:].lower()


def title(s: str) -> str:
    """Return ``s`` with each word capitalised and the rest lower-cased."""
    return _WORD.sub(_title_word, s)