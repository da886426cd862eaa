from __future__ import annotations

import re
from typing import Iterable

_WS_RE = re.compile(r"\s+")


def strip_whitespace(s: str) -> str:
    """Remove every whitespace character (messages are typed with spaces)."""
    if s is None:
        return ""
    return _WS_RE.sub("", s)


def chunked(seq: Iterable, size: int):
    buf = []
    for x in seq:
        buf.append(x)
        if len(buf) == size:
            yield buf
            buf = []
    if buf:
        yield buf


def group_in_fives(msg: str) -> str:
    """Format msg in groups of five characters; the last group may be shorter."""
    return " ".join("".join(group) for group in chunked(msg, 5))
