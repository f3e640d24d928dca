from __future__ import annotations

import re
from typing import Optional, Pattern

from .config import EvidenceWindow

_NEWLINES = re.compile(r"\r?\n")


def pattern(expr: str) -> Pattern[str]:
    return re.compile(expr, re.IGNORECASE)


def contains(text: str, rex: Pattern[str]) -> bool:
    return rex.search(text) is not None


def contains_any(text: str, phrases) -> bool:
    lowered = text.lower()
    return any(phrase in lowered for phrase in phrases)


def evidence(text: str, rex: Pattern[str], window: Optional[EvidenceWindow] = None) -> Optional[str]:
    """Excerpt around the first match of `rex`, or None when nothing matches."""
    match = rex.search(text)
    if match is None:
        return None
    window = window or EvidenceWindow()
    start = match.start()
    excerpt = text[max(0, start - window.before) : min(len(text), start + window.after)]
    return _NEWLINES.sub(" ", excerpt)
