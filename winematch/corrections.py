from __future__ import annotations

import re
from typing import Iterable, Mapping, Optional

from loguru import logger

from .constants import PROTECTED_TOKENS, TYPO_CORRECTIONS

_WORD_CHAR_RX = re.compile(r"\w")


def _enclosing_token(text: str, start: int, end: int) -> str:
    """Expand [start, end) outwards to the full word it sits in."""
    while start > 0 and _WORD_CHAR_RX.match(text[start - 1]):
        start -= 1
    while end < len(text) and _WORD_CHAR_RX.match(text[end]):
        end += 1
    return text[start:end]


def _find_unprotected(text: str, typo: str, protected: Iterable[str]) -> Optional[int]:
    for m in re.finditer(re.escape(typo), text):
        token = _enclosing_token(text, m.start(), m.end())
        if any(p and p in token for p in protected):
            logger.debug("Skipping correction '{}' inside protected token '{}'", typo, token)
            continue
        return m.start()
    return None


def correct(
    query: Optional[str],
    table: Mapping[str, str] = TYPO_CORRECTIONS,
    protected: Iterable[str] = PROTECTED_TOKENS,
) -> str:
    """
    Rewrite the first known misspelling in ``query``.

    The table is scanned in order and only the first hit is replaced; the
    result is lower-cased. Hits inside a protected brand-like token are
    ignored whatever their position in the table.
    """
    if not query:
        return ""
    lowered = str(query).lower().strip()
    protected = tuple(p.lower() for p in protected)

    for typo, fix in table.items():
        if not typo:
            continue
        idx = _find_unprotected(lowered, typo, protected)
        if idx is None:
            continue
        corrected = lowered[:idx] + fix + lowered[idx + len(typo):]
        logger.debug("Corrected typo '{}' -> '{}'", typo, fix)
        return corrected
    return lowered
