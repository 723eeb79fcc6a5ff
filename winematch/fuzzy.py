from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .config import FUZZY_MIN_TOKEN_LEN, FUZZY_THRESHOLD


def levenshtein(a: str, b: str) -> int:
    """Edit distance with unit insert/delete/substitute costs."""
    if not a:
        return len(b)
    if not b:
        return len(a)

    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i] + [0] * len(b)
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            cur[j] = min(
                prev[j] + 1,         # deletion
                cur[j - 1] + 1,      # insertion
                prev[j - 1] + cost,  # substitution
            )
        prev = cur
    return prev[-1]


def similarity(a: str, b: str) -> float:
    """1.0 for a case-insensitive match, else 1 - distance / longer length."""
    a = (a or "").lower()
    b = (b or "").lower()
    if a == b:
        return 1.0
    longest = max(len(a), len(b))
    return 1.0 - levenshtein(a, b) / longest


def first_fuzzy_pair(
    query_tokens: Sequence[str],
    title_tokens: Sequence[str],
    threshold: float = FUZZY_THRESHOLD,
    min_len: int = FUZZY_MIN_TOKEN_LEN,
) -> Optional[Tuple[str, str, float]]:
    """
    Return the first (query_token, title_token, similarity) above ``threshold``.

    Query tokens are the outer loop, title tokens the inner one; query tokens
    shorter than ``min_len`` never take part.
    """
    for q in query_tokens:
        if len(q) < min_len:
            continue
        for t in title_tokens:
            sim = similarity(q, t)
            if sim > threshold:
                return q, t, sim
    return None
