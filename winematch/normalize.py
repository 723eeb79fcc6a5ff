from __future__ import annotations

"""
Text normalisation helpers shared by the scorer, ranker and fallback.

Queries and catalog titles must go through the same view of text before they
are compared, otherwise "Estate Chardonnay, 2022." and "estate chardonnay"
would never meet.

Public helpers:

* normalize_for_comparison(text) -> str
    Lower-case, punctuation-free, whitespace-collapsed comparison form.
    The vintage year is removed by default.

* canonicalize_colloquial(text) -> str
    Comparison form with casual whole-query spellings mapped to the
    catalog spelling ("rose" -> "rosé").

* extract_vintage(title) -> int
    First 19xx/20xx token of a title, 0 when there is none.
"""

import re
from typing import List

from .constants import COLLOQUIAL_SPELLINGS

MAX_INPUT_CHARS = 2_000  # queries and titles are short; cap pathological input

_VINTAGE_RX = re.compile(r"\b(?:19|20)\d{2}\b")
_NON_WORD_RX = re.compile(r"[^\w\s]")
_SPACE_RX = re.compile(r"\s+")
# a stray period at the end of a title, optionally before the vintage
_TRAILING_PERIOD_RX = re.compile(r"\.\s*((?:19|20)\d{2})?\s*$")


def _as_text(text) -> str:
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)
    if len(text) > MAX_INPUT_CHARS:
        text = text[:MAX_INPUT_CHARS]
    return text


def extract_vintage(title) -> int:
    match = _VINTAGE_RX.search(_as_text(title))
    return int(match.group(0)) if match else 0


def strip_vintage(text) -> str:
    """Remove the first vintage token only; later 4-digit numbers stay."""
    return _VINTAGE_RX.sub("", _as_text(text), count=1).strip()


def clean_title(title) -> str:
    """Drop the trailing period some catalog titles carry ("Riesling. 2021")."""
    text = _as_text(title)

    def _keep_year(m: re.Match) -> str:
        return f" {m.group(1)}" if m.group(1) else ""

    return _TRAILING_PERIOD_RX.sub(_keep_year, text).strip()


def normalize_for_comparison(text, strip_year: bool = True) -> str:
    text = _as_text(text)
    if not text:
        return ""
    if strip_year:
        text = strip_vintage(text)
    text = text.lower()
    text = _NON_WORD_RX.sub("", text)
    return _SPACE_RX.sub(" ", text).strip()


def canonicalize_colloquial(text) -> str:
    norm = normalize_for_comparison(text)
    return COLLOQUIAL_SPELLINGS.get(norm, norm)


def word_tokens(text, min_len: int = 1) -> List[str]:
    """Whitespace tokens of an already-normalised string."""
    return [w for w in _as_text(text).split() if len(w) >= min_len]
