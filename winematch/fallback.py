from __future__ import annotations

"""
Fallback suggestions for queries that matched nothing.

Two questions are asked, in order:

1. Did we ever carry it?  The full catalog is ranked again with
   availability ignored; if the best hit is a discontinued wine, that is the
   answer.
2. Is it a variety we know neighbours for?  The adjacency table maps e.g.
   "syrah" to ["red blend", "red"]; the first related keyword that has
   available wines wins and up to ``MAX_ALTERNATIVES`` of them are offered.

Otherwise an explicit NOT_FOUND suggestion is returned.
"""

from enum import Enum
from typing import Any, List, Optional

from loguru import logger
from pydantic import BaseModel

from . import config
from .catalog import coerce_catalog
from .config import MatchResult
from .constants import ADJACENT_VARIETIES
from .intent import Historical
from .normalize import canonicalize_colloquial
from .pipeline_types import Reason, ReasonKind
from .ranking import in_target_category, rank


class SuggestionKind(str, Enum):
    HISTORICAL_UNAVAILABLE = "historical_unavailable"
    ALTERNATIVES = "alternatives"
    NOT_FOUND = "not_found"


class Suggestion(BaseModel):
    kind: SuggestionKind
    term: str
    keyword: Optional[str] = None
    results: List[MatchResult] = []

    @property
    def is_empty(self) -> bool:
        return self.kind == SuggestionKind.NOT_FOUND


def _recognised_keyword(term: str) -> Optional[str]:
    lowered = term.lower()
    canonical = canonicalize_colloquial(term)
    for keyword in ADJACENT_VARIETIES:
        if keyword in lowered or keyword in canonical:
            return keyword
    return None


def suggest_alternatives(
    unmatched_term: Optional[str],
    full_catalog: Any,
    max_alternatives: int = config.MAX_ALTERNATIVES,
) -> Suggestion:
    term = (unmatched_term or "").strip()
    items = coerce_catalog(full_catalog)

    historical = rank(items, term, intent=Historical())
    if historical and not historical[0].item.is_available:
        logger.info("'{}' matches discontinued wine '{}'", term, historical[0].item.title)
        return Suggestion(
            kind=SuggestionKind.HISTORICAL_UNAVAILABLE,
            term=term,
            results=[historical[0]],
        )

    keyword = _recognised_keyword(term)
    if keyword is None:
        return Suggestion(kind=SuggestionKind.NOT_FOUND, term=term)

    available = [i for i in items if i.is_available and in_target_category(i)]
    for related in ADJACENT_VARIETIES[keyword]:
        hits = [i for i in available if related in i.title.lower()]
        if not hits:
            continue
        logger.info("No '{}' available; suggesting {} '{}' wines", keyword, len(hits), related)
        reason = Reason(kind=ReasonKind.ADJACENT_KEYWORD, magnitude=0.0, payload=(keyword, related))
        return Suggestion(
            kind=SuggestionKind.ALTERNATIVES,
            term=term,
            keyword=keyword,
            results=[
                MatchResult(item=i, score=0.0, reasons=(reason,))
                for i in hits[:max_alternatives]
            ],
        )

    return Suggestion(kind=SuggestionKind.NOT_FOUND, term=term, keyword=keyword)
