"""
One-call entry point: classify, rank, and fall back when nothing matched.
"""

from __future__ import annotations

from typing import Any, List, Optional

from loguru import logger
from pydantic import BaseModel

from .catalog import coerce_catalog
from .config import MatchResult, ScoringWeights
from .fallback import Suggestion, suggest_alternatives
from .intent import classify, search_term
from .ranking import rank


class SearchOutcome(BaseModel):
    query: str
    intent: str
    results: List[MatchResult] = []
    suggestion: Optional[Suggestion] = None


def search(query: Optional[str], catalog: Any, weights: Optional[ScoringWeights] = None) -> SearchOutcome:
    items = coerce_catalog(catalog)
    intent = classify(query)
    results = rank(items, query, intent=intent, weights=weights)

    suggestion = None
    if not results:
        suggestion = suggest_alternatives(search_term(query, intent), items)

    logger.info(
        "Search '{}': intent={} results={} suggestion={}",
        query, intent.kind, len(results), suggestion.kind.value if suggestion else None,
    )
    return SearchOutcome(
        query=query or "",
        intent=intent.kind,
        results=results,
        suggestion=suggestion,
    )
