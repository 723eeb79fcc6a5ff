# winematch/ranking.py
from __future__ import annotations

from typing import Any, List, Optional

from loguru import logger

from . import config
from .catalog import coerce_catalog
from .config import CatalogItem, MatchResult, ScoringWeights
from .intent import Intent, PriceOnly, classify
from .scoring import build_query_context, score_item


def in_target_category(item: CatalogItem, category: str = config.TARGET_CATEGORY) -> bool:
    return (item.category or "").strip().lower() == category


def rank(
    items: Any,
    query: Optional[str],
    intent: Optional[Intent] = None,
    weights: Optional[ScoringWeights] = None,
) -> List[MatchResult]:
    """
    Score every in-category item and return the positive ones, best first.

    Ordering: score desc, then vintage desc, then catalog order (stable).
    Items whose scoring raises are logged and treated as non-matches.
    """
    catalog = coerce_catalog(items)
    if intent is None:
        intent = classify(query)
    if weights is None:
        weights = config.DEFAULT_WEIGHTS

    ctx = build_query_context(query, intent)
    price_only = isinstance(intent, PriceOnly)

    logger.debug(
        "Ranking '{}' (intent={}, term='{}') over {} catalog items",
        query, intent.kind, ctx.term, len(catalog),
    )

    scored = []
    for item in catalog:
        if not in_target_category(item):
            continue
        try:
            score, reasons = score_item(item, ctx, weights)
        except Exception as e:
            logger.warning("Scoring failed for item {} ('{}'); treating as no match: {}", item.id, item.title, e)
            continue
        if score <= 0:
            continue
        logger.debug(
            "Match: '{}' score={:.1f} reasons={}",
            item.title, score, "; ".join(r.describe() for r in reasons),
        )
        scored.append((item, score, reasons))

    scored.sort(key=lambda t: (-t[1], -t[0].vintage))

    return [
        MatchResult(item=item, score=score, reasons=tuple(reasons), price_only=price_only)
        for item, score, reasons in scored
    ]
