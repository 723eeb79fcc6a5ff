from __future__ import annotations

"""
Lexical relevance scoring for a single catalog item.

The scorer adds up independent, weighted signals (exact title, substring,
word overlap, typo correction, variety vocabulary, flagship label, vintage
recency) and falls back to token-level edit distance only when nothing else
fired. Every contribution is recorded as a structured ``Reason`` so the
ranking can be explained and asserted on.

Weights come from ``config.ScoringWeights``; the relative ordering of those
weights is validated there, not here.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from loguru import logger

from . import config
from .config import CatalogItem, ScoringWeights
from .constants import (
    DISTINCTIVE_KEYWORDS,
    FLAGSHIP_LABEL,
    FLAGSHIP_VARIANTS,
    LABEL_KEYWORDS,
    WINE_VARIETIES,
)
from .corrections import correct
from .fuzzy import first_fuzzy_pair
from .intent import Historical, Intent, classify, search_term
from .normalize import (
    canonicalize_colloquial,
    clean_title,
    extract_vintage,
    normalize_for_comparison,
    word_tokens,
)
from .pipeline_types import Reason, ReasonKind


@dataclass
class QueryContext:
    """Everything about the query that does not depend on the item."""

    raw: str                       # lower-cased, trimmed query
    intent: Intent
    term: str                      # normalised search term
    term_words: List[str]          # term tokens long enough for overlap
    corrected: Optional[str]       # normalised corrected term, if it changed
    varieties: List[str] = field(default_factory=list)
    distinctive: List[str] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)
    flagship: bool = False
    flagship_variants: List[str] = field(default_factory=list)

    @property
    def include_unavailable(self) -> bool:
        return isinstance(self.intent, Historical)


def build_query_context(query: Optional[str], intent: Optional[Intent] = None) -> QueryContext:
    raw = (query or "").lower().strip()
    if intent is None:
        intent = classify(query)

    term_text = search_term(query, intent)
    term = canonicalize_colloquial(term_text)
    term_words = word_tokens(term, min_len=config.MIN_WORD_LEN)

    corrected_raw = correct(term_text)
    corrected = None
    if corrected_raw and corrected_raw != term_text.lower().strip():
        corrected = normalize_for_comparison(corrected_raw)

    flagship = FLAGSHIP_LABEL in raw
    variants = [
        name
        for name, spellings in FLAGSHIP_VARIANTS.items()
        if any(s in raw for s in spellings)
    ] if flagship else []

    ctx = QueryContext(
        raw=raw,
        intent=intent,
        term=term,
        term_words=term_words,
        corrected=corrected,
        varieties=[v for v in WINE_VARIETIES if v in raw],
        distinctive=[k for k in DISTINCTIVE_KEYWORDS if k in raw],
        labels=[k for k in LABEL_KEYWORDS if k in raw],
        flagship=flagship,
        flagship_variants=variants,
    )
    if ctx.varieties:
        logger.debug("Detected varieties: {}", ", ".join(ctx.varieties))
    return ctx


def _word_matches(word: str, title_words: List[str]) -> bool:
    for tw in title_words:
        if word in tw:
            return True
        if len(tw) >= config.MIN_WORD_LEN and tw in word:
            return True
    return False


def score_item(
    item: CatalogItem,
    ctx: QueryContext,
    weights: ScoringWeights = config.DEFAULT_WEIGHTS,
) -> Tuple[float, List[Reason]]:
    """
    Score one catalog item against a prepared query context.

    Returns ``(score, reasons)``; unavailable items score 0 with no reasons
    unless the query asks about past wines.
    """
    if not item.is_available and not ctx.include_unavailable:
        return 0.0, []

    title = clean_title(item.title)
    title_lower = title.lower()
    norm_title = canonicalize_colloquial(title)
    title_words = word_tokens(norm_title)

    score = 0.0
    reasons: List[Reason] = []

    def add(kind: ReasonKind, magnitude: float, *payload: str) -> None:
        nonlocal score
        score += magnitude
        reasons.append(Reason(kind=kind, magnitude=magnitude, payload=tuple(payload)))

    # Flagship line beats every generic signal
    if ctx.flagship and FLAGSHIP_LABEL in title_lower:
        hit = next(
            (
                name
                for name in ctx.flagship_variants
                if any(s in title_lower for s in FLAGSHIP_VARIANTS[name])
            ),
            None,
        )
        if hit:
            add(ReasonKind.FLAGSHIP_VARIANT, weights.flagship_variant_match, FLAGSHIP_LABEL, hit)
        else:
            add(ReasonKind.FLAGSHIP, weights.flagship_match, FLAGSHIP_LABEL)

    term = ctx.term
    if term and norm_title:
        if norm_title == term:
            add(ReasonKind.EXACT_TITLE, weights.exact_title)

        if term in norm_title:
            add(ReasonKind.TITLE_CONTAINS_QUERY, weights.title_contains_query)
        elif norm_title in term:
            add(ReasonKind.QUERY_CONTAINS_TITLE, weights.query_contains_title)

    matching = [w for w in ctx.term_words if _word_matches(w, title_words)]
    if matching:
        fraction = len(matching) / max(1, len(ctx.term_words))
        add(
            ReasonKind.WORD_OVERLAP,
            fraction * weights.word_overlap,
            f"{len(matching)}/{len(ctx.term_words)}",
        )

    if ctx.corrected and ctx.corrected in norm_title:
        add(ReasonKind.TYPO_CORRECTION, weights.typo_correction, ctx.corrected)

    if ctx.varieties:
        in_title = [v for v in ctx.varieties if v in title_lower]
        if in_title:
            add(ReasonKind.VARIETY_IN_TITLE, weights.variety_in_title, *in_title)
        else:
            description = (item.description or "").lower()
            in_desc = [v for v in ctx.varieties if v in description]
            if in_desc:
                add(ReasonKind.VARIETY_IN_DESCRIPTION, weights.variety_in_description, *in_desc)

    for keyword in ctx.distinctive:
        if keyword in title_lower:
            add(ReasonKind.DISTINCTIVE_KEYWORD, weights.distinctive_keyword, keyword)

    for keyword in ctx.labels:
        if keyword in title_lower:
            add(ReasonKind.LABEL_KEYWORD, weights.label_keyword, keyword)

    # Last resort for misspellings nothing above caught
    if score == 0:
        pair = first_fuzzy_pair(ctx.term_words, title_words)
        if pair is not None:
            q, t, sim = pair
            add(ReasonKind.FUZZY, sim * weights.fuzzy, q, t, f"{sim:.2f}")

    if score > 0:
        year = extract_vintage(item.title)
        if year > config.RECENT_VINTAGE_AFTER:
            add(ReasonKind.RECENT_VINTAGE, weights.recent_vintage, str(year))
        if ctx.include_unavailable and not item.is_available:
            add(ReasonKind.HISTORICAL, weights.historical)

    return score, reasons
