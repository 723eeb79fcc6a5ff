from __future__ import annotations

"""Domain vocabulary shared across the matching heuristics.

Everything here is read-only lookup data. Order matters wherever a table is
scanned first-match-wins (typo corrections, adjacency), so these are plain
ordered dicts / lists rather than sets.
"""

from typing import Dict, List, Tuple

# Grape varieties and style words recognised in queries
WINE_VARIETIES: List[str] = [
    "chardonnay",
    "cabernet",
    "cabernet sauvignon",
    "franc",
    "pinot",
    "noir",
    "pinot noir",
    "blaufränkisch",
    "blaufrankisch",
    "merlot",
    "riesling",
    "syrah",
    "sauvignon",
    "blanc",
    "sauvignon blanc",
    "grüner veltliner",
    "gruner veltliner",
    "rosé",
    "rose",
    "red blend",
    "white blend",
    "cabernet franc",
    "proceedo",
]

# Frequently confused varieties that get an extra push when named on both sides
DISTINCTIVE_KEYWORDS: List[str] = [
    "riesling",
    "rosé",
    "rose",
    "cabernet franc",
]

# House label names that are not varieties but are asked for by name
LABEL_KEYWORDS: List[str] = [
    "farmhouse",
]

# Flagship line and its sub-variants (variant -> spellings)
FLAGSHIP_LABEL = "proceedo"
FLAGSHIP_VARIANTS: Dict[str, Tuple[str, ...]] = {
    "white": ("white",),
    "rosé": ("rosé", "rose"),
}

# misspelling -> canonical; multi-word entries precede their prefixes
TYPO_CORRECTIONS: Dict[str, str] = {
    "chardonay": "chardonnay",
    "cabenet": "cabernet",
    "savignon": "sauvignon",
    "savingon": "sauvignon",
    "reisling": "riesling",
    "resling": "riesling",
    "blafrankisch": "blaufrankisch",
    "rose": "rosé",
    "gruner veltliner": "grüner veltliner",
    "gruener veltliner": "grüner veltliner",
    "gruner": "grüner veltliner",
    "gruener": "grüner veltliner",
}

# Brand-like tokens a correction must never rewrite
PROTECTED_TOKENS: Tuple[str, ...] = (FLAGSHIP_LABEL,)

# Casual spellings of whole queries
COLLOQUIAL_SPELLINGS: Dict[str, str] = {
    "rose": "rosé",
}

# variety -> related keywords to try, in order, when the variety is missing
ADJACENT_VARIETIES: Dict[str, List[str]] = {
    "riesling": ["grüner veltliner", "chardonnay", "white"],
    "chardonnay": ["grüner veltliner", "white"],
    "cabernet": ["red blend", "merlot", "red"],
    "merlot": ["red blend", "cabernet", "red"],
    "rosé": ["rose", "white blend"],
    "pinot noir": ["red blend", "red"],
    "syrah": ["red blend", "red"],
    "proceedo": ["white", "rosé", "rose"],
}

# ---------------------------------------------------------------------------
# Intent phrasings
# ---------------------------------------------------------------------------

PRICE_PREFIX_HOW_MUCH_IS = "how much is"
PRICE_PREFIX_WHAT_IS_PRICE = "what is the price of"
PRICE_SUBSTRING_PRICE_OF = "price of"
PRICE_SUBSTRING_COST_OF = "cost of"
PRICE_PAIR_HOW_MUCH_DOES = ("how much does", "cost")

HISTORICAL_PHRASES: List[str] = [
    "do you have",
    "have you",
    "ever made",
    "previous",
    "past",
]
