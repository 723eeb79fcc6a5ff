"""Query intent classification: price-only, historical or general."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .constants import (
    HISTORICAL_PHRASES,
    PRICE_PAIR_HOW_MUCH_DOES,
    PRICE_PREFIX_HOW_MUCH_IS,
    PRICE_PREFIX_WHAT_IS_PRICE,
    PRICE_SUBSTRING_COST_OF,
    PRICE_SUBSTRING_PRICE_OF,
)


@dataclass(frozen=True)
class PriceOnly:
    """The customer only wants a price; ``item_name`` is the scaffold-free guess."""

    item_name: str
    kind: str = "price_only"


@dataclass(frozen=True)
class Historical:
    """Past-tense / availability-agnostic ask ("have you ever made a Syrah")."""

    kind: str = "historical"


@dataclass(frozen=True)
class General:
    kind: str = "general"


Intent = Union[PriceOnly, Historical, General]


def _strip_leading_the(name: str) -> str:
    name = name.strip()
    if name.lower().startswith("the "):
        name = name[4:].strip()
    return name


def extract_price_item_name(query: Optional[str]) -> Optional[str]:
    """Return the item-name part of a price-phrased query, else None."""
    q = (query or "").strip()
    ql = q.lower()
    if not ql:
        return None

    how_much_does, cost = PRICE_PAIR_HOW_MUCH_DOES
    if ql.startswith(PRICE_PREFIX_HOW_MUCH_IS):
        name = q[len(PRICE_PREFIX_HOW_MUCH_IS):]
    elif PRICE_SUBSTRING_PRICE_OF in ql:
        # also covers the "what is the price of" prefix
        name = ql.split(PRICE_SUBSTRING_PRICE_OF, 1)[1]
    elif PRICE_SUBSTRING_COST_OF in ql:
        name = ql.split(PRICE_SUBSTRING_COST_OF, 1)[1]
    elif ql.startswith(PRICE_PREFIX_WHAT_IS_PRICE):
        name = q[len(PRICE_PREFIX_WHAT_IS_PRICE):]
    elif how_much_does in ql and cost in ql:
        name = ql.split(how_much_does, 1)[1].split(cost, 1)[0]
    else:
        return None

    return _strip_leading_the(name)


def is_historical(query: Optional[str]) -> bool:
    ql = (query or "").lower()
    return any(p in ql for p in HISTORICAL_PHRASES)


def classify(query: Optional[str]) -> Intent:
    """
    Classify a raw query once; PriceOnly beats Historical beats General.
    """
    name = extract_price_item_name(query)
    if name is not None:
        return PriceOnly(item_name=name)
    if is_historical(query):
        return Historical()
    return General()


def search_term(query: Optional[str], intent: Intent) -> str:
    """The text that should be matched against titles for this intent."""
    if isinstance(intent, PriceOnly):
        return intent.item_name
    return query or ""
