from __future__ import annotations

"""
Plain-text rendering of match results for the chat/SMS responders.

Price-only queries get a single price line; everything else gets the full
card. Missing prices and descriptions degrade to placeholder text.
"""

import html
import re
from typing import Optional, Sequence

from bs4 import BeautifulSoup

from .config import CatalogItem, MatchResult
from .fallback import Suggestion, SuggestionKind
from .normalize import extract_vintage, strip_vintage

NO_DESCRIPTION = "No description available."
PRICE_UNAVAILABLE = "Price unavailable"
NO_MATCHES = "No matching products found."


def clean_text(text: Optional[str]) -> str:
    """Strip HTML tags and entities from catalog copy."""
    if not text:
        return NO_DESCRIPTION
    soup = BeautifulSoup(str(text), "html.parser")
    cleaned = html.unescape(soup.get_text(" ", strip=True))
    cleaned = cleaned.replace("\xa0", " ")
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    return cleaned or NO_DESCRIPTION


def format_price(minor_units: Optional[int]) -> str:
    if minor_units is None or isinstance(minor_units, bool):
        return PRICE_UNAVAILABLE
    try:
        return f"${int(minor_units) / 100:.2f}"
    except (TypeError, ValueError):
        return PRICE_UNAVAILABLE


def format_price_only(item: CatalogItem) -> str:
    title = clean_text(item.title)
    if item.price_minor_units is not None:
        return f"💲 The price of **{title}** is {format_price(item.price_minor_units)}."
    return f"💲 Price information for **{title}** is unavailable."


def format_details(item: CatalogItem) -> str:
    parts = [f"🍷 **{clean_text(item.title)}**"]
    if item.teaser:
        parts.append(f"📌 {clean_text(item.teaser)}")
    parts.append(f"📖 {clean_text(item.description)}")
    if item.price_minor_units is not None:
        parts.append(f"💲 Price: {format_price(item.price_minor_units)}")
    else:
        parts.append("💲 Price information unavailable")
    if not item.is_available:
        parts.append("⚠️ Please note that this wine is not currently available for purchase.")
    return "\n\n".join(parts)


def format_match(result: MatchResult) -> str:
    """Render one result; price-only results never include the description."""
    if result.price_only:
        return format_price_only(result.item)
    return format_details(result.item)


def format_result_list(results: Sequence[MatchResult]) -> str:
    if not results:
        return NO_MATCHES
    items = sorted((r.item for r in results), key=lambda i: i.title)
    return "\n\n".join(f"🍷 {i.title} - {format_price(i.price_minor_units)}" for i in items)


def format_alternatives(results: Sequence[MatchResult], primary_title: str = "", limit: int = 3) -> str:
    """The "I also found" block shown under the primary match."""
    if len(results) <= 1:
        return ""
    if primary_title:
        others = [r for r in results if primary_title not in r.item.title]
    else:
        others = list(results[1:])
    if not others:
        return ""

    lines = ["", "", "📋 I also found these wines that might interest you:"]
    for r in others[:limit]:
        year = extract_vintage(r.item.title)
        name = strip_vintage(r.item.title)
        lines.append(f"• {name} {year}" if year else f"• {name}")
    return "\n".join(lines)


def format_suggestion(suggestion: Suggestion) -> str:
    if suggestion.kind == SuggestionKind.HISTORICAL_UNAVAILABLE and suggestion.results:
        title = suggestion.results[0].item.title
        return (
            f"We previously offered {title}, but it's not currently available. "
            "Would you like to see our current selection of wines?"
        )

    if suggestion.kind == SuggestionKind.ALTERNATIVES and suggestion.results:
        lines = [
            f"We don't currently have a {suggestion.keyword} wine available, "
            "but you might enjoy these alternatives:",
            "",
        ]
        for r in suggestion.results:
            line = f"• {r.item.title}"
            if r.item.price_minor_units is not None:
                line += f" - {format_price(r.item.price_minor_units)}"
            lines.append(line)
        return "\n".join(lines)

    return (
        f"I couldn't find any information about {suggestion.term} in our current "
        "or past inventory. Would you like to see our available wines?"
    )
