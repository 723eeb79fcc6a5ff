"""Typed containers shared across pipeline modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class ReasonKind(str, Enum):
    """Which scoring signal produced a contribution."""

    FLAGSHIP = "flagship"
    FLAGSHIP_VARIANT = "flagship_variant"
    EXACT_TITLE = "exact_title"
    TITLE_CONTAINS_QUERY = "title_contains_query"
    QUERY_CONTAINS_TITLE = "query_contains_title"
    WORD_OVERLAP = "word_overlap"
    TYPO_CORRECTION = "typo_correction"
    VARIETY_IN_TITLE = "variety_in_title"
    VARIETY_IN_DESCRIPTION = "variety_in_description"
    DISTINCTIVE_KEYWORD = "distinctive_keyword"
    LABEL_KEYWORD = "label_keyword"
    FUZZY = "fuzzy"
    RECENT_VINTAGE = "recent_vintage"
    HISTORICAL = "historical"
    ADJACENT_KEYWORD = "adjacent_keyword"


@dataclass(frozen=True)
class Reason:
    """One scoring contribution: the signal, its magnitude and what matched."""

    kind: ReasonKind
    magnitude: float
    payload: Tuple[str, ...] = ()

    def describe(self) -> str:
        detail = f" [{', '.join(self.payload)}]" if self.payload else ""
        return f"{self.kind.value}{detail} (+{self.magnitude:.1f})"
