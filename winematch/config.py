from __future__ import annotations

import os
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import DISTINCTIVE_KEYWORDS
from .normalize import extract_vintage
from .pipeline_types import Reason, ReasonKind


# ---------------------------
# Catalog scope
# ---------------------------

# Only items of this category are ranked; merch, events etc. are ignored.
TARGET_CATEGORY = os.getenv("TARGET_CATEGORY", "wine").strip().lower()

AVAILABLE_STATUS = "Available"


# ---------------------------
# Matching thresholds
# ---------------------------

MIN_WORD_LEN = 3            # word-overlap tokens shorter than this are noise
FUZZY_MIN_TOKEN_LEN = 4     # short tokens are too ambiguous for fuzzy credit
FUZZY_THRESHOLD = float(os.getenv("FUZZY_THRESHOLD", "0.7"))

# Vintages strictly after this year get the recency bonus
RECENT_VINTAGE_AFTER = int(os.getenv("RECENT_VINTAGE_AFTER", "2020"))

MAX_ALTERNATIVES = 3


# ---------------------------
# Scoring weights
# ---------------------------

class ScoringWeights(BaseModel):
    """
    Central weight table for the lexical scorer.

    Exact values are tunable; the relative ordering between them is what the
    ranking relies on, so it is validated on construction.
    """

    model_config = ConfigDict(frozen=True)

    flagship_match: float = 500.0
    flagship_variant_match: float = 650.0
    exact_title: float = 100.0
    title_contains_query: float = 50.0
    query_contains_title: float = 40.0
    typo_correction: float = 45.0
    word_overlap: float = 30.0          # scaled by the matched-token fraction
    variety_in_title: float = 25.0
    variety_in_description: float = 15.0
    distinctive_keyword: float = 35.0   # per keyword
    label_keyword: float = 20.0
    fuzzy: float = 30.0                 # scaled by similarity
    recent_vintage: float = 5.0
    historical: float = 10.0

    def generic_ceiling(self) -> float:
        """Upper bound of everything a non-flagship item can accumulate."""
        return (
            self.exact_title
            + max(self.title_contains_query, self.query_contains_title)
            + max(self.word_overlap, self.fuzzy)
            + self.typo_correction
            + max(self.variety_in_title, self.variety_in_description)
            + self.distinctive_keyword * len(DISTINCTIVE_KEYWORDS)
            + self.label_keyword
            + self.recent_vintage
            + self.historical
        )

    @model_validator(mode="after")
    def _check_ordering(self) -> "ScoringWeights":
        values = self.model_dump()
        negative = [k for k, v in values.items() if v < 0]
        if negative:
            raise ValueError(f"weights must be non-negative: {negative}")

        checks = [
            ("exact_title", "title_contains_query"),
            ("title_contains_query", "query_contains_title"),
            ("title_contains_query", "typo_correction"),
            ("typo_correction", "word_overlap"),
            ("variety_in_title", "variety_in_description"),
            ("flagship_variant_match", "flagship_match"),
        ]
        for higher, lower in checks:
            if values[higher] <= values[lower]:
                raise ValueError(f"{higher} must outweigh {lower}")

        if self.flagship_match <= self.generic_ceiling():
            raise ValueError(
                "flagship_match must outweigh all generic signals combined "
                f"({self.flagship_match} <= {self.generic_ceiling()})"
            )
        return self


DEFAULT_WEIGHTS = ScoringWeights()


# ---------------------------
# Pydantic models shared around the app
# ---------------------------

class CatalogItem(BaseModel):
    """
    A sellable catalog entry as supplied by the catalog-fetch collaborator.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    category: str = ""
    description: str = ""
    teaser: Optional[str] = None
    admin_available: bool = False
    web_available: bool = False
    price_minor_units: Optional[int] = None

    @property
    def is_available(self) -> bool:
        return self.admin_available and self.web_available

    @property
    def vintage(self) -> int:
        return extract_vintage(self.title)


class MatchResult(BaseModel):
    """
    One ranked hit. Built once per search call and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    item: CatalogItem
    score: float = Field(ge=0)
    reasons: Tuple[Reason, ...] = ()
    price_only: bool = False

    def reason_kinds(self) -> List[ReasonKind]:
        return [r.kind for r in self.reasons]
