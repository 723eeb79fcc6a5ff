from __future__ import annotations
"""
Coercion of caller-supplied catalog snapshots into ``CatalogItem`` lists.

The catalog-fetch side hands us whatever its commerce backend returned:
CatalogItem instances, raw JSON-ish dicts (camelCase, nested variants) or a
pandas DataFrame built from an export. Everything is mapped into one schema
here so the scorer never has to care. Bad shapes degrade to an empty catalog
or a skipped record, never to an exception.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

import numpy as np
import pandas as pd
from loguru import logger
from pydantic import ValidationError

from .config import AVAILABLE_STATUS, CatalogItem

# Field aliases seen in commerce payloads, first match wins.
FIELD_CANDIDATES: Dict[str, List[str]] = {
    "id": ["id", "productId", "product_id", "sku"],
    "title": ["title", "name", "Title", "Name"],
    "category": ["category", "type", "productType", "Type"],
    "description": ["description", "content", "Description", "Content"],
    "teaser": ["teaser", "Teaser", "subtitle"],
    "admin_available": ["admin_available", "adminStatus", "admin_status"],
    "web_available": ["web_available", "webStatus", "web_status"],
    "price_minor_units": ["price_minor_units", "priceMinorUnits", "price"],
}


def _is_missing(val: Any) -> bool:
    if val is None:
        return True
    try:
        return bool(pd.isna(val))
    except (TypeError, ValueError):
        # lists / arrays are never "missing" as a whole
        return False


def _pick(record: Mapping[str, Any], canon: str) -> Any:
    for key in FIELD_CANDIDATES[canon]:
        if key in record and not _is_missing(record[key]):
            return record[key]
    return None


def _coerce_text(val: Any) -> str:
    if _is_missing(val):
        return ""
    return str(val).strip()


def _coerce_flag(val: Any) -> bool:
    """Status strings ("Available") or booleans; anything else is False."""
    if isinstance(val, (bool, np.bool_)):
        return bool(val)
    if isinstance(val, str):
        return val.strip().lower() == AVAILABLE_STATUS.lower()
    return False


def _coerce_price(val: Any) -> Optional[int]:
    """Minor units as int; malformed or missing prices become None."""
    try:
        if _is_missing(val) or isinstance(val, bool):
            return None
        if isinstance(val, (int, np.integer)):
            return int(val)
        if isinstance(val, (float, np.floating)):
            return None if np.isnan(val) else int(round(float(val)))
        s = str(val).strip()
        return int(round(float(s))) if s else None
    except (TypeError, ValueError, OverflowError):
        return None


def _variant_price(record: Mapping[str, Any]) -> Any:
    variants = record.get("variants")
    if isinstance(variants, (list, tuple)) and variants:
        first = variants[0]
        if isinstance(first, Mapping):
            return first.get("price")
    return None


def item_from_record(record: Mapping[str, Any], fallback_id: str = "") -> CatalogItem:
    """Map one raw record onto the CatalogItem schema."""
    price = _pick(record, "price_minor_units")
    if price is None:
        price = _variant_price(record)

    teaser = _coerce_text(_pick(record, "teaser"))
    item_id = _coerce_text(_pick(record, "id")) or fallback_id

    return CatalogItem(
        id=item_id,
        title=_coerce_text(_pick(record, "title")),
        category=_coerce_text(_pick(record, "category")),
        description=_coerce_text(_pick(record, "description")),
        teaser=teaser or None,
        admin_available=_coerce_flag(_pick(record, "admin_available")),
        web_available=_coerce_flag(_pick(record, "web_available")),
        price_minor_units=_coerce_price(price),
    )


def _iter_records(catalog: Any) -> Iterable[Any]:
    if isinstance(catalog, pd.DataFrame):
        return catalog.to_dict(orient="records")
    if isinstance(catalog, (list, tuple)):
        return catalog
    return []


def coerce_catalog(catalog: Any) -> List[CatalogItem]:
    """
    Return the catalog as a list of CatalogItems.

    Non-list input (None, a string, a single dict, ...) is an empty catalog.
    """
    if catalog is None:
        return []
    if not isinstance(catalog, (list, tuple, pd.DataFrame)):
        logger.warning("Catalog is not a list or DataFrame ({}); treating as empty.", type(catalog).__name__)
        return []

    items: List[CatalogItem] = []
    for idx, record in enumerate(_iter_records(catalog)):
        if isinstance(record, CatalogItem):
            items.append(record)
            continue
        if not isinstance(record, Mapping):
            logger.warning("Skipping catalog record {} of type {}", idx, type(record).__name__)
            continue
        try:
            items.append(item_from_record(record, fallback_id=str(idx)))
        except ValidationError as e:
            logger.warning("Skipping malformed catalog record {}: {}", idx, e)
    return items
