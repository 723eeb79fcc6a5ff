import pandas as pd

import winematch.ranking as ranking
from winematch.formatting import format_match
from winematch.pipeline_types import ReasonKind
from winematch.ranking import rank

from conftest import make_item


def _ids(results):
    return [r.item.id for r in results]


def test_exact_title_ranks_first_with_max_score(catalog):
    results = rank(catalog, "estate CHARDONNAY!!")
    assert results[0].item.id == "1"
    assert results[0].score == max(r.score for r in results)


def test_scores_are_sorted_descending(catalog):
    results = rank(catalog, "estate pinot noir")
    scores = [r.score for r in results]
    assert scores == sorted(scores, reverse=True)
    assert all(s > 0 for s in scores)


def test_later_vintage_ranks_first(catalog):
    results = rank(catalog, "estate pinot noir")
    assert _ids(results)[:2] == ["2", "3"]


def test_equal_scores_break_on_vintage():
    items = [
        make_item("a", "Old Vine Zinfandel 2018"),
        make_item("b", "Old Vine Zinfandel 2019"),
    ]
    results = rank(items, "old vine zinfandel")
    assert results[0].score == results[1].score
    assert _ids(results) == ["b", "a"]


def test_price_query_is_stamped_price_only(catalog):
    results = rank(catalog, "How much is the Estate Chardonnay 2022?")
    assert results[0].item.id == "1"
    assert all(r.price_only for r in results)
    text = format_match(results[0])
    assert "$25.00" in text
    assert "Bright and citrusy" not in text


def test_general_query_is_not_price_only(catalog):
    results = rank(catalog, "estate chardonnay")
    assert not results[0].price_only
    assert "Bright and citrusy" in format_match(results[0])


def test_unavailable_only_for_historical_queries(catalog):
    assert "7" not in _ids(rank(catalog, "Syrah"))
    assert "7" in _ids(rank(catalog, "have you ever made a Syrah"))


def test_misspelling_surfaces_item_via_typo_signal(catalog):
    results = rank(catalog, "chardonay 2022")
    assert _ids(results) == ["1"]
    assert ReasonKind.TYPO_CORRECTION in results[0].reason_kinds()


def test_single_substitution_typo_is_only_result(catalog):
    items = catalog + [make_item(12, "Blaufrankisch 2021")]
    results = rank(items, "blaufrenkisch")
    assert _ids(results) == ["12"]


def test_colloquial_rose_finds_rose_wine(catalog):
    results = rank(catalog, "rose")
    assert results[0].item.id == "4"


def test_other_categories_are_ignored(catalog):
    assert rank(catalog, "tasting glass") == []


def test_invalid_catalog_shapes_give_empty_ranking():
    assert rank(None, "riesling") == []
    assert rank("not a catalog", "riesling") == []
    assert rank({"title": "Dry Riesling"}, "riesling") == []
    assert rank([], None) == []


def test_none_query_matches_nothing(catalog):
    assert rank(catalog, None) == []


def test_scoring_failure_is_isolated(catalog, monkeypatch):
    real = ranking.score_item

    def flaky(item, ctx, weights):
        if item.id == "2":
            raise RuntimeError("boom")
        return real(item, ctx, weights)

    monkeypatch.setattr(ranking, "score_item", flaky)
    ids = _ids(rank(catalog, "estate pinot noir"))
    assert "2" not in ids
    assert ids[0] == "3"


def test_dataframe_catalog_matches_list_catalog(catalog):
    df = pd.DataFrame([item.model_dump() for item in catalog])
    assert _ids(rank(df, "estate pinot noir")) == _ids(rank(catalog, "estate pinot noir"))


def test_unaccented_rose_title_matches_exactly():
    items = [make_item(1, "Rose 2021"), make_item(2, "Rosé of Pinot Noir 2022")]
    results = rank(items, "rose")
    assert results[0].item.id == "1"
    assert ReasonKind.EXACT_TITLE in results[0].reason_kinds()
