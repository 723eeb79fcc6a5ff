from winematch.config import MatchResult
from winematch.fallback import Suggestion, SuggestionKind
from winematch.formatting import (
    NO_DESCRIPTION,
    NO_MATCHES,
    clean_text,
    format_alternatives,
    format_match,
    format_price,
    format_result_list,
    format_suggestion,
)

from conftest import make_item


def _result(item, price_only=False, score=1.0):
    return MatchResult(item=item, score=score, price_only=price_only)


def test_clean_text_strips_html_and_entities():
    assert clean_text("<p>Bright &amp; <b>citrusy</b>&nbsp;finish</p>") == "Bright & citrusy finish"
    assert clean_text("Gr&uuml;ner") == "Grüner"
    assert clean_text(None) == NO_DESCRIPTION
    assert clean_text("<br/>") == NO_DESCRIPTION


def test_format_price():
    assert format_price(2500) == "$25.00"
    assert format_price(0) == "$0.00"
    assert format_price(None) == "Price unavailable"


def test_price_only_result_has_no_description():
    item = make_item(1, "Estate Chardonnay 2022", description="Long tasting notes.")
    text = format_match(_result(item, price_only=True))
    assert text == "💲 The price of **Estate Chardonnay 2022** is $25.00."


def test_price_only_without_price():
    item = make_item(1, "Estate Chardonnay 2022", price=None)
    assert "unavailable" in format_match(_result(item, price_only=True))


def test_zero_price_is_shown_not_unavailable():
    item = make_item(1, "Corkage Sample 2022", price=0)
    assert format_match(_result(item, price_only=True)) == "💲 The price of **Corkage Sample 2022** is $0.00."
    assert "💲 Price: $0.00" in format_match(_result(item))


def test_full_details():
    item = make_item(1, "Estate Syrah 2018", description="Peppery.", teaser="Last bottles", available=False)
    text = format_match(_result(item))
    assert "**Estate Syrah 2018**" in text
    assert "📌 Last bottles" in text
    assert "📖 Peppery." in text
    assert "💲 Price: $25.00" in text
    assert "not currently available" in text


def test_result_list_sorted_by_title():
    results = [_result(make_item(1, "Zeta 2020")), _result(make_item(2, "Alpha 2021", price=None))]
    assert format_result_list(results) == "🍷 Alpha 2021 - Price unavailable\n\n🍷 Zeta 2020 - $25.00"
    assert format_result_list([]) == NO_MATCHES


def test_alternatives_skip_primary():
    results = [
        _result(make_item(1, "Estate Pinot Noir 2021")),
        _result(make_item(2, "Rosé of Pinot Noir 2022")),
        _result(make_item(3, "Red Blend")),
    ]
    text = format_alternatives(results, primary_title="Estate Pinot Noir")
    assert "• Rosé of Pinot Noir 2022" in text
    assert "• Red Blend" in text
    assert "Estate Pinot Noir" not in text
    assert format_alternatives(results[:1]) == ""


def test_suggestion_texts():
    syrah = make_item(7, "Estate Syrah 2018", available=False)
    historical = Suggestion(kind=SuggestionKind.HISTORICAL_UNAVAILABLE, term="syrah", results=[_result(syrah)])
    assert format_suggestion(historical).startswith("We previously offered Estate Syrah 2018")

    blend = make_item(6, "Red Blend 2020")
    alternatives = Suggestion(
        kind=SuggestionKind.ALTERNATIVES,
        term="syrah",
        keyword="syrah",
        results=[_result(blend, score=0.0)],
    )
    text = format_suggestion(alternatives)
    assert "don't currently have a syrah wine" in text
    assert "• Red Blend 2020 - $25.00" in text

    missing = Suggestion(kind=SuggestionKind.NOT_FOUND, term="zinfandel")
    assert "couldn't find any information about zinfandel" in format_suggestion(missing)
