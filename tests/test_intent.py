from winematch.intent import General, Historical, PriceOnly, classify, search_term


def test_how_much_is_prefix():
    intent = classify("How much is the Estate Chardonnay 2022?")
    assert isinstance(intent, PriceOnly)
    assert intent.item_name == "Estate Chardonnay 2022?"


def test_price_of_and_cost_of():
    assert classify("what is the price of the dry riesling") == PriceOnly("dry riesling")
    assert classify("cost of proceedo white") == PriceOnly("proceedo white")


def test_how_much_does_cost_pair():
    assert classify("how much does the red blend cost") == PriceOnly("red blend")
    # "cost" is required for this phrasing
    assert isinstance(classify("how much does it weigh"), General)


def test_historical_phrases():
    for q in ["have you ever made a Syrah", "do you have merlot", "any previous vintages", "past releases"]:
        assert isinstance(classify(q), Historical), q


def test_price_takes_precedence_over_historical():
    intent = classify("do you have the price of syrah")
    assert intent == PriceOnly("syrah")


def test_general_and_empty():
    assert isinstance(classify("estate merlot"), General)
    assert isinstance(classify(None), General)
    assert isinstance(classify(""), General)


def test_search_term():
    assert search_term("how much is the riesling", classify("how much is the riesling")) == "riesling"
    assert search_term("riesling", General()) == "riesling"
    assert search_term(None, General()) == ""
