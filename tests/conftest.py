import pytest

from winematch.config import CatalogItem


def make_item(
    item_id,
    title,
    category="wine",
    description="",
    teaser=None,
    available=True,
    price=2500,
):
    return CatalogItem(
        id=str(item_id),
        title=title,
        category=category,
        description=description,
        teaser=teaser,
        admin_available=available,
        web_available=available,
        price_minor_units=price,
    )


@pytest.fixture
def catalog():
    return [
        make_item(1, "Estate Chardonnay 2022", description="Bright and citrusy."),
        make_item(2, "Estate Pinot Noir 2021"),
        make_item(3, "Estate Pinot Noir 2019"),
        make_item(4, "Rosé of Pinot Noir 2022"),
        make_item(5, "Dry Riesling 2021", description="Finger Lakes riesling."),
        make_item(6, "Red Blend 2020"),
        make_item(7, "Estate Syrah 2018", available=False),
        make_item(8, "Proceedo White 2022"),
        make_item(9, "Proceedo Rosé 2022"),
        make_item(10, "Tasting Glass", category="merch"),
    ]
