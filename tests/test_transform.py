import random

from data.transform import DEFAULT_AMENITIES, product_to_venue, products_to_venues


def test_product_reshaped_into_venue(product):
    v = product_to_venue(product, random.Random(1))

    assert v.id == 7
    assert v.name == "White Gold Plated Princess Rin..."
    assert v.price == 9990.0
    assert v.rating == 3.0
    assert v.review_count == 400
    assert v.tags == ["jewelery"]
    assert v.category == "jewelery"
    assert v.amenities == DEFAULT_AMENITIES
    assert 100 <= v.capacity <= 599
    assert v.address.endswith(" jewelery Street, Addis Ababa")
    assert v.detailed_description.startswith(product["description"] + ". This venue features")


def test_short_titles_are_not_truncated(product):
    v = product_to_venue({**product, "title": "Backpack"})
    assert v.name == "Backpack"


def test_missing_rating_gets_defaults(product):
    p = {k: val for k, val in product.items() if k != "rating"}
    v = product_to_venue(p, random.Random(3))
    assert v.rating == 4.0
    assert 10 <= v.review_count <= 59


def test_products_to_venues_keeps_order(product):
    venues = products_to_venues([{**product, "id": 2}, {**product, "id": 1}])
    assert [v.id for v in venues] == [2, 1]
