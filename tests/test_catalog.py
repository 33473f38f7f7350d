from data import catalog
from data.mock_data import venues_mock
from data.models import VenueFilters


def _ids(venues):
    return [v.id for v in venues]


def test_no_filters_keeps_catalog_order():
    assert _ids(catalog.apply_filters(venues_mock(), VenueFilters())) == [1, 2, 3, 4, 5, 6]


def test_category_filter_and_all():
    assert _ids(catalog.apply_filters(venues_mock(), VenueFilters(category="luxury"))) == [1, 4]
    assert len(catalog.apply_filters(venues_mock(), VenueFilters(category="all"))) == 6
    assert catalog.apply_filters(venues_mock(), VenueFilters(category="weddings")) == []


def test_search_matches_name_description_and_tags_case_insensitive():
    assert _ids(catalog.apply_filters(venues_mock(), VenueFilters(search="GARDEN"))) == [2, 5]
    assert _ids(catalog.apply_filters(venues_mock(), VenueFilters(search="radisson"))) == [3]
    # address is not part of the list filter
    assert catalog.apply_filters(venues_mock(), VenueFilters(search="Kazanchis")) == []


def test_price_and_capacity_bounds_are_inclusive():
    f = VenueFilters(min_price=8500, max_price=12000)
    assert _ids(catalog.apply_filters(venues_mock(), f)) == [2, 3, 5]
    assert _ids(catalog.apply_filters(venues_mock(), VenueFilters(capacity=400))) == [1, 4]


def test_zero_bounds_are_ignored():
    f = VenueFilters(min_price=0, max_price=0, capacity=0)
    assert len(catalog.apply_filters(venues_mock(), f)) == 6


def test_sorts():
    venues = venues_mock()
    assert _ids(catalog.sort_venues(venues, "price_asc")) == [6, 5, 2, 3, 1, 4]
    assert _ids(catalog.sort_venues(venues, "price_desc")) == [4, 1, 3, 2, 5, 6]
    assert _ids(catalog.sort_venues(venues, "rating_desc")) == [5, 2, 4, 6, 1, 3]
    assert _ids(catalog.sort_venues(venues, "rating_asc")) == [3, 1, 6, 4, 2, 5]
    assert _ids(catalog.sort_venues(venues, "bogus")) == [1, 2, 3, 4, 5, 6]


def test_limit_applies_after_sort():
    f = VenueFilters(sort="price_desc", limit=2)
    assert _ids(catalog.apply_filters(venues_mock(), f)) == [4, 1]


def test_free_text_search_includes_address():
    assert _ids(catalog.search_venues(venues_mock(), "kazanchis")) == [3]
    assert _ids(catalog.search_venues(venues_mock(), "bole")) == [2]


def test_find_venue_loose_id_and_fallback():
    venues = venues_mock()
    assert catalog.find_venue(venues, "3").id == 3
    assert catalog.find_venue(venues, 4).id == 4
    assert catalog.find_venue(venues, "999").id == 1
    assert catalog.find_venue([], 1) is None
