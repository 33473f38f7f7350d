from datetime import date

import pytest

from components.filters import SearchDebouncer, filters_from_params, filters_to_params
from components.forms import booking_total, validate_booking, validate_review
from components.header import footer_text
from components.sidebar import resolve_view
from components.venue_cards import (
    format_price,
    format_review_date,
    image_src,
    price_label,
    star_counts,
    stars_html,
    venue_card_html,
)
from data.mock_data import venues_mock
from data.models import ValidationError, VenueFilters


@pytest.mark.parametrize(
    "rating,expected",
    [(4.2, (4, False, 1)), (4.5, (4, True, 0)), (4.8, (4, True, 0)), (5, (5, False, 0)), (0, (0, False, 5)), (3.0, (3, False, 2))],
)
def test_star_counts(rating, expected):
    assert star_counts(rating) == expected


def test_stars_html_always_has_five_stars():
    assert stars_html(4.7).count("★") == 5
    assert stars_html(4.7).count("star half") == 1


def test_price_formatting():
    assert format_price(15000.0) == "15,000"
    assert format_price(15000.5) == "15,000.5"
    assert format_price(9990.0) == "9,990"
    assert price_label(7800) == "ETB 7,800/hr"


def test_review_date_format():
    assert format_review_date(date(2024, 1, 15)) == "January 15, 2024"
    assert format_review_date(date(2023, 12, 5)) == "December 5, 2023"


def test_missing_local_image_uses_placeholder():
    assert image_src("https://example.com/a.jpg") == "https://example.com/a.jpg"
    assert image_src("assets/images/nope.jpg").startswith("data:image/svg+xml;base64,")


def test_card_html_shows_details():
    html = venue_card_html(venues_mock()[0])
    assert 'data-venue-id="1"' in html
    assert "Taitu St, Addis Ababa, Ethiopia., Ethiopia" in html
    assert "500+" in html
    assert "ETB 15,000/hr" in html
    assert html.count('class="venue-tag"') == 4


@pytest.mark.parametrize(
    "path,view",
    [
        ("", "home"),
        ("/", "home"),
        ("/site/", "home"),
        ("index.html", "home"),
        ("venues.html", "venues"),
        ("/demo/venue-view.html", "venue_view"),
        ("dashboard.html", "dashboard"),
        ("about.html", None),
    ],
)
def test_resolve_view(path, view):
    assert resolve_view(path) == view


def test_filters_from_params_defaults():
    f = filters_from_params({})
    assert f == VenueFilters(search="", category="all", sort="rating_desc", limit=12)


def test_filters_from_params_parses_numbers():
    f = filters_from_params({"minPrice": "8000", "maxPrice": "abc", "capacity": "150", "category": "luxury"})
    assert (f.min_price, f.max_price, f.capacity, f.category) == (8000, None, 150, "luxury")


def test_filters_from_params_ignores_non_finite_numbers():
    f = filters_from_params({"minPrice": "inf", "maxPrice": "1e400", "capacity": "nan"})
    assert (f.min_price, f.max_price, f.capacity) == (None, None, None)


def test_filters_params_round_trip_drops_defaults():
    f = VenueFilters(search="garden", category="all", min_price=5000, sort="rating_desc", limit=12)
    assert filters_to_params(f) == {"search": "garden", "minPrice": "5000"}


def test_search_debouncer():
    d = SearchDebouncer(wait_ms=300)
    assert d.due_in("gar", now=10.0) == 0.0
    d.mark_sent("gar", now=10.0)
    assert d.due_in("gar ", now=10.1) is None
    assert d.due_in("garden", now=10.1) == pytest.approx(0.2)
    assert d.due_in("garden", now=11.0) == 0.0


def test_footer_year():
    assert footer_text(date(2031, 6, 1)).startswith("© 2031 VenueLink")


def test_validate_review():
    sub = validate_review(3, 4, "  Great space for conferences ", "")
    assert (sub.venue_id, sub.rating, sub.comment, sub.user) == (3, 4, "Great space for conferences", "You")

    with pytest.raises(ValidationError) as exc:
        validate_review(3, None, "short")
    assert len(exc.value.errors) == 2


def test_booking_total_counts_days_inclusive():
    assert booking_total(8500.0, 4, date(2030, 1, 1), date(2030, 1, 3)) == 102000.0


def test_validate_booking_ok():
    venue = venues_mock()[4]
    req = validate_booking(
        venue, "Selam", "selam@example.com", date(2030, 1, 1), date(2030, 1, 2), 4, 120, today=date(2029, 12, 1)
    )
    assert req.venue_name == "Ghion Hotel"
    assert req.total_price == 68000.0


def test_validate_booking_collects_errors():
    venue = venues_mock()[5]  # capacity 100
    with pytest.raises(ValidationError) as exc:
        validate_booking(venue, "", "not-an-email", date(2030, 1, 5), date(2030, 1, 2), 0, 101, today=date(2030, 1, 10))
    errors = exc.value.errors
    assert "Name is required." in errors
    assert "Please enter a valid email address." in errors
    assert "Start date cannot be in the past." in errors
    assert "End date must be on or after the start date." in errors
    assert len(errors) == 6
