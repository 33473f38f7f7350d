import logging
from dataclasses import replace
from datetime import date
from unittest.mock import MagicMock, patch

import pytest
import requests

from data import service
from data.models import (
    BookingRequest,
    BookingStateError,
    OwnerBooking,
    ReviewSubmission,
    VenueFilters,
)


def _response(payload, status=200):
    resp = MagicMock()
    resp.status_code = status
    resp.content = b"x"
    resp.json.return_value = payload
    return resp


def test_mock_venues(cfg):
    res = service.get_venues(cfg, use_mock=True)
    assert res.source == "mock"
    assert res.warning is None
    assert len(res.data) == 6


def test_featured_venues_are_first_three(cfg):
    res = service.get_featured_venues(cfg, use_mock=True)
    assert [v.id for v in res.data] == [1, 2, 3]


def test_mock_venue_lookup(cfg):
    assert service.get_venue(cfg, True, "5").data.name == "Ghion Hotel"
    assert service.get_venue(cfg, True, "42").data.id == 1


def test_mock_categories(cfg):
    assert service.get_categories(cfg, True).data == ["all", "luxury", "outdoor", "corporate", "tech", "art", "weddings"]


def test_live_venues_reshaped_and_filtered(cfg, product):
    products = [product, {**product, "id": 8, "price": 20.0}]
    with patch("data.api_client.requests.get", return_value=_response(products)):
        res = service.get_venues(cfg, use_mock=False, filters=VenueFilters(sort="price_desc"))

    assert res.source == "fakestore_api"
    assert [v.id for v in res.data] == [8, 7]


def test_live_feed_sort_direction_follows_sort_suffix(cfg, product):
    with patch("data.api_client.requests.get", return_value=_response([product])) as get:
        service.get_venues(cfg, use_mock=False, filters=VenueFilters(sort="price_asc"))
        service.get_venues(cfg, use_mock=False, filters=VenueFilters(sort="rating_desc"))

    assert [c.kwargs["params"]["sort"] for c in get.call_args_list] == ["asc", "desc"]


def test_live_failure_falls_back_to_mock(cfg):
    with patch("data.api_client.requests.get", side_effect=requests.ConnectionError("offline")):
        res = service.get_venues(cfg, use_mock=False, filters=VenueFilters(limit=2))

    assert res.source == "mock"
    assert res.warning == "Fell back to mock data: ApiError"
    assert [v.id for v in res.data] == [1, 2]


def test_live_venue_not_found(cfg):
    resp = _response(None)
    resp.content = b""
    with patch("data.api_client.requests.get", return_value=resp):
        res = service.get_venue(cfg, False, 999)
    assert res.source == "fakestore_api"
    assert res.data is None


def test_live_categories_get_all_prepended(cfg):
    with patch("data.api_client.requests.get", return_value=_response(["electronics", "jewelery"])):
        res = service.get_categories(cfg, False)
    assert res.data == ["all", "electronics", "jewelery"]


def test_search_includes_address(cfg):
    assert [v.id for v in service.search_venues(cfg, "Entoto")] == [4]


def test_dashboard_customer_and_owner(cfg):
    customer = service.get_dashboard_venues(cfg, True, "customer").data
    assert len(customer) == 4
    assert all(r.bookings == [] for r in customer)

    owner = service.get_dashboard_venues(cfg, True, "owner").data
    assert len(owner) == 4
    first = owner[0].bookings
    assert [(b.id, b.status, b.customer) for b in first] == [
        (1, "pending", "John Smith"),
        (2, "confirmed", "Emma Wilson"),
    ]
    assert first[0].date == date(2024, 3, 15)


def test_reviews_are_canned(cfg):
    reviews = service.get_venue_reviews(cfg, 1).data
    assert [r.rating for r in reviews] == [5, 4, 3]


def _booking(**kw):
    base = dict(
        venue_id=1,
        venue_name="Ghion Hotel",
        start_date=date(2030, 1, 1),
        end_date=date(2030, 1, 2),
        hours=4,
        guests=80,
        name="Selam",
        email="selam@example.com",
        total_price=68000.0,
    )
    base.update(kw)
    return BookingRequest(**base)


def test_book_venue(cfg):
    conf = service.book_venue(cfg, _booking())
    assert conf.success
    assert conf.booking_id.startswith("BK") and conf.booking_id[2:].isdigit()
    assert conf.message == "Booking confirmed successfully!"
    assert conf.total == 68000.0
    assert (conf.start, conf.end) == (date(2030, 1, 1), date(2030, 1, 2))
    assert conf.venue_name == "Ghion Hotel"


def test_book_venue_default_name(cfg):
    assert service.book_venue(cfg, _booking(venue_name=None)).venue_name == "Selected Venue"


def test_submit_review(cfg):
    conf = service.submit_review(cfg, ReviewSubmission(venue_id=1, rating=4, comment="Lovely garden"))
    assert conf.review_id.startswith("RV")
    assert conf.message == "Thank you for your review!"
    assert (conf.rating, conf.comment) == (4, "Lovely garden")


def test_decide_booking(cfg):
    pending = OwnerBooking(id=1, status="pending", customer="John Smith", date=date(2024, 3, 15))
    assert service.decide_booking(cfg, pending, "accept").status == "confirmed"
    assert service.decide_booking(cfg, pending, "reject").status == "rejected"
    assert pending.status == "pending"


def test_decide_booking_logs_resulting_status(cfg, caplog):
    pending = OwnerBooking(id=1, status="pending", customer="John Smith", date=date(2024, 3, 15))
    with caplog.at_level(logging.INFO, logger="data.service"):
        service.decide_booking(cfg, pending, "reject")
    assert "Booking 1 rejected" in caplog.text


def test_decide_booking_rejects_non_pending_and_unknown_action(cfg):
    done = OwnerBooking(id=2, status="confirmed", customer="Emma Wilson", date=date(2024, 4, 20))
    with pytest.raises(BookingStateError):
        service.decide_booking(cfg, done, "reject")
    with pytest.raises(ValueError):
        service.decide_booking(cfg, replace(done, status="pending"), "maybe")


def test_latency_is_simulated_when_enabled(cfg):
    slow = replace(cfg, simulated_latency=True)
    with patch("data.service.time.sleep") as sleep:
        service.submit_review(slow, ReviewSubmission(venue_id=1, rating=5, comment="Great venue!"))
    sleep.assert_called_once_with(0.4)


def test_venues_frame(cfg):
    df = service.venues_frame(service.get_venues(cfg, True).data)
    assert list(df.columns) == ["id", "name", "category", "price", "capacity", "rating", "reviews", "tags"]
    assert len(df) == 6
    assert df.loc[0, "tags"] == "Weddings, Corporate, Luxury, Banquet"
    assert service.venues_frame([]).empty
