"""
Data access layer.

Design rules (demo pattern):
- Views call ONLY functions in this package.
- All live API calls must be wrapped to allow graceful fallback to mock data.
- No env var reads here (config-only).
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

import pandas as pd

from config import AppConfig
from data import catalog
from data import mock_data
from data.api_client import get_api_client
from data.models import (
    BookingConfirmation,
    BookingRequest,
    BookingStateError,
    DashboardVenue,
    OwnerBooking,
    ReviewConfirmation,
    ReviewSubmission,
    Venue,
    VenueFilters,
)
from data.transform import product_to_venue, products_to_venues


logger = logging.getLogger(__name__)

FEATURED_LIMIT = 3
DASHBOARD_LIMIT = 4
DEFAULT_FEED_LIMIT = 6

# Artificial round-trip latency (ms)
LATENCY_MS = {
    "venues": 300,
    "venue": 200,
    "review": 400,
    "dashboard": 400,
    "booking": 500,
    "decision": 300,
}

DECISIONS = {"accept": "confirmed", "reject": "rejected"}


@dataclass(frozen=True)
class DataResult:
    data: Any
    source: str  # "mock" | "fakestore_api"
    warning: str | None = None


def _simulate_latency(cfg: AppConfig, kind: str) -> None:
    if cfg.simulated_latency:
        time.sleep(LATENCY_MS[kind] / 1000.0)


def _fallback(use_mock: bool, fn_live: Callable[[], Any], fn_mock: Callable[[], Any]) -> DataResult:
    if use_mock:
        return DataResult(data=fn_mock(), source="mock")
    try:
        return DataResult(data=fn_live(), source="fakestore_api")
    except Exception as e:
        logger.warning("Live product feed failed, using mock data: %s", e)
        return DataResult(data=fn_mock(), source="mock", warning=f"Fell back to mock data: {type(e).__name__}")


def _mock_venues(cfg: AppConfig, filters: VenueFilters) -> list[Venue]:
    _simulate_latency(cfg, "venues")
    return catalog.apply_filters(mock_data.venues_mock(), filters)


def get_venues(cfg: AppConfig, use_mock: bool, filters: Optional[VenueFilters] = None) -> DataResult:
    filters = filters or VenueFilters()
    client = get_api_client(cfg)

    def live() -> list[Venue]:
        products = client.list_products(
            category=filters.category,
            limit=filters.limit or DEFAULT_FEED_LIMIT,
            sort="asc" if (filters.sort or "").endswith("_asc") else "desc",
        )
        return catalog.apply_filters(products_to_venues(products), filters)

    return _fallback(use_mock, fn_live=live, fn_mock=lambda: _mock_venues(cfg, filters))


def get_venue(cfg: AppConfig, use_mock: bool, venue_id) -> DataResult:
    """`data` is the Venue, or None when the live feed has no such product."""
    client = get_api_client(cfg)

    def live() -> Optional[Venue]:
        product = client.get_product(venue_id)
        return product_to_venue(product) if product else None

    def mock() -> Optional[Venue]:
        _simulate_latency(cfg, "venue")
        return catalog.find_venue(_mock_venues(cfg, VenueFilters()), venue_id)

    return _fallback(use_mock, fn_live=live, fn_mock=mock)


def get_categories(cfg: AppConfig, use_mock: bool) -> DataResult:
    client = get_api_client(cfg)

    def live() -> list[str]:
        cats = [str(c) for c in client.list_categories()]
        return cats if "all" in cats else ["all"] + cats

    return _fallback(use_mock, fn_live=live, fn_mock=mock_data.categories_mock)


def get_featured_venues(cfg: AppConfig, use_mock: bool) -> DataResult:
    return get_venues(cfg, use_mock, VenueFilters(limit=FEATURED_LIMIT))


def search_venues(cfg: AppConfig, query: str) -> list[Venue]:
    venues = _mock_venues(cfg, VenueFilters())
    return catalog.search_venues(venues, query)


def get_venue_reviews(cfg: AppConfig, venue_id) -> DataResult:
    # Same three reviews for every venue until reviews have a real backend
    return DataResult(data=mock_data.reviews_mock(), source="mock")


def get_dashboard_venues(cfg: AppConfig, use_mock: bool, role: str = "customer") -> DataResult:
    _simulate_latency(cfg, "dashboard")
    res = get_venues(cfg, use_mock, VenueFilters(limit=DASHBOARD_LIMIT))
    if role == "owner":
        data = [DashboardVenue(venue=v, bookings=mock_data.owner_bookings_mock()) for v in res.data]
    else:
        data = [DashboardVenue(venue=v) for v in res.data]
    return DataResult(data=data, source=res.source, warning=res.warning)


def get_upcoming_bookings(cfg: AppConfig, venues: list[Venue]) -> DataResult:
    return DataResult(data=mock_data.upcoming_bookings_mock(venues), source="mock")


def book_venue(cfg: AppConfig, request: BookingRequest) -> BookingConfirmation:
    _simulate_latency(cfg, "booking")
    confirmation = BookingConfirmation(
        success=True,
        booking_id=f"BK{int(time.time() * 1000)}",
        message="Booking confirmed successfully!",
        total=request.total_price,
        start=request.start_date,
        end=request.end_date,
        venue_name=request.venue_name or "Selected Venue",
    )
    logger.info("Simulated booking %s for venue %s", confirmation.booking_id, request.venue_id)
    return confirmation


def submit_review(cfg: AppConfig, submission: ReviewSubmission) -> ReviewConfirmation:
    _simulate_latency(cfg, "review")
    confirmation = ReviewConfirmation(
        success=True,
        review_id=f"RV{int(time.time() * 1000)}",
        message="Thank you for your review!",
        rating=submission.rating,
        comment=submission.comment,
    )
    logger.info("Simulated review %s for venue %s", confirmation.review_id, submission.venue_id)
    return confirmation


def decide_booking(cfg: AppConfig, booking: OwnerBooking, action: str) -> OwnerBooking:
    """Owner accept/reject round trip. Only pending requests can be decided."""
    if action not in DECISIONS:
        raise ValueError(f"Unknown booking action: {action}")
    if booking.status != "pending":
        raise BookingStateError(f"Booking {booking.id} is already {booking.status}")
    _simulate_latency(cfg, "decision")
    updated = booking.with_status(DECISIONS[action])
    logger.info("Booking %s %s", booking.id, updated.status)
    return updated


def venues_frame(venues: list[Venue]) -> pd.DataFrame:
    """Flat table for dashboards; list columns are joined for display."""
    rows = [
        {
            "id": v.id,
            "name": v.name,
            "category": v.category,
            "price": v.price,
            "capacity": v.capacity,
            "rating": v.rating,
            "reviews": v.review_count,
            "tags": ", ".join(v.tags),
        }
        for v in venues
    ]
    return pd.DataFrame(rows, columns=["id", "name", "category", "price", "capacity", "rating", "reviews", "tags"])
