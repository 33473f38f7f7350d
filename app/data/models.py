from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from datetime import date
from typing import Optional


CATEGORIES = ["all", "luxury", "outdoor", "corporate", "tech", "art", "weddings"]

SORT_OPTIONS = {
    "rating_desc": "Rating: high to low",
    "rating_asc": "Rating: low to high",
    "price_asc": "Price: low to high",
    "price_desc": "Price: high to low",
}

ROLES = ["customer", "owner"]

BOOKING_STATUSES = ("pending", "confirmed", "rejected")


class ApiError(RuntimeError):
    """Product feed returned a non-2xx status or could not be reached."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class BookingStateError(ValueError):
    pass


class ValidationError(ValueError):
    """Form input failed validation; `errors` holds one message per problem."""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


@dataclass(frozen=True)
class Venue:
    id: int
    name: str
    description: str
    price: float
    capacity: int
    image: str
    rating: float
    review_count: int
    amenities: list[str]
    tags: list[str]
    address: str
    category: str
    detailed_description: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Review:
    id: int
    user: str
    rating: int
    comment: str
    date: date


@dataclass(frozen=True)
class OwnerBooking:
    id: int
    status: str
    customer: str
    date: date

    def with_status(self, status: str) -> "OwnerBooking":
        return replace(self, status=status)


@dataclass(frozen=True)
class DashboardVenue:
    venue: Venue
    bookings: list[OwnerBooking] = field(default_factory=list)


@dataclass(frozen=True)
class UpcomingBooking:
    """Customer-side booking row shown on the dashboard."""
    booking_id: str
    venue_name: str
    date: date
    guests: int
    status: str


@dataclass(frozen=True)
class VenueFilters:
    search: str = ""
    category: str = "all"
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    capacity: Optional[int] = None
    sort: Optional[str] = None
    limit: Optional[int] = None


@dataclass(frozen=True)
class BookingRequest:
    venue_id: int
    venue_name: Optional[str]
    start_date: date
    end_date: date
    hours: int
    guests: int
    name: str
    email: str
    total_price: float


@dataclass(frozen=True)
class BookingConfirmation:
    success: bool
    booking_id: str
    message: str
    total: float
    start: date
    end: date
    venue_name: str


@dataclass(frozen=True)
class ReviewSubmission:
    venue_id: int
    rating: int
    comment: str
    user: str = "You"


@dataclass(frozen=True)
class ReviewConfirmation:
    success: bool
    review_id: str
    message: str
    rating: int
    comment: str
