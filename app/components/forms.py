from __future__ import annotations

import re
from datetime import date
from typing import Optional

from data.models import BookingRequest, ReviewSubmission, ValidationError, Venue


EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MIN_COMMENT_LEN = 10
MAX_HOURS_PER_DAY = 24


def booking_days(start: date, end: date) -> int:
    return (end - start).days + 1


def booking_total(price: float, hours: int, start: date, end: date) -> float:
    return round(price * hours * booking_days(start, end), 2)


def validate_review(venue_id: int, rating: Optional[int], comment: str, user: str = "") -> ReviewSubmission:
    errors = []
    if rating is None or not 1 <= int(rating) <= 5:
        errors.append("Please select a rating between 1 and 5 stars.")
    comment = (comment or "").strip()
    if not comment:
        errors.append("Please write a comment.")
    elif len(comment) < MIN_COMMENT_LEN:
        errors.append(f"Comment must be at least {MIN_COMMENT_LEN} characters.")
    if errors:
        raise ValidationError(errors)
    return ReviewSubmission(venue_id=venue_id, rating=int(rating), comment=comment, user=user.strip() or "You")


def validate_booking(
    venue: Venue,
    name: str,
    email: str,
    start_date: Optional[date],
    end_date: Optional[date],
    hours: int,
    guests: int,
    today: Optional[date] = None,
) -> BookingRequest:
    today = today or date.today()
    errors = []

    name = (name or "").strip()
    email = (email or "").strip()
    if not name:
        errors.append("Name is required.")
    if not EMAIL_RE.match(email):
        errors.append("Please enter a valid email address.")

    if start_date is None or end_date is None:
        errors.append("Start and end dates are required.")
    else:
        if start_date < today:
            errors.append("Start date cannot be in the past.")
        if end_date < start_date:
            errors.append("End date must be on or after the start date.")

    if not 1 <= hours <= MAX_HOURS_PER_DAY:
        errors.append(f"Hours per day must be between 1 and {MAX_HOURS_PER_DAY}.")
    if not 1 <= guests <= venue.capacity:
        errors.append(f"Guests must be between 1 and {venue.capacity}.")

    if errors:
        raise ValidationError(errors)

    return BookingRequest(
        venue_id=venue.id,
        venue_name=venue.name,
        start_date=start_date,
        end_date=end_date,
        hours=hours,
        guests=guests,
        name=name,
        email=email,
        total_price=booking_total(venue.price, hours, start_date, end_date),
    )
