from __future__ import annotations

import logging
from datetime import date, timedelta

import streamlit as st

from components.forms import booking_days, validate_booking, validate_review
from components.sidebar import navigate
from components.styles import page_title, set_page_title
from components.venue_cards import format_price, price_label, review_card_html, venue_detail_html
from config import CURRENCY, AppConfig
from data.models import Review, ValidationError, Venue
from data.service import book_venue, get_venue, get_venue_reviews, submit_review


logger = logging.getLogger(__name__)

DEFAULT_VENUE_ID = "1"


def _session_reviews(venue_id: int) -> list[Review]:
    return st.session_state.setdefault("added_reviews", {}).setdefault(venue_id, [])


def _render_not_found() -> None:
    st.markdown("## Venue not found")
    st.write("The requested venue could not be found.")
    st.button("Browse All Venues", key="not_found_browse", on_click=navigate, args=("venues",))


def _render_reviews(cfg: AppConfig, venue: Venue) -> None:
    st.subheader("Reviews")
    flash = st.session_state.pop("review_flash", None)
    if flash:
        st.toast(flash, icon="✅")

    res = get_venue_reviews(cfg, venue.id)
    # Newest first: reviews added in this session sit above the canned ones
    reviews = list(reversed(_session_reviews(venue.id))) + list(res.data)
    for review in reviews:
        st.markdown(review_card_html(review), unsafe_allow_html=True)

    with st.form("review_form", clear_on_submit=True):
        st.markdown("**Leave a review**")
        rating = st.radio(
            "Rating",
            [5, 4, 3, 2, 1],
            index=None,
            horizontal=True,
            format_func=lambda n: "★" * n,
            key="review_rating",
        )
        user = st.text_input("Your name (optional)", key="review_user")
        comment = st.text_area("Comment", key="review_comment")
        submitted = st.form_submit_button("Submit review", key="review_submit")

    if not submitted:
        return
    try:
        submission = validate_review(venue.id, rating, comment, user)
    except ValidationError as e:
        for msg in e.errors:
            st.error(msg)
        return

    try:
        with st.spinner("Submitting review..."):
            confirmation = submit_review(cfg, submission)
    except Exception:
        logger.exception("Error submitting review")
        st.error("Failed to submit review. Please try again.")
        return

    reviews_added = _session_reviews(venue.id)
    reviews_added.append(
        Review(
            id=1000 + len(reviews_added),
            user=submission.user,
            rating=confirmation.rating,
            comment=confirmation.comment,
            date=date.today(),
        )
    )
    st.session_state["review_flash"] = confirmation.message
    st.rerun()


def _render_booking(cfg: AppConfig, venue: Venue) -> None:
    st.subheader("Book this venue")
    st.caption(f"{price_label(venue.price)} · up to {venue.capacity} guests")

    with st.form("booking_form"):
        c1, c2 = st.columns(2)
        name = c1.text_input("Full name", key="booking_name")
        email = c2.text_input("Email", key="booking_email")
        tomorrow = date.today() + timedelta(days=1)
        start_date = c1.date_input("Start date", value=tomorrow)
        end_date = c2.date_input("End date", value=tomorrow)
        hours = c1.number_input("Hours per day", min_value=1, max_value=24, value=4, step=1)
        guests = c2.number_input("Guests", min_value=1, value=min(50, venue.capacity), step=10)
        submitted = st.form_submit_button("Request booking", key="booking_submit")

    if not submitted:
        return
    try:
        request = validate_booking(venue, name, email, start_date, end_date, int(hours), int(guests))
    except ValidationError as e:
        for msg in e.errors:
            st.error(msg)
        return

    try:
        with st.spinner("Confirming your booking..."):
            confirmation = book_venue(cfg, request)
    except Exception:
        logger.exception("Error booking venue")
        st.error("Booking failed. Please try again.")
        return

    st.success(f"{confirmation.message} Booking ID: **{confirmation.booking_id}**")
    st.markdown(
        f"**{confirmation.venue_name}** · {confirmation.start:%b %d, %Y} → {confirmation.end:%b %d, %Y} "
        f"({booking_days(confirmation.start, confirmation.end)} day(s)) · "
        f"Total: **{CURRENCY} {format_price(confirmation.total)}**"
    )
    st.toast("Booking confirmed", icon="🎉")


def render(cfg: AppConfig, use_mock: bool) -> None:
    venue_id = st.query_params.get("id") or DEFAULT_VENUE_ID

    try:
        with st.spinner("Loading venue..."):
            res = get_venue(cfg, use_mock, venue_id)
    except Exception:
        logger.exception("Error loading venue details")
        st.error("Failed to load venue details.")
        return

    if res.warning:
        st.warning(res.warning)

    venue = res.data
    if venue is None:
        _render_not_found()
        return

    set_page_title(page_title(venue.name))

    left, right = st.columns([3, 2])
    with left:
        st.markdown(venue_detail_html(venue), unsafe_allow_html=True)
        _render_reviews(cfg, venue)
    with right:
        _render_booking(cfg, venue)
