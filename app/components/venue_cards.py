"""
Venue rendering helpers: star ratings, prices, cards and the detail panel.

HTML builders are plain functions so they can be checked without a
running Streamlit session; the `render_*` functions push them to the page.
"""

from __future__ import annotations

import base64
import html
import math
import mimetypes
import os
from datetime import date
from typing import Optional

import streamlit as st

from components.sidebar import navigate
from config import CURRENCY
from data.models import Review, Venue


ASSETS_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "assets"))
PLACEHOLDER_IMAGE = "placeholder.svg"


def star_counts(rating: float) -> tuple[int, bool, int]:
    """(full, half, empty) for a 0-5 rating; always five stars in total."""
    rating = max(0.0, min(5.0, float(rating)))
    full = math.floor(rating)
    half = (rating % 1) >= 0.5
    empty = 5 - full - (1 if half else 0)
    return full, half, empty


def stars_html(rating: float) -> str:
    full, half, empty = star_counts(rating)
    return (
        '<span class="star filled">★</span>' * full
        + ('<span class="star half">★</span>' if half else "")
        + '<span class="star">★</span>' * empty
    )


def format_price(price: float) -> str:
    """Thousands separators, up to three fraction digits: 15000.0 -> '15,000'."""
    text = f"{float(price):,.3f}".rstrip("0").rstrip(".")
    return text


def price_label(price: float) -> str:
    return f"{CURRENCY} {format_price(price)}/hr"


def format_review_date(d: date) -> str:
    return f"{d.strftime('%B')} {d.day}, {d.year}"


def _data_uri(path: str) -> Optional[str]:
    if not os.path.exists(path):
        return None
    mime = mimetypes.guess_type(path)[0] or "application/octet-stream"
    if path.endswith(".svg"):
        mime = "image/svg+xml"
    with open(path, "rb") as f:
        return f"data:{mime};base64,{base64.b64encode(f.read()).decode('utf-8')}"


def image_src(image: str) -> str:
    """Remote URLs pass through; local asset paths are inlined, missing ones use the placeholder."""
    if image.startswith(("http://", "https://", "data:")):
        return image
    rel = image[len("assets/"):] if image.startswith("assets/") else image
    return _data_uri(os.path.join(ASSETS_DIR, rel)) or _data_uri(os.path.join(ASSETS_DIR, PLACEHOLDER_IMAGE)) or ""


def tags_html(tags: list[str]) -> str:
    return "".join(f'<span class="venue-tag">{html.escape(t)}</span>' for t in tags)


def _details_html(venue: Venue) -> str:
    return f"""
<div class="venue-details">
  <div class="detail-item"><span class="detail-label">Address:</span> {html.escape(venue.address)}, Ethiopia</div>
  <div class="detail-item"><span class="detail-label">Capacity:</span> {venue.capacity}+</div>
  <div class="detail-item"><span class="detail-label">Price:</span> {price_label(venue.price)}</div>
</div>
""".strip()


def venue_card_html(venue: Venue) -> str:
    return f"""
<div class="venue-card" data-venue-id="{venue.id}">
  <div class="image-container"><img src="{image_src(venue.image)}" alt="{html.escape(venue.name)}"></div>
  <div class="content">
    <h3>{html.escape(venue.name)}</h3>
    <div class="stars">{stars_html(venue.rating)}<span>({venue.review_count})</span></div>
    {_details_html(venue)}
    <div class="venue-tags">{tags_html(venue.tags)}</div>
    <p class="description">{html.escape(venue.description)}</p>
  </div>
</div>
"""


def render_venue_cards(venues: list[Venue], per_row: int = 3, key_prefix: str = "card") -> None:
    for start in range(0, len(venues), per_row):
        cols = st.columns(per_row)
        for col, venue in zip(cols, venues[start:start + per_row]):
            with col:
                st.markdown(venue_card_html(venue), unsafe_allow_html=True)
                st.button(
                    "View Details →",
                    key=f"{key_prefix}_view_{venue.id}",
                    on_click=navigate,
                    args=("venue_view",),
                    kwargs={"id": venue.id},
                )


def venue_detail_html(venue: Venue) -> str:
    return f"""
<div class="venue-card-lg">
  <div class="image-container"><img src="{image_src(venue.image)}" alt="{html.escape(venue.name)}"></div>
  <h3>{html.escape(venue.name)}</h3>
  <div class="stars">{stars_html(venue.rating)}<span>({venue.review_count})</span></div>
  {_details_html(venue)}
  <p class="description">{html.escape(venue.detailed_description or venue.description)}</p>
  <p><span class="detail-label">Amenities:</span> {html.escape(', '.join(venue.amenities))}</p>
  <div class="venue-tags">{tags_html(venue.tags)}</div>
</div>
"""


def review_card_html(review: Review) -> str:
    return f"""
<div class="review-card">
  <div class="stars">{stars_html(review.rating)}</div>
  <p class="review-content">{html.escape(review.comment)}</p>
  <small>By {html.escape(review.user)} on {format_review_date(review.date)}</small>
</div>
"""
