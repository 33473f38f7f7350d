"""
In-memory catalog pipeline.

filter -> sort -> limit, applied the same way to mock records and to
records reshaped from the product feed.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from data.models import Venue, VenueFilters


_SORTS: dict[str, tuple[Callable[[Venue], float], bool]] = {
    "price_asc": (lambda v: v.price, False),
    "price_desc": (lambda v: v.price, True),
    "rating_desc": (lambda v: v.rating, True),
    "rating_asc": (lambda v: v.rating, False),
}


def matches_search(venue: Venue, term: str, include_address: bool = False) -> bool:
    term = term.lower()
    fields = [venue.name, venue.description]
    if include_address:
        fields.append(venue.address)
    return any(term in f.lower() for f in fields) or any(term in t.lower() for t in venue.tags)


def filter_venues(venues: Iterable[Venue], filters: VenueFilters) -> list[Venue]:
    out = list(venues)

    if filters.category and filters.category != "all":
        out = [v for v in out if v.category == filters.category]

    if filters.search:
        out = [v for v in out if matches_search(v, filters.search)]

    # 0 / None mean "no bound"
    if filters.min_price:
        out = [v for v in out if v.price >= filters.min_price]
    if filters.max_price:
        out = [v for v in out if v.price <= filters.max_price]
    if filters.capacity:
        out = [v for v in out if v.capacity >= filters.capacity]

    return out


def sort_venues(venues: Iterable[Venue], sort: Optional[str]) -> list[Venue]:
    out = list(venues)
    if sort in _SORTS:
        key, reverse = _SORTS[sort]
        out.sort(key=key, reverse=reverse)
    return out


def apply_filters(venues: Iterable[Venue], filters: VenueFilters) -> list[Venue]:
    out = sort_venues(filter_venues(venues, filters), filters.sort)
    if filters.limit:
        out = out[: filters.limit]
    return out


def search_venues(venues: Iterable[Venue], query: str) -> list[Venue]:
    """Free-text search; unlike the list filter this also looks at addresses."""
    return [v for v in venues if matches_search(v, query, include_address=True)]


def find_venue(venues: list[Venue], venue_id) -> Optional[Venue]:
    """
    Loose id match ("3" finds venue 3). Unknown ids resolve to the first
    record so the detail page always has something to show.
    """
    for v in venues:
        if str(v.id) == str(venue_id).strip():
            return v
    return venues[0] if venues else None
