from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from data.models import VenueFilters


VENUES_PAGE_LIMIT = 12
DEFAULT_SORT = "rating_desc"


def _int_param(params: Mapping[str, str], name: str) -> Optional[int]:
    raw = (params.get(name) or "").strip()
    if not raw:
        return None
    try:
        return int(float(raw))
    except (ValueError, OverflowError):
        return None


def filters_from_params(params: Mapping[str, str]) -> VenueFilters:
    """Venues page filters from query parameters (minPrice, maxPrice, ...)."""
    return VenueFilters(
        search=(params.get("search") or "").strip(),
        category=params.get("category") or "all",
        min_price=_int_param(params, "minPrice"),
        max_price=_int_param(params, "maxPrice"),
        capacity=_int_param(params, "capacity"),
        sort=params.get("sort") or DEFAULT_SORT,
        limit=VENUES_PAGE_LIMIT,
    )


def filters_to_params(filters: VenueFilters) -> dict[str, str]:
    """Inverse of filters_from_params; unset filters are left out of the URL."""
    params = {}
    if filters.search:
        params["search"] = filters.search
    if filters.category and filters.category != "all":
        params["category"] = filters.category
    if filters.min_price:
        params["minPrice"] = str(int(filters.min_price))
    if filters.max_price:
        params["maxPrice"] = str(int(filters.max_price))
    if filters.capacity:
        params["capacity"] = str(int(filters.capacity))
    if filters.sort and filters.sort != DEFAULT_SORT:
        params["sort"] = filters.sort
    return params


@dataclass
class SearchDebouncer:
    """
    Decides whether a search query should hit the data layer.

    A query that equals the last one sent is never resent; callers keep the
    previous results. A new query is due `wait_ms` after the previous send.
    """
    wait_ms: int = 300
    last_query: Optional[str] = None
    last_sent_at: Optional[float] = None

    def due_in(self, query: str, now: float) -> Optional[float]:
        """Seconds to wait before sending `query`, or None if it needs no request."""
        if query.strip() == self.last_query:
            return None
        if self.last_sent_at is None:
            return 0.0
        remaining = self.wait_ms / 1000.0 - (now - self.last_sent_at)
        return max(0.0, remaining)

    def mark_sent(self, query: str, now: float) -> None:
        self.last_query = query.strip()
        self.last_sent_at = now
