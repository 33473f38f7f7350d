from __future__ import annotations

import logging
import time
from dataclasses import replace

import streamlit as st

from components.filters import SearchDebouncer, filters_from_params, filters_to_params
from components.narrative import render_empty_state, render_page_intro
from components.sidebar import PAGE_PATHS
from components.venue_cards import render_venue_cards
from config import AppConfig
from data.models import SORT_OPTIONS, VenueFilters
from data.service import get_categories, get_venues


logger = logging.getLogger(__name__)


def _write_params(filters: VenueFilters) -> None:
    st.query_params.clear()
    st.query_params.update({"page": PAGE_PATHS["venues"], **filters_to_params(filters)})


def _render_filter_form(filters: VenueFilters, categories: list[str]) -> VenueFilters | None:
    """Returns the new filters when the form is submitted."""
    with st.form("venue_filters"):
        c1, c2, c3, c4, c5 = st.columns(5)
        category = c1.selectbox(
            "Category",
            categories,
            index=categories.index(filters.category) if filters.category in categories else 0,
            format_func=str.title,
        )
        min_price = c2.number_input("Min price (ETB/hr)", min_value=0, step=500, value=int(filters.min_price or 0))
        max_price = c3.number_input("Max price (ETB/hr)", min_value=0, step=500, value=int(filters.max_price or 0))
        capacity = c4.number_input("Min capacity", min_value=0, step=50, value=int(filters.capacity or 0))
        sorts = list(SORT_OPTIONS)
        sort = c5.selectbox(
            "Sort by",
            sorts,
            index=sorts.index(filters.sort) if filters.sort in sorts else 0,
            format_func=SORT_OPTIONS.get,
        )
        submitted = st.form_submit_button("Apply filters")

    if not submitted:
        return None
    return replace(
        filters,
        category=category,
        min_price=min_price or None,
        max_price=max_price or None,
        capacity=capacity or None,
        sort=sort,
    )


def _debounced_venues(cfg: AppConfig, use_mock: bool, filters: VenueFilters):
    """Re-query only when filters changed; search changes are spaced by the debounce window."""
    debouncer = st.session_state.setdefault("search_debouncer", SearchDebouncer(wait_ms=cfg.search_debounce_ms))
    cache_key = (use_mock, repr(filters))
    cached = st.session_state.get("venue_results")
    if cached is not None and cached[0] == cache_key:
        return cached[1]

    delay = debouncer.due_in(filters.search, time.monotonic())
    if delay:
        time.sleep(delay)
    res = get_venues(cfg, use_mock, filters)
    debouncer.mark_sent(filters.search, time.monotonic())
    st.session_state["venue_results"] = (cache_key, res)
    return res


def render(cfg: AppConfig, use_mock: bool) -> None:
    st.title("Venues")
    render_page_intro(
        eyebrow="Browse",
        headline="Every venue, filtered your way",
        context="Narrow the list by category, price per hour and guest capacity, or search by name, description or tag.",
    )

    filters = filters_from_params(st.query_params)

    cats = get_categories(cfg, use_mock)
    if cats.warning:
        st.warning(cats.warning)

    search = st.text_input(
        "Search venues",
        value=filters.search,
        placeholder="Try 'garden', 'conference' or 'Weddings'",
    )
    if search.strip() != filters.search:
        filters = replace(filters, search=search.strip())
        _write_params(filters)

    new_filters = _render_filter_form(filters, cats.data)
    if new_filters is not None:
        _write_params(new_filters)
        st.rerun()

    try:
        with st.spinner("Loading venues..."):
            res = _debounced_venues(cfg, use_mock, filters)
    except Exception:
        logger.exception("Error loading venues")
        st.error("Error loading venues. Please try again.")
        return

    if res.warning:
        st.warning(res.warning)

    if not res.data:
        render_empty_state("No venues match your filters. Try different criteria.")
        return

    st.caption(f"Showing {len(res.data)} venues")
    render_venue_cards(res.data, key_prefix="list")
