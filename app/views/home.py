from __future__ import annotations

import logging

import streamlit as st

from components.narrative import render_empty_state
from components.sidebar import navigate
from components.venue_cards import render_venue_cards
from config import AppConfig
from data.service import get_featured_venues, search_venues


logger = logging.getLogger(__name__)


def render(cfg: AppConfig, use_mock: bool) -> None:
    # --- Hero ---
    st.markdown(
        """
<div class="hero">
  <div class="hero-title">Find the perfect venue for every occasion</div>
  <p class="hero-narrative">
    Weddings, galas, conferences and concerts across Addis Ababa.<br/>
    Compare spaces, read reviews and request a booking in minutes.
  </p>
</div>
        """,
        unsafe_allow_html=True,
    )
    st.button("Browse all venues", key="hero_browse", on_click=navigate, args=("venues",))

    query = st.text_input("Quick search", placeholder="Venue name, tag or neighbourhood (e.g. Bole)")
    if query.strip():
        matches = search_venues(cfg, query.strip())
        st.caption(f"{len(matches)} venue(s) match \"{query.strip()}\"")
        if matches:
            render_venue_cards(matches, key_prefix="quick")
        else:
            render_empty_state("No venues match your search.")

    st.markdown('<div class="section-title">Featured venues</div>', unsafe_allow_html=True)

    try:
        with st.spinner("Loading featured venues..."):
            res = get_featured_venues(cfg, use_mock)
    except Exception:
        logger.exception("Error loading featured venues")
        st.error("Failed to load venues. Please try again later.")
        return

    if res.warning:
        st.warning(res.warning)

    if not res.data:
        render_empty_state("No venues available at the moment.")
        return

    render_venue_cards(res.data, key_prefix="featured")

    # --- How it works ---
    st.markdown('<div class="section-title">How it works</div>', unsafe_allow_html=True)
    h1, h2, h3 = st.columns(3)
    h1.markdown("**1) Search**  \nFilter by category, price and capacity.")
    h2.markdown("**2) Compare**  \nCheck amenities, ratings and guest reviews.")
    h3.markdown("**3) Book**  \nPick your dates and send a booking request.")
