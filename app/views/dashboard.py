from __future__ import annotations

import logging

import pandas as pd
import streamlit as st

from components.metrics import Kpi, bar_chart, render_kpi_row
from components.narrative import render_callout, render_empty_state, render_page_intro
from components.venue_cards import format_price, price_label
from config import CURRENCY, AppConfig
from data.models import ROLES, BookingStateError, DashboardVenue, OwnerBooking
from data.service import decide_booking, get_dashboard_venues, get_upcoming_bookings, venues_frame


logger = logging.getLogger(__name__)


def replace_booking(bookings: list[OwnerBooking], updated: OwnerBooking) -> list[OwnerBooking]:
    return [updated if b.id == updated.id else b for b in bookings]


def _status_badge(status: str) -> str:
    return f'<span class="status status-{status}">{status.title()}</span>'


def _render_customer(cfg: AppConfig, rows: list[DashboardVenue]) -> None:
    venues = [r.venue for r in rows]
    df = venues_frame(venues)

    render_kpi_row(
        [
            Kpi("Venues", str(len(df))),
            Kpi("Avg rating", f"{df['rating'].mean():.1f} ★" if len(df) else "—"),
            Kpi(
                "From",
                f"{CURRENCY} {format_price(df['price'].min())}/hr" if len(df) else "—",
                help="Lowest hourly price among your shortlisted venues",
            ),
            Kpi("Largest capacity", f"{int(df['capacity'].max())}+" if len(df) else "—"),
        ]
    )

    st.subheader("Your shortlisted venues")
    st.dataframe(
        df.drop(columns=["id"]),
        hide_index=True,
        column_config={"price": st.column_config.NumberColumn(f"price ({CURRENCY}/hr)", format="%.0f")},
    )
    if len(df):
        bar_chart(df, x="name", y="rating", title="Guest rating by venue", y_range=(0, 5))

    st.subheader("Upcoming bookings")
    upcoming = get_upcoming_bookings(cfg, venues).data
    if not upcoming:
        render_empty_state("No upcoming bookings yet.")
        return
    st.dataframe(
        pd.DataFrame(
            [
                {"booking": u.booking_id, "venue": u.venue_name, "date": u.date, "guests": u.guests, "status": u.status}
                for u in upcoming
            ]
        ),
        hide_index=True,
    )


def _render_owner(cfg: AppConfig, rows: list[DashboardVenue]) -> None:
    state: dict[int, list[OwnerBooking]] = st.session_state.setdefault("owner_bookings", {})
    for r in rows:
        state.setdefault(r.venue.id, list(r.bookings))

    all_bookings = [b for r in rows for b in state[r.venue.id]]
    pending = sum(1 for b in all_bookings if b.status == "pending")
    confirmed = sum(1 for b in all_bookings if b.status == "confirmed")
    render_kpi_row(
        [
            Kpi("Listed venues", str(len(rows))),
            Kpi("Pending requests", str(pending), help="Requests waiting for you to accept or reject"),
            Kpi("Confirmed", str(confirmed)),
            Kpi("Rejected", str(len(all_bookings) - pending - confirmed)),
        ]
    )

    render_callout(
        title="Booking requests",
        body="Accept or reject pending requests. Decisions are simulated and reset when the session ends.",
    )

    flash = st.session_state.pop("owner_flash", None)
    if flash:
        st.toast(flash[0], icon=flash[1])

    for r in rows:
        v = r.venue
        with st.expander(f"{v.name} · {price_label(v.price)} · {v.capacity}+ guests", expanded=True):
            bookings = state[v.id]
            if not bookings:
                render_empty_state("No booking requests yet.")
                continue
            for b in bookings:
                c1, c2, c3, c4, c5 = st.columns([2, 2, 2, 1, 1])
                c1.markdown(f"**{b.customer}**")
                c2.write(f"{b.date:%b %d, %Y}")
                c3.markdown(_status_badge(b.status), unsafe_allow_html=True)
                if b.status != "pending":
                    continue
                for col, action, label in ((c4, "accept", "Accept"), (c5, "reject", "Reject")):
                    if col.button(label, key=f"{action}_{v.id}_{b.id}"):
                        try:
                            with st.spinner("Updating booking..."):
                                updated = decide_booking(cfg, b, action)
                        except BookingStateError as e:
                            logger.warning("Booking decision refused: %s", e)
                            st.error(str(e))
                            continue
                        state[v.id] = replace_booking(bookings, updated)
                        icon = "✅" if updated.status == "confirmed" else "❌"
                        st.session_state["owner_flash"] = (f"Booking for {b.customer} {updated.status}", icon)
                        st.rerun()


def render(cfg: AppConfig, use_mock: bool) -> None:
    st.title("Dashboard")

    role = st.radio("View as", ROLES, horizontal=True, format_func=str.title, key="dashboard_role")

    if role == "owner":
        render_page_intro(
            eyebrow="Venue owner",
            headline="Which booking requests need a decision?",
            context="Your listed venues with incoming requests. Pending requests can be accepted or rejected.",
        )
    else:
        render_page_intro(
            eyebrow="Customer",
            headline="Your venues and upcoming events at a glance",
            context="Compare your shortlisted venues and keep track of booking requests.",
        )

    try:
        with st.spinner("Loading dashboard..."):
            res = get_dashboard_venues(cfg, use_mock, role)
    except Exception:
        logger.exception("Error loading dashboard data")
        st.error("Failed to load dashboard data.")
        return

    if res.warning:
        st.warning(res.warning)
    st.caption(f"Data source: **{res.source}**")

    if not res.data:
        render_empty_state("No venues available at the moment.")
        return

    if role == "owner":
        _render_owner(cfg, res.data)
    else:
        _render_customer(cfg, res.data)
