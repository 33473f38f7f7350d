from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import streamlit as st

from config import APP_NAME, AppConfig


@dataclass(frozen=True)
class SidebarState:
    view: Optional[str]
    use_mock: bool


NAV_ITEMS = [
    ("🏠 Home", "home"),
    ("🏛️ Venues", "venues"),
    ("📍 Venue details", "venue_view"),
    ("📊 Dashboard", "dashboard"),
]

PAGE_PATHS = {
    "home": "index.html",
    "venues": "venues.html",
    "venue_view": "venue-view.html",
    "dashboard": "dashboard.html",
}

_LABEL_FOR_VIEW = {v: l for l, v in NAV_ITEMS}


def resolve_view(path: Optional[str]) -> Optional[str]:
    """
    Map a page path to a view key by substring, so `/site/venues.html?x=1`
    and `venues.html` land on the same page. Unknown paths return None.
    """
    path = (path or "").strip()
    # venue-view.html must win over venues.html-style partial matches
    if "venue-view.html" in path:
        return "venue_view"
    if "venues.html" in path:
        return "venues"
    if "dashboard.html" in path:
        return "dashboard"
    if "index.html" in path or path == "" or path == "/" or path.endswith("/"):
        return "home"
    return None


def current_view() -> Optional[str]:
    return resolve_view(st.query_params.get("page", ""))


def navigate(view: str, **params) -> None:
    """Switch page; safe to use as a widget callback."""
    st.query_params.clear()
    st.query_params.update({"page": PAGE_PATHS[view], **{k: str(v) for k, v in params.items()}})
    st.session_state["nav_label"] = _LABEL_FOR_VIEW[view]


def _on_nav_change() -> None:
    view = dict(NAV_ITEMS)[st.session_state["nav_label"]]
    st.query_params.clear()
    st.query_params["page"] = PAGE_PATHS[view]


def render_sidebar(cfg: AppConfig) -> SidebarState:
    view = current_view()

    with st.sidebar:
        st.markdown(f"### 🎉 {APP_NAME}")
        st.caption("Find and book event venues in Addis Ababa (demo)")

        if "nav_label" not in st.session_state:
            st.session_state["nav_label"] = _LABEL_FOR_VIEW.get(view or "home", NAV_ITEMS[0][0])

        st.radio(
            "Nav",
            [l for l, _ in NAV_ITEMS],
            key="nav_label",
            on_change=_on_nav_change,
            label_visibility="collapsed",
        )

        with st.expander("⚙️ Settings", expanded=False):
            use_mock = st.toggle(
                "Use mock data",
                value=st.session_state.get("use_mock", cfg.default_use_mock),
                help="When off, the app reshapes products from the demo feed. Any failure falls back to mock data.",
            )
            st.session_state["use_mock"] = use_mock

            st.markdown("**Product feed**")
            st.code(cfg.api_base_url, language="text")
    use_mock = st.session_state.get("use_mock", cfg.default_use_mock)

    return SidebarState(view=view, use_mock=use_mock)
