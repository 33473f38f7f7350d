"""
Routing only.

All view logic lives in app/views/.
All env reads happen ONLY in config.py.
"""

from __future__ import annotations

import os
import sys

# Make `app/` importable as a flat module path when running:
#   streamlit run app/app.py
APP_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(APP_DIR, ".."))
for p in [APP_DIR, REPO_ROOT]:
    if p not in sys.path:
        sys.path.insert(0, p)

import streamlit as st  # noqa: E402

from components.styles import apply_theme  # noqa: E402
from components.sidebar import render_sidebar  # noqa: E402
from components.header import render_footer, render_header  # noqa: E402
from config import APP_NAME, configure_logging, get_config  # noqa: E402

from views import home, venues, venue_view, dashboard  # noqa: E402


VIEWS = {
    "home": home.render,
    "venues": venues.render,
    "venue_view": venue_view.render,
    "dashboard": dashboard.render,
}


def main() -> None:
    apply_theme()
    cfg = get_config()
    configure_logging(cfg)
    state = render_sidebar(cfg)

    render_header(
        app_name=APP_NAME,
        subtitle="Event venues in Addis Ababa (demo)",
        right_pill=f"Data: {'Mock' if state.use_mock else 'FakeStore API (fallback)'}",
    )

    # Routing only
    render = VIEWS.get(state.view or "")
    if render is None:
        st.error("Unknown view")
    else:
        render(cfg, state.use_mock)

    render_footer()


if __name__ == "__main__":
    main()
