from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens (VenueLink styling)
# - Centralized here so components/styles.py and the charts read one palette.
#
THEME = {
    # Backgrounds
    "bg_primary": "#F7F5F0",     # page background
    "bg_secondary": "#FFFFFF",   # sidebar / top surfaces
    "bg_card": "#FFFFFF",       # card surface
    # Accents (gold + charcoal)
    "accent_primary": "#C8963E",
    "accent_secondary": "#E0B15C",  # hover
    "ink_900": "#292A29",
    "ink_800": "#3B3C3A",
    # Text + borders
    "text_primary": "#1F2020",
    "text_secondary": "rgba(31, 32, 32, 0.70)",
    "border_color": "#E6E2DA",
    "grid": "rgba(31, 32, 32, 0.10)",
    "shadow": "0 1px 3px rgba(16,24,40,0.08)",
    "radius_px": 12,
    # Stars + status colors
    "star": "#F5B301",
    "success": "#067647",
    "warning": "#F59E0B",
    "danger": "#B42318",
}

APP_NAME = "VenueLink"
CURRENCY = "ETB"
DEFAULT_API_BASE_URL = "https://fakestoreapi.com"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


@dataclass(frozen=True)
class AppConfig:
    # Product feed used when mock mode is off. Any failure falls back to mock data.
    api_base_url: str
    api_timeout: float

    # Defaults
    default_use_mock: bool

    # Artificial latency for mock round trips; off in tests
    simulated_latency: bool
    search_debounce_ms: int

    log_level: str


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getbool(name: str, default: str) -> bool:
    return (_getenv(name, default) or default).lower() == "true"


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    """
    load_dotenv(override=False)

    return AppConfig(
        api_base_url=_getenv("VENUE_API_BASE_URL", DEFAULT_API_BASE_URL) or DEFAULT_API_BASE_URL,
        api_timeout=float(_getenv("VENUE_API_TIMEOUT", "10") or "10"),
        default_use_mock=_getbool("USE_MOCK_DATA", "true"),
        simulated_latency=_getbool("SIMULATED_LATENCY", "true"),
        search_debounce_ms=int(_getenv("SEARCH_DEBOUNCE_MS", "300") or "300"),
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def configure_logging(cfg: AppConfig) -> None:
    """Root logger setup; safe to call on every Streamlit rerun."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, cfg.log_level, logging.INFO))
    if not any(getattr(h, "_venuelink", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._venuelink = True  # type: ignore[attr-defined]
        root.addHandler(handler)
