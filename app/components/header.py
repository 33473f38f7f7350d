from __future__ import annotations

import base64
import os
from datetime import date
from typing import Optional

import streamlit as st

from config import APP_NAME


def _read_asset_b64(rel_path: str) -> Optional[str]:
    here = os.path.dirname(__file__)
    asset_path = os.path.abspath(os.path.join(here, "..", "assets", rel_path))
    if not os.path.exists(asset_path):
        return None
    with open(asset_path, "rb") as f:
        return base64.b64encode(f.read()).decode("utf-8")


def render_header(app_name: str, subtitle: str, right_pill: str) -> None:
    logo_b64 = _read_asset_b64("logo.svg")
    logo_html = ""
    if logo_b64:
        logo_html = f'<img src="data:image/svg+xml;base64,{logo_b64}" style="height:22px; width:auto;" />'

    st.markdown(
        f"""
<div class="vl-header">
  <div class="vl-header-left">
    {logo_html}
    <div>
      <div class="vl-title">{app_name}</div>
      <div class="vl-subtitle">{subtitle}</div>
    </div>
  </div>
  <div class="pill"><span class="dot"></span>{right_pill}</div>
</div>
        """,
        unsafe_allow_html=True,
    )


def footer_text(today: Optional[date] = None) -> str:
    year = (today or date.today()).year
    return f"© {year} {APP_NAME}. All rights reserved."


def render_footer() -> None:
    st.markdown(f'<div class="vl-footer">{footer_text()}</div>', unsafe_allow_html=True)
