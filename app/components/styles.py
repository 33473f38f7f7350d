from __future__ import annotations

import streamlit as st

from config import APP_NAME, THEME


APP_TITLE = f"{APP_NAME} - Event Venues"


def page_title(venue_name: str | None = None) -> str:
    return f"{APP_NAME} - {venue_name}" if venue_name else APP_TITLE


def set_page_title(title: str) -> None:
    st.set_page_config(page_title=title)


def apply_theme() -> None:
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="🎉",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    # Centralized theme tokens (config.py) -> CSS variables
    radius = int(THEME["radius_px"])
    css = """
<style>
@import url('https://fonts.googleapis.com/css2?family=DM+Sans:wght@400;500;600;700&display=swap');

:root{
  --gold-600: __GOLD_600__;
  --gold-500: __GOLD_500__;
  --ink-900: __INK_900__;
  --ink-800: __INK_800__;

  --bg-primary: __BG_PRIMARY__;
  --bg-secondary: __BG_SECONDARY__;
  --card-bg: __CARD_BG__;
  --card-border: __CARD_BORDER__;

  --text-primary: __TEXT_PRIMARY__;
  --text-secondary: __TEXT_SECONDARY__;
  --shadow: __SHADOW__;
  --radius: __RADIUS_PX__px;
  --star: __STAR__;
}

/* Hide default Streamlit chrome */
#MainMenu { visibility: hidden; }
footer { visibility: hidden; }

html, body, [data-testid="stAppViewContainer"]{
  background: var(--bg-primary) !important;
  font-family: "DM Sans", system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif !important;
  color: var(--text-primary) !important;
}
[data-testid="stSidebar"]{
  background: var(--bg-secondary) !important;
  border-right: 1px solid var(--card-border) !important;
}

/* Sidebar nav as stacked buttons */
[data-testid="stSidebar"] div[role="radiogroup"] > label{
  background: var(--card-bg) !important;
  border: 1px solid var(--card-border) !important;
  border-radius: 12px !important;
  padding: 10px 12px !important;
  margin: 0 0 10px 0 !important;
}
[data-testid="stSidebar"] div[role="radiogroup"] > label:has(input:checked){
  border-color: var(--gold-600) !important;
}

.block-container{
  padding-top: 0.75rem !important;
  padding-bottom: 2rem !important;
}

/* Header + footer */
.vl-header{
  display:flex;
  align-items:center;
  justify-content:space-between;
  gap: 12px;
  background: var(--bg-secondary);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 10px 14px;
  margin: 0 0 14px 0;
}
.vl-header-left{ display:flex; align-items:center; gap: 10px; }
.vl-title{ font-size: 20px; font-weight: 700; color: var(--ink-900); line-height: 1.1; }
.vl-subtitle{ font-size: 14px; font-weight: 500; color: var(--text-secondary); }
.pill{
  display:inline-flex;
  align-items:center;
  gap:6px;
  background: white;
  border: 1px solid var(--card-border);
  border-radius: 999px;
  padding: 6px 10px;
  font-size: 13px;
  font-weight: 600;
  color: var(--ink-800);
}
.pill .dot{ width:8px; height:8px; border-radius:999px; background: var(--gold-600); display:inline-block; }
.vl-footer{
  margin-top: 32px;
  padding-top: 12px;
  border-top: 1px solid var(--card-border);
  color: var(--text-secondary);
  font-size: 13px;
  text-align: center;
}

/* Hero */
.hero{
  background: var(--ink-900);
  border-radius: var(--radius);
  padding: 28px 24px;
  margin-bottom: 14px;
}
.hero-title{ font-size: 36px; font-weight: 700; color: white; line-height: 1.05; margin: 0 0 8px 0; }
.hero-narrative{ font-size: 16px; color: rgba(255,255,255,0.8); line-height: 1.5; margin: 0; }
.section-title{ font-size: 24px; font-weight: 600; color: var(--ink-900); margin: 14px 0 10px 0; }

/* Venue cards */
.venue-card, .venue-card-lg, .review-card{
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  overflow: hidden;
  margin-bottom: 8px;
}
.venue-card .image-container img{ width: 100%; height: 190px; object-fit: cover; display:block; }
.venue-card-lg .image-container img{ width: 100%; max-height: 420px; object-fit: cover; display:block; }
.venue-card .content{ padding: 12px 14px; }
.venue-card-lg > *:not(.image-container){ margin-left: 16px; margin-right: 16px; }
.venue-card h3, .venue-card-lg h3{ font-size: 18px; font-weight: 700; color: var(--ink-900); margin: 10px 0 4px 0; }
.venue-details{ margin: 8px 0; }
.detail-item{ font-size: 14px; color: var(--text-secondary); margin: 2px 0; }
.detail-label{ font-weight: 600; color: var(--text-primary); }
.description{ font-size: 14px; color: var(--text-secondary); line-height: 1.5; }
.venue-tags{ display:flex; flex-wrap: wrap; gap: 6px; margin: 8px 0 12px 0; }
.venue-tag{
  background: var(--bg-primary);
  border: 1px solid var(--card-border);
  border-radius: 999px;
  padding: 2px 10px;
  font-size: 12px;
  font-weight: 600;
  color: var(--ink-800);
}
.review-card{ padding: 12px 14px; }
.review-content{ margin: 6px 0; font-size: 14px; line-height: 1.5; }
.no-venues{ color: var(--text-secondary); padding: 2rem 0; text-align: center; }

/* Stars */
.star{ color: #D7D3CB; font-size: 16px; }
.star.filled{ color: var(--star); }
.star.half{
  background: linear-gradient(90deg, var(--star) 50%, #D7D3CB 50%);
  -webkit-background-clip: text;
  -webkit-text-fill-color: transparent;
}
.stars span:last-child:not(.star){ margin-left: 4px; font-size: 13px; color: var(--text-secondary); }

/* Metric cards */
.metric-card{
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 12px 14px;
}
.metric-label{ font-size: 14px; font-weight: 500; color: var(--text-secondary); margin-bottom: 6px; }
.metric-value{ font-size: 24px; font-weight: 700; color: var(--text-primary); line-height: 1.2; }

/* Booking status badges */
.status{ border-radius: 999px; padding: 2px 10px; font-size: 12px; font-weight: 700; }
.status-pending{ background: #FEF3C7; color: __WARNING__; }
.status-confirmed{ background: #DCFCE7; color: __SUCCESS__; }
.status-rejected{ background: #FEE2E2; color: __DANGER__; }

/* Buttons */
div.stButton > button, div.stFormSubmitButton > button{
  border-radius: 10px !important;
  font-weight: 600 !important;
  border: 1px solid transparent !important;
  background: var(--ink-900) !important;
  color: white !important;
}
div.stButton > button:hover, div.stFormSubmitButton > button:hover{
  background: var(--gold-600) !important;
}

div[data-testid="stPlotlyChart"]{
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 8px 10px;
}

/* Page intro + callouts */
.page-intro{
  background: var(--bg-secondary);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 14px 14px;
  margin: 0 0 14px 0;
}
.page-intro-eyebrow{ font-size: 14px; font-weight: 600; color: var(--gold-600); margin-bottom: 6px; }
.page-intro-headline{ font-size: 20px; font-weight: 700; color: var(--ink-900); margin-bottom: 6px; }
.page-intro-context{ font-size: 14px; color: var(--text-secondary); line-height: 1.5; }
.callout{
  background: #FFFFFF;
  border: 1px solid var(--card-border);
  border-left: 4px solid var(--gold-600);
  border-radius: var(--radius);
  padding: 12px 14px;
  margin: 10px 0;
}
.callout-title{ font-size: 14px; font-weight: 700; color: var(--ink-900); margin-bottom: 6px; }
.callout-body{ font-size: 14px; color: var(--text-secondary); line-height: 1.5; }
</style>
"""

    tokens = {
        "__GOLD_600__": str(THEME["accent_primary"]),
        "__GOLD_500__": str(THEME["accent_secondary"]),
        "__INK_900__": str(THEME["ink_900"]),
        "__INK_800__": str(THEME["ink_800"]),
        "__BG_PRIMARY__": str(THEME["bg_primary"]),
        "__BG_SECONDARY__": str(THEME["bg_secondary"]),
        "__CARD_BG__": str(THEME["bg_card"]),
        "__CARD_BORDER__": str(THEME["border_color"]),
        "__TEXT_PRIMARY__": str(THEME["text_primary"]),
        "__TEXT_SECONDARY__": str(THEME["text_secondary"]),
        "__SHADOW__": str(THEME["shadow"]),
        "__RADIUS_PX__": str(radius),
        "__STAR__": str(THEME["star"]),
        "__SUCCESS__": str(THEME["success"]),
        "__WARNING__": str(THEME["warning"]),
        "__DANGER__": str(THEME["danger"]),
    }
    for k, v in tokens.items():
        css = css.replace(k, v)

    st.markdown(css, unsafe_allow_html=True)
