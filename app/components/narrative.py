from __future__ import annotations

import streamlit as st


def render_page_intro(eyebrow: str, headline: str, context: str | None = None) -> None:
    """
    Top-of-page framing:
    - short eyebrow (who the page is for)
    - headline
    - optional 1–2 line context
    """
    st.markdown(
        f"""
<div class="page-intro">
  <div class="page-intro-eyebrow">{eyebrow}</div>
  <div class="page-intro-headline">{headline}</div>
  {f'<div class="page-intro-context">{context}</div>' if context else ''}
</div>
        """,
        unsafe_allow_html=True,
    )


def render_callout(title: str, body: str) -> None:
    st.markdown(
        f"""
<div class="callout">
  <div class="callout-title">{title}</div>
  <div class="callout-body">{body}</div>
</div>
        """,
        unsafe_allow_html=True,
    )


def render_empty_state(message: str) -> None:
    st.markdown(f'<p class="no-venues">{message}</p>', unsafe_allow_html=True)
