from __future__ import annotations

import pytest

from config import AppConfig


@pytest.fixture
def cfg() -> AppConfig:
    return AppConfig(
        api_base_url="https://fakestore.test",
        api_timeout=5.0,
        default_use_mock=True,
        simulated_latency=False,
        search_debounce_ms=300,
        log_level="INFO",
    )


@pytest.fixture
def product() -> dict:
    return {
        "id": 7,
        "title": "White Gold Plated Princess Ring for Weddings",
        "price": 9.99,
        "description": "Classic Created Wedding Engagement Solitaire Diamond Promise Ring",
        "category": "jewelery",
        "image": "https://fakestore.test/img/71YAIFU48IL._AC_UL640_QL65_ML3_.jpg",
        "rating": {"rate": 3, "count": 400},
    }
