"""
Product Feed Client - FakeStore API
===================================
Thin JSON client for the public demo product catalog that backs the
"live" data mode. Products are reshaped into venues in data/transform.py.

API Reference: https://fakestoreapi.com/docs
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from config import AppConfig
from data.models import ApiError


logger = logging.getLogger(__name__)


class ProductApiClient:
    """
    FakeStore client.

    Every call either returns decoded JSON or raises ApiError; the data
    service decides whether to fall back to mock data.
    """

    def __init__(self, cfg: AppConfig):
        self.cfg = cfg
        self._base_url = cfg.api_base_url.rstrip("/")
        self._headers = {"Content-Type": "application/json"}

    def fetch(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        url = f"{self._base_url}/{path.lstrip('/')}"
        try:
            resp = requests.get(url, params=params, headers=self._headers, timeout=self.cfg.api_timeout)
        except requests.RequestException as e:
            logger.error("API Error: %s %s", url, e)
            raise ApiError(f"Request to {url} failed: {e}") from e

        if resp.status_code >= 300:
            logger.error("API Error: %s returned %s", url, resp.status_code)
            raise ApiError(f"HTTP error! Status: {resp.status_code}", status=resp.status_code)

        # FakeStore answers unknown ids with 200 and an empty body
        if not resp.content or not resp.content.strip():
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON from {url}") from e

    def list_products(self, category: Optional[str] = None, limit: int = 6, sort: str = "desc") -> list[dict]:
        path = "products"
        if category and category != "all":
            path = f"products/category/{category}"
        data = self.fetch(path, params={"limit": limit, "sort": sort})
        return data or []

    def get_product(self, product_id) -> Optional[dict]:
        return self.fetch(f"products/{product_id}")

    def list_categories(self) -> list[str]:
        return self.fetch("products/categories") or []


def get_api_client(cfg: AppConfig) -> ProductApiClient:
    """Factory function to get a product feed client instance."""
    return ProductApiClient(cfg)
