from __future__ import annotations

import random
from typing import Any, Optional

from data.models import Venue


NAME_MAX_LEN = 30
DEFAULT_AMENITIES = ["WiFi", "Parking", "Air Conditioning", "Projector"]
DEFAULT_RATING = 4.0


def _truncate(title: str, max_len: int = NAME_MAX_LEN) -> str:
    return title[:max_len] + "..." if len(title) > max_len else title


def product_to_venue(product: dict[str, Any], rng: Optional[random.Random] = None) -> Venue:
    """
    Reshape a generic e-commerce product into a venue record.
    Capacity, missing review counts and the street number are random filler.
    """
    rng = rng or random.Random()
    category = str(product.get("category") or "")
    description = str(product.get("description") or "")
    rating = product.get("rating") or {}

    return Venue(
        id=int(product["id"]),
        name=_truncate(str(product.get("title") or "")),
        description=description,
        price=round(float(product.get("price") or 0) * 1000, 2),
        capacity=rng.randint(100, 599),
        image=str(product.get("image") or ""),
        rating=float(rating.get("rate") or DEFAULT_RATING),
        review_count=int(rating.get("count") or rng.randint(10, 59)),
        amenities=list(DEFAULT_AMENITIES),
        tags=[category],
        address=f"{rng.randint(0, 999)} {category} Street, Addis Ababa",
        category=category,
        detailed_description=(
            f"{description}. This venue features modern amenities and professional staff "
            "to ensure your event is successful."
        ),
    )


def products_to_venues(products: list[dict[str, Any]], rng: Optional[random.Random] = None) -> list[Venue]:
    return [product_to_venue(p, rng) for p in products]
