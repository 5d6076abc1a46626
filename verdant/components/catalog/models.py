"""
Catalog component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from verdant.domain.entities import Category, Product, ProductListRow

ADMIN_PRODUCT_COLUMNS = """
    id,
    name,
    price,
    image_url,
    categories ( name )
"""


# --- Input Models ---


@dataclass(frozen=True)
class GetProductInput:
    """Input for fetching one product."""

    product_id: UUID | str


@dataclass(frozen=True)
class ListCategoryProductsInput:
    """Input for listing the products of one category."""

    category_id: UUID | str


# --- Output Models ---


@dataclass(frozen=True)
class AdminProductListOutput:
    """Rows for the admin product table."""

    products: tuple[ProductListRow, ...]
    total: int


@dataclass(frozen=True)
class StorefrontOutput:
    """Products highlighted on the home page."""

    featured: tuple[Product, ...]
    best_sellers: tuple[Product, ...]


@dataclass(frozen=True)
class CategoryPageOutput:
    """A category and its products. category is None when not found."""

    category: Category | None
    products: tuple[Product, ...]
