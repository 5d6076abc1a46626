"""
Catalog component - Product and category reads.

Shell Layer - performs backend queries. Read-path failures are logged and
masked behind empty results; they never reach the page.
"""

from __future__ import annotations

import logging

from verdant.domain.entities import Category, Product, ProductListRow
from verdant.ports.backend import BackendError

from .models import (
    ADMIN_PRODUCT_COLUMNS,
    AdminProductListOutput,
    CategoryPageOutput,
    GetProductInput,
    ListCategoryProductsInput,
    StorefrontOutput,
)
from .ports import CatalogBackendPort

logger = logging.getLogger(__name__)


def run_list_admin_products(backend: CatalogBackendPort) -> AdminProductListOutput:
    """
    List all products with their category name, ordered by name.

    Returns an empty list when the query fails.
    """
    try:
        rows = backend.select(
            "products", ADMIN_PRODUCT_COLUMNS, order_by="name", ascending=True
        )
    except BackendError as e:
        # Silent fallback: the admin sees an empty table, see DESIGN.md.
        logger.error("Error fetching products: %s", e)
        return AdminProductListOutput(products=(), total=0)

    products = tuple(ProductListRow.model_validate(row) for row in rows)
    return AdminProductListOutput(products=products, total=len(products))


def run_list_categories(backend: CatalogBackendPort) -> list[Category]:
    """All categories ordered by name, or [] on failure."""
    try:
        rows = backend.select("categories", "*", order_by="name")
    except BackendError as e:
        logger.error("Error fetching categories: %s", e)
        return []
    return [Category.model_validate(row) for row in rows]


def run_get_product(
    input_data: GetProductInput,
    backend: CatalogBackendPort,
) -> Product | None:
    """Get a product by ID. None when missing or the query fails."""
    try:
        rows = backend.select("products", "*", filters={"id": str(input_data.product_id)})
    except BackendError as e:
        logger.error("Error fetching product %s: %s", input_data.product_id, e)
        return None
    if not rows:
        return None
    return Product.model_validate(rows[0])


def _list_flagged(backend: CatalogBackendPort, flag: str) -> tuple[Product, ...]:
    try:
        rows = backend.select("products", "*", filters={flag: True}, order_by="name")
    except BackendError as e:
        logger.error("Error fetching %s products: %s", flag, e)
        return ()
    return tuple(Product.model_validate(row) for row in rows)


def run_list_storefront(backend: CatalogBackendPort) -> StorefrontOutput:
    """Featured and best-seller products for the home page."""
    return StorefrontOutput(
        featured=_list_flagged(backend, "is_featured"),
        best_sellers=_list_flagged(backend, "is_best_seller"),
    )


def run_list_category_products(
    input_data: ListCategoryProductsInput,
    backend: CatalogBackendPort,
) -> CategoryPageOutput:
    """A category with its products ordered by name."""
    category_id = str(input_data.category_id)
    try:
        category_rows = backend.select("categories", "*", filters={"id": category_id})
        product_rows = backend.select(
            "products", "*", filters={"category_id": category_id}, order_by="name"
        )
    except BackendError as e:
        logger.error("Error fetching category %s: %s", category_id, e)
        return CategoryPageOutput(category=None, products=())

    category = Category.model_validate(category_rows[0]) if category_rows else None
    return CategoryPageOutput(
        category=category,
        products=tuple(Product.model_validate(row) for row in product_rows),
    )
