"""
Catalog component - Product and category reads for admin and storefront pages.
"""

from .component import (
    run_get_product,
    run_list_admin_products,
    run_list_categories,
    run_list_category_products,
    run_list_storefront,
)
from .models import (
    ADMIN_PRODUCT_COLUMNS,
    AdminProductListOutput,
    CategoryPageOutput,
    GetProductInput,
    ListCategoryProductsInput,
    StorefrontOutput,
)
from .ports import CatalogBackendPort

__all__ = [
    # Component entry points
    "run_get_product",
    "run_list_admin_products",
    "run_list_categories",
    "run_list_category_products",
    "run_list_storefront",
    # Models
    "ADMIN_PRODUCT_COLUMNS",
    "AdminProductListOutput",
    "CategoryPageOutput",
    "GetProductInput",
    "ListCategoryProductsInput",
    "StorefrontOutput",
    # Ports
    "CatalogBackendPort",
]
