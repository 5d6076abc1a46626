"""
Storefront routes.

Server-rendered public pages. Every read failure degrades to an empty
section; only a missing product or category is a 404.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from verdant.api.deps import get_backend, get_layout
from verdant.api.templating import render_page
from verdant.components.catalog import (
    GetProductInput,
    ListCategoryProductsInput,
    run_get_product,
    run_list_category_products,
    run_list_storefront,
)
from verdant.components.layout import LayoutData
from verdant.ports.backend import BackendPort

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def home(
    request: Request,
    layout: LayoutData = Depends(get_layout),
    backend: BackendPort = Depends(get_backend),
) -> HTMLResponse:
    """Home page with featured and best-selling products."""
    result = run_list_storefront(backend)
    return render_page(
        request,
        "storefront/home.html",
        layout,
        {"featured": result.featured, "best_sellers": result.best_sellers},
    )


@router.get("/products/{product_id}", response_class=HTMLResponse)
def product_detail(
    product_id: UUID,
    request: Request,
    layout: LayoutData = Depends(get_layout),
    backend: BackendPort = Depends(get_backend),
) -> HTMLResponse:
    product = run_get_product(GetProductInput(product_id=product_id), backend)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")

    category_name = next(
        (c.name for c in layout.categories if str(c.id) == str(product.category_id)), None
    )
    return render_page(
        request,
        "storefront/product.html",
        layout,
        {"product": product, "images": product.image_urls(), "category_name": category_name},
    )


@router.get("/categories/{category_id}", response_class=HTMLResponse)
def category_page(
    category_id: UUID,
    request: Request,
    layout: LayoutData = Depends(get_layout),
    backend: BackendPort = Depends(get_backend),
) -> HTMLResponse:
    result = run_list_category_products(ListCategoryProductsInput(category_id=category_id), backend)
    if result.category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return render_page(
        request,
        "storefront/category.html",
        layout,
        {"category": result.category, "products": result.products},
    )
