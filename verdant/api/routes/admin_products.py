"""
Admin product routes.

Product list, add and edit pages. Reads go through the catalog
component with the service-role backend; submissions go through the
product form controller to the product actions.
"""

from urllib.parse import quote, unquote
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from verdant.api.deps import get_admin_backend, get_layout, get_rules, require_admin
from verdant.api.templating import render_page
from verdant.components.catalog import (
    GetProductInput,
    run_get_product,
    run_list_admin_products,
    run_list_categories,
)
from verdant.components.layout import LayoutData
from verdant.components.product_actions import (
    ProductActions,
    ProductFormData,
    UploadedImage,
)
from verdant.components.product_form import (
    PRODUCT_LIST_ROUTE,
    Notification,
    ProductFormController,
    build_form_view,
    run_submit,
    submit_label,
    submitted_values,
)
from verdant.domain.entities import Category, Product
from verdant.ports.backend import BackendPort
from verdant.rules.models import Rules

router = APIRouter(dependencies=[Depends(require_admin)])

FLASH_COOKIE = "flash"
FLASH_MAX_AGE = 60


# --- Form Parsing ---


async def read_product_form(
    request: Request, max_upload_bytes: int
) -> tuple[ProductFormData, list[UploadedImage]]:
    """
    Parse the multipart product form into form data and picked images.

    Each file is read up to one byte past the upload limit, enough for
    validation to reject it.
    """
    form = await request.form()

    def text(name: str) -> str | None:
        value = form.get(name)
        return value if isinstance(value, str) else None

    data = ProductFormData(
        name=text("name") or "",
        price=text("price") or "",
        description=text("description") or "",
        long_description=text("long_description") or "",
        category_id=text("category_id") or "",
        data_ai_hint=text("data_ai_hint") or "",
        image_url=text("image_url"),
        is_featured=text("is_featured"),
        is_best_seller=text("is_best_seller"),
    )

    images = []
    for upload in form.getlist("image_file"):
        # An empty file input still posts one nameless part
        if isinstance(upload, str) or not upload.filename:
            continue
        images.append(
            UploadedImage(
                filename=upload.filename,
                content_type=upload.content_type or "application/octet-stream",
                data=await upload.read(max_upload_bytes + 1),
            )
        )
    return data, images


def _render_form(
    request: Request,
    layout: LayoutData,
    view_kwargs: dict,
    status_code: int = 200,
) -> HTMLResponse:
    view = build_form_view(**view_kwargs)
    return render_page(
        request,
        "admin/products/form.html",
        layout,
        {
            "form": view,
            "submit_label": submit_label(view.is_editing, pending=False),
            "pending_label": submit_label(view.is_editing, pending=True),
            "notification": view.notification,
        },
        status_code=status_code,
    )


def _get_product_or_404(product_id: UUID, backend: BackendPort) -> Product:
    product = run_get_product(GetProductInput(product_id=product_id), backend)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


async def _submit(
    request: Request,
    layout: LayoutData,
    backend: BackendPort,
    rules: Rules,
    categories: list[Category],
    product: Product | None,
) -> Response:
    form_data, images = await read_product_form(request, rules.uploads.max_upload_bytes)
    actions = ProductActions(
        backend, rules, category_ids=[str(c.id) for c in categories]
    )
    controller = ProductFormController(is_editing=product is not None)
    outcome = run_submit(
        controller,
        form_data,
        images,
        actions,
        product_id=product.id if product else None,
    )

    if outcome.navigate_to:
        response = RedirectResponse(url=outcome.navigate_to, status_code=303)
        response.set_cookie(
            FLASH_COOKIE,
            quote(controller.state.message, safe=""),
            max_age=FLASH_MAX_AGE,
            path=PRODUCT_LIST_ROUTE,
            httponly=True,
            samesite="lax",
        )
        return response

    if controller.state.success and product is not None:
        # Re-read so the form shows what was stored
        product = _get_product_or_404(product.id, backend)
        values = None
    else:
        values = submitted_values(form_data)

    return _render_form(
        request,
        layout,
        {
            "categories": categories,
            "product": product,
            "state": controller.state,
            "request_state": controller.request_state,
            "values": values,
            "notification": outcome.notification,
        },
        status_code=200 if controller.state.success else 400,
    )


# --- Pages ---


@router.get("", response_class=HTMLResponse)
def list_products(
    request: Request,
    layout: LayoutData = Depends(get_layout),
    backend: BackendPort = Depends(get_admin_backend),
) -> HTMLResponse:
    """Admin product table. A failed query renders an empty table."""
    result = run_list_admin_products(backend)
    # Set by the add form after a successful create; shown once
    flash = request.cookies.get(FLASH_COOKIE)
    notification = Notification(title="Success!", description=unquote(flash)) if flash else None
    response = render_page(
        request,
        "admin/products/list.html",
        layout,
        {
            "products": result.products,
            "total": result.total,
            "add_url": f"{PRODUCT_LIST_ROUTE}/add",
            "notification": notification,
        },
    )
    if flash:
        response.delete_cookie(FLASH_COOKIE, path=PRODUCT_LIST_ROUTE)
    return response


@router.get("/add", response_class=HTMLResponse)
def add_product_page(
    request: Request,
    layout: LayoutData = Depends(get_layout),
    backend: BackendPort = Depends(get_admin_backend),
) -> HTMLResponse:
    categories = run_list_categories(backend)
    return _render_form(request, layout, {"categories": categories})


@router.post("/add")
async def add_product(
    request: Request,
    layout: LayoutData = Depends(get_layout),
    backend: BackendPort = Depends(get_admin_backend),
    rules: Rules = Depends(get_rules),
) -> Response:
    categories = run_list_categories(backend)
    return await _submit(request, layout, backend, rules, categories, product=None)


@router.get("/{product_id}/edit", response_class=HTMLResponse)
def edit_product_page(
    product_id: UUID,
    request: Request,
    layout: LayoutData = Depends(get_layout),
    backend: BackendPort = Depends(get_admin_backend),
) -> HTMLResponse:
    product = _get_product_or_404(product_id, backend)
    categories = run_list_categories(backend)
    return _render_form(request, layout, {"categories": categories, "product": product})


@router.post("/{product_id}/edit")
async def update_product(
    product_id: UUID,
    request: Request,
    layout: LayoutData = Depends(get_layout),
    backend: BackendPort = Depends(get_admin_backend),
    rules: Rules = Depends(get_rules),
) -> Response:
    product = _get_product_or_404(product_id, backend)
    categories = run_list_categories(backend)
    return await _submit(request, layout, backend, rules, categories, product=product)
