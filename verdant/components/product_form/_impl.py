"""
Product form state (functional core).

The form moves idle -> pending -> succeeded|failed. The controller owns
that request state explicitly; the action's ActionResult drives the
settled state, the notification and the post-submit navigation.
"""

from __future__ import annotations

from dataclasses import asdict

from verdant.components.product_actions import ActionResult, ProductFormData
from verdant.domain.entities import Category, Product
from verdant.domain.images import parse_image_urls

from .models import (
    PRODUCT_LIST_ROUTE,
    FormOutcome,
    Notification,
    ProductFormView,
    RequestState,
    SubmissionInProgressError,
)


def initial_form_state() -> ActionResult:
    return ActionResult(message="", success=False, errors={})


def resolve_outcome(result: ActionResult, is_editing: bool) -> FormOutcome:
    """
    Map an action result to a notification and optional navigation.

    Only a successful create navigates back to the product list. A result
    without a message is not announced.
    """
    if not result.message:
        return FormOutcome()
    if result.success:
        return FormOutcome(
            notification=Notification(title="Success!", description=result.message),
            navigate_to=None if is_editing else PRODUCT_LIST_ROUTE,
        )
    return FormOutcome(
        notification=Notification(
            title="Error", description=result.message, variant="destructive"
        )
    )


def submit_label(is_editing: bool, pending: bool) -> str:
    if pending:
        return "Updating..." if is_editing else "Adding..."
    return "Update Product" if is_editing else "Add Product"


def product_values(product: Product | None) -> dict[str, str]:
    """Initial input values for a product being edited (empty when creating)."""
    if product is None:
        return {}
    return {
        "name": product.name,
        "price": f"{product.price:.2f}",
        "description": product.description,
        "long_description": product.long_description,
        "category_id": str(product.category_id or ""),
        "data_ai_hint": product.data_ai_hint,
        "is_featured": "on" if product.is_featured else "",
        "is_best_seller": "on" if product.is_best_seller else "",
    }


def submitted_values(form: ProductFormData) -> dict[str, str]:
    return {key: value for key, value in asdict(form).items() if value is not None}


def build_form_view(
    categories: list[Category],
    product: Product | None = None,
    state: ActionResult | None = None,
    request_state: RequestState = "idle",
    values: dict[str, str] | None = None,
    notification: Notification | None = None,
) -> ProductFormView:
    """
    Assemble the render model for the product form.

    The hidden image field carries the stored value untouched so an update
    without new files keeps the existing images.
    """
    raw_images = product.image_url if product else None
    return ProductFormView(
        categories=categories,
        product=product,
        state=state or initial_form_state(),
        request_state=request_state,
        image_urls=parse_image_urls(raw_images),
        existing_image_field=raw_images or "[]",
        values=values if values is not None else product_values(product),
        notification=notification,
    )


class ProductFormController:
    """Request state of one product form."""

    def __init__(self, is_editing: bool, state: ActionResult | None = None) -> None:
        self.is_editing = is_editing
        self.state = state or initial_form_state()
        self.request_state: RequestState = "idle"

    @property
    def pending(self) -> bool:
        return self.request_state == "pending"

    def begin_submit(self) -> None:
        if self.pending:
            raise SubmissionInProgressError("A submission is already in flight")
        self.request_state = "pending"

    def settle(self, result: ActionResult) -> FormOutcome:
        self.state = result
        self.request_state = "succeeded" if result.success else "failed"
        return resolve_outcome(result, self.is_editing)
