"""
Product form component - Submission.

Shell Layer - dispatches to the create or update action and settles the
form's request state with the result.
"""

from __future__ import annotations

from uuid import UUID

from verdant.components.product_actions import ProductFormData, UploadedImage

from ._impl import ProductFormController
from .models import FormOutcome
from .ports import ProductActionsPort


def run_submit(
    controller: ProductFormController,
    form: ProductFormData,
    images: list[UploadedImage],
    actions: ProductActionsPort,
    product_id: UUID | str | None = None,
) -> FormOutcome:
    """
    Submit the form once.

    update_product is used when a product id is present, add_product
    otherwise. Raises SubmissionInProgressError if already pending.
    """
    controller.begin_submit()
    if product_id is not None:
        result = actions.update_product(product_id, form, images)
    else:
        result = actions.add_product(form, images)
    return controller.settle(result)
