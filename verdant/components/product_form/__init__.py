"""
Product form component - Form state, image list parsing and submission.
"""

from verdant.domain.images import parse_image_urls

from ._impl import (
    ProductFormController,
    build_form_view,
    initial_form_state,
    product_values,
    resolve_outcome,
    submit_label,
    submitted_values,
)
from .component import run_submit
from .models import (
    PRODUCT_LIST_ROUTE,
    FormOutcome,
    Notification,
    ProductFormView,
    RequestState,
    SubmissionInProgressError,
)
from .ports import ProductActionsPort

__all__ = [
    # Component entry points
    "run_submit",
    "ProductFormController",
    # Models
    "FormOutcome",
    "Notification",
    "ProductFormView",
    "RequestState",
    "SubmissionInProgressError",
    "PRODUCT_LIST_ROUTE",
    # Ports
    "ProductActionsPort",
    # Functions
    "build_form_view",
    "initial_form_state",
    "parse_image_urls",
    "product_values",
    "resolve_outcome",
    "submit_label",
    "submitted_values",
]
