"""
Product actions component - add_product / update_product server actions.
"""

from ._impl import (
    ProductInput,
    ValidationRule,
    reconcile_image_field,
    validate_images,
    validate_product_form,
)
from .component import ProductActions, run_add_product, run_update_product
from .models import (
    INVALID_FORM_MESSAGE,
    ActionResult,
    FieldErrors,
    ProductFormData,
    UploadedImage,
)
from .ports import ProductWriteBackendPort

__all__ = [
    # Component entry points
    "run_add_product",
    "run_update_product",
    "ProductActions",
    # Models
    "ActionResult",
    "FieldErrors",
    "ProductFormData",
    "UploadedImage",
    "INVALID_FORM_MESSAGE",
    # Ports
    "ProductWriteBackendPort",
    # Functions
    "ProductInput",
    "ValidationRule",
    "reconcile_image_field",
    "validate_images",
    "validate_product_form",
]
