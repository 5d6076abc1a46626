"""
Product actions component - Server actions behind the product form.

Shell Layer - validates, uploads images, writes the products table and
converts failures into an ActionResult. Nothing here raises to the caller.
"""

from __future__ import annotations

import logging
from uuid import UUID, uuid4

from verdant.ports.backend import BackendError
from verdant.rules.models import Rules, UploadRules

from ._impl import reconcile_image_field, validate_images, validate_product_form
from .models import (
    INVALID_FORM_MESSAGE,
    ActionResult,
    FieldErrors,
    ProductFormData,
    UploadedImage,
)
from .ports import ProductWriteBackendPort

logger = logging.getLogger(__name__)


def _validate(
    form: ProductFormData,
    images: list[UploadedImage],
    rules: Rules,
    category_ids: list[str] | None,
) -> tuple[dict[str, object] | None, FieldErrors]:
    product, errors = validate_product_form(form, rules.products, category_ids)
    image_errors = validate_images(images, rules.uploads)
    if image_errors:
        errors = {**errors, "image_file": image_errors}
    if errors or product is None:
        return None, errors
    return product.model_dump(), {}


def _upload_images(
    images: list[UploadedImage],
    backend: ProductWriteBackendPort,
    rules: UploadRules,
) -> list[str]:
    urls = []
    for image in images:
        path = f"{rules.path_prefix}/{uuid4()}{image.extension}"
        stored = backend.upload(rules.bucket, path, image.data, image.content_type)
        urls.append(backend.public_url(rules.bucket, stored))
    return urls


def run_add_product(
    form: ProductFormData,
    images: list[UploadedImage],
    backend: ProductWriteBackendPort,
    rules: Rules,
    category_ids: list[str] | None = None,
) -> ActionResult:
    """Create a product from a form submission."""
    fields, errors = _validate(form, images, rules, category_ids)
    if fields is None:
        return ActionResult(message=INVALID_FORM_MESSAGE, success=False, errors=errors)

    try:
        urls = _upload_images(images, backend, rules.uploads)
    except BackendError as e:
        logger.error("Image upload failed for new product: %s", e)
        return ActionResult(message=f"Storage Error: Failed to upload image. {e.message}")

    row = {**fields, "image_url": reconcile_image_field(None, urls)}
    try:
        backend.insert("products", row)
    except BackendError as e:
        logger.error("Error adding product: %s", e)
        return ActionResult(message=f"Database Error: Failed to add product. {e.message}")

    logger.info("Product added: %s", fields["name"])
    return ActionResult(message=f'Product "{fields["name"]}" added successfully.', success=True)


def run_update_product(
    product_id: UUID | str,
    form: ProductFormData,
    images: list[UploadedImage],
    backend: ProductWriteBackendPort,
    rules: Rules,
    category_ids: list[str] | None = None,
) -> ActionResult:
    """
    Update a product from a form submission.

    Without new images the list in the hidden image_url field is kept;
    with new images it is replaced.
    """
    fields, errors = _validate(form, images, rules, category_ids)
    if fields is None:
        return ActionResult(message=INVALID_FORM_MESSAGE, success=False, errors=errors)

    try:
        urls = _upload_images(images, backend, rules.uploads)
    except BackendError as e:
        logger.error("Image upload failed for product %s: %s", product_id, e)
        return ActionResult(message=f"Storage Error: Failed to upload image. {e.message}")

    row = {**fields, "image_url": reconcile_image_field(form.image_url, urls)}
    try:
        updated = backend.update("products", row, filters={"id": str(product_id)})
    except BackendError as e:
        logger.error("Error updating product %s: %s", product_id, e)
        return ActionResult(message=f"Database Error: Failed to update product. {e.message}")

    if not updated:
        return ActionResult(message="Database Error: Failed to update product. Product not found.")

    logger.info("Product updated: %s", product_id)
    return ActionResult(
        message=f'Product "{fields["name"]}" updated successfully.', success=True
    )


class ProductActions:
    """Server actions bound to one request's backend and rules."""

    def __init__(
        self,
        backend: ProductWriteBackendPort,
        rules: Rules,
        category_ids: list[str] | None = None,
    ) -> None:
        self._backend = backend
        self._rules = rules
        self._category_ids = category_ids

    def add_product(self, form: ProductFormData, images: list[UploadedImage]) -> ActionResult:
        return run_add_product(form, images, self._backend, self._rules, self._category_ids)

    def update_product(
        self,
        product_id: UUID | str,
        form: ProductFormData,
        images: list[UploadedImage],
    ) -> ActionResult:
        return run_update_product(
            product_id, form, images, self._backend, self._rules, self._category_ids
        )
