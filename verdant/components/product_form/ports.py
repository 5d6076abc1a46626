"""
Product form component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from verdant.components.product_actions import ActionResult, ProductFormData, UploadedImage


class ProductActionsPort(Protocol):
    """Server actions the form submits to."""

    def add_product(self, form: ProductFormData, images: list[UploadedImage]) -> ActionResult:
        ...

    def update_product(
        self,
        product_id: UUID | str,
        form: ProductFormData,
        images: list[UploadedImage],
    ) -> ActionResult: ...
