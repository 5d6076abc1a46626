"""
Product form component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from verdant.components.product_actions import ActionResult
from verdant.domain.entities import Category, Product

RequestState = Literal["idle", "pending", "succeeded", "failed"]
NotificationVariant = Literal["default", "destructive"]

PRODUCT_LIST_ROUTE = "/admin/products"


class SubmissionInProgressError(Exception):
    """A second submission was attempted while one is pending."""


@dataclass(frozen=True)
class Notification:
    """Toast shown after a submission settles."""

    title: str
    description: str
    variant: NotificationVariant = "default"


@dataclass(frozen=True)
class FormOutcome:
    """What the page does once the action result arrives."""

    notification: Notification | None = None
    navigate_to: str | None = None


@dataclass(frozen=True)
class ProductFormView:
    """Everything the product form template renders."""

    categories: list[Category]
    product: Product | None
    state: ActionResult
    request_state: RequestState
    image_urls: list[str]
    existing_image_field: str
    values: dict[str, str] = field(default_factory=dict)
    notification: Notification | None = None

    @property
    def is_editing(self) -> bool:
        return self.product is not None

    @property
    def pending(self) -> bool:
        return self.request_state == "pending"

    def error_for(self, field_name: str) -> str | None:
        messages = self.state.errors.get(field_name) or []
        return messages[0] if messages else None

    def checked(self, field_name: str) -> bool:
        return self.values.get(field_name) == "on"
