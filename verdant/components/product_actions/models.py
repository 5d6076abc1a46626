"""
Product actions component - Data models.

ActionResult is the contract between a server action and the product
form: a success flag, a message for the notification and a field errors
map (field name -> ordered list of messages).
"""

from __future__ import annotations

from dataclasses import dataclass, field

FieldErrors = dict[str, list[str]]

INVALID_FORM_MESSAGE = "Please fix the errors below."


@dataclass(frozen=True)
class ActionResult:
    """Result returned by add_product/update_product."""

    message: str = ""
    success: bool = False
    errors: FieldErrors = field(default_factory=dict)


@dataclass(frozen=True)
class ProductFormData:
    """Raw product form submission. Checkboxes hold "on" when ticked."""

    name: str = ""
    price: str = ""
    description: str = ""
    long_description: str = ""
    category_id: str = ""
    data_ai_hint: str = ""
    image_url: str | None = None
    is_featured: str | None = None
    is_best_seller: str | None = None


@dataclass(frozen=True)
class UploadedImage:
    """One file picked in the image input."""

    filename: str
    content_type: str
    data: bytes

    @property
    def extension(self) -> str:
        _, dot, ext = self.filename.rpartition(".")
        return f".{ext.lower()}" if dot else ""
