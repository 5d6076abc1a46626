"""
Product form validation and image reconciliation (pure functions).

Key behaviors:
- Required text fields are trimmed and length-checked
- Price must be a positive number with at most two decimals
- Category must be one of the known categories when they are available
- Newly picked images replace every existing image; with no new images
  the hidden field's existing list is kept
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, Field

from verdant.domain.images import parse_image_urls, serialize_image_urls
from verdant.rules.models import ProductRules, UploadRules

from .models import FieldErrors, ProductFormData, UploadedImage

# --- Validation Rules ---


@dataclass
class ValidationRule:
    """Required text field with a maximum length."""

    field: str
    label: str
    max_length: int


def text_rules(rules: ProductRules) -> list[ValidationRule]:
    return [
        ValidationRule(field="name", label="Name", max_length=rules.name_max),
        ValidationRule(
            field="description", label="Short description", max_length=rules.description_max
        ),
        ValidationRule(
            field="long_description",
            label="Long description",
            max_length=rules.long_description_max,
        ),
        ValidationRule(
            field="data_ai_hint", label="AI hint", max_length=rules.data_ai_hint_max
        ),
    ]


class ProductInput(BaseModel):
    """Validated product fields, ready to be written as a row."""

    name: str = Field(min_length=1)
    price: float = Field(ge=0)
    description: str = Field(min_length=1)
    long_description: str = Field(min_length=1)
    category_id: str = Field(min_length=1)
    data_ai_hint: str = Field(min_length=1)
    is_featured: bool = False
    is_best_seller: bool = False


# --- Validation Functions ---


def _add(errors: FieldErrors, field: str, message: str) -> None:
    errors.setdefault(field, []).append(message)


def _validate_price(raw: str, rules: ProductRules, errors: FieldErrors) -> float | None:
    raw = raw.strip()
    if not raw:
        _add(errors, "price", "Price is required")
        return None
    try:
        value = Decimal(raw)
    except InvalidOperation:
        _add(errors, "price", "Price must be a number")
        return None
    if not value.is_finite():
        _add(errors, "price", "Price must be a number")
        return None
    if value < 0:
        _add(errors, "price", "Price must not be negative")
    elif value > Decimal(str(rules.price_max)):
        _add(errors, "price", f"Price must not exceed {rules.price_max:,.2f}")
    exponent = value.as_tuple().exponent
    if isinstance(exponent, int) and exponent < -2:
        _add(errors, "price", "Price can have at most two decimal places")
    return float(value)


def validate_product_form(
    form: ProductFormData,
    rules: ProductRules,
    category_ids: list[str] | None = None,
) -> tuple[ProductInput | None, FieldErrors]:
    """
    Validate a product submission.

    Returns (product, {}) when valid, else (None, field errors). Messages
    for a field are ordered by the check that produced them.
    """
    errors: FieldErrors = {}
    values: dict[str, str] = {}

    for rule in text_rules(rules):
        value = (getattr(form, rule.field) or "").strip()
        if not value:
            _add(errors, rule.field, f"{rule.label} is required")
        elif len(value) > rule.max_length:
            _add(
                errors,
                rule.field,
                f"{rule.label} must not exceed {rule.max_length} characters",
            )
        values[rule.field] = value

    price = _validate_price(form.price or "", rules, errors)

    category_id = (form.category_id or "").strip()
    if not category_id:
        _add(errors, "category_id", "Category is required")
    elif category_ids and category_id not in category_ids:
        _add(errors, "category_id", "Select a valid category")

    if errors or price is None:
        return None, errors

    return (
        ProductInput(
            **values,
            price=price,
            category_id=category_id,
            is_featured=form.is_featured == "on",
            is_best_seller=form.is_best_seller == "on",
        ),
        {},
    )


def validate_images(images: list[UploadedImage], rules: UploadRules) -> list[str]:
    """Messages for every picked file that breaks the upload rules."""
    errors: list[str] = []
    for image in images:
        if image.extension not in rules.allowlist_extensions:
            errors.append(
                f"{image.filename}: file type not allowed "
                f"({', '.join(rules.allowlist_extensions)})"
            )
        elif image.content_type not in rules.allowlist_mime_types:
            errors.append(f"{image.filename}: content type {image.content_type} not allowed")
        if len(image.data) > rules.max_upload_bytes:
            max_mb = rules.max_upload_bytes / (1024 * 1024)
            errors.append(f"{image.filename}: file exceeds {max_mb:.0f} MB")
    return errors


def reconcile_image_field(existing: str | None, uploaded_urls: list[str]) -> str:
    """
    Value to store in the product's image column.

    New uploads replace the existing list, they are never merged.
    """
    if uploaded_urls:
        return serialize_image_urls(uploaded_urls)
    return serialize_image_urls(parse_image_urls(existing))
