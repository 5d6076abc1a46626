"""Entity types mirrored from the backend schema."""

import pytest
from pydantic import ValidationError

from verdant.domain.entities import (
    CartItem,
    Category,
    Order,
    Product,
    ProductListRow,
    ReviewWithAuthor,
)


def test_review_with_author() -> None:
    review = ReviewWithAuthor.model_validate(
        {
            "id": "r1",
            "product_id": "p1",
            "rating": 4,
            "comment": "Lovely",
            "user_profiles": {"full_name": "Sam Lee", "avatar_url": None},
        }
    )

    assert review.user_profiles is not None
    assert review.user_profiles.full_name == "Sam Lee"


def test_review_without_author() -> None:
    review = ReviewWithAuthor.model_validate(
        {"id": "r1", "product_id": "p1", "user_profiles": None}
    )
    assert review.user_profiles is None


def test_review_rating_bounds() -> None:
    with pytest.raises(ValidationError):
        ReviewWithAuthor.model_validate({"id": "r1", "product_id": "p1", "rating": 6})


def test_cart_item_quantity_positive() -> None:
    product = Product(id="p1", name="Apples", price=1.0)

    assert CartItem(product=product, quantity=3).quantity == 3
    with pytest.raises(ValidationError):
        CartItem(product=product, quantity=0)


def test_order_keeps_unknown_columns() -> None:
    order = Order.model_validate({"id": "o1", "total": 10.5, "shipping_method": "express"})

    assert order.status == "pending"
    assert order.model_extra == {"shipping_method": "express"}


def test_listing_row_without_category() -> None:
    row = ProductListRow.model_validate(
        {"id": "p1", "name": "Apples", "price": 1, "image_url": None, "categories": None}
    )

    assert row.category_name == ""
    assert row.thumbnail_url is None


def test_category_requires_name() -> None:
    with pytest.raises(ValidationError):
        Category.model_validate({"id": "c1"})
