from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from verdant.domain.images import parse_image_urls

# --- Enums / Literals ---
OrderStatus = Literal["pending", "processing", "shipped", "delivered", "cancelled"]


class BackendRow(BaseModel):
    """Row mirrored from a backend table. Unknown columns pass through."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


# --- Auth ---

class AuthUser(BackendRow):
    id: UUID | str
    email: str | None = None
    created_at: datetime | None = None


class UserProfile(BackendRow):
    id: UUID | str
    full_name: str | None = None
    avatar_url: str | None = None
    phone: str | None = None
    role: str | None = None
    updated_at: datetime | None = None


# --- Catalog ---

class Category(BackendRow):
    id: UUID | str
    name: str


class Product(BackendRow):
    id: UUID | str
    name: str
    price: float
    description: str = ""
    long_description: str = ""
    category_id: UUID | str | None = None
    image_url: str | None = None
    data_ai_hint: str = ""
    is_featured: bool = False
    is_best_seller: bool = False
    created_at: datetime | None = None

    def image_urls(self) -> list[str]:
        return parse_image_urls(self.image_url)

    # Camel-cased aliases consumed by the storefront templates.
    @property
    def imageUrl(self) -> str:  # noqa: N802
        urls = self.image_urls()
        return urls[0] if urls else ""

    @property
    def longDescription(self) -> str:  # noqa: N802
        return self.long_description

    @property
    def dataAiHint(self) -> str:  # noqa: N802
        return self.data_ai_hint


class CategoryName(BaseModel):
    name: str


class ProductListRow(BackendRow):
    """Admin listing projection: products joined with the category name."""

    id: UUID | str
    name: str
    price: float
    image_url: str | None = None
    categories: CategoryName | None = None

    @property
    def category_name(self) -> str:
        return self.categories.name if self.categories else ""

    @property
    def thumbnail_url(self) -> str | None:
        urls = parse_image_urls(self.image_url)
        return urls[0] if urls else None


class CartItem(BaseModel):
    product: Product
    quantity: int = Field(default=1, ge=1)


class HeroSlide(BackendRow):
    id: UUID | str
    title: str | None = None
    subtitle: str | None = None
    image_url: str | None = None
    link_url: str | None = None
    position: int = 0


# --- Orders ---

class Address(BackendRow):
    id: UUID | str
    user_id: UUID | str | None = None
    street: str | None = None
    city: str | None = None
    postal_code: str | None = None
    country: str | None = None


class Order(BackendRow):
    id: UUID | str
    user_id: UUID | str | None = None
    status: OrderStatus | str = "pending"
    total: float = 0.0
    created_at: datetime | None = None


class OrderItem(BackendRow):
    id: UUID | str
    order_id: UUID | str
    product_id: UUID | str
    quantity: int = 1
    price: float = 0.0


# --- Engagement ---

class Review(BackendRow):
    id: UUID | str
    product_id: UUID | str
    user_id: UUID | str | None = None
    rating: int = Field(default=5, ge=1, le=5)
    comment: str | None = None
    created_at: datetime | None = None


class ReviewAuthor(BaseModel):
    full_name: str | None = None
    avatar_url: str | None = None


class ReviewWithAuthor(Review):
    user_profiles: ReviewAuthor | None = None


class Wishlist(BackendRow):
    id: UUID | str
    user_id: UUID | str
    product_id: UUID | str
    created_at: datetime | None = None
