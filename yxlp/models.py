"""Entity records served by the test-data layer.

All records are frozen pydantic models. Python attributes are snake_case and
serialise to the camelCase keys the storefront and admin UIs consume
(``original_price`` -> ``originalPrice``, ``user_id`` -> ``userId``).
"""

from __future__ import annotations

from datetime import datetime
from typing import Generic, List, Literal, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


CustomerRole = Literal["user", "distributor"]
OrderStatus = Literal["pending", "confirmed", "processing", "shipped", "delivered", "cancelled", "returned"]
PaymentStatus = Literal["pending", "paid", "failed", "refunded", "partial"]


class Record(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ProductColor(Record):
    name: str
    code: str


class SizeMeasurements(Record):
    chest: int
    waist: int
    length: int


class ProductSize(Record):
    name: str
    measurements: SizeMeasurements


class ProductDimensions(Record):
    length: int
    width: int
    height: int


class Category(Record):
    id: str
    name: str
    description: str
    image: str
    subcategories: List[str] = Field(default_factory=list)
    product_count: int
    featured: bool
    sort_order: int
    created_at: datetime
    updated_at: datetime


class Product(Record):
    id: str
    name: str
    description: str
    price: float
    original_price: Optional[float] = None
    images: List[str] = Field(default_factory=list)
    category: str
    subcategory: Optional[str] = None
    brand: str
    sku: str
    colors: List[ProductColor] = Field(default_factory=list)
    sizes: List[ProductSize] = Field(default_factory=list)
    materials: List[str] = Field(default_factory=list)
    rating: int
    review_count: int
    in_stock: bool
    stock_quantity: int
    min_order_quantity: int
    tags: List[str] = Field(default_factory=list)
    is_new: bool = False
    is_best_seller: bool = False
    is_premium: bool = False
    is_featured: bool = False
    weight: int
    dimensions: ProductDimensions
    created_at: datetime
    updated_at: datetime


class Address(Record):
    street: str
    city: str
    state: str
    zip_code: str
    country: str


class NotificationPreferences(Record):
    email: bool
    sms: bool
    push: bool


class CustomerPreferences(Record):
    language: str = "en"
    currency: str = "USD"
    notifications: NotificationPreferences


class Customer(Record):
    id: str
    username: str
    email: str
    display_name: str
    role: CustomerRole
    first_name: str
    last_name: str
    phone: Optional[str] = None
    company: Optional[str] = None
    country: str
    address: Address
    is_verified: bool
    is_active: bool
    avatar: Optional[str] = None
    preferences: CustomerPreferences
    created_at: datetime
    last_login_at: Optional[datetime] = None
    updated_at: datetime


class OrderItem(Record):
    product_id: str
    product_name: str
    product_image: str
    sku: str
    quantity: int
    price: float
    color: Optional[str] = None
    size: Optional[str] = None
    total: float


class Order(Record):
    id: str
    user_id: str
    items: List[OrderItem] = Field(default_factory=list)
    subtotal: float
    tax: float
    shipping: float
    total: float
    currency: str = "USD"
    status: OrderStatus
    payment_status: PaymentStatus
    payment_method: str
    shipping_address: Address
    billing_address: Address
    tracking_number: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    estimated_delivery: Optional[datetime] = None


class Dataset(Record):
    """One snapshot: every cross-reference inside it resolves within it."""

    categories: List[Category] = Field(default_factory=list)
    products: List[Product] = Field(default_factory=list)
    customers: List[Customer] = Field(default_factory=list)
    orders: List[Order] = Field(default_factory=list)


T = TypeVar("T")


class Page(Record, Generic[T]):
    items: List[T]
    total: int
    page: int
    limit: int
    total_pages: int
    has_next: bool
    has_prev: bool


class ProductFilters(Record):
    category: Optional[str] = None
    price_range: Optional[Tuple[float, float]] = None
    colors: Optional[List[str]] = None
    sizes: Optional[List[str]] = None
    brands: Optional[List[str]] = None
    in_stock: Optional[bool] = None
    rating: Optional[float] = None
    tags: Optional[List[str]] = None


class ProductStats(Record):
    total: int
    in_stock: int
    out_of_stock: int
    featured: int
    new: int


class CategoryStats(Record):
    total: int
    featured: int


class CustomerStats(Record):
    total: int
    active: int
    verified: int
    distributors: int


class OrderStats(Record):
    total: int
    pending: int
    processing: int
    shipped: int
    delivered: int
    total_revenue: float


class Statistics(Record):
    products: ProductStats
    categories: CategoryStats
    customers: CustomerStats
    orders: OrderStats
