"""In-memory query/aggregation service over one dataset snapshot.

Every read awaits an artificial delay to mimic a network round trip. The delay
is the only suspension point. Reads do not pin a snapshot across it: a read
that overlaps a ``regenerate()`` returns data from whichever snapshot is
current when its delay resolves. Snapshots are swapped as a whole, so a single
result never mixes two generations.
"""

from __future__ import annotations

import asyncio
import logging
import math
from abc import ABC, abstractmethod
from typing import List, Mapping, Optional, Sequence, TypeVar

from .config import DatasetConfig
from .errors import NotInitializedError
from .generate_data import DatasetBuilder
from .models import (
    Category,
    CategoryStats,
    Customer,
    CustomerStats,
    Dataset,
    Order,
    OrderStats,
    Page,
    Product,
    ProductFilters,
    ProductStats,
    Statistics,
)


_log = logging.getLogger("yxlp")

T = TypeVar("T")

# Simulated latency per operation, milliseconds.
LIST_DELAY_MS = 500
LOOKUP_DELAY_MS = 200
HIGHLIGHT_DELAY_MS = 300
SEARCH_DELAY_MS = 400
STATISTICS_DELAY_MS = 300
REGENERATE_DELAY_MS = 1000


def paginate(items: Sequence[T], page: int, limit: int) -> Page[T]:
    total = len(items)
    if limit < 1:
        return Page(items=[], total=total, page=page, limit=limit, total_pages=0, has_next=False, has_prev=page > 1)

    total_pages = math.ceil(total / limit)
    start = (page - 1) * limit
    page_items = list(items[start:start + limit]) if page >= 1 else []
    return Page(
        items=page_items,
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_prev=page > 1,
    )


def filter_products(products: Sequence[Product], filters: Optional[ProductFilters]) -> List[Product]:
    result = list(products)
    if filters is None:
        return result

    if filters.category:
        result = [p for p in result if p.category == filters.category]
    if filters.price_range:
        low, high = filters.price_range
        result = [p for p in result if low <= p.price <= high]
    if filters.colors:
        wanted = set(filters.colors)
        result = [p for p in result if any(c.name in wanted for c in p.colors)]
    if filters.sizes:
        wanted = set(filters.sizes)
        result = [p for p in result if any(s.name in wanted for s in p.sizes)]
    if filters.brands:
        wanted = set(filters.brands)
        result = [p for p in result if p.brand in wanted]
    if filters.in_stock is not None:
        result = [p for p in result if p.in_stock == filters.in_stock]
    if filters.rating:
        result = [p for p in result if p.rating >= filters.rating]
    if filters.tags:
        wanted = set(filters.tags)
        result = [p for p in result if any(t in wanted for t in p.tags)]
    return result


def matches_query(product: Product, query: str) -> bool:
    q = query.lower()
    return (
        q in product.name.lower()
        or q in product.description.lower()
        or any(q in tag.lower() for tag in product.tags)
        or q in product.brand.lower()
    )


def compute_statistics(data: Dataset) -> Statistics:
    products, categories, customers, orders = data.products, data.categories, data.customers, data.orders
    in_stock = sum(1 for p in products if p.in_stock)
    return Statistics(
        products=ProductStats(
            total=len(products),
            in_stock=in_stock,
            out_of_stock=len(products) - in_stock,
            featured=sum(1 for p in products if p.is_featured),
            new=sum(1 for p in products if p.is_new),
        ),
        categories=CategoryStats(
            total=len(categories),
            featured=sum(1 for c in categories if c.featured),
        ),
        customers=CustomerStats(
            total=len(customers),
            active=sum(1 for c in customers if c.is_active),
            verified=sum(1 for c in customers if c.is_verified),
            distributors=sum(1 for c in customers if c.role == "distributor"),
        ),
        orders=OrderStats(
            total=len(orders),
            pending=sum(1 for o in orders if o.status == "pending"),
            processing=sum(1 for o in orders if o.status == "processing"),
            shipped=sum(1 for o in orders if o.status == "shipped"),
            delivered=sum(1 for o in orders if o.status == "delivered"),
            total_revenue=sum(o.total for o in orders),
        ),
    )


class CatalogDataSource(ABC):
    """Operations the storefront and admin pages call.

    An HTTP-backed implementation can replace :class:`DataService` without
    callers noticing.
    """

    @abstractmethod
    async def list_products(self, page: int = 1, limit: int = 20, filters: Optional[ProductFilters] = None) -> Page[Product]: ...

    @abstractmethod
    async def get_product(self, product_id: str) -> Optional[Product]: ...

    @abstractmethod
    async def search_products(self, query: str, limit: int = 20) -> List[Product]: ...

    @abstractmethod
    async def get_featured_products(self, limit: int = 8) -> List[Product]: ...

    @abstractmethod
    async def get_best_selling_products(self, limit: int = 8) -> List[Product]: ...

    @abstractmethod
    async def get_new_products(self, limit: int = 8) -> List[Product]: ...

    @abstractmethod
    async def list_categories(self) -> List[Category]: ...

    @abstractmethod
    async def get_category(self, category_id: str) -> Optional[Category]: ...

    @abstractmethod
    async def get_featured_categories(self) -> List[Category]: ...

    @abstractmethod
    async def list_customers(self, page: int = 1, limit: int = 20) -> Page[Customer]: ...

    @abstractmethod
    async def get_customer(self, customer_id: str) -> Optional[Customer]: ...

    @abstractmethod
    async def list_orders(self, page: int = 1, limit: int = 20) -> Page[Order]: ...

    @abstractmethod
    async def get_order(self, order_id: str) -> Optional[Order]: ...

    @abstractmethod
    async def get_customer_orders(self, customer_id: str, page: int = 1, limit: int = 10) -> Page[Order]: ...

    @abstractmethod
    async def get_statistics(self) -> Statistics: ...

    @abstractmethod
    async def regenerate(self, config: Optional[Mapping[str, Optional[int]]] = None) -> Dataset: ...

    @abstractmethod
    def export_all(self) -> Optional[Dataset]: ...

    @abstractmethod
    def clear(self) -> None: ...


class DataService(CatalogDataSource):
    def __init__(
        self,
        builder: DatasetBuilder,
        default_config: Optional[DatasetConfig] = None,
        latency_scale: float = 1.0,
    ) -> None:
        self._builder = builder
        self._default_config = default_config or DatasetConfig()
        self._latency_scale = latency_scale
        self._data: Optional[Dataset] = None
        self._cleared = False

    async def _delay(self, ms: int) -> None:
        await asyncio.sleep(ms * self._latency_scale / 1000.0)

    def _snapshot(self) -> Dataset:
        # Built lazily on first use; an explicit clear() is not undone by a read.
        if self._data is None:
            if self._cleared:
                raise NotInitializedError()
            self._data = self._builder.build(self._default_config)
        return self._data

    async def list_products(self, page: int = 1, limit: int = 20, filters: Optional[ProductFilters] = None) -> Page[Product]:
        await self._delay(LIST_DELAY_MS)
        return paginate(filter_products(self._snapshot().products, filters), page, limit)

    async def get_product(self, product_id: str) -> Optional[Product]:
        await self._delay(LOOKUP_DELAY_MS)
        return next((p for p in self._snapshot().products if p.id == product_id), None)

    async def search_products(self, query: str, limit: int = 20) -> List[Product]:
        await self._delay(SEARCH_DELAY_MS)
        return [p for p in self._snapshot().products if matches_query(p, query)][: max(0, limit)]

    async def get_featured_products(self, limit: int = 8) -> List[Product]:
        await self._delay(HIGHLIGHT_DELAY_MS)
        return [p for p in self._snapshot().products if p.is_featured][: max(0, limit)]

    async def get_best_selling_products(self, limit: int = 8) -> List[Product]:
        await self._delay(HIGHLIGHT_DELAY_MS)
        return [p for p in self._snapshot().products if p.is_best_seller][: max(0, limit)]

    async def get_new_products(self, limit: int = 8) -> List[Product]:
        await self._delay(HIGHLIGHT_DELAY_MS)
        return [p for p in self._snapshot().products if p.is_new][: max(0, limit)]

    async def list_categories(self) -> List[Category]:
        await self._delay(LOOKUP_DELAY_MS)
        return list(self._snapshot().categories)

    async def get_category(self, category_id: str) -> Optional[Category]:
        await self._delay(LOOKUP_DELAY_MS)
        return next((c for c in self._snapshot().categories if c.id == category_id), None)

    async def get_featured_categories(self) -> List[Category]:
        await self._delay(LOOKUP_DELAY_MS)
        return [c for c in self._snapshot().categories if c.featured]

    async def list_customers(self, page: int = 1, limit: int = 20) -> Page[Customer]:
        await self._delay(LIST_DELAY_MS)
        return paginate(self._snapshot().customers, page, limit)

    async def get_customer(self, customer_id: str) -> Optional[Customer]:
        await self._delay(LOOKUP_DELAY_MS)
        return next((c for c in self._snapshot().customers if c.id == customer_id), None)

    async def list_orders(self, page: int = 1, limit: int = 20) -> Page[Order]:
        await self._delay(LIST_DELAY_MS)
        return paginate(self._snapshot().orders, page, limit)

    async def get_order(self, order_id: str) -> Optional[Order]:
        await self._delay(LOOKUP_DELAY_MS)
        return next((o for o in self._snapshot().orders if o.id == order_id), None)

    async def get_customer_orders(self, customer_id: str, page: int = 1, limit: int = 10) -> Page[Order]:
        await self._delay(LIST_DELAY_MS)
        return paginate([o for o in self._snapshot().orders if o.user_id == customer_id], page, limit)

    async def get_statistics(self) -> Statistics:
        await self._delay(STATISTICS_DELAY_MS)
        return compute_statistics(self._snapshot())

    async def regenerate(self, config: Optional[Mapping[str, Optional[int]]] = None) -> Dataset:
        await self._delay(REGENERATE_DELAY_MS)
        config = config or {}
        final = self._default_config.merged(
            products=config.get("products"),
            customers=config.get("customers"),
            orders=config.get("orders"),
        )

        # The new snapshot is complete before it replaces the old one.
        data = self._builder.build(final)
        self._data = data
        self._cleared = False
        _log.info(
            "test data regenerated products=%d customers=%d orders=%d",
            len(data.products),
            len(data.customers),
            len(data.orders),
        )
        return data

    def export_all(self) -> Optional[Dataset]:
        return self._data

    def clear(self) -> None:
        self._data = None
        self._cleared = True
        _log.info("test data cleared")
