from __future__ import annotations

import argparse
import logging
import random
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, List, Optional, Sequence
from urllib.parse import quote

from faker import Faker

from . import reference_data as ref
from .config import DatasetConfig, default_paths
from .export import write_csv, write_json
from .models import (
    Address,
    Category,
    Customer,
    CustomerPreferences,
    Dataset,
    NotificationPreferences,
    Order,
    OrderItem,
    Product,
    ProductDimensions,
)
from .randomizer import pick_many, pick_one, random_instant, random_token


_log = logging.getLogger("yxlp")

_CATALOG_START = datetime(2023, 1, 1, tzinfo=timezone.utc)
_CATALOG_MID = datetime(2023, 7, 1, tzinfo=timezone.utc)
_LOGIN_START = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


def _placeholder(width: int, height: int, text: str) -> str:
    return f"/api/placeholder/{width}/{height}?text={quote(text)}"


def _timestamps(rng: random.Random, now: datetime, start: datetime = _CATALOG_START) -> tuple[datetime, datetime]:
    created = random_instant(rng, start, now)
    updated = random_instant(rng, max(created, _CATALOG_MID), max(now, created))
    return created, updated


def generate_categories(rng: random.Random, now: datetime) -> List[Category]:
    rows = []
    for sort_order, slug in enumerate(ref.CATEGORIES):
        created = random_instant(rng, _CATALOG_START, _CATALOG_MID)
        rows.append(
            Category(
                id=slug,
                name=slug.capitalize(),
                description=f"Premium {slug} collection with various styles and designs",
                image=_placeholder(400, 300, slug),
                subcategories=[f"{slug}-casual", f"{slug}-formal", f"{slug}-premium"],
                product_count=rng.randrange(100, 600),
                featured=rng.random() > 0.5,
                sort_order=sort_order,
                created_at=created,
                updated_at=random_instant(rng, _CATALOG_MID, now),
            )
        )
    return rows


def generate_products(n: int, rng: random.Random, fake: Faker, now: datetime) -> List[Product]:
    rows = []
    for i in range(max(0, n)):
        seq = i + 1
        category = pick_one(rng, ref.CATEGORIES)
        brand = pick_one(rng, ref.BRANDS)
        colors = pick_many(rng, ref.COLORS, rng.randint(1, 4))
        sizes = pick_many(rng, ref.SIZES, rng.randint(2, 5))
        materials = pick_many(rng, ref.MATERIALS, rng.randint(1, 3))

        price = rng.randrange(20, 220)
        original_price = price + rng.randrange(20, 120) if rng.random() > 0.7 else None

        created, updated = _timestamps(rng, now)

        rows.append(
            Product(
                id=f"product-{fake.uuid4()}",
                name=f"{brand} {category.capitalize()} {seq}",
                description=(
                    f"Premium quality {category} made from {', '.join(materials)}. "
                    "Perfect for both casual and formal occasions."
                ),
                price=price,
                original_price=original_price,
                images=[_placeholder(400, 400, category) + f"-{seq}-{k}" for k in (1, 2, 3)],
                category=category,
                subcategory=f"{category}-sub",
                brand=brand,
                sku=f"{category.upper()}-{random_token(rng, 6)}",
                colors=colors,
                sizes=sizes,
                materials=materials,
                rating=rng.randint(4, 5),
                review_count=rng.randrange(10, 510),
                in_stock=rng.random() > 0.1,
                stock_quantity=rng.randrange(50, 1050),
                min_order_quantity=rng.randint(1, 10),
                tags=pick_many(rng, ref.PRODUCT_TAGS, 3),
                # Independent draws; a product can carry any combination of badges.
                is_new=rng.random() > 0.8,
                is_best_seller=rng.random() > 0.9,
                is_premium=rng.random() > 0.85,
                is_featured=rng.random() > 0.7,
                weight=rng.randrange(100, 600),
                dimensions=ProductDimensions(
                    length=rng.randrange(20, 70),
                    width=rng.randrange(15, 55),
                    height=rng.randrange(2, 12),
                ),
                created_at=created,
                updated_at=updated,
            )
        )
    return rows


def generate_customers(n: int, rng: random.Random, fake: Faker, now: datetime) -> List[Customer]:
    rows = []
    for i in range(max(0, n)):
        seq = i + 1
        first_name = pick_one(rng, ref.FIRST_NAMES)
        last_name = pick_one(rng, ref.LAST_NAMES)
        country = pick_one(rng, ref.COUNTRIES)
        first_l, last_l = first_name.lower(), last_name.lower()

        address = Address(
            street=f"{rng.randint(1, 9999)} {pick_one(rng, ref.STREET_NAMES)} St",
            city=pick_one(rng, ref.CITIES),
            state=pick_one(rng, ref.STATES),
            zip_code=str(rng.randrange(10000, 100000)),
            country=country,
        )

        created, updated = _timestamps(rng, now)

        rows.append(
            Customer(
                id=f"customer-{fake.uuid4()}",
                username=f"{first_l}{last_l}{seq}",
                email=f"{first_l}.{last_l}{seq}@example.com",
                display_name=f"{first_name} {last_name}",
                role="distributor" if rng.random() > 0.9 else "user",
                first_name=first_name,
                last_name=last_name,
                phone=fake.numerify("+1-555-%###"),
                company=pick_one(rng, ref.COMPANY_NAMES) if rng.random() > 0.6 else None,
                country=country,
                address=address,
                is_verified=rng.random() > 0.2,
                is_active=rng.random() > 0.1,
                avatar=_placeholder(100, 100, first_name[0] + last_name[0]),
                preferences=CustomerPreferences(
                    language="en",
                    currency="USD",
                    notifications=NotificationPreferences(
                        email=rng.random() > 0.3,
                        sms=rng.random() > 0.7,
                        push=rng.random() > 0.5,
                    ),
                ),
                created_at=created,
                last_login_at=random_instant(rng, _LOGIN_START, now) if rng.random() > 0.2 else None,
                updated_at=updated,
            )
        )
    return rows


def _order_item(rng: random.Random, product: Product) -> OrderItem:
    quantity = rng.randint(1, 5)
    return OrderItem(
        product_id=product.id,
        product_name=product.name,
        product_image=product.images[0] if product.images else "",
        sku=product.sku,
        quantity=quantity,
        price=product.price,
        color=pick_one(rng, product.colors).name if product.colors else None,
        size=pick_one(rng, product.sizes).name if product.sizes else None,
        total=product.price * quantity,
    )


def generate_orders(
    n: int,
    customers: Sequence[Customer],
    products: Sequence[Product],
    rng: random.Random,
    fake: Faker,
    now: datetime,
) -> List[Order]:
    if not customers or not products:
        return []

    rows = []
    for _ in range(max(0, n)):
        customer = pick_one(rng, customers)
        items = [_order_item(rng, p) for p in pick_many(rng, products, rng.randint(1, 5))]

        subtotal = round(sum(item.total for item in items), 2)
        tax = round(subtotal * ref.TAX_RATE, 2)
        shipping = 0 if subtotal > ref.FREE_SHIPPING_THRESHOLD else ref.FLAT_SHIPPING
        total = subtotal + tax + shipping

        created, updated = _timestamps(rng, now)

        # Status, payment status and method are drawn independently of each other.
        rows.append(
            Order(
                id=f"order-{fake.uuid4()}",
                user_id=customer.id,
                items=items,
                subtotal=subtotal,
                tax=tax,
                shipping=shipping,
                total=total,
                currency="USD",
                status=pick_one(rng, ref.ORDER_STATUSES),
                payment_status=pick_one(rng, ref.PAYMENT_STATUSES),
                payment_method=pick_one(rng, ref.PAYMENT_METHODS),
                shipping_address=customer.address,
                billing_address=customer.address,
                tracking_number=f"TRK{random_token(rng, 10).upper()}" if rng.random() > 0.5 else None,
                notes="Please handle with care" if rng.random() > 0.7 else None,
                created_at=created,
                updated_at=updated,
                estimated_delivery=random_instant(rng, now, now + timedelta(days=14)),
            )
        )
    return rows


class DatasetBuilder:
    """Builds complete snapshots from a count configuration.

    The builder owns one seeded ``random.Random`` and one seeded ``Faker`` for
    its whole lifetime, so two builders with the same seed produce the same
    sequence of snapshots while successive snapshots of one builder differ.
    """

    def __init__(self, seed: Optional[int] = None, clock: Optional[Callable[[], datetime]] = None) -> None:
        self.seed = seed
        self.rng = random.Random(seed)
        self.fake = Faker()
        if seed is not None:
            self.fake.seed_instance(seed)
        self._clock = clock or _utc_now

    def build(self, config: DatasetConfig) -> Dataset:
        now = self._clock()
        _log.info(
            "generating test data products=%s customers=%s orders=%s",
            config.products,
            config.customers,
            config.orders,
        )

        categories = generate_categories(self.rng, now)
        products = generate_products(config.products, self.rng, self.fake, now)
        customers = generate_customers(config.customers, self.rng, self.fake, now)
        orders = generate_orders(config.orders, customers, products, self.rng, self.fake, now)

        _log.info(
            "generated categories=%d products=%d customers=%d orders=%d",
            len(categories),
            len(products),
            len(customers),
            len(orders),
        )
        return Dataset(categories=categories, products=products, customers=customers, orders=orders)


def generate(config: DatasetConfig, out_dir: Path, seed: Optional[int], fmt: str = "json") -> List[Path]:
    dataset = DatasetBuilder(seed=seed).build(config)
    if fmt == "csv":
        return write_csv(dataset, out_dir)
    return [write_json(dataset, out_dir)]


def main() -> None:
    defaults = DatasetConfig()
    parser = argparse.ArgumentParser(description="Generate a YXLP catalog test dataset")
    parser.add_argument("--products", type=int, default=defaults.products)
    parser.add_argument("--customers", type=int, default=defaults.customers)
    parser.add_argument("--orders", type=int, default=defaults.orders)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--out", default=default_paths().data_raw_dir)
    parser.add_argument("--format", dest="fmt", default="json", choices=["json", "csv"])
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    written = generate(
        DatasetConfig(products=args.products, customers=args.customers, orders=args.orders),
        Path(args.out),
        seed=args.seed,
        fmt=args.fmt,
    )
    for path in written:
        _log.info("wrote %s", path)


if __name__ == "__main__":
    main()
