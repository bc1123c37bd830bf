import random
import re

import pytest
from faker import Faker

from yxlp import reference_data as ref
from yxlp.config import DatasetConfig
from yxlp.generate_data import (
    DatasetBuilder,
    generate_categories,
    generate_customers,
    generate_orders,
    generate_products,
)


def _fake(seed: int = 0) -> Faker:
    fake = Faker()
    fake.seed_instance(seed)
    return fake


def test_categories_follow_reference_table(fixed_now):
    categories = generate_categories(random.Random(0), fixed_now)
    assert [c.id for c in categories] == ref.CATEGORIES
    assert [c.sort_order for c in categories] == list(range(len(ref.CATEGORIES)))
    for c in categories:
        assert c.subcategories == [f"{c.id}-casual", f"{c.id}-formal", f"{c.id}-premium"]
        assert 100 <= c.product_count < 600


def test_product_fields_within_ranges(dataset):
    assert len(dataset.products) == 400
    color_names = {c.name for c in ref.COLORS}
    for p in dataset.products:
        assert 20 <= p.price < 220
        assert p.category in ref.CATEGORIES
        assert p.brand in ref.BRANDS
        assert 1 <= len(p.colors) <= 4
        assert len({c.name for c in p.colors}) == len(p.colors)
        assert {c.name for c in p.colors} <= color_names
        assert 2 <= len(p.sizes) <= 5
        assert len({s.name for s in p.sizes}) == len(p.sizes)
        assert 1 <= len(p.materials) <= 3
        assert len(p.tags) == 3
        assert p.rating in (4, 5)
        assert 1 <= p.min_order_quantity <= 10
        assert len(p.images) == 3
        assert re.fullmatch(rf"{p.category.upper()}-[A-Za-z0-9]{{6}}", p.sku)


def test_original_price_never_below_price(dataset):
    discounted = [p for p in dataset.products if p.original_price is not None]
    assert discounted
    for p in discounted:
        assert p.original_price >= p.price


def test_merchandising_flag_rates(builder):
    products = builder.build(DatasetConfig(products=2000, customers=0, orders=0)).products
    n = len(products)

    def rate(attr):
        return sum(1 for p in products if getattr(p, attr)) / n

    assert rate("is_new") == pytest.approx(0.20, abs=0.05)
    assert rate("is_best_seller") == pytest.approx(0.10, abs=0.04)
    assert rate("is_premium") == pytest.approx(0.15, abs=0.05)
    assert rate("is_featured") == pytest.approx(0.30, abs=0.05)
    assert rate("in_stock") == pytest.approx(0.90, abs=0.04)
    # Flags are independent draws, so overlaps must occur.
    assert any(p.is_new and p.is_featured for p in products)


def test_customer_identity_derived_from_name_and_index(dataset):
    for i, c in enumerate(dataset.customers, start=1):
        first, last = c.first_name.lower(), c.last_name.lower()
        assert c.username == f"{first}{last}{i}"
        assert c.email == f"{first}.{last}{i}@example.com"
        assert c.display_name == f"{c.first_name} {c.last_name}"
        assert c.role in ("user", "distributor")
        assert c.address.country == c.country
    assert len({c.email for c in dataset.customers}) == len(dataset.customers)
    assert len({c.username for c in dataset.customers}) == len(dataset.customers)


def test_customer_role_rate(builder):
    customers = builder.build(DatasetConfig(products=0, customers=1000, orders=0)).customers
    distributors = sum(1 for c in customers if c.role == "distributor")
    assert distributors / len(customers) == pytest.approx(0.10, abs=0.05)


def test_order_arithmetic(dataset):
    assert len(dataset.orders) == 300
    for o in dataset.orders:
        for item in o.items:
            assert item.total == pytest.approx(item.price * item.quantity)
            assert 1 <= item.quantity <= 5
        assert o.subtotal == pytest.approx(sum(item.total for item in o.items))
        assert o.tax == round(o.subtotal * 0.08, 2)
        assert o.shipping == (0 if o.subtotal > 100 else 15)
        assert o.total == o.subtotal + o.tax + o.shipping
        assert o.currency == "USD"


@pytest.mark.parametrize("seed", [1234, 7, 99])
def test_order_total_is_exact_sum(clock, seed):
    # 2000 orders reach subtotals whose tax sum is inexact in binary floating point.
    config = DatasetConfig(products=400, customers=80, orders=2000)
    orders = DatasetBuilder(seed=seed, clock=clock).build(config).orders
    assert len(orders) == 2000
    mismatched = [o for o in orders if o.total != o.subtotal + o.tax + o.shipping]
    assert mismatched == []


def test_order_references_resolve_within_snapshot(dataset):
    product_ids = {p.id for p in dataset.products}
    customers = {c.id: c for c in dataset.customers}
    for o in dataset.orders:
        assert o.user_id in customers
        assert o.shipping_address == customers[o.user_id].address
        assert o.billing_address == o.shipping_address
        assert 1 <= len(o.items) <= 5
        assert len({item.product_id for item in o.items}) == len(o.items)
        for item in o.items:
            assert item.product_id in product_ids


def test_order_status_and_payment_are_unconstrained(dataset):
    assert {o.status for o in dataset.orders} <= set(ref.ORDER_STATUSES)
    assert {o.payment_status for o in dataset.orders} <= set(ref.PAYMENT_STATUSES)
    assert {o.payment_method for o in dataset.orders} <= set(ref.PAYMENT_METHODS)
    # 300 independent draws: some delivered orders are still awaiting payment.
    assert any(o.status == "delivered" and o.payment_status != "paid" for o in dataset.orders)


def test_non_positive_counts_give_empty_lists(fixed_now):
    rng, fake = random.Random(0), _fake()
    assert generate_products(0, rng, fake, fixed_now) == []
    assert generate_products(-5, rng, fake, fixed_now) == []
    assert generate_customers(-1, rng, fake, fixed_now) == []
    customers = generate_customers(3, rng, fake, fixed_now)
    products = generate_products(3, rng, fake, fixed_now)
    assert generate_orders(-2, customers, products, rng, fake, fixed_now) == []


def test_orders_need_customers_and_products(fixed_now):
    rng, fake = random.Random(0), _fake()
    products = generate_products(5, rng, fake, fixed_now)
    assert generate_orders(10, [], products, rng, fake, fixed_now) == []


def test_builder_accepts_degenerate_config(builder):
    data = builder.build(DatasetConfig(products=0, customers=-3, orders=5))
    assert len(data.categories) == len(ref.CATEGORIES)
    assert data.products == [] and data.customers == [] and data.orders == []


def test_same_seed_reproduces_dataset(clock):
    config = DatasetConfig(products=30, customers=10, orders=20)
    a = DatasetBuilder(seed=5, clock=clock).build(config)
    b = DatasetBuilder(seed=5, clock=clock).build(config)
    assert a.model_dump() == b.model_dump()


def test_successive_builds_get_fresh_ids(builder):
    config = DatasetConfig(products=20, customers=5, orders=5)
    first = builder.build(config)
    second = builder.build(config)
    assert not {p.id for p in first.products} & {p.id for p in second.products}
    assert not {o.id for o in first.orders} & {o.id for o in second.orders}
