from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

import pytest

from yxlp.config import DatasetConfig
from yxlp.data_service import DataService
from yxlp.generate_data import DatasetBuilder


FIXED_NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return FIXED_NOW


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock() -> Callable[[], datetime]:
    return fixed_clock


@pytest.fixture
def builder() -> DatasetBuilder:
    return DatasetBuilder(seed=42, clock=fixed_clock)


@pytest.fixture(scope="module")
def dataset():
    return DatasetBuilder(seed=1234, clock=fixed_clock).build(DatasetConfig(products=400, customers=80, orders=300))


@pytest.fixture
def service(builder: DatasetBuilder) -> DataService:
    return DataService(builder, default_config=DatasetConfig(products=60, customers=15, orders=40), latency_scale=0)
