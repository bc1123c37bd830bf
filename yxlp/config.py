from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_PROJECT_ROOT / ".env")


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_seed() -> Optional[int]:
    raw = (os.getenv("YXLP_SEED", "") or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


@dataclass(frozen=True)
class DatasetConfig:
    products: int = 5000
    customers: int = 1000
    orders: int = 2000

    def merged(
        self,
        products: Optional[int] = None,
        customers: Optional[int] = None,
        orders: Optional[int] = None,
    ) -> "DatasetConfig":
        overrides = {
            k: v
            for k, v in (("products", products), ("customers", customers), ("orders", orders))
            if v is not None
        }
        return replace(self, **overrides)


@dataclass(frozen=True)
class ServiceSettings:
    latency_scale: float = _env_float("YXLP_LATENCY_SCALE", 1.0)
    seed: Optional[int] = _env_seed()
    admin_key: str = os.getenv("ADMIN_KEY", "admin")


@dataclass(frozen=True)
class Paths:
    project_root: str

    @property
    def data_raw_dir(self) -> str:
        return os.path.join(self.project_root, "data", "raw")


def default_paths() -> Paths:
    return Paths(project_root=str(_PROJECT_ROOT))
