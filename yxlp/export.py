from __future__ import annotations

import os
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from .models import Dataset


_ENTITY_KEYS = ["categories", "products", "customers", "orders"]


def _ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def export_filename(today: Optional[date] = None, product: str = "yxlp") -> str:
    today = today or datetime.now(timezone.utc).date()
    return f"{product}-test-data-{today.isoformat()}.json"


def dataset_to_json(dataset: Dataset, indent: Optional[int] = 2) -> str:
    return dataset.model_dump_json(by_alias=True, indent=indent)


def dataset_to_dict(dataset: Dataset) -> dict:
    return dataset.model_dump(mode="json", by_alias=True)


def write_json(dataset: Dataset, out_dir: Path, today: Optional[date] = None) -> Path:
    _ensure_dir(out_dir)
    out_path = out_dir / export_filename(today)
    tmp_path = out_path.with_suffix(".json.tmp")
    tmp_path.write_text(dataset_to_json(dataset), encoding="utf-8")
    os.replace(tmp_path, out_path)
    return out_path


def dataset_to_frames(dataset: Dataset) -> Dict[str, pd.DataFrame]:
    """Flatten each entity list into one DataFrame.

    Nested records become dotted columns (``address.city``,
    ``dimensions.width``); list-valued fields such as ``colors`` or an order's
    ``items`` are kept as Python lists in a single cell.
    """
    raw = dataset_to_dict(dataset)
    return {key: pd.json_normalize(raw[key]) for key in _ENTITY_KEYS}


def write_csv(dataset: Dataset, out_dir: Path) -> List[Path]:
    _ensure_dir(out_dir)
    written = []
    for key, df in dataset_to_frames(dataset).items():
        path = out_dir / f"{key}.csv"
        df.to_csv(path, index=False)
        written.append(path)
    return written
