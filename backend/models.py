from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class RegenerateIn(BaseModel):
    products: Optional[int] = Field(default=None, ge=0, le=100_000)
    customers: Optional[int] = Field(default=None, ge=0, le=100_000)
    orders: Optional[int] = Field(default=None, ge=0, le=200_000)


class RegenerateOut(BaseModel):
    categories: int
    products: int
    customers: int
    orders: int


class ClearOut(BaseModel):
    cleared: bool
