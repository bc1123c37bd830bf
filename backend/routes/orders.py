from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from yxlp.data_service import CatalogDataSource
from yxlp.models import Order, Page

from ..deps import get_data_service


router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("", response_model=Page[Order])
async def list_orders(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=200),
    service: CatalogDataSource = Depends(get_data_service),
):
    return await service.list_orders(page=page, limit=limit)


@router.get("/{order_id}", response_model=Order)
async def get_order(order_id: str, service: CatalogDataSource = Depends(get_data_service)):
    order = await service.get_order(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return order
