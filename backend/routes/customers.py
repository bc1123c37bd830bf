from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from yxlp.data_service import CatalogDataSource
from yxlp.models import Customer, Order, Page

from ..deps import get_data_service


router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.get("", response_model=Page[Customer])
async def list_customers(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=200),
    service: CatalogDataSource = Depends(get_data_service),
):
    return await service.list_customers(page=page, limit=limit)


@router.get("/{customer_id}", response_model=Customer)
async def get_customer(customer_id: str, service: CatalogDataSource = Depends(get_data_service)):
    customer = await service.get_customer(customer_id)
    if customer is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.get("/{customer_id}/orders", response_model=Page[Order])
async def customer_orders(
    customer_id: str,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=200),
    service: CatalogDataSource = Depends(get_data_service),
):
    # An unknown customer simply has no orders.
    return await service.get_customer_orders(customer_id, page=page, limit=limit)
