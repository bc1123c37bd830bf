from __future__ import annotations

import math
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from yxlp.data_service import CatalogDataSource
from yxlp.models import Page, Product, ProductFilters

from ..deps import get_data_service


router = APIRouter(prefix="/api/products", tags=["products"])


def _filters(
    category: str | None,
    min_price: float | None,
    max_price: float | None,
    colors: List[str] | None,
    sizes: List[str] | None,
    brands: List[str] | None,
    in_stock: bool | None,
    rating: float | None,
    tags: List[str] | None,
) -> ProductFilters:
    price_range = None
    if min_price is not None or max_price is not None:
        price_range = (
            min_price if min_price is not None else 0.0,
            max_price if max_price is not None else math.inf,
        )
    return ProductFilters(
        category=category,
        price_range=price_range,
        colors=colors,
        sizes=sizes,
        brands=brands,
        in_stock=in_stock,
        rating=rating,
        tags=tags,
    )


@router.get("", response_model=Page[Product])
async def list_products(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=200),
    category: str | None = Query(None),
    min_price: float | None = Query(None, ge=0),
    max_price: float | None = Query(None, ge=0),
    colors: List[str] | None = Query(None),
    sizes: List[str] | None = Query(None),
    brands: List[str] | None = Query(None),
    in_stock: bool | None = Query(None),
    rating: float | None = Query(None, ge=0, le=5),
    tags: List[str] | None = Query(None),
    service: CatalogDataSource = Depends(get_data_service),
):
    filters = _filters(category, min_price, max_price, colors, sizes, brands, in_stock, rating, tags)
    return await service.list_products(page=page, limit=limit, filters=filters)


# Plain substring search; deliberately ignores the structured filters above.
@router.get("/search", response_model=List[Product])
async def search_products(
    q: str = Query(..., min_length=1),
    limit: int = Query(20, ge=1, le=200),
    service: CatalogDataSource = Depends(get_data_service),
):
    return await service.search_products(q, limit=limit)


@router.get("/featured", response_model=List[Product])
async def featured_products(limit: int = Query(8, ge=1, le=100), service: CatalogDataSource = Depends(get_data_service)):
    return await service.get_featured_products(limit=limit)


@router.get("/best-sellers", response_model=List[Product])
async def best_selling_products(limit: int = Query(8, ge=1, le=100), service: CatalogDataSource = Depends(get_data_service)):
    return await service.get_best_selling_products(limit=limit)


@router.get("/new", response_model=List[Product])
async def new_products(limit: int = Query(8, ge=1, le=100), service: CatalogDataSource = Depends(get_data_service)):
    return await service.get_new_products(limit=limit)


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str, service: CatalogDataSource = Depends(get_data_service)):
    product = await service.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
