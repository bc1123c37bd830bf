from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from yxlp.data_service import CatalogDataSource
from yxlp.models import Category

from ..deps import get_data_service


router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=List[Category])
async def list_categories(service: CatalogDataSource = Depends(get_data_service)):
    return await service.list_categories()


@router.get("/featured", response_model=List[Category])
async def featured_categories(service: CatalogDataSource = Depends(get_data_service)):
    return await service.get_featured_categories()


@router.get("/{category_id}", response_model=Category)
async def get_category(category_id: str, service: CatalogDataSource = Depends(get_data_service)):
    category = await service.get_category(category_id)
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return category
