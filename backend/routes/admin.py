from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response

from yxlp.data_service import CatalogDataSource
from yxlp.export import dataset_to_json, export_filename
from yxlp.models import Statistics

from ..deps import get_data_service, require_admin
from ..models import ClearOut, RegenerateIn, RegenerateOut


router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/statistics", response_model=Statistics)
async def statistics(service: CatalogDataSource = Depends(get_data_service)):
    return await service.get_statistics()


@router.post("/data/regenerate", response_model=RegenerateOut)
async def regenerate(req: RegenerateIn | None = None, service: CatalogDataSource = Depends(get_data_service)) -> RegenerateOut:
    config = req.model_dump() if req is not None else None
    data = await service.regenerate(config)
    return RegenerateOut(
        categories=len(data.categories),
        products=len(data.products),
        customers=len(data.customers),
        orders=len(data.orders),
    )


@router.get("/data/export")
def export_data(service: CatalogDataSource = Depends(get_data_service)) -> Response:
    data = service.export_all()
    if data is None:
        return JSONResponse(status_code=404, content={"detail": "No data available to export"})
    return Response(
        content=dataset_to_json(data),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )


@router.delete("/data", response_model=ClearOut)
def clear_data(service: CatalogDataSource = Depends(get_data_service)) -> ClearOut:
    service.clear()
    return ClearOut(cleared=True)
