from __future__ import annotations

from fastapi import Header, HTTPException
from starlette.requests import Request

from yxlp.config import ServiceSettings
from yxlp.data_service import CatalogDataSource


def get_data_service(request: Request) -> CatalogDataSource:
    return request.app.state.data_service


def get_settings(request: Request) -> ServiceSettings:
    return request.app.state.settings


def require_admin(request: Request, admin_key: str | None = Header(None, alias="X-Admin-Key")) -> None:
    expected = get_settings(request).admin_key
    if admin_key != expected:
        raise HTTPException(status_code=403, detail="Admin access required")
