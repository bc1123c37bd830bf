from __future__ import annotations

import logging
import uuid
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from yxlp.config import DatasetConfig, ServiceSettings
from yxlp.data_service import CatalogDataSource, DataService
from yxlp.errors import NotInitializedError
from yxlp.generate_data import DatasetBuilder

from .routes.admin import router as admin_router
from .routes.categories import router as categories_router
from .routes.customers import router as customers_router
from .routes.orders import router as orders_router
from .routes.products import router as products_router


_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_PROJECT_ROOT / ".env")

_log = logging.getLogger("yxlp")
if not _log.handlers:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")


def create_app(service: CatalogDataSource | None = None, settings: ServiceSettings | None = None) -> FastAPI:
    """Composition root: one data service per application instance."""
    settings = settings or ServiceSettings()
    if service is None:
        service = DataService(
            DatasetBuilder(seed=settings.seed),
            default_config=DatasetConfig(),
            latency_scale=settings.latency_scale,
        )

    app = FastAPI(title="YXLP Catalog Test Data API")
    app.state.settings = settings
    app.state.data_service = service

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        rid = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]
        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        _log.info("rid=%s method=%s path=%s status=%s", rid, request.method, request.url.path, response.status_code)
        return response

    @app.exception_handler(NotInitializedError)
    async def not_initialized_handler(request: Request, exc: NotInitializedError):
        return JSONResponse(status_code=503, content={"detail": str(exc)})

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(products_router)
    app.include_router(categories_router)
    app.include_router(customers_router)
    app.include_router(orders_router)
    app.include_router(admin_router)

    @app.get("/")
    def home():
        return {"status": "ok", "message": "Open /docs for the API."}

    return app


app = create_app()
