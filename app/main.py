import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.requests import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import Settings, settings as default_settings
from app.core.logging import configure_logging

# 1. Infrastructure & Domain Imports
from app.domain.errors import ServiceError
from app.infrastructure.oms_client import HttpOrderManagementClient
from app.infrastructure.repositories.order_repository import InMemoryOrderRepository
from app.infrastructure.repositories.product_catalog import StaticProductCatalog
from app.application.catalog_service import CatalogService
from app.application.order_service import OrderService
from app.interfaces import api
from app.interfaces.IOrderManagementClient import IOrderManagementClient
from app.interfaces.IOrderRepository import IOrderRepository
from app.interfaces.IProductCatalog import IProductCatalog

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _register_exception_handlers(app: FastAPI):
    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        return _error(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # Unknown path or a method the path doesn't serve
        if exc.status_code in (404, 405):
            return _error(404, "Endpoint not found")
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"❌ Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return _error(500, "Something went wrong!")


def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[IProductCatalog] = None,
    order_repo: Optional[IOrderRepository] = None,
    oms_client: Optional[IOrderManagementClient] = None,
) -> FastAPI:
    """
    Composition root. Anything not passed in is built from settings,
    which lets tests swap the catalog, the store or the OMS client.
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.PROJECT_NAME,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------------------------------------------------------
    # COMPOSITION ROOT
    # ---------------------------------------------------------
    if catalog is None:
        catalog = StaticProductCatalog.from_json_file(settings.CATALOG_PATH)
    if order_repo is None:
        order_repo = InMemoryOrderRepository()
    if oms_client is None:
        oms_client = HttpOrderManagementClient(settings.OMS_URL, timeout=settings.OMS_TIMEOUT_SECONDS)

    app.state.settings = settings
    app.state.catalog_service = CatalogService(catalog)
    app.state.order_service = OrderService(
        catalog=catalog,
        order_repo=order_repo,
        oms_client=oms_client,
        currency=settings.CURRENCY,
    )

    _register_exception_handlers(app)

    # Include Routers
    app.include_router(api.router)

    return app


configure_logging(default_settings.LOG_LEVEL)
app = create_app()


def run():
    settings = app.state.settings
    _, total = app.state.catalog_service.list_products()
    print(f"🛒 {settings.PROJECT_NAME} running on port {settings.PORT} ({settings.ENVIRONMENT})")
    print(f"📦 Loaded {total} products")
    print(f"🔗 OMS URL: {settings.OMS_URL}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
