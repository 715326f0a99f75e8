# rostering/main.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
from dotenv import load_dotenv
load_dotenv()

from .settings import settings
from .errors import RosteringError, StorageFailureError
from .registry import ENTITY_KINDS
from .entities.endpoints import build_entity_router
from .entities.sqlite_entity_store import get_sqlite_entity_store
from .tenants.endpoints import tenants_router
from .tenants.sqlite_tenant_store import get_sqlite_tenant_store
from .admin.endpoints import admin_router
from .storage.sqlite_base import get_sqlite_db_connection, close_sqlite_db_connection

# Configure logging based on debug mode setting
if not logging.getLogger().hasHandlers():
    logging.basicConfig(
        level="DEBUG" if settings.debug_mode else settings.log_level.upper(),
        format='%(asctime)s - %(name)s [%(levelname)s] - %(message)s'
    )

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG if settings.debug_mode else settings.log_level.upper())


@asynccontextmanager
async def rostering_app_lifespan(app_instance: FastAPI):
    """Opens the SQLite connection and the stores on startup; tears them down on shutdown."""
    logger.info("Application startup initiated.")
    await get_sqlite_db_connection()
    logger.info("SQLite backend connection initialized.")
    initialized_stores = [await get_sqlite_entity_store(kind) for kind in ENTITY_KINDS]
    initialized_stores.append(await get_sqlite_tenant_store())
    logger.info(f"{len(initialized_stores)} stores initialized.")
    yield
    logger.info("Application shutdown initiated.")
    for store_instance in reversed(initialized_stores):
        try:
            await store_instance.teardown()
        except Exception as e_td:
            logger.error(f"Teardown error: {e_td}", exc_info=True)
    await close_sqlite_db_connection()
    logger.info("All components torn down.")


app = FastAPI(
    title=settings.app_name,
    description="Multi-tenant rostering backend: tenant-scoped entity CRUD and administration.",
    lifespan=rostering_app_lifespan
)


@app.exception_handler(RosteringError)
async def rostering_error_handler(request: Request, exc: RosteringError) -> JSONResponse:
    """Renders domain and storage failures as ``{exceptionMessage, exceptionClass}``."""
    if isinstance(exc, StorageFailureError):
        logger.error(f"API: {request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"API: {request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed views are reported like every other validation failure: as a 500."""
    logger.warning(f"API: {request.method} {request.url.path} invalid request: {exc.errors()}")
    return JSONResponse(
        status_code=500,
        content={
            "exceptionMessage": str(exc),
            "exceptionClass": "RequestValidationError",
        }
    )


@app.get("/health")
async def health():
    return {"status": "ok"}


for _kind in ENTITY_KINDS:
    app.include_router(build_entity_router(_kind), prefix=settings.api_prefix)
app.include_router(tenants_router, prefix=settings.api_prefix)
app.include_router(admin_router, prefix=settings.api_prefix)
