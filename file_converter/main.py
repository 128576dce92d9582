"""File Converter Records Service - FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from file_converter.actions.errors import ActionError, BAD_REQUEST
from file_converter.actions.registry import format_validation_error
from file_converter.api.v1 import actions as actions_api
from file_converter.api.v1.health import router as health_root_router
from file_converter.api.v1.router import v1_router
from file_converter.config import VERSION, settings
from file_converter.storage.base import ConversionStore

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


def build_store() -> ConversionStore:
    """Create the store selected by ``settings.storage_backend``."""
    if settings.storage_backend == "supabase":
        from file_converter.db.supabase_client import get_supabase
        from file_converter.storage.supabase_store import SupabaseStore

        return SupabaseStore(get_supabase())

    if settings.storage_backend == "sqlite":
        from file_converter.db.engine import init_db, make_engine
        from file_converter.storage.sql_store import SQLStore

        engine = make_engine(settings.database_url)
        init_db(engine)
        return SQLStore(engine)

    raise RuntimeError(f"Unknown storage backend: {settings.storage_backend}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown logic."""
    logger.info("Starting File Converter service on port %s", settings.service_port)
    logger.info("Storage backend: %s", settings.storage_backend)

    actions_api.set_store(build_store())

    yield

    logger.info("Shutting down File Converter service")
    actions_api.set_store(None)


app = FastAPI(
    title="File Converter Records Service",
    description="Conversion job history and reusable conversion presets per user",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ActionError)
async def action_error_handler(request: Request, exc: ActionError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.to_dict()})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # malformed JSON never reaches an action
    error = ActionError(BAD_REQUEST, format_validation_error(exc.errors()))
    return JSONResponse(status_code=error.status_code, content={"detail": error.to_dict()})


# Mount routers
app.include_router(health_root_router, tags=["health"])  # GET /health at root
app.include_router(v1_router)  # All /api/v1/* endpoints


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.service_port)
