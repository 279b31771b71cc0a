import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from product_service.api import products, stats
from product_service.bootstrap import bootstrap_database
from product_service.config import Settings, get_settings
from product_service.database import Database, QueryExecutionError
from product_service.logging_config import configure_logging
from product_service.middlewares.errors import UnhandledErrorMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    db = Database.connect(app.state.settings)
    try:
        await bootstrap_database(db)
    except Exception:
        logger.exception("Database bootstrap failed, refusing to serve requests")
        await db.dispose()
        raise

    app.state.db = db
    yield
    await db.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.api_title,
        description="CRUD API for managing an inventory of products",
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Added first so CORSMiddleware wraps it
    app.add_middleware(UnhandledErrorMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(products.router)
    app.include_router(stats.router)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        missing = any(err.get("type") in ("missing", "string_too_short") for err in errors)
        return JSONResponse(
            status_code=400,
            content={
                "detail": "Missing required fields" if missing else "Invalid request",
                "errors": jsonable_encoder(errors),
            },
        )

    @app.exception_handler(QueryExecutionError)
    async def query_exception_handler(request: Request, exc: QueryExecutionError):
        logger.error("Query failed on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "error": str(exc)},
        )

    # Static files for every non-API path; mounted last so API routes win
    if os.path.isdir(settings.static_dir):
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        logger.warning("Static directory '%s' not found, not serving static files", settings.static_dir)

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    logger.info("Starting server on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, lifespan="on")


if __name__ == "__main__":
    run()
