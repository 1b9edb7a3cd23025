"""
FastAPI entrypoint for the expense tracker backend.
"""
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from expense_tracker.core.config import Settings, settings as default_settings
from expense_tracker.core.exceptions import ExpenseTrackerError
from expense_tracker.core.utils import format_error
from expense_tracker.api.router import api_router
from expense_tracker.db.session import create_db_engine, create_session_factory, init_db
from expense_tracker.stores.memory import InMemoryStore

logger = logging.getLogger(__name__)


def _configure_logging(settings: Settings):
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )


def _configure_storage(app: FastAPI, settings: Settings):
    """Attach either the in-memory store or an engine and session factory."""
    app.state.engine = None
    app.state.session_factory = None
    app.state.memory_store = None

    if settings.STORE_BACKEND == "memory":
        app.state.memory_store = InMemoryStore()
        logger.info("Using in-memory stores")
        return

    engine = create_db_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    logger.info(f"Using SQL stores ({engine.url.get_backend_name()})")


def _register_exception_handlers(app: FastAPI):

    @app.exception_handler(ExpenseTrackerError)
    async def expense_tracker_error_handler(request: Request, exc: ExpenseTrackerError):
        if exc.is_client_error:
            logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
        else:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
        return JSONResponse(
            status_code=exc.status_code,
            content=jsonable_encoder(format_error(exc.message, exc.details))
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info(f"{request.method} {request.url.path} rejected: invalid request")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder(format_error("Validation failed", exc.errors()))
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its own storage backend."""
    settings = settings or default_settings
    _configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.engine is not None and settings.CREATE_TABLES:
            init_db(app.state.engine)
            logger.info("Database tables ready")
        yield
        if app.state.engine is not None:
            app.state.engine.dispose()

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Backend API for recording expenses and viewing their history",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=lifespan
    )
    app.state.settings = settings
    _configure_storage(app, settings)
    _register_exception_handlers(app)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount static files directory
    if os.path.isdir(settings.STATIC_DIR):
        app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")

    # Include API routes
    app.include_router(api_router, prefix="/api")

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"message": f"{settings.APP_NAME} API is running"}

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
