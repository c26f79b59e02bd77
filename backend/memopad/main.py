"""
MemoPad Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() builds the MemoStore, wires it into a
       MemoService on app.state, and registers middleware, exception handlers
       and routers.
Who:   Called by uvicorn (uvicorn memopad.main:app), by `python -m memopad`,
       and by tests that want a fresh, isolated store.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────────────────┐  │
    │  │  Req ID  │→│   Logging   │→│       CORS       │  │
    │  └──────────┘ └─────────────┘ └──────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────────────────────────┐ ┌────────────────┐  │
    │  │ /memos  POST GET PUT PATCH │ │  GET /health   │  │
    │  │         DELETE             │ │                │  │
    │  └────────────────────────────┘ └────────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌───────────────────────────────────────────────┐  │
    │  │ ValidationError→400 │ NotFound→404 │ else→500 │  │
    │  └───────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, log the store's id strategy
    Shutdown: log how many memos are being discarded (nothing is persisted)
"""

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from memopad import __version__
from memopad.config import Settings, settings
from memopad.exceptions import NotFoundError, ValidationError
from memopad.middleware.logging import RequestLoggingMiddleware
from memopad.middleware.request_id import RequestIDMiddleware, request_id_var
from memopad.routes import health, memos
from memopad.services.memo_service import MemoService
from memopad.store import MemoStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure the root logger once for the whole process.

    Format: 2024-01-15T12:00:00 [INFO] memopad.access: GET /memos 200 0.3ms [...]
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # memopad.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: logging and banner. Shutdown: report discarded memos."""
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)

    store: MemoStore = app.state.memo_service.store
    logger.info("MemoPad %s starting (id strategy: %s)", __version__, store.id_strategy)
    logger.info("Serving on http://%s:%d", app_settings.host, app_settings.port)

    yield

    logger.info("MemoPad shutting down; discarding %d memo(s)", store.count())


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to HTTP responses.

    Handler table:
        ValidationError         → 400, empty body
        RequestValidationError  → 400, empty body (bad JSON, missing body, non-int id)
        NotFoundError           → 404, empty body
        Exception               → 500, JSON error with request id (trace logged only)
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Invalid input: %s | %s", rid, exc.message, exc.context)
        return Response(status_code=400)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Malformed request: %s", rid, exc.errors())
        return Response(status_code=400)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        logger.info("[%s] %s", rid, exc.message)
        return Response(status_code=404)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    store: Optional[MemoStore] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store:        MemoStore to serve; a new empty one is built from
                      app_settings.id_strategy when omitted.
        app_settings: Settings override; defaults to the module singleton.

    Returns:
        Fully configured FastAPI instance. Each call owns its own store,
        so tests can build isolated apps.
    """
    app_settings = app_settings or settings
    if store is None:
        store = MemoStore(id_strategy=app_settings.id_strategy)

    app = FastAPI(
        title="MemoPad API",
        description="In-memory memo service: create, read, update and delete memos over JSON.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.started_at = time.time()
    app.state.memo_service = MemoService(store)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(memos.router)
    app.include_router(health.router)

    return app


# Module-level instance for `uvicorn memopad.main:app`
app = create_app()
