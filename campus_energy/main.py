# campus_energy/main.py

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from campus_energy.core.config import settings
from campus_energy.core.errors import NotFoundError, ValidationError
from campus_energy.core.state import close_manager, get_manager, init_manager

from campus_energy.api import (
    alerts,
    dashboard,
    readings,
    recommendations,
    simulations,
)

logger = logging.getLogger(__name__)

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(
    title="Campus Energy Manager API",
    version="1.0.0",
    description="Energy readings, alerts, recommendations and savings simulations for a campus",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
@app.exception_handler(ValidationError)
async def energy_validation_handler(request: Request, exc: ValidationError):
    logger.warning(f"Rejected input on {request.method} {request.url.path}: {exc.errors}")
    return JSONResponse(
        status_code=422,
        content={
            "detail": exc.errors or exc.message,
            "path": str(request.url.path),
            "method": request.method,
        },
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning(f"404 on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=404,
        content={
            "detail": str(exc),
            "kind": exc.kind,
            "id": exc.item_id,
            "path": str(request.url.path),
            "method": request.method,
        },
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    content_type = request.headers.get("content-type", "")
    logger.warning(
        f"422 ValidationError on {request.method} {request.url.path} "
        f"(content-type={content_type}) errors={exc.errors()}"
    )
    return JSONResponse(
        status_code=422,
        content={
            "detail": [
                {"loc": list(e["loc"]), "msg": e["msg"], "type": e["type"]}
                for e in exc.errors()
            ],
            "path": str(request.url.path),
            "method": request.method,
            "content_type": content_type,
        },
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.method} {request.url}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "path": str(request.url.path),
            "method": request.method,
            "error": str(exc) if settings.DEBUG else None,
        },
    )

# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------
def _build_cors_origins() -> List[str]:
    origins = [
        # Local dev
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    if settings.FRONTEND_URL:
        origins.append(str(settings.FRONTEND_URL).strip().rstrip("/"))

    for o in settings.get_cors_origins():
        if o == "*":
            logger.warning("CORS_ORIGINS contains '*'. Ignoring '*' and using explicit allow-list.")
            continue
        origins.append(o)

    # de-dup
    merged: List[str] = []
    for o in origins:
        if o and o not in merged:
            merged.append(o)
    return merged


cors_origins = _build_cors_origins()
logger.info(f"CORS origins configured: {cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(readings.router, prefix="/api/readings", tags=["readings"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["dashboard"])
app.include_router(alerts.router, prefix="/api/alerts", tags=["alerts"])
app.include_router(recommendations.router, prefix="/api/recommendations", tags=["recommendations"])
app.include_router(simulations.router, prefix="/api/simulations", tags=["simulations"])

# ---------------------------------------------------------------------------
# Startup / Shutdown
# ---------------------------------------------------------------------------
@app.on_event("startup")
async def on_startup():
    logger.info("Starting Campus Energy Manager API...")
    init_manager()
    logger.info(f"Startup complete. ENV={settings.ENVIRONMENT}")


@app.on_event("shutdown")
async def on_shutdown():
    close_manager()
    logger.info("Shutdown complete")

# ---------------------------------------------------------------------------
# Root / Health
# ---------------------------------------------------------------------------
@app.get("/")
async def root():
    return {
        "message": "Campus Energy Manager API is running",
        "version": "1.0.0",
        "environment": settings.ENVIRONMENT,
        "docs": "/docs" if settings.DEBUG else None,
    }


@app.get("/health")
async def health_check():
    manager = get_manager()
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "readings": len(manager.readings),
        "alerts": len(manager.alerts),
        "recommendations": len(manager.recommendations),
    }
