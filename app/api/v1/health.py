# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Health check endpoints that tell us whether the Plant Identifier is up: whether it can
# save favourites and whether the AI connection is configured.
# 🧪 Purpose (Technical Summary):
# Liveness, readiness and detailed health endpoints covering the favourites storage
# backend, the Gemini client and host resource metrics.
# 🔗 Dependencies:
# FastAPI, psutil, app.shared.config (settings, redis health probe)
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, monitoring systems, load balancers

import os
from datetime import datetime
from typing import Any, Dict

import psutil
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from app.shared.config.redis import check_redis_health
from app.shared.config.settings import Settings
from app.shared.core.dependencies import get_app_settings
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

# Create router for health endpoints
health_router = APIRouter()

# Application start time for uptime calculation
_app_start_time = datetime.now()


@health_router.get("/health",
                   summary="Basic Health Check",
                   description="Basic health check endpoint for load balancers and monitoring")
async def health_check(settings: Settings = Depends(get_app_settings)) -> JSONResponse:
    """
    Basic health check endpoint

    Returns simple OK status for quick health verification.
    """
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "service": "plant-identifier-api",
            "version": settings.APP_VERSION,
        }
    )


@health_router.get("/health/detailed",
                   summary="Detailed Health Check",
                   description="Health of the favourites storage, the analysis service client and the host")
async def detailed_health_check(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    """
    Comprehensive health check for all system components

    Checks:
    - Favourites storage backend (Redis ping or file directory access)
    - Gemini client configuration and request statistics
    - System resources
    """
    start_time = datetime.now()

    components: Dict[str, Any] = {
        "favourites_storage": await _check_favourites_storage(settings),
        "analysis_service": _check_analysis_service(request, settings),
        "system": _get_system_metrics(),
    }

    if components["favourites_storage"]["status"] != "healthy":
        overall_status = "unhealthy"
    elif components["analysis_service"]["status"] != "healthy":
        overall_status = "degraded"
    else:
        overall_status = "healthy"

    health_response = {
        "status": overall_status,
        "timestamp": datetime.now().isoformat(),
        "service": "plant-identifier-api",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "uptime_seconds": (datetime.now() - _app_start_time).total_seconds(),
        "response_time_seconds": (datetime.now() - start_time).total_seconds(),
        "components": components,
    }

    # Degraded is still operational
    status_code = 503 if overall_status == "unhealthy" else 200
    return JSONResponse(status_code=status_code, content=health_response)


@health_router.get("/health/live",
                   summary="Liveness Probe",
                   description="Kubernetes liveness probe endpoint")
async def liveness_probe() -> Response:
    return Response(status_code=200, content="OK")


@health_router.get("/health/ready",
                   summary="Readiness Probe",
                   description="Kubernetes readiness probe endpoint")
async def readiness_probe(settings: Settings = Depends(get_app_settings)) -> JSONResponse:
    """
    Readiness probe for Kubernetes

    Ready when the favourites storage can be reached.
    """
    storage_health = await _check_favourites_storage(settings)
    if storage_health["status"] == "healthy":
        return JSONResponse(
            status_code=200,
            content={"status": "ready", "timestamp": datetime.now().isoformat()}
        )

    logger.warning("Readiness probe failed", storage=storage_health)
    return JSONResponse(
        status_code=503,
        content={
            "status": "not_ready",
            "reason": "favourites_storage_unhealthy",
            "timestamp": datetime.now().isoformat(),
        }
    )


# =========================================================================
# COMPONENT CHECKS
# =========================================================================

async def _check_favourites_storage(settings: Settings) -> Dict[str, Any]:
    if settings.FAVOURITES_BACKEND == "redis":
        return {"backend": "redis", **await check_redis_health()}

    directory = settings.FAVOURITES_FILE_DIR
    if os.path.isdir(directory):
        writable = os.access(directory, os.W_OK)
    else:
        # Created on first write; the parent must be writable.
        writable = os.access(os.path.dirname(os.path.abspath(directory)), os.W_OK)

    return {
        "backend": "file",
        "status": "healthy" if writable else "unhealthy",
        "directory": directory,
    }


def _check_analysis_service(request: Request, settings: Settings) -> Dict[str, Any]:
    configured = bool(settings.GOOGLE_GEMINI_API_KEY)
    health = {
        "status": "healthy" if configured else "degraded",
        "configured": configured,
        "model": settings.GOOGLE_GEMINI_MODEL,
    }

    analyzer = getattr(request.app.state, "plant_analyzer", None)
    if analyzer is not None:
        health["stats"] = analyzer.api_client.get_stats()
    return health


def _get_system_metrics() -> Dict[str, Any]:
    memory = psutil.virtual_memory()
    return {
        "cpu_percent": psutil.cpu_percent(interval=None),
        "memory_percent": memory.percent,
        "memory_available_mb": round(memory.available / (1024 * 1024), 1),
        "process_rss_mb": round(psutil.Process().memory_info().rss / (1024 * 1024), 1),
    }
