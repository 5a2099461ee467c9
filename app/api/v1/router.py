# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The traffic director for all version 1 requests: photo identification goes to the
# identification module, saved plants go to the favourites module.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation combining the health, identification and favourites
# routers under their prefixes.
# 🔗 Dependencies:
# FastAPI, app.api.v1.health, module presentation routers
# 🔄 Connected Modules / Calls From:
# app.main.py

from fastapi import APIRouter

from app.modules.favourites.presentation.api.v1.favourites import favourites_router
from app.modules.plant_identification.presentation.api.v1.identification import identification_router

from . import ROUTE_PREFIXES, get_api_info
from .health import health_router

# Create main API v1 router
api_v1_router = APIRouter()

# Include health check router (no prefix - direct access)
api_v1_router.include_router(
    health_router,
    tags=["Health Check"]
)

api_v1_router.include_router(
    identification_router,
    prefix=ROUTE_PREFIXES["identification"],
    tags=["Identification"]
)

api_v1_router.include_router(
    favourites_router,
    prefix=ROUTE_PREFIXES["favourites"],
    tags=["Favourites"]
)


@api_v1_router.get("/",
                   summary="API v1 Information",
                   description="Get API v1 version information and available endpoints",
                   tags=["API Info"])
async def api_v1_info() -> dict:
    return {
        **get_api_info(),
        "endpoints": {
            "identify": "/identify",
            "identify_data_uri": "/identify/data-uri",
            "retry": "/identify/retry",
            "current": "/identify/current",
            "care_guidance": "/care-guidance",
            "favourites": "/favourites",
            "health_check": "/health",
            "detailed_health": "/health/detailed",
        },
        "documentation": {
            "openapi_schema": "/openapi.json",
            "swagger_ui": "/docs",
            "redoc": "/redoc",
        },
    }
