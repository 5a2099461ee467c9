# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the Plant Identifier API, kept in its own section so future versions can be
# added without breaking existing apps.
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1: version metadata, route prefixes and OpenAPI tags.
# 🔗 Dependencies:
# app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main.py

"""
Plant Identifier API Version 1

Structure:
    v1/
    ├── __init__.py          # This file
    ├── router.py            # Main v1 router aggregation
    └── health.py            # Health check endpoints

Module routers (identification, care guidance, favourites) live in their
modules' presentation layers and are included by router.py.
"""

from typing import Any, Dict

# API v1 metadata
__version__ = "1.0.0"
__api_version__ = "v1"
__status__ = "stable"

# API v1 route prefixes
ROUTE_PREFIXES = {
    "identification": "",
    "favourites": "/favourites",
}

# API v1 tags for OpenAPI documentation
API_TAGS = [
    {
        "name": "Identification",
        "description": "Plant identification from photos, retry and care guidance"
    },
    {
        "name": "Favourites",
        "description": "Saved plants, unique by common and scientific name"
    },
    {
        "name": "Health Check",
        "description": "System health and status monitoring"
    },
]


def get_api_info() -> Dict[str, Any]:
    """
    Get API v1 information.

    Returns:
        Dict[str, Any]: API version metadata
    """
    from app.shared.config.settings import get_settings

    settings = get_settings()
    return {
        "name": settings.APP_NAME,
        "version": __version__,
        "api_version": __api_version__,
        "status": __status__,
        "environment": settings.ENVIRONMENT,
        "tags": [tag["name"] for tag in API_TAGS],
    }
