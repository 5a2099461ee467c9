# 📄 File: app/shared/infrastructure/external_apis/__init__.py

# 🧭 Purpose (Layman Explanation):
# The foundation for talking to outside services (like the Gemini AI) reliably: retrying
# flaky connections and turning their failures into errors our app understands.

# 🧪 Purpose (Technical Summary):
# External API infrastructure exports: the aiohttp/tenacity APIClient and its factory.

# 🔗 Dependencies:
# - api_client: Generic HTTP client with retry logic

# 🔄 Connected Modules / Calls From:
# Used by: plant_identification Gemini analyzer

from .api_client import APIClient, create_api_client

__all__ = [
    "APIClient",
    "create_api_client",
]
