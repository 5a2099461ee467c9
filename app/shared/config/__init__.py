# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains all the settings that tell our Plant Identifier app how to reach the AI
# model, where to keep favourites, and how to behave in each environment.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization with exports for settings management.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - All modules requiring configuration

"""
Configuration Management Package

Handles all application configuration including:
- Environment-based settings
- Gemini API credentials and settings
- Favourites storage and Redis configuration
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
