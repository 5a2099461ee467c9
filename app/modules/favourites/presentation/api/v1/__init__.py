# 📄 File: app/modules/favourites/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the favourites web endpoints.
# 🧪 Purpose (Technical Summary):
# v1 router exports for the favourites module.
# 🔗 Dependencies:
# favourites.py
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

from .favourites import favourites_router

__all__ = ["favourites_router"]
