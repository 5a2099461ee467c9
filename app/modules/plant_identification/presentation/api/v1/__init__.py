# 📄 File: app/modules/plant_identification/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the plant identification web endpoints.
# 🧪 Purpose (Technical Summary):
# v1 router exports for the plant identification module.
# 🔗 Dependencies:
# identification.py
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

from .identification import identification_router

__all__ = ["identification_router"]
