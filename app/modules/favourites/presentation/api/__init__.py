# 📄 File: app/modules/favourites/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the favourites web endpoints by API version.
# 🧪 Purpose (Technical Summary):
# API package for the favourites module (v1 routers, schemas).
# 🔗 Dependencies:
# presentation.api.v1, presentation.api.schemas
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
