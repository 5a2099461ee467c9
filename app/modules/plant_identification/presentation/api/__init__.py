# 📄 File: app/modules/plant_identification/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the plant identification web endpoints by API version.
# 🧪 Purpose (Technical Summary):
# API package for the plant identification module (v1 routers, schemas).
# 🔗 Dependencies:
# presentation.api.v1, presentation.api.schemas
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
