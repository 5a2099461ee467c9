# 📄 File: app/modules/plant_identification/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The part of plant identification that users actually talk to: the web endpoints.
# 🧪 Purpose (Technical Summary):
# Presentation layer: FastAPI routers, Pydantic schemas and dependency providers.
# 🔗 Dependencies:
# FastAPI, plant_identification.application
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main
