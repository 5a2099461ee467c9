# 📄 File: app/modules/favourites/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The favourites endpoints users call from the app's heart button and favourites list.
# 🧪 Purpose (Technical Summary):
# Presentation layer: FastAPI router, response schemas and dependency providers.
# 🔗 Dependencies:
# FastAPI, favourites domain
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
