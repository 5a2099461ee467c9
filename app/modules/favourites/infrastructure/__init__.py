# 📄 File: app/modules/favourites/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# The technical pieces that physically store favourite plants.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer for the favourites module (storage backends).
# 🔗 Dependencies:
# infrastructure.storage
# 🔄 Connected Modules / Calls From:
# app.main
