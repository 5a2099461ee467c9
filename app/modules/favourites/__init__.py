# 📄 File: app/modules/favourites/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lets users keep a list of plants they have identified and want to remember, saved
# between visits.
# 🧪 Purpose (Technical Summary):
# Favourites module: identity-keyed, ordered collection of IdentificationResult values
# persisted in one slot per client (Redis or JSON files).
# 🔗 Dependencies:
# plant_identification domain model, redis.asyncio
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main

"""
Favourites Module

Domain:
- favourite_key identity, FavouritesStore, FavouritesRepository interface

Infrastructure:
- Redis and JSON file repositories

Presentation:
- /favourites endpoints
"""
