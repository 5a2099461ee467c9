# 📄 File: app/modules/favourites/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules for a user's favourite plants: what counts as the same plant and how the
# list changes.
# 🧪 Purpose (Technical Summary):
# Domain layer: favourite identity key, FavouritesStore service and repository interface.
# 🔗 Dependencies:
# plant_identification domain model
# 🔄 Connected Modules / Calls From:
# favourites presentation, infrastructure implementations, tests
