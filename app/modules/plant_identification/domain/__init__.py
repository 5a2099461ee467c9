# 📄 File: app/modules/plant_identification/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The heart of plant identification: what a result looks like and how we decide whether to trust
# what the AI told us.
# 🧪 Purpose (Technical Summary):
# Domain layer: IdentificationResult model and the pure reconciliation service.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# application layer, favourites module, tests
