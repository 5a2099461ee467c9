# 📄 File: app/modules/plant_identification/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# The parts of plant identification that talk to the outside world (the Gemini AI model).
# 🧪 Purpose (Technical Summary):
# Infrastructure layer: external model adapter and prompt templates.
# 🔗 Dependencies:
# app.shared.infrastructure.external_apis
# 🔄 Connected Modules / Calls From:
# application layer, presentation dependencies
