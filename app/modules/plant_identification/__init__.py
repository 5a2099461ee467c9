# 📄 File: app/modules/plant_identification/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything about recognizing a plant from a photo: asking the AI, cleaning up its
# answer, and returning the plant's names, health and care tips.
# 🧪 Purpose (Technical Summary):
# Plant identification module following the domain / application / infrastructure /
# presentation layering.
# 🔗 Dependencies:
# Gemini generateContent API (via app.shared.infrastructure.external_apis), pydantic
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, favourites module (IdentificationResult)

"""
Plant Identification Module

Domain:
- IdentificationResult model and reconciliation of untrusted model output

Application:
- PlantIdentificationService, per-client IdentificationSession, image acquisition

Infrastructure:
- GeminiPlantAnalyzer (prompt templates over Gemini generateContent)

Presentation:
- /identify endpoints and /care-guidance
"""
