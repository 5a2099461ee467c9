# 📄 File: app/modules/plant_identification/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The step-by-step workflows of plant identification: reading the photo, asking the AI,
# remembering the last photo for "try again", and producing one final answer.
# 🧪 Purpose (Technical Summary):
# Application layer exports: identification service, session state, outcome DTOs and
# image acquisition helpers.
# 🔗 Dependencies:
# plant_identification.domain, plant_identification.infrastructure
# 🔄 Connected Modules / Calls From:
# plant_identification.presentation, tests

from .dto import IdentificationOutcome, OutcomeError, OutcomeStatus
from .identification_service import PlantIdentificationService
from .image_input import file_to_data_uri, validate_data_uri
from .session import IdentificationSession, SessionRegistry

__all__ = [
    "IdentificationOutcome",
    "OutcomeError",
    "OutcomeStatus",
    "PlantIdentificationService",
    "file_to_data_uri",
    "validate_data_uri",
    "IdentificationSession",
    "SessionRegistry",
]
