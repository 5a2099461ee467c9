# 📄 File: app/modules/plant_identification/domain/services/reconciliation.py
# 🧭 Purpose (Layman Explanation):
# The AI doesn't always fill in its answer perfectly. This file decides whether an answer is
# good as-is, can be patched up with safe placeholder text, or has to be thrown away.
# It never invents the plant's name, only the supporting details.
# 🧪 Purpose (Technical Summary):
# Pure two-stage reconciliation: strict schema validation, then partial reconstruction
# with fixed defaults and revalidation. Yields Accepted(result) or Rejected(reason).
# 🔗 Dependencies:
# pydantic ValidationError, identification domain model
# 🔄 Connected Modules / Calls From:
# identification_service.py, gemini_client.py (unknown-name check), tests

from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from ..models.identification import (
    CARE_INSTRUCTIONS_PLACEHOLDER,
    HEALTH_STATUS_PLACEHOLDER,
    PROPOSED_ACTIONS_PLACEHOLDER,
    UNKNOWN_PLANT_NAME,
    Accepted,
    IdentificationResult,
    ReconciliationOutcome,
    Rejected,
)
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

# Required strings repaired with a placeholder when missing or mistyped.
REQUIRED_TEXT_DEFAULTS: Tuple[Tuple[str, str], ...] = (
    ("careInstructions", CARE_INSTRUCTIONS_PLACEHOLDER),
    ("healthStatus", HEALTH_STATUS_PLACEHOLDER),
    ("proposedActions", PROPOSED_ACTIONS_PLACEHOLDER),
)

# Optional strings copied only when present and a string.
OPTIONAL_TEXT_FIELDS: Tuple[str, ...] = (
    "latinName",
    "height",
    "spread",
    "growthRate",
    "floweringInfo",
    "pruningInfo",
)

FRUIT_TEXT_FIELDS: Tuple[str, ...] = (
    "fruitGrowthSeason",
    "fruitCareInstructions",
    "fruitHarvestTime",
)


def is_unknown_name(name: Any) -> bool:
    """
    True when ``name`` cannot identify a plant: absent, not a string,
    blank, or the "Unknown" sentinel (case-insensitive, trimmed).
    """
    if not isinstance(name, str):
        return True
    normalized = name.strip().lower()
    return not normalized or normalized == UNKNOWN_PLANT_NAME


def _error_list(exc: ValidationError) -> List[Dict[str, Any]]:
    return exc.errors(include_url=False, include_context=False, include_input=False)


def validate_candidate(
    candidate: Mapping[str, Any],
) -> Tuple[Optional[IdentificationResult], List[Dict[str, Any]]]:
    """
    Strictly validate a candidate against the IdentificationResult schema.

    Returns:
        (result, []) when valid, (None, errors) otherwise
    """
    try:
        return IdentificationResult.model_validate(dict(candidate)), []
    except ValidationError as e:
        return None, _error_list(e)


def reconstruct_partial(candidate: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Build a repaired candidate from the fields that pass individual type checks.

    - ``commonName`` is copied as-is; it is never defaulted.
    - ``isWeed`` falls back to ``False``; the required strings fall back to
      fixed placeholders.
    - Optional strings and ``isEdibleFruit`` are kept only when correctly typed.
    - ``alternativeNames`` keeps its string entries when it is a list.
    - Fruit details are kept only when ``isEdibleFruit is True`` and the
      individual value is a string. They are never defaulted.
    """
    partial: Dict[str, Any] = {"commonName": candidate.get("commonName")}

    alternative_names = candidate.get("alternativeNames")
    if isinstance(alternative_names, list):
        partial["alternativeNames"] = [n for n in alternative_names if isinstance(n, str)]

    is_weed = candidate.get("isWeed")
    partial["isWeed"] = is_weed if isinstance(is_weed, bool) else False

    for key, default in REQUIRED_TEXT_DEFAULTS:
        value = candidate.get(key)
        partial[key] = value if isinstance(value, str) else default

    for key in OPTIONAL_TEXT_FIELDS:
        value = candidate.get(key)
        if isinstance(value, str):
            partial[key] = value

    is_edible_fruit = candidate.get("isEdibleFruit")
    if isinstance(is_edible_fruit, bool):
        partial["isEdibleFruit"] = is_edible_fruit

    if is_edible_fruit is True:
        for key in FRUIT_TEXT_FIELDS:
            value = candidate.get(key)
            if isinstance(value, str):
                partial[key] = value

    return partial


def reconcile(candidate: Any) -> ReconciliationOutcome:
    """
    Convert an untrusted model candidate into an accepted result or a rejection.

    1. Reject when the candidate is missing or names no plant.
    2. Accept a strictly valid candidate unchanged.
    3. Otherwise repair it with reconstruct_partial and revalidate; accept the
       repaired result or reject.
    """
    if not isinstance(candidate, Mapping):
        return Rejected(reason="missing_candidate")

    if is_unknown_name(candidate.get("commonName")):
        return Rejected(reason="unidentified")

    result, errors = validate_candidate(candidate)
    if result is not None:
        return Accepted(result=result)

    logger.warning(
        "Model output failed validation, attempting partial reconstruction",
        common_name=candidate.get("commonName"),
        validation_errors=errors,
    )

    repaired, repair_errors = validate_candidate(reconstruct_partial(candidate))
    if repaired is None:
        logger.error(
            "Partial reconstruction failed validation",
            common_name=candidate.get("commonName"),
            validation_errors=repair_errors,
        )
        return Rejected(reason="irreparable", errors=repair_errors)

    return Accepted(result=repaired, partial=True)
