import pytest

from app.modules.plant_identification.domain.models.identification import (
    CARE_INSTRUCTIONS_PLACEHOLDER,
    HEALTH_STATUS_PLACEHOLDER,
    PROPOSED_ACTIONS_PLACEHOLDER,
    Accepted,
    IdentificationResult,
    Rejected,
)
from app.modules.plant_identification.domain.services.reconciliation import (
    is_unknown_name,
    reconcile,
    reconstruct_partial,
    validate_candidate,
)


def test_valid_candidate_is_accepted_unchanged(candidate):
    outcome = reconcile(candidate)

    assert isinstance(outcome, Accepted)
    assert outcome.partial is False
    assert outcome.result.to_document() == candidate


def test_missing_required_fields_are_repaired_with_placeholders():
    outcome = reconcile({"commonName": "Fern"})

    assert isinstance(outcome, Accepted)
    assert outcome.partial is True
    result = outcome.result
    assert result.common_name == "Fern"
    assert result.is_weed is False
    assert result.care_instructions == CARE_INSTRUCTIONS_PLACEHOLDER
    assert result.health_status == HEALTH_STATUS_PLACEHOLDER
    assert result.proposed_actions == PROPOSED_ACTIONS_PLACEHOLDER
    assert result.latin_name is None


def test_mistyped_fields_are_not_coerced(candidate):
    candidate["isWeed"] = "yes"
    candidate["height"] = 30

    outcome = reconcile(candidate)

    assert isinstance(outcome, Accepted)
    assert outcome.partial is True
    assert outcome.result.is_weed is False
    assert outcome.result.height is None
    assert outcome.result.care_instructions == candidate["careInstructions"]


def test_mistyped_weed_flag_and_care_text_fall_back_to_defaults():
    outcome = reconcile({"commonName": "Dandelion", "isWeed": "yes", "careInstructions": 123})

    assert isinstance(outcome, Accepted)
    assert outcome.partial is True
    assert outcome.result.common_name == "Dandelion"
    assert outcome.result.is_weed is False
    assert outcome.result.care_instructions == CARE_INSTRUCTIONS_PLACEHOLDER


@pytest.mark.parametrize("name", ["Unknown", "  unknown ", "UNKNOWN", "", "   ", None, 42])
def test_unknown_names_are_rejected(candidate, name):
    candidate["commonName"] = name

    outcome = reconcile(candidate)

    assert isinstance(outcome, Rejected)
    assert outcome.reason == "unidentified"
    assert is_unknown_name(name)


def test_missing_common_name_is_rejected(candidate):
    del candidate["commonName"]

    outcome = reconcile(candidate)

    assert outcome == Rejected(reason="unidentified")


@pytest.mark.parametrize("value", [None, "Dandelion", ["Dandelion"], 3])
def test_non_mapping_candidate_is_rejected(value):
    outcome = reconcile(value)

    assert isinstance(outcome, Rejected)
    assert outcome.reason == "missing_candidate"


def test_fruit_details_require_edible_fruit_flag(candidate):
    candidate["fruitHarvestTime"] = "Never"

    result, errors = validate_candidate(candidate)
    assert result is None
    assert errors

    outcome = reconcile(candidate)
    assert isinstance(outcome, Accepted)
    assert outcome.partial is True
    assert outcome.result.fruit_harvest_time is None
    assert "fruitHarvestTime" not in outcome.result.to_document()


def test_fruit_details_kept_for_edible_fruit(candidate):
    candidate.update(
        {
            "commonName": "Apple",
            "latinName": "Malus domestica",
            "isWeed": False,
            "isEdibleFruit": True,
            "fruitGrowthSeason": "Summer",
            "fruitCareInstructions": "Thin the fruitlets in June.",
            "fruitHarvestTime": "September",
        }
    )

    outcome = reconcile(candidate)

    assert isinstance(outcome, Accepted)
    assert outcome.partial is False
    assert outcome.result.fruit_harvest_time == "September"


def test_reconstruct_filters_alternative_names():
    partial = reconstruct_partial({"commonName": "Rose", "alternativeNames": ["Dog rose", 7, None, "Briar"]})

    assert partial["alternativeNames"] == ["Dog rose", "Briar"]


def test_reconstruct_drops_fruit_details_without_flag():
    partial = reconstruct_partial(
        {"commonName": "Rose", "isEdibleFruit": "true", "fruitGrowthSeason": "Autumn"}
    )

    assert "isEdibleFruit" not in partial
    assert "fruitGrowthSeason" not in partial


def test_reconstruct_never_defaults_common_name():
    assert reconstruct_partial({})["commonName"] is None


def test_null_optional_fields_are_omitted_from_documents(candidate):
    candidate["spread"] = None

    result = IdentificationResult.model_validate(candidate)

    assert "spread" not in result.to_document()
