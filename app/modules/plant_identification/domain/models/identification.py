# 📄 File: app/modules/plant_identification/domain/models/identification.py
# 🧭 Purpose (Layman Explanation):
# Describes exactly what a finished plant identification looks like: its names, whether it is
# a weed, how healthy it looks, how to care for it, and fruit details for edible plants.
# 🧪 Purpose (Technical Summary):
# Strict Pydantic domain model for IdentificationResult (camelCase wire/persisted aliases),
# plus the Accepted/Rejected reconciliation outcome types.
# 🔗 Dependencies:
# pydantic, typing, dataclasses
# 🔄 Connected Modules / Calls From:
# reconciliation.py, identification_service.py, favourites store, API schemas

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

CARE_INSTRUCTIONS_PLACEHOLDER = "Care information unavailable."
HEALTH_STATUS_PLACEHOLDER = "Health status unavailable."
PROPOSED_ACTIONS_PLACEHOLDER = "Proposed actions unavailable."

UNKNOWN_PLANT_NAME = "unknown"

FRUIT_FIELDS = ("fruit_growth_season", "fruit_care_instructions", "fruit_harvest_time")


class IdentificationResult(BaseModel):
    """
    Identified plant with weed classification, health assessment and care guidance.

    Validation is strict: no coercion between types, so ``"yes"`` is not a
    boolean and ``123`` is not a string. Fruit details are only valid when
    ``isEdibleFruit`` is explicitly true.
    """

    model_config = ConfigDict(
        strict=True,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    common_name: str = Field(..., alias="commonName", min_length=1)
    latin_name: Optional[str] = Field(None, alias="latinName")
    alternative_names: Optional[List[str]] = Field(None, alias="alternativeNames")

    is_weed: bool = Field(..., alias="isWeed")
    care_instructions: str = Field(..., alias="careInstructions")
    health_status: str = Field(..., alias="healthStatus")
    proposed_actions: str = Field(..., alias="proposedActions")

    height: Optional[str] = None
    spread: Optional[str] = None
    growth_rate: Optional[str] = Field(None, alias="growthRate")
    flowering_info: Optional[str] = Field(None, alias="floweringInfo")
    pruning_info: Optional[str] = Field(None, alias="pruningInfo")

    is_edible_fruit: Optional[bool] = Field(None, alias="isEdibleFruit")
    fruit_growth_season: Optional[str] = Field(None, alias="fruitGrowthSeason")
    fruit_care_instructions: Optional[str] = Field(None, alias="fruitCareInstructions")
    fruit_harvest_time: Optional[str] = Field(None, alias="fruitHarvestTime")

    @model_validator(mode="after")
    def check_fruit_details(self) -> "IdentificationResult":
        if self.is_edible_fruit is not True:
            present = [name for name in FRUIT_FIELDS if getattr(self, name) is not None]
            if present:
                raise ValueError(
                    f"Fruit details {present} are only allowed when isEdibleFruit is true"
                )
        return self

    def to_document(self) -> Dict[str, Any]:
        """camelCase dict with absent fields omitted (wire and storage form)."""
        return self.model_dump(by_alias=True, exclude_none=True)


class CareGuidance(BaseModel):
    """Weed classification and care instructions for a named plant."""

    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore")

    is_weed: bool = Field(..., alias="isWeed")
    care_instructions: str = Field(..., alias="careInstructions", min_length=1)


@dataclass(frozen=True)
class Accepted:
    """Reconciliation accepted the candidate (as received, or repaired)."""
    result: IdentificationResult
    partial: bool = False


@dataclass(frozen=True)
class Rejected:
    """Reconciliation rejected the candidate."""
    reason: str
    errors: List[Dict[str, Any]] = field(default_factory=list)


ReconciliationOutcome = Union[Accepted, Rejected]
