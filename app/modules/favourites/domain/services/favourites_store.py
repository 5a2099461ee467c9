# 📄 File: app/modules/favourites/domain/services/favourites_store.py
# 🧭 Purpose (Layman Explanation):
# The user's list of favourite plants: add one, remove one, check whether a plant is
# already saved, and keep the list safe between visits.
# 🧪 Purpose (Technical Summary):
# Ordered favourites collection keyed by favourite_key, persisted as a camelCase JSON list
# in one slot. Every mutation writes the full list back; corrupt slots load as empty and
# incomplete entries are repaired on load.
# 🔗 Dependencies:
# json, pydantic, FavouritesRepository, IdentificationResult, structured logging
# 🔄 Connected Modules / Calls From:
# favourites presentation dependencies and endpoints, tests

import json
from typing import List, Optional, Union

from app.modules.plant_identification.domain.models.identification import IdentificationResult
from app.modules.plant_identification.domain.services.reconciliation import (
    is_unknown_name,
    reconstruct_partial,
    validate_candidate,
)
from app.shared.utils.logging import get_logger

from ..models.favourite import FavouriteIdentity, favourite_key
from ..repositories.favourites_repository import FavouritesRepository

logger = get_logger(__name__)


class FavouritesStore:
    """
    Favourites for one storage slot.

    Results are stored by value, in insertion order, unique by
    favourite_key. Object identity or model equality are never used
    for membership.
    """

    def __init__(self, repository: FavouritesRepository, slot_key: str):
        self.repository = repository
        self.slot_key = slot_key
        self._items: List[IdentificationResult] = []
        self._loaded = False

    async def load(self) -> List[IdentificationResult]:
        """
        Read the slot once.

        Unparseable or non-list content is logged and loads as an empty
        list. Incomplete entries are repaired; nameless ones are skipped.
        """
        if self._loaded:
            return self.list_all()

        raw = await self.repository.read(self.slot_key)
        self._items = self._parse(raw)
        self._loaded = True
        logger.debug("Favourites loaded", slot_key=self.slot_key, count=len(self._items))
        return self.list_all()

    def _parse(self, raw) -> List[IdentificationResult]:
        if raw is None:
            return []

        try:
            documents = json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.error("Error loading favourites: slot content is not JSON", slot_key=self.slot_key, error=str(e))
            return []

        if not isinstance(documents, list):
            logger.error(
                "Error loading favourites: slot content is not a list",
                slot_key=self.slot_key,
                content_type=type(documents).__name__,
            )
            return []

        items: List[IdentificationResult] = []
        seen = set()
        for index, document in enumerate(documents):
            result = self._restore(index, document)
            if result is None:
                continue

            key = favourite_key(result)
            if key not in seen:
                seen.add(key)
                items.append(result)
        return items

    def _restore(self, index: int, document) -> Optional[IdentificationResult]:
        """
        Rebuild one saved entry. Entries written by older versions may lack
        fields; they are repaired with the same placeholders used for model
        answers. Entries without a usable common name are dropped.
        """
        if not isinstance(document, dict) or is_unknown_name(document.get("commonName")):
            logger.warning("Skipping favourite entry without a plant name", slot_key=self.slot_key, index=index)
            return None

        result, _ = validate_candidate(document)
        if result is not None:
            return result

        result, errors = validate_candidate(reconstruct_partial(document))
        if result is None:
            logger.warning(
                "Skipping invalid favourite entry",
                slot_key=self.slot_key,
                index=index,
                error_count=len(errors),
            )
            return None

        logger.info("Repaired incomplete favourite entry", slot_key=self.slot_key, index=index)
        return result

    def list_all(self) -> List[IdentificationResult]:
        return list(self._items)

    def is_favourite(self, result: Union[IdentificationResult, FavouriteIdentity]) -> bool:
        key = favourite_key(result)
        return any(favourite_key(item) == key for item in self._items)

    async def add(self, result: IdentificationResult) -> bool:
        """
        Append ``result`` unless its identity is already stored.

        Returns:
            True when added, False when it was already a favourite
        """
        await self.load()
        if self.is_favourite(result):
            return False

        self._items.append(result)
        await self._persist()
        logger.log_business_event(
            "favourite_added",
            f"{result.common_name} added to favourites",
            entity_id=self.slot_key,
        )
        return True

    async def remove(self, result: Union[IdentificationResult, FavouriteIdentity]) -> bool:
        """
        Remove every entry sharing the identity of ``result``.

        Returns:
            True when something was removed
        """
        await self.load()
        key = favourite_key(result)
        remaining = [item for item in self._items if favourite_key(item) != key]
        if len(remaining) == len(self._items):
            return False

        self._items = remaining
        await self._persist()
        logger.log_business_event(
            "favourite_removed",
            f"{result.common_name} removed from favourites",
            entity_id=self.slot_key,
        )
        return True

    async def toggle(self, result: IdentificationResult) -> bool:
        """Remove if present, else add. Returns the new membership state."""
        await self.load()
        if self.is_favourite(result):
            await self.remove(result)
            return False
        await self.add(result)
        return True

    def serialize(self) -> str:
        return json.dumps([item.to_document() for item in self._items])

    async def _persist(self) -> None:
        await self.repository.write(self.slot_key, self.serialize())
