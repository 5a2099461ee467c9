# 📄 File: app/modules/favourites/domain/repositories/favourites_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how the app saves and reads back a user's list of favourite plants, without
# caring whether it ends up in Redis or in a file on disk.
# 🧪 Purpose (Technical Summary):
# Repository interface for the per-client favourites slot: one named key holding the
# serialized favourites list as text.
# 🔗 Dependencies:
# abc, typing
# 🔄 Connected Modules / Calls From:
# FavouritesStore (domain service), redis and file implementations, tests

from abc import ABC, abstractmethod
from typing import Optional


class FavouritesRepository(ABC):
    """
    Repository interface for the favourites slot.

    The slot holds the raw serialized list. Parsing and tolerance of
    corrupt content belong to the domain service, so implementations only
    move text in and out of their backend.
    """

    @abstractmethod
    async def read(self, key: str) -> Optional[str]:
        """
        Read the slot content.

        Returns:
            The stored text, or None when the slot was never written

        Raises:
            StorageError: If the backend cannot be reached
        """
        pass

    @abstractmethod
    async def write(self, key: str, value: str) -> None:
        """
        Replace the slot content.

        Raises:
            StorageError: If the backend cannot be written
        """
        pass
