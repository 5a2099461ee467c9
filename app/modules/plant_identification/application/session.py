# 📄 File: app/modules/plant_identification/application/session.py
# 🧭 Purpose (Layman Explanation):
# Remembers, for each user, the last photo they sent and the latest answer, so "try again"
# works and a slow old answer never replaces the answer for a newer photo.
# 🧪 Purpose (Technical Summary):
# Per-client transient identification state with a monotonic sequence number.
# Completions tagged with an outdated sequence are discarded. Sessions live in a
# size- and time-bounded cache; a dropped session releases its stored image.
# 🔗 Dependencies:
# cachetools TTLCache, IdentificationOutcome DTO
# 🔄 Connected Modules / Calls From:
# identification_service.py, presentation dependencies

import time
from typing import Callable, List, Optional, Tuple

from cachetools import TTLCache

from app.shared.utils.logging import get_logger

from .dto import IdentificationOutcome

logger = get_logger(__name__)


class IdentificationSession:
    """
    Transient state for one client.

    - ``last_image``: the stored image artifact used by retry
    - ``current``: the "current result" slot
    - ``sequence``: increases with every new submission
    """

    def __init__(self, client_id: str):
        self.client_id = client_id
        self.sequence = 0
        self.last_image: Optional[str] = None
        self.current: Optional[IdentificationOutcome] = None
        self.in_flight = False

    def begin(self, image_data_uri: str) -> int:
        """Register a new submission and return its sequence number."""
        self.sequence += 1
        self.last_image = image_data_uri
        self.current = None
        self.in_flight = True
        return self.sequence

    def complete(self, sequence: int, outcome: IdentificationOutcome) -> bool:
        """
        Store ``outcome`` in the current slot if ``sequence`` is still the latest.

        Returns:
            False when the completion is stale and was discarded
        """
        if sequence != self.sequence:
            logger.info(
                "Discarding stale identification response",
                client_id=self.client_id,
                stale_sequence=sequence,
                latest_sequence=self.sequence,
            )
            return False

        self.current = outcome
        self.in_flight = False
        return True

    def reject_input(self) -> int:
        """A rejected selection supersedes everything before it."""
        self.sequence += 1
        self.last_image = None
        self.current = None
        self.in_flight = False
        return self.sequence

    def clear(self) -> None:
        self.reject_input()


class _SessionCache(TTLCache):
    """TTLCache that clears each session it drops, by expiry or by LRU eviction."""

    def popitem(self) -> Tuple[str, IdentificationSession]:
        client_id, session = super().popitem()
        session.clear()
        logger.debug("Evicted identification session", client_id=client_id)
        return client_id, session

    def expire(self, time=None) -> List[Tuple[str, IdentificationSession]]:
        expired = super().expire(time)
        for client_id, session in expired:
            session.clear()
            logger.debug("Expired identification session", client_id=client_id)
        return expired


class SessionRegistry:
    """
    Client id -> IdentificationSession, bounded in count and idle time.

    Client ids come from an untrusted header, so the least recently used
    session is dropped once ``max_sessions`` is reached, and any session
    idle for ``ttl_seconds`` expires.
    """

    def __init__(
        self,
        max_sessions: int = 1000,
        ttl_seconds: float = 3600,
        timer: Callable[[], float] = time.monotonic,
    ):
        self._sessions = _SessionCache(maxsize=max_sessions, ttl=ttl_seconds, timer=timer)

    def get(self, client_id: str) -> IdentificationSession:
        session = self._sessions.get(client_id)
        if session is None:
            session = IdentificationSession(client_id)
        # Re-inserting refreshes the idle timer.
        self._sessions[client_id] = session
        return session

    def __len__(self) -> int:
        self._sessions.expire()
        return len(self._sessions)
