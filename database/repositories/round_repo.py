"""Load/save operations for the stored round history."""

import logging
import time
from typing import Callable, List, Optional

from models import RoundRecord
from database.converters import decode_payload, encode_rounds
from database.exceptions import CorruptDataError, DuplicateError
from database.store import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "golf-handicap-rounds"


class RoundRepository:
    """Round history kept under a single key of a KeyValueStore.

    Every write replaces the whole collection. Reads always go back to the
    store, nothing is cached between calls.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str = DEFAULT_STORAGE_KEY,
        clock: Callable[[], float] = time.time,
    ):
        self._store = store
        self._key = key
        self._clock = clock

    @property
    def key(self) -> str:
        return self._key

    # ================================================================
    # Read
    # ================================================================

    def load(self) -> List[RoundRecord]:
        """Return the stored rounds in stored order.

        Entries that fail to decode are dropped. An unreadable payload is
        treated as an empty history.
        """
        payload = self._store.get(self._key)
        if not payload:
            return []

        try:
            decoded = decode_payload(payload)
        except CorruptDataError as e:
            logger.warning("Ignoring stored rounds under '%s': %s", self._key, e)
            return []

        rounds: List[RoundRecord] = []
        seen_ids = set()
        for index, entry in enumerate(decoded):
            if not entry.ok:
                logger.debug("Dropping stored round #%d: %s", index, entry.reason)
                continue
            if entry.record.id in seen_ids:
                logger.debug("Dropping stored round #%d: duplicate id %s", index, entry.record.id)
                continue
            seen_ids.add(entry.record.id)
            rounds.append(entry.record)
        return rounds

    def get_round(self, round_id: str) -> Optional[RoundRecord]:
        for r in self.load():
            if r.id == round_id:
                return r
        return None

    def next_id(self, now: Optional[float] = None) -> str:
        """Millisecond timestamp id, bumped until unused."""
        candidate = int((self._clock() if now is None else now) * 1000)
        taken = {r.id for r in self.load()}
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    # ================================================================
    # Write
    # ================================================================

    def save(self, rounds: List[RoundRecord]) -> None:
        """Persist the full collection. Raises CapacityError when full."""
        self._store.set(self._key, encode_rounds(rounds))

    def add_round(self, round_: RoundRecord) -> List[RoundRecord]:
        """Prepend a new round and save. Returns the stored collection."""
        rounds = self.load()
        if any(r.id == round_.id for r in rounds):
            raise DuplicateError(f"Round {round_.id} already exists")
        rounds.insert(0, round_)
        self.save(rounds)
        logger.info("Stored round %s (%s, differential %.1f)", round_.id, round_.date, round_.differential)
        return rounds

    def delete_round(self, round_id: str) -> bool:
        """Remove one round. Returns False if no round had that id."""
        rounds = self.load()
        remaining = [r for r in rounds if r.id != round_id]
        if len(remaining) == len(rounds):
            return False
        self.save(remaining)
        logger.info("Deleted round %s", round_id)
        return True

    def clear(self) -> None:
        """Remove every stored round."""
        self._store.remove(self._key)
        logger.info("Cleared stored rounds under '%s'", self._key)
