"""Per-player perfect-score counters used by the reward decay rule."""
import threading
from collections import defaultdict
from typing import Dict


class RewardDecayState:
    """
    In-memory perfect-score counter, one cell per player.
    Each cell is guarded by its own lock so concurrent submissions of
    different players never contend, and two sessions of the same player
    are serialized. State lives for the process lifetime only: one counter
    and one lock per player who ever scored 100, never evicted.
    """

    def __init__(self):
        self._counts: Dict[str, int] = {}
        self._locks: Dict[str, threading.Lock] = defaultdict(threading.Lock)
        self._registry_lock = threading.Lock()

    def _lock_for(self, player_id: str) -> threading.Lock:
        with self._registry_lock:
            return self._locks[player_id]

    def count(self, player_id: str) -> int:
        return self._counts.get(player_id, 0)

    def increment_if_below(self, player_id: str, limit: int) -> bool:
        """Atomically bump the player's counter if it is below ``limit``.

        Returns True when the counter was incremented.
        """
        with self._lock_for(player_id):
            current = self._counts.get(player_id, 0)
            if current >= limit:
                return False
            self._counts[player_id] = current + 1
            return True
