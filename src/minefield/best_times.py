"""
Minesweeper Core - Best Times
Keeps the fastest winning time per board configuration
"""

import logging
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)


def config_key(width: int, height: int, mines: int) -> str:
    """Deterministic record key for a board configuration"""
    return f"{width}x{height}_{mines}"


def record_if_best(records: Dict[str, int], key: str, elapsed: int) -> Tuple[Dict[str, int], bool]:
    """
    Return (updated_records, improved) without mutating ``records``.

    The time is stored when no record exists for ``key`` or when it is strictly
    faster than the existing one. A tie leaves the record unchanged.
    """
    previous = records.get(key)
    if previous is not None and elapsed >= previous:
        return dict(records), False
    updated = dict(records)
    updated[key] = elapsed
    return updated, True


class BestTimeTracker:
    """Best-time records backed by an optional SettingsStore"""

    def __init__(self, store=None):
        self.store = store
        self.records: Dict[str, int] = store.load_best_times() if store is not None else {}

    def best(self, key: str) -> Optional[int]:
        return self.records.get(key)

    def all(self) -> Dict[str, int]:
        return dict(self.records)

    def record(self, key: str, elapsed: int) -> bool:
        """Record a winning time; returns True when it is a new best"""
        self.records, improved = record_if_best(self.records, key, elapsed)
        if improved:
            logger.info("New best time for %s: %ds", key, elapsed)
            if self.store is not None:
                self.store.save_best_times(self.records)
        return improved
