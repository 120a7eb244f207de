"""Persisted engine state: per-day frequency ledger and recent-tip ledger.

Both ledgers keep the in-memory copy authoritative. Every mutation is written
through to the store immediately; a failed write is logged and otherwise
ignored, so the next successful write reconciles storage.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any

from cardkernel.config import settings
from cardkernel.engine.store import KeyValueStore

logger = logging.getLogger(__name__)

SHOW_COUNTS_KEY = "dynamic_card_show_counts"
ACTED_UPON_KEY = "dynamic_card_acted_upon"
LAST_RESET_KEY = "dynamic_card_last_reset"
RECENT_TIPS_KEY = "dynamic_card_recent_tip_ids"


def _load_json(store: KeyValueStore, key: str) -> Any | None:
    """Decode a stored JSON value. Missing, unreadable or corrupt → None."""
    try:
        raw = store.get(key)
    except Exception:
        logger.warning("Reading %s failed; starting empty", key, exc_info=True)
        return None
    if raw is None:
        return None
    try:
        return json.loads(raw.decode("utf-8"))
    except (AttributeError, UnicodeDecodeError, ValueError):
        logger.warning("Discarding undecodable value for %s", key)
        return None


def _save_json(store: KeyValueStore, key: str, value: Any) -> bool:
    """Best-effort write. Returns False (and logs) when the store refuses it."""
    try:
        store.set(key, json.dumps(value).encode("utf-8"))
    except Exception:
        logger.warning("Persisting %s failed; keeping in-memory state", key, exc_info=True)
        return False
    return True


# ---------------------------------------------------------------------------
# Frequency ledger
# ---------------------------------------------------------------------------


class FrequencyLedger:
    """Show counts and acted-upon keys for the current local day."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.show_counts: dict[str, int] = {}
        self.acted_upon: set[str] = set()
        self.last_reset: date | None = None

    @classmethod
    def load(cls, store: KeyValueStore) -> FrequencyLedger:
        ledger = cls(store)

        counts = _load_json(store, SHOW_COUNTS_KEY)
        if isinstance(counts, dict):
            ledger.show_counts = {
                str(k): int(v) for k, v in counts.items() if isinstance(v, int) and not isinstance(v, bool)
            }

        acted = _load_json(store, ACTED_UPON_KEY)
        if isinstance(acted, list):
            ledger.acted_upon = {str(k) for k in acted}

        stamp = _load_json(store, LAST_RESET_KEY)
        if isinstance(stamp, str):
            try:
                ledger.last_reset = date.fromisoformat(stamp)
            except ValueError:
                logger.warning("Ignoring malformed last reset date: %r", stamp)

        return ledger

    def count(self, key: str) -> int:
        return self.show_counts.get(key, 0)

    def increment(self, key: str) -> int:
        self.show_counts[key] = self.count(key) + 1
        _save_json(self.store, SHOW_COUNTS_KEY, self.show_counts)
        return self.show_counts[key]

    def mark_acted_upon(self, key: str) -> None:
        self.acted_upon.add(key)
        _save_json(self.store, ACTED_UPON_KEY, sorted(self.acted_upon))

    def is_acted_upon(self, key: str) -> bool:
        return key in self.acted_upon

    def needs_reset(self, today: date) -> bool:
        return self.last_reset != today

    def reset(self, today: date) -> None:
        """Clear counts and acted-upon keys and stamp `today`."""
        self.show_counts.clear()
        self.acted_upon.clear()
        self.last_reset = today
        _save_json(self.store, SHOW_COUNTS_KEY, self.show_counts)
        _save_json(self.store, ACTED_UPON_KEY, [])
        _save_json(self.store, LAST_RESET_KEY, today.isoformat())


# ---------------------------------------------------------------------------
# Recency ledger
# ---------------------------------------------------------------------------


class RecencyLedger:
    """Bounded FIFO of recently shown tip ids (oldest first)."""

    def __init__(self, store: KeyValueStore, capacity: int | None = None):
        self.store = store
        self.capacity = capacity if capacity is not None else settings.cards_recent_tip_capacity
        self.recent_tip_ids: list[int] = []

    @classmethod
    def load(cls, store: KeyValueStore, capacity: int | None = None) -> RecencyLedger:
        ledger = cls(store, capacity)
        ids = _load_json(store, RECENT_TIPS_KEY)
        if isinstance(ids, list):
            ledger.recent_tip_ids = [i for i in ids if isinstance(i, int) and not isinstance(i, bool)]
            ledger._trim()
        return ledger

    def _trim(self) -> None:
        overflow = len(self.recent_tip_ids) - self.capacity
        if overflow > 0:
            del self.recent_tip_ids[:overflow]

    def record(self, tip_id: int) -> None:
        self.recent_tip_ids.append(tip_id)
        self._trim()
        _save_json(self.store, RECENT_TIPS_KEY, self.recent_tip_ids)

    def most_recent(self, n: int) -> list[int]:
        if n <= 0:
            return []
        return self.recent_tip_ids[-n:]

    def __contains__(self, tip_id: object) -> bool:
        return tip_id in self.recent_tip_ids

    def __len__(self) -> int:
        return len(self.recent_tip_ids)
