"""Tests for the persisted frequency / recency ledgers."""

from __future__ import annotations

import json
from datetime import date

from cardkernel.engine.ledgers import (
    ACTED_UPON_KEY,
    LAST_RESET_KEY,
    RECENT_TIPS_KEY,
    SHOW_COUNTS_KEY,
    FrequencyLedger,
    RecencyLedger,
)
from cardkernel.engine.store import MemoryStore


def _stored(store: MemoryStore, key: str):
    return json.loads(store.data[key].decode("utf-8"))


class TestFrequencyLedger:
    def test_fresh_store(self):
        ledger = FrequencyLedger.load(MemoryStore())
        assert ledger.show_counts == {}
        assert ledger.acted_upon == set()
        assert ledger.last_reset is None
        assert ledger.needs_reset(date(2026, 2, 11))

    def test_increment_persists(self):
        store = MemoryStore()
        ledger = FrequencyLedger.load(store)
        assert ledger.increment("welcomeBack") == 1
        assert ledger.increment("welcomeBack") == 2
        assert _stored(store, SHOW_COUNTS_KEY) == {"welcomeBack": 2}

    def test_acted_upon_persists(self):
        store = MemoryStore()
        ledger = FrequencyLedger.load(store)
        ledger.mark_acted_upon("welcomeBack")
        assert ledger.is_acted_upon("welcomeBack")
        assert _stored(store, ACTED_UPON_KEY) == ["welcomeBack"]

    def test_reload(self):
        store = MemoryStore()
        ledger = FrequencyLedger.load(store)
        ledger.reset(date(2026, 2, 11))
        ledger.increment("almostThere")
        ledger.mark_acted_upon("trySyncDevice")

        again = FrequencyLedger.load(store)
        assert again.show_counts == {"almostThere": 1}
        assert again.acted_upon == {"trySyncDevice"}
        assert again.last_reset == date(2026, 2, 11)
        assert not again.needs_reset(date(2026, 2, 11))

    def test_reset_clears_and_stamps(self):
        store = MemoryStore()
        ledger = FrequencyLedger.load(store)
        ledger.increment("almostThere")
        ledger.mark_acted_upon("almostThere")
        ledger.reset(date(2026, 2, 12))
        assert ledger.show_counts == {}
        assert ledger.acted_upon == set()
        assert ledger.last_reset == date(2026, 2, 12)
        assert _stored(store, LAST_RESET_KEY) == "2026-02-12"
        assert _stored(store, SHOW_COUNTS_KEY) == {}

    def test_corrupt_values_ignored(self):
        store = MemoryStore(
            {
                SHOW_COUNTS_KEY: b"{not json",
                ACTED_UPON_KEY: b'"a string, not a list"',
                LAST_RESET_KEY: b'"yesterday"',
            }
        )
        ledger = FrequencyLedger.load(store)
        assert ledger.show_counts == {}
        assert ledger.acted_upon == set()
        assert ledger.last_reset is None

    def test_non_integer_counts_dropped(self):
        store = MemoryStore({SHOW_COUNTS_KEY: b'{"a": 2, "b": "x", "c": true}'})
        assert FrequencyLedger.load(store).show_counts == {"a": 2}

    def test_failing_store_keeps_memory(self, failing_store):
        store = failing_store
        ledger = FrequencyLedger.load(store)
        assert ledger.increment("welcomeBack") == 1
        ledger.mark_acted_upon("welcomeBack")
        assert ledger.count("welcomeBack") == 1
        assert ledger.is_acted_upon("welcomeBack")
        assert store.attempts == 2


class TestRecencyLedger:
    def test_record_and_persist(self):
        store = MemoryStore()
        ledger = RecencyLedger.load(store)
        ledger.record(3)
        ledger.record(7)
        assert ledger.recent_tip_ids == [3, 7]
        assert 7 in ledger
        assert _stored(store, RECENT_TIPS_KEY) == [3, 7]

    def test_evicts_oldest_at_capacity(self):
        ledger = RecencyLedger(MemoryStore(), capacity=25)
        for tip_id in range(1, 31):
            ledger.record(tip_id)
        assert len(ledger) == 25
        assert ledger.recent_tip_ids[0] == 6
        assert ledger.recent_tip_ids[-1] == 30

    def test_load_trims_oversized(self):
        store = MemoryStore({RECENT_TIPS_KEY: json.dumps(list(range(1, 41))).encode()})
        ledger = RecencyLedger.load(store, capacity=25)
        assert ledger.recent_tip_ids == list(range(16, 41))

    def test_most_recent(self):
        ledger = RecencyLedger(MemoryStore())
        for tip_id in (1, 2, 3, 4):
            ledger.record(tip_id)
        assert ledger.most_recent(2) == [3, 4]
        assert ledger.most_recent(10) == [1, 2, 3, 4]
        assert ledger.most_recent(0) == []


class TestForeignStoreErrors:
    def test_frequency_ledger_survives_runtime_errors(self, dropped_connection_store):
        ledger = FrequencyLedger.load(dropped_connection_store)
        assert ledger.show_counts == {}
        assert ledger.increment("welcomeBack") == 1
        ledger.mark_acted_upon("welcomeBack")
        ledger.reset(date(2026, 2, 12))
        assert ledger.last_reset == date(2026, 2, 12)

    def test_recency_ledger_survives_runtime_errors(self, dropped_connection_store):
        ledger = RecencyLedger.load(dropped_connection_store)
        ledger.record(9)
        assert ledger.recent_tip_ids == [9]

    def test_non_bytes_value_ignored(self):
        store = MemoryStore({SHOW_COUNTS_KEY: {"a": 1}})  # type: ignore[dict-item]
        assert FrequencyLedger.load(store).show_counts == {}
