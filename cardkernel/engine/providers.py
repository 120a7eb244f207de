"""External state providers consumed (read-only) by the card engine.

The engine owns none of this state. Every query must succeed: a provider that
has nothing to report answers with a safe default (zero streak, no event,
reachable device) instead of raising.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Protocol

from cardkernel.engine.cards import MilestoneEvent


class StreakProvider(Protocol):
    @property
    def current_streak_length(self) -> int: ...

    @property
    def longest_streak_length(self) -> int: ...


class ShieldProvider(Protocol):
    @property
    def was_auto_deployed_overnight(self) -> bool: ...

    @property
    def available_shield_count(self) -> int: ...

    @property
    def next_refill_date_label(self) -> str: ...


class MilestoneProvider(Protocol):
    def pop_next_tier2_event(self) -> MilestoneEvent | None:
        """Return and remove the first pending tier 2 event (destructive)."""
        ...


class UsageProvider(Protocol):
    def remaining_free_uses(self, feature_id: str) -> int | None: ...

    def is_companion_device_reachable(self) -> bool: ...


# ---------------------------------------------------------------------------
# Static implementations (safe defaults, also used as test fixtures)
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class StaticStreak:
    current_streak_length: int = 0
    longest_streak_length: int = 0


@dataclass(slots=True)
class StaticShield:
    was_auto_deployed_overnight: bool = False
    available_shield_count: int = 0
    next_refill_date_label: str = "—"


class QueueMilestones:
    """FIFO of pending tier 2 milestone events."""

    def __init__(self, events: Iterable[MilestoneEvent] = ()):
        self._pending: deque[MilestoneEvent] = deque(e for e in events if e.tier == 2)

    def push(self, event: MilestoneEvent) -> None:
        if event.tier == 2:
            self._pending.append(event)

    def pop_next_tier2_event(self) -> MilestoneEvent | None:
        if not self._pending:
            return None
        return self._pending.popleft()

    def __len__(self) -> int:
        return len(self._pending)


@dataclass(slots=True)
class StaticUsage:
    free_uses: dict[str, int] = field(default_factory=dict)
    companion_reachable: bool = True

    def remaining_free_uses(self, feature_id: str) -> int | None:
        return self.free_uses.get(feature_id)

    def is_companion_device_reachable(self) -> bool:
        return self.companion_reachable
