"""Card selection engine — picks exactly one card per request.

Ladder, first eligible wins:

  Tier 1 (urgent)      streakAtRisk → shieldDeployed → welcomeBack
  Tier 2 (contextual)  almostThere → milestoneCelebration → tryFeatureX →
                       trySyncDevice → newWeekNewGoal → weekendReminder →
                       eveningNudge
  Tier 3 (fallback)    the session tip, always available

Tier 1 and 2 candidates pass the shared gate: not acted upon today and shown
fewer times than their daily cap. Declaration order breaks every tie.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Iterator

from cardkernel.config import settings
from cardkernel.engine.cards import (
    AlmostThere,
    Card,
    EveningNudge,
    MilestoneCelebration,
    NewWeekNewGoal,
    ShieldDeployed,
    StreakAtRisk,
    Tip,
    TryFeatureX,
    TrySyncDevice,
    WeekendReminder,
    WelcomeBack,
    key_of,
    max_shows_per_day,
)
from cardkernel.engine.clock import Clock, SystemClock, is_monday, is_weekend, local_date
from cardkernel.engine.cooldown import CooldownGate
from cardkernel.engine.ledgers import FrequencyLedger, RecencyLedger
from cardkernel.engine.providers import (
    MilestoneProvider,
    QueueMilestones,
    ShieldProvider,
    StaticShield,
    StaticStreak,
    StaticUsage,
    StreakProvider,
    UsageProvider,
)
from cardkernel.engine.store import KeyValueStore, MemoryStore
from cardkernel.engine.tip_selector import SessionTipSelector
from cardkernel.engine.tips import TIPS, TipRecord

logger = logging.getLogger(__name__)


class CardEngine:
    """One shared instance per process; every public call holds `self._lock`.

    With the default `keep_current_card=False` a card that reached its daily
    cap is skipped even while it is on screen, so after each cooldown the
    ladder moves on (a shown almostThere becomes eveningNudge, then a tip).
    `keep_current_card=True` keeps the displayed card until it is acted upon.
    """

    def __init__(
        self,
        streak: StreakProvider | None = None,
        shield: ShieldProvider | None = None,
        milestones: MilestoneProvider | None = None,
        usage: UsageProvider | None = None,
        store: KeyValueStore | None = None,
        clock: Clock | None = None,
        rng: random.Random | None = None,
        cooldown_seconds: float | None = None,
        keep_current_card: bool = False,
    ):
        self.streak = streak or StaticStreak()
        self.shield = shield or StaticShield()
        self.milestones = milestones or QueueMilestones()
        self.usage = usage or StaticUsage()
        self.store = store if store is not None else MemoryStore()
        self.clock = clock or SystemClock()
        self.keep_current_card = keep_current_card

        self.ledger = FrequencyLedger.load(self.store)
        self.recency = RecencyLedger.load(self.store)
        self.tips = SessionTipSelector(self.recency, rng=rng)
        self.cooldown = CooldownGate(self.clock, cooldown_seconds)

        self._lock = threading.RLock()
        self._current: Card = Tip(TIPS[0])

        self.check_daily_reset()
        self.tips.refresh_session_tip()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def current_card(self) -> Card:
        return self._current

    def evaluate(self, daily_goal: int, current_steps: int) -> Card:
        """Select the card to show. Inside the cooldown window the cached card is returned."""
        with self._lock:
            if not self.cooldown.should_evaluate():
                logger.debug("Evaluation skipped (cooldown)")
                return self._current
            self.cooldown.mark()

            self.check_daily_reset()

            result = self._select(max(daily_goal, 0), max(current_steps, 0))

            if key_of(result) != key_of(self._current):
                logger.debug("New card: %s", key_of(result))
                self.increment_show_count(result)

            self._current = result
            return result

    def refresh(self, daily_goal: int, current_steps: int) -> Card:
        """Same as evaluate, but always re-runs the ladder."""
        with self._lock:
            self.cooldown.open()
            return self.evaluate(daily_goal, current_steps)

    def mark_acted_upon(self, card: Card) -> None:
        self.mark_key_acted_upon(key_of(card))

    def mark_key_acted_upon(self, key: str) -> None:
        with self._lock:
            self.check_daily_reset()
            self.ledger.mark_acted_upon(key)

    def increment_show_count(self, card: Card) -> int:
        with self._lock:
            self.check_daily_reset()
            return self.ledger.increment(key_of(card))

    def check_daily_reset(self) -> bool:
        """Reset counters when the local date moved since the last reset."""
        with self._lock:
            if self.ledger.needs_reset(local_date(self.clock)):
                self.perform_daily_reset()
                return True
            return False

    def perform_daily_reset(self) -> None:
        with self._lock:
            today = local_date(self.clock)
            self.ledger.reset(today)
            logger.info("Daily card counters reset for %s", today.isoformat())

    def refresh_session_tip(self) -> TipRecord:
        with self._lock:
            return self.tips.refresh_session_tip()

    # ------------------------------------------------------------------
    # Ladder
    # ------------------------------------------------------------------

    def can_show_today(self, card: Card) -> bool:
        key = key_of(card)
        if self.ledger.is_acted_upon(key):
            return False
        if self.keep_current_card and key == key_of(self._current):
            return True
        cap = max_shows_per_day(card, settings.cards_max_shows_per_day, settings.cards_tip_max_shows_per_day)
        return self.ledger.count(key) < cap

    def _select(self, daily_goal: int, current_steps: int) -> Card:
        for card in self._candidates(daily_goal, current_steps):
            if self.can_show_today(card):
                return card
        return Tip(self.tips.current())

    def _candidates(self, daily_goal: int, current_steps: int) -> Iterator[Card]:
        """Yield tier 1 then tier 2 candidates whose trigger holds, in ladder order.

        The milestone queue is popped only when the ladder reaches that rung.
        """
        now = self.clock.now()
        hour = now.hour
        goal_met = current_steps >= daily_goal
        remaining = max(daily_goal - current_steps, 0)
        evening = hour >= settings.cards_evening_hour

        # Tier 1
        if hour >= settings.cards_streak_at_risk_hour and not goal_met and self.streak.current_streak_length >= 1:
            yield StreakAtRisk(steps_remaining=remaining)

        if self.shield.was_auto_deployed_overnight:
            yield ShieldDeployed(
                remaining_shields=self.shield.available_shield_count,
                next_refill_label=self.shield.next_refill_date_label,
            )

        if self.streak.current_streak_length == 0 and self.streak.longest_streak_length > 0:
            yield WelcomeBack()

        # Tier 2
        if evening and not goal_met and daily_goal > 0:
            if current_steps / daily_goal >= settings.cards_almost_there_ratio:
                yield AlmostThere(steps_remaining=remaining)

        event = self.milestones.pop_next_tier2_event()
        if event is not None:
            yield MilestoneCelebration(event=event)

        free = self.usage.remaining_free_uses(settings.cards_gated_feature_id)
        if free is not None and free > 0:
            yield TryFeatureX()

        if not self.usage.is_companion_device_reachable():
            yield TrySyncDevice()

        if is_monday(now):
            yield NewWeekNewGoal()

        if is_weekend(now):
            yield WeekendReminder()

        if evening and not goal_met and daily_goal > 0:
            yield EveningNudge(steps_remaining=remaining)
