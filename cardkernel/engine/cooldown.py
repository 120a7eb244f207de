"""Suppresses ladder re-runs within a short window."""

from __future__ import annotations

from datetime import datetime

from cardkernel.config import settings
from cardkernel.engine.clock import Clock


class CooldownGate:
    def __init__(self, clock: Clock, seconds: float | None = None):
        self.clock = clock
        self.seconds = seconds if seconds is not None else settings.cards_evaluation_cooldown_seconds
        self.last_evaluation: datetime | None = None

    def should_evaluate(self) -> bool:
        if self.last_evaluation is None:
            return True
        elapsed = (self.clock.now() - self.last_evaluation).total_seconds()
        return elapsed >= self.seconds

    def mark(self) -> None:
        self.last_evaluation = self.clock.now()

    def open(self) -> None:
        """Forget the last evaluation so the next check passes."""
        self.last_evaluation = None
