"""Card variants — the closed set of prompts the engine can select.

Each case is a frozen dataclass carrying only its render payload. Identity for
frequency accounting (`key_of`) and priority class (`tier_of`) are fixed per
case and never derived from payload values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from cardkernel.engine.tips import TipRecord


@dataclass(frozen=True, slots=True)
class MilestoneEvent:
    id: str  # e.g. "streak_30"
    tier: int  # 1 fullscreen, 2 card, 3 toast
    category: str  # "streak" | "steps" | "walks"
    headline: str = ""
    subtitle: str = ""
    symbol: str = ""


# ---------------------------------------------------------------------------
# Tier 1 — urgent
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class StreakAtRisk:
    steps_remaining: int


@dataclass(frozen=True, slots=True)
class ShieldDeployed:
    remaining_shields: int
    next_refill_label: str


@dataclass(frozen=True, slots=True)
class WelcomeBack:
    pass


# ---------------------------------------------------------------------------
# Tier 2 — contextual
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class AlmostThere:
    steps_remaining: int


@dataclass(frozen=True, slots=True)
class MilestoneCelebration:
    event: MilestoneEvent


@dataclass(frozen=True, slots=True)
class TryFeatureX:
    pass


@dataclass(frozen=True, slots=True)
class TrySyncDevice:
    pass


@dataclass(frozen=True, slots=True)
class NewWeekNewGoal:
    pass


@dataclass(frozen=True, slots=True)
class WeekendReminder:
    pass


@dataclass(frozen=True, slots=True)
class EveningNudge:
    steps_remaining: int


# ---------------------------------------------------------------------------
# Tier 3 — fallback
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Tip:
    tip: TipRecord


Card = Union[
    StreakAtRisk,
    ShieldDeployed,
    WelcomeBack,
    AlmostThere,
    MilestoneCelebration,
    TryFeatureX,
    TrySyncDevice,
    NewWeekNewGoal,
    WeekendReminder,
    EveningNudge,
    Tip,
]


def key_of(card: Card) -> str:
    """Stable, payload-independent identity used for frequency accounting."""
    match card:
        case StreakAtRisk():
            return "streakAtRisk"
        case ShieldDeployed():
            return "shieldDeployed"
        case WelcomeBack():
            return "welcomeBack"
        case AlmostThere():
            return "almostThere"
        case MilestoneCelebration(event=event):
            return f"milestoneCelebration_{event.id}"
        case TryFeatureX():
            return "tryFeatureX"
        case TrySyncDevice():
            return "trySyncDevice"
        case NewWeekNewGoal():
            return "newWeekNewGoal"
        case WeekendReminder():
            return "weekendReminder"
        case EveningNudge():
            return "eveningNudge"
        case Tip(tip=tip):
            return f"tip_{tip.id}"
    raise TypeError(f"Not a card: {card!r}")


def tier_of(card: Card) -> int:
    """Priority class: 1 urgent, 2 contextual, 3 fallback."""
    match card:
        case StreakAtRisk() | ShieldDeployed() | WelcomeBack():
            return 1
        case (
            AlmostThere()
            | MilestoneCelebration()
            | TryFeatureX()
            | TrySyncDevice()
            | NewWeekNewGoal()
            | WeekendReminder()
            | EveningNudge()
        ):
            return 2
        case Tip():
            return 3
    raise TypeError(f"Not a card: {card!r}")


def kind_of(card: Card) -> str:
    """Case name without payload suffix (e.g. "milestoneCelebration", "tip")."""
    if isinstance(card, MilestoneCelebration):
        return "milestoneCelebration"
    if isinstance(card, Tip):
        return "tip"
    return key_of(card)


def max_shows_per_day(card: Card, capped: int = 1, tip_cap: int = 999) -> int:
    """Daily show cap: tips use `tip_cap`, every other case `capped`."""
    if tier_of(card) == 3:
        return tip_cap
    return capped
