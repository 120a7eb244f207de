"""HTTP contracts for the card engine — Pydantic v2 models."""

from __future__ import annotations

from datetime import date, datetime, timezone

from pydantic import BaseModel, Field

from cardkernel.engine.cards import (
    AlmostThere,
    Card,
    EveningNudge,
    MilestoneCelebration,
    MilestoneEvent,
    ShieldDeployed,
    StreakAtRisk,
    Tip,
    key_of,
    kind_of,
    tier_of,
)
from cardkernel.engine.ledgers import FrequencyLedger, RecencyLedger
from cardkernel.engine.tips import TipRecord


class EvaluateRequest(BaseModel):
    daily_goal: int = Field(ge=0)
    current_steps: int = Field(ge=0)


class ActedUponRequest(BaseModel):
    key: str = Field(min_length=1)


class TipView(BaseModel):
    id: int
    icon: str
    title: str
    subtitle: str


class MilestoneView(BaseModel):
    id: str
    tier: int
    category: str
    headline: str = ""
    subtitle: str = ""
    symbol: str = ""


class CardView(BaseModel):
    """Selected card: key, tier and whichever payload fields the case carries."""

    key: str
    kind: str
    tier: int
    steps_remaining: int | None = None
    remaining_shields: int | None = None
    next_refill_label: str | None = None
    milestone: MilestoneView | None = None
    tip: TipView | None = None
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class LedgerView(BaseModel):
    show_counts: dict[str, int] = Field(default_factory=dict)
    acted_upon: list[str] = Field(default_factory=list)
    last_reset: date | None = None
    recent_tip_ids: list[int] = Field(default_factory=list)


def tip_view(tip: TipRecord) -> TipView:
    return TipView(id=tip.id, icon=tip.icon, title=tip.title, subtitle=tip.subtitle)


def milestone_view(event: MilestoneEvent) -> MilestoneView:
    return MilestoneView(
        id=event.id,
        tier=event.tier,
        category=event.category,
        headline=event.headline,
        subtitle=event.subtitle,
        symbol=event.symbol,
    )


def card_view(card: Card) -> CardView:
    view = CardView(key=key_of(card), kind=kind_of(card), tier=tier_of(card))
    if isinstance(card, (StreakAtRisk, AlmostThere, EveningNudge)):
        view.steps_remaining = card.steps_remaining
    elif isinstance(card, ShieldDeployed):
        view.remaining_shields = card.remaining_shields
        view.next_refill_label = card.next_refill_label
    elif isinstance(card, MilestoneCelebration):
        view.milestone = milestone_view(card.event)
    elif isinstance(card, Tip):
        view.tip = tip_view(card.tip)
    return view


def ledger_view(ledger: FrequencyLedger, recency: RecencyLedger) -> LedgerView:
    return LedgerView(
        show_counts=dict(ledger.show_counts),
        acted_upon=sorted(ledger.acted_upon),
        last_reset=ledger.last_reset,
        recent_tip_ids=list(recency.recent_tip_ids),
    )
