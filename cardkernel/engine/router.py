"""Card HTTP router — evaluation, acted-upon, resets, tips."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from cardkernel.auth import require_client_key
from cardkernel.engine.engine import CardEngine
from cardkernel.engine.models import (
    ActedUponRequest,
    CardView,
    EvaluateRequest,
    LedgerView,
    TipView,
    card_view,
    ledger_view,
    tip_view,
)
from cardkernel.engine.tips import get_tip, list_tips

router = APIRouter(prefix="/cards", tags=["cards"])


def get_engine(request: Request) -> CardEngine:
    """The shared engine built at startup (see cardkernel.main)."""
    return request.app.state.card_engine


# ---------------------------------------------------------------------------
# /cards/evaluate, /cards/refresh, /cards/current
# ---------------------------------------------------------------------------


@router.post("/evaluate", response_model=CardView)
def evaluate(
    body: EvaluateRequest,
    engine: CardEngine = Depends(get_engine),
    _: None = Depends(require_client_key),
) -> CardView:
    return card_view(engine.evaluate(body.daily_goal, body.current_steps))


@router.post("/refresh", response_model=CardView)
def refresh(
    body: EvaluateRequest,
    engine: CardEngine = Depends(get_engine),
    _: None = Depends(require_client_key),
) -> CardView:
    return card_view(engine.refresh(body.daily_goal, body.current_steps))


@router.get("/current", response_model=CardView)
def current(
    engine: CardEngine = Depends(get_engine),
    _: None = Depends(require_client_key),
) -> CardView:
    return card_view(engine.current_card)


# ---------------------------------------------------------------------------
# /cards/acted, /cards/reset, /cards/ledger
# ---------------------------------------------------------------------------


@router.post("/acted", response_model=LedgerView)
def acted(
    body: ActedUponRequest,
    engine: CardEngine = Depends(get_engine),
    _: None = Depends(require_client_key),
) -> LedgerView:
    engine.mark_key_acted_upon(body.key)
    return ledger_view(engine.ledger, engine.recency)


@router.post("/reset", response_model=LedgerView)
def reset(
    engine: CardEngine = Depends(get_engine),
    _: None = Depends(require_client_key),
) -> LedgerView:
    engine.perform_daily_reset()
    return ledger_view(engine.ledger, engine.recency)


@router.get("/ledger", response_model=LedgerView)
def ledger(
    engine: CardEngine = Depends(get_engine),
    _: None = Depends(require_client_key),
) -> LedgerView:
    return ledger_view(engine.ledger, engine.recency)


# ---------------------------------------------------------------------------
# /cards/tips, /cards/session-tip
# ---------------------------------------------------------------------------


@router.post("/session-tip/refresh", response_model=TipView)
def session_tip_refresh(
    engine: CardEngine = Depends(get_engine),
    _: None = Depends(require_client_key),
) -> TipView:
    return tip_view(engine.refresh_session_tip())


@router.get("/tips", response_model=list[TipView])
def tips_list() -> list[TipView]:
    return [tip_view(t) for t in list_tips()]


@router.get("/tips/{tip_id}", response_model=TipView)
def tip_detail(tip_id: int) -> TipView:
    tip = get_tip(tip_id)
    if tip is None:
        raise HTTPException(status_code=404, detail=f"Unknown tip: {tip_id}")
    return tip_view(tip)
