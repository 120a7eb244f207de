"""Session tip selection: random draw from the catalog, filtered by recency."""

from __future__ import annotations

import logging
import random

from cardkernel.config import settings
from cardkernel.engine.ledgers import RecencyLedger
from cardkernel.engine.tips import TIPS, TipRecord, tip_ids

logger = logging.getLogger(__name__)


class SessionTipSelector:
    """Holds the one tip used for every tier 3 fallback during a session.

    The session tip lives in memory only; each draw is recorded in the
    recency ledger so consecutive sessions avoid short-term repeats.
    """

    def __init__(
        self,
        recency: RecencyLedger,
        rng: random.Random | None = None,
        widen_window: int | None = None,
        catalog: tuple[TipRecord, ...] = TIPS,
    ):
        self.recency = recency
        self.rng = rng or random.Random()
        self.widen_window = widen_window if widen_window is not None else settings.cards_recent_tip_widen_window
        self.catalog = catalog
        self.session_tip: TipRecord | None = None

    def candidate_ids(self) -> list[int]:
        """Catalog ids not recently shown; on exhaustion only the last few stay excluded."""
        all_ids = tip_ids(self.catalog)
        available = [i for i in all_ids if i not in self.recency]
        if available:
            return available
        last_few = set(self.recency.most_recent(self.widen_window))
        return [i for i in all_ids if i not in last_few]

    def pick_random_tip(self) -> TipRecord:
        candidates = self.candidate_ids()
        chosen_id = self.rng.choice(candidates) if candidates else self.catalog[0].id
        self.recency.record(chosen_id)
        tip = next((t for t in self.catalog if t.id == chosen_id), self.catalog[0])
        logger.debug("Picked tip %d (%d candidates)", tip.id, len(candidates))
        return tip

    def refresh_session_tip(self) -> TipRecord:
        self.session_tip = self.pick_random_tip()
        return self.session_tip

    def current(self) -> TipRecord:
        """Session tip, drawing one first if none was picked yet."""
        if self.session_tip is None:
            return self.refresh_session_tip()
        return self.session_tip
