import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cardkernel.config import settings
from cardkernel.db import make_engine
from cardkernel.engine.clock import SystemClock
from cardkernel.engine.engine import CardEngine
from cardkernel.engine.router import router as cards_router
from cardkernel.engine.store import SqlKeyValueStore

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if getattr(app.state, "card_engine", None) is None:
        store = SqlKeyValueStore(make_engine())
        app.state.card_engine = CardEngine(store=store, clock=SystemClock())
    yield


app = FastAPI(title="CardKernel", version="0.1.0", lifespan=lifespan)
app.include_router(cards_router)


@app.get("/")
async def root() -> dict:
    return {
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "cards": {
            "evaluate": "/cards/evaluate",
            "refresh": "/cards/refresh",
            "current": "/cards/current",
            "acted": "/cards/acted",
            "reset": "/cards/reset",
            "ledger": "/cards/ledger",
            "session_tip_refresh": "/cards/session-tip/refresh",
            "tips": "/cards/tips",
            "tips_detail": "/cards/tips/{id}",
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
