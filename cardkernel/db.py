from sqlalchemy import Column, Engine, LargeBinary, MetaData, String, Table, create_engine

from cardkernel.config import settings

_raw_url = settings.database_url

if _raw_url.startswith("postgres://"):
    _raw_url = _raw_url.replace("postgres://", "postgresql://", 1)

metadata = MetaData()

# One row per persisted engine key (show counts, acted-upon, last reset, recent tips)
card_state = Table(
    "card_state",
    metadata,
    Column("key", String(128), primary_key=True),
    Column("value", LargeBinary, nullable=False),
)


def make_engine(url: str = _raw_url) -> Engine:
    """Create an engine and make sure the card_state table exists."""
    eng = create_engine(url, pool_pre_ping=True)
    metadata.create_all(eng)
    return eng
