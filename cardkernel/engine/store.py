"""Durable key-value store boundary."""

from __future__ import annotations

from typing import Protocol

from sqlalchemy import Engine, delete, insert, select

from cardkernel.db import card_state


class KeyValueStore(Protocol):
    def get(self, key: str) -> bytes | None: ...

    def set(self, key: str, value: bytes) -> None: ...


class MemoryStore:
    """Dict-backed store. Nothing survives the process."""

    def __init__(self, data: dict[str, bytes] | None = None):
        self.data: dict[str, bytes] = dict(data or {})

    def get(self, key: str) -> bytes | None:
        return self.data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self.data[key] = value


class SqlKeyValueStore:
    """card_state table via SQLAlchemy Core.

    Reads return None when the key is absent. Writes replace the row in one
    transaction and may raise SQLAlchemyError; callers decide how to degrade.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def get(self, key: str) -> bytes | None:
        with self.engine.connect() as conn:
            row = conn.execute(select(card_state.c.value).where(card_state.c.key == key)).fetchone()
        if row is None:
            return None
        return bytes(row[0])

    def set(self, key: str, value: bytes) -> None:
        with self.engine.begin() as conn:
            conn.execute(delete(card_state).where(card_state.c.key == key))
            conn.execute(insert(card_state).values(key=key, value=value))
