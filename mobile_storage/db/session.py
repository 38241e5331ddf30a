"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, Session
from sqlalchemy.pool import StaticPool

from mobile_storage.core.config import get_settings

Base = declarative_base()


def is_in_memory_url(url: str) -> bool:
    """True for SQLite URLs whose database lives only inside its connection."""
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


def build_engine(url: str | None = None, *, echo: bool | None = None) -> Engine:
    """Create a new engine; each call yields a separate in-memory database for SQLite memory URLs."""
    settings = get_settings()
    url = (settings.database_url if url is None else url).strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    echo = settings.sql_echo if echo is None else echo
    if is_in_memory_url(url):
        # Every connection would get its own empty database, so pin one.
        return create_engine(
            url,
            future=True,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_engine(url, future=True, echo=echo, pool_pre_ping=True)


@contextmanager
def get_session(engine: Engine) -> Iterator[Session]:
    session = Session(bind=engine, autoflush=False, future=True)
    try:
        yield session
    finally:
        session.close()
