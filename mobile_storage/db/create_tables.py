"""Build the ``mobiles`` table on an engine, or on the configured DATABASE_URL from the command line."""
from __future__ import annotations

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from mobile_storage.core.config import get_settings

from .session import Base, build_engine, is_in_memory_url
from . import models  # noqa: F401  # ensure models are imported for metadata


def create_all(engine: Engine | None = None) -> Engine:
    """Create missing tables on ``engine`` (a new configured engine when omitted) and return it."""
    engine = engine if engine is not None else build_engine()
    Base.metadata.create_all(bind=engine)
    return engine


def main() -> None:
    url = get_settings().database_url
    if url and is_in_memory_url(url):
        raise SystemExit("DATABASE_URL points at an in-memory database; the schema would vanish on exit.")
    engine = build_engine(url)
    try:
        create_all(engine)
        tables = ", ".join(sorted(inspect(engine).get_table_names()))
        print(f"Mobile tables ready on {engine.url.render_as_string(hide_password=True)}: {tables}")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create mobile tables: {exc}") from exc
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
