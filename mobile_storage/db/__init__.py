"""Database helpers (engine/session export)."""

from .session import Base, build_engine, get_session, is_in_memory_url

__all__ = ["Base", "build_engine", "get_session", "is_in_memory_url"]
