"""Database module for roster persistence."""

from roster.db.models import Base, Player
from roster.db.session import (
    build_engine,
    build_session_factory,
    create_tables,
    drop_tables,
    session_scope,
)

__all__ = [
    "Base",
    "Player",
    "build_engine",
    "build_session_factory",
    "create_tables",
    "drop_tables",
    "session_scope",
]
