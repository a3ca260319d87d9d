"""Database engine and schema management."""

import logging
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from roster.config import Settings
from roster.db.models import Base

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> Engine:
    """Create the database engine for the configured URL."""
    connect_args = {}
    if settings.is_sqlite:
        # Request workers run on a thread pool
        connect_args["check_same_thread"] = False
    return create_engine(
        settings.database_url,
        echo=settings.echo_sql,
        future=True,
        pool_pre_ping=not settings.is_sqlite,
        connect_args=connect_args,
    )


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a session factory bound to an engine."""
    return sessionmaker(engine, class_=Session, expire_on_commit=False)


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """Open a session that commits on success and rolls back on error."""
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def create_tables(engine: Engine) -> None:
    """Create all database tables."""
    Base.metadata.create_all(engine)
    logger.debug("Tables created (if missing)")


def drop_tables(engine: Engine) -> None:
    """Drop all database tables (use with caution!)."""
    Base.metadata.drop_all(engine)
