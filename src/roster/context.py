"""Application context - central container for shared dependencies."""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from roster.config import Settings
from roster.core.merge import MergePolicy
from roster.db.session import build_engine, build_session_factory, session_scope
from roster.services import PlayerService

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Container for application-wide dependencies.

    Initialize once at app startup via create_context() and hand it to every
    request handler. The engine's pool is shared by all request workers.
    """

    settings: Settings
    engine: Engine
    session_factory: sessionmaker[Session]

    @property
    def merge_policy(self) -> MergePolicy:
        return self.settings.merge_policy

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Get a database session as a context manager."""
        with session_scope(self.session_factory) as session:
            yield session

    @contextmanager
    def players(self) -> Generator[PlayerService, None, None]:
        """Get a player service bound to a fresh session."""
        with self.session() as session:
            yield PlayerService(session, merge_policy=self.merge_policy)

    def dispose(self) -> None:
        """Release pooled connections."""
        self.engine.dispose()


def create_context(settings: Settings | None = None) -> AppContext:
    """Create and return a fully initialized application context."""
    logger.info("Creating application context")

    if settings is None:
        from roster.config import get_settings

        settings = get_settings()

    engine = build_engine(settings)
    logger.debug(f"Database engine created: {engine.url!r}")

    session_factory = build_session_factory(engine)

    logger.info(f"Application context created (merge_policy={settings.merge_policy.value})")

    return AppContext(
        settings=settings,
        engine=engine,
        session_factory=session_factory,
    )
