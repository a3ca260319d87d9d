"""Service layer for business logic."""

from roster.services.player import PlayerService

__all__ = [
    "PlayerService",
]
