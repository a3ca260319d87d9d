"""Server module - FastAPI HTTP server."""

from roster.server.app import app
from roster.server.handlers import PlayerHandler

__all__ = ["app", "PlayerHandler"]
