"""Core types shared across layers."""

from roster.core.errors import PlayerExistsError, RosterError, StoreError
from roster.core.result import ErrorKind, Result

__all__ = [
    "Result",
    "ErrorKind",
    "RosterError",
    "PlayerExistsError",
    "StoreError",
]
