"""Result type for consistent error handling."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Category of a failed result, used to pick the response status."""

    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    STORE_FAILURE = "store_failure"


@dataclass(frozen=True)
class Result(Generic[T]):
    """A Result type for consistent error handling.

    Use Result.ok(value) for success, Result.err(message, kind) for errors.

    Example:
        def get_player(riot_id: str) -> Result[Player]:
            player = repo.find_by_key(riot_id)
            if player is None:
                return Result.err("Player not found", ErrorKind.NOT_FOUND)
            return Result.ok(player)

        result = get_player("Jett-001")
        if result.is_err:
            return error_response(result)
        player = result.unwrap()
    """

    _value: T | None = None
    _error: str | None = None
    _kind: ErrorKind | None = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        """Create a successful result with a value."""
        return cls(_value=value)

    @classmethod
    def err(cls, error: str, kind: ErrorKind = ErrorKind.NOT_FOUND) -> "Result[T]":
        """Create an error result with a message and category."""
        return cls(_error=error, _kind=kind)

    @property
    def is_ok(self) -> bool:
        """Check if this result is successful."""
        return self._error is None

    @property
    def is_err(self) -> bool:
        """Check if this result is an error."""
        return self._error is not None

    @property
    def error(self) -> str | None:
        """Get the error message, or None if successful."""
        return self._error

    @property
    def kind(self) -> ErrorKind | None:
        """Get the error category, or None if successful."""
        return self._kind

    def unwrap(self) -> T:
        """Get the value, or raise ValueError if this is an error.

        Raises:
            ValueError: If this result is an error.
        """
        if self._error is not None:
            raise ValueError(self._error)
        return self._value  # type: ignore

    def to_dict(self) -> dict[str, Any]:
        """Convert an error result to a response body: {"error": message}.

        Raises:
            ValueError: If this result is successful.
        """
        if self._error is None:
            raise ValueError("Cannot build an error body from a successful result")
        return {"error": self._error}
