"""
Error types and the Result wrapper.

Constructors raise one of the MusicTheoryError subclasses below. Callers that
would rather branch than catch use the ``try_*`` helpers, which return a
Result instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class MusicTheoryError(ValueError):
    """Base class for every error raised by pitchcraft."""


class InvalidNoteName(MusicTheoryError):
    """The string does not match the note-name grammar."""


class InvalidOctave(MusicTheoryError):
    """The octave is outside 0-9."""


class InvalidAccidental(MusicTheoryError):
    """The accidental mixes symbols or uses an unknown one."""


class InvalidIntervalDistance(MusicTheoryError):
    """The distance has no entry in the named-interval table."""


class InvalidBaseNote(MusicTheoryError):
    """A pitch-class lookup missed."""


class TypeMismatch(MusicTheoryError, TypeError):
    """An argument that should be a Note is something else."""


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a fallible operation.

    Exactly one of ``value`` and ``error`` is set.

    Examples:
        Result.success(Note("C4")).ok  -> True
        Result.failure(InvalidOctave("...")).value_or(None)  -> None
    """

    value: T | None = None
    error: MusicTheoryError | None = None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: MusicTheoryError) -> Result[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        return default if self.error is not None else self.value  # type: ignore[return-value]
