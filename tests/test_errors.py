"""
Tests for error types and the Result wrapper.
"""

import pytest

from pitchcraft import Note
from pitchcraft.errors import (
    InvalidAccidental,
    InvalidBaseNote,
    InvalidIntervalDistance,
    InvalidNoteName,
    InvalidOctave,
    MusicTheoryError,
    Result,
    TypeMismatch,
)


class TestErrorHierarchy:
    """All library errors share one base class."""

    @pytest.mark.parametrize(
        "error",
        [
            InvalidNoteName,
            InvalidOctave,
            InvalidAccidental,
            InvalidIntervalDistance,
            InvalidBaseNote,
            TypeMismatch,
        ],
    )
    def test_subclass_of_base(self, error: type[Exception]) -> None:
        assert issubclass(error, MusicTheoryError)
        assert issubclass(error, ValueError)

    def test_type_mismatch_is_type_error(self) -> None:
        assert issubclass(TypeMismatch, TypeError)

    def test_message(self) -> None:
        with pytest.raises(InvalidOctave, match="Invalid octave: 10"):
            Note("C10")
        with pytest.raises(InvalidNoteName, match="'H4'"):
            Note("H4")


class TestResult:
    """Tests for Result."""

    def test_success(self) -> None:
        result = Result.success(3)
        assert result.ok
        assert result.unwrap() == 3
        assert result.value_or(0) == 3

    def test_failure(self) -> None:
        error = InvalidOctave("bad octave")
        result: Result[int] = Result.failure(error)
        assert not result.ok
        assert result.error is error
        assert result.value_or(0) == 0
        with pytest.raises(InvalidOctave):
            result.unwrap()

    def test_frozen(self) -> None:
        result = Result.success(1)
        with pytest.raises(AttributeError):
            result.value = 2  # type: ignore[misc]
