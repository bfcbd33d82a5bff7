"""Tests for the result module."""

from __future__ import annotations

import pytest

from retrosheet_events.domain.errors import RetrievalError
from retrosheet_events.result import Err, Ok, UnwrapError


class TestOk:
    """Tests for the Ok type."""

    def test_is_ok(self) -> None:
        result = Ok([1, 2])
        assert result.is_ok() is True
        assert result.is_err() is False

    def test_unwrap(self) -> None:
        """Ok.unwrap() returns the contained value."""
        assert Ok(42).unwrap() == 42

    def test_unwrap_or(self) -> None:
        """Ok.unwrap_or() ignores the default."""
        assert Ok(42).unwrap_or(0) == 42

    def test_unwrap_err_raises(self) -> None:
        with pytest.raises(UnwrapError, match="Called unwrap_err on Ok value"):
            Ok(42).unwrap_err()

    def test_map(self) -> None:
        assert Ok(21).map(lambda x: x * 2).unwrap() == 42

    def test_empty_list_is_ok(self) -> None:
        result: Ok[list[int]] = Ok([])
        assert result.is_ok()
        assert result.unwrap() == []


class TestErr:
    """Tests for the Err type."""

    def test_is_err(self) -> None:
        result = Err(RetrievalError("boom", year=2023))
        assert result.is_err() is True
        assert result.is_ok() is False

    def test_unwrap_raises(self) -> None:
        """Err.unwrap() raises UnwrapError with the error message."""
        with pytest.raises(UnwrapError, match="boom"):
            Err(RetrievalError("boom")).unwrap()

    def test_unwrap_or(self) -> None:
        assert Err(ValueError("x")).unwrap_or([]) == []

    def test_unwrap_err(self) -> None:
        error = RetrievalError("boom", year=2023)
        assert Err(error).unwrap_err() is error

    def test_map_returns_self(self) -> None:
        result = Err(ValueError("x"))
        assert result.map(lambda x: x) is result
