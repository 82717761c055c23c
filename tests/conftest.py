"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessmoves.core.board import Board
from chessmoves.core.types import Square, make_square


@pytest.fixture
def empty_board() -> Board:
    return Board.empty()


@pytest.fixture
def center() -> Square:
    """The square (4, 4)."""
    return make_square(4, 4)
