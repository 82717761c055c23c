"""Core enumerations for the move-generation domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(Enum):
    """Side color. Unordered; only compared for equality."""

    BLACK = "black"
    WHITE = "white"

    @property
    def opposite(self) -> Color:
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    def __str__(self) -> str:
        return self.value


class PieceType(IntEnum):
    """Closed set of piece kinds."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class Direction(Enum):
    """Compass direction of a single step.

    ``Up`` is towards increasing row (White's forward), ``Right`` towards
    increasing column. :meth:`~chessmoves.core.types.Square.step` applies one.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    UP_LEFT = "up_left"
    UP_RIGHT = "up_right"
    DOWN_LEFT = "down_left"
    DOWN_RIGHT = "down_right"


ORTHOGONAL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
)
DIAGONAL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP_LEFT,
    Direction.UP_RIGHT,
    Direction.DOWN_RIGHT,
    Direction.DOWN_LEFT,
)
ALL_DIRECTIONS: tuple[Direction, ...] = ORTHOGONAL_DIRECTIONS + DIAGONAL_DIRECTIONS
