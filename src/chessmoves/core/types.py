"""Square value type, the off-board sentinel and directional steps.

Board layout (row-major, row 0 at the bottom)::

    (0,0)=0,  (1,0)=1,  ..., (7,0)=7
    (0,1)=8,  (1,1)=9,  ..., (7,1)=15
    ...
    (0,7)=56, (1,7)=57, ..., (7,7)=63

Every square outside that grid collapses to :data:`OFF_BOARD`, which is a
fixed point of all eight step operations.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from chessmoves.core.enums import Direction

BOARD_SIZE: Final = 8
_SQUARE_COUNT: Final = BOARD_SIZE * BOARD_SIZE


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _crosses_row_boundary(previous: int, following: int) -> bool:
    return previous // BOARD_SIZE != following // BOARD_SIZE


@dataclass(frozen=True, slots=True, repr=False)
class Square:
    """Immutable board location; ``index`` is ``None`` when off-board.

    Build squares with :func:`make_square` rather than from raw indexes.
    """

    index: int | None = None

    def __post_init__(self) -> None:
        if self.index is None:
            return
        if not _is_int(self.index):
            raise TypeError(f"Square index must be an int, got {self.index!r}")
        if not 0 <= self.index < _SQUARE_COUNT:
            raise ValueError(f"Square index out of range: {self.index!r}")

    # ── Decoding ─────────────────────────────────────────────────────────

    @property
    def is_on_board(self) -> bool:
        return self.index is not None

    def to_coordinates(self) -> tuple[int, int] | None:
        """``(x, y)`` for an on-board square, ``None`` for the sentinel."""
        if self.index is None:
            return None
        return self.index % BOARD_SIZE, self.index // BOARD_SIZE

    @property
    def x(self) -> int:
        """Column 0–7."""
        return self._coordinates()[0]

    @property
    def y(self) -> int:
        """Row 0–7."""
        return self._coordinates()[1]

    def _coordinates(self) -> tuple[int, int]:
        xy = self.to_coordinates()
        if xy is None:
            raise ValueError("Off-board square has no coordinates")
        return xy

    # ── Single steps ─────────────────────────────────────────────────────

    def up(self) -> Square:
        if self.index is None:
            return self
        following = self.index + BOARD_SIZE
        if following >= _SQUARE_COUNT:
            return OFF_BOARD
        return Square(following)

    def down(self) -> Square:
        if self.index is None:
            return self
        following = self.index - BOARD_SIZE
        if following < 0:
            return OFF_BOARD
        return Square(following)

    def left(self) -> Square:
        if self.index is None:
            return self
        following = self.index - 1
        if following < 0 or _crosses_row_boundary(self.index, following):
            return OFF_BOARD
        return Square(following)

    def right(self) -> Square:
        if self.index is None:
            return self
        following = self.index + 1
        if following >= _SQUARE_COUNT or _crosses_row_boundary(self.index, following):
            return OFF_BOARD
        return Square(following)

    def up_left(self) -> Square:
        return self.up().left()

    def up_right(self) -> Square:
        return self.up().right()

    def down_left(self) -> Square:
        return self.down().left()

    def down_right(self) -> Square:
        return self.down().right()

    def step(self, direction: Direction) -> Square:
        """One step in *direction*."""
        return _STEPS[direction](self)

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __repr__(self) -> str:
        xy = self.to_coordinates()
        if xy is None:
            return "Square(off-board)"
        return f"Square({xy[0]}, {xy[1]})"


OFF_BOARD: Final = Square()

_STEPS: dict[Direction, Callable[[Square], Square]] = {
    Direction.UP: Square.up,
    Direction.DOWN: Square.down,
    Direction.LEFT: Square.left,
    Direction.RIGHT: Square.right,
    Direction.UP_LEFT: Square.up_left,
    Direction.UP_RIGHT: Square.up_right,
    Direction.DOWN_LEFT: Square.down_left,
    Direction.DOWN_RIGHT: Square.down_right,
}


def make_square(x: int, y: int) -> Square:
    """Square at column *x*, row *y*; anything outside 0–7 is :data:`OFF_BOARD`."""
    if not (_is_int(x) and _is_int(y)):
        raise TypeError(f"Square coordinates must be ints, got {x!r}, {y!r}")
    if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
        return OFF_BOARD
    return Square(y * BOARD_SIZE + x)


def is_on_board(sq: Square) -> bool:
    return sq.is_on_board


def to_coordinates(sq: Square) -> tuple[int, int] | None:
    return sq.to_coordinates()


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(i) for i in range(0, 8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(i) for i in range(8, 16))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(i) for i in range(16, 24))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(i) for i in range(24, 32))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(i) for i in range(32, 40))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(i) for i in range(40, 48))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(i) for i in range(48, 56))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(i) for i in range(56, 64))
