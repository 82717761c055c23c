"""Directional rays and composed step sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from chessmoves.core.enums import Direction
from chessmoves.core.types import Square


def ray(start: Square, direction: Direction) -> Iterator[Square]:
    """Squares after *start* stepping in *direction* until leaving the board.

    *start* itself is not yielded. Each call returns an independent
    generator, so a ray can be walked any number of times.
    """
    current = start.step(direction)
    while current.is_on_board:
        yield current
        current = current.step(direction)


def compose(*directions: Direction) -> Callable[[Square], Square]:
    """Return a function applying *directions* one step at a time, in order.

    Leaving the board at any intermediate step yields the off-board square.
    """

    def _apply(start: Square) -> Square:
        sq = start
        for direction in directions:
            sq = sq.step(direction)
        return sq

    return _apply
