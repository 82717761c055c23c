"""Text rendering of a board snapshot."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessmoves.core.types import BOARD_SIZE, make_square

if TYPE_CHECKING:
    from chessmoves.core.board import Board

_HORIZONTAL = "─"
_VERTICAL = "│"
_DARK = "▀"
_LIGHT = " "
_CELL_BAR = _HORIZONTAL * 3


def _border(left: str, right: str) -> str:
    return left + _HORIZONTAL.join([_CELL_BAR] * BOARD_SIZE) + right


def render_board(board: Board) -> str:
    """Box-drawn 8x8 grid, row 7 on top, one glyph per square.

    Empty squares show ``▀`` where ``x + y`` is even and a blank otherwise.
    Pieces whose square is off-board are not drawn.
    """
    rows = [_border("┌", "┐")]
    for y in range(BOARD_SIZE - 1, -1, -1):
        cells: list[str] = []
        for x in range(BOARD_SIZE):
            piece = board.piece_at(make_square(x, y))
            if piece is not None:
                cells.append(piece.symbol)
            else:
                cells.append(_DARK if (x + y) % 2 == 0 else _LIGHT)
        rows.append(f"{_VERTICAL} " + f" {_VERTICAL} ".join(cells) + f" {_VERTICAL}")
    rows.append(_border("└", "┘"))
    return "\n".join(rows)
