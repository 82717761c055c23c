"""Pseudo-legal destination generation for single pieces.

Every rule is a pure function ``(piece, board) -> frozenset[Square]``. Rules
never raise: a piece whose square is off-board simply ends up with fewer (or
no) destinations, since every step from the off-board square stays off-board.
Check, castling, en passant and promotion are not modelled.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from chessmoves.core.board import Board
from chessmoves.core.enums import (
    ALL_DIRECTIONS,
    DIAGONAL_DIRECTIONS,
    ORTHOGONAL_DIRECTIONS,
    Color,
    Direction,
    PieceType,
)
from chessmoves.core.piece import Piece
from chessmoves.core.ray import compose, ray
from chessmoves.core.types import Square

_LOGGER = logging.getLogger(__name__)

MoveRule = Callable[[Piece, Board], frozenset[Square]]

_UP, _DOWN = Direction.UP, Direction.DOWN
_LEFT, _RIGHT = Direction.LEFT, Direction.RIGHT

# Two steps one way, then one step perpendicular.
KNIGHT_JUMPS: tuple[Callable[[Square], Square], ...] = (
    compose(_UP, _UP, _RIGHT),
    compose(_UP, _UP, _LEFT),
    compose(_RIGHT, _RIGHT, _UP),
    compose(_RIGHT, _RIGHT, _DOWN),
    compose(_DOWN, _DOWN, _RIGHT),
    compose(_DOWN, _DOWN, _LEFT),
    compose(_LEFT, _LEFT, _DOWN),
    compose(_LEFT, _LEFT, _UP),
)

BISHOP_DIRS: tuple[Direction, ...] = DIAGONAL_DIRECTIONS
ROOK_DIRS: tuple[Direction, ...] = ORTHOGONAL_DIRECTIONS
QUEEN_DIRS: tuple[Direction, ...] = ALL_DIRECTIONS

# color -> (forward, capture directions, home row)
_PAWN_GEOMETRY: dict[Color, tuple[Direction, tuple[Direction, Direction], int]] = {
    Color.WHITE: (Direction.UP, (Direction.UP_LEFT, Direction.UP_RIGHT), 1),
    Color.BLACK: (Direction.DOWN, (Direction.DOWN_LEFT, Direction.DOWN_RIGHT), 6),
}


def _is_open_to(sq: Square, color: Color, board: Board) -> bool:
    """On-board and not holding a piece of *color*."""
    if not sq.is_on_board:
        return False
    occupant = board.piece_at(sq)
    return occupant is None or occupant.color == color.opposite


# -- Piece rules ----------------------------------------------------------------


def pawn_moves(piece: Piece, board: Board) -> frozenset[Square]:
    """Forward push, double push from the home row, diagonal captures."""
    forward, capture_dirs, home_row = _PAWN_GEOMETRY[piece.color]
    origin = piece.square
    candidates: set[Square] = set()

    one_step = origin.step(forward)
    if board.is_empty(one_step):
        candidates.add(one_step)

    for direction in capture_dirs:
        target = origin.step(direction)
        occupant = board.piece_at(target)
        if occupant is not None and occupant.color == piece.color.opposite:
            candidates.add(target)

    if origin.is_on_board and origin.y == home_row:
        two_step = one_step.step(forward)
        if board.is_empty(one_step) and board.is_empty(two_step):
            candidates.add(two_step)

    own = board.squares_occupied_by(piece.color)
    return frozenset(sq for sq in candidates if sq.is_on_board and sq not in own)


def knight_moves(piece: Piece, board: Board) -> frozenset[Square]:
    """The eight L-shaped jumps; intervening pieces never block."""
    return frozenset(
        to_sq
        for to_sq in (jump(piece.square) for jump in KNIGHT_JUMPS)
        if _is_open_to(to_sq, piece.color, board)
    )


def sliding_moves(
    piece: Piece, board: Board, directions: Iterable[Direction]
) -> frozenset[Square]:
    """Walk a ray per direction, stopping at the first occupied square.

    Empty squares are destinations. The first occupant ends the ray and is
    itself a destination only when it belongs to the other color.
    """
    moves: set[Square] = set()
    for direction in directions:
        for to_sq in ray(piece.square, direction):
            occupant = board.piece_at(to_sq)
            if occupant is None:
                moves.add(to_sq)
                continue
            if occupant.color == piece.color.opposite:
                moves.add(to_sq)
            break
    return frozenset(moves)


def bishop_moves(piece: Piece, board: Board) -> frozenset[Square]:
    return sliding_moves(piece, board, BISHOP_DIRS)


def rook_moves(piece: Piece, board: Board) -> frozenset[Square]:
    return sliding_moves(piece, board, ROOK_DIRS)


def queen_moves(piece: Piece, board: Board) -> frozenset[Square]:
    return sliding_moves(piece, board, QUEEN_DIRS)


def king_moves(piece: Piece, board: Board) -> frozenset[Square]:
    """The eight neighbouring squares, no check safety and no castling."""
    return frozenset(
        to_sq
        for to_sq in (piece.square.step(direction) for direction in ALL_DIRECTIONS)
        if _is_open_to(to_sq, piece.color, board)
    )


RULES: dict[PieceType, MoveRule] = {
    PieceType.PAWN: pawn_moves,
    PieceType.KNIGHT: knight_moves,
    PieceType.BISHOP: bishop_moves,
    PieceType.ROOK: rook_moves,
    PieceType.QUEEN: queen_moves,
    PieceType.KING: king_moves,
}


def destinations(piece: Piece, board: Board) -> frozenset[Square]:
    """Pseudo-legal destinations of *piece* on *board*, by piece kind."""
    if not piece.square.is_on_board:
        _LOGGER.debug("Generating moves for off-board piece %r", piece)
    return RULES[piece.piece_type](piece, board)


class MoveGenerator:
    """Destination queries over one :class:`Board` snapshot.

    The board is never modified, so a generator (or the board itself) can be
    shared freely between callers.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    def destinations(self, piece: Piece) -> frozenset[Square]:
        return destinations(piece, self._board)

    def all_destinations(
        self, color: Color | None = None
    ) -> list[tuple[Piece, frozenset[Square]]]:
        """(piece, destinations) for every piece, optionally of one *color*.

        One pair per board entry in construction order; equal off-board
        pieces each get their own pair.
        """
        board = self._board
        pieces = board.pieces() if color is None else board.pieces_of(color)
        result = [(piece, destinations(piece, board)) for piece in pieces]
        _LOGGER.debug("Generated destinations for %d pieces", len(result))
        return result
