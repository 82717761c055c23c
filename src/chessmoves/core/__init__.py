"""Core domain layer — pure move generation with zero external dependencies.

Quick start::

    from chessmoves.core import Board, Color, Piece, make_square

    rook = Piece.rook(Color.BLACK, make_square(4, 4))
    board = Board([rook])
    for sq in rook.moves(board):
        print(sq)
"""

from chessmoves.core.board import Board
from chessmoves.core.display import render_board
from chessmoves.core.enums import (
    ALL_DIRECTIONS,
    DIAGONAL_DIRECTIONS,
    ORTHOGONAL_DIRECTIONS,
    Color,
    Direction,
    PieceType,
)
from chessmoves.core.move_generator import (
    MoveGenerator,
    bishop_moves,
    destinations,
    king_moves,
    knight_moves,
    pawn_moves,
    queen_moves,
    rook_moves,
    sliding_moves,
)
from chessmoves.core.piece import Piece
from chessmoves.core.ray import compose, ray
from chessmoves.core.types import (
    OFF_BOARD,
    Square,
    is_on_board,
    make_square,
    to_coordinates,
)

__all__ = [
    # Enums / directions
    "ALL_DIRECTIONS",
    "Color",
    "DIAGONAL_DIRECTIONS",
    "Direction",
    "ORTHOGONAL_DIRECTIONS",
    "PieceType",
    # Types / helpers
    "OFF_BOARD",
    "Square",
    "compose",
    "is_on_board",
    "make_square",
    "ray",
    "to_coordinates",
    # Domain objects
    "Board",
    "MoveGenerator",
    "Piece",
    # Move rules
    "bishop_moves",
    "destinations",
    "king_moves",
    "knight_moves",
    "pawn_moves",
    "queen_moves",
    "rook_moves",
    "sliding_moves",
    # Display
    "render_board",
]
