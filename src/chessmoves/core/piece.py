"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.types import Square

if TYPE_CHECKING:
    from chessmoves.core.board import Board

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece: its kind, its color and a snapshot of its square.

    The square is a plain value; nothing keeps it in sync with any
    :class:`~chessmoves.core.board.Board` the piece is placed on.
    """

    color: Color
    piece_type: PieceType
    square: Square

    # ── Construction shortcuts ───────────────────────────────────────────

    @classmethod
    def pawn(cls, color: Color, square: Square) -> Piece:
        return cls(color, PieceType.PAWN, square)

    @classmethod
    def knight(cls, color: Color, square: Square) -> Piece:
        return cls(color, PieceType.KNIGHT, square)

    @classmethod
    def bishop(cls, color: Color, square: Square) -> Piece:
        return cls(color, PieceType.BISHOP, square)

    @classmethod
    def rook(cls, color: Color, square: Square) -> Piece:
        return cls(color, PieceType.ROOK, square)

    @classmethod
    def queen(cls, color: Color, square: Square) -> Piece:
        return cls(color, PieceType.QUEEN, square)

    @classmethod
    def king(cls, color: Color, square: Square) -> Piece:
        return cls(color, PieceType.KING, square)

    # ── Movement ─────────────────────────────────────────────────────────

    def moves(self, board: Board) -> frozenset[Square]:
        """Pseudo-legal destination squares of this piece on *board*."""
        from chessmoves.core.move_generator import destinations

        return destinations(self, board)

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    def __str__(self) -> str:
        return self.symbol
