"""Board - an immutable snapshot of piece placement on an 8x8 board."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator

from chessmoves.core.display import render_board
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.piece import Piece
from chessmoves.core.types import BOARD_SIZE, Square, make_square

_LOGGER = logging.getLogger(__name__)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Read-only collection of pieces with a 64-square occupancy index.

    The index is built once per snapshot, so every occupancy query is O(1).
    Two pieces on the same on-board square are rejected; pieces whose square
    is off-board are kept but never occupy anything.
    """

    __slots__ = ("_pieces", "_squares")

    def __init__(self, pieces: Iterable[Piece] = ()) -> None:
        self._pieces: tuple[Piece, ...] = tuple(pieces)
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)

        for piece in self._pieces:
            if not isinstance(piece, Piece):
                raise TypeError(f"Board accepts Piece values only, got {piece!r}")
            index = piece.square.index
            if index is None:
                continue
            occupant = self._squares[index]
            if occupant is not None:
                raise ValueError(
                    f"{piece.square!r} is occupied by both {occupant!r} and {piece!r}"
                )
            self._squares[index] = piece

        _LOGGER.debug("Board snapshot built with %d pieces", len(self._pieces))

    # -- Element access -----------------------------------------------------

    def pieces(self) -> tuple[Piece, ...]:
        """All pieces in construction order."""
        return self._pieces

    def piece_at(self, sq: Square) -> Piece | None:
        if sq.index is None:
            return None
        return self._squares[sq.index]

    def is_empty(self, sq: Square) -> bool:
        return self.piece_at(sq) is None

    # -- Query helpers ------------------------------------------------------

    def squares_occupied_by(self, color: Color) -> frozenset[Square]:
        """On-board squares holding a piece of *color*."""
        return frozenset(
            piece.square
            for piece in self._pieces
            if piece.color == color and piece.square.is_on_board
        )

    def occupied_squares(self) -> frozenset[Square]:
        return frozenset(
            piece.square for piece in self._pieces if piece.square.is_on_board
        )

    def pieces_of(self, color: Color) -> tuple[Piece, ...]:
        return tuple(piece for piece in self._pieces if piece.color == color)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: White on rows 0-1, Black on rows 6-7."""
        pieces: list[Piece] = []
        for color, pawn_row, back_row in ((Color.WHITE, 1, 0), (Color.BLACK, 6, 7)):
            for x in range(BOARD_SIZE):
                pieces.append(Piece.pawn(color, make_square(x, pawn_row)))
            for x, piece_type in enumerate(_BACK_RANK):
                pieces.append(Piece(color, piece_type, make_square(x, back_row)))
        return cls(pieces)

    # -- Dunder helpers -----------------------------------------------------

    def __len__(self) -> int:
        return len(self._pieces)

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._pieces)

    def __contains__(self, sq: object) -> bool:
        return isinstance(sq, Square) and self.piece_at(sq) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return Counter(self._pieces) == Counter(other._pieces)

    def __hash__(self) -> int:
        return hash(frozenset(Counter(self._pieces).items()))

    def __repr__(self) -> str:
        return f"Board({list(self._pieces)!r})"

    def __str__(self) -> str:
        return render_board(self)
