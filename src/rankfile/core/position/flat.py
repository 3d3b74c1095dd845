"""Position stored as a flat list of 64 optional pieces."""

from __future__ import annotations

from rankfile.core.coordinate import Coord
from rankfile.core.enums import PositionKind
from rankfile.core.piece import Piece
from rankfile.core.position.base import Position, standard_layout


class FlatPosition(Position):
    """One cell per square, indexed by ``Coord.index``."""

    __slots__ = ("_squares",)

    kind = PositionKind.FLAT

    def __init__(self, squares: list[Piece | None] | None = None) -> None:
        self._squares: list[Piece | None] = (
            list(squares) if squares is not None else [None] * 64
        )

    @classmethod
    def empty(cls) -> FlatPosition:
        return cls()

    @classmethod
    def standard(cls) -> FlatPosition:
        pos = cls()
        for piece in standard_layout():
            pos._squares[piece.coord.index] = piece
        return pos

    def get_piece(self, coord: Coord) -> Piece | None:
        return self._squares[coord.index]

    def put_piece(self, piece: Piece | None, coord: Coord) -> Piece | None:
        previous = self._squares[coord.index]
        self._squares[coord.index] = piece.with_coord(coord) if piece else None
        return previous

    def copy(self) -> FlatPosition:
        return FlatPosition(self._squares)
