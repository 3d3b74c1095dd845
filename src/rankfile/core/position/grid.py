"""Position stored as an 8x8 grid, rank-major."""

from __future__ import annotations

from rankfile.core.coordinate import Coord
from rankfile.core.enums import PositionKind
from rankfile.core.piece import Piece
from rankfile.core.position.base import Position, standard_layout


class GridPosition(Position):
    """``_rows[rank][file]``; row 0 is the first rank."""

    __slots__ = ("_rows",)

    kind = PositionKind.GRID

    def __init__(self, rows: list[list[Piece | None]] | None = None) -> None:
        if rows is None:
            self._rows: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]
        else:
            self._rows = [list(row) for row in rows]

    @classmethod
    def empty(cls) -> GridPosition:
        return cls()

    @classmethod
    def standard(cls) -> GridPosition:
        pos = cls()
        for piece in standard_layout():
            pos._rows[piece.coord.rank][piece.coord.file] = piece
        return pos

    def get_piece(self, coord: Coord) -> Piece | None:
        return self._rows[coord.rank][coord.file]

    def put_piece(self, piece: Piece | None, coord: Coord) -> Piece | None:
        row = self._rows[coord.rank]
        previous = row[coord.file]
        row[coord.file] = piece.with_coord(coord) if piece else None
        return previous

    def copy(self) -> GridPosition:
        return GridPosition(self._rows)
