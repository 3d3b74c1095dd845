"""Position stored as 64 bytes of combined kind/color tags."""

from __future__ import annotations

from enum import IntEnum

from rankfile.core.coordinate import SQUARES, Coord
from rankfile.core.enums import Color, PieceKind, PositionKind
from rankfile.core.piece import Piece
from rankfile.core.position.base import Position, standard_layout


class PieceTag(IntEnum):
    """One byte per piece; ``0`` is an empty square."""

    WHITE_KING = 1
    WHITE_QUEEN = 2
    WHITE_ROOK = 3
    WHITE_BISHOP = 4
    WHITE_KNIGHT = 5
    WHITE_PAWN = 6
    BLACK_KING = 7
    BLACK_QUEEN = 8
    BLACK_ROOK = 9
    BLACK_BISHOP = 10
    BLACK_KNIGHT = 11
    BLACK_PAWN = 12

    @classmethod
    def from_piece(cls, piece: Piece) -> PieceTag:
        return cls(piece.color * 6 + piece.kind + 1)

    @property
    def color(self) -> Color:
        return Color((self.value - 1) // 6)

    @property
    def piece_kind(self) -> PieceKind:
        return PieceKind((self.value - 1) % 6)

    def to_piece(self, coord: Coord) -> Piece:
        return Piece(self.piece_kind, self.color, coord)


_EMPTY = 0


class EnumPosition(Position):
    """Compact encoding: a ``bytearray`` of :class:`PieceTag` values."""

    __slots__ = ("_tags",)

    kind = PositionKind.ENUM

    def __init__(self, tags: bytes | bytearray | None = None) -> None:
        if tags is not None and len(tags) != 64:
            raise ValueError(f"expected 64 tags, got {len(tags)}")
        self._tags = bytearray(tags) if tags is not None else bytearray(64)

    @classmethod
    def empty(cls) -> EnumPosition:
        return cls()

    @classmethod
    def standard(cls) -> EnumPosition:
        pos = cls()
        for piece in standard_layout():
            pos._tags[piece.coord.index] = PieceTag.from_piece(piece)
        return pos

    def get_piece(self, coord: Coord) -> Piece | None:
        tag = self._tags[coord.index]
        if tag == _EMPTY:
            return None
        return PieceTag(tag).to_piece(coord)

    def put_piece(self, piece: Piece | None, coord: Coord) -> Piece | None:
        previous = self.get_piece(coord)
        self._tags[coord.index] = (
            PieceTag.from_piece(piece) if piece is not None else _EMPTY
        )
        return previous

    def copy(self) -> EnumPosition:
        return EnumPosition(self._tags)

    def tag(self, coord: Coord) -> PieceTag | None:
        value = self._tags[coord.index]
        return PieceTag(value) if value != _EMPTY else None

    def occupied_squares(self) -> list[Coord]:
        return [SQUARES[idx] for idx, tag in enumerate(self._tags) if tag != _EMPTY]
