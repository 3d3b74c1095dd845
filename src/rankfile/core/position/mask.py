"""Position encoded as 64-bit occupancy masks."""

from __future__ import annotations

from typing import Final

from rankfile.core.coordinate import SQUARES, Coord
from rankfile.core.enums import Color, PieceKind, PositionKind
from rankfile.core.piece import Piece
from rankfile.core.position.base import Position

_KIND_COUNT: Final = 6
_COLOR_COUNT: Final = 2
_MASK_64: Final = 0xFFFF_FFFF_FFFF_FFFF

# Standard layout, indexed by PieceKind (king, queen, rook, bishop, knight, pawn).
_STANDARD_KIND_MASKS: Final = (
    0x1000_0000_0000_0010,
    0x0800_0000_0000_0008,
    0x8100_0000_0000_0081,
    0x2400_0000_0000_0024,
    0x4200_0000_0000_0042,
    0x00FF_0000_0000_FF00,
)
_STANDARD_COLOR_MASKS: Final = (
    0x0000_0000_0000_FFFF,
    0xFFFF_0000_0000_0000,
)


def _squares_from_mask(mask: int) -> list[Coord]:
    squares: list[Coord] = []
    while mask:
        lsb = mask & -mask
        squares.append(SQUARES[lsb.bit_length() - 1])
        mask ^= lsb
    return squares


class MaskPosition(Position):
    """One mask per piece kind plus one per color.

    Bit *i* (LSB = a1, MSB = h8) set in a kind mask means a piece of that kind
    stands on square *i*; the color masks say whose it is. Every occupied
    square has exactly one kind bit and exactly one color bit.
    """

    __slots__ = ("_kind_masks", "_color_masks")

    kind = PositionKind.MASK

    def __init__(
        self,
        kind_masks: tuple[int, ...] | list[int] | None = None,
        color_masks: tuple[int, ...] | list[int] | None = None,
    ) -> None:
        self._kind_masks: list[int] = (
            list(kind_masks) if kind_masks is not None else [0] * _KIND_COUNT
        )
        self._color_masks: list[int] = (
            list(color_masks) if color_masks is not None else [0] * _COLOR_COUNT
        )

    @classmethod
    def empty(cls) -> MaskPosition:
        return cls()

    @classmethod
    def standard(cls) -> MaskPosition:
        return cls(_STANDARD_KIND_MASKS, _STANDARD_COLOR_MASKS)

    # -- Storage ------------------------------------------------------------

    def get_piece(self, coord: Coord) -> Piece | None:
        bit = 1 << coord.index
        if self._color_masks[Color.WHITE] & bit:
            color = Color.WHITE
        elif self._color_masks[Color.BLACK] & bit:
            color = Color.BLACK
        else:
            return None

        for kind_idx, mask in enumerate(self._kind_masks):
            if mask & bit:
                return Piece(PieceKind(kind_idx), color, coord)
        raise AssertionError(f"{coord} has a color bit but no piece kind bit")

    def put_piece(self, piece: Piece | None, coord: Coord) -> Piece | None:
        previous = self.get_piece(coord)
        bit = 1 << coord.index
        clear = ~bit & _MASK_64

        # Both bit families must be cleared, not just the displaced kind.
        for kind_idx in range(_KIND_COUNT):
            self._kind_masks[kind_idx] &= clear
        self._color_masks[Color.WHITE] &= clear
        self._color_masks[Color.BLACK] &= clear

        if piece is not None:
            self._kind_masks[piece.kind] |= bit
            self._color_masks[piece.color] |= bit
        return previous

    def copy(self) -> MaskPosition:
        return MaskPosition(self._kind_masks, self._color_masks)

    # -- Mask access --------------------------------------------------------

    def kind_mask(self, kind: PieceKind) -> int:
        return self._kind_masks[kind]

    def color_mask(self, color: Color) -> int:
        return self._color_masks[color]

    @property
    def occupied(self) -> int:
        return self._color_masks[Color.WHITE] | self._color_masks[Color.BLACK]

    def pieces(
        self, color: Color | None = None, kind: PieceKind | None = None
    ) -> list[Piece]:
        mask = self.occupied if color is None else self._color_masks[color]
        if kind is not None:
            mask &= self._kind_masks[kind]
        found: list[Piece] = []
        for coord in _squares_from_mask(mask):
            piece = self.get_piece(coord)
            assert piece is not None
            found.append(piece)
        return found
