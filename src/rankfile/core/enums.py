"""Core enumerations and flags for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def label(self) -> str:
        """Capitalised name, e.g. ``White``."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Piece kinds in the order the position masks are laid out."""

    KING = 0
    QUEEN = 1
    ROOK = 2
    BISHOP = 3
    KNIGHT = 4
    PAWN = 5

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Variant(Enum):
    """Starting layouts a board can be created with."""

    STANDARD = auto()
    EMPTY = auto()


class PositionKind(Enum):
    """Storage encoding behind a board's position."""

    MASK = auto()
    FLAT = auto()
    GRID = auto()
    ENUM = auto()


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def for_side(cls, color: Color, kingside: bool) -> CastlingRights:
        if color == Color.WHITE:
            return cls.WHITE_KINGSIDE if kingside else cls.WHITE_QUEENSIDE
        return cls.BLACK_KINGSIDE if kingside else cls.BLACK_QUEENSIDE


class Check(IntEnum):
    """Check annotation carried by a move."""

    CHECK = 1
    MATE = 2


class Castling(IntEnum):
    """Which side a castling move goes to."""

    KINGSIDE = 1
    QUEENSIDE = 2
