"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from rankfile.core.coordinate import A1, Coord
from rankfile.core.enums import Color, PieceKind
from rankfile.core.errors import InvalidPiece

# FEN character ↔ (PieceKind, Color)
_CHAR_MAP: dict[str, tuple[PieceKind, Color]] = {
    "K": (PieceKind.KING, Color.WHITE),
    "Q": (PieceKind.QUEEN, Color.WHITE),
    "R": (PieceKind.ROOK, Color.WHITE),
    "B": (PieceKind.BISHOP, Color.WHITE),
    "N": (PieceKind.KNIGHT, Color.WHITE),
    "P": (PieceKind.PAWN, Color.WHITE),
    "k": (PieceKind.KING, Color.BLACK),
    "q": (PieceKind.QUEEN, Color.BLACK),
    "r": (PieceKind.ROOK, Color.BLACK),
    "b": (PieceKind.BISHOP, Color.BLACK),
    "n": (PieceKind.KNIGHT, Color.BLACK),
    "p": (PieceKind.PAWN, Color.BLACK),
}

_UNICODE: dict[tuple[PieceKind, Color], str] = {
    (PieceKind.KING, Color.WHITE): "♔",
    (PieceKind.QUEEN, Color.WHITE): "♕",
    (PieceKind.ROOK, Color.WHITE): "♖",
    (PieceKind.BISHOP, Color.WHITE): "♗",
    (PieceKind.KNIGHT, Color.WHITE): "♘",
    (PieceKind.PAWN, Color.WHITE): "♙",
    (PieceKind.KING, Color.BLACK): "♚",
    (PieceKind.QUEEN, Color.BLACK): "♛",
    (PieceKind.ROOK, Color.BLACK): "♜",
    (PieceKind.BISHOP, Color.BLACK): "♝",
    (PieceKind.KNIGHT, Color.BLACK): "♞",
    (PieceKind.PAWN, Color.BLACK): "♟",
}

_FEN_CHARS: dict[tuple[PieceKind, Color], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: a piece of some kind and color on a square.

    The coordinate must agree with where the piece is stored; positions
    normalize it on every write.
    """

    kind: PieceKind
    color: Color
    coord: Coord = A1

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.kind, self.color)]

    @classmethod
    def from_char(cls, char: str, coord: Coord = A1) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            kind, color = _CHAR_MAP[char]
        except KeyError:
            raise InvalidPiece(f"{char!r} is not one of PKQRBNpkqrbn") from None
        return cls(kind, color, coord)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.kind, self.color)]

    @property
    def text(self) -> str:
        """Readable name, e.g. ``White King``."""
        return f"{self.color.label} {self.kind.label}"

    # ── Helpers ──────────────────────────────────────────────────────────

    def with_coord(self, coord: Coord) -> Piece:
        """This piece moved to *coord* (``self`` when already there)."""
        if self.coord == coord:
            return self
        return replace(self, coord=coord)

    def is_same_color(self, other: Piece) -> bool:
        return self.color == other.color

    def is_kind(self, kind: PieceKind, color: Color | None = None) -> bool:
        return self.kind == kind and (color is None or self.color == color)
