"""Position contract shared by every board encoding."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TYPE_CHECKING, ClassVar

from rankfile.core.coordinate import SQUARES, Coord
from rankfile.core.enums import Color, PieceKind, PositionKind, Variant
from rankfile.core.piece import Piece

if TYPE_CHECKING:
    from rankfile.core.board import Board

# Back rank from the a-file to the h-file.
BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


def standard_layout() -> Iterator[Piece]:
    """Pieces of the standard starting position, a1 first."""
    for file_idx, kind in enumerate(BACK_RANK):
        yield Piece(kind, Color.WHITE, Coord(file_idx, 0))
        yield Piece(PieceKind.PAWN, Color.WHITE, Coord(file_idx, 1))
        yield Piece(PieceKind.PAWN, Color.BLACK, Coord(file_idx, 6))
        yield Piece(kind, Color.BLACK, Coord(file_idx, 7))


class Position(ABC):
    """Mapping from each of the 64 squares to an optional piece.

    Subclasses only implement storage (:meth:`get_piece`, :meth:`put_piece`,
    :meth:`copy` and the two layout constructors); everything else is built
    on those primitives so all encodings behave identically.
    """

    __slots__ = ()

    kind: ClassVar[PositionKind]

    # -- Storage primitives -------------------------------------------------

    @abstractmethod
    def get_piece(self, coord: Coord) -> Piece | None:
        """Piece on *coord*, or ``None`` for an empty square."""

    @abstractmethod
    def put_piece(self, piece: Piece | None, coord: Coord) -> Piece | None:
        """Store *piece* on *coord* and return whatever was there before.

        ``None`` clears the square. The stored piece is normalized to *coord*.
        """

    @abstractmethod
    def copy(self) -> Position: ...

    @classmethod
    @abstractmethod
    def empty(cls) -> Position: ...

    @classmethod
    @abstractmethod
    def standard(cls) -> Position: ...

    @classmethod
    def new(cls, variant: Variant = Variant.STANDARD) -> Position:
        if variant == Variant.EMPTY:
            return cls.empty()
        return cls.standard()

    # -- Derived mutation ---------------------------------------------------

    def take_piece(self, coord: Coord) -> Piece | None:
        """Lift the piece off *coord*."""
        return self.put_piece(None, coord)

    def replace_piece(self, piece: Piece, to_coord: Coord) -> Piece | None:
        """Move *piece* from its own square to *to_coord*; return the capture."""
        self.take_piece(piece.coord)
        return self.put_piece(piece.with_coord(to_coord), to_coord)

    def clear(self) -> None:
        for coord in SQUARES:
            self.put_piece(None, coord)

    # -- Queries ------------------------------------------------------------

    def is_empty(self, coord: Coord) -> bool:
        return self.get_piece(coord) is None

    def squares(self) -> Iterator[tuple[Coord, Piece | None]]:
        """Every square with its occupant, a1 first."""
        for coord in SQUARES:
            yield coord, self.get_piece(coord)

    def pieces(
        self, color: Color | None = None, kind: PieceKind | None = None
    ) -> list[Piece]:
        """All pieces, optionally filtered by *color* and *kind*."""
        found: list[Piece] = []
        for _, piece in self.squares():
            if piece is None:
                continue
            if color is not None and piece.color != color:
                continue
            if kind is not None and piece.kind != kind:
                continue
            found.append(piece)
        return found

    def king(self, color: Color) -> Piece | None:
        kings = self.pieces(color, PieceKind.KING)
        return kings[0] if kings else None

    def get_pieces_attacking_coord(
        self, board: Board, piece: Piece, coord: Coord
    ) -> list[Piece]:
        """Opponents of *piece* that have *coord* among their destinations.

        When this position is not *board*'s own, it is queried under
        *board*'s castling rights.
        """
        from rankfile.core.board import Board
        from rankfile.core.move_generator import MoveGenerator

        if board.position is not self:
            board = Board(position=self, castling=board.castling)
        gen = MoveGenerator(board)
        return [
            other
            for other in self.pieces(piece.color.opposite)
            if coord in gen.destinations(other)
        ]

    # -- Rendering ----------------------------------------------------------

    def to_string(self, color: Color = Color.WHITE) -> str:
        """Text diagram of the position from *color*'s side of the board."""
        ranks = range(7, -1, -1) if color == Color.WHITE else range(8)
        files = range(8) if color == Color.WHITE else range(7, -1, -1)
        labels = " ".join("abcdefgh"[f] for f in files)

        rows: list[str] = []
        for rank in ranks:
            row = []
            for file in files:
                piece = self.get_piece(SQUARES[rank * 8 + file])
                row.append(str(piece) if piece else "·")
            rows.append(f"{rank + 1} {' '.join(row)} {rank + 1}")
        return "\n".join([f"  {labels}", *rows, f"  {labels}"])

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return all(self.get_piece(c) == other.get_piece(c) for c in SQUARES)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_string(Color.WHITE)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(\n{self.to_string(Color.WHITE)}\n)"
