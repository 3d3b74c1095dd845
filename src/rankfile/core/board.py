"""Board: one position plus castling rights and en-passant state."""

from __future__ import annotations

from typing import ClassVar

from rankfile.core.coordinate import A1, A8, H1, H8, Coord
from rankfile.core.enums import (
    CastlingRights,
    Color,
    PieceKind,
    PositionKind,
    Variant,
)
from rankfile.core.errors import InvalidMove
from rankfile.core.move import Move
from rankfile.core.piece import Piece
from rankfile.core.position import Position, new_position


class Board:
    """A position with the metadata move application needs.

    Two en-passant records are kept. The *nominal* one is set after every
    pawn double step and feeds standard FEN. The *true* one is only set when
    an enemy pawn could actually capture en passant and feeds X-FEN and move
    generation. Whenever the true record is set the nominal one holds the
    same square.
    """

    __slots__ = (
        "_position",
        "_castling",
        "_en_passant_coord",
        "_en_passant_piece",
        "_true_en_passant_coord",
        "_true_en_passant_piece",
    )

    def __init__(
        self,
        variant: Variant = Variant.STANDARD,
        position_kind: PositionKind = PositionKind.MASK,
        *,
        position: Position | None = None,
        castling: CastlingRights = CastlingRights.ALL,
    ) -> None:
        self._position = (
            position if position is not None else new_position(position_kind, variant)
        )
        self._castling = castling
        self._en_passant_coord: Coord | None = None
        self._en_passant_piece: Piece | None = None
        self._true_en_passant_coord: Coord | None = None
        self._true_en_passant_piece: Piece | None = None

    # ── Position access ──────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        """The live position; edits apply to this board."""
        return self._position

    def get_position(self) -> Position:
        """A detached copy of the position."""
        return self._position.copy()

    @property
    def position_kind(self) -> PositionKind:
        return self._position.kind

    def get_piece(self, coord: Coord) -> Piece | None:
        return self._position.get_piece(coord)

    def put_piece(self, piece: Piece | None, coord: Coord) -> Piece | None:
        return self._position.put_piece(piece, coord)

    # ── Castling rights ──────────────────────────────────────────────────

    @property
    def castling(self) -> CastlingRights:
        return self._castling

    @property
    def white_kingside(self) -> bool:
        return bool(self._castling & CastlingRights.WHITE_KINGSIDE)

    @property
    def white_queenside(self) -> bool:
        return bool(self._castling & CastlingRights.WHITE_QUEENSIDE)

    @property
    def black_kingside(self) -> bool:
        return bool(self._castling & CastlingRights.BLACK_KINGSIDE)

    @property
    def black_queenside(self) -> bool:
        return bool(self._castling & CastlingRights.BLACK_QUEENSIDE)

    def can_castle(self, color: Color, kingside: bool) -> bool:
        return bool(self._castling & CastlingRights.for_side(color, kingside))

    def revoke_castling(self, rights: CastlingRights) -> None:
        """Turn *rights* off. Rights are never granted back."""
        self._castling &= ~rights

    # ── En passant ───────────────────────────────────────────────────────

    @property
    def en_passant_coord(self) -> Coord | None:
        return self._en_passant_coord

    @property
    def en_passant_piece(self) -> Piece | None:
        return self._en_passant_piece

    @property
    def true_en_passant_coord(self) -> Coord | None:
        return self._true_en_passant_coord

    @property
    def true_en_passant_piece(self) -> Piece | None:
        return self._true_en_passant_piece

    def set_en_passant(
        self, coord: Coord, piece: Piece, capturable: bool = False
    ) -> None:
        """Record the square a pawn skipped and the pawn that skipped it.

        The nominal record is always set; the true record only when
        *capturable*.
        """
        self._en_passant_coord = coord
        self._en_passant_piece = piece
        if capturable:
            self._true_en_passant_coord = coord
            self._true_en_passant_piece = piece
        else:
            self._true_en_passant_coord = None
            self._true_en_passant_piece = None

    def clear_en_passant(self) -> None:
        self._en_passant_coord = None
        self._en_passant_piece = None
        self._true_en_passant_coord = None
        self._true_en_passant_piece = None

    def is_en_passant_capturable(self, pawn: Piece) -> bool:
        """Whether an enemy pawn stands beside *pawn* on its rank."""
        for file_delta in (-1, 1):
            beside = pawn.coord.offset(file_delta, 0)
            if beside is None:
                continue
            other = self._position.get_piece(beside)
            if other is not None and other.is_kind(PieceKind.PAWN, pawn.color.opposite):
                return True
        return False

    # ── Move application ─────────────────────────────────────────────────

    _ROOK_CORNERS: ClassVar[dict[Coord, CastlingRights]] = {
        A1: CastlingRights.WHITE_QUEENSIDE,
        H1: CastlingRights.WHITE_KINGSIDE,
        A8: CastlingRights.BLACK_QUEENSIDE,
        H8: CastlingRights.BLACK_KINGSIDE,
    }

    def make_move(self, move: Move) -> Piece | None:
        """Apply a move with both squares known; return the captured piece.

        Handles en-passant captures, the rook of a castling move, promotion
        (to a queen unless the move names another kind) and revocation of
        castling rights. The move is not checked for legality.
        """
        src, dst = move.from_coord, move.to_coord
        if src is None or dst is None:
            raise InvalidMove(f"{move.input_move!r} does not name both squares")
        piece = self._position.get_piece(src)
        if piece is None:
            raise InvalidMove(f"There is no piece on {src}")

        captured = self._position.get_piece(dst)
        if (
            piece.kind == PieceKind.PAWN
            and captured is None
            and src.file != dst.file
            and dst == self._true_en_passant_coord
        ):
            assert self._true_en_passant_piece is not None
            captured = self._position.take_piece(self._true_en_passant_piece.coord)

        placed = piece
        if piece.kind == PieceKind.PAWN and dst.rank in (0, 7):
            placed = Piece(move.promotion or PieceKind.QUEEN, piece.color, dst)

        self._position.take_piece(src)
        self._position.put_piece(placed, dst)

        # Slide the rook for castling
        if piece.kind == PieceKind.KING and abs(dst.file - src.file) == 2:
            rook_from, rook_to = (7, 5) if dst.file > src.file else (0, 3)
            rook = self._position.take_piece(Coord(rook_from, src.rank))
            assert rook is not None, "castling without a rook"
            self._position.put_piece(rook, Coord(rook_to, src.rank))

        self.clear_en_passant()
        if piece.kind == PieceKind.PAWN and abs(dst.rank - src.rank) == 2:
            pawn = placed.with_coord(dst)
            self.set_en_passant(
                Coord(src.file, (src.rank + dst.rank) // 2),
                pawn,
                capturable=self.is_en_passant_capturable(pawn),
            )

        self._update_castling(piece, src, dst)
        return captured

    def _update_castling(self, piece: Piece, src: Coord, dst: Coord) -> None:
        if piece.kind == PieceKind.KING:
            self.revoke_castling(
                CastlingRights.WHITE_BOTH
                if piece.color == Color.WHITE
                else CastlingRights.BLACK_BOTH
            )
        for coord in (src, dst):
            if coord in self._ROOK_CORNERS:
                self.revoke_castling(self._ROOK_CORNERS[coord])

    # ── Copying / display ────────────────────────────────────────────────

    def copy(self) -> Board:
        clone = Board(position=self._position.copy(), castling=self._castling)
        clone._en_passant_coord = self._en_passant_coord
        clone._en_passant_piece = self._en_passant_piece
        clone._true_en_passant_coord = self._true_en_passant_coord
        clone._true_en_passant_piece = self._true_en_passant_piece
        return clone

    def to_string(self, color: Color = Color.WHITE) -> str:
        return self._position.to_string(color)

    def __str__(self) -> str:
        return self._position.to_string(Color.WHITE)

    def __repr__(self) -> str:
        return (
            f"Board({self._position.kind.name}, castling={self._castling!r}, "
            f"en_passant={self._en_passant_coord})"
        )
