"""Destination generation, attack detection and king-safety filtering."""

from __future__ import annotations

from rankfile.core.board import Board
from rankfile.core.coordinate import SQUARES, Coord
from rankfile.core.enums import Check, Color, PieceKind
from rankfile.core.move import Move
from rankfile.core.piece import Piece

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Rank step forward, starting rank and last rank per color.
_PAWN_FORWARD: tuple[int, int] = (1, -1)
_PAWN_START_RANK: tuple[int, int] = (1, 6)
_LAST_RANK: tuple[int, int] = (7, 0)
_HOME_RANK: tuple[int, int] = (0, 7)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Coord, ...], ...]:
    targets: list[tuple[Coord, ...]] = []
    for coord in SQUARES:
        reachable = (coord.offset(df, dr) for df, dr in offsets)
        targets.append(tuple(c for c in reachable if c is not None))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Coord, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Coord, ...], ...]] = []
    for coord in SQUARES:
        square_rays: list[tuple[Coord, ...]] = []
        for df, dr in directions:
            ray: list[Coord] = []
            step = coord.offset(df, dr)
            while step is not None:
                ray.append(step)
                step = step.offset(df, dr)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_SLIDER_RAYS: dict[PieceKind, tuple[tuple[tuple[Coord, ...], ...], ...]] = {
    PieceKind.BISHOP: _BISHOP_RAYS,
    PieceKind.ROOK: _ROOK_RAYS,
    PieceKind.QUEEN: _QUEEN_RAYS,
}


class MoveGenerator:
    """Answers movement questions about one :class:`Board`.

    :meth:`destinations` is pseudo-legal: it follows each piece's movement
    pattern and the board occupancy but ignores whether the mover's own king
    ends up in check. :meth:`legal_destinations` adds that filter by trying
    every candidate on a copy of the board. Squares that would fall off the
    board are never produced; generation does not raise.
    """

    __slots__ = ("_board", "_pos")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._pos = board.position

    @property
    def board(self) -> Board:
        return self._board

    # -- Destinations -------------------------------------------------------

    def destinations(self, piece: Piece) -> list[Coord]:
        """Pseudo-legal destination squares for *piece*."""
        kind = piece.kind
        if kind == PieceKind.PAWN:
            return self._gen_pawn(piece)
        if kind == PieceKind.KNIGHT:
            return self._gen_step(piece, _KNIGHT_TARGETS)
        if kind == PieceKind.KING:
            return self._gen_step(piece, _KING_TARGETS) + self._gen_castling(piece)
        return self._gen_sliding(piece, _SLIDER_RAYS[kind])

    def legal_destinations(self, piece: Piece) -> list[Coord]:
        """Destinations that do not leave *piece*'s own king in check.

        Castling is also refused out of check and through an attacked
        square.
        """
        color = piece.color
        legal: list[Coord] = []
        for dst in self.destinations(piece):
            if piece.kind == PieceKind.KING and abs(dst.file - piece.coord.file) == 2:
                step = 1 if dst.file > piece.coord.file else -1
                crossed = piece.coord.offset(step, 0)
                assert crossed is not None
                if self.is_in_check(color) or self.is_square_attacked(
                    crossed, color.opposite
                ):
                    continue
            trial = self._board.copy()
            trial.make_move(Move(color, piece.coord, dst, piece=piece))
            if not MoveGenerator(trial).is_in_check(color):
                legal.append(dst)
        return legal

    def has_legal_move(self, color: Color) -> bool:
        return any(self.legal_destinations(p) for p in self._pos.pieces(color))

    def check_after(
        self,
        piece: Piece,
        to_coord: Coord,
        promotion: PieceKind | None = None,
    ) -> Check | None:
        """Check annotation *piece* moving to *to_coord* would earn."""
        trial = self._board.copy()
        trial.make_move(
            Move(piece.color, piece.coord, to_coord, piece=piece, promotion=promotion)
        )
        after = MoveGenerator(trial)
        opponent = piece.color.opposite
        if not after.is_in_check(opponent):
            return None
        return Check.CHECK if after.has_legal_move(opponent) else Check.MATE

    def is_promotion(self, piece: Piece, to_coord: Coord) -> bool:
        """Whether *piece* moving to *to_coord* is a pawn reaching its last rank."""
        return piece.kind == PieceKind.PAWN and to_coord.rank == _LAST_RANK[piece.color]

    # -- Attack detection ---------------------------------------------------

    def attacked_coords(self, piece: Piece) -> list[Coord]:
        """Squares *piece* attacks, own-occupied ones included.

        Pawns attack both forward diagonals whatever stands there; the king
        attacks its neighbours only, never its castling squares.
        """
        sq = piece.coord
        kind = piece.kind
        if kind == PieceKind.PAWN:
            forward = _PAWN_FORWARD[piece.color]
            diagonals = (sq.offset(-1, forward), sq.offset(1, forward))
            return [c for c in diagonals if c is not None]
        if kind == PieceKind.KNIGHT:
            return list(_KNIGHT_TARGETS[sq.index])
        if kind == PieceKind.KING:
            return list(_KING_TARGETS[sq.index])

        attacked: list[Coord] = []
        for ray in _SLIDER_RAYS[kind][sq.index]:
            for to_sq in ray:
                attacked.append(to_sq)
                if self._pos.get_piece(to_sq) is not None:
                    break
        return attacked

    def attackers(self, coord: Coord, by_color: Color) -> list[Piece]:
        """Pieces of *by_color* whose attacked squares include *coord*."""
        return [
            piece
            for piece in self._pos.pieces(by_color)
            if coord in self.attacked_coords(piece)
        ]

    def is_square_attacked(self, coord: Coord, by_color: Color) -> bool:
        """Is *coord* attacked by any piece of *by_color*?"""
        pos = self._pos

        # A pawn attacking coord stands one rank behind it from its own side.
        behind = -_PAWN_FORWARD[by_color]
        for df in (-1, 1):
            sq = coord.offset(df, behind)
            if sq is not None:
                piece = pos.get_piece(sq)
                if piece is not None and piece.is_kind(PieceKind.PAWN, by_color):
                    return True

        for sq in _KNIGHT_TARGETS[coord.index]:
            piece = pos.get_piece(sq)
            if piece is not None and piece.is_kind(PieceKind.KNIGHT, by_color):
                return True

        for sq in _KING_TARGETS[coord.index]:
            piece = pos.get_piece(sq)
            if piece is not None and piece.is_kind(PieceKind.KING, by_color):
                return True

        for rays, kinds in (
            (_BISHOP_RAYS, (PieceKind.BISHOP, PieceKind.QUEEN)),
            (_ROOK_RAYS, (PieceKind.ROOK, PieceKind.QUEEN)),
        ):
            for ray in rays[coord.index]:
                for sq in ray:
                    piece = pos.get_piece(sq)
                    if piece is None:
                        continue
                    if piece.color == by_color and piece.kind in kinds:
                        return True
                    break

        return False

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent? False with no king."""
        king = self._pos.king(color)
        if king is None:
            return False
        return self.is_square_attacked(king.coord, color.opposite)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, piece: Piece) -> list[Coord]:
        pos = self._pos
        sq = piece.coord
        forward = _PAWN_FORWARD[piece.color]
        moves: list[Coord] = []

        one_step = sq.offset(0, forward)
        if one_step is not None and pos.is_empty(one_step):
            moves.append(one_step)
            if sq.rank == _PAWN_START_RANK[piece.color]:
                two_step = one_step.offset(0, forward)
                if two_step is not None and pos.is_empty(two_step):
                    moves.append(two_step)

        for df in (-1, 1):
            cap_sq = sq.offset(df, forward)
            if cap_sq is None:
                continue
            target = pos.get_piece(cap_sq)
            if target is not None:
                if target.color != piece.color:
                    moves.append(cap_sq)
            elif cap_sq == self._board.true_en_passant_coord:
                moves.append(cap_sq)
        return moves

    def _gen_step(
        self, piece: Piece, targets: tuple[tuple[Coord, ...], ...]
    ) -> list[Coord]:
        moves: list[Coord] = []
        for to_sq in targets[piece.coord.index]:
            target = self._pos.get_piece(to_sq)
            if target is None or target.color != piece.color:
                moves.append(to_sq)
        return moves

    def _gen_sliding(
        self, piece: Piece, rays: tuple[tuple[tuple[Coord, ...], ...], ...]
    ) -> list[Coord]:
        moves: list[Coord] = []
        for ray in rays[piece.coord.index]:
            for to_sq in ray:
                target = self._pos.get_piece(to_sq)
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.color != piece.color:
                    moves.append(to_sq)
                break
        return moves

    def _gen_castling(self, king: Piece) -> list[Coord]:
        color = king.color
        rank = _HOME_RANK[color]
        if king.coord != Coord(4, rank):
            return []

        pos = self._pos
        moves: list[Coord] = []
        # (kingside, rook file, files that must be empty, king destination file)
        for kingside, rook_file, between, dest_file in (
            (True, 7, (5, 6), 6),
            (False, 0, (1, 2, 3), 2),
        ):
            if not self._board.can_castle(color, kingside):
                continue
            rook = pos.get_piece(Coord(rook_file, rank))
            if rook is None or not rook.is_kind(PieceKind.ROOK, color):
                continue
            if all(pos.is_empty(Coord(f, rank)) for f in between):
                moves.append(Coord(dest_file, rank))
        return moves
