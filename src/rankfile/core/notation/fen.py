"""FEN, X-FEN and Shredder-FEN parsing and serialization.

The dialects share every field except en passant: standard FEN writes the
square a pawn skipped after any double step, X-FEN only when an en-passant
capture is actually available.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rankfile.core.board import Board
from rankfile.core.coordinate import Coord
from rankfile.core.enums import CastlingRights, Color, PieceKind, PositionKind, Variant
from rankfile.core.errors import ChessError, InvalidFen
from rankfile.core.piece import Piece
from rankfile.core.position import new_position

if TYPE_CHECKING:
    from rankfile.core.interfaces import FenSource
    from rankfile.game.game import Game, GameConfig

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)


@dataclass(slots=True)
class FenRecord:
    """Everything a FEN string describes."""

    board: Board
    to_move: Color = Color.WHITE
    half_move_clock: int = 0
    move_counter: int = 1


# ── Serialisation ───────────────────────────────────────────────────────────


def get_board_fen(board: Board) -> str:
    """Piece placement field, rank 8 first."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board.get_piece(Coord(file, rank))
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def get_castling_field(board: Board) -> str:
    """Held rights in ``KQkq`` order; empty when none remain."""
    return "".join(ch for ch, right in _CASTLING_CHARS if board.castling & right)


def get_en_passant_field(board: Board) -> str:
    coord = board.en_passant_coord
    return str(coord) if coord is not None else "-"


def get_x_en_passant_field(board: Board) -> str:
    coord = board.true_en_passant_coord
    return str(coord) if coord is not None else "-"


def _join(source: FenSource, en_passant: str) -> str:
    board = source.board
    side = "w" if source.to_move == Color.WHITE else "b"
    castling = get_castling_field(board) or "-"
    return (
        f"{get_board_fen(board)} {side} {castling} {en_passant} "
        f"{source.half_move_clock} {source.move_counter}"
    )


def get_fen(source: FenSource) -> str:
    """Standard FEN; the en-passant field is the nominal target."""
    return _join(source, get_en_passant_field(source.board))


def get_x_fen(source: FenSource) -> str:
    """X-FEN; the en-passant field is only set when a capture is possible."""
    return _join(source, get_x_en_passant_field(source.board))


def get_shredder_fen(source: FenSource) -> str:
    """Shredder-FEN, currently written exactly like standard FEN."""
    # TODO: write castling rights as rook files ("HAha") instead of KQkq.
    return _join(source, get_en_passant_field(source.board))


# ── Parsing ─────────────────────────────────────────────────────────────────


def parse_fen(
    fen: str,
    position_kind: PositionKind = PositionKind.MASK,
    *,
    x_fen: bool = False,
) -> FenRecord:
    """Parse a FEN string.

    Standard FEN only names the skipped square, so whether the capture is
    really available is worked out from the pawns beside it. With *x_fen*
    the field is taken as the capturable target.

    Raises:
        InvalidFen: Any field is malformed.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise InvalidFen(f"{fen!r} needs 4 to 6 fields")

    placement, side_part, castling_part, ep_part = parts[:4]
    position = new_position(position_kind, Variant.EMPTY)

    ranks = placement.split("/")
    if len(ranks) != 8:
        raise InvalidFen(f"{placement!r} must contain 8 ranks")
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in "0123456789":
                step = int(ch)
                if not (1 <= step <= 8):
                    raise InvalidFen(f"{ch!r} is not an empty-square count")
                file += step
            else:
                if file >= 8:
                    raise InvalidFen(f"{rank_text!r} is wider than 8 squares")
                coord = Coord(file, rank)
                try:
                    position.put_piece(Piece.from_char(ch, coord), coord)
                except ChessError as exc:
                    raise InvalidFen(exc.reason) from None
                file += 1
        if file != 8:
            raise InvalidFen(f"{rank_text!r} does not cover 8 squares")

    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise InvalidFen(f"{side_part!r} is not a side to move")

    castling = CastlingRights.NONE
    if castling_part != "-":
        rights = dict(_CASTLING_CHARS)
        seen: set[str] = set()
        for ch in castling_part:
            right = rights.get(ch)
            if right is None or ch in seen:
                raise InvalidFen(f"{castling_part!r} is not a castling field")
            seen.add(ch)
            castling |= right

    board = Board(position=position, castling=castling)

    if ep_part != "-":
        try:
            ep = Coord.parse(ep_part)
        except ChessError:
            raise InvalidFen(f"{ep_part!r} is not an en-passant square") from None
        # The pawn that just moved belongs to the side not on move.
        forward = -1 if side == Color.WHITE else 1
        if ep.rank != (5 if side == Color.WHITE else 2):
            raise InvalidFen(f"{ep_part!r} is not an en-passant square for {side}")
        pawn_coord = ep.offset(0, forward)
        assert pawn_coord is not None
        pawn = board.get_piece(pawn_coord)
        if pawn is None or not pawn.is_kind(PieceKind.PAWN, side.opposite):
            raise InvalidFen(f"No pawn on {pawn_coord} for en passant on {ep}")
        capturable = x_fen or board.is_en_passant_capturable(pawn)
        board.set_en_passant(ep, pawn, capturable=capturable)

    try:
        halfmove = int(parts[4]) if len(parts) > 4 else 0
        fullmove = int(parts[5]) if len(parts) > 5 else 1
    except ValueError:
        raise InvalidFen(f"{' '.join(parts[4:])!r} are not move counters") from None
    if halfmove < 0:
        raise InvalidFen(f"{halfmove} is not a half-move clock")
    if fullmove < 1:
        raise InvalidFen(f"{fullmove} is not a full-move number")

    return FenRecord(board, side, halfmove, fullmove)


def board_from_fen(
    fen: str,
    position_kind: PositionKind = PositionKind.MASK,
    *,
    x_fen: bool = False,
) -> Board:
    return parse_fen(fen, position_kind, x_fen=x_fen).board


def game_from_fen(
    fen: str, config: GameConfig | None = None, *, x_fen: bool = False
) -> Game:
    """A game continuing from *fen*."""
    from rankfile.game.game import Game

    return Game.from_fen(fen, config, x_fen=x_fen)
