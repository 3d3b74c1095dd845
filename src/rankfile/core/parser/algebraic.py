"""Standard algebraic notation (SAN), e.g. ``Nbd7``, ``exd5``, ``e8=Q#``."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from rankfile.core.coordinate import FILE_NAMES, Coord
from rankfile.core.enums import Castling, Check, Color, PieceKind
from rankfile.core.errors import InvalidMove
from rankfile.core.move import Move
from rankfile.core.move_generator import MoveGenerator
from rankfile.core.parser.base import Parser

if TYPE_CHECKING:
    from rankfile.core.interfaces import BoardSource
    from rankfile.core.piece import Piece

_SAN_PIECE: dict[PieceKind, str] = {
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}
_SAN_PIECE_REV: dict[str, PieceKind] = {v: k for k, v in _SAN_PIECE.items()}

_SAN_RE = re.compile(
    r"""
    ^(?:
        (?P<castle>O-O(?:-O)?|0-0(?:-0)?)
      |
        (?P<piece>[KQRBN])?
        (?P<from_file>[a-h])?
        (?P<from_rank>[1-8])?
        (?P<capture>x)?
        (?P<to>[a-h][1-8])
        (?:=?(?P<promotion>[QRBN]))?
    )
    (?P<check>[+#])?
    [!?]*$
    """,
    re.VERBOSE,
)

_HOME_RANK: tuple[int, int] = (0, 7)
_LAST_RANK: tuple[int, int] = (7, 0)


class AlgebraicParser(Parser):
    """Parses SAN without looking at a board.

    The resulting move names the piece kind and destination plus whatever
    source hints the text gave; ``Game.resolve_move`` finds the piece.
    """

    __slots__ = ()

    NAME = "Algebraic Parser"
    EXAMPLES = ("e4", "Nf3", "exd5", "Nbd7", "R1e2", "O-O", "O-O-O", "e8=Q+", "Qh4#")

    def _parse(self, text: str, to_move: Color) -> Move:
        match = _SAN_RE.match(text)
        if match is None:
            raise InvalidMove(f"{text!r} is not valid algebraic notation")

        check: Check | None = None
        if match["check"] == "+":
            check = Check.CHECK
        elif match["check"] == "#":
            check = Check.MATE

        if match["castle"] is not None:
            return self._castle_move(text, to_move, match["castle"], check)

        kind = _SAN_PIECE_REV[match["piece"]] if match["piece"] else PieceKind.PAWN
        to_coord = Coord.parse(match["to"])
        from_file = FILE_NAMES.index(match["from_file"]) if match["from_file"] else None
        from_rank = int(match["from_rank"]) - 1 if match["from_rank"] else None
        is_capture = match["capture"] is not None
        promotion = _SAN_PIECE_REV[match["promotion"]] if match["promotion"] else None

        if kind == PieceKind.PAWN:
            self._check_pawn_grammar(
                text, to_move, to_coord, from_file, from_rank, is_capture, promotion
            )
        elif promotion is not None:
            raise InvalidMove(f"{text!r}: only pawns can promote")

        from_coord = (
            Coord(from_file, from_rank)
            if from_file is not None and from_rank is not None
            else None
        )
        if from_coord == to_coord:
            raise InvalidMove(
                f"{text!r}: {from_coord} and {to_coord} are the same square"
            )

        return Move(
            to_move,
            from_coord=from_coord,
            to_coord=to_coord,
            piece_kind=kind,
            is_capture=is_capture,
            promotion=promotion,
            check=check,
            from_file=from_file,
            from_rank=from_rank,
            input_move=text,
        )

    @staticmethod
    def _castle_move(
        text: str, to_move: Color, token: str, check: Check | None
    ) -> Move:
        castling = Castling.QUEENSIDE if len(token) == 5 else Castling.KINGSIDE
        rank = _HOME_RANK[to_move]
        return Move(
            to_move,
            from_coord=Coord(4, rank),
            to_coord=Coord(6 if castling == Castling.KINGSIDE else 2, rank),
            piece_kind=PieceKind.KING,
            check=check,
            castling=castling,
            input_move=text,
        )

    @staticmethod
    def _check_pawn_grammar(
        text: str,
        to_move: Color,
        to_coord: Coord,
        from_file: int | None,
        from_rank: int | None,
        is_capture: bool,
        promotion: PieceKind | None,
    ) -> None:
        if is_capture:
            if from_file is None:
                raise InvalidMove(f"{text!r}: a pawn capture must name the source file")
            if abs(from_file - to_coord.file) != 1:
                raise InvalidMove(f"{text!r}: a pawn captures on an adjacent file")
        elif from_file is not None:
            raise InvalidMove(
                f"{text!r}: a pawn move without capture names no source file"
            )
        if from_rank is not None:
            raise InvalidMove(f"{text!r}: a pawn move names no source rank")
        if to_coord.rank == _HOME_RANK[to_move]:
            raise InvalidMove(f"{text!r}: a pawn cannot move to its own back rank")
        if promotion is not None and to_coord.rank != _LAST_RANK[to_move]:
            raise InvalidMove(f"{text!r}: a pawn promotes only on the last rank")

    # -- Board squares to SAN ------------------------------------------------

    def generate_move_from_board_coordinates(
        self, game: BoardSource, from_coord: Coord, to_coord: Coord
    ) -> str:
        board = game.board
        piece = board.get_piece(from_coord)
        if piece is None:
            raise InvalidMove(f"There is no piece on {from_coord}")

        gen = MoveGenerator(board)
        if to_coord not in gen.legal_destinations(piece):
            raise InvalidMove(
                f"{piece.text} cannot move from {from_coord} to {to_coord}"
            )

        if piece.kind == PieceKind.KING and abs(to_coord.file - from_coord.file) == 2:
            san = "O-O" if to_coord.file > from_coord.file else "O-O-O"
        else:
            is_capture = board.get_piece(to_coord) is not None or (
                piece.kind == PieceKind.PAWN and from_coord.file != to_coord.file
            )
            san = ""
            if piece.kind == PieceKind.PAWN:
                if is_capture:
                    san += from_coord.file_name
            else:
                san += _SAN_PIECE[piece.kind]
                san += self._disambiguation(gen, piece, to_coord)

            if is_capture:
                san += "x"
            san += str(to_coord)
            if gen.is_promotion(piece, to_coord):
                san += "=" + _SAN_PIECE[PieceKind.QUEEN]

        check = gen.check_after(piece, to_coord)
        if check == Check.MATE:
            san += "#"
        elif check == Check.CHECK:
            san += "+"
        return san

    @staticmethod
    def _disambiguation(gen: MoveGenerator, piece: Piece, to_coord: Coord) -> str:
        from_coord = piece.coord
        ambiguous = [
            p.coord
            for p in gen.board.position.pieces(piece.color, piece.kind)
            if p.coord != from_coord and to_coord in gen.legal_destinations(p)
        ]
        if not ambiguous:
            return ""
        same_file = any(c.file == from_coord.file for c in ambiguous)
        same_rank = any(c.rank == from_coord.rank for c in ambiguous)
        if not same_file:
            return from_coord.file_name
        if not same_rank:
            return from_coord.rank_name
        return str(from_coord)
