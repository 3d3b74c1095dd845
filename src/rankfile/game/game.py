"""Game: the board plus the counters and parser needed to play moves on it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from rankfile.core.board import Board
from rankfile.core.coordinate import Coord
from rankfile.core.enums import Castling, Color, PieceKind, PositionKind, Variant
from rankfile.core.errors import InvalidMove
from rankfile.core.move import Move
from rankfile.core.move_generator import MoveGenerator
from rankfile.core.notation.fen import get_fen, get_shredder_fen, get_x_fen, parse_fen
from rankfile.core.parser import Parser, ParserEngine
from rankfile.core.piece import Piece

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GameConfig:
    """How a new game is set up.

    Args:
        variant: Starting layout.
        position_kind: Storage encoding of the board's position.
        parser_engine: Notation :meth:`Game.parse` reads.
    """

    variant: Variant = Variant.STANDARD
    position_kind: PositionKind = PositionKind.MASK
    parser_engine: ParserEngine = ParserEngine.ALGEBRAIC


class Game:
    """Holds exactly the state FEN describes plus the active parser.

    Moves go through three steps: :meth:`parse` reads the text,
    :meth:`resolve_move` completes it against the board and rejects illegal
    moves, :meth:`apply_move` plays it on a copy of the board and commits
    the copy.
    """

    __slots__ = (
        "config",
        "board",
        "to_move",
        "half_move_clock",
        "move_counter",
        "move_list",
        "captured_pieces",
        "parser",
        "_parser_engine",
    )

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.board = Board(self.config.variant, self.config.position_kind)
        self.to_move = Color.WHITE
        self.half_move_clock = 0
        self.move_counter = 1
        self.move_list: list[Move] = []
        self.captured_pieces: list[Piece] = []
        self._parser_engine = self.config.parser_engine
        self.parser: Parser = self._parser_engine.new(self.to_move)

    @classmethod
    def from_fen(
        cls, fen: str, config: GameConfig | None = None, *, x_fen: bool = False
    ) -> Game:
        """A game continuing from *fen*; the config's variant is ignored."""
        game = cls(config)
        record = parse_fen(fen, game.config.position_kind, x_fen=x_fen)
        game.board = record.board
        game.to_move = record.to_move
        game.half_move_clock = record.half_move_clock
        game.move_counter = record.move_counter
        game.parser.to_move = game.to_move
        return game

    # ── Parser selection ─────────────────────────────────────────────────

    @property
    def parser_engine(self) -> ParserEngine:
        return self._parser_engine

    def set_parser(self, engine: ParserEngine) -> None:
        self._parser_engine = engine
        self.parser = engine.new(self.to_move)
        _LOGGER.debug("Parser engine set to %s", engine.name)

    # ── Moves ────────────────────────────────────────────────────────────

    def parse(self, move_text: str) -> Move:
        """Read *move_text* with the active parser for the side to move."""
        return self.parser.parse(move_text, self.to_move)

    def resolve_move(self, move: Move) -> Move:
        """Complete *move* from the board, or raise :class:`InvalidMove`.

        Fills in the moving piece, its square, the captured piece, the
        promotion kind and the check annotation. Only moves that keep the
        mover's king safe are accepted.
        """
        if move.to_move != self.to_move:
            raise InvalidMove(f"It is {self.to_move.label}'s turn to move")
        to_coord = move.to_coord
        if to_coord is None:
            raise InvalidMove(f"{move.input_move!r} names no destination")

        gen = MoveGenerator(self.board)
        piece = self._find_mover(gen, move, to_coord)

        captured = self.board.get_piece(to_coord)
        if (
            captured is None
            and piece.kind == PieceKind.PAWN
            and piece.coord.file != to_coord.file
        ):
            captured = self.board.true_en_passant_piece
        if move.is_capture and captured is None:
            raise InvalidMove(
                f"{move.input_move!r}: there is nothing to capture on {to_coord}"
            )

        promotion = move.promotion
        if gen.is_promotion(piece, to_coord):
            promotion = promotion or PieceKind.QUEEN
        elif promotion is not None:
            raise InvalidMove(
                f"{move.input_move!r}: {piece.text} cannot promote on {to_coord}"
            )

        castling: Castling | None = None
        if piece.kind == PieceKind.KING and abs(to_coord.file - piece.coord.file) == 2:
            # Notations that name the piece spell castling out as O-O / O-O-O.
            if move.castling is None and move.piece_kind is not None:
                raise InvalidMove(
                    f"{move.input_move!r}: castling must be written as O-O or O-O-O"
                )
            kingside = to_coord.file > piece.coord.file
            castling = Castling.KINGSIDE if kingside else Castling.QUEENSIDE

        return replace(
            move,
            from_coord=piece.coord,
            piece=piece,
            piece_kind=piece.kind,
            captured=captured,
            is_capture=captured is not None,
            promotion=promotion,
            check=gen.check_after(piece, to_coord, promotion),
            castling=castling,
        )

    def _find_mover(self, gen: MoveGenerator, move: Move, to_coord: Coord) -> Piece:
        color = move.to_move
        text = move.input_move

        if move.from_coord is not None:
            piece = self.board.get_piece(move.from_coord)
            if piece is None:
                raise InvalidMove(f"There is no piece on {move.from_coord}")
            if piece.color != color:
                raise InvalidMove(
                    f"{piece.text} on {piece.coord} is not {color.label}'s"
                )
            if move.piece_kind is not None and piece.kind != move.piece_kind:
                raise InvalidMove(
                    f"{text!r}: {piece.coord} holds a {piece.kind.label}, "
                    f"not a {move.piece_kind.label}"
                )
            if to_coord not in gen.legal_destinations(piece):
                raise InvalidMove(
                    f"{piece.text} cannot move from {piece.coord} to {to_coord}"
                )
            return piece

        kind = move.piece_kind if move.piece_kind is not None else PieceKind.PAWN
        candidates = [
            p
            for p in self.board.position.pieces(color, kind)
            if (move.from_file is None or p.coord.file == move.from_file)
            and (kind != PieceKind.PAWN or self._pawn_file_matches(move, p, to_coord))
            and (move.from_rank is None or p.coord.rank == move.from_rank)
            and to_coord in gen.legal_destinations(p)
        ]
        if not candidates:
            raise InvalidMove(
                f"{text!r}: no {color.label} {kind.label} can reach {to_coord}"
            )
        if len(candidates) > 1:
            squares = ", ".join(str(p.coord) for p in candidates)
            raise InvalidMove(f"{text!r} is ambiguous between {squares}")
        return candidates[0]

    @staticmethod
    def _pawn_file_matches(move: Move, pawn: Piece, to_coord: Coord) -> bool:
        """Pawns stay on their file unless the text names a capturing file."""
        if move.from_file is None:
            return pawn.coord.file == to_coord.file
        return pawn.coord.file != to_coord.file

    def apply_move(self, move: Move | str) -> Move:
        """Resolve and play *move*; return the resolved move.

        The board is only replaced once the move has been played in full on
        a copy, so a rejected move leaves the game untouched.
        """
        if isinstance(move, str):
            move = self.parse(move)
        try:
            resolved = self.resolve_move(move)
        except InvalidMove as exc:
            _LOGGER.debug("Rejected move %r: %s", move.input_move, exc.reason)
            raise

        board = self.board.copy()
        captured = board.make_move(resolved)
        assert captured == resolved.captured, "board and resolution disagree on capture"
        self.board = board

        if resolved.kind == PieceKind.PAWN or captured is not None:
            self.half_move_clock = 0
        else:
            self.half_move_clock += 1
        if self.to_move == Color.BLACK:
            self.move_counter += 1

        self.move_list.append(resolved)
        if captured is not None:
            self.captured_pieces.append(captured)
        self.to_move = self.to_move.opposite
        self.parser.to_move = self.to_move

        _LOGGER.debug("Applied %s", resolved.text)
        return resolved

    def generate_move_text(self, from_coord: Coord, to_coord: Coord) -> str:
        """The move between two squares, written in the active notation."""
        return self.parser.generate_move_from_board_coordinates(
            self, from_coord, to_coord
        )

    # ── FEN ──────────────────────────────────────────────────────────────

    def get_fen(self) -> str:
        return get_fen(self)

    def get_x_fen(self) -> str:
        return get_x_fen(self)

    def get_shredder_fen(self) -> str:
        return get_shredder_fen(self)

    def __str__(self) -> str:
        return self.board.to_string(self.to_move)

    def __repr__(self) -> str:
        return f"Game({self.get_fen()!r})"
