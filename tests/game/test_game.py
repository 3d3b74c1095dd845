"""Tests for Game: move resolution, application and bookkeeping."""

import logging

import pytest

from rankfile.core.coordinate import C1, D1, E1, E2, E4, E5, E7, F1, G1, Coord
from rankfile.core.enums import (
    Castling,
    CastlingRights,
    Check,
    Color,
    PieceKind,
    PositionKind,
    Variant,
)
from rankfile.core.errors import InvalidInput, InvalidMove
from rankfile.core.move import Move
from rankfile.core.notation import STARTING_FEN
from rankfile.core.parser import AlgebraicParser, ICCFParser, ParserEngine
from rankfile.core.piece import Piece
from rankfile.game import Game, GameConfig


def _play(game: Game, *moves: str) -> list[Move]:
    return [game.apply_move(text) for text in moves]


class TestNewGame:
    def test_defaults(self) -> None:
        game = Game()
        assert game.to_move == Color.WHITE
        assert (game.half_move_clock, game.move_counter) == (0, 1)
        assert game.move_list == []
        assert game.captured_pieces == []
        assert isinstance(game.parser, AlgebraicParser)
        assert game.parser_engine == ParserEngine.ALGEBRAIC
        assert game.get_fen() == STARTING_FEN

    def test_config(self) -> None:
        config = GameConfig(
            variant=Variant.EMPTY,
            position_kind=PositionKind.GRID,
            parser_engine=ParserEngine.ICCF,
        )
        game = Game(config)
        assert game.board.position_kind == PositionKind.GRID
        assert game.board.position.pieces() == []
        assert isinstance(game.parser, ICCFParser)

    def test_str_shows_board(self) -> None:
        game = Game()
        assert str(game) == game.board.to_string(Color.WHITE)


class TestApplyMove:
    def test_pawn_push(self) -> None:
        game = Game()
        move = game.apply_move("e4")
        assert move.is_resolved
        assert move.from_coord == E2
        assert move.piece == Piece(PieceKind.PAWN, Color.WHITE, E2)
        assert game.board.get_piece(E4) == Piece(PieceKind.PAWN, Color.WHITE, E4)
        assert game.to_move == Color.BLACK
        assert game.parser.to_move == Color.BLACK
        assert game.move_list == [move]

    def test_clocks(self) -> None:
        game = Game()
        _play(game, "e4", "e5")
        assert (game.half_move_clock, game.move_counter) == (0, 2)
        _play(game, "Nf3", "Nc6")
        assert (game.half_move_clock, game.move_counter) == (2, 3)
        _play(game, "Bb5")
        assert (game.half_move_clock, game.move_counter) == (3, 3)

    def test_capture(self) -> None:
        game = Game()
        *_, capture = _play(game, "e4", "d5", "exd5")
        assert capture.is_capture
        d5 = Coord.parse("d5")
        assert capture.captured == Piece(PieceKind.PAWN, Color.BLACK, d5)
        assert game.captured_pieces == [capture.captured]
        assert game.half_move_clock == 0

    def test_unmarked_capture_accepted(self) -> None:
        game = Game()
        *_, capture = _play(game, "e4", "d5", "Qh5", "Nf6", "Qd5")
        assert capture.captured is not None
        assert capture.is_capture

    def test_en_passant(self) -> None:
        game = Game()
        _play(game, "e4", "a6", "e5", "d5")
        assert game.board.true_en_passant_coord == Coord.parse("d6")
        move = game.apply_move("exd6")
        d5 = Coord.parse("d5")
        assert move.captured == Piece(PieceKind.PAWN, Color.BLACK, d5)
        assert game.board.get_piece(d5) is None
        assert game.captured_pieces == [move.captured]

    def test_en_passant_expires(self) -> None:
        game = Game()
        _play(game, "e4", "a6", "e5", "d5", "Nf3", "h6")
        with pytest.raises(InvalidMove):
            game.apply_move("exd6")

    def test_kingside_castling(self) -> None:
        game = Game()
        *_, castle = _play(game, "e4", "e5", "Nf3", "Nc6", "Bc4", "Bc5", "O-O")
        assert castle.castling == Castling.KINGSIDE
        assert castle.text == "White King castles King side"
        assert game.board.get_piece(G1) == Piece(PieceKind.KING, Color.WHITE, G1)
        assert game.board.get_piece(F1) == Piece(PieceKind.ROOK, Color.WHITE, F1)
        assert not game.board.castling & CastlingRights.WHITE_BOTH
        black = CastlingRights.BLACK_BOTH
        assert game.board.castling & black == black

    def test_queenside_castling_by_squares(self) -> None:
        game = Game.from_fen("r3k3/8/8/8/8/8/8/R3K3 w Qq - 0 1")
        game.set_parser(ParserEngine.ICCF)
        move = game.apply_move("5131")
        assert move.castling == Castling.QUEENSIDE
        assert game.board.get_piece(C1) == Piece(PieceKind.KING, Color.WHITE, C1)
        assert game.board.get_piece(D1) == Piece(PieceKind.ROOK, Color.WHITE, D1)

    def test_castling_through_check_rejected(self) -> None:
        game = Game.from_fen("4k3/8/8/8/8/8/5r2/4K2R w K - 0 1")
        with pytest.raises(InvalidMove):
            game.apply_move("O-O")

    def test_promotion_defaults_to_queen(self) -> None:
        game = Game.from_fen("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        move = game.apply_move("a8")
        assert move.promotion == PieceKind.QUEEN
        assert move.check == Check.CHECK
        a8 = Coord.parse("a8")
        assert game.board.get_piece(a8) == Piece(PieceKind.QUEEN, Color.WHITE, a8)

    def test_underpromotion(self) -> None:
        game = Game.from_fen("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        move = game.apply_move("a8=N")
        assert move.promotion == PieceKind.KNIGHT
        assert move.check is None

    def test_iccf_game(self) -> None:
        game = Game(GameConfig(parser_engine=ParserEngine.ICCF))
        first, reply = _play(game, "5254", "5755")
        assert first.piece_kind == PieceKind.PAWN
        assert reply.to_move == Color.BLACK
        assert game.board.get_piece(E5) == Piece(PieceKind.PAWN, Color.BLACK, E5)
        assert game.board.en_passant_coord == Coord.parse("e6")

    def test_move_object(self) -> None:
        game = Game()
        move = game.apply_move(Move(Color.WHITE, E2, E4))
        assert move.piece_kind == PieceKind.PAWN
        assert game.to_move == Color.BLACK


class TestCheckAnnotation:
    def test_fools_mate(self) -> None:
        game = Game()
        *_, mate = _play(game, "f3", "e5", "g4", "Qh4#")
        assert mate.check == Check.MATE
        assert mate.is_checkmate
        assert mate.text == "Black Queen moves from d8 to h4 checkmate"

    def test_written_suffix_is_recomputed(self) -> None:
        game = Game()
        *_, mate = _play(game, "f3", "e5", "g4", "Qh4+")
        assert mate.check == Check.MATE

        game = Game()
        assert game.apply_move("Nf3#").check is None

    def test_check(self) -> None:
        game = Game()
        *_, check = _play(game, "e4", "f5", "Qh5")
        assert check.is_check
        assert check.text.endswith(" check")


class TestRejections:
    def test_ambiguous(self) -> None:
        game = Game.from_fen("4k3/8/8/8/8/8/4K3/R6R w - - 0 1")
        with pytest.raises(InvalidMove, match="ambiguous between a1, h1"):
            game.apply_move("Rd1")
        move = game.apply_move("Rhd1")
        assert move.from_coord == Coord.parse("h1")

    def test_unreachable(self) -> None:
        with pytest.raises(InvalidMove, match="no White Knight can reach f4"):
            Game().apply_move("Nf4")

    def test_wrong_side(self) -> None:
        game = Game()
        with pytest.raises(InvalidMove, match="White's turn"):
            game.apply_move(Move(Color.BLACK, E7, E5))

    def test_opponent_piece(self) -> None:
        game = Game(GameConfig(parser_engine=ParserEngine.ICCF))
        with pytest.raises(InvalidMove, match="is not White's"):
            game.apply_move("5755")

    def test_empty_source(self) -> None:
        game = Game(GameConfig(parser_engine=ParserEngine.ICCF))
        with pytest.raises(InvalidMove, match="no piece on e4"):
            game.apply_move("5455")

    def test_pinned_piece(self) -> None:
        game = Game.from_fen("4k3/4r3/8/8/8/8/4N3/4K3 w - - 0 1")
        with pytest.raises(InvalidMove):
            game.apply_move("Nf4")
        game.set_parser(ParserEngine.ICCF)
        with pytest.raises(InvalidMove, match="cannot move"):
            game.apply_move("5264")

    def test_nothing_to_capture(self) -> None:
        with pytest.raises(InvalidMove, match="nothing to capture"):
            Game().apply_move("Nxf3")

    def test_promotion_off_last_rank(self) -> None:
        move = Move(Color.WHITE, E2, E4, promotion=PieceKind.QUEEN)
        with pytest.raises(InvalidMove, match="cannot promote"):
            Game().apply_move(move)

    def test_bad_text(self) -> None:
        game = Game()
        with pytest.raises(InvalidInput):
            game.apply_move("")
        with pytest.raises(InvalidMove):
            game.apply_move("Zz9")

    def test_pawn_push_does_not_capture(self) -> None:
        game = Game.from_fen("4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1")
        with pytest.raises(InvalidMove, match="no White Pawn can reach d5"):
            game.apply_move("d5")
        assert game.board.get_piece(E4) == Piece(PieceKind.PAWN, Color.WHITE, E4)
        move = game.apply_move("exd5")
        assert move.captured == Piece(PieceKind.PAWN, Color.BLACK, Coord.parse("d5"))

    def test_pawn_capture_must_change_file(self) -> None:
        move = Move(Color.WHITE, to_coord=E4, piece_kind=PieceKind.PAWN, from_file=4)
        with pytest.raises(InvalidMove, match="no White Pawn can reach e4"):
            Game().apply_move(move)

    def test_king_two_squares_is_not_castling(self) -> None:
        fen = "4k3/8/8/8/8/8/8/4K2R w K - 0 1"
        game = Game.from_fen(fen)
        with pytest.raises(InvalidMove, match="O-O"):
            game.apply_move("Kg1")
        assert game.get_fen() == fen
        assert game.apply_move("O-O").castling == Castling.KINGSIDE

        game = Game.from_fen("4k3/8/8/8/8/8/8/R3K3 w Q - 0 1")
        with pytest.raises(InvalidMove, match="O-O-O"):
            game.apply_move("Kc1")

    def test_iccf_king_two_squares_castles(self) -> None:
        game = Game.from_fen("4k3/8/8/8/8/8/8/4K2R w K - 0 1")
        game.set_parser(ParserEngine.ICCF)
        move = game.apply_move("5171")
        assert move.castling == Castling.KINGSIDE
        assert game.board.get_piece(F1) == Piece(PieceKind.ROOK, Color.WHITE, F1)

    def test_state_untouched(self) -> None:
        game = Game()
        _play(game, "e4")
        fen = game.get_fen()
        for text in ("e4", "Ke7", "Nf4", "Qh4", "exd5"):
            with pytest.raises(InvalidMove):
                game.apply_move(text)
        assert game.get_fen() == fen
        assert len(game.move_list) == 1
        assert game.to_move == Color.BLACK


class TestParserSelection:
    def test_switch_mid_game(self) -> None:
        game = Game()
        game.apply_move("e4")
        game.set_parser(ParserEngine.ICCF)
        assert game.parser_engine == ParserEngine.ICCF
        assert isinstance(game.parser, ICCFParser)
        assert game.parser.to_move == Color.BLACK
        game.apply_move("5755")
        assert game.board.get_piece(E5) is not None

    def test_unimplemented_engine(self) -> None:
        game = Game()
        game.set_parser(ParserEngine.DESCRIPTIVE)
        with pytest.raises(NotImplementedError):
            game.apply_move("P-K4")
        assert game.move_list == []

    def test_generate_move_text(self) -> None:
        game = Game()
        g1, f3 = Coord.parse("g1"), Coord.parse("f3")
        assert game.generate_move_text(g1, f3) == "Nf3"
        game.set_parser(ParserEngine.ICCF)
        assert game.generate_move_text(g1, f3) == "7163"


class TestLogging:
    def test_applied_move_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="rankfile.game.game")
        Game().apply_move("e4")
        assert "Applied White Pawn moves from e2 to e4" in caplog.text

    def test_rejected_move_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="rankfile.game.game")
        with pytest.raises(InvalidMove):
            Game().apply_move("Ke2")
        assert "Rejected move 'Ke2'" in caplog.text


class TestFromFen:
    def test_position_kind_respected(self) -> None:
        config = GameConfig(position_kind=PositionKind.ENUM)
        game = Game.from_fen(STARTING_FEN, config)
        assert game.board.position_kind == PositionKind.ENUM
        assert game.board.get_piece(E1) == Piece(PieceKind.KING, Color.WHITE, E1)
        assert game.get_fen() == STARTING_FEN
