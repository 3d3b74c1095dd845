"""Tests for Board: castling rights, en-passant records and move application."""

import pytest

from rankfile.core.board import Board
from rankfile.core.coordinate import (
    A1,
    A8,
    C1,
    D1,
    D4,
    D5,
    E1,
    E2,
    E3,
    E4,
    E5,
    E7,
    E8,
    F1,
    G1,
    H1,
    H8,
    Coord,
)
from rankfile.core.enums import CastlingRights, Color, PieceKind, PositionKind, Variant
from rankfile.core.errors import InvalidMove
from rankfile.core.move import Move
from rankfile.core.piece import Piece


def _play(
    board: Board, src: Coord, dst: Coord, color: Color = Color.WHITE
) -> Piece | None:
    return board.make_move(Move(color, src, dst))


class TestBoardConstruction:
    def test_defaults(self) -> None:
        board = Board()
        assert board.castling == CastlingRights.ALL
        assert board.white_kingside and board.white_queenside
        assert board.black_kingside and board.black_queenside
        assert board.en_passant_coord is None
        assert board.true_en_passant_coord is None
        assert board.position_kind == PositionKind.MASK

    def test_variant_and_encoding(self, position_kind: PositionKind) -> None:
        board = Board(Variant.EMPTY, position_kind)
        assert board.position.pieces() == []
        assert board.position_kind == position_kind

    def test_position_views(self) -> None:
        board = Board()
        detached = board.get_position()
        detached.take_piece(E1)
        assert board.get_piece(E1) is not None

        board.position.take_piece(E1)
        assert board.get_piece(E1) is None


class TestCastlingRights:
    def test_revoke_single(self) -> None:
        board = Board()
        board.revoke_castling(CastlingRights.WHITE_QUEENSIDE)
        assert not board.white_queenside
        assert board.white_kingside
        assert board.can_castle(Color.BLACK, kingside=False)

    def test_revoke_is_permanent(self) -> None:
        board = Board()
        board.revoke_castling(CastlingRights.BLACK_BOTH)
        board.revoke_castling(CastlingRights.NONE)
        assert not board.black_kingside and not board.black_queenside


class TestEnPassantRecords:
    def test_nominal_only(self) -> None:
        board = Board()
        pawn = Piece(PieceKind.PAWN, Color.WHITE, E4)
        board.set_en_passant(E3, pawn)
        assert board.en_passant_coord == E3
        assert board.en_passant_piece == pawn
        assert board.true_en_passant_coord is None
        assert board.true_en_passant_piece is None

    def test_true_implies_nominal(self) -> None:
        board = Board()
        pawn = Piece(PieceKind.PAWN, Color.WHITE, E4)
        board.set_en_passant(E3, pawn, capturable=True)
        assert board.true_en_passant_coord == board.en_passant_coord == E3
        assert board.true_en_passant_piece == board.en_passant_piece == pawn

    def test_clear(self) -> None:
        board = Board()
        pawn = Piece(PieceKind.PAWN, Color.WHITE, E4)
        board.set_en_passant(E3, pawn, capturable=True)
        board.clear_en_passant()
        assert board.en_passant_coord is None
        assert board.en_passant_piece is None
        assert board.true_en_passant_coord is None


class TestMakeMove:
    def test_simple_move(self, standard_board: Board) -> None:
        assert _play(standard_board, Coord.parse("g1"), Coord.parse("f3")) is None
        assert standard_board.get_piece(Coord.parse("g1")) is None
        knight = standard_board.get_piece(Coord.parse("f3"))
        assert knight is not None and knight.kind == PieceKind.KNIGHT

    def test_capture_returns_piece(self, empty_board: Board) -> None:
        empty_board.put_piece(Piece(PieceKind.ROOK, Color.WHITE), D1)
        empty_board.put_piece(Piece(PieceKind.KNIGHT, Color.BLACK), D5)
        captured = _play(empty_board, D1, D5)
        assert captured == Piece(PieceKind.KNIGHT, Color.BLACK, D5)
        assert empty_board.get_piece(D5) == Piece(PieceKind.ROOK, Color.WHITE, D5)

    def test_no_piece_on_source(self) -> None:
        with pytest.raises(InvalidMove, match="no piece on e4"):
            _play(Board(), E4, E5)

    def test_double_step_without_neighbour(self, standard_board: Board) -> None:
        _play(standard_board, E2, E4)
        assert standard_board.en_passant_coord == E3
        assert standard_board.en_passant_piece == Piece(PieceKind.PAWN, Color.WHITE, E4)
        assert standard_board.true_en_passant_coord is None

    def test_double_step_beside_enemy_pawn(self, empty_board: Board) -> None:
        empty_board.put_piece(Piece(PieceKind.PAWN, Color.WHITE), E2)
        empty_board.put_piece(Piece(PieceKind.PAWN, Color.BLACK), D4)
        _play(empty_board, E2, E4)
        assert empty_board.true_en_passant_coord == E3
        assert empty_board.en_passant_coord == E3

    def test_en_passant_capture(self, empty_board: Board) -> None:
        empty_board.put_piece(Piece(PieceKind.PAWN, Color.WHITE), E2)
        empty_board.put_piece(Piece(PieceKind.PAWN, Color.BLACK), D4)
        _play(empty_board, E2, E4)
        captured = _play(empty_board, D4, E3, Color.BLACK)
        assert captured == Piece(PieceKind.PAWN, Color.WHITE, E4)
        assert empty_board.get_piece(E4) is None
        assert empty_board.get_piece(E3) == Piece(PieceKind.PAWN, Color.BLACK, E3)
        assert empty_board.en_passant_coord is None

    def test_any_other_move_clears_en_passant(self, standard_board: Board) -> None:
        _play(standard_board, E2, E4)
        _play(standard_board, Coord.parse("g8"), Coord.parse("f6"), Color.BLACK)
        assert standard_board.en_passant_coord is None

    def test_promotion_defaults_to_queen(self, empty_board: Board) -> None:
        empty_board.put_piece(Piece(PieceKind.PAWN, Color.WHITE), E7)
        _play(empty_board, E7, E8)
        assert empty_board.get_piece(E8) == Piece(PieceKind.QUEEN, Color.WHITE, E8)

    def test_underpromotion(self, empty_board: Board) -> None:
        empty_board.put_piece(Piece(PieceKind.PAWN, Color.BLACK), Coord.parse("b2"))
        b2, b1 = Coord.parse("b2"), Coord.parse("b1")
        empty_board.make_move(Move(Color.BLACK, b2, b1, promotion=PieceKind.KNIGHT))
        piece = empty_board.get_piece(Coord.parse("b1"))
        assert piece == Piece(PieceKind.KNIGHT, Color.BLACK, Coord.parse("b1"))

    def test_kingside_castle_moves_rook(self, empty_board: Board) -> None:
        empty_board.put_piece(Piece(PieceKind.KING, Color.WHITE), E1)
        empty_board.put_piece(Piece(PieceKind.ROOK, Color.WHITE), H1)
        _play(empty_board, E1, G1)
        assert empty_board.get_piece(G1) == Piece(PieceKind.KING, Color.WHITE, G1)
        assert empty_board.get_piece(F1) == Piece(PieceKind.ROOK, Color.WHITE, F1)
        assert empty_board.get_piece(H1) is None
        assert not empty_board.white_kingside and not empty_board.white_queenside

    def test_queenside_castle_moves_rook(self, empty_board: Board) -> None:
        empty_board.put_piece(Piece(PieceKind.KING, Color.WHITE), E1)
        empty_board.put_piece(Piece(PieceKind.ROOK, Color.WHITE), A1)
        _play(empty_board, E1, C1)
        assert empty_board.get_piece(D1) == Piece(PieceKind.ROOK, Color.WHITE, D1)
        assert empty_board.get_piece(A1) is None

    def test_rook_move_revokes_one_side(self, empty_board: Board) -> None:
        empty_board.put_piece(Piece(PieceKind.ROOK, Color.BLACK), A8)
        _play(empty_board, A8, Coord.parse("a5"), Color.BLACK)
        assert not empty_board.black_queenside
        assert empty_board.black_kingside

    def test_rook_captured_on_corner_revokes(self, empty_board: Board) -> None:
        empty_board.put_piece(Piece(PieceKind.ROOK, Color.BLACK), H8)
        empty_board.put_piece(Piece(PieceKind.BISHOP, Color.WHITE), A1)
        _play(empty_board, A1, H8)
        assert not empty_board.black_kingside
        assert not empty_board.white_queenside


class TestBoardCopy:
    def test_copy_is_independent(self, standard_board: Board) -> None:
        _play(standard_board, E2, E4)
        clone = standard_board.copy()
        assert clone.position == standard_board.position
        assert clone.en_passant_coord == E3
        assert clone.position_kind == standard_board.position_kind

        _play(clone, Coord.parse("e7"), E5, Color.BLACK)
        assert standard_board.get_piece(Coord.parse("e7")) is not None
        assert standard_board.en_passant_coord == E3
