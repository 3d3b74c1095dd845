"""Tests for Piece."""

import pytest

from rankfile.core.coordinate import A1, E1, E4
from rankfile.core.enums import Color, PieceKind
from rankfile.core.errors import InvalidPiece
from rankfile.core.piece import Piece


class TestPieceChars:
    @pytest.mark.parametrize(
        ("char", "kind", "color"),
        [
            ("K", PieceKind.KING, Color.WHITE),
            ("q", PieceKind.QUEEN, Color.BLACK),
            ("N", PieceKind.KNIGHT, Color.WHITE),
            ("p", PieceKind.PAWN, Color.BLACK),
        ],
    )
    def test_from_char(self, char: str, kind: PieceKind, color: Color) -> None:
        piece = Piece.from_char(char, E4)
        assert (piece.kind, piece.color, piece.coord) == (kind, color, E4)
        assert str(piece) == char

    @pytest.mark.parametrize("char", ["x", "", "KK", "1"])
    def test_from_char_rejects(self, char: str) -> None:
        with pytest.raises(InvalidPiece, match="is not one of"):
            Piece.from_char(char)

    def test_default_coord(self) -> None:
        assert Piece.from_char("R").coord == A1


class TestPieceDisplay:
    def test_symbol(self) -> None:
        assert Piece(PieceKind.KNIGHT, Color.BLACK).symbol == "♞"
        assert Piece(PieceKind.KING, Color.WHITE).symbol == "♔"

    def test_text(self) -> None:
        assert Piece(PieceKind.KING, Color.WHITE).text == "White King"
        assert Piece(PieceKind.PAWN, Color.BLACK).text == "Black Pawn"


class TestPieceHelpers:
    def test_with_coord(self) -> None:
        king = Piece(PieceKind.KING, Color.WHITE, E1)
        moved = king.with_coord(E4)
        assert moved.coord == E4
        assert king.coord == E1
        assert king.with_coord(E1) is king

    def test_equality_includes_coord(self) -> None:
        assert Piece(PieceKind.ROOK, Color.WHITE, A1) != Piece(
            PieceKind.ROOK, Color.WHITE, E1
        )

    def test_is_kind(self) -> None:
        pawn = Piece(PieceKind.PAWN, Color.BLACK)
        assert pawn.is_kind(PieceKind.PAWN)
        assert pawn.is_kind(PieceKind.PAWN, Color.BLACK)
        assert not pawn.is_kind(PieceKind.PAWN, Color.WHITE)

    def test_immutable(self) -> None:
        piece = Piece(PieceKind.QUEEN, Color.WHITE)
        with pytest.raises(AttributeError):
            piece.kind = PieceKind.KING  # type: ignore[misc]
