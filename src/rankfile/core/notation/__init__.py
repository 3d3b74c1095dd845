"""Notation package: FEN-family parsing and serialization."""

from rankfile.core.notation.fen import (
    STARTING_FEN,
    FenRecord,
    board_from_fen,
    game_from_fen,
    get_board_fen,
    get_castling_field,
    get_en_passant_field,
    get_fen,
    get_shredder_fen,
    get_x_en_passant_field,
    get_x_fen,
    parse_fen,
)

__all__ = [
    "STARTING_FEN",
    "FenRecord",
    "board_from_fen",
    "game_from_fen",
    "get_board_fen",
    "get_castling_field",
    "get_en_passant_field",
    "get_fen",
    "get_shredder_fen",
    "get_x_en_passant_field",
    "get_x_fen",
    "parse_fen",
]
