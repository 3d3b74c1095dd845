"""Core domain layer: squares, positions, boards, move rules and notation.

Quick start::

    from rankfile.core import Board, Coord, MoveGenerator, PositionKind, Variant

    board = Board(Variant.STANDARD, PositionKind.FLAT)
    gen = MoveGenerator(board)
    knight = board.get_piece(Coord.parse("g1"))
    print(gen.destinations(knight))
"""

from rankfile.core.board import Board
from rankfile.core.coordinate import (
    SQUARES,
    Coord,
    is_plausible_move,
    validate_move_coords,
)
from rankfile.core.enums import (
    Castling,
    CastlingRights,
    Check,
    Color,
    PieceKind,
    PositionKind,
    Variant,
)
from rankfile.core.errors import (
    ChessError,
    IndexOutOfRange,
    InvalidCoordinate,
    InvalidFen,
    InvalidFile,
    InvalidInput,
    InvalidMove,
    InvalidPiece,
    InvalidRank,
    InvalidTypeConversion,
    NotationNotImplemented,
)
from rankfile.core.move import Move
from rankfile.core.move_generator import MoveGenerator
from rankfile.core.notation import (
    STARTING_FEN,
    board_from_fen,
    get_fen,
    get_shredder_fen,
    get_x_fen,
)
from rankfile.core.parser import Parser, ParserEngine
from rankfile.core.piece import Piece
from rankfile.core.position import (
    EnumPosition,
    FlatPosition,
    GridPosition,
    MaskPosition,
    Position,
    new_position,
)

__all__ = [
    # Enums / flags
    "Castling",
    "CastlingRights",
    "Check",
    "Color",
    "PieceKind",
    "PositionKind",
    "Variant",
    # Errors
    "ChessError",
    "IndexOutOfRange",
    "InvalidCoordinate",
    "InvalidFen",
    "InvalidFile",
    "InvalidInput",
    "InvalidMove",
    "InvalidPiece",
    "InvalidRank",
    "InvalidTypeConversion",
    "NotationNotImplemented",
    # Squares
    "SQUARES",
    "Coord",
    "is_plausible_move",
    "validate_move_coords",
    # Domain objects
    "Board",
    "EnumPosition",
    "FlatPosition",
    "GridPosition",
    "MaskPosition",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "new_position",
    # Notation
    "STARTING_FEN",
    "Parser",
    "ParserEngine",
    "board_from_fen",
    "get_fen",
    "get_shredder_fen",
    "get_x_fen",
]
