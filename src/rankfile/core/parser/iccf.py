"""ICCF numeric notation, e.g. ``5254`` for e2-e4."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rankfile.core.coordinate import Coord, validate_move_coords
from rankfile.core.errors import InvalidMove
from rankfile.core.move import Move
from rankfile.core.parser.base import Parser

if TYPE_CHECKING:
    from rankfile.core.enums import Color
    from rankfile.core.interfaces import BoardSource


class ICCFParser(Parser):
    """Four digits: source file, source rank, destination file, destination rank.

    Files and ranks are numbered 1..8. Anything other than a digit is
    ignored, so ``52-54`` reads the same as ``5254``. Captures, promotions
    and checks are left for move resolution to fill in.
    """

    __slots__ = ()

    NAME = "ICCF Parser"
    EXAMPLES = ("5254", "5755", "7163", "2836", "6125")

    def _parse(self, text: str, to_move: Color) -> Move:
        digits = [int(ch) for ch in text if ch in "0123456789"]
        if len(digits) != 4:
            raise InvalidMove(
                f"{text!r} must contain exactly 4 digits, got length {len(digits)}"
            )

        from_file, from_rank, to_file, to_rank = (d - 1 for d in digits)
        from_coord = Coord(from_file, from_rank)
        to_coord = Coord(to_file, to_rank)
        validate_move_coords(from_coord, to_coord)
        return Move(to_move, from_coord, to_coord, input_move=text)

    def generate_move_from_board_coordinates(
        self, game: BoardSource, from_coord: Coord, to_coord: Coord
    ) -> str:
        if game.board.get_piece(from_coord) is None:
            raise InvalidMove(f"There is no piece on {from_coord}")
        validate_move_coords(from_coord, to_coord)
        return (
            f"{from_coord.file + 1}{from_coord.rank + 1}"
            f"{to_coord.file + 1}{to_coord.rank + 1}"
        )
