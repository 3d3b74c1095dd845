"""Notations that can be selected but are not implemented yet."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rankfile.core.errors import NotationNotImplemented
from rankfile.core.parser.base import Parser

if TYPE_CHECKING:
    from rankfile.core.coordinate import Coord
    from rankfile.core.enums import Color
    from rankfile.core.interfaces import BoardSource
    from rankfile.core.move import Move


class UnimplementedParser(Parser):
    """Validates the input shape, then raises :class:`NotationNotImplemented`."""

    __slots__ = ()

    def _parse(self, text: str, to_move: Color) -> Move:
        raise NotationNotImplemented(f"{self.name()} is not implemented")

    def generate_move_from_board_coordinates(
        self, game: BoardSource, from_coord: Coord, to_coord: Coord
    ) -> str:
        raise NotationNotImplemented(f"{self.name()} is not implemented")


class CoordinateParser(UnimplementedParser):
    __slots__ = ()
    NAME = "Coordinate Parser"
    EXAMPLES = ("e2-e4", "g1-f3")


class DescriptiveParser(UnimplementedParser):
    __slots__ = ()
    NAME = "Descriptive Parser"
    EXAMPLES = ("P-K4", "N-KB3")


class LongAlgebraicParser(UnimplementedParser):
    __slots__ = ()
    NAME = "Long Algebraic Parser"
    EXAMPLES = ("e2-e4", "Ng1-f3", "Bf1xb5")


class ReversibleAlgebraicParser(UnimplementedParser):
    __slots__ = ()
    NAME = "Reversible Algebraic Parser"
    EXAMPLES = ("e2-e4", "Bf1xNb5")


class SmithParser(UnimplementedParser):
    __slots__ = ()
    NAME = "Smith Parser"
    EXAMPLES = ("e2e4", "b5c6n")


class ConciseReversibleParser(UnimplementedParser):
    __slots__ = ()
    NAME = "Concise Reversible Parser"
    EXAMPLES = ("e24", "Nf3", "Bb5xN")
