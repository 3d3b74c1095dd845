"""Move-notation parsers and the closed set of engines that select them."""

from __future__ import annotations

from enum import Enum, auto

from rankfile.core.enums import Color
from rankfile.core.parser.algebraic import AlgebraicParser
from rankfile.core.parser.base import Parser
from rankfile.core.parser.iccf import ICCFParser
from rankfile.core.parser.placeholders import (
    ConciseReversibleParser,
    CoordinateParser,
    DescriptiveParser,
    LongAlgebraicParser,
    ReversibleAlgebraicParser,
    SmithParser,
    UnimplementedParser,
)


class ParserEngine(Enum):
    """Every supported notation."""

    ALGEBRAIC = auto()
    CONCISE_REVERSIBLE = auto()
    COORDINATE = auto()
    DESCRIPTIVE = auto()
    ICCF = auto()
    LONG_ALGEBRAIC = auto()
    REVERSIBLE_ALGEBRAIC = auto()
    SMITH = auto()

    @property
    def parser_class(self) -> type[Parser]:
        return _PARSERS[self]

    @property
    def is_implemented(self) -> bool:
        return not issubclass(self.parser_class, UnimplementedParser)

    def new(self, to_move: Color = Color.WHITE) -> Parser:
        """A parser for this notation, remembering *to_move*."""
        return _PARSERS[self](to_move)


_PARSERS: dict[ParserEngine, type[Parser]] = {
    ParserEngine.ALGEBRAIC: AlgebraicParser,
    ParserEngine.CONCISE_REVERSIBLE: ConciseReversibleParser,
    ParserEngine.COORDINATE: CoordinateParser,
    ParserEngine.DESCRIPTIVE: DescriptiveParser,
    ParserEngine.ICCF: ICCFParser,
    ParserEngine.LONG_ALGEBRAIC: LongAlgebraicParser,
    ParserEngine.REVERSIBLE_ALGEBRAIC: ReversibleAlgebraicParser,
    ParserEngine.SMITH: SmithParser,
}

__all__ = [
    "AlgebraicParser",
    "ConciseReversibleParser",
    "CoordinateParser",
    "DescriptiveParser",
    "ICCFParser",
    "LongAlgebraicParser",
    "Parser",
    "ParserEngine",
    "ReversibleAlgebraicParser",
    "SmithParser",
    "UnimplementedParser",
]
