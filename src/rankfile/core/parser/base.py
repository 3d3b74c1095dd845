"""Parser contract shared by every move notation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from rankfile.core.enums import Color
from rankfile.core.errors import InvalidInput

if TYPE_CHECKING:
    from rankfile.core.coordinate import Coord
    from rankfile.core.interfaces import BoardSource
    from rankfile.core.move import Move


class Parser(ABC):
    """Turns move text into a :class:`Move`, and board squares back into text.

    A parser remembers the side it was created for; :meth:`parse` may
    override it for a single call. Parsers hold no other state.
    """

    __slots__ = ("to_move",)

    NAME: ClassVar[str]
    EXAMPLES: ClassVar[tuple[str, ...]] = ()

    def __init__(self, to_move: Color = Color.WHITE) -> None:
        self.to_move = to_move

    def name(self) -> str:
        return self.NAME

    def example_moves(self) -> tuple[str, ...]:
        return self.EXAMPLES

    def parse(self, move_text: str, to_move: Color | None = None) -> Move:
        """Parse *move_text* for *to_move* (default: the parser's own side).

        Raises:
            InvalidInput: The text is empty or contains whitespace.
            InvalidMove: The text does not follow the notation.
        """
        text = self.trim_and_check_whitespace(move_text)
        return self._parse(text, self.to_move if to_move is None else to_move)

    @abstractmethod
    def _parse(self, text: str, to_move: Color) -> Move: ...

    @abstractmethod
    def generate_move_from_board_coordinates(
        self, game: BoardSource, from_coord: Coord, to_coord: Coord
    ) -> str:
        """Write the move between two squares of *game*'s board in this notation."""

    @staticmethod
    def trim_and_check_whitespace(move_text: str) -> str:
        text = move_text.strip()
        if not text:
            raise InvalidInput("Input move cannot be empty")
        if any(ch.isspace() for ch in text):
            raise InvalidInput("Input move contains whitespace")
        return text

    def __repr__(self) -> str:
        return f"{type(self).__name__}(to_move={self.to_move.name})"
