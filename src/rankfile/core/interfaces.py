"""Structural interfaces the notation layer reads game state through.

Parsers and FEN writers only need a board and a few counters, so they depend
on these protocols rather than on the concrete game class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from rankfile.core.board import Board
    from rankfile.core.enums import Color


class BoardSource(Protocol):
    """Anything holding a board and the side to move."""

    @property
    def board(self) -> Board: ...

    @property
    def to_move(self) -> Color: ...


class FenSource(BoardSource, Protocol):
    """A board source that also tracks the FEN move counters."""

    @property
    def half_move_clock(self) -> int: ...

    @property
    def move_counter(self) -> int: ...
