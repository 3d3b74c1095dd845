"""Typed errors raised by the core layer."""

from __future__ import annotations


class ChessError(ValueError):
    """Base error for malformed chess input.

    The message is the bare reason; ``str()`` renders it with the error kind,
    e.g. ``Error (Invalid Move): e2 and e2 are the same square.``
    """

    kind = "Unknown"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return f"Error ({self.kind}): {self.reason}."


class InvalidCoordinate(ChessError):
    kind = "Invalid Coordinate"


class InvalidFile(InvalidCoordinate):
    kind = "Invalid File"


class InvalidRank(InvalidCoordinate):
    kind = "Invalid Rank"


class IndexOutOfRange(InvalidCoordinate):
    kind = "Index Out Of Range"


class InvalidTypeConversion(InvalidCoordinate):
    kind = "Invalid Type Conversion"


class InvalidPiece(ChessError):
    kind = "Invalid Piece"


class InvalidMove(ChessError):
    """The move text or the move itself cannot be played."""

    kind = "Invalid Move"


class InvalidInput(ChessError):
    """Move text is empty or contains whitespace."""

    kind = "Invalid Input"


class NotationNotImplemented(ChessError, NotImplementedError):
    """Raised by notation engines that exist only as placeholders."""

    kind = "Not Implemented"


class InvalidFen(ChessError):
    kind = "Invalid FEN"
