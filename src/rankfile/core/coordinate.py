"""Validated square coordinates.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from rankfile.core.errors import (
    IndexOutOfRange,
    InvalidCoordinate,
    InvalidFile,
    InvalidMove,
    InvalidRank,
    InvalidTypeConversion,
)

FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@total_ordering
@dataclass(frozen=True, slots=True)
class Coord:
    """Immutable (file, rank) pair, each in 0..7.

    Construction is the only validation point, so every ``Coord`` that exists
    is on the board.
    """

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not _is_index(self.file) or not _is_index(self.rank):
            raise InvalidTypeConversion(
                f"({self.file!r}, {self.rank!r}) cannot be converted to a coordinate"
            )
        if not 0 <= self.file <= 7:
            raise InvalidFile(f"{self.file} is an invalid file index")
        if not 0 <= self.rank <= 7:
            raise InvalidRank(f"{self.rank} is an invalid rank index")

    # ── Alternate constructors ───────────────────────────────────────────

    @classmethod
    def from_index(cls, index: int) -> Coord:
        """Create from a linear index 0..63."""
        if not _is_index(index):
            raise InvalidTypeConversion(f"{index!r} is not a square index")
        if not 0 <= index < 64:
            raise IndexOutOfRange(f"{index} is out of range (0..=63)")
        return SQUARES[index]

    @classmethod
    def parse(cls, name: str) -> Coord:
        """Parse a square name, e.g. ``'e4'``."""
        if not isinstance(name, str):
            raise InvalidCoordinate(f"{name!r} is not a square name")
        if len(name) != 2 or name[0] not in FILE_NAMES or name[1] not in RANK_NAMES:
            raise InvalidCoordinate(f"{name!r} is an invalid square name")
        return cls(FILE_NAMES.index(name[0]), RANK_NAMES.index(name[1]))

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def index(self) -> int:
        """Linear index ``rank * 8 + file``."""
        return self.rank * 8 + self.file

    @property
    def file_name(self) -> str:
        return FILE_NAMES[self.file]

    @property
    def rank_name(self) -> str:
        return RANK_NAMES[self.rank]

    @property
    def is_light(self) -> bool:
        return (self.file + self.rank) % 2 == 1

    def offset(self, file_delta: int, rank_delta: int) -> Coord | None:
        """Neighbouring square, or ``None`` when it falls off the board."""
        file_idx = self.file + file_delta
        rank_idx = self.rank + rank_delta
        if 0 <= file_idx < 8 and 0 <= rank_idx < 8:
            return SQUARES[rank_idx * 8 + file_idx]
        return None

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Coord):
            return NotImplemented
        return self.index < other.index

    def __str__(self) -> str:
        return FILE_NAMES[self.file] + RANK_NAMES[self.rank]


SQUARES: tuple[Coord, ...] = tuple(Coord(idx % 8, idx // 8) for idx in range(64))


def is_plausible_move(from_coord: Coord, to_coord: Coord) -> bool:
    """Whether any piece could ever connect the two squares.

    True for distinct squares sharing a file, rank or diagonal, or a knight
    jump apart.
    """
    file_delta = abs(to_coord.file - from_coord.file)
    rank_delta = abs(to_coord.rank - from_coord.rank)
    if file_delta == 0 and rank_delta == 0:
        return False
    if file_delta == 0 or rank_delta == 0 or file_delta == rank_delta:
        return True
    return {file_delta, rank_delta} == {1, 2}


def validate_move_coords(from_coord: object, to_coord: object) -> None:
    """Raise :class:`InvalidMove` unless the pair can be a move's endpoints."""
    if not isinstance(from_coord, Coord) or not isinstance(to_coord, Coord):
        raise InvalidMove(f"({from_coord!r}, {to_coord!r}) is not a pair of squares")
    if from_coord == to_coord:
        raise InvalidMove(f"{from_coord} and {to_coord} are the same square")
    if not is_plausible_move(from_coord, to_coord):
        raise InvalidMove(f"No piece can move from {from_coord} to {to_coord}")


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = SQUARES[56:64]
