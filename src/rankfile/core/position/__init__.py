"""Interchangeable position encodings behind the :class:`Position` contract."""

from __future__ import annotations

from rankfile.core.enums import PositionKind, Variant
from rankfile.core.position.base import BACK_RANK, Position, standard_layout
from rankfile.core.position.compact import EnumPosition, PieceTag
from rankfile.core.position.flat import FlatPosition
from rankfile.core.position.grid import GridPosition
from rankfile.core.position.mask import MaskPosition

_ENCODINGS: dict[PositionKind, type[Position]] = {
    PositionKind.MASK: MaskPosition,
    PositionKind.FLAT: FlatPosition,
    PositionKind.GRID: GridPosition,
    PositionKind.ENUM: EnumPosition,
}


def new_position(
    kind: PositionKind = PositionKind.MASK,
    variant: Variant = Variant.STANDARD,
) -> Position:
    """Create a position of the given encoding laid out for *variant*."""
    return _ENCODINGS[kind].new(variant)


__all__ = [
    "BACK_RANK",
    "EnumPosition",
    "FlatPosition",
    "GridPosition",
    "MaskPosition",
    "PieceTag",
    "Position",
    "PositionKind",
    "new_position",
    "standard_layout",
]
