"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from rankfile.core.board import Board
from rankfile.core.enums import PositionKind, Variant
from rankfile.core.position import Position, new_position


@pytest.fixture(params=list(PositionKind), ids=lambda kind: kind.name.lower())
def position_kind(request: pytest.FixtureRequest) -> PositionKind:
    """Every position encoding in turn."""
    return request.param


@pytest.fixture
def empty_position(position_kind: PositionKind) -> Position:
    return new_position(position_kind, Variant.EMPTY)


@pytest.fixture
def standard_board(position_kind: PositionKind) -> Board:
    return Board(Variant.STANDARD, position_kind)


@pytest.fixture
def empty_board(position_kind: PositionKind) -> Board:
    return Board(Variant.EMPTY, position_kind)
