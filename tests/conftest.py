"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessgen.core.board import Board


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()
