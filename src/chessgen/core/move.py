"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessgen.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Candidate destination for a piece.

    ``is_capture`` only says the destination currently holds an enemy piece;
    it makes no claim that the move is legal.
    """

    to_sq: Square
    is_capture: bool = False

    def __str__(self) -> str:
        prefix = "x" if self.is_capture else ""
        return prefix + square_name(self.to_sq)
