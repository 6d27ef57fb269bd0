"""Square value type and coordinate helpers.

A square is a ``(file, rank)`` pair, both 0-7::

    (0, 0) = a1, (7, 0) = h1, (0, 7) = a8, (7, 7) = h8
"""

from __future__ import annotations

from typing import Any, NamedTuple

BOARD_SIZE = 8

_FILES = "abcdefgh"
_RANKS = "12345678"


class InvalidSquareError(ValueError):
    """Raised when a coordinate pair does not name a square on the board."""


class Square(NamedTuple):
    file: int
    rank: int

    def __str__(self) -> str:
        return square_name(self)


def is_on_board(file: int, rank: int) -> bool:
    """Bounds check: both coordinates within 0-7."""
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0-7) and rank (0-7)."""
    if not is_on_board(file, rank):
        raise InvalidSquareError(f"Square off the board: ({file}, {rank})")
    return Square(file, rank)


def validate_square(sq: Any) -> Square:
    """Coerce *sq* to a :class:`Square`, failing fast on anything off the board."""
    try:
        file, rank = sq
    except (TypeError, ValueError):
        raise InvalidSquareError(f"Not a (file, rank) pair: {sq!r}") from None
    if (
        not isinstance(file, int)
        or not isinstance(rank, int)
        or isinstance(file, bool)
        or isinstance(rank, bool)
    ):
        raise InvalidSquareError(f"Square coordinates must be integers: {sq!r}")
    return make_square(file, rank)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (4, 3) -> 'e4'."""
    file, rank = sq
    return _FILES[file] + _RANKS[rank]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' -> Square(4, 3)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise InvalidSquareError(f"Invalid square name: {name!r}")
    return Square(_FILES.index(name[0]), _RANKS.index(name[1]))


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(f, 7) for f in range(8))
