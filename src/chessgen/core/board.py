"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chessgen.core.enums import Color, PieceType
from chessgen.core.piece import Piece, is_enemy, piece_color
from chessgen.core.types import BOARD_SIZE, Square, validate_square

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """64-cell grid indexed by ``(file, rank)``; ``None`` marks an empty cell.

    Move generation only ever reads from a board. Writing through
    ``board[sq] = piece`` is for whoever owns the position.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        # [file][rank] -> piece on that square.
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        file, rank = validate_square(sq)
        return self._grid[file][rank]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        file, rank = validate_square(sq)
        self._grid[file][rank] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def color_at(self, sq: Square) -> Color | None:
        """Color of the piece on *sq*, ``None`` if the square is empty."""
        return piece_color(self[sq])

    def is_enemy(self, sq: Square, color: Color) -> bool:
        """Whether *sq* holds a piece of the side opposing *color*."""
        return is_enemy(color, self[sq])

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares with their pieces, rank by rank from a1 to h8."""
        for rank in range(BOARD_SIZE):
            for file in range(BOARD_SIZE):
                piece = self._grid[file][rank]
                if piece is not None:
                    yield Square(file, rank), piece

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [column.copy() for column in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factories ----------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(BOARD_SIZE):
            b[f, 1] = Piece(Color.WHITE, PieceType.PAWN)
            b[f, 6] = Piece(Color.BLACK, PieceType.PAWN)
        for f, pt in enumerate(_BACK_RANK):
            b[f, 0] = Piece(Color.WHITE, pt)
            b[f, 7] = Piece(Color.BLACK, pt)
        return b

    @classmethod
    def from_pieces(cls, pieces: Mapping[Square, Piece]) -> Board:
        """Board holding exactly *pieces*, everything else empty."""
        b = cls()
        for sq, piece in pieces.items():
            b[sq] = piece
        return b

    @classmethod
    def from_diagram(cls, diagram: str) -> Board:
        """Parse a text diagram: eight rows, rank 8 first, ``.`` for empty.

        Spaces inside a row are ignored, so ``repr(board)`` rows without the
        rank labels parse back::

            r . . . k . . r
            . . . . . . . .
            ...
        """
        rows = ["".join(line.split()) for line in diagram.strip().splitlines()]
        rows = [row for row in rows if row]
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Diagram needs {BOARD_SIZE} rows, got {len(rows)}")

        b = cls()
        for row_idx, row in enumerate(rows):
            if len(row) != BOARD_SIZE:
                raise ValueError(f"Diagram row {row!r} must have {BOARD_SIZE} cells")
            rank = BOARD_SIZE - 1 - row_idx
            for file, char in enumerate(row):
                if char != ".":
                    b[file, rank] = Piece.from_char(char)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for file in range(BOARD_SIZE):
                p = self._grid[file][rank]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
