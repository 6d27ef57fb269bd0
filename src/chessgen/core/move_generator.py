"""Pseudo-legal move generation.

Each piece archetype has one pure function taking the piece's square, its
color and a board, and returning the candidate destinations in generation
order. Nothing here checks whether a move leaves the mover's own king in
check, and the board is never written to.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection

from chessgen.core.board import Board
from chessgen.core.enums import Color, PieceType
from chessgen.core.move import Move
from chessgen.core.piece import is_enemy
from chessgen.core.types import BOARD_SIZE, Square, is_on_board, validate_square

_LOGGER = logging.getLogger(__name__)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (1, 2),
    (1, -2),
    (-2, 1),
    (-2, -1),
    (-1, 2),
    (-1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
    (0, 1),
    (1, 0),
    (-1, 0),
    (0, -1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (-1, -1), (-1, 1), (1, -1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

MoveList = list[Move]

# [file][rank] -> per-square table
_SquareTable = tuple[tuple[tuple, ...], ...]


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(offsets: tuple[tuple[int, int], ...]) -> _SquareTable:
    targets: list[tuple[tuple[Square, ...], ...]] = []
    for file_idx in range(BOARD_SIZE):
        column: list[tuple[Square, ...]] = []
        for rank_idx in range(BOARD_SIZE):
            column.append(
                tuple(
                    Square(file_idx + df, rank_idx + dr)
                    for df, dr in offsets
                    if is_on_board(file_idx + df, rank_idx + dr)
                )
            )
        targets.append(tuple(column))
    return tuple(targets)


def _build_rays(directions: tuple[tuple[int, int], ...]) -> _SquareTable:
    rays_per_file: list[tuple[tuple[tuple[Square, ...], ...], ...]] = []
    for file_idx in range(BOARD_SIZE):
        column: list[tuple[tuple[Square, ...], ...]] = []
        for rank_idx in range(BOARD_SIZE):
            square_rays: list[tuple[Square, ...]] = []
            for df, dr in directions:
                af = file_idx + df
                ar = rank_idx + dr
                ray: list[Square] = []
                while is_on_board(af, ar):
                    ray.append(Square(af, ar))
                    af += df
                    ar += dr
                square_rays.append(tuple(ray))
            column.append(tuple(square_rays))
        rays_per_file.append(tuple(column))
    return tuple(rays_per_file)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


# -- Shared scans ------------------------------------------------------------


def _scan_rays(
    rays: tuple[tuple[Square, ...], ...], color: Color, board: Board
) -> MoveList:
    moves: MoveList = []
    for ray in rays:
        for to_sq in ray:
            target = board[to_sq]
            if target is None:
                moves.append(Move(to_sq))
                continue
            if is_enemy(color, target):
                moves.append(Move(to_sq, True))
            break
    return moves


def _leap(targets: tuple[Square, ...], color: Color, board: Board) -> MoveList:
    moves: MoveList = []
    for to_sq in targets:
        target = board[to_sq]
        if target is None:
            moves.append(Move(to_sq))
        elif is_enemy(color, target):
            moves.append(Move(to_sq, True))
    return moves


# -- Piece archetypes ------------------------------------------------------


def pawn_moves(
    sq: Square, color: Color, board: Board, *, first_move: bool = False
) -> MoveList:
    """Pushes and diagonal captures for a pawn.

    *first_move* grants the double step; it is only taken when the square in
    front of the pawn is empty too. En passant and promotion are not
    generated.
    """
    file_idx, rank_idx = validate_square(sq)
    if rank_idx == color.last_rank:
        raise ValueError(f"{color} pawn cannot stand on its last rank: {sq!r}")

    step = color.forward
    fwd_rank = rank_idx + step
    moves: MoveList = []

    one_step = Square(file_idx, fwd_rank)
    if board[one_step] is None:
        moves.append(Move(one_step))
        two_rank = rank_idx + 2 * step
        if first_move and is_on_board(file_idx, two_rank):
            two_step = Square(file_idx, two_rank)
            if board[two_step] is None:
                moves.append(Move(two_step))

    for df in (1, -1):
        cap_file = file_idx + df
        if not is_on_board(cap_file, fwd_rank):
            continue
        cap_sq = Square(cap_file, fwd_rank)
        if is_enemy(color, board[cap_sq]):
            moves.append(Move(cap_sq, True))

    return moves


def rook_moves(sq: Square, color: Color, board: Board) -> MoveList:
    """Slides along ranks and files up to the first blocker."""
    file_idx, rank_idx = validate_square(sq)
    return _scan_rays(_ROOK_RAYS[file_idx][rank_idx], color, board)


def bishop_moves(sq: Square, color: Color, board: Board) -> MoveList:
    """Slides along diagonals up to the first blocker."""
    file_idx, rank_idx = validate_square(sq)
    return _scan_rays(_BISHOP_RAYS[file_idx][rank_idx], color, board)


def queen_moves(sq: Square, color: Color, board: Board) -> MoveList:
    """Union of the bishop and rook scans, diagonals first."""
    file_idx, rank_idx = validate_square(sq)
    return _scan_rays(_QUEEN_RAYS[file_idx][rank_idx], color, board)


def knight_moves(sq: Square, color: Color, board: Board) -> MoveList:
    file_idx, rank_idx = validate_square(sq)
    return _leap(_KNIGHT_TARGETS[file_idx][rank_idx], color, board)


def king_moves(sq: Square, color: Color, board: Board) -> MoveList:
    # Castling is not generated, so the king needs no first-move flag.
    file_idx, rank_idx = validate_square(sq)
    return _leap(_KING_TARGETS[file_idx][rank_idx], color, board)


_NON_PAWN_GENERATORS: dict[PieceType, Callable[[Square, Color, Board], MoveList]] = {
    PieceType.KNIGHT: knight_moves,
    PieceType.BISHOP: bishop_moves,
    PieceType.ROOK: rook_moves,
    PieceType.QUEEN: queen_moves,
    PieceType.KING: king_moves,
}


def moves_for(
    piece_type: PieceType,
    sq: Square,
    color: Color,
    board: Board,
    *,
    first_move: bool = False,
) -> MoveList:
    """Route to the generator for *piece_type*; *first_move* only matters for pawns."""
    if piece_type == PieceType.PAWN:
        return pawn_moves(sq, color, board, first_move=first_move)
    return _NON_PAWN_GENERATORS[piece_type](sq, color, board)


class MoveGenerator:
    """Generates pseudo-legal moves for the pieces standing on a :class:`Board`.

    Holds a reference to the board and reads it on every call, so the caller
    sees moves for whatever the board contains at that moment.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def moves_from(self, sq: Square, *, first_move: bool = False) -> MoveList:
        """Moves for the piece standing on *sq*."""
        sq = validate_square(sq)
        piece = self._board[sq]
        if piece is None:
            raise ValueError(f"No piece on {sq}")
        moves = moves_for(
            piece.piece_type, sq, piece.color, self._board, first_move=first_move
        )
        _LOGGER.debug(
            "%s %s on %s: %d moves",
            piece.color,
            piece.piece_type.name.lower(),
            sq,
            len(moves),
        )
        return moves

    def pseudo_legal_moves(
        self, color: Color, *, unmoved: Collection[Square] = ()
    ) -> dict[Square, MoveList]:
        """Moves for every piece of *color*, keyed by origin square.

        Pawns whose square is listed in *unmoved* may double-step.
        """
        unmoved_squares = {validate_square(sq) for sq in unmoved}
        result: dict[Square, MoveList] = {}
        for sq, piece in self._board.occupied():
            if piece.color != color:
                continue
            result[sq] = moves_for(
                piece.piece_type,
                sq,
                color,
                self._board,
                first_move=sq in unmoved_squares,
            )
        _LOGGER.debug(
            "%s: %d pieces, %d moves",
            color,
            len(result),
            sum(len(moves) for moves in result.values()),
        )
        return result
