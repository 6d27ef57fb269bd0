"""Core domain layer: pure chess move generation with zero external dependencies.

Quick start::

    from chessgen.core import Board, Color, pawn_moves
    from chessgen.core.types import E2

    board = Board.initial()
    for move in pawn_moves(E2, Color.WHITE, board, first_move=True):
        print(move)
"""

from chessgen.core.board import Board
from chessgen.core.enums import Color, PieceType
from chessgen.core.move import Move
from chessgen.core.move_generator import (
    MoveGenerator,
    MoveList,
    bishop_moves,
    king_moves,
    knight_moves,
    moves_for,
    pawn_moves,
    queen_moves,
    rook_moves,
)
from chessgen.core.piece import Piece, is_enemy, piece_color
from chessgen.core.types import (
    BOARD_SIZE,
    InvalidSquareError,
    Square,
    is_on_board,
    make_square,
    parse_square,
    square_name,
    validate_square,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "InvalidSquareError",
    "Square",
    "is_on_board",
    "make_square",
    "parse_square",
    "square_name",
    "validate_square",
    # Domain objects
    "Board",
    "Move",
    "MoveList",
    "Piece",
    "is_enemy",
    "piece_color",
    # Move generation
    "MoveGenerator",
    "bishop_moves",
    "king_moves",
    "knight_moves",
    "moves_for",
    "pawn_moves",
    "queen_moves",
    "rook_moves",
]
