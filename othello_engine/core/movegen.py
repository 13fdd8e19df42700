"""Legal move enumeration."""

from typing import List

from .board import DIRECTIONS, EMPTY, Board, Move, Side, in_bounds


def legal_moves(board: Board, side: Side, unique: bool = False) -> List[Move]:
    """Return every empty cell where ``side`` can place a disc.

    Candidates are found by walking outward from each disc ``side`` already
    owns: a run of one or more opponent discs ending on an empty cell marks
    that empty cell as a legal move. The same cell can be reached from
    several discs, so duplicates appear unless ``unique`` is set, in which
    case the first occurrence is kept and order is preserved.
    """
    opponent = side.other
    moves: List[Move] = []
    for row, col in board.cells_of(side):
        for d_row, d_col in DIRECTIONS:
            r, c = row + d_row, col + d_col
            crossed = False
            while in_bounds(r, c) and board.get(r, c) == opponent:
                r += d_row
                c += d_col
                crossed = True
            if crossed and in_bounds(r, c) and board.get(r, c) == EMPTY:
                moves.append(Move(r, c))

    if unique:
        return list(dict.fromkeys(moves))
    return moves


def has_legal_move(board: Board, side: Side) -> bool:
    return bool(legal_moves(board, side))
