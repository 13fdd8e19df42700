"""Placing a disc and flipping the discs it captures."""

from typing import List, Tuple

from .board import DIRECTIONS, Board, Move, Side, in_bounds


def captured_tiles(board: Board, move: Tuple[int, int], side: Side) -> List[Move]:
    """Coordinates that change to ``side`` when it plays ``move``.

    Includes the placement cell itself, followed by every opponent disc
    bracketed between ``move`` and another ``side`` disc along one of the
    eight directions.
    """
    opponent = side.other
    row, col = move
    tiles = [Move(row, col)]
    for d_row, d_col in DIRECTIONS:
        run: List[Move] = []
        r, c = row + d_row, col + d_col
        while in_bounds(r, c) and board.get(r, c) == opponent:
            run.append(Move(r, c))
            r += d_row
            c += d_col
        if run and in_bounds(r, c) and board.get(r, c) == side:
            tiles.extend(run)
    return tiles


def apply_move(board: Board, move: Tuple[int, int], side: Side) -> Board:
    """Return the board after ``side`` plays ``move``.

    ``move`` must come from ``legal_moves(board, side)``; anything else gives
    a well-formed but meaningless board.
    """
    return board.with_cells(captured_tiles(board, move, side), side)
