"""Immutable 8x8 Othello board, sides and move coordinates."""

from enum import IntEnum
from typing import Iterable, List, NamedTuple, Sequence, Tuple

SIZE = 8
MIN_INDEX = 0
MAX_INDEX = SIZE - 1

EMPTY = 0

# (row step, col step); the order fixes move enumeration order
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, 1), (0, -1), (1, 0), (-1, 0),
    (1, 1), (-1, -1), (1, -1), (-1, 1),
)


class Side(IntEnum):
    ONE = 1
    TWO = 2

    @property
    def other(self) -> "Side":
        return Side.TWO if self is Side.ONE else Side.ONE

    @classmethod
    def parse(cls, value) -> "Side":
        """Accept 1/2 (int or str) and return the matching side."""
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise ValueError(f"Invalid side: {value!r} (expected 1 or 2)")


class Move(NamedTuple):
    row: int
    col: int

    def __str__(self) -> str:
        return f"{self.row} {self.col}"


def in_bounds(row: int, col: int) -> bool:
    return MIN_INDEX <= row <= MAX_INDEX and MIN_INDEX <= col <= MAX_INDEX


_SYMBOLS = {EMPTY: ".", Side.ONE: "X", Side.TWO: "O"}


class Board:
    """Fixed 8x8 grid of cell values (0 = empty, 1 / 2 = side).

    A board never changes after construction; ``with_cells`` returns a copy
    so sibling branches of a search never see each other's placements.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Tuple[Tuple[int, ...], ...]):
        self._cells = cells

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        """Build a board from nested rows, validating shape and values."""
        if len(rows) != SIZE:
            raise ValueError(f"Board must have {SIZE} rows, got {len(rows)}")
        cells = []
        for r, row in enumerate(rows):
            if len(row) != SIZE:
                raise ValueError(f"Row {r} must have {SIZE} cells, got {len(row)}")
            for value in row:
                if value not in (EMPTY, Side.ONE, Side.TWO):
                    raise ValueError(f"Invalid cell value {value!r} in row {r}")
            cells.append(tuple(int(v) for v in row))
        return cls(tuple(cells))

    @classmethod
    def empty(cls) -> "Board":
        return cls(tuple((EMPTY,) * SIZE for _ in range(SIZE)))

    @classmethod
    def initial(cls) -> "Board":
        """Standard opening: four centre discs split diagonally."""
        return cls.empty().with_cells([(3, 3), (4, 4)], Side.TWO).with_cells(
            [(3, 4), (4, 3)], Side.ONE
        )

    def get(self, row: int, col: int) -> int:
        return self._cells[row][col]

    def __getitem__(self, pos: Tuple[int, int]) -> int:
        row, col = pos
        return self._cells[row][col]

    def with_cells(self, cells: Iterable[Tuple[int, int]], side: int) -> "Board":
        """Return a new board with every coordinate in ``cells`` set to ``side``."""
        grid = [list(row) for row in self._cells]
        for row, col in cells:
            grid[row][col] = int(side)
        return Board(tuple(tuple(row) for row in grid))

    def cells_of(self, side: int) -> List[Move]:
        """Row-major coordinates of every cell holding ``side``."""
        return [
            Move(r, c)
            for r, row in enumerate(self._cells)
            for c, value in enumerate(row)
            if value == side
        ]

    def count(self, side: int) -> int:
        return sum(row.count(side) for row in self._cells)

    def piece_count(self) -> int:
        return SIZE * SIZE - self.empty_count()

    def empty_count(self) -> int:
        return self.count(EMPTY)

    def to_rows(self) -> List[List[int]]:
        return [list(row) for row in self._cells]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"Board({self.to_rows()!r})"

    def __str__(self) -> str:
        lines = ["  " + " ".join(str(c) for c in range(SIZE))]
        for r, row in enumerate(self._cells):
            lines.append(f"{r} " + " ".join(_SYMBOLS[v] for v in row))
        return "\n".join(lines)
