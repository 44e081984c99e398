# mazepath/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Tuple, Optional, Dict, Any, NamedTuple, Sequence

from mazepath.core.errors import MazeConfigError


class Coordinate(NamedTuple):
    row: int
    col: int

    def key(self, cols: int) -> int:
        """Packed integer key, unique for a grid `cols` wide."""
        return self.row * cols + self.col

    def __repr__(self) -> str:
        return f"({self.row}, {self.col})"


class CellType(IntEnum):
    PATH = 0
    WALL = 1
    # presentation-only tags; searches only look at WALL vs. not WALL
    START = 2
    END = 3
    VISITED = 4
    SOLUTION = 5


# text form used by from_strings / to_strings
CELL_CHARS: Dict[CellType, str] = {
    CellType.PATH: ".",
    CellType.WALL: "#",
    CellType.START: "S",
    CellType.END: "E",
    CellType.VISITED: "o",
    CellType.SOLUTION: "*",
}
CHAR_CELLS: Dict[str, CellType] = {ch: t for t, ch in CELL_CHARS.items()}


@dataclass
class Grid:
    rows: int
    cols: int
    cells: List[List[CellType]]        # [row][col]

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise MazeConfigError(f"grid must be non-empty, got {self.rows}x{self.cols}")
        if len(self.cells) != self.rows or any(len(r) != self.cols for r in self.cells):
            raise MazeConfigError("cells size mismatch (grid must be rectangular)")

    @classmethod
    def filled(cls, rows: int, cols: int, value: CellType = CellType.WALL) -> "Grid":
        return cls(rows, cols, [[value] * cols for _ in range(rows)])

    @classmethod
    def from_strings(cls, lines: Sequence[str]) -> "Grid":
        """Build a grid from text rows: '#' wall, '.' path (other tags accepted)."""
        try:
            cells = [[CHAR_CELLS[ch] for ch in line] for line in lines]
        except KeyError as ex:
            raise MazeConfigError(f"unknown cell character {ex.args[0]!r}") from ex
        rows = len(cells)
        cols = len(cells[0]) if rows else 0
        return cls(rows, cols, cells)

    def to_strings(self) -> List[str]:
        return ["".join(CELL_CHARS[c] for c in row) for row in self.cells]

    def copy(self) -> "Grid":
        return Grid(self.rows, self.cols, [list(r) for r in self.cells])

    def in_bounds(self, c: Tuple[int, int]) -> bool:
        r, col = c
        return 0 <= r < self.rows and 0 <= col < self.cols

    def is_wall(self, c: Tuple[int, int]) -> bool:
        r, col = c
        return self.cells[r][col] == CellType.WALL

    def get(self, c: Tuple[int, int]) -> CellType:
        r, col = c
        return self.cells[r][col]

    def set(self, c: Tuple[int, int], value: CellType) -> None:
        r, col = c
        self.cells[r][col] = value

    def count(self, value: CellType) -> int:
        return sum(row.count(value) for row in self.cells)


@dataclass(frozen=True)
class Maze:
    grid: Grid
    start: Coordinate
    end: Coordinate


@dataclass(frozen=True)
class PathResult:
    path: Tuple[Coordinate, ...] = ()        # start..end inclusive, empty if unreachable
    visited: Tuple[Coordinate, ...] = ()     # expansion order
    algorithm: str = ""

    @property
    def found(self) -> bool:
        return len(self.path) > 0

    @property
    def length(self) -> int:
        return len(self.path)


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[Coordinate] = field(default_factory=list)
    closed: List[Coordinate] = field(default_factory=list)
    current: Optional[Coordinate] = None
    path: Optional[List[Coordinate]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
