"""
Board entity - an immutable snapshot of the game at a point in time.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Tuple

from .constants import Cell, Direction, DIRECTION_NAMES


@dataclass(frozen=True)
class Board:
    """
    A snapshot of the game at a specific tick.

    Attributes:
        width, height: grid dimensions (coordinates wrap around both axes)
        snake: tuple of (x, y) from head at index 0 to tail at the end
        direction: the direction the snake travelled on its last step
        apple: (x, y) of the apple
        rng_seed: seed counter, bumped every time an apple is eaten
    """

    width: int
    height: int
    snake: Tuple[Cell, ...]
    direction: Direction
    apple: Cell
    rng_seed: int = 0

    def __post_init__(self):
        # Accept any sequence of pairs but always store hashable tuples
        object.__setattr__(self, "snake", tuple(tuple(cell) for cell in self.snake))
        object.__setattr__(self, "direction", tuple(self.direction))
        object.__setattr__(self, "apple", tuple(self.apple))

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.snake[0]

    @property
    def tail(self) -> Cell:
        return self.snake[-1]

    @property
    def grid_size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def cells(self) -> List[Cell]:
        """Every grid cell in row-major order (y outer, x inner)."""
        return [(x, y) for y in range(self.height) for x in range(self.width)]

    def free_cells(self) -> List[Cell]:
        """Cells not covered by the snake, in row-major order."""
        occupied = set(self.snake)
        return [cell for cell in self.cells() if cell not in occupied]

    def evolve(self, **changes) -> "Board":
        """Return a copy of this board with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (tuples become lists once dumped)."""
        return {
            "width": self.width,
            "height": self.height,
            "snake": list(self.snake),
            "direction": DIRECTION_NAMES.get(self.direction, str(self.direction)),
            "apple": self.apple,
            "rng_seed": self.rng_seed,
        }

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = apple
        H = snake head
        T = snake body/tail
        (0,0) is the top left, matching screen coordinates, with x-axis
        labels along the bottom.
        """
        grid = [['.' for _ in range(self.width)] for _ in range(self.height)]

        ax, ay = self.apple
        grid[ay][ax] = 'A'

        # Draw the body first so the head stays visible after a crash
        for x, y in self.snake[1:]:
            grid[y][x] = 'T'
        hx, hy = self.head
        grid[hy][hx] = 'H'

        result = []
        for y in range(self.height):
            result.append(f"{y:2d} {' '.join(grid[y])}")

        # Single digit labels keep the columns aligned on wide boards
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<Board {self.width}x{self.height} head={self.head}, "
            f"length={len(self.snake)}, apple={self.apple}, seed={self.rng_seed}>"
        )
