from typing import Iterable, List, Optional, Tuple
from dataclasses import dataclass, field

Color = Tuple[int, int, int]
Cell = Optional[Color]


@dataclass
class Board:
    width: int
    height: int
    grid: List[List[Cell]] = field(init=False)

    def __post_init__(self):
        self.grid = [[None for _ in range(self.width)] for _ in range(self.height)]

    def clear_all(self):
        for r in range(self.height):
            for c in range(self.width):
                self.grid[r][c] = None

    def is_occupied(self, x: int, y: int) -> bool:
        # quem chama já conferiu os limites (paredes e chão)
        return self.grid[y][x] is not None

    def lock(self, cells: Iterable[Tuple[int, int, Color]]) -> None:
        for x, y, color in cells:
            if 0 <= y < self.height and 0 <= x < self.width:
                self.grid[y][x] = color

    def clear_full_rows(self) -> int:
        cleared = 0
        r = self.height - 1
        while r >= 0:
            if all(self.grid[r][c] is not None for c in range(self.width)):
                del self.grid[r]
                self.grid.insert(0, [None for _ in range(self.width)])
                cleared += 1
                # mesma linha de novo: as de cima desceram pra cá
            else:
                r -= 1
        return cleared

    def rows(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self.grid)
