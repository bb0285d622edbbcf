from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from .board import Board, Color

# ordem de tentativa do "wall kick": posição atual, +1 coluna, -1 coluna
KICK_OFFSETS = (0, 1, -1)


@dataclass
class Tetromino:
    shape: List[List[int]]
    color: Color
    x: int = 0
    y: int = 0

    @classmethod
    def spawn(cls, shape: Sequence[Sequence[int]], color: Color, cols: int) -> "Tetromino":
        """
        Cria a peça com cópia própria da matriz (o catálogo nunca é alterado),
        centralizada na horizontal e com a linha de cima na linha 0.
        """
        matrix = [list(row) for row in shape]
        x = cols // 2 - math.ceil(len(matrix[0]) / 2)
        return cls(matrix, color, x, 0)

    def cells(self) -> Iterator[Tuple[int, int]]:
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v:
                    yield self.x + c, self.y + r

    def collides(self, board: Board, dx: int = 0, dy: int = 0, shape=None) -> bool:
        s = self.shape if shape is None else shape
        for r, row in enumerate(s):
            for c, v in enumerate(row):
                if not v:
                    continue
                nx = self.x + c + dx
                ny = self.y + r + dy
                if nx < 0 or nx >= board.width or ny >= board.height:
                    return True
                # acima do tabuleiro visível só bate nas paredes
                if ny >= 0 and board.is_occupied(nx, ny):
                    return True
        return False

    def move(self, board: Board, dx: int, dy: int) -> bool:
        if self.collides(board, dx, dy):
            return False
        self.x += dx
        self.y += dy
        return True

    def peek_rotate(self, direction: int = 1) -> List[List[int]]:
        transposed = [list(col) for col in zip(*self.shape)]
        if direction > 0:
            return [row[::-1] for row in transposed]
        return transposed[::-1]

    def rotate(self, board: Board, direction: int = 1) -> bool:
        rotated = self.peek_rotate(direction)
        for dx in KICK_OFFSETS:
            if not self.collides(board, dx, 0, shape=rotated):
                self.shape = rotated
                self.x += dx
                return True
        return False

    def drop(self, board: Board) -> int:
        steps = 0
        while self.move(board, 0, 1):
            steps += 1
        return steps

    def lock(self, board: Board) -> None:
        board.lock((x, y, self.color) for x, y in self.cells())
