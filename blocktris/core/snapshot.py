# blocktris/core/snapshot.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from blocktris.models.board import Cell, Color
from blocktris.models.game import TetrisGame
from blocktris.models.tetromino import Tetromino


class GameStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"


@dataclass(frozen=True)
class PieceView:
    shape: Tuple[Tuple[int, ...], ...]
    color: Color
    x: int
    y: int


@dataclass(frozen=True)
class GameSnapshot:
    """Retrato somente-leitura do jogo, entregue ao renderizador."""
    cells: Tuple[Tuple[Cell, ...], ...]
    current: Optional[PieceView]
    next_piece: Optional[PieceView]
    score: int
    lines: int
    status: GameStatus

    @property
    def paused(self) -> bool:
        return self.status is GameStatus.PAUSED


def piece_to_view(p: Tetromino | None) -> PieceView | None:
    if p is None:
        return None
    return PieceView(
        shape=tuple(tuple(row) for row in p.shape),
        color=p.color,
        x=p.x,
        y=p.y,
    )


def game_to_snapshot(game: TetrisGame | None, status: GameStatus,
                     cols: int, rows: int) -> GameSnapshot:
    if game is None:
        empty = tuple(tuple(None for _ in range(cols)) for _ in range(rows))
        return GameSnapshot(empty, None, None, 0, 0, status)

    return GameSnapshot(
        cells=game.board.rows(),
        current=piece_to_view(game.current),
        next_piece=piece_to_view(game.next_piece),
        score=game.score,
        lines=game.lines,
        status=status,
    )
