from __future__ import annotations

import random
from typing import Callable

from blocktris.models.board import Board
from blocktris.models.tetromino import Tetromino
from blocktris.core.factory import random_shape, new_piece
from blocktris.core.pieces import ShapeDef
from blocktris.core.constants import BOARD_WIDTH, BOARD_HEIGHT, LINE_SCORE
from blocktris.core.sound import NullSound, SoundEvent, SoundSink


def score_for_lines(cleared: int) -> int:
    # 1 -> 100, 2 -> 400, 3 -> 900, 4 -> 1600
    return cleared * LINE_SCORE * cleared


class TetrisGame:
    """
    Estado de uma partida: tabuleiro, peça atual, próxima peça, pontuação e pausa.
    Não tem timer próprio; quem chama tick() é o GameController.
    """

    def __init__(
        self,
        cols: int = BOARD_WIDTH,
        rows: int = BOARD_HEIGHT,
        rng_seed: int | None = None,
        sound: SoundSink | None = None,
        on_game_over: Callable[[], None] | None = None,
        on_lines_cleared: Callable[[int], None] | None = None,
    ):
        # RNG da partida (semente opcional para jogos reproduzíveis)
        self._rng = random.Random(rng_seed) if rng_seed is not None else random.Random()

        self.board = Board(cols, rows)
        self.sound: SoundSink = sound if sound is not None else NullSound()
        self.on_game_over = on_game_over
        self.on_lines_cleared = on_lines_cleared

        self.current: Tetromino | None = None
        self.next_piece: Tetromino | None = None

        self.score = 0
        self.lines = 0
        self.game_over = False
        self.paused = False

    # ----- Ciclo de vida -----
    def spawn_piece(self) -> None:
        # primeira chamada: ainda não existe "próxima"
        if self.next_piece is None:
            self.next_piece = self._random_piece()

        # nova peça a partir da próxima; a posição é sempre recalculada
        self.current = Tetromino.spawn(
            self.next_piece.shape, self.next_piece.color, self.board.width
        )
        self.next_piece = self._random_piece()

        if self.current.collides(self.board):
            self._finish()

    def _random_piece(self) -> Tetromino:
        shape: ShapeDef = random_shape(self._rng)
        return new_piece(shape, self.board.width)

    # ----- Ciclo de atualização -----
    def tick(self) -> bool:
        """Um passo de gravidade. Retorna False se nada aconteceu (pausado/sem peça)."""
        if not self._can_act():
            return False
        if not self._move(0, 1):
            self._lock_piece()
        return True

    def _move(self, dx: int, dy: int) -> bool:
        moved = self.current.move(self.board, dx, dy)
        if moved and dx != 0:
            self.sound.play(SoundEvent.MOVE)
        return moved

    def _lock_piece(self) -> None:
        piece = self.current
        piece.lock(self.board)
        self.sound.play(SoundEvent.DROP)

        cleared = self.board.clear_full_rows()
        if cleared:
            self.lines += cleared
            self.score += score_for_lines(cleared)
            if self.on_lines_cleared is not None:
                self.on_lines_cleared(cleared)

        # travou ainda sobre a área de nascimento: fim de jogo
        if piece.y <= 0 and piece.collides(self.board):
            self._finish()
        else:
            self.spawn_piece()

    def _finish(self) -> None:
        if self.game_over:
            return
        self.game_over = True
        if self.on_game_over is not None:
            self.on_game_over()

    # ----- Entradas do jogador -----
    def move_left(self) -> bool:
        return self._can_act() and self._move(-1, 0)

    def move_right(self) -> bool:
        return self._can_act() and self._move(1, 0)

    def soft_drop(self) -> bool:
        return self._can_act() and self._move(0, 1)

    def rotate(self, direction: int = 1) -> bool:
        if not self._can_act():
            return False
        if self.current.rotate(self.board, direction):
            self.sound.play(SoundEvent.ROTATE)
            return True
        return False

    def hard_drop(self) -> None:
        if not self._can_act():
            return
        # só descidas: nenhum som de movimento
        self.current.drop(self.board)
        self._lock_piece()

    def pause(self) -> None:
        if not self.game_over:
            self.paused = True

    def resume(self) -> None:
        self.paused = False

    def _can_act(self) -> bool:
        return self.current is not None and not self.paused and not self.game_over
