# blocktris/core/controller.py
from __future__ import annotations

import logging
from typing import Callable, List

from blocktris.core.constants import BOARD_WIDTH, BOARD_HEIGHT, LEADERBOARD_LIMIT
from blocktris.core.snapshot import GameSnapshot, GameStatus, game_to_snapshot
from blocktris.core.sound import NullSound, SoundEvent, SoundSink
from blocktris.core.timer import IntervalTimer
from blocktris.models.game import TetrisGame
from blocktris.repository import LeaderboardStore

logger = logging.getLogger(__name__)

RenderListener = Callable[[GameSnapshot], None]


class GameController:
    """
    Máquina de estados do jogo: idle -> running <-> paused -> ended.

    Dono da sessão (TetrisGame), do timer de tick e das conexões com placar,
    som e renderização. Depois de cada mudança de estado publica um
    GameSnapshot para os ouvintes de renderização.
    """

    def __init__(
        self,
        leaderboard: LeaderboardStore,
        timer: IntervalTimer,
        sound: SoundSink | None = None,
        cols: int = BOARD_WIDTH,
        rows: int = BOARD_HEIGHT,
        rng_seed: int | None = None,
    ):
        self.leaderboard = leaderboard
        self.timer = timer
        self.sound: SoundSink = sound if sound is not None else NullSound()
        self.cols = cols
        self.rows = rows
        self.rng_seed = rng_seed

        self.game: TetrisGame | None = None
        self.status = GameStatus.IDLE
        self.top_scores: List[int] = []

        self._listeners: List[RenderListener] = []

    # ----- Renderização -----
    def add_render_listener(self, listener: RenderListener) -> None:
        self._listeners.append(listener)

    def remove_render_listener(self, listener: RenderListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def snapshot(self) -> GameSnapshot:
        return game_to_snapshot(self.game, self.status, self.cols, self.rows)

    def _render(self) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    # ----- Ciclo de vida -----
    def start(self, tick_interval_ms: int) -> None:
        # nunca deixa dois loops de tick mexendo no mesmo estado
        self.timer.cancel()

        self.game = TetrisGame(
            cols=self.cols,
            rows=self.rows,
            rng_seed=self.rng_seed,
            sound=self.sound,
            on_game_over=self.end,
            on_lines_cleared=self._on_lines_cleared,
        )
        self.status = GameStatus.RUNNING
        logger.info("nova partida (tick=%sms)", tick_interval_ms)

        self.game.spawn_piece()
        if self.status is GameStatus.RUNNING:
            self.timer.start(self.tick, tick_interval_ms)
            self.sound.start_music()

        self.refresh_leaderboard()
        self._render()

    def _on_lines_cleared(self, cleared: int) -> None:
        logger.debug("%d linha(s) removida(s), pontuação %d", cleared, self.score)

    def tick(self) -> None:
        if self.status is not GameStatus.RUNNING or self.game is None:
            return
        self.game.tick()
        self._render()

    def pause(self) -> None:
        if self.status is not GameStatus.RUNNING:
            return
        # o timer continua rodando; tick() vira no-op enquanto pausado
        self.game.pause()
        self.status = GameStatus.PAUSED
        self.sound.pause_music()
        self._render()

    def resume(self) -> None:
        if self.status is not GameStatus.PAUSED:
            return
        self.game.resume()
        self.status = GameStatus.RUNNING
        self.sound.resume_music()
        self._render()

    def toggle_pause(self) -> None:
        if self.status is GameStatus.PAUSED:
            self.resume()
        else:
            self.pause()

    def end(self) -> None:
        if self.status in (GameStatus.ENDED, GameStatus.IDLE):
            return
        self.timer.cancel()
        self.status = GameStatus.ENDED
        self.sound.play(SoundEvent.GAME_OVER)
        self.sound.stop_music()

        score = self.game.score if self.game is not None else 0
        logger.info("fim de jogo, pontuação final %d", score)
        self.leaderboard.record_score(score)
        self.refresh_leaderboard()
        self._render()

    def quit(self) -> None:
        self.timer.cancel()
        self.sound.stop_music()
        self.game = None
        self.status = GameStatus.IDLE
        self.refresh_leaderboard()
        self._render()

    def refresh_leaderboard(self) -> List[int]:
        self.top_scores = list(self.leaderboard.fetch_top_scores(LEADERBOARD_LIMIT))
        return self.top_scores

    @property
    def score(self) -> int:
        return self.game.score if self.game is not None else 0

    # ----- Som -----
    def toggle_sound(self) -> bool:
        self.sound.muted = not self.sound.muted
        if self.sound.muted:
            self.sound.pause_music()
        elif self.status is GameStatus.RUNNING:
            self.sound.resume_music()
        return not self.sound.muted

    # ----- Entradas do jogador -----
    def _input(self, action: Callable[[TetrisGame], object]) -> None:
        if self.status is not GameStatus.RUNNING or self.game is None:
            return
        if self.game.current is None:
            return
        action(self.game)
        self._render()

    def move_left(self) -> None:
        self._input(lambda g: g.move_left())

    def move_right(self) -> None:
        self._input(lambda g: g.move_right())

    def soft_drop(self) -> None:
        self._input(lambda g: g.soft_drop())

    def rotate_cw(self) -> None:
        self._input(lambda g: g.rotate(1))

    def hard_drop(self) -> None:
        self._input(lambda g: g.hard_drop())
