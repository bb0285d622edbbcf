from __future__ import annotations

import logging

import arcade
from arcade.gui import UIManager, UIFlatButton

from blocktris.core.config import Settings, load_settings
from blocktris.core.constants import *
from blocktris.core.controller import GameController
from blocktris.core.snapshot import GameSnapshot, GameStatus
from blocktris.db import make_engine
from blocktris.repository import ScoreRepository
from blocktris.view.audio import SoundPlayer
from blocktris.view.clock import ArcadeTimer
from blocktris.view.render import draw_board, draw_preview

logger = logging.getLogger(__name__)


# ---------- paleta ----------

BG = (4, 10, 24, 255)
PANEL = (12, 24, 48, 255)
PANEL_DARK = (6, 14, 30, 255)
ACCENT = (6, 182, 212, 255)
ACCENT_2 = (244, 114, 182, 255)
TEXT = (220, 232, 245, 255)
TEXT_DIM = (140, 160, 185, 255)

FONT = ("Press Start 2P", "Kenney Future", "Arial")

DIFFICULTY_LABELS = {
    "easy": "FÁCIL",
    "normal": "NORMAL",
    "hard": "DIFÍCIL",
    "custom": "CUSTOM",
}


def _button_style(font_size: int = 10) -> dict:
    return {
        "normal": {
            "font_name": FONT,
            "font_size": font_size,
            "font_color": TEXT,
            "bg_color": PANEL,
            "border_width": 2,
            "border_color": ACCENT,
        },
        "hover": {
            "font_name": FONT,
            "font_size": font_size,
            "font_color": (255, 255, 255, 255),
            "bg_color": (24, 44, 80, 255),
            "border_width": 2,
            "border_color": ACCENT_2,
        },
        "press": {
            "font_name": FONT,
            "font_size": font_size,
            "font_color": TEXT_DIM,
            "bg_color": PANEL_DARK,
            "border_width": 2,
            "border_color": ACCENT_2,
        },
        "disabled": {
            "font_name": FONT,
            "font_size": font_size,
            "font_color": (120, 120, 120, 255),
            "bg_color": (40, 40, 40, 255),
            "border_width": 2,
            "border_color": (80, 80, 80, 255),
        },
    }


BUTTON_STYLE = _button_style(10)
SMALL_BUTTON_STYLE = _button_style(7)


def _leaderboard_lines(scores: list[int]) -> list[str]:
    if not scores:
        return ["—"]
    return [f"#{i + 1}: {s}" for i, s in enumerate(scores)]


def _place(button: UIFlatButton, center_x: float, center_y: float) -> UIFlatButton:
    button.center_x = center_x
    button.center_y = center_y
    return button


# ============================================================
#                        MENU PRINCIPAL
# ============================================================


class MenuView(arcade.View):
    """
    Tela inicial: escolha de dificuldade, placar top 5 e botão de início.
    """

    def __init__(self, controller: GameController, settings: Settings):
        super().__init__()
        self.ui = UIManager()
        self.controller = controller
        self.settings = settings

        self.presets = dict(TICK_PRESETS)
        self.difficulty = next(
            (k for k, v in self.presets.items() if v == settings.tick_interval_ms),
            None,
        )
        if self.difficulty is None:
            self.presets["custom"] = settings.tick_interval_ms
            self.difficulty = "custom"

        self.title: arcade.Text | None = None
        self.subtitle: arcade.Text | None = None
        self.leader_title: arcade.Text | None = None
        self.leader_texts: list[arcade.Text] = []
        self.difficulty_buttons: dict[str, UIFlatButton] = {}
        self.btn_sound: UIFlatButton | None = None

    def on_show_view(self):
        self.window.set_size(WINDOW_WIDTH, WINDOW_HEIGHT)
        arcade.set_background_color(BG)
        self.ui.enable()
        self.ui.clear()

        center_x = WINDOW_WIDTH / 2

        self.title = arcade.Text(
            "BLOCKTRIS", center_x, WINDOW_HEIGHT - 50, ACCENT, 24,
            anchor_x="center", anchor_y="center", font_name=FONT,
        )
        self.subtitle = arcade.Text(
            "ENTER: jogar  |  1/2/3: dificuldade  |  S: som",
            center_x, WINDOW_HEIGHT - 84, TEXT_DIM, 9,
            anchor_x="center", anchor_y="center",
        )

        self._build_leaderboard()

        # dificuldade
        btn_w = 130
        y = 170
        for i, key in enumerate(self.presets):
            btn = UIFlatButton(
                text=DIFFICULTY_LABELS[key], width=btn_w, height=30,
                style=SMALL_BUTTON_STYLE,
            )
            _place(btn, center_x, y - i * 36)

            @btn.event("on_click")
            def _pick(_, k=key):
                self._select_difficulty(k)

            self.difficulty_buttons[key] = btn
            self.ui.add(btn)
        self._select_difficulty(self.difficulty)

        btn_start = _place(
            UIFlatButton(text="INICIAR", width=btn_w + 60, height=40, style=BUTTON_STYLE),
            center_x, 222,
        )
        self.btn_sound = _place(
            UIFlatButton(text="", width=btn_w + 60, height=30, style=SMALL_BUTTON_STYLE),
            center_x, 26,
        )
        self._update_sound_label()
        self.ui.add(btn_start)
        self.ui.add(self.btn_sound)

        @btn_start.event("on_click")
        def _on_start(_):
            self._start_game()

        @self.btn_sound.event("on_click")
        def _on_sound(_):
            self.controller.toggle_sound()
            self._update_sound_label()

    def _build_leaderboard(self):
        scores = self.controller.refresh_leaderboard()
        center_x = WINDOW_WIDTH / 2
        top = WINDOW_HEIGHT - 130
        self.leader_title = arcade.Text(
            "PLACAR", center_x, top, ACCENT_2, 12,
            anchor_x="center", anchor_y="center", font_name=FONT,
        )
        self.leader_texts = [
            arcade.Text(line, center_x, top - 24 - i * 18, TEXT, 11,
                        anchor_x="center", anchor_y="center")
            for i, line in enumerate(_leaderboard_lines(scores))
        ]

    def _select_difficulty(self, key: str):
        self.difficulty = key
        for k, btn in self.difficulty_buttons.items():
            label = DIFFICULTY_LABELS[k]
            btn.text = f"> {label} <" if k == key else label

    def _update_sound_label(self):
        if self.btn_sound is not None:
            on = not self.controller.sound.muted
            self.btn_sound.text = f"SOM: {'LIGADO' if on else 'DESLIGADO'}"

    def _start_game(self):
        tick_ms = self.presets[self.difficulty]
        self.window.show_view(PlayfieldView(self.controller, self.settings, tick_ms))

    def on_draw(self):
        self.clear()
        arcade.draw_lbwh_rectangle_filled(
            12, 12, WINDOW_WIDTH - 24, WINDOW_HEIGHT - 24, PANEL_DARK
        )
        arcade.draw_lbwh_rectangle_outline(
            12, 12, WINDOW_WIDTH - 24, WINDOW_HEIGHT - 24, ACCENT, 3
        )
        for t in (self.title, self.subtitle, self.leader_title, *self.leader_texts):
            if t:
                t.draw()
        self.ui.draw()

    def on_key_press(self, key, modifiers):
        if key in (arcade.key.ENTER, arcade.key.RETURN):
            self._start_game()
        elif key == arcade.key.KEY_1:
            self._select_difficulty("easy")
        elif key == arcade.key.KEY_2:
            self._select_difficulty("normal")
        elif key == arcade.key.KEY_3:
            self._select_difficulty("hard")
        elif key == arcade.key.S:
            self.controller.toggle_sound()
            self._update_sound_label()

    def on_hide_view(self):
        self.ui.disable()


# ============================================================
#                        TELA DO TABULEIRO
# ============================================================


class PlayfieldView(arcade.View):
    """
    Tabuleiro + barra lateral (pontos, próxima peça, placar, botões de toque).
    Só desenha o último GameSnapshot publicado pelo controller.
    """

    def __init__(self, controller: GameController, settings: Settings, tick_ms: int):
        super().__init__()
        arcade.set_background_color(BG)
        self.ui = UIManager()
        self.controller = controller
        self.settings = settings
        self.tick_ms = tick_ms
        self._snapshot: GameSnapshot = controller.snapshot()

        left = BOARD_WIDTH * CELL_SIZE + 16
        top = WINDOW_HEIGHT - 16
        self.sidebar_left = left
        self.txt_score = arcade.Text("", left, top, TEXT, 12, anchor_y="top")
        self.txt_lines = arcade.Text("", left, top - 20, TEXT_DIM, 10, anchor_y="top")
        self.txt_next = arcade.Text("Próxima:", left, top - 44, TEXT, 11, anchor_y="top")
        self.preview_top = top - 64
        self.txt_leader = arcade.Text(
            "Placar:", left, self.preview_top - 4 * 20 - 14, TEXT, 11, anchor_y="top"
        )
        self.leader_texts: list[arcade.Text] = []

        self.txt_paused = arcade.Text(
            "PAUSADO", WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2 + 20, TEXT, 20,
            anchor_x="center", anchor_y="center", font_name=FONT,
        )
        self.txt_paused_hint = arcade.Text(
            "P: continuar  |  Q: sair", WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2 - 12,
            TEXT_DIM, 11, anchor_x="center", anchor_y="center",
        )
        self.txt_game_over = arcade.Text(
            "FIM DE JOGO", WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2 + 30, ACCENT_2, 20,
            anchor_x="center", anchor_y="center", font_name=FONT,
        )
        self.txt_final_score = arcade.Text(
            "", WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2, TEXT, 13,
            anchor_x="center", anchor_y="center",
        )
        self.txt_game_over_hint = arcade.Text(
            "ENTER/R: jogar de novo  |  Q: sair", WINDOW_WIDTH / 2,
            WINDOW_HEIGHT / 2 - 28, TEXT_DIM, 11, anchor_x="center", anchor_y="center",
        )

    def on_show_view(self):
        self.window.set_size(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.ui.enable()
        self.ui.clear()
        self._build_touch_buttons()

        self.controller.add_render_listener(self._on_render)
        self.controller.start(self.tick_ms)

    def _on_render(self, snap: GameSnapshot):
        self._snapshot = snap

    def _build_touch_buttons(self):
        left = BOARD_WIDTH * CELL_SIZE
        w, h, gap = 40, 32, 6
        x0 = left + (SIDEBAR_WIDTH - (5 * w + 4 * gap)) / 2 + w / 2
        actions = [
            ("<", self.controller.move_left),
            (">", self.controller.move_right),
            ("GIRA", self.controller.rotate_cw),
            ("V", self.controller.soft_drop),
            ("SOLTA", self.controller.hard_drop),
        ]
        for i, (label, action) in enumerate(actions):
            btn = _place(
                UIFlatButton(text=label, width=w, height=h, style=SMALL_BUTTON_STYLE),
                x0 + i * (w + gap), 86,
            )

            @btn.event("on_click")
            def _on_click(_, fn=action):
                fn()

            self.ui.add(btn)

        w2 = 70
        x1 = left + (SIDEBAR_WIDTH - (3 * w2 + 2 * gap)) / 2 + w2 / 2
        controls = [
            ("PAUSA", self.controller.toggle_pause),
            ("SOM", self.controller.toggle_sound),
            ("SAIR", self._quit),
        ]
        for i, (label, action) in enumerate(controls):
            btn = _place(
                UIFlatButton(text=label, width=w2, height=h, style=SMALL_BUTTON_STYLE),
                x1 + i * (w2 + gap), 40,
            )

            @btn.event("on_click")
            def _on_click(_, fn=action):
                fn()

            self.ui.add(btn)

    def on_draw(self):
        self.clear()
        snap = self._snapshot
        draw_board(snap)
        self._draw_sidebar(snap)
        self.ui.draw()

        if snap.status is GameStatus.PAUSED:
            arcade.draw_lbwh_rectangle_filled(0, 0, WINDOW_WIDTH, WINDOW_HEIGHT, (0, 0, 0, 160))
            self.txt_paused.draw()
            self.txt_paused_hint.draw()

        if snap.status is GameStatus.ENDED:
            arcade.draw_lbwh_rectangle_filled(0, 0, WINDOW_WIDTH, WINDOW_HEIGHT, (0, 0, 0, 180))
            self.txt_final_score.text = f"Pontuação final: {snap.score}"
            self.txt_game_over.draw()
            self.txt_final_score.draw()
            self.txt_game_over_hint.draw()

    def _draw_sidebar(self, snap: GameSnapshot):
        left = BOARD_WIDTH * CELL_SIZE
        arcade.draw_lbwh_rectangle_filled(left, 0, SIDEBAR_WIDTH, WINDOW_HEIGHT, PANEL)
        arcade.draw_lbwh_rectangle_outline(left, 0, SIDEBAR_WIDTH, WINDOW_HEIGHT, ACCENT, 2)

        self.txt_score.text = f"Pontuação: {snap.score}"
        self.txt_lines.text = f"Linhas: {snap.lines}"
        self.txt_score.draw()
        self.txt_lines.draw()
        self.txt_next.draw()
        draw_preview(snap.next_piece, self.sidebar_left, self.preview_top, cell=20)

        self.txt_leader.draw()
        lines = _leaderboard_lines(self.controller.top_scores)
        if len(self.leader_texts) != len(lines):
            top = self.txt_leader.y - 20
            self.leader_texts = [
                arcade.Text("", self.sidebar_left + 8, top - i * 16, TEXT_DIM, 10, anchor_y="top")
                for i in range(len(lines))
            ]
        for t, line in zip(self.leader_texts, lines):
            t.text = line
            t.draw()

    def on_key_press(self, key, modifiers):
        status = self.controller.status

        if key in (arcade.key.Q, arcade.key.ESCAPE):
            self._quit()
            return
        if key == arcade.key.S:
            self.controller.toggle_sound()
            return
        if key == arcade.key.P:
            self.controller.toggle_pause()
            return

        if status is GameStatus.ENDED:
            if key in (arcade.key.ENTER, arcade.key.RETURN, arcade.key.R):
                self.controller.start(self.tick_ms)
            return

        if key == arcade.key.LEFT:
            self.controller.move_left()
        elif key == arcade.key.RIGHT:
            self.controller.move_right()
        elif key == arcade.key.DOWN:
            self.controller.soft_drop()
        elif key == arcade.key.UP:
            self.controller.rotate_cw()
        elif key == arcade.key.SPACE:
            self.controller.hard_drop()

    def _quit(self):
        self.controller.quit()
        self.window.show_view(MenuView(self.controller, self.settings))

    def on_hide_view(self):
        self.controller.remove_render_listener(self._on_render)
        self.ui.disable()


# ============================================================
#                          ENTRADA
# ============================================================


def build_controller(settings: Settings) -> GameController:
    repo = ScoreRepository(make_engine(settings.database_url))
    sound = SoundPlayer(settings.sound_dir, muted=not settings.sound_on)
    return GameController(repo, ArcadeTimer(), sound)


def run(settings: Settings | None = None):
    settings = settings or load_settings()
    controller = build_controller(settings)

    window = arcade.Window(WINDOW_WIDTH, WINDOW_HEIGHT, "Blocktris")
    window.show_view(MenuView(controller, settings))
    logger.info("janela aberta (%dx%d)", WINDOW_WIDTH, WINDOW_HEIGHT)
    arcade.run()


def main():
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(settings)
