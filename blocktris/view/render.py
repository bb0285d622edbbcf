# blocktris/view/render.py
from __future__ import annotations

import arcade

from blocktris.core.constants import (
    BOARD_HEIGHT, BOARD_WIDTH, CELL_SIZE, EMPTY_COLOR, PREVIEW_CELLS,
)
from blocktris.core.snapshot import GameSnapshot, PieceView
from blocktris.view.layout import cell_origin, preview_offset

SHADOW = (0, 0, 0, 200)
SHINE = (255, 255, 255, 51)
GRID_LINE = (20, 32, 56, 255)
FRAME = (60, 90, 120, 255)


# ---------- helpers de cor ----------

def _clamp(x: int) -> int:
    return max(0, min(255, x))


def _shade(rgb: tuple, factor: float) -> tuple:
    r, g, b, *a = rgb
    alpha = a[0] if a else 255
    return (
        _clamp(int(r * factor)),
        _clamp(int(g * factor)),
        _clamp(int(b * factor)),
        alpha,
    )


def draw_square(left: float, bottom: float, size: float, color: tuple | None):
    """Uma célula: vazia é só o fundo escuro; cheia ganha sombra e brilho."""
    if color is None:
        arcade.draw_lbwh_rectangle_filled(left, bottom, size - 1, size - 1, EMPTY_COLOR)
        return

    arcade.draw_lbwh_rectangle_filled(left + 2, bottom - 2, size - 1, size - 1, SHADOW)
    arcade.draw_lbwh_rectangle_filled(left, bottom, size - 1, size - 1, color)
    arcade.draw_lbwh_rectangle_outline(left, bottom, size - 1, size - 1, _shade(color, 0.7), 1)
    # faixa clara no topo
    arcade.draw_lbwh_rectangle_filled(left + 1, bottom + size - 4, size - 3, 2, SHINE)


def draw_board(snap: GameSnapshot, left: float = 0, bottom: float = 0):
    pf_w = BOARD_WIDTH * CELL_SIZE
    pf_h = BOARD_HEIGHT * CELL_SIZE
    arcade.draw_lbwh_rectangle_outline(left - 2, bottom - 2, pf_w + 4, pf_h + 4, FRAME, 2)

    rows = len(snap.cells)
    for r, row in enumerate(snap.cells):
        for c, color in enumerate(row):
            x, y = cell_origin(c, r, rows)
            draw_square(left + x, bottom + y, CELL_SIZE, color)

    if snap.current is not None:
        _draw_piece(snap.current, rows, left, bottom)


def _draw_piece(piece: PieceView, rows: int, left: float, bottom: float):
    for r, line in enumerate(piece.shape):
        for c, v in enumerate(line):
            by = piece.y + r
            # parte acima do tabuleiro visível não é desenhada
            if v and by >= 0:
                x, y = cell_origin(piece.x + c, by, rows)
                draw_square(left + x, bottom + y, CELL_SIZE, piece.color)


def draw_preview(piece: PieceView | None, left: float, top: float, cell: int = CELL_SIZE):
    box = PREVIEW_CELLS * cell
    arcade.draw_lbwh_rectangle_filled(left, top - box, box, box, EMPTY_COLOR)
    arcade.draw_lbwh_rectangle_outline(left, top - box, box, box, FRAME, 2)
    if piece is None:
        return

    ox, oy = preview_offset(piece.shape)
    for r, line in enumerate(piece.shape):
        for c, v in enumerate(line):
            if v:
                x = left + (c + ox) * cell
                y = top - (r + oy + 1) * cell
                arcade.draw_lbwh_rectangle_filled(x, y, cell - 1, cell - 1, piece.color)
