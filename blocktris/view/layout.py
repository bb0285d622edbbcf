# blocktris/view/layout.py
from typing import Sequence, Tuple

from blocktris.core.constants import BOARD_HEIGHT, CELL_SIZE, PREVIEW_CELLS


def cell_origin(col: int, row: int, rows: int = BOARD_HEIGHT,
                cell: int = CELL_SIZE) -> Tuple[int, int]:
    """Canto inferior esquerdo (em pixels) da célula; a linha 0 fica no topo."""
    return col * cell, (rows - 1 - row) * cell


def preview_offset(shape: Sequence[Sequence[int]],
                   box: int = PREVIEW_CELLS) -> Tuple[int, int]:
    """Deslocamento, em células, que centraliza a peça na caixa de prévia."""
    return (box - len(shape[0])) // 2, (box - len(shape)) // 2
