# blocktris/core/factory.py
import random

from blocktris.core.pieces import SHAPES, ShapeDef
from blocktris.models.tetromino import Tetromino


def random_shape(rng: random.Random | None = None) -> ShapeDef:
    """
    Sorteia uma das 7 formas, uniforme e independente a cada chamada (sem "bag").
    Se rng for None, usa o random global.
    """
    r = rng or random
    return r.choice(SHAPES)


def new_piece(shape: ShapeDef, cols: int) -> Tetromino:
    return Tetromino.spawn(shape.matrix, shape.color, cols)
