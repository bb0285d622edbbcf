# blocktris/core/pieces.py
from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]

CYAN   = (  6, 182, 212)
YELLOW = (245, 158,  11)
PINK   = (244, 114, 182)
PURPLE = (167, 139, 250)
ORANGE = (251, 146,  60)
GREEN  = ( 52, 211, 153)
RED    = (239,  68,  68)


@dataclass(frozen=True)
class ShapeDef:
    """Definição imutável de um tetraminó: matriz de ocupação + cor."""
    name: str
    matrix: Tuple[Tuple[int, ...], ...]
    color: Color


I_SHAPE = ShapeDef("I", ((1, 1, 1, 1),), CYAN)
O_SHAPE = ShapeDef("O", ((1, 1), (1, 1)), YELLOW)
T_SHAPE = ShapeDef("T", ((0, 1, 0), (1, 1, 1)), PINK)
J_SHAPE = ShapeDef("J", ((1, 0, 0), (1, 1, 1)), PURPLE)
L_SHAPE = ShapeDef("L", ((0, 0, 1), (1, 1, 1)), ORANGE)
S_SHAPE = ShapeDef("S", ((0, 1, 1), (1, 1, 0)), GREEN)
Z_SHAPE = ShapeDef("Z", ((1, 1, 0), (0, 1, 1)), RED)

SHAPES: Tuple[ShapeDef, ...] = (
    I_SHAPE, O_SHAPE, T_SHAPE, J_SHAPE, L_SHAPE, S_SHAPE, Z_SHAPE,
)

SHAPES_BY_NAME = {s.name: s for s in SHAPES}
