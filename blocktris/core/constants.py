# blocktris/core/constants.py

# tabuleiro
BOARD_WIDTH = 10   # colunas
BOARD_HEIGHT = 20  # linhas

# pixels
CELL_SIZE = 24
SIDEBAR_WIDTH = 240
WINDOW_WIDTH = BOARD_WIDTH * CELL_SIZE + SIDEBAR_WIDTH
WINDOW_HEIGHT = BOARD_HEIGHT * CELL_SIZE

# caixa da próxima peça (4x4 células)
PREVIEW_CELLS = 4

# loop de jogo
DEFAULT_TICK_MS = 500
TICK_PRESETS = {
    "easy": 700,
    "normal": 500,
    "hard": 250,
}

LEADERBOARD_LIMIT = 5
LINE_SCORE = 100

EMPTY_COLOR = (7, 16, 36)
