from blocktris.models.board import Board
from blocktris.models.tetromino import Tetromino


class ManualTimer:
    """Timer que só dispara quando o teste manda."""

    def __init__(self):
        self.callback = None
        self.interval_ms = None
        self.starts = 0
        self.cancels = 0

    def start(self, callback, interval_ms):
        self.cancel()
        self.callback = callback
        self.interval_ms = interval_ms
        self.starts += 1

    def cancel(self):
        if self.callback is not None:
            self.cancels += 1
        self.callback = None

    @property
    def active(self):
        return self.callback is not None

    def fire(self, times=1):
        for _ in range(times):
            if self.callback is None:
                return
            self.callback()


class RecordingSound:
    def __init__(self, muted=False):
        self.muted = muted
        self.events = []
        self.music = []

    def play(self, event):
        self.events.append(event)

    def start_music(self):
        self.music.append("start")

    def pause_music(self):
        self.music.append("pause")

    def resume_music(self):
        self.music.append("resume")

    def stop_music(self):
        self.music.append("stop")


class MemoryLeaderboard:
    def __init__(self, scores=None):
        self.scores = list(scores or [])
        self.recorded = []

    def record_score(self, score):
        self.recorded.append(score)
        self.scores = sorted(self.scores + [score], reverse=True)[:5]

    def fetch_top_scores(self, limit=5):
        return self.scores[:limit]


def fill_row(board: Board, row: int, color=(1, 1, 1), skip=()):
    for c in range(board.width):
        if c not in skip:
            board.grid[row][c] = color


def piece(shape, x=0, y=0, color=(9, 9, 9)):
    return Tetromino([list(r) for r in shape], color, x, y)
