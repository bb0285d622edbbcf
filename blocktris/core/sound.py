# blocktris/core/sound.py
from enum import Enum
from typing import Protocol


class SoundEvent(str, Enum):
    MOVE = "move"
    ROTATE = "rotate"
    DROP = "drop"
    GAME_OVER = "gameover"


class SoundSink(Protocol):
    """O que o núcleo do jogo espera de um tocador de som."""

    muted: bool

    def play(self, event: SoundEvent) -> None: ...

    def start_music(self) -> None: ...

    def pause_music(self) -> None: ...

    def resume_music(self) -> None: ...

    def stop_music(self) -> None: ...


class NullSound:
    """Tocador mudo, usado quando não há áudio disponível."""

    def __init__(self):
        self.muted = True

    def play(self, event: SoundEvent) -> None:
        pass

    def start_music(self) -> None:
        pass

    def pause_music(self) -> None:
        pass

    def resume_music(self) -> None:
        pass

    def stop_music(self) -> None:
        pass
