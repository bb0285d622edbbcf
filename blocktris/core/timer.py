# blocktris/core/timer.py
from typing import Callable, Protocol


class IntervalTimer(Protocol):
    """
    Relógio de intervalo fixo que dispara o tick do jogo.
    start() sempre substitui um agendamento anterior; cancel() é idempotente.
    """

    def start(self, callback: Callable[[], None], interval_ms: int) -> None: ...

    def cancel(self) -> None: ...

    @property
    def active(self) -> bool: ...
