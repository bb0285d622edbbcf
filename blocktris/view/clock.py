# blocktris/view/clock.py
import arcade


class ArcadeTimer:
    """Tick de intervalo fixo no relógio do arcade (pyglet)."""

    def __init__(self):
        self._callback = None

    def _fire(self, delta_time: float):
        if self._callback is not None:
            self._callback()

    def start(self, callback, interval_ms: int) -> None:
        self.cancel()
        self._callback = callback
        arcade.schedule(self._fire, interval_ms / 1000.0)

    def cancel(self) -> None:
        if self._callback is not None:
            arcade.unschedule(self._fire)
            self._callback = None

    @property
    def active(self) -> bool:
        return self._callback is not None
