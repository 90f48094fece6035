"""Frame-driven countdown timer."""

from __future__ import annotations

from typing import Callable, Optional


class Timer:
    """Fires ``on_timeout`` each time accumulated time reaches ``duration``.

    A one-shot timer fires only once until it is restarted.
    """

    def __init__(
        self,
        duration: float = 0.0,
        one_shot: bool = False,
        on_timeout: Optional[Callable[[], None]] = None,
    ) -> None:
        self.duration = duration
        self.one_shot = one_shot
        self.on_timeout = on_timeout
        self.elapsed = 0.0
        self._paused = False
        self._has_triggered = False

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def has_triggered(self) -> bool:
        return self._has_triggered

    def restart(self) -> None:
        self.elapsed = 0.0
        self._has_triggered = False

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def update(self, delta_time: float) -> None:
        if self._paused:
            return
        self.elapsed += delta_time
        if self.elapsed >= self.duration:
            can_fire = not self.one_shot or not self._has_triggered
            self._has_triggered = True
            if can_fire and self.on_timeout is not None:
                self.on_timeout()
            self.elapsed -= self.duration