"""Frame-based sprite animation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence

import pygame

from hollowzero.atlas import Atlas
from hollowzero.camera import Camera
from hollowzero.timer import Timer
from hollowzero.vector2 import Vector2


class AnchorMode(Enum):
    CENTERED = "centered"
    BOTTOM_CENTERED = "bottom_centered"


@dataclass(frozen=True)
class Frame:
    texture: pygame.Surface
    rect: pygame.Rect


class Animation:
    """A sequence of frames advanced by a repeating timer."""

    def __init__(
        self,
        interval: float = 0.0,
        loop: bool = True,
        anchor_mode: AnchorMode = AnchorMode.CENTERED,
        on_finished: Optional[Callable[[], None]] = None,
    ) -> None:
        self._timer = Timer(duration=interval, one_shot=False, on_timeout=self._advance)
        self._position = Vector2()
        self._frames: list[Frame] = []
        self._frame_index = 0
        self.loop = loop
        self.anchor_mode = anchor_mode
        self.on_finished = on_finished
        self.rotation = 0.0
        self.center: Sequence[float] = (0.0, 0.0)

    def _advance(self) -> None:
        self._frame_index += 1
        if self._frame_index >= len(self._frames):
            self._frame_index = 0 if self.loop else max(len(self._frames) - 1, 0)
            if not self.loop and self.on_finished is not None:
                self.on_finished()

    @property
    def interval(self) -> float:
        return self._timer.duration

    @interval.setter
    def interval(self, value: float) -> None:
        self._timer.duration = value

    @property
    def position(self) -> Vector2:
        return self._position.copy()

    @position.setter
    def position(self, value: Vector2) -> None:
        self._position = Vector2(value.x, value.y)

    @property
    def frames(self) -> tuple[Frame, ...]:
        return tuple(self._frames)

    @property
    def frame_index(self) -> int:
        return self._frame_index

    def reset(self) -> None:
        self._timer.restart()
        self._frame_index = 0

    def add_frames_from_strip(self, texture: pygame.Surface, horizontal_frames: int) -> None:
        """Split a horizontal sprite strip into equally wide frames."""
        if horizontal_frames <= 0:
            raise ValueError("horizontal_frames must be positive")
        width, height = texture.get_size()
        frame_width = width // horizontal_frames
        self._frames.extend(
            Frame(texture, pygame.Rect(i * frame_width, 0, frame_width, height))
            for i in range(horizontal_frames)
        )

    def add_frames_from_atlas(self, atlas: Atlas) -> None:
        """Add one whole-texture frame for each texture in the atlas."""
        self._frames.extend(
            Frame(texture, pygame.Rect((0, 0), texture.get_size())) for texture in atlas
        )

    def update(self, delta_time: float) -> None:
        self._timer.update(delta_time)

    def render(self, camera: Camera) -> None:
        if not self._frames:
            raise IndexError("animation has no frames")
        frame = self._frames[self._frame_index]
        rect_dst = (
            self._position.x - frame.rect.w / 2.0,
            self._position.y - frame.rect.h / 2.0,
            float(frame.rect.w),
            float(frame.rect.h),
        )
        camera.render_texture(frame.texture, frame.rect, rect_dst, self.rotation, self.center)