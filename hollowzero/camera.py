"""Camera that offsets drawing and can shake."""

from __future__ import annotations

import math
import random
from typing import Optional, Sequence

import pygame

from hollowzero.timer import Timer
from hollowzero.vector2 import Vector2


def _to_pixel(value: float) -> int:
    return int(math.floor(value + 0.5))


class Camera:
    """Draws textures onto a target surface relative to the camera position."""

    def __init__(self, renderer: pygame.Surface, rng: Optional[random.Random] = None) -> None:
        self._renderer = renderer
        self._rng = rng if rng is not None else random.Random()
        self._position = Vector2()
        self._is_shaking = False
        self._shaking_strength = 0.0
        self._timer_shake = Timer(one_shot=True, on_timeout=self._stop_shaking)

    def _stop_shaking(self) -> None:
        self._is_shaking = False
        self.reset()

    @property
    def position(self) -> Vector2:
        return self._position

    @property
    def renderer(self) -> pygame.Surface:
        return self._renderer

    @property
    def is_shaking(self) -> bool:
        return self._is_shaking

    def reset(self) -> None:
        self._position.x = 0.0
        self._position.y = 0.0

    def update(self, delta_time: float) -> None:
        self._timer_shake.update(delta_time)
        if self._is_shaking:
            strength = self._shaking_strength
            self._position.x = (-50 + self._rng.randrange(100)) / 50.0 * strength
            self._position.y = (-50 + self._rng.randrange(100)) / 50.0 * strength

    def shake(self, strength: float, duration: float) -> None:
        self._is_shaking = True
        self._shaking_strength = strength
        self._timer_shake.duration = duration
        self._timer_shake.restart()

    def render_texture(
        self,
        texture: pygame.Surface,
        rect_src,
        rect_dst: Sequence[float],
        angle: float,
        center: Optional[Sequence[float]],
    ) -> None:
        """Draw ``rect_src`` of ``texture`` into ``rect_dst`` (world space).

        ``angle`` is in degrees, clockwise, about ``center`` relative to the
        destination rectangle, or about its middle when ``center`` is None.
        """
        x, y, w, h = rect_dst
        x -= self._position.x
        y -= self._position.y

        image = texture if rect_src is None else texture.subsurface(pygame.Rect(rect_src))
        size = (_to_pixel(w), _to_pixel(h))
        if size[0] <= 0 or size[1] <= 0:
            return
        if image.get_size() != size:
            image = pygame.transform.scale(image, size)

        if not angle:
            self._renderer.blit(image, (_to_pixel(x), _to_pixel(y)))
            return

        if center is None:
            pivot_x, pivot_y = x + w / 2, y + h / 2
        else:
            pivot_x, pivot_y = x + center[0], y + center[1]

        rotated = pygame.transform.rotate(image, -angle)
        offset_x = x + w / 2 - pivot_x
        offset_y = y + h / 2 - pivot_y
        radians = math.radians(angle)
        cos_a, sin_a = math.cos(radians), math.sin(radians)
        centre_x = pivot_x + offset_x * cos_a - offset_y * sin_a
        centre_y = pivot_y + offset_x * sin_a + offset_y * cos_a
        rw, rh = rotated.get_size()
        self._renderer.blit(rotated, (_to_pixel(centre_x - rw / 2), _to_pixel(centre_y - rh / 2)))