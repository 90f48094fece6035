"""Collision layers, boxes and the manager that tests them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, ClassVar, Optional

import pygame

from hollowzero.camera import Camera
from hollowzero.vector2 import Vector2

_ENABLED_COLOR = (255, 195, 195, 255)
_DISABLED_COLOR = (115, 115, 175, 255)


class CollisionLayer(Enum):
    NONE = 0
    PLAYER = 1
    ENEMY = 2


@dataclass(eq=False)
class CollisionBox:
    """An axis-aligned box centred on ``position``.

    A box whose ``layer_dst`` matches another box's ``layer_src`` hits it,
    and the other box's ``on_collide`` is called.
    """

    size: Vector2 = field(default_factory=Vector2)
    position: Vector2 = field(default_factory=Vector2)
    enabled: bool = True
    on_collide: Optional[Callable[[], None]] = None
    layer_src: CollisionLayer = CollisionLayer.NONE
    layer_dst: CollisionLayer = CollisionLayer.NONE


def _overlaps(src: CollisionBox, dst: CollisionBox) -> bool:
    colliding_x = (
        max(src.position.x + src.size.x / 2, dst.position.x + dst.size.x / 2)
        - min(src.position.x - src.size.x / 2, dst.position.x - dst.size.x / 2)
        <= src.size.x + dst.size.x
    )
    colliding_y = (
        max(src.position.y + src.size.y / 2, dst.position.y + dst.size.y / 2)
        - min(src.position.y - src.size.y / 2, dst.position.y - dst.size.y / 2)
        <= src.size.y + dst.size.y / 2
    )
    return colliding_x and colliding_y


class CollisionManager:
    """Owns every collision box and resolves hits between them."""

    _instance: ClassVar[Optional[CollisionManager]] = None

    def __init__(self) -> None:
        self._boxes: list[CollisionBox] = []

    @classmethod
    def instance(cls) -> CollisionManager:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def boxes(self) -> tuple[CollisionBox, ...]:
        return tuple(self._boxes)

    def __len__(self) -> int:
        return len(self._boxes)

    def create_collision_box(self) -> CollisionBox:
        box = CollisionBox()
        self._boxes.append(box)
        return box

    def destroy_collision_box(self, box: CollisionBox) -> None:
        self._boxes = [b for b in self._boxes if b is not box]

    def handle_collision(self) -> None:
        boxes = list(self._boxes)
        for src in boxes:
            if not src.enabled or src.layer_dst is CollisionLayer.NONE:
                continue
            for dst in boxes:
                if not dst.enabled or src is dst or src.layer_dst is not dst.layer_src:
                    continue
                if _overlaps(src, dst) and dst.on_collide is not None:
                    dst.on_collide()

    def debug_render(self, camera: Camera) -> None:
        """Outline every box on the camera's target surface."""
        surface = camera.renderer
        for box in self._boxes:
            rect = pygame.Rect(
                int(box.position.x - box.size.x / 2),
                int(box.position.y - box.size.y / 2),
                int(box.size.x),
                int(box.size.y),
            )
            color = _ENABLED_COLOR if box.enabled else _DISABLED_COLOR
            pygame.draw.rect(surface, color, rect, 1)