"""Base class for animated, physics-driven characters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from hollowzero.animation import Animation
from hollowzero.camera import Camera
from hollowzero.collision import CollisionBox, CollisionManager
from hollowzero.state_machine import StateMachine
from hollowzero.timer import Timer
from hollowzero.vector2 import Vector2

FLOOR_Y = 620.0
GRAVITY_Y = 980.0
WORLD_WIDTH = 1280.0
INVULNERABLE_DURATION = 1.0
BLINK_INTERVAL = 0.075


@dataclass
class AnimationGroup:
    """The left- and right-facing variants of one animation."""

    left: Animation = field(default_factory=Animation)
    right: Animation = field(default_factory=Animation)


class Character:
    """A character with hit points, gravity, collision boxes and animations."""

    FLOOR_Y = FLOOR_Y
    GRAVITY_Y = GRAVITY_Y

    def __init__(self, collision_manager: Optional[CollisionManager] = None) -> None:
        self._collision_manager = (
            collision_manager if collision_manager is not None else CollisionManager.instance()
        )
        self._hit_box = self._collision_manager.create_collision_box()
        self._hurt_box = self._collision_manager.create_collision_box()

        self.hp = 10
        self.position = Vector2()
        self.velocity = Vector2()
        self.logic_height = 0.0
        self.facing_left = True
        self.gravity_enabled = True
        self.state_machine = StateMachine()
        self.animation_pool: dict[str, AnimationGroup] = {}
        self.current_animation: Optional[AnimationGroup] = None

        self._is_invulnerable = False
        self._is_blink_invisible = False
        self._timer_invulnerable_status = Timer(
            duration=INVULNERABLE_DURATION, one_shot=True, on_timeout=self._end_invulnerability
        )
        self._timer_invulnerable_blink = Timer(
            duration=BLINK_INTERVAL, one_shot=False, on_timeout=self._toggle_blink
        )

    def _end_invulnerability(self) -> None:
        self._is_invulnerable = False

    def _toggle_blink(self) -> None:
        self._is_blink_invisible = not self._is_blink_invisible

    @property
    def hit_box(self) -> CollisionBox:
        return self._hit_box

    @property
    def hurt_box(self) -> CollisionBox:
        return self._hurt_box

    @property
    def is_invulnerable(self) -> bool:
        return self._is_invulnerable

    @property
    def is_blink_invisible(self) -> bool:
        return self._is_blink_invisible

    @property
    def floor_y(self) -> float:
        return self.FLOOR_Y

    @property
    def logic_center(self) -> Vector2:
        return Vector2(self.position.x, self.position.y - self.logic_height / 2)

    def close(self) -> None:
        """Remove this character's collision boxes from the manager."""
        self._collision_manager.destroy_collision_box(self._hit_box)
        self._collision_manager.destroy_collision_box(self._hurt_box)

    def decrease_hp(self) -> None:
        if self._is_invulnerable:
            return
        self.hp -= 1
        if self.hp > 0:
            self.make_invulnerable()
        self.on_hurt()

    def is_on_floor(self) -> bool:
        return self.position.y >= self.FLOOR_Y

    def make_invulnerable(self) -> None:
        self._is_invulnerable = True
        self._timer_invulnerable_status.restart()

    def on_input(self, event: Any) -> None:
        pass

    def on_update(self, delta_time: float) -> None:
        self.state_machine.on_update(delta_time)

        if self.hp <= 0:
            self.velocity.x = 0.0
        if self.gravity_enabled:
            self.velocity.y += self.GRAVITY_Y * delta_time

        self.position += self.velocity * delta_time

        if self.is_on_floor():
            self.position.y = self.FLOOR_Y
            self.velocity.y = 0.0

        self.position.x = min(max(self.position.x, 0.0), WORLD_WIDTH)

        self._hurt_box.position = self.logic_center

        self._timer_invulnerable_status.update(delta_time)
        if self._is_invulnerable:
            self._timer_invulnerable_blink.update(delta_time)

        if self.current_animation is None:
            return
        animation = self._facing_animation()
        animation.update(delta_time)
        animation.position = self.position

    def _facing_animation(self) -> Animation:
        group = self.current_animation
        return group.left if self.facing_left else group.right

    def render(self, camera: Camera) -> None:
        if self.current_animation is None or (self._is_invulnerable and self._is_blink_invisible):
            return
        self._facing_animation().render(camera)

    def on_hurt(self) -> None:
        pass

    def switch_state(self, state_id: str) -> None:
        self.state_machine.switch_to(state_id)

    def set_animation(self, animation_id: str) -> None:
        """Make ``animation_id`` current, creating an empty group if unknown."""
        group = self.animation_pool.setdefault(animation_id, AnimationGroup())
        self.current_animation = group
        group.left.reset()
        group.right.reset()