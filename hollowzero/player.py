"""The player-controlled character."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Callable, Optional

import pygame

from hollowzero.animation import AnchorMode, Animation
from hollowzero.asset_manager import AssetManager
from hollowzero.camera import Camera
from hollowzero.character import AnimationGroup, Character
from hollowzero.collision import CollisionLayer, CollisionManager
from hollowzero.timer import Timer
from hollowzero.vector2 import Vector2

CD_ROLL = 0.75
CD_ATTACK = 0.5
SPEED_RUN = 300.0
SPEED_JUMP = 700.0
SPEED_ROLL = 800.0

START_POSITION = (250.0, 200.0)
LOGIC_HEIGHT = 120.0
HIT_BOX_SIZE = (150.0, 150.0)
HURT_BOX_SIZE = (40.0, 80.0)

# name -> (frame interval, loops, frames in the strip)
_BODY_ANIMATIONS: dict[str, tuple[float, bool, int]] = {
    "attack": (0.05, False, 5),
    "dead": (0.1, False, 6),
    "fall": (0.15, True, 5),
    "idle": (0.15, True, 5),
    "jump": (0.15, False, 5),
    "roll": (0.05, False, 7),
    "run": (0.075, True, 10),
}

_SLASH_INTERVAL = 0.07
_SLASH_FRAMES = 5

_ATTACK_KEYS = frozenset({pygame.K_j})
_JUMP_KEYS = frozenset({pygame.K_SPACE})
_ROLL_KEYS = frozenset({pygame.K_k, pygame.K_LSHIFT})


class AttackDirection(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Player(Character):
    """The hero: runs, jumps, rolls and slashes, driven by the keyboard."""

    CD_ROLL = CD_ROLL
    CD_ATTACK = CD_ATTACK
    SPEED_RUN = SPEED_RUN
    SPEED_JUMP = SPEED_JUMP
    SPEED_ROLL = SPEED_ROLL

    def __init__(
        self,
        collision_manager: Optional[CollisionManager] = None,
        asset_manager: Optional[AssetManager] = None,
        key_state: Optional[Callable[[], Any]] = None,
    ) -> None:
        super().__init__(collision_manager)
        self._assets = asset_manager if asset_manager is not None else AssetManager.instance()
        self._key_state = key_state if key_state is not None else pygame.key.get_pressed

        self.facing_left = False
        self.position = Vector2(*START_POSITION)
        self.logic_height = LOGIC_HEIGHT

        self.hit_box.size = Vector2(*HIT_BOX_SIZE)
        self.hurt_box.size = Vector2(*HURT_BOX_SIZE)
        self.hit_box.layer_src = CollisionLayer.NONE
        self.hit_box.layer_dst = CollisionLayer.ENEMY
        self.hurt_box.layer_src = CollisionLayer.PLAYER
        self.hurt_box.layer_dst = CollisionLayer.NONE
        self.hit_box.enabled = False
        self.hurt_box.on_collide = self.decrease_hp

        self._is_rolling = False
        self._is_roll_ready = True
        self._is_attacking = False
        self._is_attack_ready = True

        # The roll cooldown's expiry re-arms the attack, and the attack
        # cooldown timer carries no callback of its own.
        self._timer_roll_cooldown = Timer(
            duration=CD_ROLL, one_shot=True, on_timeout=self._rearm_attack
        )
        self._timer_attack_cooldown = Timer(duration=CD_ATTACK)

        self._left_down = False
        self._right_down = False
        self._up_down = False
        self._down_down = False
        self._jump_down = False
        self._roll_down = False
        self._attack_down = False

        self._attack_direction = AttackDirection.RIGHT
        self._current_slash: Optional[Animation] = None

        for name, (interval, loop, frames) in _BODY_ANIMATIONS.items():
            self.animation_pool[name] = AnimationGroup(
                left=self._make_animation(f"player/{name}", interval, loop, frames, AnchorMode.BOTTOM_CENTERED),
                right=self._make_animation(f"player/{name}", interval, loop, frames, AnchorMode.BOTTOM_CENTERED),
            )

        self._slash_animations = {
            direction: self._make_animation(
                f"player/vfx_attack_{direction.value}",
                _SLASH_INTERVAL,
                False,
                _SLASH_FRAMES,
                AnchorMode.CENTERED,
            )
            for direction in AttackDirection
        }

        self._jump_vfx_visible = False
        self._animation_jump_vfx = self._make_animation(
            "player/vfx_jump", 0.05, False, 5, AnchorMode.BOTTOM_CENTERED
        )
        self._landing_vfx_visible = False
        self._animation_landing_vfx = self._make_animation(
            "player/vfx_land", 0.1, False, 2, AnchorMode.BOTTOM_CENTERED
        )
        # Finishing the jump effect is what hides the landing effect.
        self._animation_jump_vfx.on_finished = self._hide_landing_vfx

    def _make_animation(
        self, texture_name: str, interval: float, loop: bool, frames: int, anchor: AnchorMode
    ) -> Animation:
        animation = Animation(interval=interval, loop=loop, anchor_mode=anchor)
        texture = self._assets.find_texture(texture_name)
        if texture is not None:
            animation.add_frames_from_strip(texture, frames)
        return animation

    def _rearm_attack(self) -> None:
        self._is_attack_ready = True

    def _hide_landing_vfx(self) -> None:
        self._landing_vfx_visible = False

    @property
    def rolling(self) -> bool:
        return self._is_rolling

    @rolling.setter
    def rolling(self, flag: bool) -> None:
        self._is_rolling = flag

    @property
    def attacking(self) -> bool:
        return self._is_attacking

    @attacking.setter
    def attacking(self, flag: bool) -> None:
        self._is_attacking = flag

    @property
    def move_axis(self) -> int:
        return int(self._right_down) - int(self._left_down)

    @property
    def attack_direction(self) -> AttackDirection:
        return self._attack_direction

    @property
    def current_slash_animation(self) -> Optional[Animation]:
        return self._current_slash

    @property
    def jump_vfx_visible(self) -> bool:
        return self._jump_vfx_visible

    @property
    def landing_vfx_visible(self) -> bool:
        return self._landing_vfx_visible

    def can_roll(self) -> bool:
        return self._is_roll_ready and not self._is_rolling and self._roll_down

    def can_attack(self) -> bool:
        return self._is_attack_ready and not self._is_attacking and self._attack_down

    def can_jump(self) -> bool:
        return self.is_on_floor() and self._jump_down

    def on_input(self, event: Any) -> None:
        if self.hp <= 0:
            return

        keys = self._key_state()
        self._left_down = bool(keys[pygame.K_a] or keys[pygame.K_LEFT])
        self._right_down = bool(keys[pygame.K_d] or keys[pygame.K_RIGHT])
        self._up_down = bool(keys[pygame.K_w] or keys[pygame.K_UP])
        self._down_down = bool(keys[pygame.K_s] or keys[pygame.K_DOWN])

        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return
        pressed = event.type == pygame.KEYDOWN
        key = event.key
        if key in _ATTACK_KEYS:
            self._attack_down = pressed
        elif key in _JUMP_KEYS:
            self._jump_down = pressed
        elif key in _ROLL_KEYS:
            self._roll_down = pressed

    def on_update(self, delta_time: float) -> None:
        if self.hp > 0 and not self._is_rolling:
            self.velocity.x = self.move_axis * SPEED_RUN

        if self.move_axis != 0:
            self.facing_left = self.move_axis < 0

        self._timer_roll_cooldown.update(delta_time)
        self._timer_attack_cooldown.update(delta_time)

        self._animation_jump_vfx.update(delta_time)
        self._animation_landing_vfx.update(delta_time)

        if self._is_attacking and self._current_slash is not None:
            self._current_slash.position = self.logic_center
            self._current_slash.update(delta_time)

        super().on_update(delta_time)

    def render(self, camera: Camera) -> None:
        if self._jump_vfx_visible:
            self._animation_jump_vfx.render(camera)
        if self._landing_vfx_visible:
            self._animation_landing_vfx.render(camera)

        super().render(camera)

        if self._is_attacking and self._current_slash is not None:
            self._current_slash.render(camera)

    def on_hurt(self) -> None:
        sound = self._assets.find_audio("player_hurt")
        if sound is not None:
            sound.play(loops=0)

    def on_jump(self) -> None:
        self.velocity.y -= SPEED_JUMP
        self._jump_vfx_visible = True
        self._animation_jump_vfx.position = self.position
        self._animation_jump_vfx.reset()

    def on_landing(self) -> None:
        self._landing_vfx_visible = True
        self._animation_landing_vfx.position = self.position
        self._animation_landing_vfx.reset()

    def on_roll(self) -> None:
        self._timer_roll_cooldown.restart()
        self._is_roll_ready = False
        self.velocity.x = -SPEED_ROLL if self.facing_left else SPEED_ROLL

    def on_attack(self) -> None:
        self._timer_attack_cooldown.restart()
        self._is_attack_ready = False
        # Every direction falls through to the right-hand slash.
        self._current_slash = self._slash_animations[AttackDirection.RIGHT]
        self._current_slash.position = self.logic_center
        self._current_slash.reset()

    def update_attack_direction(self, x: float, y: float) -> None:
        """Aim the attack at the point ``(x, y)``."""
        angle = math.atan2(y - self.position.y, x - self.position.x)
        if -math.pi / 4 <= angle < math.pi / 4:
            self._attack_direction = AttackDirection.RIGHT
        elif math.pi / 4 <= angle < 3 * math.pi / 4:
            self._attack_direction = AttackDirection.DOWN
        elif -math.pi <= angle < -3 * math.pi / 4:
            self._attack_direction = AttackDirection.LEFT
        else:
            self._attack_direction = AttackDirection.UP