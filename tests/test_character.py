import pygame
import pytest

from hollowzero.character import AnimationGroup, Character
from hollowzero.collision import CollisionManager
from hollowzero.state_machine import StateNode
from hollowzero.vector2 import Vector2


class RecordingCamera:
    def __init__(self):
        self.calls = []

    def render_texture(self, texture, rect_src, rect_dst, angle, center):
        self.calls.append((texture, rect_dst))


class HurtCounter(Character):
    def __init__(self, manager):
        super().__init__(manager)
        self.hurts = 0

    def on_hurt(self):
        self.hurts += 1


class RecordingState(StateNode):
    def __init__(self):
        self.events = []

    def on_enter(self):
        self.events.append("enter")

    def on_exit(self):
        self.events.append("exit")


@pytest.fixture
def manager():
    return CollisionManager()


@pytest.fixture
def character(manager):
    return Character(manager)


def _with_animation(character):
    character.set_animation("idle")
    strip = pygame.Surface((20, 10))
    character.current_animation.left.add_frames_from_strip(strip, 2)
    character.current_animation.right.add_frames_from_strip(strip, 2)
    return strip


def test_boxes_registered_and_released(manager):
    character = Character(manager)
    assert manager.boxes == (character.hit_box, character.hurt_box)
    character.close()
    assert len(manager) == 0


def test_decrease_hp_grants_invulnerability(manager):
    character = HurtCounter(manager)
    character.decrease_hp()
    assert character.hp == 9
    assert character.is_invulnerable
    character.decrease_hp()
    assert character.hp == 9
    assert character.hurts == 1


def test_last_hit_is_not_followed_by_invulnerability(manager):
    character = HurtCounter(manager)
    character.hp = 1
    character.decrease_hp()
    assert character.hp == 0
    assert not character.is_invulnerable
    assert character.hurts == 1


def test_invulnerability_ends_after_duration(character):
    character.position = Vector2(100, character.FLOOR_Y)
    character.make_invulnerable()
    character.on_update(0.5)
    assert character.is_invulnerable
    character.on_update(0.5)
    assert not character.is_invulnerable


def test_gravity_pulls_down_in_the_air(character):
    character.position = Vector2(100, 0)
    character.on_update(0.1)
    assert character.velocity.y > 0
    assert 0 < character.position.y < character.FLOOR_Y


def test_gravity_can_be_disabled(character):
    character.position = Vector2(100, 0)
    character.gravity_enabled = False
    character.on_update(0.1)
    assert character.position.y == 0
    assert character.velocity.y == 0


def test_floor_stops_fall(character):
    character.position = Vector2(100, 700)
    character.velocity = Vector2(0, 50)
    character.on_update(0.01)
    assert character.position.y == 620
    assert character.velocity.y == 0
    assert character.is_on_floor()
    assert character.floor_y == 620


@pytest.mark.parametrize("start_x, expected", [(-50.0, 0.0), (2000.0, 1280.0)])
def test_horizontal_position_clamped(character, start_x, expected):
    character.position = Vector2(start_x, character.FLOOR_Y)
    character.on_update(0.01)
    assert character.position.x == expected


def test_dead_character_stops_moving_horizontally(character):
    character.hp = 0
    character.position = Vector2(100, character.FLOOR_Y)
    character.velocity = Vector2(300, 0)
    character.on_update(0.1)
    assert character.velocity.x == 0
    assert character.position.x == 100


def test_hurt_box_follows_logic_center(character):
    character.logic_height = 120
    character.position = Vector2(300, character.FLOOR_Y)
    character.on_update(0.01)
    assert character.hurt_box.position == character.logic_center
    assert character.logic_center.y == character.position.y - character.logic_height / 2


def test_set_animation_creates_group(character):
    character.set_animation("run")
    assert isinstance(character.animation_pool["run"], AnimationGroup)
    assert character.current_animation is character.animation_pool["run"]


def test_animation_follows_position(character):
    _with_animation(character)
    character.position = Vector2(200, character.FLOOR_Y)
    character.on_update(0.01)
    assert character.current_animation.left.position == character.position


def test_render_draws_facing_animation(character):
    strip = _with_animation(character)
    camera = RecordingCamera()
    character.render(camera)
    assert len(camera.calls) == 1
    assert camera.calls[0][0] is strip


def test_render_without_animation_draws_nothing(character):
    camera = RecordingCamera()
    character.render(camera)
    assert camera.calls == []


def test_blink_hides_invulnerable_character(character):
    _with_animation(character)
    character.position = Vector2(100, character.FLOOR_Y)
    character.make_invulnerable()
    character.on_update(0.08)
    assert character.is_blink_invisible
    camera = RecordingCamera()
    character.render(camera)
    assert camera.calls == []


def test_switch_state_enters_and_exits(character):
    first, second = RecordingState(), RecordingState()
    character.state_machine.register_state("a", first)
    character.state_machine.register_state("b", second)
    character.switch_state("a")
    character.switch_state("b")
    assert first.events == ["enter", "exit"]
    assert second.events == ["enter"]
    assert character.state_machine.current_state is second