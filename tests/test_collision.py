import pygame

from hollowzero.camera import Camera
from hollowzero.collision import CollisionBox, CollisionLayer, CollisionManager
from hollowzero.vector2 import Vector2


def _pair(manager, src_pos, dst_pos):
    hits = []
    attacker = manager.create_collision_box()
    attacker.layer_dst = CollisionLayer.ENEMY
    attacker.size = Vector2(10.0, 10.0)
    attacker.position = src_pos
    target = manager.create_collision_box()
    target.layer_src = CollisionLayer.ENEMY
    target.size = Vector2(10.0, 10.0)
    target.position = dst_pos
    target.on_collide = lambda: hits.append(1)
    return attacker, target, hits


def test_instance_is_shared_between_calls():
    first = CollisionManager.instance()
    second = CollisionManager.instance()
    assert isinstance(first, CollisionManager)
    assert second is first
    box = first.create_collision_box()
    try:
        assert box in second.boxes
    finally:
        second.destroy_collision_box(box)
    assert box not in first.boxes


def test_create_and_destroy():
    manager = CollisionManager()
    box = manager.create_collision_box()
    other = manager.create_collision_box()
    assert len(manager) == 2
    manager.destroy_collision_box(box)
    assert manager.boxes == (other,)
    manager.destroy_collision_box(box)
    assert manager.boxes == (other,)


def test_box_defaults():
    box = CollisionBox()
    assert box.enabled
    assert box.layer_src is CollisionLayer.NONE
    assert box.layer_dst is CollisionLayer.NONE


def test_overlapping_boxes_collide():
    manager = CollisionManager()
    _, _, hits = _pair(manager, Vector2(0.0, 0.0), Vector2(5.0, 5.0))
    manager.handle_collision()
    assert hits == [1]


def test_distant_boxes_do_not_collide():
    manager = CollisionManager()
    _, _, hits = _pair(manager, Vector2(0.0, 0.0), Vector2(100.0, 0.0))
    manager.handle_collision()
    assert hits == []


def test_disabled_boxes_do_not_collide():
    manager = CollisionManager()
    attacker, target, hits = _pair(manager, Vector2(0.0, 0.0), Vector2(0.0, 0.0))
    attacker.enabled = False
    manager.handle_collision()
    attacker.enabled = True
    target.enabled = False
    manager.handle_collision()
    assert hits == []


def test_layer_mismatch_does_not_collide():
    manager = CollisionManager()
    attacker, _, hits = _pair(manager, Vector2(0.0, 0.0), Vector2(0.0, 0.0))
    attacker.layer_dst = CollisionLayer.PLAYER
    manager.handle_collision()
    assert hits == []


def test_box_does_not_hit_itself():
    manager = CollisionManager()
    hits = []
    box = manager.create_collision_box()
    box.layer_src = CollisionLayer.PLAYER
    box.layer_dst = CollisionLayer.PLAYER
    box.on_collide = lambda: hits.append(1)
    manager.handle_collision()
    assert hits == []


def test_debug_render_outlines_boxes():
    target = pygame.Surface((40, 40))
    manager = CollisionManager()
    enabled = manager.create_collision_box()
    enabled.position = Vector2(10.0, 10.0)
    enabled.size = Vector2(4.0, 4.0)
    disabled = manager.create_collision_box()
    disabled.position = Vector2(30.0, 30.0)
    disabled.size = Vector2(4.0, 4.0)
    disabled.enabled = False
    manager.debug_render(Camera(target))
    assert target.get_at((8, 8)) == (255, 195, 195, 255)
    assert target.get_at((28, 28)) == (115, 115, 175, 255)
    assert target.get_at((9, 9)) == (0, 0, 0, 255)