import dataclasses

import pytest

from engine2d.camera import DEFAULT_PRIORITY, Camera, CameraManager
from engine2d.game_object import GameObject
from engine2d.transform import Matrix3x2, Transform


def assert_matrix_close(a, b):
    assert dataclasses.astuple(a) == pytest.approx(dataclasses.astuple(b), abs=1e-9)


def make_camera(priority=None):
    cam = Camera()
    if priority is not None:
        cam.priority = priority
        cam.reset_priority_changed()
    return cam


def test_default_priority_and_change_flag():
    cam = Camera()
    assert cam.priority == DEFAULT_PRIORITY
    assert cam.priority_changed is False
    cam.priority = 3
    assert cam.priority_changed is True
    cam.reset_priority_changed()
    assert cam.priority_changed is False


def test_camera_without_owner_is_identity():
    cam = Camera()
    assert cam.get_matrix() == Matrix3x2.identity()


def test_camera_matrix_follows_owner():
    go = GameObject()
    go.transform.set_position(30.0, -5.0)
    cam = go.add_component(Camera)
    go.process_start_queue()
    assert isinstance(cam.transform, Transform)
    assert_matrix_close(cam.get_matrix(), go.transform.to_world_matrix())
    assert_matrix_close(cam.get_matrix() @ cam.get_invert_matrix(), Matrix3x2.identity())


def test_singular_camera_matrix_returned_unchanged():
    go = GameObject()
    go.transform.set_scale(0.0, 0.0)
    cam = go.add_component(Camera)
    go.process_start_queue()
    assert cam.get_invert_matrix() == cam.get_matrix()


def test_manager_empty_has_no_active_camera():
    manager = CameraManager()
    assert len(manager) == 0
    assert manager.active_camera is None
    manager.update()
    assert manager.active_camera is None


def test_register_sorts_by_priority():
    manager = CameraManager()
    high = make_camera(20)
    low = make_camera(1)
    manager.register(high)
    manager.register(low)
    assert len(manager) == 2
    assert manager.active_camera is low
    assert manager.cameras == (low, high)


def test_update_resorts_after_priority_change():
    manager = CameraManager()
    a = make_camera(1)
    b = make_camera(5)
    manager.register(a)
    manager.register(b)
    b.priority = 0
    assert manager.active_camera is a
    manager.update()
    assert manager.active_camera is b
    assert not any(cam.priority_changed for cam in manager.cameras)


def test_clear_all_removes_cameras():
    manager = CameraManager()
    manager.register(make_camera())
    manager.clear_all()
    assert len(manager) == 0
    assert manager.active_camera is None


def test_camera_transform_makes_objects_dirty():
    go = GameObject()
    cam = go.add_component(Camera)
    go.process_start_queue()
    target = Transform()
    target.reset_dirty()
    assert target.is_dirty(cam) is True
    cam.transform.reset_dirty()
    assert target.is_dirty(cam) is False


def test_final_matrix_uses_camera_inverse():
    go = GameObject()
    go.transform.set_position(10.0, 0.0)
    cam = go.add_component(Camera)
    go.process_start_queue()
    target = Transform()
    target.is_unity_coords = False
    target.set_position(10.0, 0.0)
    final = target.calculate_final_matrix(cam)
    assert_matrix_close(final, Matrix3x2.identity())