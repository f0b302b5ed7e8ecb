import numpy as np
import pytest

from orbitview.camera import Camera, Movement
from orbitview.controls import Controls, FrameCounter, MouseTracker, Toggle


def test_toggle_flips_once_per_press():
    toggle = Toggle(False)
    assert toggle.update(True) is True
    assert toggle.update(True) is True
    assert toggle.update(False) is True
    assert toggle.update(True) is False


def test_toggle_without_press_keeps_value():
    toggle = Toggle(True)
    for _ in range(3):
        assert toggle.update(False) is True
    assert bool(toggle) is True


def test_frame_counter_reports_after_one_second():
    counter = FrameCounter(0.0)
    results = [counter.tick(t) for t in (0.2, 0.4, 0.6, 0.8)]
    assert results == [None, None, None, None]
    assert counter.tick(1.0) == 5
    assert counter.frames == 0
    assert counter.last_time == 1.0


def test_frame_counter_advances_by_one_second_only():
    counter = FrameCounter(0.0)
    assert counter.tick(2.5) == 1
    assert counter.last_time == 1.0
    assert counter.tick(2.6) == 1
    assert counter.last_time == 2.0


def test_mouse_tracker_first_move_has_no_offset():
    tracker = MouseTracker(640.0, 360.0)
    assert tracker.move(100.0, 200.0) == (0.0, 0.0)


def test_mouse_tracker_offsets():
    tracker = MouseTracker()
    tracker.move(10.0, 10.0)
    assert tracker.move(15.0, 4.0) == (5.0, 6.0)
    assert tracker.move(15.0, 4.0) == (0.0, 0.0)


@pytest.mark.parametrize("key,direction", [
    ("w", Movement.FORWARD),
    ("s", Movement.BACKWARD),
    ("a", Movement.LEFT),
    ("d", Movement.RIGHT),
    ("q", Movement.DOWN),
    ("e", Movement.UP),
])
def test_movement_keys_move_camera(key, direction):
    controlled = Camera((0.0, 0.0, 50.0))
    reference = Camera((0.0, 0.0, 50.0))
    Controls(controlled).apply({key}, 0.1)
    reference.process_keyboard(direction, 1.0)
    np.testing.assert_allclose(controlled.position, reference.position)


def test_forward_moves_along_front():
    camera = Camera((0.0, 0.0, 0.0))
    Controls(camera).apply(["W"], 0.1)
    np.testing.assert_allclose(camera.position, [0.0, 0.0, -2.5], atol=1e-9)


def test_escape_requests_close():
    controls = Controls(Camera())
    assert controls.apply({"escape"}, 0.0) is True
    assert controls.apply(set(), 0.0) is False


def test_toggle_defaults_and_switching():
    controls = Controls(Camera())
    assert (controls.blinn, controls.sun_rotate, controls.dir_light) == (False, True, True)
    assert (controls.point_light, controls.normal_mapping) == (False, False)
    controls.apply({"i", "b"}, 0.0)
    assert controls.sun_rotate is False
    assert controls.blinn is True
    controls.apply({"i", "b"}, 0.0)
    assert controls.sun_rotate is False
    controls.apply(set(), 0.0)
    controls.apply({"i"}, 0.0)
    assert controls.sun_rotate is True