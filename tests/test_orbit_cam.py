import numpy as np
import pytest

from raygui.free_cam import camera_matrix
from raygui.gui_types import Action
from raygui.navigation import HalfOpenViewport
from raygui.orbit_cam import OrbitCam, OrbitCamera


class FakeContext:
    def __init__(self, hit=None, aperture=None, region=None):
        self.hit = hit
        self.aperture = aperture or HalfOpenViewport(0, 0, 100, 100)
        self.region = region or HalfOpenViewport(0, 0, 100, 100)
        self.calls = []

    def rezed_aperture_window(self):
        return self.aperture

    def rezed_region_window(self):
        return self.region

    def handle_pick_location(self, x, y):
        self.calls.append((x, y))
        return self.hit


def _orthonormal(m):
    r = m[:3, :3]
    return np.allclose(r @ r.T, np.identity(3))


def test_default_camera_is_orthonormal():
    cam = OrbitCamera()
    m = cam.camera_to_world()
    assert _orthonormal(m)
    assert np.allclose(m[3], [0.0, 0.0, -3.0, 1.0])
    assert np.allclose(-m[2, :3], cam.view_dir)


def test_reset_transform_round_trip():
    xform = camera_matrix(0.4, -0.3, 0.2, (1.0, 2.0, 3.0))
    cam = OrbitCam()
    returned = cam.reset_transform(xform, True)
    assert np.allclose(returned, xform)
    assert np.allclose(cam.camera_matrix(), xform)


def test_identity_round_trip():
    cam = OrbitCam()
    cam.reset_transform(np.identity(4), False)
    assert np.allclose(cam.camera_matrix(), np.identity(4))


def test_forward_key_moves_along_view_direction():
    cam = OrbitCam()
    cam.reset_transform(np.identity(4), True)
    start = cam.camera.position.copy()
    assert cam.process_key_press(Action.CAM_FORWARD, (5, 5))
    cam.update(0.1)
    delta = cam.camera.position - start
    assert float(np.dot(delta, cam.camera.view_dir)) > 0
    assert np.allclose(np.cross(delta, cam.camera.view_dir), 0.0)
    assert cam.process_key_release(Action.CAM_FORWARD)
    pos = cam.camera.position.copy()
    cam.update(0.1)
    assert np.allclose(cam.camera.position, pos)


def test_speed_up_increases_speed():
    cam = OrbitCam()
    before = cam.speed
    cam.process_key_press(Action.CAM_SPEED_UP)
    cam.update(0.5)
    assert cam.speed > before


def test_dolly_preserves_focus_point():
    cam = OrbitCamera()
    cam.focus_distance = 4.0
    focus = cam.focus_point.copy()
    cam.dolly(30.0)
    assert np.allclose(cam.focus_point, focus)
    assert cam.focus_distance < 4.0


def test_rotate_orbit_preserves_focus_point():
    cam = OrbitCamera()
    cam.focus_distance = 2.0
    focus = cam.focus_point.copy()
    cam.rotate_orbit(40.0, 10.0)
    assert np.allclose(cam.focus_point, focus)
    assert np.isclose(np.linalg.norm(cam.view_dir), 1.0)


def test_rotate_zero_keeps_view():
    cam = OrbitCamera()
    view = cam.view_dir.copy()
    cam.rotate(0.0, 0.0)
    assert np.allclose(cam.view_dir, view)


def test_roll_keeps_up_perpendicular_and_unit():
    cam = OrbitCamera()
    cam.roll(100.0)
    assert np.isclose(np.linalg.norm(cam.up), 1.0)
    assert np.isclose(np.dot(cam.up, cam.view_dir), 0.0)
    assert not np.allclose(cam.up, [0.0, 1.0, 0.0])


def test_mouse_move_requires_cursor():
    cam = OrbitCam()
    assert cam.process_mouse_move(10, 10) is False


def test_rotate_with_mouse_then_release():
    cam = OrbitCam()
    cam.reset_transform(np.identity(4), True)
    assert cam.process_key_press(Action.CAM_ROTATE, (100, 100))
    view = cam.camera.view_dir.copy()
    assert cam.process_mouse_move(130, 100)
    assert not np.allclose(cam.camera.view_dir, view)
    assert cam.process_key_release(Action.CAM_ROTATE) is False
    view = cam.camera.view_dir.copy()
    assert cam.process_mouse_move(160, 100) is False
    assert np.allclose(cam.camera.view_dir, view)


def test_unbound_action_is_ignored():
    cam = OrbitCam()
    assert cam.process_key_press(Action.SAVE_IMAGE) is False


def test_reset_camera_restores_initial_state():
    cam = OrbitCam()
    xform = camera_matrix(0.1, 0.2, 0.0, (1.0, 0.0, 0.0))
    cam.reset_transform(xform, True)
    cam.process_key_press(Action.CAM_DOLLY, (0, 0))
    cam.process_mouse_move(50, 50)
    assert not np.allclose(cam.camera_matrix(), xform)
    assert cam.process_key_press(Action.CAM_RESET)
    assert np.allclose(cam.camera_matrix(), xform)


def test_set_up_vector():
    cam = OrbitCam()
    cam.camera.up = np.array([1.0, 0.0, 0.0])
    assert cam.process_key_press(Action.CAM_SET_UP_VECTOR)
    assert np.allclose(cam.camera.up, [0.0, 1.0, 0.0])


def test_pick_without_context_raises():
    cam = OrbitCam()
    with pytest.raises(RuntimeError):
        cam.pick(1, 1)


def test_pick_applies_window_offset():
    ctx = FakeContext(
        hit=(1.0, 2.0, 3.0),
        aperture=HalfOpenViewport(0, 0, 100, 100),
        region=HalfOpenViewport(0, 0, 100, 100),
    )
    cam = OrbitCam()
    cam.set_render_context(ctx)
    hit = cam.pick(7, 9)
    assert ctx.calls == [(7, 9)]
    assert np.allclose(hit, [1.0, 2.0, 3.0])


def test_pick_focus_point_runs_once():
    ctx = FakeContext(hit=(0.0, 0.0, -5.0))
    cam = OrbitCam()
    cam.set_render_context(ctx)
    cam.reset_transform(np.identity(4), True)
    cam.pick_focus_point()
    assert np.allclose(cam.camera.focus_point, [0.0, 0.0, -5.0])
    assert np.isclose(cam.camera.focus_distance, 5.0)
    cam.pick_focus_point()
    assert len(ctx.calls) == 1


def test_recenter_moves_focus_to_pick():
    ctx = FakeContext(hit=(0.0, 0.0, -5.0))
    cam = OrbitCam()
    cam.set_render_context(ctx)
    cam.reset_transform(np.identity(4), True)
    ctx.hit = (2.0, 1.0, -4.0)
    assert cam.process_key_press(Action.CAM_RECENTER, (10, 10))
    assert np.allclose(cam.camera.focus_point, [2.0, 1.0, -4.0])
    assert cam.process_mouse_move(20, 20) is False


def test_camera_matrices_text(capsys):
    cam = OrbitCam()
    text = cam.camera_matrices_text()
    assert text.startswith('-- Full matrix containing rotation and position.\n["node xform"] = Mat4(')
    assert text.count(",") == 16
    assert cam.process_key_press(Action.CAM_PRINT_MATRICES)
    assert capsys.readouterr().out == text