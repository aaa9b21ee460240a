import math

import numpy as np
import pytest

from raygui.gui_types import Action
from raygui.navigation import (
    HalfOpenViewport,
    NavigationCam,
    format_matrix,
    rotation,
    transform_vector,
    translation,
)


@pytest.mark.parametrize("axis", [(1, 0, 0), (0, 1, 0), (0, 0, 1), (1, 2, 3)])
@pytest.mark.parametrize("angle", [0.0, 0.3, -1.2, math.pi])
def test_rotation_is_orthonormal(axis, angle):
    m = rotation(axis, angle)
    assert np.allclose(m[:3, :3] @ m[:3, :3].T, np.identity(3))
    assert np.isclose(np.linalg.det(m[:3, :3]), 1.0)
    assert np.allclose(m[3], (0, 0, 0, 1))


def test_rotation_keeps_axis_fixed():
    axis = np.array([1.0, 2.0, 3.0])
    m = rotation(axis, 0.7)
    assert np.allclose(transform_vector(m, axis), axis)


def test_rotation_quarter_turn_about_z():
    m = rotation((0, 0, 1), math.pi / 2)
    assert np.allclose(transform_vector(m, (1, 0, 0)), (0, 1, 0))


def test_rotation_inverse_angle():
    a = rotation((0, 1, 0), 0.4)
    b = rotation((0, 1, 0), -0.4)
    assert np.allclose(a @ b, np.identity(4))


def test_rotation_zero_axis_raises():
    with pytest.raises(ValueError):
        rotation((0, 0, 0), 1.0)


def test_translation_moves_points_not_vectors():
    m = translation((1, 2, 3))
    point = np.array([4.0, 5.0, 6.0, 1.0]) @ m
    assert np.allclose(point[:3], (5, 7, 9))
    assert np.allclose(transform_vector(m, (4, 5, 6)), (4, 5, 6))


def test_format_matrix_identity():
    text = format_matrix("comment", np.identity(4))
    assert text == (
        '-- comment\n["node xform"] = Mat4(1, 0, 0, 0, 0, 1, 0, 0, '
        "0, 0, 1, 0, 0, 0, 0, 1),\n\n"
    )


def test_format_matrix_row_order():
    text = format_matrix("c", translation((7, 8, 9)))
    assert text.endswith("7, 8, 9, 1),\n\n")


def test_viewport_size():
    vp = HalfOpenViewport(10, 20, 110, 70)
    assert vp.width() == 100
    assert vp.height() == 50


def test_navigation_cam_is_abstract():
    with pytest.raises(TypeError):
        NavigationCam()


class _Fixed(NavigationCam):
    def reset_transform(self, xform, make_default):
        return xform

    def update(self, dt):
        return np.identity(4)


def test_default_handlers_ignore_input():
    cam = _Fixed()
    assert NavigationCam.set_render_context(cam, object()) is None
    assert NavigationCam.clear_movement_state(cam) is None
    assert NavigationCam.process_key_press(cam, Action.CAM_FORWARD, (1, 2)) is False
    assert NavigationCam.process_key_release(cam, Action.CAM_FORWARD) is False
    assert NavigationCam.process_mouse_move(cam, 3.0, 4.0) is False