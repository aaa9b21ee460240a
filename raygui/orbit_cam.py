"""Orbit camera that circles a focus point in front of it."""

from __future__ import annotations

import math
import sys
from enum import Enum, IntFlag, auto
from typing import Any, Sequence

import numpy as np

from raygui.gui_types import Action
from raygui.navigation import NavigationCam, format_matrix, rotation, transform_vector

_MOVE_SPEED = 0.03
_ROTATE_SPEED = 0.005
_DOLLY_SPEED = 0.005
_ROLL_SPEED = 0.005
_PARALLEL_LIMIT = 0.999


class _Move(IntFlag):
    FORWARD = 0x0001
    BACKWARD = 0x0002
    LEFT = 0x0004
    RIGHT = 0x0008
    UP = 0x0010
    DOWN = 0x0020
    SLOW_DOWN = 0x0040
    SPEED_UP = 0x0080


class _MouseMode(Enum):
    NONE = auto()
    ROTATE = auto()
    TRACK = auto()
    DOLLY = auto()
    ROLL = auto()


_ACTION_MOVES = {
    Action.CAM_FORWARD: _Move.FORWARD,
    Action.CAM_BACKWARD: _Move.BACKWARD,
    Action.CAM_LEFT: _Move.LEFT,
    Action.CAM_RIGHT: _Move.RIGHT,
    Action.CAM_UP: _Move.UP,
    Action.CAM_DOWN: _Move.DOWN,
    Action.CAM_SLOW_DOWN: _Move.SLOW_DOWN,
    Action.CAM_SPEED_UP: _Move.SPEED_UP,
}

_ACTION_MOUSE_MODES = {
    Action.CAM_ROTATE: _MouseMode.ROTATE,
    Action.CAM_TRACK: _MouseMode.TRACK,
    Action.CAM_DOLLY: _MouseMode.DOLLY,
    Action.CAM_ROLL: _MouseMode.ROLL,
}


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def _half(value: int) -> int:
    """Integer halving that truncates toward zero."""
    return int(value / 2)


class OrbitCamera:
    """World-space camera state: position, view direction, up vector and focus distance."""

    def __init__(self) -> None:
        self.position = np.array([0.0, 0.0, -3.0])
        self.view_dir = _normalize(-self.position)
        self.up = np.array([0.0, 1.0, 0.0])
        self.focus_distance = 1.0

    @property
    def focus_point(self) -> np.ndarray:
        """The point the camera orbits around."""
        return self.position + self.view_dir * self.focus_distance

    def camera_to_world(self) -> np.ndarray:
        """Return the orthonormalised camera-to-world matrix."""
        vz = -np.asarray(self.view_dir, dtype=float)
        vx = _normalize(np.cross(np.asarray(self.up, dtype=float), vz))
        vy = _normalize(np.cross(vz, vx))
        m = np.identity(4)
        m[0, :3] = vx
        m[1, :3] = vy
        m[2, :3] = vz
        m[3, :3] = self.position
        return m

    def translate(self, dx: float, dy: float, dz: float) -> None:
        """Move the camera in its own coordinate frame."""
        local = (-dx * _MOVE_SPEED, dy * _MOVE_SPEED, dz * _MOVE_SPEED)
        self.position = self.position + transform_vector(self.camera_to_world(), local)

    def _turned_view_dir(self, dtheta: float, dphi: float) -> np.ndarray:
        # In camera space the view direction is (0, 0, -1), spherical (pi, 0).
        theta = math.pi - dtheta * _ROTATE_SPEED
        phi = -dphi * _ROTATE_SPEED
        local = (
            math.cos(phi) * math.sin(theta),
            math.sin(phi),
            math.cos(phi) * math.cos(theta),
        )
        return transform_vector(self.camera_to_world(), local)

    def rotate(self, dtheta: float, dphi: float) -> None:
        """Turn the view direction in place."""
        self.view_dir = self._turned_view_dir(dtheta, dphi)

    def rotate_orbit(self, dtheta: float, dphi: float) -> None:
        """Orbit around the focus point."""
        currently_valid = abs(float(np.dot(self.up, self.view_dir))) < _PARALLEL_LIMIT
        new_view = self._turned_view_dir(dtheta, dphi)
        new_position = self.position + self.focus_distance * (self.view_dir - new_view)

        # Refuse to become near parallel with the up vector unless already so.
        if abs(float(np.dot(self.up, new_view))) < _PARALLEL_LIMIT or not currently_valid:
            self.position = new_position
            self.view_dir = new_view

    def dolly(self, ds: float) -> None:
        """Move toward (positive) or away from the focus point."""
        k = (1.0 - _DOLLY_SPEED) ** ds
        focus = self.focus_point
        self.position = self.position + self.focus_distance * (1.0 - k) * self.view_dir
        self.focus_distance = float(np.linalg.norm(focus - self.position))

    def roll(self, ds: float) -> None:
        """Rotate the up vector about the view direction."""
        if ds == 0:
            return
        rot = rotation(self.view_dir, -ds * _ROLL_SPEED)
        self.up = transform_vector(rot, self.up)


class OrbitCam(NavigationCam):
    """Navigation model orbiting a focus point picked in the scene.

    The render context, when set, provides ``rezed_region_window()`` and
    ``rezed_aperture_window()`` returning a ``HalfOpenViewport``, and
    ``handle_pick_location(x, y)`` returning the hit point or ``None``.
    """

    def __init__(self) -> None:
        self.render_context: Any = None
        self.camera = OrbitCamera()
        self.speed = 50.0
        self._input = _Move(0)
        self._mouse_mode = _MouseMode.NONE
        self._mouse_x = -1
        self._mouse_y = -1
        self._initial_transform_set = False
        self._initial_focus_set = False
        self._initial_position = np.zeros(3)
        self._initial_view_dir = np.zeros(3)
        self._initial_up = np.zeros(3)
        self._initial_focus_distance = 1.0

    def set_render_context(self, context: Any) -> None:
        """Use ``context`` for picking."""
        self.render_context = context

    def reset_transform(self, xform: np.ndarray, make_default: bool) -> np.ndarray:
        """Adopt ``xform`` unchanged."""
        xform = np.asarray(xform, dtype=float)
        cam = self.camera
        cam.position = xform[3, :3].copy()
        cam.view_dir = _normalize(-xform[2, :3])
        cam.up = xform[1, :3].copy()
        cam.focus_distance = 1.0

        if not self._initial_transform_set or make_default:
            self._initial_transform_set = True
            self._initial_focus_set = False
            self._initial_position = cam.position.copy()
            self._initial_view_dir = cam.view_dir.copy()
            self._initial_up = cam.up.copy()
            self._initial_focus_distance = cam.focus_distance

        return xform

    def pick_focus_point(self) -> None:
        """Focus on whatever lies under the centre pixel, once per default transform."""
        if self.render_context is None or self._initial_focus_set:
            return
        self._initial_focus_set = True

        vp = self.render_context.rezed_region_window()
        hit = self.pick(vp.width() // 2, vp.height() // 2)
        cam = self.camera
        if hit is not None:
            hit_vec = np.asarray(hit, dtype=float) - cam.position
            cam.view_dir = _normalize(hit_vec)
            cam.focus_distance = float(np.linalg.norm(hit_vec))
        self._initial_view_dir = cam.view_dir.copy()
        self._initial_focus_distance = cam.focus_distance

    def update(self, dt: float) -> np.ndarray:
        """Apply held movement keys over ``dt`` seconds and return the camera matrix."""
        movement = self.speed * dt
        state = self._input
        cam = self.camera

        if state & _Move.FORWARD:
            cam.translate(0.0, 0.0, -movement)
        if state & _Move.BACKWARD:
            cam.translate(0.0, 0.0, movement)
        if state & _Move.LEFT:
            cam.translate(movement, 0.0, 0.0)
        if state & _Move.RIGHT:
            cam.translate(-movement, 0.0, 0.0)
        if state & _Move.UP:
            cam.translate(0.0, movement, 0.0)
        if state & _Move.DOWN:
            cam.translate(0.0, -movement, 0.0)
        if state & _Move.SLOW_DOWN:
            self.speed += -self.speed * dt
        if state & _Move.SPEED_UP:
            self.speed += self.speed * dt

        return self.camera_matrix()

    def process_key_press(self, action: Action, cursor: Sequence[float] = (0.0, 0.0)) -> bool:
        """Handle a pressed binding; ``cursor`` is the current mouse position."""
        self._mouse_x = int(cursor[0])
        self._mouse_y = int(cursor[1])

        self.pick_focus_point()

        move = _ACTION_MOVES.get(action)
        if move is not None:
            self._input |= move
            return True
        mode = _ACTION_MOUSE_MODES.get(action)
        if mode is not None:
            self._mouse_mode = mode
            return True
        if action == Action.CAM_RECENTER:
            self.recenter_camera()
        elif action == Action.CAM_RESET:
            self.reset_camera()
        elif action == Action.CAM_SET_UP_VECTOR:
            self.camera.up = np.array([0.0, 1.0, 0.0])
        elif action == Action.CAM_PRINT_MATRICES:
            self.print_camera_matrices()
        else:
            return False
        return True

    def process_key_release(self, action: Action) -> bool:
        """Handle a released binding; any mouse interaction ends."""
        self._mouse_mode = _MouseMode.NONE
        move = _ACTION_MOVES.get(action)
        if move is None:
            return False
        self._input &= ~move
        return True

    def process_mouse_move(self, xpos: float, ypos: float) -> bool:
        """Rotate, track, dolly or roll by the cursor movement."""
        if self._mouse_x == -1 or self._mouse_y == -1:
            return False

        x, y = int(xpos), int(ypos)
        dx = float(x - self._mouse_x)
        dy = float(y - self._mouse_y)
        self._mouse_x, self._mouse_y = x, y

        cam = self.camera
        mode = self._mouse_mode
        if mode is _MouseMode.ROTATE:
            cam.rotate_orbit(dx, dy)
        elif mode is _MouseMode.TRACK:
            cam.translate(dx, dy, 0.0)
        elif mode is _MouseMode.DOLLY:
            cam.dolly(dx + dy)
        elif mode is _MouseMode.ROLL:
            cam.roll(dx)
        else:
            return False
        return True

    def clear_movement_state(self) -> None:
        """Forget held keys and the last cursor position."""
        self._input = _Move(0)
        self._mouse_mode = _MouseMode.NONE
        self._mouse_x = -1
        self._mouse_y = -1

    def recenter_camera(self) -> None:
        """Move the focus point onto whatever lies under the cursor."""
        if self._mouse_x == -1 or self._mouse_y == -1 or self.render_context is None:
            return

        new_focus = self.pick(self._mouse_x, self._mouse_y)
        if new_focus is not None:
            cam = self.camera
            new_focus = np.asarray(new_focus, dtype=float)
            cam.position = cam.position + (new_focus - cam.focus_point)
            cam.focus_distance = float(np.linalg.norm(new_focus - cam.position))

        # Repeated presses must not recenter again.
        self._mouse_x = self._mouse_y = -1

    def reset_camera(self) -> None:
        """Return to the default transform, if one has been set."""
        if self._initial_transform_set:
            self.clear_movement_state()
            cam = self.camera
            cam.position = self._initial_position.copy()
            cam.view_dir = self._initial_view_dir.copy()
            cam.up = self._initial_up.copy()
            cam.focus_distance = self._initial_focus_distance

    def pick(self, x: int, y: int) -> np.ndarray | None:
        """Return the scene point under pixel ``(x, y)``, or None on a miss."""
        if self.render_context is None:
            raise RuntimeError("picking needs a render context")
        # Offset so that the region window is centred on the pick point.
        avp = self.render_context.rezed_aperture_window()
        rvp = self.render_context.rezed_region_window()
        offset_x = _half(avp.max_x + avp.min_x) - _half(rvp.max_x + rvp.min_x)
        offset_y = _half(avp.max_y + avp.min_y) - _half(rvp.max_y + rvp.min_y)
        hit = self.render_context.handle_pick_location(x + offset_x, y - offset_y)
        return None if hit is None else np.asarray(hit, dtype=float)

    def camera_matrix(self) -> np.ndarray:
        """The current camera-to-world matrix."""
        return self.camera.camera_to_world()

    def camera_matrices_text(self) -> str:
        """The camera matrix as text that can be pasted into a scene file."""
        return format_matrix("Full matrix containing rotation and position.", self.camera_matrix())

    def print_camera_matrices(self) -> None:
        """Write the camera matrix to standard output."""
        sys.stdout.write(self.camera_matrices_text())
        sys.stdout.flush()