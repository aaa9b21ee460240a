"""Free-flying camera driven by yaw, pitch and roll."""

from __future__ import annotations

import math
import sys
from enum import Enum, IntFlag, auto
from typing import Sequence

import numpy as np

from raygui.gui_types import Action
from raygui.navigation import (
    NavigationCam,
    format_matrix,
    rotation,
    transform_vector,
    translation,
)

# Must be between 0 and 1.
MAX_DAMPENING = 0.1


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


def camera_matrix(yaw: float, pitch: float, roll: float, position: Sequence[float]) -> np.ndarray:
    """Build a camera-to-world matrix from Euler angles and a position."""
    rot_yaw = rotation((0.0, 1.0, 0.0), yaw)
    rot_pitch = rotation((1.0, 0.0, 0.0), pitch)
    rot_roll = rotation((0.0, 0.0, 1.0), roll)
    return rot_roll @ rot_pitch @ rot_yaw @ translation(position)


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


class FreeCam(NavigationCam):
    """Camera that flies through the scene with keyboard and mouse."""

    def __init__(self) -> None:
        self.position = np.zeros(3)
        self.velocity = np.zeros(3)
        self.yaw = 0.0
        self.pitch = 0.0
        self.roll = 0.0
        self.speed = 10.0
        self.dampening = 1.0
        self.mouse_sensitivity = 0.004
        self._input = _Move(0)
        self._mouse_mode = _MouseMode.NONE
        self._mouse_x = 0
        self._mouse_y = 0
        self._mouse_dx = 0
        self._mouse_dy = 0
        self._initial_transform: np.ndarray | None = None

    def reset_transform(self, xform: np.ndarray, make_default: bool) -> np.ndarray:
        """Adopt ``xform``, decomposing it into yaw, pitch and roll."""
        xform = np.asarray(xform, dtype=float)
        if self._initial_transform is None or make_default:
            self._initial_transform = xform.copy()

        self.position = xform[3, :3].copy()
        self.velocity = np.zeros(3)

        view_dir = -_normalize(xform[2, :3])
        self.yaw = 0.0
        if view_dir[0] ** 2 + view_dir[2] ** 2 > 0.00001:
            self.yaw = math.atan2(-view_dir[0], -view_dir[2])

        # Only the pitches the free camera can natively handle are extracted.
        self.pitch = math.asin(float(np.clip(view_dir[1], -1.0, 1.0)))

        no_roll = camera_matrix(self.yaw, self.pitch, 0.0, (0.0, 0.0, 0.0))
        roll_only = xform @ no_roll.T
        x_axis = _normalize(roll_only[0, :3])
        self.roll = math.atan2(x_axis[1], x_axis[0])

        self._input = _Move(0)
        self._mouse_mode = _MouseMode.NONE
        self._mouse_x = self._mouse_y = 0
        self._mouse_dx = self._mouse_dy = 0

        return camera_matrix(self.yaw, self.pitch, self.roll, self.position)

    def update(self, dt: float) -> np.ndarray:
        """Integrate movement over ``dt`` seconds and return the camera matrix."""
        delta = np.zeros(3)
        movement = self.speed * 0.5
        state = self._input

        if state & _Move.FORWARD:
            delta += (0.0, 0.0, -movement)
        if state & _Move.BACKWARD:
            delta += (0.0, 0.0, movement)
        if state & _Move.LEFT:
            delta += (-movement, 0.0, 0.0)
        if state & _Move.RIGHT:
            delta += (movement, 0.0, 0.0)
        if state & _Move.UP:
            delta += (0.0, movement, 0.0)
        if state & _Move.DOWN:
            delta += (0.0, -movement, 0.0)
        if state & _Move.SLOW_DOWN:
            self.speed += -self.speed * dt
        if state & _Move.SPEED_UP:
            self.speed += self.speed * dt

        # Angles change instantly, independent of dt.
        if self._mouse_mode is _MouseMode.ROTATE:
            s, c = math.sin(-self.roll), math.cos(-self.roll)
            dx = self._mouse_dx * c - self._mouse_dy * s
            dy = self._mouse_dy * c + self._mouse_dx * s
            self.yaw -= dx * self.mouse_sensitivity
            self.pitch -= dy * self.mouse_sensitivity
        elif self._mouse_mode is _MouseMode.ROLL:
            self.roll += self._mouse_dx * self.mouse_sensitivity
        self._mouse_dx = self._mouse_dy = 0

        # Clip pitch to prevent gimbal lock.
        half_pi = math.pi / 2
        self.pitch = min(max(self.pitch, -half_pi), half_pi)

        rot = camera_matrix(self.yaw, self.pitch, self.roll, (0.0, 0.0, 0.0))
        self.velocity = self.velocity + transform_vector(rot, delta)

        length = float(np.linalg.norm(self.velocity))
        if length > self.speed:
            self.velocity = self.velocity * (self.speed / length)

        self.position = self.position + self.velocity * dt
        self.velocity = self.velocity * min(self.dampening * dt, MAX_DAMPENING)

        return camera_matrix(self.yaw, self.pitch, self.roll, self.position)

    def process_key_press(self, action: Action, cursor: Sequence[float] = (0.0, 0.0)) -> bool:
        """Handle a pressed binding; ``cursor`` is the current mouse position."""
        move = _ACTION_MOVES.get(action)
        if move is not None:
            self._input |= move
            return True
        if action == Action.CAM_PRINT_MATRICES:
            self.print_camera_matrices()
            return True
        if action == Action.CAM_SET_UP_VECTOR:
            self.roll = 0.0
            return True
        if action == Action.CAM_RESET:
            self.reset_camera()
            return True

        if action == Action.CAM_ROTATE:
            self._mouse_mode = _MouseMode.ROTATE
        elif action == Action.CAM_ROLL:
            self._mouse_mode = _MouseMode.ROLL
        else:
            self._mouse_mode = _MouseMode.NONE
            return False

        self._mouse_x = int(cursor[0])
        self._mouse_y = int(cursor[1])
        self._mouse_dx = self._mouse_dy = 0
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
        """Accumulate cursor movement while rotating or rolling."""
        if self._mouse_mode is _MouseMode.NONE:
            return False
        self._mouse_dx += int(xpos - self._mouse_x)
        self._mouse_dy += int(ypos - self._mouse_y)
        self._mouse_x = int(xpos)
        self._mouse_y = int(ypos)
        return True

    def clear_movement_state(self) -> None:
        """Stop all motion and forget held keys."""
        self.velocity = np.zeros(3)
        self._input = _Move(0)
        self._mouse_mode = _MouseMode.NONE
        self._mouse_x = 0
        self._mouse_y = 0

    def reset_camera(self) -> None:
        """Return to the default transform, if one has been set."""
        if self._initial_transform is not None:
            self.clear_movement_state()
            self.reset_transform(self._initial_transform, False)

    def camera_matrices_text(self) -> str:
        """The full matrix and the level (zero pitch and roll) matrix as text."""
        full = camera_matrix(self.yaw, self.pitch, self.roll, self.position)
        level = camera_matrix(self.yaw, 0.0, 0.0, self.position)
        return format_matrix("Full matrix containing rotation and position.", full) + format_matrix(
            "Matrix containing world xz rotation and position.", level
        )

    def print_camera_matrices(self) -> None:
        """Write the camera matrices to standard output."""
        sys.stdout.write(self.camera_matrices_text())
        sys.stdout.flush()