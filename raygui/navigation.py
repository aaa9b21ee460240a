"""Navigation camera base class and the matrix helpers the cameras share.

Matrices are 4x4 numpy arrays in row-vector convention: a point ``p`` is
transformed as ``p @ m`` and the translation lives in the last row.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from raygui.gui_types import Action


def rotation(axis: Sequence[float], angle: float) -> np.ndarray:
    """Return the 4x4 matrix rotating by ``angle`` radians about ``axis``."""
    v = np.asarray(axis, dtype=float)[:3]
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError("rotation axis must not be zero")
    x, y, z = v / length
    s, c = math.sin(angle), math.cos(angle)
    t = 1.0 - c
    return np.array(
        [
            [x * x + (1 - x * x) * c, x * y * t + z * s, x * z * t - y * s, 0.0],
            [x * y * t - z * s, y * y + (1 - y * y) * c, y * z * t + x * s, 0.0],
            [x * z * t + y * s, y * z * t - x * s, z * z + (1 - z * z) * c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def translation(position: Sequence[float]) -> np.ndarray:
    """Return the 4x4 matrix translating by ``position``."""
    m = np.identity(4)
    m[3, :3] = np.asarray(position, dtype=float)[:3]
    return m


def transform_vector(matrix: np.ndarray, vector: Sequence[float]) -> np.ndarray:
    """Transform a direction by the upper 3x3 part of ``matrix``."""
    return np.asarray(vector, dtype=float)[:3] @ np.asarray(matrix, dtype=float)[:3, :3]


def format_matrix(comment: str, matrix: np.ndarray) -> str:
    """Format a matrix as a node xform entry that can be pasted into a scene file."""
    values = ", ".join(f"{float(v):g}" for v in np.asarray(matrix).reshape(16))
    return f'-- {comment}\n["node xform"] = Mat4({values}),\n\n'


@dataclass(frozen=True)
class HalfOpenViewport:
    """Integer pixel window, inclusive of its minimum and exclusive of its maximum."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    def width(self) -> int:
        """Number of pixel columns."""
        return self.max_x - self.min_x

    def height(self) -> int:
        """Number of pixel rows."""
        return self.max_y - self.min_y


class NavigationCam(ABC):
    """Base class for the interactive navigation models."""

    def set_render_context(self, context: Any) -> None:
        """Give the camera access to the scene; ignored by default."""

    @abstractmethod
    def reset_transform(self, xform: np.ndarray, make_default: bool) -> np.ndarray:
        """Adopt ``xform`` and return it with any constraints of the model applied.

        With ``make_default`` the transform becomes the one a reset returns to.
        """

    @abstractmethod
    def update(self, dt: float) -> np.ndarray:
        """Advance by ``dt`` seconds and return the latest camera matrix."""

    def process_key_press(self, action: Action, cursor: Sequence[float] = (0.0, 0.0)) -> bool:
        """Handle a pressed binding; return True if it was used."""
        return False

    def process_key_release(self, action: Action) -> bool:
        """Handle a released binding; return True if it was used."""
        return False

    def process_mouse_move(self, xpos: float, ypos: float) -> bool:
        """Handle cursor movement; return True if it was used."""
        return False

    def clear_movement_state(self) -> None:
        """Forget any keys or buttons held down."""