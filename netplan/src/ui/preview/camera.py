"""
Orbit camera for 3D floor plan navigation.

The camera circles a target point. World space is Y-up, matching room space.
"""

import math
import numpy as np
from typing import Tuple


class OrbitCamera:
    """Orbit camera around a target point.

    - Yaw turns around the world Y axis (0 = looking from +Z toward -Z)
    - Pitch tilts up/down (positive = above the target, looking down)
    - Distance is how far the camera sits from the target
    """

    def __init__(self):
        self.target = np.array([0.0, 0.0, 0.0], dtype=np.float32)
        self.distance = 20.0

        # Orbit angles (degrees)
        self.yaw = 30.0
        self.pitch = 25.0

        # Limits
        self.min_pitch = -89.0
        self.max_pitch = 89.0
        self.min_distance = 0.5

        # Sensitivity
        self.rotate_sensitivity = 0.4
        self.pan_sensitivity = 0.002

        # Projection
        self.fov = 45.0
        self.aspect = 1.0
        self.near = 0.05
        self.far = 1000.0

    def get_position(self) -> np.ndarray:
        """Get camera position in world space."""
        yaw_rad = math.radians(self.yaw)
        pitch_rad = math.radians(self.pitch)
        offset = np.array([
            math.cos(pitch_rad) * math.sin(yaw_rad),
            math.sin(pitch_rad),
            math.cos(pitch_rad) * math.cos(yaw_rad),
        ], dtype=np.float32)
        return self.target + offset * self.distance

    def get_forward(self) -> np.ndarray:
        """Unit vector from the camera toward the target."""
        forward = self.target - self.get_position()
        return forward / np.linalg.norm(forward)

    def _basis(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """(forward, right, up) unit vectors of the camera."""
        forward = self.get_forward()
        world_up = np.array([0.0, 1.0, 0.0], dtype=np.float32)
        right = np.cross(forward, world_up)
        right = right / np.linalg.norm(right)
        up = np.cross(right, forward)
        return forward, right, up

    def get_view_matrix(self) -> np.ndarray:
        """Calculate the view matrix (row-major, column vectors)."""
        eye = self.get_position()
        forward, right, up = self._basis()

        view = np.eye(4, dtype=np.float32)
        view[0, :3] = right
        view[1, :3] = up
        view[2, :3] = -forward
        view[0, 3] = -np.dot(right, eye)
        view[1, 3] = -np.dot(up, eye)
        view[2, 3] = np.dot(forward, eye)
        return view

    def get_projection_matrix(self) -> np.ndarray:
        """Calculate the perspective projection matrix."""
        f = 1.0 / math.tan(math.radians(self.fov) / 2.0)
        nf = 1.0 / (self.near - self.far)

        proj = np.zeros((4, 4), dtype=np.float32)
        proj[0, 0] = f / self.aspect
        proj[1, 1] = f
        proj[2, 2] = (self.far + self.near) * nf
        proj[2, 3] = 2.0 * self.far * self.near * nf
        proj[3, 2] = -1.0
        return proj

    def rotate(self, delta_x: float, delta_y: float):
        """Orbit around the target."""
        self.yaw = (self.yaw - delta_x * self.rotate_sensitivity) % 360.0
        self.pitch += delta_y * self.rotate_sensitivity
        self.pitch = max(self.min_pitch, min(self.max_pitch, self.pitch))

    def pan(self, delta_x: float, delta_y: float):
        """Move the target in the view plane."""
        _, right, up = self._basis()
        scale = self.distance * self.pan_sensitivity
        self.target = (self.target - right * delta_x * scale + up * delta_y * scale).astype(np.float32)

    def zoom(self, delta: float):
        """Move toward (negative delta) or away from the target."""
        self.distance = max(self.min_distance, self.distance * (1.0 + delta))

    def fit_to_bounds(self, min_pt: Tuple[float, float, float],
                      max_pt: Tuple[float, float, float]):
        """Aim at the centre of a bounding box and back off until it fits."""
        min_arr = np.array(min_pt, dtype=np.float32)
        max_arr = np.array(max_pt, dtype=np.float32)
        self.target = (min_arr + max_arr) / 2.0

        radius = float(np.linalg.norm(max_arr - min_arr)) / 2.0
        fov_rad = math.radians(self.fov)
        self.distance = max(self.min_distance, radius / math.sin(fov_rad / 2.0) * 1.2)

    def set_preset_view(self, preset: str):
        """Set the orbit angles to a named viewpoint."""
        presets = {
            # (yaw, pitch)
            'front': (0.0, 0.0),
            'back': (180.0, 0.0),
            'left': (-90.0, 0.0),
            'right': (90.0, 0.0),
            'top': (0.0, 89.0),
            'iso': (30.0, 25.0),
        }
        if preset in presets:
            self.yaw, self.pitch = presets[preset]

    def set_aspect(self, width: int, height: int):
        """Update aspect ratio for projection matrix."""
        if height > 0:
            self.aspect = width / height

    def screen_ray(self, px: float, py: float, width: int, height: int) -> Tuple[np.ndarray, np.ndarray]:
        """Ray through a widget pixel, for picking.

        Args:
            px, py: Pixel position, origin top-left
            width, height: Widget size in pixels

        Returns:
            (origin, unit direction) in world space
        """
        ndc_x = 2.0 * px / max(width, 1) - 1.0
        ndc_y = 1.0 - 2.0 * py / max(height, 1)
        tan_half = math.tan(math.radians(self.fov) / 2.0)

        forward, right, up = self._basis()
        direction = forward + right * ndc_x * tan_half * self.aspect + up * ndc_y * tan_half
        return self.get_position(), direction / np.linalg.norm(direction)
