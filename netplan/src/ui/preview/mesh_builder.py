"""
Mesh builder for converting solved rooms to renderable geometry.

Each room becomes a wireframe box. Each placed symbol becomes a small colored
box (a marker) lying flat against the inside of its face, one cell wide.
"""

from __future__ import annotations

import colorsys
import numpy as np
from typing import List, Tuple, Optional, Sequence
from dataclasses import dataclass

from netplan.src.layout.room_types import Face, Room, NET_FACE_ORDER
from netplan.src.ui.viewer_settings import ViewerSettings

Vec3 = Tuple[float, float, float]

# Unit vector pointing from each face into the room
_INWARD = {
    Face.TOP: (0.0, -1.0, 0.0),
    Face.FLOOR: (0.0, 1.0, 0.0),
    Face.BACK: (0.0, 0.0, 1.0),
    Face.FRONT: (0.0, 0.0, -1.0),
    Face.RIGHT: (-1.0, 0.0, 0.0),
    Face.LEFT: (1.0, 0.0, 0.0),
}

# Box corner order used for both markers and room outlines
_BOX_CORNERS = [
    (-1, -1, -1), (1, -1, -1), (1, 1, -1), (-1, 1, -1),
    (-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1),
]

_BOX_EDGES = [
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
]

# (outward normal, four corner indices counter-clockwise seen from outside)
_BOX_QUADS = [
    ((0.0, 0.0, -1.0), (0, 3, 2, 1)),
    ((0.0, 0.0, 1.0), (4, 5, 6, 7)),
    ((-1.0, 0.0, 0.0), (0, 4, 7, 3)),
    ((1.0, 0.0, 0.0), (1, 2, 6, 5)),
    ((0.0, -1.0, 0.0), (0, 1, 5, 4)),
    ((0.0, 1.0, 0.0), (3, 7, 6, 2)),
]


def symbol_color(symbol: str, lightness: float = 0.5,
                 saturation: float = 1.0) -> Tuple[float, float, float]:
    """Deterministic marker color for a symbol.

    The hue is (code point * 10007) mod 360 degrees, so each character keeps
    its color across rooms and runs.
    """
    hue = (ord(symbol) * 10007) % 360
    return colorsys.hls_to_rgb(hue / 360.0, lightness, saturation)


@dataclass
class Marker:
    """A placed symbol as an axis-aligned box in world space."""
    symbol: str
    room_id: int
    face: Face
    center: Vec3
    half_extents: Vec3

    @property
    def bounds_min(self) -> Vec3:
        return tuple(c - h for c, h in zip(self.center, self.half_extents))

    @property
    def bounds_max(self) -> Vec3:
        return tuple(c + h for c, h in zip(self.center, self.half_extents))


@dataclass
class RenderMesh:
    """Renderable triangle mesh data for OpenGL."""
    # Vertex data: position (3) + normal (3) + color (3) = 9 floats per vertex
    vertices: np.ndarray  # Shape: (N, 9), dtype=float32
    # Triangle indices
    indices: np.ndarray   # Shape: (M, 3), dtype=uint32
    # Bounding box
    bounds_min: Tuple[float, float, float]
    bounds_max: Tuple[float, float, float]

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices)

    @property
    def is_empty(self) -> bool:
        return len(self.vertices) == 0


def marker_for_entry(room: Room, face: Face, column: int, row: int,
                     symbol: str, thickness: float = 0.2) -> Marker:
    """Build the marker for one face entry of a positioned room."""
    cell = room.cell_center(face, column, row)
    inward = _INWARD[face]
    inset = thickness / 2.0
    center = tuple(
        p + c + n * inset for p, c, n in zip(room.position, cell, inward)
    )
    half_extents = [0.5, 0.5, 0.5]
    half_extents[face.normal_axis] = thickness / 2.0
    return Marker(symbol, room.room_id, face, center, tuple(half_extents))


def pick_marker(origin: Sequence[float], direction: Sequence[float],
                markers: List[Marker]) -> Optional[Marker]:
    """Find the nearest marker hit by a ray.

    Uses the slab test against each marker's box.

    Args:
        origin: Ray origin in world space
        direction: Ray direction (need not be normalized)
        markers: Candidate markers

    Returns:
        The marker with the smallest non-negative hit distance, or None
    """
    best: Optional[Marker] = None
    best_t = float('inf')

    for marker in markers:
        t_near = -float('inf')
        t_far = float('inf')
        hit = True
        for o, d, lo, hi in zip(origin, direction, marker.bounds_min, marker.bounds_max):
            if abs(d) < 1e-12:
                if o < lo or o > hi:
                    hit = False
                    break
                continue
            t1 = (lo - o) / d
            t2 = (hi - o) / d
            if t1 > t2:
                t1, t2 = t2, t1
            t_near = max(t_near, t1)
            t_far = min(t_far, t2)
            if t_near > t_far:
                hit = False
                break
        if not hit or t_far < 0:
            continue

        t = t_near if t_near >= 0 else t_far
        if t < best_t:
            best_t = t
            best = marker

    return best


def scene_bounds(rooms: List[Room]) -> Tuple[Vec3, Vec3]:
    """Axis-aligned bounds of all rooms in world space."""
    if not rooms:
        return (0.0, 0.0, 0.0), (0.0, 0.0, 0.0)

    lows = []
    highs = []
    for room in rooms:
        half = [e / 2.0 for e in room.extents]
        lows.append([p - h for p, h in zip(room.position, half)])
        highs.append([p + h for p, h in zip(room.position, half)])

    bounds_min = np.min(np.array(lows, dtype=np.float32), axis=0)
    bounds_max = np.max(np.array(highs, dtype=np.float32), axis=0)
    return tuple(float(v) for v in bounds_min), tuple(float(v) for v in bounds_max)


class MeshBuilder:
    """Converts solved rooms to marker and outline geometry."""

    def __init__(self, settings: Optional[ViewerSettings] = None):
        self.settings = settings or ViewerSettings()
        self._vertices: List[List[float]] = []
        self._indices: List[List[int]] = []
        self._bounds_min: Optional[List[float]] = None
        self._bounds_max: Optional[List[float]] = None

    def clear(self):
        """Clear all mesh data."""
        self._vertices.clear()
        self._indices.clear()
        self._bounds_min = None
        self._bounds_max = None

    def collect_markers(self, rooms: List[Room]) -> List[Marker]:
        """One marker per face entry, in room and net face order."""
        markers = []
        for room in rooms:
            for face in NET_FACE_ORDER:
                for entry in room.entries(face):
                    markers.append(marker_for_entry(
                        room, face, entry.column, entry.row, entry.symbol,
                        self.settings.marker_thickness,
                    ))
        return markers

    def marker_color(self, symbol: str, highlighted: bool = False) -> Tuple[float, float, float]:
        lightness = self.settings.highlight_lightness if highlighted else self.settings.base_lightness
        return symbol_color(symbol, lightness, self.settings.saturation)

    def add_markers(self, markers: List[Marker], highlight: Optional[str] = None):
        """Add marker boxes; markers of the highlight symbol are lightened."""
        for marker in markers:
            color = self.marker_color(marker.symbol, marker.symbol == highlight)
            self._add_box(marker.center, marker.half_extents, color)

    def _add_box(self, center: Vec3, half_extents: Vec3, color: Tuple[float, float, float]):
        corners = [
            tuple(c + s * h for c, s, h in zip(center, signs, half_extents))
            for signs in _BOX_CORNERS
        ]
        for normal, quad in _BOX_QUADS:
            first_idx = len(self._vertices)
            for corner_idx in quad:
                v = corners[corner_idx]
                self._update_bounds(v)
                # Position + Normal + Color (9 floats)
                self._vertices.append([
                    v[0], v[1], v[2],
                    normal[0], normal[1], normal[2],
                    color[0], color[1], color[2],
                ])
            self._indices.append([first_idx, first_idx + 1, first_idx + 2])
            self._indices.append([first_idx, first_idx + 2, first_idx + 3])

    def _update_bounds(self, v: Vec3):
        """Update bounding box with new vertex."""
        if self._bounds_min is None:
            self._bounds_min = [v[0], v[1], v[2]]
            self._bounds_max = [v[0], v[1], v[2]]
        else:
            for axis in range(3):
                self._bounds_min[axis] = min(self._bounds_min[axis], v[axis])
                self._bounds_max[axis] = max(self._bounds_max[axis], v[axis])

    def build(self) -> RenderMesh:
        """Build the final renderable mesh."""
        if not self._vertices:
            return RenderMesh(
                vertices=np.zeros((0, 9), dtype=np.float32),
                indices=np.zeros((0, 3), dtype=np.uint32),
                bounds_min=(0.0, 0.0, 0.0),
                bounds_max=(0.0, 0.0, 0.0)
            )

        return RenderMesh(
            vertices=np.array(self._vertices, dtype=np.float32),
            indices=np.array(self._indices, dtype=np.uint32),
            bounds_min=tuple(self._bounds_min),
            bounds_max=tuple(self._bounds_max)
        )


def build_marker_mesh(markers: List[Marker], highlight: Optional[str] = None,
                      settings: Optional[ViewerSettings] = None) -> RenderMesh:
    """Convenience function to build the marker mesh in one call."""
    builder = MeshBuilder(settings)
    builder.add_markers(markers, highlight)
    return builder.build()


def build_room_wireframe(rooms: List[Room]) -> Tuple[np.ndarray, np.ndarray]:
    """Build the outline of every room as line segments.

    Returns:
        Tuple of (vertices, indices) where vertices is (N, 3) float32
        and indices is (M, 2) uint32 for line segments
    """
    vertices = []
    indices = []
    for room in rooms:
        half = [e / 2.0 for e in room.extents]
        base = len(vertices)
        for signs in _BOX_CORNERS:
            vertices.append([p + s * h for p, s, h in zip(room.position, signs, half)])
        for a, b in _BOX_EDGES:
            indices.append([base + a, base + b])

    if not vertices:
        return np.zeros((0, 3), dtype=np.float32), np.zeros((0, 2), dtype=np.uint32)
    return np.array(vertices, dtype=np.float32), np.array(indices, dtype=np.uint32)
