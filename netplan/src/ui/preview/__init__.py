"""
Preview module for 3D visualization of solved floor plans.

Camera, mesh building and picking are plain numpy. The Qt/OpenGL widget is
in preview_widget and is imported explicitly.
"""

from .camera import OrbitCamera
from .mesh_builder import (
    Marker, MeshBuilder, RenderMesh, build_marker_mesh, build_room_wireframe,
    marker_for_entry, pick_marker, scene_bounds, symbol_color,
)

__all__ = [
    'OrbitCamera', 'Marker', 'MeshBuilder', 'RenderMesh', 'build_marker_mesh',
    'build_room_wireframe', 'marker_for_entry', 'pick_marker', 'scene_bounds',
    'symbol_color',
]
