"""
OpenGL renderer for the floor plan preview.

Draws room outlines as lines and markers as lit triangles through the
fixed-function pipeline, with vertex data kept in buffer objects.
"""

import ctypes
import numpy as np
from typing import Optional, Tuple

import sys as _sys
DEBUG_RENDERER = False  # Set to True to enable debug output

def _debug_render(msg):
    if DEBUG_RENDERER:
        print(f"[RENDERER] {msg}")
        _sys.stdout.flush()

try:
    from OpenGL.GL import *
    OPENGL_AVAILABLE = True
    _debug_render("OpenGL import successful")
except ImportError as e:
    OPENGL_AVAILABLE = False
    _debug_render(f"OpenGL import FAILED: {e}")

from .mesh_builder import RenderMesh


class PreviewRenderer:
    """OpenGL renderer for rooms and markers."""

    def __init__(self):
        self._initialized = False

        # VBO/EBO for marker triangles
        self._marker_vbo: Optional[int] = None
        self._marker_ebo: Optional[int] = None
        self._marker_triangle_count = 0

        # VBO/EBO for room outlines
        self._wire_vbo: Optional[int] = None
        self._wire_ebo: Optional[int] = None
        self._wire_line_count = 0

        # Render settings
        self.background_color: Tuple[float, float, float, float] = (0.75, 0.75, 0.75, 1.0)
        self.wireframe_color: Tuple[float, float, float] = (0.0, 0.0, 0.0)
        self.ambient_strength = 0.4

    def initialize(self) -> bool:
        """Initialize OpenGL resources. Call after GL context is current."""
        _debug_render("initialize() called")
        if not OPENGL_AVAILABLE:
            _debug_render("ERROR: OpenGL not available")
            return False

        try:
            version = glGetString(GL_VERSION)
            _debug_render(f"OpenGL version: {version}")

            glEnable(GL_DEPTH_TEST)
            glDepthFunc(GL_LESS)

            self._marker_vbo = glGenBuffers(1)
            self._marker_ebo = glGenBuffers(1)
            self._wire_vbo = glGenBuffers(1)
            self._wire_ebo = glGenBuffers(1)

            self._initialized = True
            return True
        except Exception as e:
            _debug_render(f"initialize() FAILED: {e}")
            return False

    def upload_marker_mesh(self, mesh: RenderMesh):
        """Upload marker triangles to the GPU."""
        _debug_render(f"upload_marker_mesh: {mesh.triangle_count} triangles, {mesh.vertex_count} verts")
        if not self._initialized or mesh.is_empty:
            self._marker_triangle_count = 0
            return

        glBindBuffer(GL_ARRAY_BUFFER, self._marker_vbo)
        glBufferData(GL_ARRAY_BUFFER, mesh.vertices.nbytes, mesh.vertices, GL_STATIC_DRAW)

        glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, self._marker_ebo)
        glBufferData(GL_ELEMENT_ARRAY_BUFFER, mesh.indices.nbytes, mesh.indices, GL_STATIC_DRAW)

        glBindBuffer(GL_ARRAY_BUFFER, 0)
        glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, 0)
        self._marker_triangle_count = mesh.triangle_count

    def upload_wireframe_mesh(self, vertices: np.ndarray, indices: np.ndarray):
        """Upload room outline segments to the GPU."""
        _debug_render(f"upload_wireframe_mesh: {len(indices)} lines")
        if not self._initialized or len(indices) == 0:
            self._wire_line_count = 0
            return

        vertices = np.ascontiguousarray(vertices, dtype=np.float32)
        indices = np.ascontiguousarray(indices, dtype=np.uint32)

        glBindBuffer(GL_ARRAY_BUFFER, self._wire_vbo)
        glBufferData(GL_ARRAY_BUFFER, vertices.nbytes, vertices, GL_STATIC_DRAW)

        glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, self._wire_ebo)
        glBufferData(GL_ELEMENT_ARRAY_BUFFER, indices.nbytes, indices, GL_STATIC_DRAW)

        glBindBuffer(GL_ARRAY_BUFFER, 0)
        glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, 0)
        self._wire_line_count = len(indices)

    def render(self, view_matrix: np.ndarray, projection_matrix: np.ndarray,
               camera_position: np.ndarray):
        """Render the scene."""
        if not self._initialized:
            return

        glClearColor(*self.background_color)
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

        glUseProgram(0)

        # Row-major numpy matrices, column-major GL
        glMatrixMode(GL_PROJECTION)
        glLoadMatrixf(np.ascontiguousarray(projection_matrix.T, dtype=np.float32))
        glMatrixMode(GL_MODELVIEW)
        glLoadMatrixf(np.ascontiguousarray(view_matrix.T, dtype=np.float32))

        self._render_markers(camera_position)
        self._render_wireframe()

    def _render_markers(self, camera_position: np.ndarray):
        """Render marker triangles with per-vertex colors."""
        if self._marker_triangle_count == 0:
            return

        glEnable(GL_LIGHTING)
        glEnable(GL_LIGHT0)
        glEnable(GL_COLOR_MATERIAL)
        glColorMaterial(GL_FRONT_AND_BACK, GL_AMBIENT_AND_DIFFUSE)

        # Headlight at the camera
        glLightfv(GL_LIGHT0, GL_POSITION, [float(camera_position[0]), float(camera_position[1]),
                                           float(camera_position[2]), 1.0])
        glLightfv(GL_LIGHT0, GL_DIFFUSE, [1.0, 1.0, 1.0, 1.0])
        glLightfv(GL_LIGHT0, GL_AMBIENT, [self.ambient_strength, self.ambient_strength,
                                          self.ambient_strength, 1.0])

        glBindBuffer(GL_ARRAY_BUFFER, self._marker_vbo)
        glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, self._marker_ebo)

        # Vertex format: position (3) + normal (3) + color (3) = 9 floats
        stride = 9 * 4
        glEnableClientState(GL_VERTEX_ARRAY)
        glVertexPointer(3, GL_FLOAT, stride, ctypes.c_void_p(0))
        glEnableClientState(GL_NORMAL_ARRAY)
        glNormalPointer(GL_FLOAT, stride, ctypes.c_void_p(3 * 4))
        glEnableClientState(GL_COLOR_ARRAY)
        glColorPointer(3, GL_FLOAT, stride, ctypes.c_void_p(6 * 4))

        glDrawElements(GL_TRIANGLES, self._marker_triangle_count * 3, GL_UNSIGNED_INT, None)

        glDisableClientState(GL_COLOR_ARRAY)
        glDisableClientState(GL_NORMAL_ARRAY)
        glDisableClientState(GL_VERTEX_ARRAY)
        glBindBuffer(GL_ARRAY_BUFFER, 0)
        glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, 0)

        glDisable(GL_COLOR_MATERIAL)
        glDisable(GL_LIGHT0)
        glDisable(GL_LIGHTING)

    def _render_wireframe(self):
        """Render room outlines."""
        if self._wire_line_count == 0:
            return

        glDisable(GL_LIGHTING)
        glColor3f(*self.wireframe_color)

        glBindBuffer(GL_ARRAY_BUFFER, self._wire_vbo)
        glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, self._wire_ebo)

        glEnableClientState(GL_VERTEX_ARRAY)
        glVertexPointer(3, GL_FLOAT, 3 * 4, ctypes.c_void_p(0))
        glDrawElements(GL_LINES, self._wire_line_count * 2, GL_UNSIGNED_INT, None)
        glDisableClientState(GL_VERTEX_ARRAY)

        glBindBuffer(GL_ARRAY_BUFFER, 0)
        glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, 0)

    def cleanup(self):
        """Clean up OpenGL resources."""
        if not self._initialized:
            return

        for buffer in (self._marker_vbo, self._marker_ebo, self._wire_vbo, self._wire_ebo):
            if buffer:
                glDeleteBuffers(1, [buffer])

        self._initialized = False
