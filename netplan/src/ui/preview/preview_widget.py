"""
QOpenGLWidget-based preview for the solved floor plan.

Integrates orbit camera, mesh building, marker picking and OpenGL rendering.
"""

from typing import List, Optional
from PyQt5.QtWidgets import QOpenGLWidget, QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QSurfaceFormat, QMouseEvent, QWheelEvent, QKeyEvent

from .camera import OrbitCamera
from .renderer import PreviewRenderer
from .mesh_builder import (
    Marker, MeshBuilder, RenderMesh, build_marker_mesh, build_room_wireframe,
    pick_marker, scene_bounds,
)

from netplan.src.layout.room_types import Room
from netplan.src.ui import style_constants as sc
from netplan.src.ui.viewer_settings import ViewerSettings


import sys as _sys
DEBUG_PREVIEW = False  # Set to True to enable debug output

def _debug(msg):
    if DEBUG_PREVIEW:
        print(f"[PREVIEW] {msg}")
        _sys.stdout.flush()


class GLWidget(QOpenGLWidget):
    """Core OpenGL widget for 3D rendering and hover picking."""

    # Emitted with the symbol under the pointer, or "" when it leaves all markers
    symbol_hovered = pyqtSignal(str)

    def __init__(self, settings: Optional[ViewerSettings] = None, parent=None):
        _debug("GLWidget.__init__ starting")
        fmt = QSurfaceFormat()
        fmt.setDepthBufferSize(24)
        fmt.setStencilBufferSize(8)
        fmt.setSwapBehavior(QSurfaceFormat.DoubleBuffer)
        QSurfaceFormat.setDefaultFormat(fmt)

        super().__init__(parent)
        self.setFormat(fmt)

        self.settings = settings or ViewerSettings()
        self.camera = OrbitCamera()
        self.renderer = PreviewRenderer()
        self.renderer.background_color = self.settings.background_color
        self.renderer.wireframe_color = self.settings.room_line_color

        self._rooms: List[Room] = []
        self._markers: List[Marker] = []
        self._highlight: Optional[str] = None
        self._initialized = False

        # Mouse tracking
        self._last_mouse_pos = None
        self._mouse_button = None

        self.setFocusPolicy(Qt.StrongFocus)
        self.setMouseTracking(True)

        _debug("GLWidget.__init__ complete")

    @property
    def markers(self) -> List[Marker]:
        return self._markers

    def initializeGL(self):
        """Initialize OpenGL resources."""
        _debug("initializeGL called")
        if self.renderer.initialize():
            self._initialized = True
            # Upload rooms that arrived before GL was ready
            self._upload()
        else:
            _debug("WARNING: Renderer initialization returned False")

    def resizeGL(self, w: int, h: int):
        """Handle widget resize."""
        _debug(f"resizeGL: {w}x{h}")
        from OpenGL.GL import glViewport
        glViewport(0, 0, w, h)
        self.camera.set_aspect(w, h)

    def paintGL(self):
        """Render the scene."""
        if not self._initialized:
            return
        view = self.camera.get_view_matrix()
        proj = self.camera.get_projection_matrix()
        cam_pos = self.camera.get_position()
        self.renderer.render(view, proj, cam_pos)

    def set_rooms(self, rooms: List[Room]):
        """Replace the displayed rooms and fit the camera to them."""
        self._rooms = list(rooms)
        self._markers = MeshBuilder(self.settings).collect_markers(self._rooms)
        self._highlight = None
        _debug(f"set_rooms: {len(self._rooms)} rooms, {len(self._markers)} markers")

        if self._initialized:
            self.makeCurrent()
            self._upload()
            self.doneCurrent()
        self.fit_to_bounds()

    def set_highlight(self, symbol: Optional[str]):
        """Lighten every marker of one symbol (None clears)."""
        if symbol == self._highlight:
            return
        self._highlight = symbol
        if self._initialized:
            self.makeCurrent()
            self.renderer.upload_marker_mesh(self._marker_mesh())
            self.doneCurrent()
        self.update()

    def _marker_mesh(self) -> RenderMesh:
        return build_marker_mesh(self._markers, self._highlight, self.settings)

    def _upload(self):
        if not self._initialized:
            return
        self.renderer.upload_marker_mesh(self._marker_mesh())
        vertices, indices = build_room_wireframe(self._rooms)
        self.renderer.upload_wireframe_mesh(vertices, indices)

    def fit_to_bounds(self):
        """Fit camera to the bounds of all rooms."""
        if not self._rooms:
            return
        bounds_min, bounds_max = scene_bounds(self._rooms)
        _debug(f"fit_to_bounds: min={bounds_min} max={bounds_max}")
        self.camera.fit_to_bounds(bounds_min, bounds_max)
        self.update()

    def set_preset_view(self, preset: str):
        """Set camera to a preset view."""
        self.camera.set_preset_view(preset)
        self.update()

    def marker_at(self, x: float, y: float) -> Optional[Marker]:
        """Marker under a widget pixel, if any."""
        origin, direction = self.camera.screen_ray(x, y, self.width(), self.height())
        return pick_marker(origin, direction, self._markers)

    # --- Mouse input ---

    def mousePressEvent(self, event: QMouseEvent):
        self._last_mouse_pos = event.pos()
        # Treat Alt/Option+Left as middle-button (for trackpad users)
        if event.button() == Qt.LeftButton and event.modifiers() & Qt.AltModifier:
            self._mouse_button = Qt.MiddleButton
        else:
            self._mouse_button = event.button()
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent):
        self._last_mouse_pos = None
        self._mouse_button = None
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent):
        if self._last_mouse_pos is None:
            self._update_hover(event.x(), event.y())
            event.accept()
            return

        dx = event.x() - self._last_mouse_pos.x()
        dy = event.y() - self._last_mouse_pos.y()
        self._last_mouse_pos = event.pos()

        if self._mouse_button == Qt.LeftButton:
            self.camera.rotate(dx, dy)
        elif self._mouse_button in (Qt.MiddleButton, Qt.RightButton):
            self.camera.pan(dx, dy)

        self.update()
        event.accept()

    def leaveEvent(self, event):
        self._update_hover(None, None)
        super().leaveEvent(event)

    def _update_hover(self, x: Optional[float], y: Optional[float]):
        marker = self.marker_at(x, y) if x is not None else None
        symbol = marker.symbol if marker else None
        if symbol != self._highlight:
            self.set_highlight(symbol)
            self.symbol_hovered.emit(symbol or "")

    def wheelEvent(self, event: QWheelEvent):
        # Ignore wheel events while panning
        if self._mouse_button == Qt.MiddleButton:
            event.accept()
            return

        delta = event.angleDelta().y()

        # Ignore tiny deltas (trackpad noise)
        if abs(delta) < 10:
            event.accept()
            return

        self.camera.zoom(-delta * 0.0005)
        self.update()
        event.accept()

    # --- Keyboard input ---

    def keyPressEvent(self, event: QKeyEvent):
        key = event.key()

        if key == Qt.Key_1:
            self.set_preset_view('front')
        elif key == Qt.Key_2:
            self.set_preset_view('back')
        elif key == Qt.Key_3:
            self.set_preset_view('left')
        elif key == Qt.Key_4:
            self.set_preset_view('right')
        elif key == Qt.Key_5:
            self.set_preset_view('top')
        elif key == Qt.Key_6:
            self.set_preset_view('iso')
        elif key == Qt.Key_F:
            self.fit_to_bounds()
        else:
            super().keyPressEvent(event)
            return

        self.update()
        event.accept()

    def cleanup(self):
        """Clean up OpenGL resources."""
        self.makeCurrent()
        self.renderer.cleanup()
        self.doneCurrent()


class PreviewWidget(QWidget):
    """Complete preview widget with toolbar and GL canvas."""

    # Forwarded from the GL canvas
    symbol_hovered = pyqtSignal(str)

    def __init__(self, settings: Optional[ViewerSettings] = None, parent=None):
        super().__init__(parent)
        self.settings = settings or ViewerSettings()
        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(sc.SPACING_XS)

        # GL canvas
        self._gl_widget = GLWidget(self.settings)
        self._gl_widget.symbol_hovered.connect(self.symbol_hovered)
        layout.addWidget(self._gl_widget, stretch=1)

        # Toolbar
        toolbar = QHBoxLayout()
        toolbar.setContentsMargins(4, 4, 4, 4)

        for label, preset in (("Front", 'front'), ("Top", 'top'), ("Iso", 'iso')):
            btn = QPushButton(label)
            btn.clicked.connect(lambda _checked=False, p=preset: self._gl_widget.set_preset_view(p))
            btn.setStyleSheet(sc.toolbar_button_style())
            toolbar.addWidget(btn)

        toolbar.addStretch()

        # Fit button
        fit_btn = QPushButton("Fit (F)")
        fit_btn.clicked.connect(self._gl_widget.fit_to_bounds)
        fit_btn.setToolTip("Fit all rooms in view (F)")
        fit_btn.setStyleSheet(sc.toolbar_button_style())
        toolbar.addWidget(fit_btn)

        # Stats label
        self._stats_label = QLabel("")
        self._stats_label.setStyleSheet(f"color: {sc.TEXT_TERTIARY}; font-size: {sc.FONT_SIZE_SM};")
        toolbar.addWidget(self._stats_label)

        layout.addLayout(toolbar)

    def set_rooms(self, rooms: List[Room]):
        """Show a solved room list."""
        self._gl_widget.set_rooms(rooms)
        self._stats_label.setText(
            f"{len(rooms)} rooms | {len(self._gl_widget.markers)} objects"
        )

    def fit_to_bounds(self):
        """Fit camera to all rooms."""
        self._gl_widget.fit_to_bounds()

    def cleanup(self):
        """Clean up resources."""
        self._gl_widget.cleanup()
