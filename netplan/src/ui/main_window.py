"""
Main application window for the floor plan viewer.

Shows the solved rooms in a 3D preview, the description of the hovered
symbol above it, and room statistics in the status bar.
"""

import logging
from typing import Dict, List, Optional

from PyQt5.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QLabel
from PyQt5.QtCore import Qt

from netplan.src.layout.room_types import Room
from netplan.src.ui import style_constants as sc
from netplan.src.ui.hover import HoverState
from netplan.src.ui.preview.preview_widget import PreviewWidget
from netplan.src.ui.viewer_settings import ViewerSettings

logger = logging.getLogger(__name__)


class FloorPlanWindow(QMainWindow):
    """Window that displays one solved floor plan."""

    def __init__(self, rooms: List[Room], descriptions: Dict[str, str],
                 unplaced_room_ids: Optional[List[int]] = None,
                 settings: Optional[ViewerSettings] = None):
        super().__init__()
        self.settings = settings or ViewerSettings()
        self.hover = HoverState(descriptions)
        self._rooms = rooms
        self._unplaced = list(unplaced_room_ids or [])

        self.setWindowTitle(self.settings.window_title)
        self.resize(self.settings.window_width, self.settings.window_height)

        self._setup_ui()
        self._preview.set_rooms(rooms)
        self._show_room_status()

    def _setup_ui(self):
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(sc.SPACING_SM, sc.SPACING_SM, sc.SPACING_SM, sc.SPACING_SM)
        layout.setSpacing(sc.SPACING_XS)

        self._description_label = QLabel(self.hover.text)
        self._description_label.setWordWrap(True)
        self._description_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self._description_label.setStyleSheet(
            f"QLabel {{ background: {sc.BG_DARKEST}; color: {sc.TEXT_PRIMARY}; "
            f"font-size: {sc.FONT_SIZE_LG}; padding: 6px; "
            f"border: 1px solid {sc.BORDER_DARK}; border-radius: {sc.BORDER_RADIUS_MD}; }}"
        )
        layout.addWidget(self._description_label)

        self._preview = PreviewWidget(self.settings)
        self._preview.symbol_hovered.connect(self._on_symbol_hovered)
        layout.addWidget(self._preview, stretch=1)

        self.setCentralWidget(central)

    def _on_symbol_hovered(self, symbol: str):
        if symbol:
            text = self.hover.hover(symbol)
        else:
            text = self.hover.leave()
        self._description_label.setText(text)

    def _show_room_status(self):
        if self._unplaced:
            names = ", ".join(self._rooms[i].name for i in self._unplaced)
            self.statusBar().setStyleSheet(f"QStatusBar {{ color: {sc.WARNING_COLOR}; }}")
            self.statusBar().showMessage(
                f"{len(self._rooms)} rooms - {len(self._unplaced)} not connected: {names}"
            )
            logger.warning("Rooms left at the origin: %s", names)
        else:
            self.statusBar().setStyleSheet(
                f"QStatusBar {{ font-size: {sc.FONT_SIZE_SM}; color: {sc.TEXT_TERTIARY}; }}"
            )
            self.statusBar().showMessage(
                f"{len(self._rooms)} rooms - Left-drag to orbit, middle-drag to pan, scroll to zoom, F to fit"
            )

    def closeEvent(self, event):
        self._preview.cleanup()
        super().closeEvent(event)
