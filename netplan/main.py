#!/usr/bin/env python3
"""
Floor Plan Viewer - Main Application Entry Point

Reads a markdown document of unfolded room nets, lays the rooms out and
opens the interactive 3D viewer.

Usage:
    netplan <file.md>
"""

import sys
import os
import logging
from typing import List, Optional

from netplan.src.document.errors import NetplanError, UsageError
from netplan.src.pipeline.floorplan_pipeline import FloorPlanPipeline, PipelineResult

logger = logging.getLogger("netplan")

USAGE = "Usage: netplan <file.md>"


def parse_args(argv: List[str]) -> str:
    """Return the document path from the command line arguments.

    Raises:
        UsageError: Unless there is exactly one argument ending in .md
    """
    if len(argv) != 1:
        raise UsageError(f"Expected exactly one argument, got {len(argv)}. {USAGE}")
    path = argv[0]
    if not path.endswith(".md"):
        raise UsageError(f"Expected a .md file, got '{path}'. {USAGE}")
    return path


def configure_logging():
    """Configure root logging from NETPLAN_LOG_LEVEL (default WARNING)."""
    level_name = os.environ.get("NETPLAN_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_plan(path: str) -> PipelineResult:
    """Run the pipeline on a document file."""
    return FloorPlanPipeline().run_file(path)


def run_viewer(result: PipelineResult) -> int:
    """Show the solved plan and run the Qt event loop."""
    # Set Qt environment variables before importing Qt modules.
    os.environ.setdefault('QT_MAC_WANTS_LAYER', '1')

    from PyQt5.QtWidgets import QApplication
    from PyQt5.QtGui import QPalette, QColor
    from PyQt5.QtCore import Qt

    app = QApplication(sys.argv[:1])

    # Set application metadata
    app.setApplicationName("Floor Plan Viewer")
    app.setApplicationDisplayName("Floor Plan Viewer")

    # Set application style
    app.setStyle("Fusion")

    dark_palette = QPalette()
    dark_palette.setColor(QPalette.Window, QColor(43, 43, 43))
    dark_palette.setColor(QPalette.WindowText, Qt.white)
    dark_palette.setColor(QPalette.Base, QColor(35, 35, 35))
    dark_palette.setColor(QPalette.AlternateBase, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ToolTipBase, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ToolTipText, QColor(224, 224, 224))
    dark_palette.setColor(QPalette.Text, Qt.white)
    dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ButtonText, Qt.white)
    dark_palette.setColor(QPalette.Highlight, QColor(76, 175, 80))
    dark_palette.setColor(QPalette.HighlightedText, Qt.black)
    app.setPalette(dark_palette)

    from netplan.src.ui.main_window import FloorPlanWindow
    window = FloorPlanWindow(
        result.rooms,
        result.descriptions,
        unplaced_room_ids=result.unplaced_room_ids,
    )
    window.show()

    return app.exec_()


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    if argv is None:
        argv = sys.argv[1:]

    configure_logging()

    try:
        path = parse_args(argv)
        result = load_plan(path)
    except NetplanError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info("Loaded %d rooms from %s", result.room_count, path)
    return run_viewer(result)


if __name__ == "__main__":
    sys.exit(main())
