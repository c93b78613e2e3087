"""
Viewer settings for the floor plan window.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class ViewerSettings:
    """Configuration for the floor plan viewer."""
    window_width: int = 1920
    window_height: int = 500
    window_title: str = "Floor Plan"

    # Markers are one cell wide and sit flush inside their face
    marker_thickness: float = 0.2
    base_lightness: float = 0.5
    highlight_lightness: float = 0.8
    saturation: float = 1.0

    background_color: Tuple[float, float, float, float] = (0.75, 0.75, 0.75, 1.0)
    room_line_color: Tuple[float, float, float] = (0.0, 0.0, 0.0)
