"""
Floor plan viewer.

The Qt window lives in main_window and is imported on demand so the hover
and settings helpers can be used without a display.
"""

from .hover import HoverState, INITIAL_TEXT, NO_DESCRIPTION_TEXT
from .viewer_settings import ViewerSettings

__all__ = [
    'HoverState', 'INITIAL_TEXT', 'NO_DESCRIPTION_TEXT', 'ViewerSettings',
]
