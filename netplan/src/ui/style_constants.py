"""
Style constants for the floor plan viewer.

Dark theme colors shared by the window, status line and preview toolbar.
"""

# Action and state colors
WARNING_COLOR = "#FF9800"         # Orange - unplaced rooms
FOCUS_COLOR = "#64B5F6"           # Light blue - keyboard focus rings

# Backgrounds
BG_DARKEST = "#1e1e1e"            # Status line
BG_DARK = "#2d2d2d"               # Standard dark background
BG_MEDIUM = "#353535"             # Buttons
BG_LIGHTER = "#444444"            # Button hover

# Text
TEXT_PRIMARY = "#e0e0e0"          # Main text
TEXT_TERTIARY = "#a0a0a0"         # Muted text
TEXT_WARNING = "#ffff88"          # Yellow for warnings

# Borders
BORDER_DARK = "#444444"
BORDER_MEDIUM = "#555555"

# Font sizes
FONT_SIZE_SM = "11pt"             # Standard body text
FONT_SIZE_LG = "13pt"             # Description line

# Spacing
SPACING_XS = 4
SPACING_SM = 8

BORDER_RADIUS_MD = "4px"


def toolbar_button_style() -> str:
    """Stylesheet for preview toolbar buttons."""
    return f"""
        QPushButton {{
            padding: 4px 10px;
            border: 1px solid {BORDER_MEDIUM};
            border-radius: {BORDER_RADIUS_MD};
            background: {BG_MEDIUM};
            color: {TEXT_PRIMARY};
            font-size: {FONT_SIZE_SM};
        }}
        QPushButton:hover {{
            background: {BG_LIGHTER};
        }}
        QPushButton:focus {{
            outline: 2px solid {FOCUS_COLOR};
            outline-offset: 2px;
        }}
    """
