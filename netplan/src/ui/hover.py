"""
Hover state for the floor plan viewer.

Tracks which symbol the pointer is over and the text shown for it.
"""

from typing import Dict, Optional

INITIAL_TEXT = "Hover objects to read their descriptions."
NO_DESCRIPTION_TEXT = "No description available."


class HoverState:
    """Maps the hovered symbol to its status text.

    The description map is handed in by the window that owns it.
    """

    def __init__(self, descriptions: Optional[Dict[str, str]] = None):
        self.descriptions: Dict[str, str] = dict(descriptions or {})
        self.symbol: Optional[str] = None
        self.text = INITIAL_TEXT

    def describe(self, symbol: str) -> str:
        return self.descriptions.get(symbol, NO_DESCRIPTION_TEXT)

    def hover(self, symbol: str) -> str:
        """Mark a symbol as hovered and return its status text."""
        self.symbol = symbol
        self.text = self.describe(symbol)
        return self.text

    def leave(self) -> str:
        """Clear the hovered symbol; the last text stays on screen."""
        self.symbol = None
        return self.text

    @property
    def highlighted(self) -> Optional[str]:
        return self.symbol
