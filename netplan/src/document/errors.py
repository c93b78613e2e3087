"""
Exception types raised while reading and parsing floor plan documents.

All errors derive from NetplanError so callers can catch the whole family:
- UsageError: the command line was wrong
- DocumentReadError: the document could not be read
- NetFormatError: a room net breaks a structural rule
"""

from typing import Optional


class NetplanError(Exception):
    """Base class for all netplan errors."""


class UsageError(NetplanError):
    """Raised when the command line arguments are invalid."""


class DocumentReadError(NetplanError, OSError):
    """Raised when the document file cannot be read.

    Attributes:
        path: Path that failed to load
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read file '{path}': {reason}")


class NetFormatError(NetplanError):
    """Raised when a room net is malformed.

    Attributes:
        message: Description of the broken rule
        room: Heading of the room section, if known
        line: 1-based line number in the document, if known
        column: 1-based column in that line, if known
    """

    def __init__(self, message: str, room: Optional[str] = None,
                 line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.room = room
        self.line = line
        self.column = column
        super().__init__(self.format())

    def format(self) -> str:
        """Format the error with its location prefix.

        Returns:
            String like "room 'Kitchen' line 12 col 4: message"
        """
        parts = []
        if self.room is not None:
            parts.append(f"room '{self.room}'")
        if self.line is not None:
            parts.append(f"line {self.line}")
        if self.column is not None:
            parts.append(f"col {self.column}")
        if not parts:
            return self.message
        return f"{' '.join(parts)}: {self.message}"
